# translator/sipser_tape.py
#
# Two-way -> one-way (Sipser) tape. The two-way tape is folded at the origin
# into a one-way tape whose left end is the boundary marker '%'. Whenever the
# machine reaches that boundary, every cell up to the cursor '|' is shifted one
# position right, opening a blank cell just inside the boundary.

from translator.transition_model import (
    BLANK, BOUNDARY, CURSOR, ENTRY_STATE, ERASED, EXIT_STATE, WILDCARD,
    Direction, GadgetKind, GadgetState, Transition, label_key,
)

L, R = Direction.LEFT, Direction.RIGHT


# === Per-State Families ===
def add_left_space_transitions(state):
    """Run right from the boundary to the cursor, then turn back over the erased run."""
    left = GadgetState(GadgetKind.LEFT, state)
    mark = GadgetState(GadgetKind.MARK, state)
    back = GadgetState(GadgetKind.BACK, state)
    return [
        Transition(state, BOUNDARY, BOUNDARY, R, left),
        Transition(left, WILDCARD, WILDCARD, R, left),
        Transition(left, CURSOR, ERASED, R, mark),
        Transition(mark, BLANK, CURSOR, L, back),
        Transition(back, ERASED, ERASED, L, back),
    ]


def add_shifting_transitions(state, alphabet):
    """Carry each symbol one cell right, leaving an erasure mark behind it."""
    back = GadgetState(GadgetKind.BACK, state)
    transitions = []
    for symbol in sorted(alphabet):
        shift = GadgetState(GadgetKind.SHIFT, state, symbol)
        transitions.append(Transition(back, symbol, ERASED, R, shift))
        transitions.append(Transition(shift, ERASED, symbol, L, back))
    return transitions


def add_right_space_transitions(state):
    back = GadgetState(GadgetKind.BACK, state)
    right = GadgetState(GadgetKind.RIGHT, state)
    end = GadgetState(GadgetKind.END, state)
    return [
        Transition(back, BOUNDARY, BOUNDARY, R, right),
        Transition(right, ERASED, BLANK, L, right),
        Transition(right, BOUNDARY, BOUNDARY, R, state),
        # re-home the cursor after a completed shift
        Transition(state, CURSOR, BLANK, R, end),
        Transition(end, BLANK, CURSOR, L, state),
    ]


# === Initialization Family ===
def add_initial_and_final_transitions(alphabet):
    """From the entry state, lay the input out behind a boundary and hand over to the exit state.

    Specialized on the first input symbol, hence one sub-machine per symbol
    with a shift gadget for every pair of symbols.
    """
    symbols = sorted(alphabet)
    transitions = []
    for symbol in symbols:
        init = GadgetState(GadgetKind.INIT, symbol)
        finish = GadgetState(GadgetKind.FINISH, symbol)
        boundary = GadgetState(GadgetKind.BOUNDARY_BY_SYMBOL, symbol)
        settle = GadgetState(GadgetKind.SETTLE, symbol)

        transitions.append(Transition(ENTRY_STATE, symbol, BOUNDARY, R, init))
        transitions.append(Transition(init, WILDCARD, WILDCARD, R, init))
        transitions.append(Transition(init, BLANK, ERASED, R, finish))
        transitions.append(Transition(finish, BLANK, CURSOR, L, boundary))
        transitions.append(Transition(boundary, ERASED, ERASED, L, boundary))

        for carried in symbols:
            shift = GadgetState(GadgetKind.SHIFT_BY_PAIR, symbol, carried)
            transitions.append(Transition(boundary, carried, ERASED, R, shift))
            transitions.append(Transition(shift, ERASED, carried, L, boundary))

        transitions.append(Transition(boundary, BOUNDARY, BOUNDARY, R, settle))
        transitions.append(Transition(settle, ERASED, symbol, L, settle))
        transitions.append(Transition(settle, BOUNDARY, BOUNDARY, R, EXIT_STATE))
    return transitions


def convert_to_sipser_tape(states, alphabet):
    additional_transitions = []
    for state in sorted(states, key=label_key):
        additional_transitions.extend(add_left_space_transitions(state))
        additional_transitions.extend(add_shifting_transitions(state, alphabet))
        additional_transitions.extend(add_right_space_transitions(state))
    additional_transitions.extend(add_initial_and_final_transitions(alphabet))
    return additional_transitions


def gadget_count(num_states, num_symbols):
    """Number of transitions convert_to_sipser_tape emits."""
    return num_states * (10 + 2 * num_symbols) + num_symbols * (8 + 2 * num_symbols)
