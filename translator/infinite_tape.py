# translator/infinite_tape.py
#
# One-way -> two-way tape. A one-way table already runs on a two-way tape; it
# only needs a boundary cell to the left of the input and must step over the
# erasure marks that boundary leaves behind.

from translator.transition_model import (
    BLANK, BOUNDARY_STATE, ENTRY_STATE, ERASED, EXIT_STATE, WILDCARD,
    Direction, Transition, label_key,
)


def convert_to_infinite_tape(states):
    additional_transitions = [
        Transition(ENTRY_STATE, WILDCARD, WILDCARD, Direction.LEFT, BOUNDARY_STATE),
        Transition(BOUNDARY_STATE, BLANK, ERASED, Direction.RIGHT, EXIT_STATE),
    ]
    for state in sorted(states, key=label_key):
        additional_transitions.append(Transition(state, ERASED, ERASED, Direction.RIGHT, state))
    return additional_transitions


def gadget_count(num_states):
    return 2 + num_states
