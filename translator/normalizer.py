# translator/normalizer.py

import re
from typing import NamedTuple

from translator.transition_model import OriginalState, compute_alphabet, compute_states

_NUMBERED = re.compile(r"[0-9]+")


class NormalizedTable(NamedTuple):
    transitions: tuple
    states: frozenset
    alphabet: frozenset


def shift_state(state):
    """Renumber a decimal state label n to n + 1, freeing "0" for the entry state.

    Anything else (symbolic labels, gadget states) is returned unchanged.
    """
    if isinstance(state, OriginalState) and _NUMBERED.fullmatch(state.label):
        return OriginalState(str(int(state.label) + 1))
    return state


def normalize_transitions(transitions):
    processed = tuple(
        t._replace(state=shift_state(t.state), next_state=shift_state(t.next_state))
        for t in transitions
    )
    return NormalizedTable(processed, frozenset(compute_states(processed)), frozenset(compute_alphabet(processed)))
