# translator/transition_model.py

from enum import Enum
from typing import NamedTuple

from translator.errors import InvalidModel

# === Reserved Symbols ===
BLANK = "_"
BOUNDARY = "%"
ERASED = "#"
CURSOR = "|"
WILDCARD = "*"

# Always part of the alphabet, whether or not a transition mentions it.
DEFAULT_SYMBOL = "M"


class Direction(Enum):
    LEFT = "l"
    RIGHT = "r"

    def __str__(self):
        return self.value


class ModelTag(Enum):
    ONE_WAY = ";S"
    TWO_WAY = ";I"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        try:
            return cls(text.rstrip("\r\n"))
        except ValueError:
            raise InvalidModel(text) from None


# === State Labels ===
class OriginalState:
    """A state label taken from the input table (after renumbering)."""

    __slots__ = ("label",)

    def __init__(self, label):
        self.label = label

    def __eq__(self, other):
        return isinstance(other, OriginalState) and other.label == self.label

    def __hash__(self):
        return hash(("original", self.label))

    def __repr__(self):
        return f"OriginalState({self.label!r})"

    def __str__(self):
        return self.label


class GadgetKind(Enum):
    LEFT = "left"
    MARK = "mark"
    BACK = "back"
    SHIFT = "shift"
    RIGHT = "right"
    END = "end"
    INIT = "init"
    FINISH = "finish"
    BOUNDARY_BY_SYMBOL = "boundary_by_symbol"
    SHIFT_BY_PAIR = "shift_by_pair"
    SETTLE = "settle"
    ENTRY = "entry"
    BOUNDARY = "boundary"


# Text layout of each kind; params are state labels or symbols.
_GADGET_FORMATS = {
    GadgetKind.LEFT: "LEFT_{0}",
    GadgetKind.MARK: "MARK_{0}",
    GadgetKind.BACK: "BACK_{0}",
    GadgetKind.SHIFT: "SHIFT_{0}%{1}",
    GadgetKind.RIGHT: "RIGHT_{0}",
    GadgetKind.END: "END_{0}",
    GadgetKind.INIT: "INIT_{0}",
    GadgetKind.FINISH: "FINISH_{0}",
    GadgetKind.BOUNDARY_BY_SYMBOL: "%{0}",
    GadgetKind.SHIFT_BY_PAIR: "SHIFT_{0}${1}",
    GadgetKind.SETTLE: "END_{0}",
    GadgetKind.ENTRY: "0",
    GadgetKind.BOUNDARY: "%",
}


class GadgetState:
    """A bookkeeping state synthesized by one of the gadget compilers."""

    __slots__ = ("kind", "params")

    def __init__(self, kind, *params):
        self.kind = kind
        self.params = tuple(str(p) for p in params)

    def __eq__(self, other):
        return (isinstance(other, GadgetState)
                and other.kind is self.kind and other.params == self.params)

    def __hash__(self):
        return hash(("gadget", self.kind, self.params))

    def __repr__(self):
        args = ", ".join(repr(p) for p in self.params)
        return f"GadgetState({self.kind.name}{', ' if args else ''}{args})"

    def __str__(self):
        return _GADGET_FORMATS[self.kind].format(*self.params)


ENTRY_STATE = GadgetState(GadgetKind.ENTRY)
# The source machine's state 0 after renumbering; control lands here once the
# tape has been prepared.
EXIT_STATE = OriginalState("1")
BOUNDARY_STATE = GadgetState(GadgetKind.BOUNDARY)


def label_key(label):
    """Sort key matching the reference ordering (plain string order)."""
    return str(label)


# === Transitions ===
class Transition(NamedTuple):
    state: object
    read: str
    write: str
    direction: Direction
    next_state: object

    def __str__(self):
        return f"{self.state} {self.read} {self.write} {self.direction} {self.next_state}"


def compute_alphabet(transitions):
    alphabet = {DEFAULT_SYMBOL}
    for t in transitions:
        alphabet.add(t.read)
        alphabet.add(t.write)
    return alphabet


def compute_states(transitions):
    states = set()
    for t in transitions:
        states.add(t.state)
        states.add(t.next_state)
    return states


class TransitionTable:
    __slots__ = ("model", "transitions")

    def __init__(self, model, transitions):
        self.model = model
        self.transitions = tuple(transitions)

    def __len__(self):
        return len(self.transitions)

    def __iter__(self):
        return iter(self.transitions)

    def __eq__(self, other):
        return (isinstance(other, TransitionTable)
                and other.model is self.model and other.transitions == self.transitions)

    def __repr__(self):
        return f"TransitionTable({self.model.name}, {len(self.transitions)} transitions)"

    def states(self):
        return compute_states(self.transitions)

    def alphabet(self):
        return compute_alphabet(self.transitions)

    def lines(self):
        """Serialized form: tag line followed by one line per transition."""
        return [str(self.model)] + [str(t) for t in self.transitions]
