import unittest

from translator.normalizer import normalize_transitions, shift_state
from translator.transition_model import Direction, OriginalState, Transition


def t(state, read, write, direction, next_state):
    return Transition(OriginalState(state), read, write, Direction(direction), OriginalState(next_state))


class TestShiftState(unittest.TestCase):
    def test_numeric_labels_shift_up(self):
        self.assertEqual(shift_state(OriginalState("0")), OriginalState("1"))
        self.assertEqual(shift_state(OriginalState("41")), OriginalState("42"))
        self.assertEqual(shift_state(OriginalState("007")), OriginalState("8"))

    def test_other_labels_pass_through(self):
        for label in ("q0", "12abc", "-3", "halt", ""):
            self.assertEqual(shift_state(OriginalState(label)), OriginalState(label))


class TestNormalizeTransitions(unittest.TestCase):
    def test_symbolic_table_is_unchanged(self):
        raw = [t("start", "a", "b", "r", "loop"), t("loop", "b", "_", "l", "start")]
        normalized = normalize_transitions(raw)
        self.assertEqual(list(normalized.transitions), raw)

    def test_every_occurrence_is_shifted(self):
        raw = [t("0", "a", "b", "r", "1"), t("1", "b", "a", "l", "0"), t("1", "_", "_", "r", "q")]
        normalized = normalize_transitions(raw)
        self.assertEqual([str(x) for x in normalized.transitions], ["1 a b r 2", "2 b a l 1", "2 _ _ r q"])
        self.assertEqual(normalized.states, {OriginalState("1"), OriginalState("2"), OriginalState("q")})

    def test_no_numeric_state_becomes_entry(self):
        raw = [t(str(n), "a", "a", "r", str(n + 1)) for n in range(5)]
        labels = {str(s) for s in normalize_transitions(raw).states}
        self.assertNotIn("0", labels)

    def test_alphabet_is_order_independent(self):
        raw = [t("0", "a", "b", "r", "1"), t("1", "c", "_", "l", "0")]
        forward = normalize_transitions(raw).alphabet
        backward = normalize_transitions(list(reversed(raw))).alphabet
        self.assertEqual(forward, backward)
        self.assertEqual(forward, {"M", "a", "b", "c", "_"})

    def test_empty_input(self):
        normalized = normalize_transitions([])
        self.assertEqual(normalized.transitions, ())
        self.assertEqual(normalized.states, frozenset())
        self.assertEqual(normalized.alphabet, {"M"})

    def test_input_is_not_mutated(self):
        raw = [t("0", "a", "b", "r", "0")]
        normalize_transitions(raw)
        self.assertEqual(str(raw[0]), "0 a b r 0")


if __name__ == "__main__":
    unittest.main()
