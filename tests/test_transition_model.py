import unittest

from translator.errors import InvalidModel
from translator.transition_model import (
    DEFAULT_SYMBOL, ENTRY_STATE, EXIT_STATE, BOUNDARY_STATE,
    Direction, GadgetKind, GadgetState, ModelTag, OriginalState, Transition, TransitionTable,
)


class TestStateLabels(unittest.TestCase):
    def test_gadget_rendering(self):
        self.assertEqual(str(GadgetState(GadgetKind.LEFT, "3")), "LEFT_3")
        self.assertEqual(str(GadgetState(GadgetKind.SHIFT, "3", "a")), "SHIFT_3%a")
        self.assertEqual(str(GadgetState(GadgetKind.SHIFT_BY_PAIR, "a", "b")), "SHIFT_a$b")
        self.assertEqual(str(GadgetState(GadgetKind.BOUNDARY_BY_SYMBOL, "a")), "%a")
        self.assertEqual(str(GadgetState(GadgetKind.SETTLE, "a")), "END_a")
        self.assertEqual(str(ENTRY_STATE), "0")
        self.assertEqual(str(BOUNDARY_STATE), "%")
        self.assertEqual(str(EXIT_STATE), "1")

    def test_labels_compare_by_variant(self):
        self.assertEqual(OriginalState("q"), OriginalState("q"))
        self.assertNotEqual(OriginalState("0"), ENTRY_STATE)
        # same text, different kinds
        self.assertEqual(str(GadgetState(GadgetKind.END, "a")), str(GadgetState(GadgetKind.SETTLE, "a")))
        self.assertNotEqual(GadgetState(GadgetKind.END, "a"), GadgetState(GadgetKind.SETTLE, "a"))
        self.assertEqual(len({GadgetState(GadgetKind.BACK, "2"), GadgetState(GadgetKind.BACK, "2")}), 1)


class TestModelTag(unittest.TestCase):
    def test_parse(self):
        self.assertIs(ModelTag.parse(";S"), ModelTag.ONE_WAY)
        self.assertIs(ModelTag.parse(";I\r"), ModelTag.TWO_WAY)

    def test_parse_rejects_unknown(self):
        with self.assertRaises(InvalidModel) as ctx:
            ModelTag.parse(";X")
        self.assertEqual(ctx.exception.tag, ";X")

    def test_parse_is_exact_apart_from_line_ending(self):
        for text in (";S ", " ;I", ";s"):
            with self.assertRaises(InvalidModel):
                ModelTag.parse(text)


class TestTransitionTable(unittest.TestCase):
    def setUp(self):
        self.table = TransitionTable(ModelTag.ONE_WAY, [
            Transition(OriginalState("1"), "a", "b", Direction.RIGHT, OriginalState("2")),
            Transition(OriginalState("2"), "_", "a", Direction.LEFT, OriginalState("1")),
        ])

    def test_lines(self):
        self.assertEqual(self.table.lines(), [";S", "1 a b r 2", "2 _ a l 1"])

    def test_alphabet_includes_default_symbol(self):
        self.assertEqual(self.table.alphabet(), {DEFAULT_SYMBOL, "a", "b", "_"})

    def test_states(self):
        self.assertEqual(self.table.states(), {OriginalState("1"), OriginalState("2")})


if __name__ == "__main__":
    unittest.main()
