import os
import tempfile
import unittest

from translator.errors import InvalidModel, MalformedTransitionLine
from translator.table_io import format_output, parse_input, parse_transition_line, process_input, write_output
from translator.transition_model import Direction, ModelTag, OriginalState, Transition, TransitionTable


class TestParseTransitionLine(unittest.TestCase):
    def test_fields(self):
        t = parse_transition_line("q0  a\tb l  q1")
        self.assertEqual(t, Transition(OriginalState("q0"), "a", "b", Direction.LEFT, OriginalState("q1")))

    def test_wrong_field_count(self):
        with self.assertRaises(MalformedTransitionLine) as ctx:
            parse_transition_line("0 a b r", 7)
        self.assertEqual(ctx.exception.line_number, 7)
        self.assertIn("expected 5 fields", str(ctx.exception))

    def test_bad_direction(self):
        with self.assertRaises(MalformedTransitionLine) as ctx:
            parse_transition_line("0 a b x 1", 2)
        self.assertIn("direction", ctx.exception.reason)


class TestParseInput(unittest.TestCase):
    def test_skips_comments_and_blank_lines(self):
        model, transitions = parse_input([";I", "; comment", "", "   ", "0 a b r 1", ";0 a a r 1"])
        self.assertIs(model, ModelTag.TWO_WAY)
        self.assertEqual([str(t) for t in transitions], ["0 a b r 1"])

    def test_empty_file_is_invalid_model(self):
        with self.assertRaises(InvalidModel):
            parse_input([])

    def test_line_numbers_count_from_file_start(self):
        with self.assertRaises(MalformedTransitionLine) as ctx:
            parse_input([";S", "; header", "0 a b r 0", "broken"])
        self.assertEqual(ctx.exception.line_number, 4)


class TestFiles(unittest.TestCase):
    def test_write_then_read(self):
        table = TransitionTable(ModelTag.ONE_WAY, [
            Transition(OriginalState("1"), "a", "b", Direction.RIGHT, OriginalState("1")),
        ])
        self.assertEqual(format_output(table), ";S\n1 a b r 1\n")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "out.txt")
            write_output(path, table)
            model, transitions = process_input(path)
        self.assertIs(model, ModelTag.ONE_WAY)
        self.assertEqual(transitions, list(table.transitions))


if __name__ == "__main__":
    unittest.main()
