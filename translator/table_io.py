# translator/table_io.py

from pathlib import Path

from translator.errors import InvalidModel, MalformedTransitionLine
from translator.transition_model import Direction, ModelTag, OriginalState, Transition

COMMENT_PREFIX = ";"
FIELD_COUNT = 5


def read_lines(file_path):
    with open(file_path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def parse_transition_line(line, line_number=None):
    """Split a transition line into a Transition with raw (unnormalized) state labels."""
    fields = line.split()
    if len(fields) != FIELD_COUNT:
        raise MalformedTransitionLine(line_number, line, f"expected {FIELD_COUNT} fields, got {len(fields)}")
    current_state, read_symbol, write_symbol, direction, next_state = fields
    try:
        direction = Direction(direction)
    except ValueError:
        raise MalformedTransitionLine(line_number, line, f"unknown direction {direction!r}") from None
    return Transition(OriginalState(current_state), read_symbol, write_symbol, direction, OriginalState(next_state))


def parse_input(lines):
    """Return (model tag, transitions) from the lines of a table file.

    Line 1 is the tag. Blank lines and lines starting with ';' are skipped.
    """
    if not lines:
        raise InvalidModel("")
    model = ModelTag.parse(lines[0])

    transitions = []
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip() or line.startswith(COMMENT_PREFIX):
            continue
        transitions.append(parse_transition_line(line, line_number))
    return model, transitions


def process_input(file_path):
    return parse_input(read_lines(file_path))


def format_output(table):
    return "".join(line + "\n" for line in table.lines())


def write_output(file_path, table):
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_output(table))
