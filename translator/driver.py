# translator/driver.py

from typing import NamedTuple

from translator.infinite_tape import convert_to_infinite_tape
from translator.normalizer import normalize_transitions
from translator.sipser_tape import convert_to_sipser_tape
from translator.table_io import parse_input, process_input, write_output
from translator.transition_model import ModelTag, TransitionTable


class TranslationResult(NamedTuple):
    input_model: ModelTag
    table: TransitionTable
    original_count: int
    gadget_count: int
    num_states: int
    num_symbols: int

    def summary(self):
        """Flat dict for the run log."""
        return {
            "input_model": str(self.input_model),
            "output_model": str(self.table.model),
            "original_transitions": self.original_count,
            "gadget_transitions": self.gadget_count,
            "states": self.num_states,
            "symbols": self.num_symbols,
        }


def translate(model, transitions):
    """Translate raw transitions declared under `model` into the other tape model."""
    normalized = normalize_transitions(transitions)

    if model is ModelTag.ONE_WAY:
        additional_transitions = convert_to_infinite_tape(normalized.states)
        output_model = ModelTag.TWO_WAY
    elif model is ModelTag.TWO_WAY:
        additional_transitions = convert_to_sipser_tape(normalized.states, normalized.alphabet)
        output_model = ModelTag.ONE_WAY
    else:
        raise TypeError(f"Expected a ModelTag, got {model!r}")

    table = TransitionTable(output_model, normalized.transitions + tuple(additional_transitions))
    return TranslationResult(
        input_model=model,
        table=table,
        original_count=len(normalized.transitions),
        gadget_count=len(additional_transitions),
        num_states=len(normalized.states),
        num_symbols=len(normalized.alphabet),
    )


def translate_table(table):
    return translate(table.model, table.transitions).table


def translate_lines(lines):
    model, transitions = parse_input(lines)
    return translate(model, transitions)


def translate_file(input_path, output_path):
    """Read, translate and write. Nothing is written if the input is rejected."""
    model, transitions = process_input(input_path)
    result = translate(model, transitions)
    write_output(output_path, result.table)
    return result
