# tools/table_inspect.py

import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from translator import infinite_tape, sipser_tape
from translator.normalizer import normalize_transitions
from translator.table_io import process_input
from translator.transition_model import Direction, GadgetState, ModelTag

console = Console()


def summarize(model, transitions):
    """Describe a table as it would enter the translator (after renumbering)."""
    normalized = normalize_transitions(transitions)
    num_states = len(normalized.states)
    num_symbols = len(normalized.alphabet)
    if model is ModelTag.ONE_WAY:
        predicted = infinite_tape.gadget_count(num_states)
        target = ModelTag.TWO_WAY
    else:
        predicted = sipser_tape.gadget_count(num_states, num_symbols)
        target = ModelTag.ONE_WAY
    return {
        "model": str(model),
        "target_model": str(target),
        "transitions": len(normalized.transitions),
        "states": sorted(str(s) for s in normalized.states),
        "alphabet": sorted(normalized.alphabet),
        "predicted_gadget_transitions": predicted,
    }


def build_transition_table(transitions, title="Transition Table"):
    table = Table(title=title, show_header=True, header_style="bold magenta")
    for column in ("State", "Read", "Write", "Move", "Next"):
        table.add_column(column, justify="center")

    for t in transitions:
        # bookkeeping rows are dimmed so the source machine stands out
        style = "dim" if isinstance(t.state, GadgetState) or isinstance(t.next_state, GadgetState) else None
        table.add_row(escape(str(t.state)), escape(t.read), escape(t.write), "L" if t.direction is Direction.LEFT else "R",
                      escape(str(t.next_state)), style=style)
    return table


def print_summary(summary, out=console):
    out.print(f"[bold cyan]Model:[/bold cyan] {summary['model']} -> {summary['target_model']}")
    out.print(f"  Transitions: {summary['transitions']}")
    out.print(f"  States ({len(summary['states'])}): {escape(' '.join(summary['states']))}")
    out.print(f"  Alphabet ({len(summary['alphabet'])}): {escape(' '.join(summary['alphabet']))}")
    out.print(f"  Gadget transitions on translation: {summary['predicted_gadget_transitions']:,}")


def inspect_file(path, out=console, show_table=True):
    model, transitions = process_input(path)
    summary = summarize(model, transitions)
    if show_table:
        normalized = normalize_transitions(transitions)
        out.print(build_transition_table(normalized.transitions,
                                         title=f"{escape(str(path))} ({len(normalized.states)} states)"))
    print_summary(summary, out)
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Transition Table Inspector")
    parser.add_argument("path", help="Table file to inspect (first line ';S' or ';I')")
    parser.add_argument("--summary-only", action="store_true", help="Skip the transition listing")
    args = parser.parse_args(argv)

    inspect_file(args.path, out=console, show_table=not args.summary_only)

if __name__ == "__main__":
    main()
