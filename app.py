# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt, Confirm

from config.config_loader import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH, load_config, save_config
from logger.logger import JSONLogger
from tools.table_inspect import build_transition_table, inspect_file
from translator.driver import translate_file
from translator.errors import InvalidModel, MalformedTransitionLine

console = Console()
error_console = Console(stderr=True)

EXIT_OK = 0
EXIT_INVALID_MODEL = 1
EXIT_MALFORMED_LINE = 2
EXIT_MISSING_INPUT = 3

# === Utilities ===
def load_runtime_config(config_path=DEFAULT_CONFIG_PATH):
    if not Path(config_path).exists():
        console.print(f"[yellow]No config at {escape(str(config_path))}, using defaults.[/yellow]")
        return DEFAULT_CONFIG.copy()
    return load_config(config_path)

def make_logger(config):
    if not config["log_runs"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])

def run_translation(input_path, output_path, config, show=False):
    """Translate one table file and report the outcome. Returns the process exit status."""
    logger = make_logger(config)

    try:
        result = translate_file(input_path, output_path)
    except InvalidModel as e:
        error_console.print(f"[red]Invalid model: {escape(repr(e.tag))} in {escape(str(input_path))}[/red]")
        error, status = e, EXIT_INVALID_MODEL
    except MalformedTransitionLine as e:
        error_console.print(f"[red]Malformed transition in {escape(str(input_path))}: {escape(str(e))}[/red]")
        error, status = e, EXIT_MALFORMED_LINE
    except FileNotFoundError as e:
        error_console.print(f"[red]Input file not found: {escape(str(e.filename))}[/red]")
        error, status = e, EXIT_MISSING_INPUT
    else:
        if logger:
            logger.log_translation(input_path, output_path, result.summary())
        console.print(f"[INFO] {result.input_model} -> {result.table.model}: "
                      f"{result.original_count:,} original + {result.gadget_count:,} gadget transitions "
                      f"written to {escape(str(output_path))}")
        if show:
            console.print(build_transition_table(result.table.transitions, title=escape(str(output_path))))
        return EXIT_OK

    if logger:
        logger.log_rejected(input_path, error)
    return status

def show_main_menu():
    console.print("\n[bold cyan]Tape Model Translator[/bold cyan]")
    console.print("[1] Translate Table")
    console.print("[2] Inspect Table")
    console.print("[3] Edit Config")
    console.print("[4] Exit")

def handle_translate(config):
    console.print("\n[bold]Translate Table[/bold]")
    input_path = Prompt.ask("Input file", default=config["input_file"])
    output_path = Prompt.ask("Output file", default=config["output_file"])
    show = Confirm.ask("Show translated table?", default=False)
    return run_translation(input_path, output_path, config, show=show)

def handle_inspect(config):
    console.print("\n[bold]Inspect Table[/bold]")
    path = Prompt.ask("Table file", default=config["input_file"])
    try:
        inspect_file(path, out=console)
    except (InvalidModel, MalformedTransitionLine) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
    except FileNotFoundError:
        console.print(f"[red]File not found: {escape(str(path))}[/red]")

def handle_edit_config(config, config_path):
    console.print("\n[bold]Edit Configuration[/bold]")

    input_file = Prompt.ask("Input file", default=config["input_file"])
    output_file = Prompt.ask("Output file", default=config["output_file"])
    output_directory = Prompt.ask("Log directory", default=config["output_directory"])
    log_runs = Confirm.ask("Log translation runs?", default=config["log_runs"])

    config.update({
        "input_file": input_file,
        "output_file": output_file,
        "output_directory": output_directory,
        "log_runs": log_runs
    })

    save_config(config, config_path)
    console.print("[green]Configuration updated successfully.[/green]")

def apply_overrides(config, input_path=None, output_path=None, no_log=False):
    """Command-line values take precedence over the loaded config for this session."""
    if input_path:
        config["input_file"] = input_path
    if output_path:
        config["output_file"] = output_path
    if no_log:
        config["log_runs"] = False
    return config

def interactive_main(config_path, **overrides):
    config = apply_overrides(load_runtime_config(config_path), **overrides)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4"], default="4")

        if choice == "1":
            handle_translate(config)
        elif choice == "2":
            handle_inspect(config)
        elif choice == "3":
            # edit the saved config, not this session's overrides
            handle_edit_config(load_runtime_config(config_path), config_path)
            config = apply_overrides(load_runtime_config(config_path), **overrides)
        elif choice == "4":
            console.print("[bold green]Goodbye![/bold green]")
            break

def main(argv=None):
    parser = argparse.ArgumentParser(description="Translate a Turing machine between one-way (;S) and two-way (;I) tapes")
    parser.add_argument("--input", help="Table to translate (default: config input_file)")
    parser.add_argument("--output", help="Where to write the result (default: config output_file)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime config JSON")
    parser.add_argument("--no-log", action="store_true", help="Do not append to the JSONL run log")
    parser.add_argument("--show", action="store_true", help="Print the translated table")
    parser.add_argument("--interactive", action="store_true", help="Open the interactive menu")
    args = parser.parse_args(argv)

    if args.interactive:
        interactive_main(args.config, input_path=args.input, output_path=args.output, no_log=args.no_log)
        return EXIT_OK

    config = apply_overrides(load_runtime_config(args.config), input_path=args.input, output_path=args.output, no_log=args.no_log)
    return run_translation(config["input_file"], config["output_file"], config, show=args.show)

if __name__ == "__main__":
    sys.exit(main())
