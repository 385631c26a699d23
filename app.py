# app.py

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import DEFAULT_CONFIG, load_config, save_config
from logger.logger import JSONLogger
from tools.binary_increment import EXAMPLE_INPUTS, MACHINES, create_machine, run_examples
from tools.ruleset_inspect import pretty_print_rules
from tools.simulate_inputs import simulate_inputs
from tools.trace_steps import print_trace, trace

console = Console()

CONFIG_PATH = "config/runtime_config.json"

# === Utilities ===
def load_runtime_config(path=CONFIG_PATH):
    if not Path(path).exists():
        console.print(f"[yellow]{path} not found, using defaults.[/yellow]")
        return DEFAULT_CONFIG.copy()
    try:
        return load_config(path, verbose=False)
    except (ValueError, TypeError) as e:
        console.print(f"[red]Error: invalid configuration: {e}[/red]")
        sys.exit(1)

def save_runtime_config(config, path=CONFIG_PATH):
    save_config(config, path)
    console.print("[green]Configuration updated successfully.[/green]")

def get_logger(config):
    if not config["log_results"]:
        return None
    return JSONLogger(config["output_directory"], config["log_file_prefix"])

def build_machine(name, config):
    try:
        return create_machine(name, config["blank_symbol"])
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

def show_main_menu():
    console.print("\n[bold cyan]Turing Tape Simulator[/bold cyan]")
    console.print("[1] Run Example Inputs")
    console.print("[2] Trace Step by Step")
    console.print("[3] Simulate Input Pool")
    console.print("[4] Inspect Transition Table")
    console.print("[5] Edit Config")
    console.print("[6] Exit")


def handle_examples(machine_name, config, inputs=EXAMPLE_INPUTS):
    machine = build_machine(machine_name, config)
    rows = run_examples(machine, inputs, max_steps=config["max_steps"])

    logger = get_logger(config)
    if logger is not None:
        rules = machine.to_rules()
        logger.log_batch([dict(row, machine=machine_name, rules=rules) for row in rows])
    return rows

def handle_trace(machine_name, config, input_string):
    machine = build_machine(machine_name, config)
    snapshots = trace(machine, input_string, config["trace_steps"])
    print_trace(snapshots, title=f"{machine_name} on {input_string or '(empty)'}")
    machine.visualize(config["trace_window"])
    return snapshots

def handle_simulate_pool(machine_name, config, pool_file):
    if not Path(pool_file).exists():
        console.print(f"[red]Input pool not found: {pool_file}[/red]")
        sys.exit(1)

    machine = build_machine(machine_name, config)
    console.print(f"[cyan]Simulating pool {Path(pool_file).stem} on {machine_name}...[/cyan]")
    summary = simulate_inputs(
        machine,
        pool_file,
        "results",
        batch_size=config["batch_size"],
        max_steps=config["max_steps"],
        logger=get_logger(config),
        exhausted_file=config["exhausted_file"]
    )
    console.print(
        f"[green]Done: {summary['accepted']:,} accepted, {summary['stuck']:,} stuck, "
        f"{summary['budget_exhausted']:,} out of budget.[/green]"
    )
    return summary

def handle_inspect(machine_name, config):
    pretty_print_rules(build_machine(machine_name, config))

def handle_edit_config(config, config_path=CONFIG_PATH):
    console.print("\n[bold]Edit Configuration[/bold]")

    max_steps = IntPrompt.ask("Max Steps", default=config["max_steps"])
    trace_steps = IntPrompt.ask("Trace Steps", default=config["trace_steps"])
    trace_window = IntPrompt.ask("Trace Window", default=config["trace_window"])
    batch_size = IntPrompt.ask("Batch Size", default=config["batch_size"])
    log_results = Confirm.ask("Log results to JSON lines?", default=config["log_results"])

    config.update({
        "max_steps": max_steps,
        "trace_steps": trace_steps,
        "trace_window": trace_window,
        "batch_size": batch_size,
        "log_results": log_results
    })

    save_runtime_config(config, config_path)

def choose_machine(default="binary_increment"):
    return Prompt.ask("Machine", choices=sorted(MACHINES), default=default)


def interactive_main(config_path=CONFIG_PATH):
    config = load_runtime_config(config_path)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5", "6"], default="6")

        if choice == "1":
            handle_examples(choose_machine(), config)
        elif choice == "2":
            machine_name = choose_machine()
            input_string = Prompt.ask("Input", default="101")
            handle_trace(machine_name, config, input_string)
        elif choice == "3":
            machine_name = choose_machine()
            pool_file = Prompt.ask("Input pool file", default="pools/inputs.txt")
            handle_simulate_pool(machine_name, config, pool_file)
        elif choice == "4":
            handle_inspect(choose_machine(), config)
        elif choice == "5":
            handle_edit_config(config, config_path)
            config = load_runtime_config(config_path)
        elif choice == "6":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(args):
    config = load_runtime_config(args.config)
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps

    if args.inspect:
        handle_inspect(args.machine, config)
    if args.examples:
        handle_examples(args.machine, config)
    if args.trace is not None:
        handle_trace(args.machine, config, args.trace)
    if args.inputs:
        handle_simulate_pool(args.machine, config, args.inputs)

def main(argv=None):
    parser = argparse.ArgumentParser(description="Single-tape Turing Machine Simulator")
    parser.add_argument("--examples", action="store_true", help="Run the example inputs immediately")
    parser.add_argument("--trace", metavar="INPUT", help="Trace the machine step by step on INPUT")
    parser.add_argument("--inputs", metavar="FILE", help="Simulate every input in a pool file (one per line)")
    parser.add_argument("--inspect", action="store_true", help="Print the machine's transition table")
    parser.add_argument("--machine", default="binary_increment", choices=sorted(MACHINES), help="Example machine to use")
    parser.add_argument("--max-steps", type=int, help="Override the configured step budget")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to runtime config JSON")
    args = parser.parse_args(argv)

    if args.examples or args.trace is not None or args.inputs or args.inspect:
        cli_main(args)
    else:
        interactive_main(args.config)

if __name__ == "__main__":
    main()
