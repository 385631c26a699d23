# tools/trace_steps.py

import argparse

from rich.console import Console
from rich.table import Table

from simulator.turing_machine import StepResult
from tools.binary_increment import MACHINES, create_machine

console = Console()

def trace(machine, input_string, max_steps=5):
    """Load input and collect the initial snapshot plus one per successful step."""
    machine.write_input(input_string)
    snapshots = [machine.snapshot()]
    for _ in range(max_steps):
        if machine.step() is StepResult.STUCK:
            break
        snapshots.append(machine.snapshot())
    return snapshots

def print_trace(snapshots, title="Step by step execution"):
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Step", justify="right")
    table.add_column("Tape", justify="left")
    table.add_column("Head", justify="right")
    table.add_column("State", justify="center")

    for idx, snap in enumerate(snapshots):
        label = "Initial" if idx == 0 else str(idx)
        table.add_row(label, snap.tape, str(snap.head_position), str(snap.current_state))

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Trace a machine step by step")
    parser.add_argument("input", nargs="?", default="101", help="Input string (default: 101)")
    parser.add_argument("--machine", default="binary_increment", choices=sorted(MACHINES), help="Example machine to trace")
    parser.add_argument("--steps", type=int, default=5, help="Maximum number of steps to trace")
    parser.add_argument("--visualize", action="store_true", help="Also print the tape window after the trace")
    args = parser.parse_args()

    machine = create_machine(args.machine)
    print_trace(trace(machine, args.input, args.steps))
    if args.visualize:
        machine.visualize()

if __name__ == "__main__":
    main()
