# tools/binary_increment.py

import argparse

from rich.console import Console
from rich.table import Table

from simulator.turing_machine import TuringMachine

console = Console()

EXAMPLE_INPUTS = ["0", "1", "11", "101"]


# === Machine Definitions ===
def create_binary_increment_machine(blank_symbol="_"):
    """Three-rule machine: 0 -> 1 moving right, 1 -> 0 moving left, blank -> 1 and accept."""
    rules = {
        "q0,0": ["q0", "1", "R"],
        "q0,1": ["q0", "0", "L"],
        f"q0,{blank_symbol}": ["qf", "1", "R"]
    }
    return TuringMachine(rules, blank_symbol, "q0", {"qf"})

def create_binary_successor_machine(blank_symbol="_"):
    """Add one to a binary number: scan to the right end, then carry leftwards."""
    rules = {
        # Scan right over the number
        "q0,0": ["q0", "0", "R"],
        "q0,1": ["q0", "1", "R"],
        f"q0,{blank_symbol}": ["carry", blank_symbol, "L"],
        # Propagate the carry
        "carry,1": ["carry", "0", "L"],
        "carry,0": ["qf", "1", "L"],
        f"carry,{blank_symbol}": ["qf", "1", "L"]
    }
    return TuringMachine(rules, blank_symbol, "q0", {"qf"})

MACHINES = {
    "binary_increment": create_binary_increment_machine,
    "binary_successor": create_binary_successor_machine
}

def create_machine(name, blank_symbol="_"):
    if name not in MACHINES:
        raise ValueError(f"Unknown machine '{name}'. Choose from: {', '.join(MACHINES)}")
    return MACHINES[name](blank_symbol)


# === Example Runs ===
def run_examples(machine, inputs=EXAMPLE_INPUTS, max_steps=1000, show=True):
    rows = []
    for input_string in inputs:
        machine.write_input(input_string)
        result = machine.run(max_steps)
        rows.append({
            "input": input_string,
            "output": machine.get_tape_contents(),
            "steps": result.steps_taken,
            "accepted": result.accepted,
            "outcome": result.outcome.value
        })

    if show:
        table = Table(title="Example Runs", show_header=True, header_style="bold magenta")
        table.add_column("Input", justify="center")
        table.add_column("Output", justify="center")
        table.add_column("Steps", justify="right")
        table.add_column("Result", justify="center")
        for row in rows:
            color = "green" if row["accepted"] else "red"
            table.add_row(row["input"] or "(empty)", row["output"], str(row["steps"]),
                          f"[{color}]{row['outcome']}[/{color}]")
        console.print(table)

    return rows


def main():
    parser = argparse.ArgumentParser(description="Run the example binary machines on a few inputs")
    parser.add_argument("--machine", default="binary_increment", choices=sorted(MACHINES), help="Example machine to run")
    parser.add_argument("--max_steps", type=int, default=1000, help="Maximum steps per input")
    parser.add_argument("inputs", nargs="*", default=EXAMPLE_INPUTS, help="Input strings (default: 0 1 11 101)")
    args = parser.parse_args()

    run_examples(create_machine(args.machine), args.inputs, max_steps=args.max_steps)

if __name__ == "__main__":
    main()
