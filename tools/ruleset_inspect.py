import argparse

from rich.console import Console
from rich.table import Table

from tools.binary_increment import MACHINES, create_machine

console = Console()

def format_action(transition):
    if transition is None:
        return "STUCK"
    return f"{transition.write_symbol}{transition.direction.value}{transition.next_state}"

def build_rule_grid(machine):
    """Rows of (state, [action per symbol]) in machine.states() x machine.symbols() order."""
    symbols = machine.symbols()
    grid = []
    for state in machine.states():
        if state in machine.final_states:
            actions = ["ACCEPT"] * len(symbols)
        else:
            actions = [format_action(machine.transitions.get((state, symbol))) for symbol in symbols]
        grid.append((state, actions))
    return grid

def pretty_print_rules(machine, latex=True):
    """Pretty print the rules as a state x symbol table, with an optional LaTeX array."""
    symbols = machine.symbols()
    grid = build_rule_grid(machine)

    # === Terminal Human-Readable Table ===
    table = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    table.add_column("State", justify="center")
    for symbol in symbols:
        table.add_column(str(symbol), justify="center")
    for state, actions in grid:
        marker = " (start)" if state == machine.initial_state else ""
        table.add_row(f"{state}{marker}", *actions)
    console.print(table)

    # === LaTeX Table Output ===
    if latex:
        print("\n=== LaTeX Table ===")
        print(r"\begin{array}{c|" + "c" * len(symbols) + "}")
        print("State/Symbol & " + " & ".join([f"\\text{{{s}}}" for s in symbols]) + r" \\ \hline")
        for state, actions in grid:
            print(" & ".join([str(state)] + actions) + r" \\")
        print(r"\end{array}")

    return grid

def main():
    parser = argparse.ArgumentParser(description="Transition Table Inspector")
    parser.add_argument("--machine", default="binary_increment", choices=sorted(MACHINES), help="Example machine to inspect")
    parser.add_argument("--no-latex", action="store_true", help="Skip the LaTeX array output")
    args = parser.parse_args()

    machine = create_machine(args.machine)
    print(f"[INFO] Machine {args.machine}")
    print(f"  States: {', '.join(map(str, machine.states()))}")
    print(f"  Symbols: {', '.join(map(str, machine.symbols()))}")
    print(f"  Final states: {', '.join(sorted(map(str, machine.final_states)))}")
    pretty_print_rules(machine, latex=not args.no_latex)

if __name__ == "__main__":
    main()
