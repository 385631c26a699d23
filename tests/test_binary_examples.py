import pytest

from simulator.turing_machine import Halt, Snapshot, TuringMachine
from tools.binary_increment import (
    EXAMPLE_INPUTS,
    create_binary_increment_machine,
    create_binary_successor_machine,
    create_machine,
    run_examples,
)
from tools.ruleset_inspect import build_rule_grid, pretty_print_rules
from tools.trace_steps import print_trace, trace


@pytest.mark.parametrize("input_string, expected_tape", [
    ("0", "11"),
    ("1", "10"),
    ("11", "101"),
    ("101", "1001"),
])
def test_binary_increment_rule_table(input_string, expected_tape):
    machine = create_binary_increment_machine()
    machine.write_input(input_string)
    result = machine.run()
    assert result.accepted is True
    assert result.steps_taken == 2
    assert machine.get_tape_contents() == expected_tape


@pytest.mark.parametrize("input_string, expected_tape, expected_steps", [
    ("0", "1", 3),
    ("1", "10", 4),
    ("11", "100", 6),
    ("101", "110", 6),
    ("", "1", 2),
])
def test_binary_successor_adds_one(input_string, expected_tape, expected_steps):
    machine = create_binary_successor_machine()
    machine.write_input(input_string)
    result = machine.run()
    assert result.accepted is True
    assert result.steps_taken == expected_steps
    assert machine.get_tape_contents() == expected_tape


def test_binary_successor_rejects_non_binary_input():
    machine = create_binary_successor_machine()
    machine.write_input("12")
    result = machine.run()
    assert result.outcome is Halt.STUCK
    assert result.steps_taken == 1


def test_machines_honour_custom_blank():
    machine = create_binary_successor_machine(blank_symbol="B")
    machine.write_input("11")
    assert machine.run().accepted
    assert machine.get_tape_contents() == "100"


def test_create_machine_unknown_name():
    with pytest.raises(ValueError, match="Unknown machine"):
        create_machine("busy_beaver")


def test_run_examples_rows(capsys):
    rows = run_examples(create_binary_successor_machine(), EXAMPLE_INPUTS)
    assert [row["output"] for row in rows] == ["1", "10", "100", "110"]
    assert all(row["accepted"] for row in rows)
    assert "Example Runs" in capsys.readouterr().out


def test_trace_of_binary_increment_on_101():
    snapshots = trace(create_binary_increment_machine(), "101", max_steps=5)
    assert snapshots == [
        Snapshot("101", 0, "q0"),
        Snapshot("001", -1, "q0"),
        Snapshot("1001", 0, "qf"),
    ]


def test_trace_respects_step_limit():
    snapshots = trace(create_binary_successor_machine(), "101", max_steps=2)
    assert len(snapshots) == 3
    assert snapshots[-1] == Snapshot("101", 2, "q0")


def test_print_trace(capsys):
    print_trace(trace(create_binary_increment_machine(), "1"))
    out = capsys.readouterr().out
    assert "Initial" in out
    assert "qf" in out


def test_rule_grid_for_binary_increment():
    grid = dict(build_rule_grid(create_binary_increment_machine()))
    assert grid["q0"] == ["1Rq0", "0Lq0", "1Rqf"]
    assert grid["qf"] == ["ACCEPT", "ACCEPT", "ACCEPT"]


def test_pretty_print_rules_outputs_latex(capsys):
    pretty_print_rules(create_binary_successor_machine())
    out = capsys.readouterr().out
    assert r"\begin{array}{c|ccc}" in out
    assert "carry" in out


def test_rule_grid_marks_missing_transitions_stuck():
    machine = TuringMachine({"q0,a": ["q0", "b", "R"]})
    assert build_rule_grid(machine) == [("q0", ["STUCK", "bRq0", "STUCK"])]
