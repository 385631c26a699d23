import numpy as np

from simulator.evaluator import collect_results, evaluate_batch, summarize
from simulator.turing_machine import TuringMachine
from tools.binary_increment import create_binary_successor_machine


def test_evaluate_batch_arrays():
    batch = evaluate_batch(create_binary_successor_machine(), ["0", "1", "12"], max_steps=100)
    assert batch.inputs == ["0", "1", "12"]
    assert batch.accepted.dtype == np.bool_
    assert batch.accepted.tolist() == [True, True, False]
    assert batch.steps.tolist() == [3, 4, 1]
    assert batch.outcomes.tolist() == ["accepted", "accepted", "stuck"]
    assert batch.tapes == ["1", "10", "12"]


def test_evaluate_batch_is_order_independent():
    machine = create_binary_successor_machine()
    forward = evaluate_batch(machine, ["11", "101"])
    backward = evaluate_batch(machine, ["101", "11"])
    assert forward.steps.tolist() == backward.steps.tolist()[::-1]
    assert forward.tapes == backward.tapes[::-1]


def test_summarize_counts_outcomes():
    looping = TuringMachine({"q0,_": ["q0", "_", "R"], "q0,x": ["q0", "x", "L"]})
    batch = evaluate_batch(looping, ["", "y"], max_steps=10)
    summary = summarize(batch)
    assert summary == {
        "total": 2,
        "accepted": 0,
        "stuck": 1,
        "budget_exhausted": 1,
        "mean_steps": 5.0,
        "max_steps": 10,
    }


def test_summarize_empty_batch():
    summary = summarize(collect_results([], [], []))
    assert summary["total"] == 0
    assert summary["accepted"] == 0
    assert summary["mean_steps"] == 0.0
    assert summary["max_steps"] == 0
