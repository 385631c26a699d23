from collections import namedtuple

import numpy as np

from simulator.turing_machine import Halt

EvaluationBatch = namedtuple("EvaluationBatch", ["inputs", "accepted", "steps", "outcomes", "tapes"])


def collect_results(inputs, results, tapes):
    """Pack parallel lists of inputs, RunResults and rendered tapes into result arrays."""
    num_inputs = len(inputs)

    accepted = np.zeros((num_inputs,), dtype=np.bool_)
    steps = np.zeros((num_inputs,), dtype=np.int64)
    outcomes = np.empty((num_inputs,), dtype=object)

    for idx, result in enumerate(results):
        accepted[idx] = result.accepted
        steps[idx] = result.steps_taken
        outcomes[idx] = result.outcome.value

    return EvaluationBatch(list(inputs), accepted, steps, outcomes, list(tapes))


def evaluate_batch(machine, inputs, max_steps=1000):
    """
    Run one machine over a list of inputs.
    The machine is reloaded for every input, so results do not depend on order.
    """
    results = []
    tapes = []
    for input_string in inputs:
        machine.write_input(input_string)
        results.append(machine.run(max_steps))
        tapes.append(machine.get_tape_contents())
    return collect_results(inputs, results, tapes)


def summarize(batch):
    total = len(batch.inputs)
    return {
        "total": total,
        "accepted": int(np.count_nonzero(batch.accepted)),
        "stuck": int(np.count_nonzero(batch.outcomes == Halt.STUCK.value)),
        "budget_exhausted": int(np.count_nonzero(batch.outcomes == Halt.BUDGET_EXHAUSTED.value)),
        "mean_steps": float(batch.steps.mean()) if total else 0.0,
        "max_steps": int(batch.steps.max()) if total else 0,
    }
