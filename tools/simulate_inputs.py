# tools/simulate_inputs.py

import argparse
import json
from pathlib import Path

from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from logger.logger import JSONLogger, run_entry
from simulator.evaluator import collect_results, summarize
from simulator.turing_machine import Halt
from tools.binary_increment import MACHINES, create_machine

# === Promotion for Long-Runners ===
def promote_long_runner(input_string, pool_file="pools/budget_exhausted.txt"):
    Path(pool_file).parent.mkdir(parents=True, exist_ok=True)
    with open(pool_file, "a", encoding="utf-8") as f:
        f.write(input_string + "\n")

# === Utility Loaders ===
def load_input_pool(input_pool_file):
    with open(input_pool_file, "r", encoding="utf-8") as f:
        inputs = [line.strip() for line in f if line.strip()]
    return inputs

def load_checkpoint(checkpoint_path):
    if checkpoint_path.exists():
        with open(checkpoint_path, "r", encoding="utf-8") as f:
            checkpoint = json.load(f)
        return checkpoint.get("completed", [])
    return []

def save_checkpoint(completed, checkpoint_path):
    with open(checkpoint_path, "w", encoding="utf-8") as f:
        json.dump({"completed": completed}, f, indent=4)

def console_message(msg):
    print(f"[simulate_inputs] {msg}")

# === Main Simulation Runner ===
def simulate_inputs(machine, input_pool_file, output_name="results", results_root="results", batch_size=256,
                    max_steps=1000, logger=None, exhausted_file="pools/budget_exhausted.txt"):
    """
    Run a machine over every input in a pool file, in batches.
    Completed inputs are checkpointed after each batch so an interrupted run resumes
    where it stopped. Returns the summary of the inputs simulated by this call.
    """
    pool_name = Path(input_pool_file).stem
    results_folder = Path(results_root) / pool_name
    results_folder.mkdir(parents=True, exist_ok=True)
    results_file = results_folder / f"{output_name}.jsonl"
    checkpoint_file = results_folder / f"{output_name}_checkpoint.json"

    all_inputs = load_input_pool(input_pool_file)
    completed = load_checkpoint(checkpoint_file)

    done = set(completed)
    pending_inputs = [i for i in all_inputs if i not in done]
    console_message(f"Loaded {len(all_inputs):,} total inputs. {len(pending_inputs):,} pending.")

    rules = machine.to_rules()
    run_inputs, run_results, run_tapes = [], [], []

    with open(results_file, "a", encoding="utf-8") as results_fh:
        for batch_start in range(0, len(pending_inputs), batch_size):
            batch = pending_inputs[batch_start:batch_start + batch_size]
            console_message(f"Processing batch {batch_start // batch_size + 1} with {len(batch):,} inputs...")

            with Progress(
                    SpinnerColumn(),
                    BarColumn(),
                    "[progress.percentage]{task.percentage:>3.0f}%",
                    TextColumn("{task.completed}/{task.total} Inputs"),
                    TimeElapsedColumn()
            ) as progress:

                task = progress.add_task("[cyan]Simulating...", total=len(batch))

                batch_results = []  # <--- buffer
                accepted_entries = []
                rejected_entries = []

                for input_string in batch:
                    try:
                        machine.write_input(input_string)
                        result = machine.run(max_steps)
                        tape = machine.get_tape_contents()

                        entry = run_entry(input_string, result, tape)
                        batch_results.append(entry)
                        completed.append(input_string)
                        run_inputs.append(input_string)
                        run_results.append(result)
                        run_tapes.append(tape)

                        # === Auto-Promote Long Runners ===
                        if result.outcome is Halt.BUDGET_EXHAUSTED:
                            promote_long_runner(input_string, exhausted_file)

                        if result.accepted:
                            accepted_entries.append(dict(entry, rules=rules))
                        else:
                            rejected_entries.append(entry)

                    except Exception as e:
                        console_message(f"[WARNING] Failed to simulate {input_string!r}: {e}")

                    progress.update(task, advance=1)

                # === BULK WRITE once per batch ===
                for entry in batch_results:
                    results_fh.write(json.dumps(entry) + "\n")
                results_fh.flush()

                if logger is not None:
                    if accepted_entries:
                        logger.log_accepted(accepted_entries)
                    if rejected_entries:
                        logger.log_rejected(rejected_entries)

                save_checkpoint(completed, checkpoint_file)
                console_message("[INFO] Batch completed. Checkpoint saved.")

    summary = summarize(collect_results(run_inputs, run_results, run_tapes))
    summary["pool"] = pool_name
    if logger is not None:
        logger.log_summary(summary)
    console_message(f"[SUCCESS] {summary['total']:,} inputs simulated. Results saved to {results_file}.")
    return summary


# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Simulate a pool of input strings with checkpointing.")
    parser.add_argument("--pool", required=True, help="Path to input pool file (one input per line)")
    parser.add_argument("--machine", default="binary_increment", choices=sorted(MACHINES), help="Example machine to run")
    parser.add_argument("--output", default="results", help="Output result file name (default: results)")
    parser.add_argument("--batch_size", type=int, default=256, help="Batch size per save/checkpoint")
    parser.add_argument("--max_steps", type=int, default=1000, help="Maximum steps before giving up on an input")
    parser.add_argument("--log_dir", default="logs/", help="Directory for JSON-lines logs")
    args = parser.parse_args()

    simulate_inputs(
        create_machine(args.machine),
        args.pool,
        args.output,
        batch_size=args.batch_size,
        max_steps=args.max_steps,
        logger=JSONLogger(args.log_dir)
    )

if __name__ == "__main__":
    main()
