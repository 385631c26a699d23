import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single run entry to the main log."""
        self.log_batch([entry])

    def log_batch(self, entries: list):
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Start a new main log file if the UTC day changed."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def log_summary(self, summary: dict):
        """Log batch summary counts (accepted, stuck, exhausted, steps)."""
        self._log_to_file(f"summary_{self.today}.jsonl", [summary])

    def log_accepted(self, entries: list):
        """Log accepted runs together with the machine's rule table."""
        self._log_to_file(f"accepted_{self.today}.jsonl", entries)

    def log_rejected(self, entries: list):
        """Log stuck and budget-exhausted runs."""
        self._log_to_file(f"rejected_{self.today}.jsonl", entries)


def run_entry(input_string, result, tape, rules=None):
    entry = {
        "input": input_string,
        "accepted": bool(result.accepted),
        "steps_taken": int(result.steps_taken),
        "outcome": result.outcome.value,
        "tape": tape,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    if rules is not None:
        entry["rules"] = rules
    return entry
