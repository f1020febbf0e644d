import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="translator_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = self._utc_date()
        self.current_log = self._get_log_filename()

    @staticmethod
    def _utc_date():
        return datetime.now(timezone.utc).strftime("%Y-%m-%d")

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def _stamp(self, entry):
        return {"timestamp": datetime.now(timezone.utc).isoformat(), **entry}

    def log(self, entry: dict):
        """Log a single entry to the main translation log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(self._stamp(entry)) + "\n")

    def log_translation(self, input_path, output_path, summary: dict):
        """Record a completed translation."""
        self.log({"input": str(input_path), "output": str(output_path), "status": "ok", **summary})

    def log_rejected(self, input_path, error):
        """Record an input that was refused, with the reason."""
        entry = self._stamp({
            "input": str(input_path),
            "status": "rejected",
            "error": type(error).__name__,
            "message": str(error),
        })
        self._log_to_file(f"rejected_{self.today}.jsonl", [entry])
