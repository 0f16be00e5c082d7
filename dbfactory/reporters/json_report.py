"""
JSON reporter - saves connection check results to JSON files.

Outputs are meant for monitoring jobs that track connectivity over time.
"""

import json
from pathlib import Path

from dbfactory.checker import CheckResult


class JSONReporter:
    """Save connection check results to JSON files."""

    def __init__(self, output_dir: str | Path = "reports"):
        """
        Initialize JSON reporter.

        Args:
            output_dir: Directory to save reports (created if needed)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def save(self, result: CheckResult, filename: str | None = None) -> Path:
        """
        Save a check result to a JSON file.

        Args:
            result: CheckResult to save
            filename: Custom filename (default: auto-generated with timestamp)

        Returns:
            Path to saved file
        """
        if filename is None:
            timestamp = result.timestamp.strftime('%Y%m%d_%H%M%S')
            filename = f"check_{result.connection_name}_{result.role}_{timestamp}.json"

        filepath = self.output_dir / filename

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2, default=str)

        return filepath

    def append_to_history(
        self,
        result: CheckResult,
        history_file: str = "check_history.jsonl"
    ) -> Path:
        """
        Append a compact record to a JSONL history file (one record per line).

        Args:
            result: CheckResult to append
            history_file: Name of history file

        Returns:
            Path to history file
        """
        filepath = self.output_dir / history_file

        record = {
            'timestamp': result.timestamp.isoformat(),
            'connection': result.connection_name,
            'role': result.role,
            'host': result.target.get('host'),
            'passed': result.passed,
            'duration_ms': result.duration_ms,
        }

        with open(filepath, 'a', encoding='utf-8') as f:
            f.write(json.dumps(record, default=str) + '\n')

        return filepath


def save_report(result: CheckResult, output_dir: str = "reports") -> tuple[Path, Path]:
    """
    Convenience function to save the result and append it to history.

    Returns:
        Tuple of (report_path, history_path)
    """
    reporter = JSONReporter(output_dir)
    return reporter.save(result), reporter.append_to_history(result)
