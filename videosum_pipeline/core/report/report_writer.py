"""
Report Writer
Persists the run result and prints the human-readable total.
"""

import logging
from pathlib import Path

import pandas as pd

from ..run_result import Failure, RunResult, Success

logger = logging.getLogger(__name__)

REPORT_COLUMNS = ["id", "title", "publishedAt", "durationSeconds"]


def format_total(total_seconds: int) -> str:
    """Render e.g. 7275 as 'Sum total: 7275 seconds, or 2 hours 1 minutes 15 seconds'."""
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return (
        f"Sum total: {total_seconds} seconds, "
        f"or {hours} hours {minutes} minutes {seconds} seconds"
    )


class ReportWriter:
    """
    Writes exactly one artifact per run to the output path.

    - Success: CSV with one row per included video.
    - Failure: the raw body of the failing response, verbatim.

    Any existing file at the output path is overwritten.
    """

    def __init__(self, output_path: Path):
        self._output_path = Path(output_path)

    @property
    def output_path(self) -> Path:
        return self._output_path

    def write(self, result: RunResult) -> None:
        """
        Persist the result and print the summary.

        Raises:
            OSError: If the output file cannot be written.
        """
        self._output_path.parent.mkdir(parents=True, exist_ok=True)

        if isinstance(result, Success):
            self._write_success(result)
        elif isinstance(result, Failure):
            self._write_failure(result)
        else:
            raise TypeError(f"Unsupported run result: {result!r}")

    def _write_success(self, result: Success) -> None:
        df = pd.DataFrame([r.to_row() for r in result.records], columns=REPORT_COLUMNS)
        df.to_csv(self._output_path, index=False, encoding="utf-8")
        logger.info(f"Successfully saved {len(result.records)} videos to {self._output_path}")

        print(f"\nVideos counted: {len(result.records)}")
        print(format_total(result.total_seconds))

    def _write_failure(self, result: Failure) -> None:
        # Network failures carry no body; the reason is the only diagnostic left.
        content = result.last_raw_response
        if content is None:
            content = result.reason + "\n"
        with open(self._output_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        logger.info(f"Last response saved to {self._output_path} for diagnosis")

        print(f"\nError: {result.reason}")
        print(f"The last API response was saved to '{self._output_path}'.")
