"""
Video Record Domain Model
One row of the runtime report
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class VideoRecord:
    """
    Domain model representing a single video included in the total.
    Immutable once built by the aggregator.
    """
    video_id: str
    title: str
    published_at: datetime
    duration_seconds: int

    def to_row(self) -> Dict[str, Any]:
        """Convert object to a report row (CSV column names)."""
        return {
            "id": self.video_id,
            "title": self.title,
            "publishedAt": self.published_at.strftime(TIMESTAMP_FORMAT),
            "durationSeconds": self.duration_seconds,
        }
