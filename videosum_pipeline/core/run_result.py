"""
Run Result
Exactly one of Success or Failure is produced per run.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .youtube.video_record import VideoRecord


@dataclass(frozen=True)
class Success:
    """All requested videos were fetched; records are in enumeration order."""
    records: List[VideoRecord] = field(default_factory=list)
    total_seconds: int = 0


@dataclass(frozen=True)
class Failure:
    """
    The run stopped at its first terminal error.

    last_raw_response is the body of the failing call, or None when no
    response was received (network errors).
    """
    last_raw_response: Optional[str]
    reason: str


RunResult = Union[Success, Failure]
