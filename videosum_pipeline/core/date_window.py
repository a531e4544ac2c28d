"""
Publish date window
Inclusive UTC bounds used to filter uploads
"""

from datetime import datetime, timezone
from typing import Optional


def parse_rfc3339(value: str) -> datetime:
    """
    Parse an RFC3339 timestamp ('yyyy-mm-ddTHH:MM:SSZ' or with an offset).

    Returns:
        datetime: Timezone-aware timestamp converted to UTC.

    Raises:
        ValueError: If the value is not a valid RFC3339 timestamp.
    """
    text = value.strip()
    if "T" not in text.upper():
        raise ValueError(f"missing time component in {value!r}")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        raise ValueError(f"missing timezone designator in {value!r}")
    return parsed.astimezone(timezone.utc)


class DateWindow:
    """
    Optional (start, end) pair, both bounds inclusive.
    An absent bound imposes no constraint on that side.
    """

    def __init__(self, start: Optional[datetime] = None, end: Optional[datetime] = None):
        self._start = start
        self._end = end

    @property
    def start(self) -> Optional[datetime]:
        return self._start

    @property
    def end(self) -> Optional[datetime]:
        return self._end

    def contains(self, published_at: datetime) -> bool:
        """Check whether a publish timestamp falls inside the window."""
        if self._start is not None and published_at < self._start:
            return False
        if self._end is not None and published_at > self._end:
            return False
        return True

    def __repr__(self) -> str:
        return f"DateWindow(start={self._start!r}, end={self._end!r})"
