"""
Application Configuration Model
Represents a validated configuration state
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from ..date_window import DateWindow


class AppConfig:
    """
    Immutable configuration object for a runtime-sum run.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        api_key: str,
        channel: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        output_path: Path = Path("output.txt"),
        page_size: int = 50
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            api_key: YouTube API key (non-empty)
            channel: Channel handle without the '@' prefix (non-empty)
            start_date: Inclusive lower publish date bound, UTC (optional)
            end_date: Inclusive upper publish date bound, UTC (optional)
            output_path: Report destination (default: "output.txt")
            page_size: Playlist items per request, 1-50 (default: 50)
        """
        self._api_key = api_key
        self._channel = channel
        self._start_date = start_date
        self._end_date = end_date
        self._output_path = Path(output_path)
        self._page_size = page_size

    @property
    def api_key(self) -> str:
        """YouTube API key."""
        return self._api_key

    @property
    def channel(self) -> str:
        """Normalized channel handle."""
        return self._channel

    @property
    def start_date(self) -> Optional[datetime]:
        return self._start_date

    @property
    def end_date(self) -> Optional[datetime]:
        return self._end_date

    @property
    def date_window(self) -> DateWindow:
        """Publish date window built from start_date and end_date."""
        return DateWindow(self._start_date, self._end_date)

    @property
    def output_path(self) -> Path:
        """Destination of the CSV report (or the failure dump)."""
        return self._output_path

    @property
    def page_size(self) -> int:
        """Number of playlist items requested per page."""
        return self._page_size

    def __repr__(self) -> str:
        """String representation for debugging (the key is never shown)."""
        return (
            f"AppConfig(channel={self.channel!r}, "
            f"start_date={self.start_date!r}, "
            f"end_date={self.end_date!r}, "
            f"output_path={str(self.output_path)!r}, "
            f"page_size={self.page_size})"
        )
