"""
ISO-8601 duration helpers for contentDetails.duration values (e.g. 'PT1H10M10S').
"""

import re
from datetime import timedelta

import isodate

# isodate accepts a bare 'PT' as zero; a usable value needs at least one designator.
_DESIGNATOR_PATTERN = re.compile(r"\d+(?:[.,]\d+)?[YMWDHS]")


def parse_duration_seconds(value: object) -> int:
    """
    Convert a YouTube duration string to whole seconds.

    At least one designator with a value must be present: 'PT' and 'PTH'
    are rejected. Year and month designators have no fixed length in
    seconds and are rejected as well.

    Raises:
        ValueError: If the value is not a usable duration.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"duration must be a non-empty string, got {value!r}")

    text = value.strip()
    if not _DESIGNATOR_PATTERN.search(text) or text.upper().endswith("T"):
        raise ValueError(f"duration {value!r} has no designator with a value")

    duration = isodate.parse_duration(text)
    if not isinstance(duration, timedelta):
        raise ValueError(f"calendar-based duration {value!r} cannot be converted to seconds")

    seconds = int(duration.total_seconds())
    if seconds < 0:
        raise ValueError(f"negative duration {value!r}")
    return seconds

