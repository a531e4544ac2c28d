"""
YouTube pipeline errors
Every error keeps the raw body of the response that caused it (if any).
"""

from typing import Optional


class VideoSumError(Exception):
    """Base class for terminal errors raised while querying the YouTube API."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


class ApiError(VideoSumError):
    """Raised when a YouTube Data API call cannot be completed."""
    pass


class NetworkError(ApiError):
    """Transport failure: no response was received."""
    pass


class HttpStatusError(ApiError):
    """The API answered with a non-2xx status (quota exceeded, bad key, ...)."""

    def __init__(self, status: int, body: str):
        super().__init__(f"API request failed with HTTP {status}", raw=body)
        self.status = status
        self.body = body


class DecodeError(ApiError):
    """The response body is not a JSON object."""
    pass


class ChannelNotFoundError(VideoSumError):
    """No channel matches the requested handle."""

    def __init__(self, handle: str, raw: Optional[str] = None):
        super().__init__(f"Channel not found: @{handle}", raw=raw)
        self.handle = handle


class MalformedResponseError(VideoSumError):
    """A decoded response lacks a field the pipeline depends on."""
    pass


class DurationParseError(VideoSumError):
    """A video's duration field is not a valid ISO-8601 duration."""

    def __init__(self, video_id: str, raw_duration: object, raw: Optional[str] = None):
        super().__init__(
            f"Could not parse duration {raw_duration!r} of video {video_id}", raw=raw
        )
        self.video_id = video_id
        self.raw_duration = raw_duration
