"""
YouTube API Client
Thin authenticated wrapper over the three Data API v3 list endpoints.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.model import RawModel

from .errors import DecodeError, HttpStatusError, NetworkError

logger = logging.getLogger(__name__)

ENDPOINTS = ("channels", "playlistItems", "videos")


@dataclass(frozen=True)
class ApiResponse:
    """Decoded JSON body of a successful call, together with the body as received."""
    data: Dict[str, Any]
    raw: str


class YouTubeClient:
    """
    YouTube Data API client.

    Every call is a single blocking GET; errors are mapped to the
    ApiError family and never retried.
    """

    def __init__(self, api_key: str, http: Optional[Any] = None):
        """Initialize the YouTube API service."""
        if not api_key or not api_key.strip():
            raise ValueError("API key cannot be empty")

        # RawModel keeps the response body untouched so failures can be dumped verbatim.
        # The bundled discovery document avoids a network round trip at startup.
        self._service = build(
            "youtube",
            "v3",
            developerKey=api_key,
            http=http,
            model=RawModel(),
            static_discovery=True,
        )

    def get(self, endpoint: str, **params: Any) -> ApiResponse:
        """
        Issue a GET against one of the list endpoints.

        Args:
            endpoint: 'channels', 'playlistItems' or 'videos'
            **params: Query parameters for the list call (None values are dropped)

        Returns:
            ApiResponse: Decoded body plus the raw text.

        Raises:
            NetworkError: No response was received.
            HttpStatusError: The API answered with a non-2xx status.
            DecodeError: The body is not a JSON object.
        """
        if endpoint not in ENDPOINTS:
            raise ValueError(f"Unsupported endpoint: {endpoint!r}")

        request = getattr(self._service, endpoint)().list(**params)
        logger.debug(f"GET {endpoint} {params}")

        try:
            content = request.execute(num_retries=0)
        except HttpError as e:
            body = _to_text(e.content)
            logger.error(f"{endpoint}.list returned HTTP {e.resp.status}")
            raise HttpStatusError(e.resp.status, body)
        except (httplib2.HttpLib2Error, OSError) as e:
            logger.error(f"{endpoint}.list failed without a response: {e}")
            raise NetworkError(f"Network error calling {endpoint}.list: {e}")

        raw = _to_text(content)
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise DecodeError(f"Response of {endpoint}.list is not valid JSON: {e}", raw=raw)

        if not isinstance(data, dict):
            raise DecodeError(f"Response of {endpoint}.list is not a JSON object", raw=raw)

        return ApiResponse(data=data, raw=raw)


def _to_text(content: Any) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return str(content)
