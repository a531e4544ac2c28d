"""
Upload Enumerator
Walks a channel's uploads playlist page by page.
"""

import logging
from datetime import datetime
from typing import Iterator, Optional, Tuple

from ..date_window import parse_rfc3339
from .errors import MalformedResponseError
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 50


class UploadEnumerator:
    """
    Lazily yields (video_id, published_at) pairs from an uploads playlist.

    Responsibilities:
    - Follow nextPageToken until the API stops returning one.
    - Preserve the platform's ordering.
    - Abort on the first failing page, keeping that page's raw body on the error.
    """

    def __init__(self, youtube_client: YouTubeClient):
        self._client = youtube_client

    def iter_uploads(
        self, playlist_id: str, page_size: int = MAX_PAGE_SIZE
    ) -> Iterator[Tuple[str, datetime]]:
        """
        Iterate through playlist items to collect video IDs and publish dates.

        Args:
            playlist_id: Uploads playlist of the channel
            page_size: maxResults per request (1-50)
        """
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {page_size}")

        next_page_token: Optional[str] = None
        page_number = 0

        while True:
            page_number += 1
            response = self._client.get(
                "playlistItems",
                part="contentDetails",
                playlistId=playlist_id,
                maxResults=page_size,
                pageToken=next_page_token,
            )

            items = response.data.get("items")
            if not isinstance(items, list):
                raise MalformedResponseError(
                    f"Playlist page {page_number} has no item list", raw=response.raw
                )
            logger.debug(f"Playlist page {page_number}: {len(items)} items")

            for item in items:
                details = (item.get("contentDetails") or {}) if isinstance(item, dict) else {}
                video_id = details.get("videoId")
                published = details.get("videoPublishedAt")
                if not video_id or not published:
                    # Private and deleted uploads come back without these fields.
                    logger.warning(f"Skipping playlist item without video id or publish date: {item!r}")
                    continue

                try:
                    published_at = parse_rfc3339(published)
                except (TypeError, ValueError, AttributeError):
                    raise MalformedResponseError(
                        f"Invalid videoPublishedAt {published!r} for video {video_id}",
                        raw=response.raw,
                    )
                yield video_id, published_at

            next_page_token = response.data.get("nextPageToken")
            if not next_page_token:
                break
