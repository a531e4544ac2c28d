"""
Channel Resolver
Maps a human channel handle to its channel ID and uploads playlist.
"""

import logging

from .channel_info import ChannelInfo
from .errors import ChannelNotFoundError, MalformedResponseError
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def normalize_handle(handle: str) -> str:
    """Strip whitespace and any '@' prefix, e.g. ' @Foo ' -> 'Foo'."""
    return handle.strip().lstrip("@")


class ChannelResolver:
    """Resolves handles with a single channels().list(forHandle=...) call."""

    def __init__(self, youtube_client: YouTubeClient):
        self._client = youtube_client

    def resolve(self, handle: str) -> ChannelInfo:
        """
        Point-in-time lookup of a channel handle.

        Raises:
            ChannelNotFoundError: No channel owns the handle.
            MalformedResponseError: The channel item lacks its id or uploads playlist.
            ApiError: The lookup call itself failed.
        """
        name = normalize_handle(handle)
        response = self._client.get(
            "channels",
            part="id,snippet,contentDetails",
            forHandle=f"@{name}",
        )

        items = response.data.get("items") or []
        if not items:
            raise ChannelNotFoundError(name, raw=response.raw)

        data = items[0]
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Channel lookup for @{name} returned an unexpected item", raw=response.raw
            )
        channel_id = data.get("id")
        snippet = data.get("snippet") or {}
        uploads_playlist_id = (
            ((data.get("contentDetails") or {}).get("relatedPlaylists") or {}).get("uploads")
        )
        if not channel_id or not uploads_playlist_id:
            raise MalformedResponseError(
                f"Channel lookup for @{name} returned no uploads playlist",
                raw=response.raw,
            )

        channel = ChannelInfo(
            channel_id=channel_id,
            uploads_playlist_id=uploads_playlist_id,
            title=snippet.get("title") or "",
            custom_url=snippet.get("customUrl") or "",
        )
        logger.info(f"Channel resolved: {channel}")
        return channel
