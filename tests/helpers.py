"""Shared builders for API response bodies and fake clients."""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from googleapiclient.http import HttpMockSequence

from videosum_pipeline.core.youtube.youtube_client import ApiResponse

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def ts(offset_seconds: int = 0) -> datetime:
    return BASE_TIME + timedelta(seconds=offset_seconds)


def rfc3339(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def channel_body(channel_id: str = "UC123", uploads: Optional[str] = "UU123") -> Dict[str, Any]:
    content_details = {"relatedPlaylists": {"uploads": uploads}} if uploads else {}
    return {
        "kind": "youtube#channelListResponse",
        "items": [{
            "id": channel_id,
            "snippet": {"title": "Some Channel", "customUrl": "@somechannel"},
            "contentDetails": content_details,
        }],
    }


def playlist_page(video_ids: List[str], next_token: Optional[str] = None,
                  published: Optional[List[datetime]] = None) -> Dict[str, Any]:
    published = published or [ts(i) for i in range(len(video_ids))]
    body: Dict[str, Any] = {
        "kind": "youtube#playlistItemListResponse",
        "items": [
            {"contentDetails": {"videoId": vid, "videoPublishedAt": rfc3339(when)}}
            for vid, when in zip(video_ids, published)
        ],
    }
    if next_token:
        body["nextPageToken"] = next_token
    return body


def videos_body(durations: Dict[str, str]) -> Dict[str, Any]:
    return {
        "kind": "youtube#videoListResponse",
        "items": [
            {"id": vid, "snippet": {"title": f"Title {vid}"}, "contentDetails": {"duration": duration}}
            for vid, duration in durations.items()
        ],
    }


class FakeYouTubeClient:
    """Stands in for YouTubeClient; replays queued responses per endpoint and records calls."""

    def __init__(self, responses: Optional[Dict[str, List[Any]]] = None):
        self._responses = {k: list(v) for k, v in (responses or {}).items()}
        self.calls: List[tuple] = []

    def queue(self, endpoint: str, response: Any) -> None:
        self._responses.setdefault(endpoint, []).append(response)

    def get(self, endpoint: str, **params: Any) -> ApiResponse:
        self.calls.append((endpoint, params))
        response = self._responses[endpoint].pop(0)
        if isinstance(response, Exception):
            raise response
        return ApiResponse(data=response, raw=json.dumps(response))

    def calls_to(self, endpoint: str) -> List[Dict[str, Any]]:
        return [params for name, params in self.calls if name == endpoint]


def mock_http(*responses) -> HttpMockSequence:
    """Build an HttpMockSequence from (status, body) pairs; dict bodies are JSON-encoded."""
    sequence = []
    for status, body in responses:
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        sequence.append(({"status": str(status)}, body))
    return HttpMockSequence(sequence)


def format_duration(seconds: int) -> str:
    """Encode whole seconds the way YouTube does, with only the non-zero H/M/S designators."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = ["PT"]
    if hours:
        parts.append(f"{hours}H")
    if minutes:
        parts.append(f"{minutes}M")
    if secs:
        parts.append(f"{secs}S")
    return "".join(parts)
