"""
Duration Aggregator
Fetches durations for the enumerated uploads in batches and sums them.
"""

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from ..date_window import DateWindow
from ..run_result import Failure, RunResult, Success
from .duration import parse_duration_seconds
from .errors import DurationParseError, MalformedResponseError, VideoSumError
from .video_record import VideoRecord
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)

# videos.list accepts at most 50 ids per request.
MAX_IDS_PER_REQUEST = 50


class DurationAggregator:
    """
    Service responsible for turning enumerated uploads into a runtime total.

    Responsibilities:
    - Drop uploads published outside the date window.
    - Batch video IDs into videos.list requests.
    - Parse durations and keep a running total in enumeration order.
    """

    def __init__(self, youtube_client: YouTubeClient, batch_size: int = MAX_IDS_PER_REQUEST):
        if not 1 <= batch_size <= MAX_IDS_PER_REQUEST:
            raise ValueError(
                f"batch_size must be between 1 and {MAX_IDS_PER_REQUEST}, got {batch_size}"
            )
        self._client = youtube_client
        self._batch_size = batch_size

    def aggregate(
        self,
        uploads: Iterable[Tuple[str, datetime]],
        window: Optional[DateWindow] = None,
    ) -> RunResult:
        """
        Fetch, filter and sum the durations of the given uploads.

        Args:
            uploads: (video_id, published_at) pairs in enumeration order
            window: Optional inclusive publish date window

        Returns:
            RunResult: Success with every included record, or Failure carrying
            the raw body of the first failing batch. Records of earlier
            batches are not part of a Failure.
        """
        window = window or DateWindow()
        included = [(video_id, published_at) for video_id, published_at in uploads
                    if window.contains(published_at)]
        logger.info(f"{len(included)} videos fall inside the date window")

        records: List[VideoRecord] = []
        total_seconds = 0
        total_batches = (len(included) + self._batch_size - 1) // self._batch_size

        for i in range(0, len(included), self._batch_size):
            batch = included[i:i + self._batch_size]
            batch_number = i // self._batch_size + 1
            logger.info(
                f"Processing batch {batch_number}/{total_batches}: "
                f"Videos {i} to {min(i + self._batch_size, len(included))}"
            )

            try:
                batch_records = self._fetch_batch(batch)
            except VideoSumError as e:
                logger.error(f"Batch {batch_number} failed: {e}")
                return Failure(last_raw_response=e.raw, reason=str(e))

            for record in batch_records:
                records.append(record)
                total_seconds += record.duration_seconds

        return Success(records=records, total_seconds=total_seconds)

    def _fetch_batch(self, batch: List[Tuple[str, datetime]]) -> List[VideoRecord]:
        """Low-level videos.list call for one batch; preserves the batch order."""
        response = self._client.get(
            "videos",
            part="snippet,contentDetails",
            id=",".join(video_id for video_id, _ in batch),
        )

        items = response.data.get("items")
        if not isinstance(items, list):
            raise MalformedResponseError("Video details response has no item list", raw=response.raw)

        by_id: Dict[str, dict] = {}
        for item in items:
            if not isinstance(item, dict) or not item.get("id"):
                raise MalformedResponseError("Video details item without an id", raw=response.raw)
            by_id[item["id"]] = item

        records = []
        for video_id, published_at in batch:
            item = by_id.get(video_id)
            if item is None:
                logger.warning(f"Video {video_id} missing from details response, skipping")
                continue

            raw_duration = (item.get("contentDetails") or {}).get("duration")
            try:
                duration_seconds = parse_duration_seconds(raw_duration)
            except ValueError:
                raise DurationParseError(video_id, raw_duration, raw=response.raw)

            records.append(VideoRecord(
                video_id=video_id,
                title=(item.get("snippet") or {}).get("title") or "",
                published_at=published_at,
                duration_seconds=duration_seconds,
            ))
        return records
