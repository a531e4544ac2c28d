"""
Runtime pipeline
Channel resolution -> upload enumeration -> duration aggregation
"""

import logging

from .config.app_config import AppConfig
from .run_result import Failure, RunResult
from .youtube.channel_resolver import ChannelResolver
from .youtube.duration_aggregator import DurationAggregator
from .youtube.errors import VideoSumError
from .youtube.upload_enumerator import UploadEnumerator
from .youtube.youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


def run_pipeline(config: AppConfig, youtube_client: YouTubeClient) -> RunResult:
    """
    Run every stage against the API and return the single result of this run.

    Any terminal error is turned into a Failure holding the raw body of the
    call that failed.
    """
    try:
        logger.info("Querying channel info...")
        channel = ChannelResolver(youtube_client).resolve(config.channel)
        logger.info(f"  Title: {channel.title}")
        logger.info(f"  Channel ID: {channel.channel_id}")

        logger.info("Querying playlist...")
        enumerator = UploadEnumerator(youtube_client)
        uploads = list(enumerator.iter_uploads(channel.uploads_playlist_id, config.page_size))
        logger.info(f"Discovered {len(uploads)} videos in uploads playlist")
    except VideoSumError as e:
        logger.error(f"Pipeline aborted: {e}")
        return Failure(last_raw_response=e.raw, reason=str(e))

    logger.info("Querying video details...")
    return DurationAggregator(youtube_client).aggregate(uploads, config.date_window)
