"""
YouTube channel runtime sum
Adds up the duration of every video a channel published in a date window.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from videosum_pipeline.core.config import AppConfig, ConfigLoader
from videosum_pipeline.core.config.config_loader import ASK, ConfigValidationError
from videosum_pipeline.core.config.prompts import Prompter
from videosum_pipeline.core.pipeline import run_pipeline
from videosum_pipeline.core.report import ReportWriter
from videosum_pipeline.core.run_result import Success
from videosum_pipeline.core.youtube import YouTubeClient

DESCRIPTION = "YouTube API tool for calculating the video runtime sum of a channel."

EPILOG = """\
Output:
  The aggregated total of video duration is displayed interactively.
  A full list of the videos is saved to the output file in CSV format, or in
  case the process could not complete, it will contain the last intermediate
  JSON response to help figuring out what went wrong.
"""

DEFAULT_LOG_FILE = Path("logs") / "app.log"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line flags."""
    parser = argparse.ArgumentParser(
        prog="yt-videosum",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("channel", nargs="?", default=None,
                        help="Human-readable name of the channel, with or without the '@' prefix. "
                             "If omitted, it will be asked interactively.")
    parser.add_argument("-k", "--key", dest="api_key", default=None,
                        help="YT API key supplied in plain text. "
                             "If empty, the key is read from the key file ('config/key.txt').")
    parser.add_argument("-s", "--start", dest="start_date", nargs="?", const=ASK, default=None,
                        help="Only count videos published at or after this RFC3339 timestamp, "
                             "i.e. 'yyyy-mm-ddTHH:MM:SSZ'. Asked interactively if the value is empty.")
    parser.add_argument("-e", "--end", dest="end_date", nargs="?", const=ASK, default=None,
                        help="Only count videos published at or before this RFC3339 timestamp. "
                             "Asked interactively if the value is empty.")
    parser.add_argument("-o", "--output", dest="output", default=None,
                        help="Report file (default: output.txt).")
    parser.add_argument("--config", dest="config_path", type=Path, default=None,
                        help="Optional YAML settings file.")
    parser.add_argument("--page-size", dest="page_size", type=int, default=None,
                        help="Playlist items requested per page, 1-50 (default: 50).")
    parser.add_argument("--log-file", dest="log_file", type=Path, default=DEFAULT_LOG_FILE,
                        help="Log file, appended to (default: logs/app.log).")
    return parser.parse_args(argv)


def setup_logging(log_file: Path = DEFAULT_LOG_FILE) -> logging.Logger:
    """Configure logging with file and console handlers."""
    log_file.parent.mkdir(parents=True, exist_ok=True)

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.INFO,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    return logging.getLogger(__name__)


def load_configuration(
    logger: logging.Logger,
    args: argparse.Namespace,
    prompter: Optional[Prompter] = None
) -> AppConfig:
    """Load and validate run configuration."""
    if args.config_path is not None:
        logger.info(f"Loading configuration from: {args.config_path}")

    cli_values = {
        "api_key": args.api_key,
        "channel": args.channel,
        "start_date": args.start_date,
        "end_date": args.end_date,
        "output": args.output,
        "page_size": args.page_size,
    }

    try:
        loader = ConfigLoader(args.config_path, prompter)
        config = loader.load(cli_values)
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Could not read configuration: {e}")
        sys.exit(1)

    logger.info("Configuration validated successfully")
    logger.info(f"  Channel: @{config.channel}")
    logger.info(f"  Start Date: {config.start_date.isoformat() if config.start_date else 'unbounded'}")
    logger.info(f"  End Date: {config.end_date.isoformat() if config.end_date else 'unbounded'}")
    logger.info(f"  Output: {config.output_path}")

    return config


def main(
    argv: Optional[List[str]] = None,
    youtube_client: Optional[YouTubeClient] = None,
    prompter: Optional[Prompter] = None
) -> int:
    """Main execution entry for the runtime sum."""
    args = parse_args(argv)
    logger = setup_logging(args.log_file)

    logger.info("="*60)
    logger.info("YouTube Channel Runtime Sum")
    logger.info("="*60)

    config = load_configuration(logger, args, prompter)

    if youtube_client is None:
        youtube_client = YouTubeClient(config.api_key)

    result = run_pipeline(config, youtube_client)

    try:
        ReportWriter(config.output_path).write(result)
    except OSError as e:
        logger.error(f"Could not write report to {config.output_path}: {e}")
        return 1

    if isinstance(result, Success):
        logger.info("="*60)
        logger.info(f"Runtime sum complete: {len(result.records)} videos, {result.total_seconds} seconds")
        logger.info("="*60)
        return 0

    return 1


if __name__ == "__main__":
    sys.exit(main())
