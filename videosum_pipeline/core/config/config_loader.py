"""
Configuration Loader
Merges command line values, an optional YAML settings file, the API key
file and interactive prompts into a validated AppConfig.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..date_window import parse_rfc3339
from ..youtube.channel_resolver import normalize_handle
from .app_config import AppConfig
from .prompts import Prompter, channel_name_problem

logger = logging.getLogger(__name__)

DEFAULT_KEY_FILE = Path("config/key.txt")
DEFAULT_OUTPUT = "output.txt"
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 50
MAX_KEY_FILE_BYTES = 128

# An empty date value means "ask for it interactively".
ASK = ""


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigLoader:
    """
    Loads and validates run configuration.

    Responsibilities:
    - Read the optional YAML settings file
    - Let command line values take precedence over file values
    - Fall back to the key file for the API key
    - Prompt for a missing channel or for dates requested interactively
    - Return validated AppConfig instance
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        prompter: Optional[Prompter] = None
    ):
        """
        Initialize ConfigLoader.

        Args:
            config_path: Path to YAML settings file (optional)
            prompter: Source of interactive answers (default: terminal)
        """
        self._config_path = config_path
        self._prompter = prompter or Prompter()

    def load(self, cli_values: Optional[Dict[str, Any]] = None) -> AppConfig:
        """
        Load and validate configuration.

        Args:
            cli_values: Values given on the command line; None means "not given"

        Returns:
            AppConfig: Validated configuration object

        Raises:
            ConfigValidationError: If configuration is invalid
        """
        config_data = self._load_yaml()
        for key, value in (cli_values or {}).items():
            if value is not None:
                config_data[key] = value

        api_key = self._validate_api_key(config_data)
        channel = self._validate_channel(config_data)
        start_date = self._validate_date(config_data, "start_date", "Filter to dates starting from:")
        end_date = self._validate_date(config_data, "end_date", "Filter to dates ending at:")
        page_size = self._validate_page_size(config_data)
        output_path = self._validate_output(config_data)

        if start_date is not None and end_date is not None and start_date > end_date:
            raise ConfigValidationError(
                f"Start date {start_date.isoformat()} is after end date {end_date.isoformat()}"
            )

        return AppConfig(
            api_key=api_key,
            channel=channel,
            start_date=start_date,
            end_date=end_date,
            output_path=output_path,
            page_size=page_size
        )

    def _load_yaml(self) -> Dict[str, Any]:
        """Load YAML file and return parsed data ({} when no file is configured)."""
        if self._config_path is None:
            return {}

        if not self._config_path.exists():
            raise ConfigValidationError(
                f"Configuration file not found: {self._config_path}"
            )

        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML syntax: {e}")

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigValidationError(
                "Configuration must be a YAML mapping/dictionary"
            )

        return dict(data)

    def _validate_api_key(self, config: Dict[str, Any]) -> str:
        """Validate api_key field, reading the key file when it is absent."""
        api_key = config.get("api_key")

        if api_key is None:
            key_file = Path(config.get("key_file") or DEFAULT_KEY_FILE)
            logger.info(f"No API key supplied, trying '{key_file}' file...")
            api_key = self._read_key_file(key_file)
            logger.info("Successfully loaded API key.")

        if not isinstance(api_key, str):
            raise ConfigValidationError(
                f"Field 'api_key' must be a string, got {type(api_key).__name__}"
            )

        if not api_key.strip():
            raise ConfigValidationError("Field 'api_key' cannot be empty")

        return api_key.strip()

    def _read_key_file(self, key_file: Path) -> str:
        """Return the first whitespace-delimited token of the key file's first line."""
        if not key_file.exists():
            raise ConfigValidationError(f"API key file not found: {key_file}")

        if not key_file.is_file():
            raise ConfigValidationError(f"API key file is not a regular file: {key_file}")

        size = key_file.stat().st_size
        if size == 0:
            raise ConfigValidationError(f"API key file is empty: {key_file}")
        if size >= MAX_KEY_FILE_BYTES:
            raise ConfigValidationError(
                f"API key file looks too large to only contain the key [len={size}]"
            )

        with open(key_file, 'r', encoding='utf-8') as f:
            first_line = f.readline()

        tokens = first_line.split()
        if not tokens:
            raise ConfigValidationError(f"API key file has no key on its first line: {key_file}")
        return tokens[0]

    def _validate_channel(self, config: Dict[str, Any]) -> str:
        """Validate channel field, asking for it when it is absent."""
        channel = config.get("channel")

        if channel is None:
            return normalize_handle(self._prompter.ask_channel())

        if not isinstance(channel, str):
            raise ConfigValidationError(
                f"Field 'channel' must be a string, got {type(channel).__name__}"
            )

        problem = channel_name_problem(channel)
        if problem:
            raise ConfigValidationError(f"Field 'channel' is invalid: {problem}")

        return normalize_handle(channel)

    def _validate_date(self, config: Dict[str, Any], field: str, label: str) -> Optional[datetime]:
        """Validate an optional RFC3339 date field; an empty value is asked interactively."""
        value = config.get(field)

        if value is None:
            return None

        # YAML turns unquoted timestamps into datetime objects already.
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)

        if not isinstance(value, str):
            raise ConfigValidationError(
                f"Field '{field}' must be an RFC3339 timestamp, got {type(value).__name__}"
            )

        if value.strip() == ASK:
            return self._prompter.ask_date(label)

        try:
            return parse_rfc3339(value)
        except ValueError as e:
            raise ConfigValidationError(f"Could not parse {field} '{value}': {e}")

    def _validate_page_size(self, config: Dict[str, Any]) -> int:
        """Validate page_size field (optional)."""
        page_size = config.get("page_size", DEFAULT_PAGE_SIZE)

        if isinstance(page_size, bool) or not isinstance(page_size, int):
            raise ConfigValidationError(
                f"Field 'page_size' must be an integer, got {type(page_size).__name__}"
            )

        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ConfigValidationError(
                f"Field 'page_size' must be between 1 and {MAX_PAGE_SIZE}, got {page_size}"
            )

        return page_size

    def _validate_output(self, config: Dict[str, Any]) -> Path:
        """Validate output field (optional)."""
        output = config.get("output", DEFAULT_OUTPUT)

        if not isinstance(output, (str, Path)):
            raise ConfigValidationError(
                f"Field 'output' must be a path, got {type(output).__name__}"
            )

        if not str(output).strip():
            raise ConfigValidationError("Field 'output' cannot be empty")

        return Path(str(output).strip())
