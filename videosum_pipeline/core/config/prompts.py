"""
Interactive prompts for values missing from the command line.
All reads happen before the first network call.
"""

from datetime import datetime
from typing import Callable

from ..date_window import parse_rfc3339
from ..youtube.channel_resolver import normalize_handle

RFC3339_NOTE = "Note: RFC3339 format required, i.e. 'yyyy-mm-ddTHH:MM:SSZ'"


def channel_name_problem(name: str) -> str:
    """Return a warning for an unusable channel name, or '' if it is fine."""
    if not normalize_handle(name):
        return "Empty name supplied!"
    if not name.isascii() or any(ch.isspace() for ch in name.strip()):
        return "Invalid character supplied!"
    return ""


class Prompter:
    """Asks for a value until a valid one is entered."""

    def __init__(
        self,
        input_func: Callable[[], str] = input,
        output_func: Callable[[str], None] = print
    ):
        self._input = input_func
        self._output = output_func

    def ask_channel(self) -> str:
        while True:
            self._output("Channel name:")
            name = self._input()
            problem = channel_name_problem(name)
            if not problem:
                return name.strip()
            self._output(f"Warning: {problem}")

    def ask_date(self, label: str) -> datetime:
        while True:
            self._output(label)
            text = self._input().strip()
            try:
                return parse_rfc3339(text)
            except ValueError as e:
                self._output(f"Warning: Could not parse timestamp '{text}': {e}")
                self._output(RFC3339_NOTE)
