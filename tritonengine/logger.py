"""Coloured console logging with severity labels."""

from __future__ import annotations

from enum import Enum

RESET = "\033[0m"


class LogLevel(Enum):
    """Severity of a log message, with its label and terminal colour."""

    INFO = ("INFO", "\033[32m")
    WARNING = ("WARNING", "\033[33m")
    ERROR = ("ERROR", "\033[31m")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


def log(message: str, level: LogLevel = LogLevel.INFO) -> None:
    """Print a message to standard output, coloured and labelled by level."""
    print(f"{level.color}[{level.label}]{message}{RESET}")