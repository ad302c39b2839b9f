"""Logging configuration."""

import logging
import os
from dataclasses import dataclass, field
from typing import Literal

from frontforge.config._constants import LOG_LEVEL_ENV, NO_COLOR_ENV, TRUE_VALUES

__all__ = ("LoggingConfig", "get_default_log_level")


def get_default_log_level() -> "Literal['quiet', 'normal', 'verbose']":
    """Get default log level from environment variable.

    Checks FRONTFORGE_LOG_LEVEL environment variable.
    Falls back to "normal" if not set or invalid.

    Returns:
        The log level from environment or "normal" default.
    """
    env_level = os.getenv(LOG_LEVEL_ENV, "").lower()
    match env_level:
        case "quiet" | "normal" | "verbose":
            return env_level
        case _:
            return "normal"


@dataclass
class LoggingConfig:
    """Logging configuration for console output.

    Attributes:
        level: Logging verbosity level.
            - "quiet": Warnings and errors only
            - "normal": Standard progress messages (default)
            - "verbose": Detailed debugging information
            Can also be set via FRONTFORGE_LOG_LEVEL environment variable.
            Precedence: explicit config > env var > default ("normal")
        color: Emit colored output. Disabled when FRONTFORGE_NO_COLOR is truthy.
        show_install_output: Echo package manager output while installing.
    """

    level: "Literal['quiet', 'normal', 'verbose']" = field(default_factory=get_default_log_level)
    color: bool = field(default_factory=lambda: os.getenv(NO_COLOR_ENV, "") not in TRUE_VALUES)
    show_install_output: bool = True

    @property
    def python_level(self) -> int:
        """Map the verbosity level onto a :mod:`logging` level."""
        match self.level:
            case "quiet":
                return logging.WARNING
            case "verbose":
                return logging.DEBUG
            case _:
                return logging.INFO
