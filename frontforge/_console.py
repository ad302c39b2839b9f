"""Console output and logging helpers."""

__all__ = (
    "configure_logging",
    "console",
    "log_fail",
    "log_info",
    "log_success",
    "log_warn",
)

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from frontforge.config import LoggingConfig

console = Console()

_TICK = "[bold green]✓[/]"
_INFO = "[cyan]•[/]"
_WARN = "[yellow]![/]"
_FAIL = "[red]x[/]"

_HANDLER_NAME = "frontforge-rich"


def configure_logging(config: "LoggingConfig") -> logging.Logger:
    """Attach a rich handler to the ``frontforge`` logger.

    Calling this more than once replaces the previously attached handler.

    Args:
        config: Verbosity and color settings.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("frontforge")
    logger.setLevel(config.python_level)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)
    handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=False)
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    console.no_color = not config.color
    return logger


def log_success(message: str) -> None:
    """Print a success message with consistent styling."""

    console.print(f"{_TICK} {message}")


def log_info(message: str) -> None:
    """Print an informational message with consistent styling."""

    console.print(f"{_INFO} {message}")


def log_warn(message: str) -> None:
    """Print a warning message with consistent styling."""

    console.print(f"{_WARN} {message}")


def log_fail(message: str) -> None:
    """Print an error message with consistent styling."""

    console.print(f"{_FAIL} {message}")
