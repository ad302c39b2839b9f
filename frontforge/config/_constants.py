"""Constants and utility functions for configuration."""

__all__ = (
    "DEFAULT_DEV_PORT",
    "LOG_LEVEL_ENV",
    "NO_COLOR_ENV",
    "TRUE_VALUES",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}
LOG_LEVEL_ENV = "FRONTFORGE_LOG_LEVEL"
NO_COLOR_ENV = "FRONTFORGE_NO_COLOR"
DEFAULT_DEV_PORT = 3000
