"""Frontforge configuration.

The configuration is split into logical groups:

- Option enumerations: one per configuration axis
- ProjectConfig: the immutable description of a project to generate
- Presets: the quick preset and per-framework defaults
- LoggingConfig: console verbosity

Example usage::

    config = ProjectConfig(project_path="my-app", framework=Framework.VUE)

    # Recommended React setup
    config = quick_preset(project_path="my-app")

    # Same choices, switched to Solid
    config = framework_defaults(Framework.SOLID, config)
"""

from frontforge.config._constants import DEFAULT_DEV_PORT, LOG_LEVEL_ENV, NO_COLOR_ENV, TRUE_VALUES
from frontforge.config._logging import LoggingConfig, get_default_log_level
from frontforge.config._options import (
    Animation,
    DataFetching,
    DataViz,
    FormManagement,
    Framework,
    I18n,
    Icons,
    Language,
    PackageManager,
    Routing,
    StateManagement,
    Structure,
    Styling,
    Testing,
    UILibrary,
    Utilities,
    parse_option,
)
from frontforge.config._presets import FRAMEWORK_DEFAULTS, framework_defaults, quick_preset
from frontforge.config._project import OPTION_AXES, ProjectConfig, is_valid_project_name

__all__ = (
    "DEFAULT_DEV_PORT",
    "FRAMEWORK_DEFAULTS",
    "LOG_LEVEL_ENV",
    "NO_COLOR_ENV",
    "OPTION_AXES",
    "TRUE_VALUES",
    "Animation",
    "DataFetching",
    "DataViz",
    "FormManagement",
    "Framework",
    "I18n",
    "Icons",
    "Language",
    "LoggingConfig",
    "PackageManager",
    "ProjectConfig",
    "Routing",
    "StateManagement",
    "Structure",
    "Styling",
    "Testing",
    "UILibrary",
    "Utilities",
    "framework_defaults",
    "get_default_log_level",
    "is_valid_project_name",
    "parse_option",
    "quick_preset",
)
