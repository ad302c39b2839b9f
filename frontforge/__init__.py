"""Frontforge: deterministic scaffolding for frontend projects.

Frontforge turns a declarative :class:`~frontforge.config.ProjectConfig` into a
complete project directory for one of the supported frameworks.

Basic usage:
    from frontforge import ProjectConfig, default_registry, setup_project
    from frontforge.config import Framework, Styling

    result = setup_project(
        ProjectConfig(project_path="my-app", framework=Framework.VUE, styling=Styling.TAILWIND),
        default_registry(),
    )

Preview without writing anything:
    from dataclasses import replace

    from frontforge import quick_preset

    result = setup_project(replace(quick_preset(project_path="my-app"), dry_run=True), default_registry())
    print(result.files)
"""

from frontforge.__metadata__ import __version__
from frontforge.config import ProjectConfig, quick_preset
from frontforge.exceptions import (
    ConfigurationError,
    ExecutableNotFoundError,
    FrontForgeError,
    GenerationError,
    InstallError,
    PathError,
)
from frontforge.generators import GeneratorRegistry, default_registry
from frontforge.project import SetupResult, setup_project
from frontforge.validation import ValidationResult, validate_project

__all__ = (
    "ConfigurationError",
    "ExecutableNotFoundError",
    "FrontForgeError",
    "GenerationError",
    "GeneratorRegistry",
    "InstallError",
    "PathError",
    "ProjectConfig",
    "SetupResult",
    "ValidationResult",
    "__version__",
    "default_registry",
    "quick_preset",
    "setup_project",
    "validate_project",
)
