"""Project configuration."""

import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

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
)

__all__ = ("OPTION_AXES", "ProjectConfig", "is_valid_project_name")

_PROJECT_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")

OPTION_AXES: tuple[str, ...] = (
    "styling",
    "routing",
    "state_management",
    "data_fetching",
    "testing",
    "ui_library",
    "form_management",
    "animation",
    "icons",
    "data_viz",
    "utilities",
    "i18n",
)
"""Configuration fields that are checked against a framework's capability set."""


def is_valid_project_name(name: str) -> bool:
    """Check that a project name only uses letters, digits, hyphens and underscores.

    Returns:
        True if the name is usable as a package name and directory name.
    """
    return bool(_PROJECT_NAME_RE.match(name))


@dataclass(frozen=True)
class ProjectConfig:
    """Everything needed to generate one project.

    The value is immutable. Derived values such as the resolved absolute path
    are produced with :func:`dataclasses.replace`.

    Attributes:
        project_name: Name used in the manifest and generated text. Derived from
            ``project_path`` when empty.
        project_path: Target directory, absolute or relative to the working directory.
        language: Source language; selects extensions and type annotations.
        framework: Framework whose generator handles the remaining fields.
        styling: Styling approach.
        routing: Routing library.
        state_management: State management library.
        data_fetching: Data fetching library.
        testing: Test runner.
        ui_library: Component library.
        form_management: Form or validation library.
        animation: Animation library.
        icons: Icon set.
        data_viz: Charting library.
        utilities: Date or utility library.
        i18n: Internationalization library.
        structure: Directory layout.
        package_manager: Package manager used for the install stage.
        dry_run: Generate in memory only; write nothing and run nothing.
        auto_install: Install dependencies after writing the project.
    """

    project_name: str = ""
    project_path: "str | Path" = ""
    language: Language = Language.TYPESCRIPT
    framework: Framework = Framework.REACT
    styling: Styling = Styling.VANILLA
    routing: Routing = Routing.NONE
    state_management: StateManagement = StateManagement.NONE
    data_fetching: DataFetching = DataFetching.NONE
    testing: Testing = Testing.NONE
    ui_library: UILibrary = UILibrary.NONE
    form_management: FormManagement = FormManagement.NONE
    animation: Animation = Animation.NONE
    icons: Icons = Icons.NONE
    data_viz: DataViz = DataViz.NONE
    utilities: Utilities = Utilities.NONE
    i18n: I18n = I18n.NONE
    structure: Structure = Structure.FEATURE_BASED
    package_manager: "PackageManager | None" = PackageManager.NPM
    dry_run: bool = False
    auto_install: bool = False

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    def selected_options(self) -> dict[str, Any]:
        """Return the capability-checked axes and their current values."""
        return {name: getattr(self, name) for name in OPTION_AXES}

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to plain values for display or templating.

        Returns:
            Dictionary of field name to enum value, string or bool.
        """
        data: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, Path):
                value = str(value)
            elif hasattr(value, "value"):
                value = value.value
            data[item.name] = value
        return data
