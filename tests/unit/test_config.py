"""Tests for frontforge.config module."""

import logging
from dataclasses import FrozenInstanceError, replace
from pathlib import Path

import pytest

from frontforge.config import (
    OPTION_AXES,
    DataFetching,
    Framework,
    Language,
    LoggingConfig,
    PackageManager,
    ProjectConfig,
    Routing,
    StateManagement,
    Structure,
    Styling,
    Testing,
    UILibrary,
    Utilities,
    framework_defaults,
    is_valid_project_name,
    parse_option,
    quick_preset,
)
from frontforge.exceptions import ConfigurationError
from frontforge.generators import COMPATIBILITY

# =====================================================
# Option parsing
# =====================================================


@pytest.mark.parametrize(
    ("enum_cls", "text", "expected"),
    [
        (Framework, "React", Framework.REACT),
        (Framework, "react", Framework.REACT),
        (Framework, "next.js", Framework.NEXTJS),
        (Framework, "next", Framework.NEXTJS),
        (Framework, "SVELTEKIT", Framework.SVELTEKIT),
        (Language, "ts", Language.TYPESCRIPT),
        (Styling, "css-modules", Styling.CSS_MODULES),
        (Styling, "tailwind", Styling.TAILWIND),
        (Styling, "Sass/SCSS", Styling.SASS),
        (Routing, "tanstack", Routing.TANSTACK_ROUTER),
        (StateManagement, "redux", StateManagement.REDUX_TOOLKIT),
        (DataFetching, "TanStack Query", DataFetching.TANSTACK_QUERY),
        (UILibrary, "shadcn", UILibrary.SHADCN),
        (Utilities, "Day.js", Utilities.DAYJS),
        (Testing, "none", Testing.NONE),
        (PackageManager, "pnpm", PackageManager.PNPM),
    ],
)
def test_parse_option(enum_cls: type, text: str, expected: object) -> None:
    assert parse_option(enum_cls, text) is expected


def test_parse_option_passes_members_through() -> None:
    assert parse_option(Styling, Styling.SASS) is Styling.SASS


def test_parse_option_unknown_value() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        parse_option(Styling, "less")

    assert exc_info.value.axis == "Styling"
    assert exc_info.value.value == "less"
    assert "Tailwind CSS" in str(exc_info.value)


def test_framework_family() -> None:
    assert {framework for framework in Framework if framework.is_meta} == {
        Framework.NEXTJS,
        Framework.ASTRO,
        Framework.SVELTEKIT,
    }
    assert Framework.NEXTJS.slug == "nextjs"


# =====================================================
# ProjectConfig
# =====================================================


def test_project_config_defaults() -> None:
    config = ProjectConfig()

    assert config.framework is Framework.REACT
    assert config.language is Language.TYPESCRIPT
    assert config.styling is Styling.VANILLA
    assert config.structure is Structure.FEATURE_BASED
    assert config.package_manager is PackageManager.NPM
    assert all(value.value == "None" for axis, value in config.selected_options().items() if axis != "styling")
    assert config.dry_run is False
    assert config.auto_install is False


def test_project_config_is_immutable() -> None:
    config = ProjectConfig()
    with pytest.raises(FrozenInstanceError):
        config.framework = Framework.VUE  # type: ignore[misc]


def test_project_config_selected_options_lists_every_axis() -> None:
    assert tuple(ProjectConfig().selected_options()) == OPTION_AXES


def test_project_config_to_dict_uses_labels() -> None:
    data = ProjectConfig(project_path=Path("/home/dev/app"), framework=Framework.NEXTJS).to_dict()

    assert data["framework"] == "Next.js"
    assert data["project_path"] == str(Path("/home/dev/app"))
    assert data["styling"] == "Vanilla CSS"
    assert data["dry_run"] is False


@pytest.mark.parametrize(("name", "valid"), [("my-app", True), ("app_2", True), ("my app", False), ("../x", False), ("", False)])
def test_is_valid_project_name(name: str, valid: bool) -> None:
    assert is_valid_project_name(name) is valid


# =====================================================
# Presets
# =====================================================


def test_quick_preset() -> None:
    config = quick_preset(project_path="my-app")

    assert config.framework is Framework.REACT
    assert config.language is Language.TYPESCRIPT
    assert config.styling is Styling.TAILWIND
    assert config.routing is Routing.REACT_ROUTER
    assert config.state_management is StateManagement.ZUSTAND
    assert config.data_fetching is DataFetching.TANSTACK_QUERY
    assert config.testing is Testing.VITEST
    assert config.project_path == "my-app"
    COMPATIBILITY[Framework.REACT].check(config)


@pytest.mark.parametrize("framework", list(Framework))
def test_framework_defaults_are_supported(framework: Framework) -> None:
    config = framework_defaults(framework)

    assert config.framework is framework
    COMPATIBILITY[framework].check(config)


def test_framework_defaults_keeps_supported_shared_choices() -> None:
    config = framework_defaults(Framework.VUE)

    assert config.routing is Routing.VUE_ROUTER
    assert config.state_management is StateManagement.PINIA
    assert config.styling is Styling.TAILWIND
    assert config.testing is Testing.VITEST
    assert config.utilities is Utilities.DATE_FNS


def test_framework_defaults_clears_axes_the_framework_hides() -> None:
    config = framework_defaults(Framework.ASTRO)

    assert config.ui_library is UILibrary.NONE
    assert config.utilities is Utilities.NONE
    assert config.state_management is StateManagement.NONE


def test_framework_defaults_falls_back_to_vanilla_css() -> None:
    base = quick_preset()

    config = framework_defaults(Framework.SVELTE, replace(base, styling=Styling.STYLED_COMPONENTS))

    assert config.styling is Styling.VANILLA


def test_framework_defaults_leaves_base_untouched() -> None:
    base = quick_preset(project_name="keep")
    framework_defaults(Framework.SOLID, base)

    assert base.framework is Framework.REACT
    assert base.state_management is StateManagement.ZUSTAND


# =====================================================
# LoggingConfig
# =====================================================


def test_logging_config_defaults() -> None:
    config = LoggingConfig()

    assert config.level == "normal"
    assert config.color is True
    assert config.python_level == logging.INFO


def test_logging_config_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTFORGE_LOG_LEVEL", "VERBOSE")

    config = LoggingConfig()

    assert config.level == "verbose"
    assert config.python_level == logging.DEBUG


def test_logging_config_invalid_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTFORGE_LOG_LEVEL", "loud")

    assert LoggingConfig().level == "normal"


def test_logging_config_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTFORGE_LOG_LEVEL", "verbose")

    assert LoggingConfig(level="quiet").python_level == logging.WARNING


def test_logging_config_no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRONTFORGE_NO_COLOR", "1")

    assert LoggingConfig().color is False
