"""Preset configurations."""

from dataclasses import replace
from typing import TYPE_CHECKING, Any

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
from frontforge.config._project import OPTION_AXES, ProjectConfig

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ("FRAMEWORK_DEFAULTS", "framework_defaults", "quick_preset")

FRAMEWORK_DEFAULTS: dict[Framework, dict[str, Any]] = {
    Framework.REACT: {
        "routing": Routing.REACT_ROUTER,
        "state_management": StateManagement.ZUSTAND,
        "ui_library": UILibrary.SHADCN,
        "form_management": FormManagement.REACT_HOOK_FORM,
        "data_fetching": DataFetching.TANSTACK_QUERY,
        "animation": Animation.FRAMER_MOTION,
        "icons": Icons.HEROICONS,
        "i18n": I18n.NONE,
    },
    Framework.VUE: {
        "routing": Routing.VUE_ROUTER,
        "state_management": StateManagement.PINIA,
        "ui_library": UILibrary.VUETIFY,
        "form_management": FormManagement.VEE_VALIDATE,
        "data_fetching": DataFetching.AXIOS,
        "animation": Animation.AUTO_ANIMATE,
        "icons": Icons.LUCIDE,
        "i18n": I18n.VUE_I18N,
    },
    Framework.ANGULAR: {
        "language": Language.TYPESCRIPT,
        "routing": Routing.ANGULAR_ROUTER,
        "state_management": StateManagement.NGRX,
        "ui_library": UILibrary.ANGULAR_MATERIAL,
        "form_management": FormManagement.NONE,
        "data_fetching": DataFetching.FETCH_API,
        "animation": Animation.NONE,
        "icons": Icons.NONE,
        "i18n": I18n.NONE,
    },
    Framework.SVELTE: {
        "routing": Routing.NONE,
        "state_management": StateManagement.SVELTE_STORES,
        "ui_library": UILibrary.NONE,
        "form_management": FormManagement.NONE,
        "data_fetching": DataFetching.FETCH_API,
        "animation": Animation.AUTO_ANIMATE,
        "icons": Icons.LUCIDE,
        "i18n": I18n.NONE,
    },
    Framework.SOLID: {
        "routing": Routing.SOLID_ROUTER,
        "state_management": StateManagement.SOLID_STORES,
        "ui_library": UILibrary.NONE,
        "form_management": FormManagement.NONE,
        "data_fetching": DataFetching.FETCH_API,
        "animation": Animation.AUTO_ANIMATE,
        "icons": Icons.LUCIDE,
        "i18n": I18n.NONE,
    },
    Framework.VANILLA: {
        "routing": Routing.NONE,
        "state_management": StateManagement.NONE,
        "ui_library": UILibrary.NONE,
        "form_management": FormManagement.NONE,
        "data_fetching": DataFetching.FETCH_API,
        "animation": Animation.NONE,
        "icons": Icons.NONE,
        "i18n": I18n.NONE,
    },
    Framework.NEXTJS: {
        "routing": Routing.NEXTJS_APP_ROUTER,
        "state_management": StateManagement.NONE,
        "data_fetching": DataFetching.FETCH_API,
    },
    Framework.ASTRO: {
        "routing": Routing.ASTRO_PAGES,
        "state_management": StateManagement.NONE,
        "data_fetching": DataFetching.NONE,
    },
    Framework.SVELTEKIT: {
        "routing": Routing.SVELTEKIT,
        "state_management": StateManagement.SVELTE_STORES,
        "data_fetching": DataFetching.FETCH_API,
    },
}
"""Per-framework choices applied when switching a configuration to that framework."""


def quick_preset(project_name: str = "", project_path: "str | Path" = "") -> ProjectConfig:
    """Return the recommended React + TypeScript setup.

    Args:
        project_name: Project name, derived from the path when empty.
        project_path: Target directory.

    Returns:
        A complete configuration ready for :func:`frontforge.project.setup_project`.
    """
    return ProjectConfig(
        project_name=project_name,
        project_path=project_path,
        language=Language.TYPESCRIPT,
        framework=Framework.REACT,
        styling=Styling.TAILWIND,
        routing=Routing.REACT_ROUTER,
        state_management=StateManagement.ZUSTAND,
        data_fetching=DataFetching.TANSTACK_QUERY,
        testing=Testing.VITEST,
        ui_library=UILibrary.SHADCN,
        form_management=FormManagement.REACT_HOOK_FORM,
        animation=Animation.FRAMER_MOTION,
        icons=Icons.HEROICONS,
        data_viz=DataViz.NONE,
        utilities=Utilities.DATE_FNS,
        i18n=I18n.NONE,
        structure=Structure.FEATURE_BASED,
        package_manager=PackageManager.NPM,
    )


def framework_defaults(framework: Framework, base: "ProjectConfig | None" = None) -> ProjectConfig:
    """Re-target a configuration at ``framework``.

    Framework-specific axes take the framework's defaults. Shared axes keep the
    value from ``base`` when the framework supports it and fall back to
    ``None`` (or ``Vanilla CSS`` for styling) otherwise.

    Args:
        framework: The framework to switch to.
        base: The configuration to start from. Defaults to :func:`quick_preset`.

    Returns:
        A new configuration; ``base`` is left untouched.
    """
    from frontforge.generators.capabilities import COMPATIBILITY

    base = base or quick_preset()
    capability = COMPATIBILITY[framework]
    changes: dict[str, Any] = {"framework": framework}
    for axis in OPTION_AXES:
        allowed = capability.allowed(axis)
        value = getattr(base, axis)
        if allowed is not None and (value in allowed or value.value == "None"):
            continue
        changes[axis] = Styling.VANILLA if axis == "styling" else type(value)("None")
    changes.update(FRAMEWORK_DEFAULTS[framework])
    return replace(base, **changes)
