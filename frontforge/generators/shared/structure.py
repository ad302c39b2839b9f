"""Directory layout."""

from typing import TYPE_CHECKING

from frontforge.config import Framework, Structure
from frontforge.generators.shared.files import script_ext
from frontforge.generators.shared.templates import build_context, render_template

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("directory_layout", "features_dir", "services_dir", "structure_files")

_FEATURE_BASED: dict[Framework, tuple[str, ...]] = {
    Framework.NEXTJS: ("src", "src/app", "public", "src/features", "src/components", "src/lib", "src/hooks"),
    Framework.ASTRO: ("src", "src/pages", "public", "src/features", "src/components", "src/layouts", "src/styles", "src/lib"),
    Framework.SVELTEKIT: (
        "src",
        "src/routes",
        "static",
        "src/lib",
        "src/lib/features",
        "src/lib/components",
        "src/lib/stores",
    ),
}

_LAYER_BASED: dict[Framework, tuple[str, ...]] = {
    Framework.NEXTJS: ("src", "src/app", "public", "src/components", "src/services", "src/lib", "src/hooks", "src/types"),
    Framework.ASTRO: ("src", "src/pages", "public", "src/components", "src/layouts", "src/styles", "src/services", "src/lib"),
    Framework.SVELTEKIT: (
        "src",
        "src/routes",
        "static",
        "src/lib",
        "src/lib/components",
        "src/lib/services",
        "src/lib/stores",
        "src/lib/types",
    ),
}

_VITE_FEATURE_BASED = (
    "src",
    "public",
    "src/features",
    "src/features/auth",
    "src/features/dashboard",
    "src/components",
    "src/lib",
    "src/hooks",
)
_VITE_LAYER_BASED = (
    "src",
    "public",
    "src/components",
    "src/pages",
    "src/services",
    "src/utils",
    "src/hooks",
    "src/types",
    "src/lib",
)


def directory_layout(config: "ProjectConfig") -> tuple[str, ...]:
    """Return the project directories in creation order."""
    feature_based = config.structure is Structure.FEATURE_BASED
    if config.framework.is_meta:
        table = _FEATURE_BASED if feature_based else _LAYER_BASED
        return table[config.framework]
    return _VITE_FEATURE_BASED if feature_based else _VITE_LAYER_BASED


def features_dir(config: "ProjectConfig") -> "str | None":
    """Return the features directory, or None for layer-based projects."""
    if config.structure is not Structure.FEATURE_BASED:
        return None
    return "src/lib/features" if config.framework is Framework.SVELTEKIT else "src/features"


def services_dir(config: "ProjectConfig") -> str:
    """Return where shared service modules such as the API client live."""
    if config.structure is Structure.FEATURE_BASED:
        return "src/lib"
    return "src/lib/services" if config.framework is Framework.SVELTEKIT else "src/services"


def structure_files(config: "ProjectConfig") -> dict[str, str]:
    """Return the utility module and, for feature-based layouts, the features guide."""
    context = build_context(config, features_dir=features_dir(config))
    files = {f"src/lib/utils.{script_ext(config)}": render_template("common/utils.js.j2", context)}
    readme_dir = features_dir(config)
    if readme_dir is not None:
        files[f"{readme_dir}/README.md"] = render_template("common/features-README.md.j2", context)
    return files
