"""Well-known artifact paths.

Every function here is a pure function of the configuration's framework and
language, so the generators and the validator agree on file names.
"""

from typing import TYPE_CHECKING

from frontforge.config import Framework

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = (
    "bundler_config_path",
    "component_ext",
    "framework_package",
    "html_entry_path",
    "jsx_ext",
    "main_entry_path",
    "root_component_path",
    "script_ext",
    "typecheck_config_paths",
)

_FRAMEWORK_PACKAGES: dict[Framework, str] = {
    Framework.REACT: "react",
    Framework.VUE: "vue",
    Framework.ANGULAR: "@angular/core",
    Framework.SVELTE: "svelte",
    Framework.SOLID: "solid-js",
    Framework.VANILLA: "vite",
    Framework.NEXTJS: "next",
    Framework.ASTRO: "astro",
    Framework.SVELTEKIT: "@sveltejs/kit",
}

_JSX_FRAMEWORKS = {Framework.REACT, Framework.SOLID, Framework.NEXTJS}


def script_ext(config: "ProjectConfig") -> str:
    """Plain module extension: ``ts`` or ``js``."""
    return "ts" if config.is_typescript else "js"


def jsx_ext(config: "ProjectConfig") -> str:
    return "tsx" if config.is_typescript else "jsx"


def component_ext(config: "ProjectConfig") -> str:
    """Extension for component files.

    Single-file component formats keep their own extension, JSX frameworks use
    ``jsx``/``tsx`` and everything else uses plain script modules.
    """
    match config.framework:
        case Framework.VUE:
            return "vue"
        case Framework.SVELTE | Framework.SVELTEKIT:
            return "svelte"
        case Framework.ASTRO:
            return "astro"
        case framework if framework in _JSX_FRAMEWORKS:
            return jsx_ext(config)
        case _:
            return script_ext(config)


def main_entry_path(config: "ProjectConfig") -> "str | None":
    """Return the browser entry script, or None for frameworks that own their entry."""
    if config.framework.is_meta:
        return None
    ext = jsx_ext(config) if config.framework in _JSX_FRAMEWORKS else script_ext(config)
    return f"src/main.{ext}"


def root_component_path(config: "ProjectConfig") -> str:
    match config.framework:
        case Framework.ANGULAR:
            return "src/app/app.component.ts"
        case Framework.NEXTJS:
            return f"src/app/page.{jsx_ext(config)}"
        case Framework.ASTRO:
            return "src/pages/index.astro"
        case Framework.SVELTEKIT:
            return "src/routes/+page.svelte"
        case _:
            return f"src/App.{component_ext(config)}"


def html_entry_path(config: "ProjectConfig") -> "str | None":
    """Return the HTML shell, or None when the framework renders it from components."""
    if config.framework is Framework.SVELTEKIT:
        return "src/app.html"
    if config.framework.is_meta:
        return None
    return "index.html"


def bundler_config_path(config: "ProjectConfig") -> str:
    match config.framework:
        case Framework.NEXTJS:
            return "next.config.ts" if config.is_typescript else "next.config.mjs"
        case Framework.ASTRO:
            return "astro.config.mjs"
        case _:
            return f"vite.config.{script_ext(config)}"


def typecheck_config_paths(config: "ProjectConfig") -> tuple[str, ...]:
    """Return the type-checker configs a TypeScript project carries."""
    if config.framework is Framework.ASTRO:
        return ("tsconfig.json",)
    if not config.is_typescript:
        return ()
    if config.framework.is_meta:
        return ("tsconfig.json",)
    return ("tsconfig.json", "tsconfig.app.json", "tsconfig.node.json")


def framework_package(framework: Framework) -> str:
    """Return the npm package that identifies a framework in a manifest."""
    return _FRAMEWORK_PACKAGES[framework]
