"""Template rendering for generated files."""

import functools
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from frontforge.config import DEFAULT_DEV_PORT, DataFetching, PackageManager, StateManagement, Structure, Styling
from frontforge.exceptions import GenerationError
from frontforge.generators.shared.files import component_ext, jsx_ext, main_entry_path, script_ext

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("build_context", "get_template_dir", "render_template", "run_command")


def get_template_dir() -> Path:
    """Get the directory containing file templates.

    Returns:
        Path to the templates directory.
    """
    return Path(__file__).parent.parent.parent / "templates"


@functools.cache
def _environment() -> Environment:
    # Output is source code and config files, not HTML.
    return Environment(
        loader=FileSystemLoader(str(get_template_dir())),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_template(name: str, context: "dict[str, Any]") -> str:
    """Render a template from the package template directory.

    Args:
        name: Template path relative to the template directory.
        context: Template variables.

    Raises:
        GenerationError: If the template is missing or fails to render.

    Returns:
        Rendered template content.
    """
    try:
        template = _environment().get_template(name)
        return template.render(**context)
    except TemplateError as exc:
        raise GenerationError(name, str(exc) or type(exc).__name__, exc) from exc


def run_command(package_manager: "PackageManager | None", script: str) -> str:
    """Return the shell command that runs a package script."""
    match package_manager:
        case PackageManager.YARN | PackageManager.PNPM:
            return f"{package_manager.value} {script}"
        case PackageManager.BUN:
            return f"bun run {script}"
        case _:
            return f"npm run {script}"


def build_context(config: "ProjectConfig", **extra: Any) -> dict[str, Any]:
    """Build the template variables shared by every template.

    Args:
        config: The resolved project configuration.
        **extra: Additional variables for a specific template.

    Returns:
        Dictionary of template variables.
    """
    package_manager = config.package_manager or PackageManager.NPM
    return {
        "project_name": config.project_name,
        "framework": config.framework.value,
        "ts": config.is_typescript,
        "script_ext": script_ext(config),
        "jsx_ext": jsx_ext(config),
        "component_ext": component_ext(config),
        "main_entry": main_entry_path(config),
        "dev_port": DEFAULT_DEV_PORT,
        "styling": config.styling.value,
        "tailwind": config.styling is Styling.TAILWIND,
        "bootstrap": config.styling is Styling.BOOTSTRAP,
        "css_modules": config.styling is Styling.CSS_MODULES,
        "sass": config.styling is Styling.SASS,
        "styled_components": config.styling is Styling.STYLED_COMPONENTS,
        "vanilla_css": config.styling is Styling.VANILLA,
        "routing": config.routing.value,
        "state": config.state_management.value,
        "zustand": config.state_management is StateManagement.ZUSTAND,
        "data_fetching": config.data_fetching.value,
        "tanstack_query": config.data_fetching is DataFetching.TANSTACK_QUERY,
        "testing": config.testing.value,
        "feature_based": config.structure is Structure.FEATURE_BASED,
        "package_manager": package_manager.value,
        "install_command": f"{package_manager.value} install",
        "dev_command": run_command(package_manager, "dev"),
        "build_command": run_command(package_manager, "build"),
        "test_command": run_command(package_manager, "test"),
        "options": config.to_dict(),
        **extra,
    }
