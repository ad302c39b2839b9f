"""Stylesheet artifacts."""

from typing import TYPE_CHECKING

from frontforge.config import Styling
from frontforge.generators.shared.templates import build_context, render_template

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("css_module_name", "global_stylesheet", "stylesheet_files", "stylesheet_import")

_GLOBAL_TEMPLATES: dict[Styling, str] = {
    Styling.TAILWIND: "common/tailwind.css.j2",
    Styling.VANILLA: "common/index.css.j2",
    Styling.SASS: "common/styles.scss.j2",
}


def global_stylesheet(config: "ProjectConfig", *, stem: "str | None" = None) -> "str | None":
    """Return the file name of the stylesheet imported once by the app, if any.

    Args:
        config: The resolved project configuration.
        stem: File stem to use instead of ``index`` (CSS) or ``styles`` (Sass).
    """
    match config.styling:
        case Styling.TAILWIND | Styling.VANILLA:
            return f"{stem or 'index'}.css"
        case Styling.SASS:
            return f"{stem or 'styles'}.scss"
        case _:
            return None


def css_module_name(config: "ProjectConfig", *, stem: str = "App") -> "str | None":
    """Return the CSS module file name for CSS Modules projects."""
    return f"{stem}.module.css" if config.styling is Styling.CSS_MODULES else None


def stylesheet_import(config: "ProjectConfig", *, stem: "str | None" = None, prefix: str = "./") -> "str | None":
    """Return the side-effect import for the global stylesheet, if one is needed."""
    if config.styling is Styling.BOOTSTRAP:
        return "import 'bootstrap/dist/css/bootstrap.min.css'"
    name = global_stylesheet(config, stem=stem)
    return f"import '{prefix}{name}'" if name else None


def stylesheet_files(
    config: "ProjectConfig",
    *,
    directory: str = "src",
    stem: "str | None" = None,
    module_dir: "str | None" = None,
    module_stem: str = "App",
) -> dict[str, str]:
    """Return the stylesheet files for the selected styling option.

    Args:
        config: The resolved project configuration.
        directory: Directory of the global stylesheet.
        stem: Global stylesheet stem, see :func:`global_stylesheet`.
        module_dir: Directory of the CSS module. Defaults to ``directory``.
        module_stem: CSS module stem.

    Returns:
        Relative path to stylesheet content.
    """
    context = build_context(config)
    name = global_stylesheet(config, stem=stem)
    if name is not None:
        return {f"{directory}/{name}": render_template(_GLOBAL_TEMPLATES[config.styling], context)}
    module = css_module_name(config, stem=module_stem)
    if module is not None:
        return {f"{module_dir or directory}/{module}": render_template("common/App.module.css.j2", context)}
    return {}
