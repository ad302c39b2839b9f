"""Supporting source modules contributed by the data-fetching axis."""

import posixpath
from typing import TYPE_CHECKING

from frontforge.config import DataFetching, Framework
from frontforge.generators.shared.files import script_ext
from frontforge.generators.shared.structure import services_dir
from frontforge.generators.shared.templates import build_context, render_template

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("data_fetching_files", "import_path", "query_client_module")

_QUERY_CLIENT_FRAMEWORKS = {Framework.REACT, Framework.SOLID, Framework.NEXTJS, Framework.SVELTE, Framework.SVELTEKIT}


def import_path(from_file: str, target: str) -> str:
    """Return a relative import specifier from one project file to another.

    Args:
        from_file: Importing file, relative to the project root.
        target: Imported module, relative to the project root, without extension.

    Returns:
        A ``./`` or ``../`` prefixed specifier.
    """
    relative = posixpath.relpath(target, posixpath.dirname(from_file))
    return relative if relative.startswith("../") else f"./{relative}"


def query_client_module(config: "ProjectConfig") -> "str | None":
    """Return the module (without extension) exporting the shared query client."""
    if config.data_fetching is not DataFetching.TANSTACK_QUERY or config.framework not in _QUERY_CLIENT_FRAMEWORKS:
        return None
    return f"{services_dir(config)}/queryClient"


def data_fetching_files(config: "ProjectConfig") -> dict[str, str]:
    """Return the API client or query client module for the selected data-fetching option."""
    ext = script_ext(config)
    directory = services_dir(config)
    context = build_context(config)
    match config.data_fetching:
        case DataFetching.AXIOS:
            return {f"{directory}/api.{ext}": render_template("common/api-axios.js.j2", context)}
        case DataFetching.FETCH_API:
            return {f"{directory}/api.{ext}": render_template("common/api-fetch.js.j2", context)}
        case DataFetching.SWR:
            return {f"{directory}/fetcher.{ext}": render_template("common/swr-fetcher.js.j2", context)}
        case DataFetching.TANSTACK_QUERY:
            module = query_client_module(config)
            if module is None:
                return {}
            return {f"{module}.{ext}": render_template("common/query-client.js.j2", context)}
        case _:
            return {}
