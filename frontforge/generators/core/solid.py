"""Solid generator."""

from typing import TYPE_CHECKING

from frontforge.config import Framework, Routing, StateManagement
from frontforge.generators.core._base import ViteGenerator
from frontforge.generators.shared import (
    JSXWrapper,
    Packages,
    VitePlugin,
    build_context,
    import_path,
    main_entry_path,
    nest_jsx,
    query_client_module,
    render_template,
    script_ext,
    stylesheet_import,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("SolidGenerator",)


class SolidGenerator(ViteGenerator):
    """SolidJS with Vite."""

    framework = Framework.SOLID

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        return Packages(("solid-js",), ("vite-plugin-solid",))

    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        return [VitePlugin("import solid from 'vite-plugin-solid'", "solid()")]

    def main_entry(self, config: "ProjectConfig") -> str:
        entry = main_entry_path(config) or "src/main.tsx"
        imports = ["/* @refresh reload */", "import { render } from 'solid-js/web'"]
        wrappers: list[JSXWrapper] = []
        query_client = query_client_module(config)
        if query_client is not None:
            imports += [
                "import { QueryClientProvider } from '@tanstack/solid-query'",
                f"import {{ queryClient }} from '{import_path(entry, query_client)}'",
            ]
            wrappers.append(JSXWrapper("<QueryClientProvider client={queryClient}>", "</QueryClientProvider>"))
        if config.routing is Routing.SOLID_ROUTER:
            imports.append("import { Router, Route } from '@solidjs/router'")
            wrappers.append(JSXWrapper("<Router>", "</Router>"))
            element = '<Route path="/" component={App} />'
        else:
            element = "<App />"
        style = stylesheet_import(config)
        if style:
            imports.append(style)
        imports.append("import App from './App'")
        root = "document.getElementById('root')!" if config.is_typescript else "document.getElementById('root')"
        tree = nest_jsx(element, wrappers, indent=4)
        return "\n".join([*imports, "", "render(", "  () => (", tree, "  ),", f"  {root},", ")", ""])

    def root_component(self, config: "ProjectConfig") -> str:
        return render_template("solid/App.jsx.j2", build_context(config))

    def extra_files(self, config: "ProjectConfig") -> dict[str, str]:
        if config.state_management is not StateManagement.SOLID_STORES:
            return {}
        return {f"src/store.{script_ext(config)}": render_template("solid/store.js.j2", build_context(config))}
