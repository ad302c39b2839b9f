"""React generator."""

from typing import TYPE_CHECKING

from frontforge.config import DataFetching, Framework, I18n, Routing, StateManagement
from frontforge.generators.core._base import ViteGenerator
from frontforge.generators.shared import (
    JSXWrapper,
    Packages,
    VitePlugin,
    build_context,
    import_path,
    jsx_ext,
    main_entry_path,
    nest_jsx,
    query_client_module,
    render_template,
    script_ext,
    stylesheet_import,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("ReactGenerator", "react_providers")


def react_providers(config: "ProjectConfig", from_file: str) -> "tuple[list[str], list[JSXWrapper]]":
    """Return the imports and providers around the React tree, outermost first.

    The data-fetching provider wraps the state provider, which wraps the router.
    This order is shared by the Vite entry module and the Next.js providers module.

    Args:
        config: The resolved project configuration.
        from_file: The module the imports are written into.

    Returns:
        Import lines and provider wrappers.
    """
    imports: list[str] = []
    wrappers: list[JSXWrapper] = []
    query_client = query_client_module(config)
    if config.data_fetching is DataFetching.TANSTACK_QUERY and query_client is not None:
        imports += [
            "import { QueryClientProvider } from '@tanstack/react-query'",
            "import { ReactQueryDevtools } from '@tanstack/react-query-devtools'",
            f"import {{ queryClient }} from '{import_path(from_file, query_client)}'",
        ]
        wrappers.append(
            JSXWrapper(
                "<QueryClientProvider client={queryClient}>",
                "</QueryClientProvider>",
                ("<ReactQueryDevtools initialIsOpen={false} />",),
            ),
        )
    match config.state_management:
        case StateManagement.REDUX_TOOLKIT:
            imports += [
                "import { Provider } from 'react-redux'",
                f"import {{ store }} from '{import_path(from_file, 'src/store')}'",
            ]
            wrappers.append(JSXWrapper("<Provider store={store}>", "</Provider>"))
        case StateManagement.CONTEXT_API:
            imports.append(f"import {{ AppProvider }} from '{import_path(from_file, 'src/context/AppContext')}'")
            wrappers.append(JSXWrapper("<AppProvider>", "</AppProvider>"))
        case _:
            pass
    if config.routing is Routing.REACT_ROUTER:
        imports.append("import { BrowserRouter } from 'react-router'")
        wrappers.append(JSXWrapper("<BrowserRouter>", "</BrowserRouter>"))
    return imports, wrappers


def react_state_files(config: "ProjectConfig") -> dict[str, str]:
    """Return the store or context module for the selected state option."""
    context = build_context(config)
    match config.state_management:
        case StateManagement.ZUSTAND:
            return {f"src/store/useCounterStore.{script_ext(config)}": render_template("react/zustand-store.js.j2", context)}
        case StateManagement.REDUX_TOOLKIT:
            return {f"src/store/index.{script_ext(config)}": render_template("react/redux-store.js.j2", context)}
        case StateManagement.CONTEXT_API:
            return {f"src/context/AppContext.{jsx_ext(config)}": render_template("react/AppContext.jsx.j2", context)}
        case _:
            return {}


class ReactGenerator(ViteGenerator):
    """React 19 with Vite."""

    framework = Framework.REACT

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        dev = ["@vitejs/plugin-react"]
        if config.is_typescript:
            dev += ["@types/react", "@types/react-dom"]
        return Packages(("react", "react-dom"), tuple(dev))

    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        return [VitePlugin("import react from '@vitejs/plugin-react'", "react()")]

    def main_entry(self, config: "ProjectConfig") -> str:
        entry = main_entry_path(config) or f"src/main.{jsx_ext(config)}"
        imports = ["import { StrictMode } from 'react'", "import { createRoot } from 'react-dom/client'"]
        provider_imports, wrappers = react_providers(config, entry)
        imports += provider_imports
        if config.routing is Routing.TANSTACK_ROUTER:
            imports += ["import { RouterProvider } from '@tanstack/react-router'", "import { router } from './router'"]
            element = "<RouterProvider router={router} />"
        else:
            imports.append("import App from './App'")
            element = "<App />"
        if config.i18n is I18n.REACT_I18NEXT:
            imports.append("import './i18n'")
        style = stylesheet_import(config)
        if style:
            imports.append(style)

        root = "document.getElementById('root')!" if config.is_typescript else "document.getElementById('root')"
        tree = nest_jsx(element, [JSXWrapper("<StrictMode>", "</StrictMode>"), *wrappers], indent=2)
        return "\n".join([*imports, "", f"createRoot({root}).render(", tree, ")", ""])

    def root_component(self, config: "ProjectConfig") -> str:
        return render_template("react/App.jsx.j2", build_context(config))

    def extra_files(self, config: "ProjectConfig") -> dict[str, str]:
        context = build_context(config)
        files = react_state_files(config)
        if config.routing is Routing.TANSTACK_ROUTER:
            files[f"src/router.{jsx_ext(config)}"] = render_template("react/router.jsx.j2", context)
        if config.i18n is I18n.REACT_I18NEXT:
            files[f"src/i18n.{script_ext(config)}"] = render_template("react/i18n.js.j2", context)
        return files
