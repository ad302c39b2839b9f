"""Svelte generator."""

from typing import TYPE_CHECKING, ClassVar

from frontforge.config import Framework, StateManagement
from frontforge.generators.core._base import ViteGenerator
from frontforge.generators.shared import (
    Packages,
    VitePlugin,
    build_context,
    import_path,
    query_client_module,
    render_template,
    script_ext,
    stylesheet_import,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("SvelteGenerator",)


class SvelteGenerator(ViteGenerator):
    """Svelte 5 with Vite."""

    framework = Framework.SVELTE
    mount_id: ClassVar[str] = "app"
    typecheck_script: ClassVar["str | None"] = "svelte-check --tsconfig ./tsconfig.app.json"

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        dev = ["svelte", "@sveltejs/vite-plugin-svelte"]
        if config.is_typescript:
            dev += ["svelte-check", "@tsconfig/svelte"]
        return Packages(dev_dependencies=tuple(dev))

    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        return [VitePlugin("import { svelte } from '@sveltejs/vite-plugin-svelte'", "svelte()")]

    def main_entry(self, config: "ProjectConfig") -> str:
        imports = ["import { mount } from 'svelte'"]
        style = stylesheet_import(config)
        if style:
            imports.append(style)
        imports.append("import App from './App.svelte'")
        target = "document.getElementById('app')!" if config.is_typescript else "document.getElementById('app')"
        return "\n".join([*imports, "", "const app = mount(App, {", f"  target: {target},", "})", "", "export default app", ""])

    def root_component(self, config: "ProjectConfig") -> str:
        query_client = query_client_module(config)
        context = build_context(
            config,
            stores_import="./lib/stores",
            query_client_import=import_path("src/App.svelte", query_client) if query_client else None,
        )
        return render_template("svelte/App.svelte.j2", context)

    def extra_files(self, config: "ProjectConfig") -> dict[str, str]:
        context = build_context(config)
        files = {"svelte.config.js": render_template("svelte/svelte.config.js.j2", context)}
        if config.state_management is StateManagement.SVELTE_STORES:
            files[f"src/lib/stores.{script_ext(config)}"] = render_template("svelte/stores.js.j2", context)
        if config.is_typescript:
            files["src/vite-env.d.ts"] = render_template("svelte/vite-env.d.ts.j2", context)
        return files
