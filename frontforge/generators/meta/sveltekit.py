"""SvelteKit generator."""

from typing import TYPE_CHECKING, ClassVar

from frontforge.config import Framework, StateManagement
from frontforge.generators.meta._base import MetaFrameworkGenerator
from frontforge.generators.shared import (
    Packages,
    VitePlugin,
    build_context,
    encode_json,
    global_stylesheet,
    import_path,
    query_client_module,
    render_template,
    script_ext,
    stylesheet_files,
    vite_config,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("SvelteKitGenerator",)

_STORES_MODULE = "src/lib/stores/counter"


class SvelteKitGenerator(MetaFrameworkGenerator):
    """SvelteKit with the automatic adapter."""

    framework = Framework.SVELTEKIT
    test_setup_dir: ClassVar[str] = "src/lib/test"

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        dev = ["@sveltejs/kit", "@sveltejs/adapter-auto", "@sveltejs/vite-plugin-svelte", "svelte", "vite"]
        if config.is_typescript:
            dev += ["typescript", "svelte-check"]
        return Packages(dev_dependencies=tuple(dev))

    def base_scripts(self, config: "ProjectConfig") -> dict[str, str]:
        scripts = {
            "dev": "vite dev",
            "build": "vite build",
            "preview": "vite preview",
            "prepare": "svelte-kit sync || echo ''",
        }
        if config.is_typescript:
            scripts["check"] = "svelte-kit sync && svelte-check --tsconfig ./tsconfig.json"
        return scripts

    def tsconfig(self, config: "ProjectConfig") -> dict[str, str]:
        document = {
            "extends": "./.svelte-kit/tsconfig.json",
            "compilerOptions": {
                "allowJs": True,
                "checkJs": True,
                "esModuleInterop": True,
                "forceConsistentCasingInFileNames": True,
                "resolveJsonModule": True,
                "skipLibCheck": True,
                "sourceMap": True,
                "strict": True,
                "moduleResolution": "bundler",
            },
        }
        name = "tsconfig.json" if config.is_typescript else "jsconfig.json"
        return {name: encode_json(document)}

    def framework_files(self, config: "ProjectConfig") -> dict[str, str]:
        ext = script_ext(config)
        query_client = query_client_module(config)
        stylesheet = global_stylesheet(config, stem="app")
        uses_stores = config.state_management is StateManagement.SVELTE_STORES
        context = build_context(
            config,
            global_stylesheet=f"../{stylesheet}" if stylesheet else None,
            query_client_import=import_path("src/routes/+layout.svelte", query_client) if query_client else None,
            stores_import="$lib/stores/counter" if uses_stores else None,
        )
        plugin = VitePlugin("import { sveltekit } from '@sveltejs/kit/vite'", "sveltekit()")
        files = {
            "svelte.config.js": render_template("sveltekit/svelte.config.js.j2", context),
            f"vite.config.{ext}": vite_config(config, [plugin], alias=False),
            "src/app.html": render_template("sveltekit/app.html.j2", context),
            "src/routes/+layout.svelte": render_template("sveltekit/layout.svelte.j2", context),
            "src/routes/+page.svelte": render_template("sveltekit/page.svelte.j2", context),
            "static/favicon.svg": render_template("common/vite.svg.j2", context),
        }
        files.update(self.tsconfig(config))
        if config.is_typescript:
            files["src/app.d.ts"] = render_template("sveltekit/app.d.ts.j2", context)
        if uses_stores:
            files[f"{_STORES_MODULE}.{ext}"] = render_template("svelte/stores.js.j2", context)
        files.update(stylesheet_files(config, stem="app", module_dir="src/routes", module_stem="Page"))
        return files
