"""Tooling configuration files shared by the generators."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from frontforge.config import DEFAULT_DEV_PORT, Framework, Styling, Testing
from frontforge.generators.shared._json import encode_json
from frontforge.generators.shared.files import script_ext
from frontforge.generators.shared.templates import build_context, render_template

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = (
    "VitePlugin",
    "eslint_config",
    "gitignore",
    "readme",
    "test_config_files",
    "tsconfig_files",
    "vite_config",
)


@dataclass(frozen=True)
class VitePlugin:
    """A Vite plugin: the import line and the call placed in ``plugins``."""

    import_line: str
    call: str


TAILWIND_PLUGIN = VitePlugin("import tailwindcss from '@tailwindcss/vite'", "tailwindcss()")


def vite_config(config: "ProjectConfig", plugins: "list[VitePlugin]", *, alias: bool = True) -> str:
    """Compose ``vite.config.*``.

    Args:
        config: The resolved project configuration.
        plugins: Framework plugins, in the order they are applied.
        alias: Map ``@`` to ``./src``.

    Returns:
        The config module text.
    """
    plugins = list(plugins)
    if config.styling is Styling.TAILWIND:
        plugins.insert(0, TAILWIND_PLUGIN)
    lines = ["import { defineConfig } from 'vite'"]
    if alias:
        lines.append("import { fileURLToPath, URL } from 'node:url'")
    lines += [plugin.import_line for plugin in plugins]
    lines += [
        "",
        "// https://vite.dev/config/",
        "export default defineConfig({",
        f"  plugins: [{', '.join(plugin.call for plugin in plugins)}],",
    ]
    if alias:
        lines += [
            "  resolve: {",
            "    alias: {",
            "      '@': fileURLToPath(new URL('./src', import.meta.url)),",
            "    },",
            "  },",
        ]
    lines += [
        "  server: {",
        f"    port: {DEFAULT_DEV_PORT},",
        "    open: true,",
        "  },",
        "})",
        "",
    ]
    return "\n".join(lines)


def _app_compiler_options(config: "ProjectConfig") -> dict[str, Any]:
    options: dict[str, Any] = {
        "target": "ES2022",
        "useDefineForClassFields": True,
        "lib": ["ES2022", "DOM", "DOM.Iterable"],
        "module": "ESNext",
        "skipLibCheck": True,
        "moduleResolution": "bundler",
        "allowImportingTsExtensions": True,
        "isolatedModules": True,
        "moduleDetection": "force",
        "noEmit": True,
    }
    match config.framework:
        case Framework.REACT:
            options["jsx"] = "react-jsx"
        case Framework.SOLID:
            options["jsx"] = "preserve"
            options["jsxImportSource"] = "solid-js"
        case Framework.VUE:
            options["jsx"] = "preserve"
        case Framework.SVELTE:
            options["verbatimModuleSyntax"] = True
        case _:
            pass
    options |= {
        "strict": True,
        "noUnusedLocals": True,
        "noUnusedParameters": True,
        "noFallthroughCasesInSwitch": True,
        "baseUrl": ".",
        "paths": {"@/*": ["./src/*"]},
    }
    return options


def tsconfig_files(config: "ProjectConfig") -> dict[str, str]:
    """Return the TypeScript config trio for a Vite project, or nothing for JavaScript."""
    if not config.is_typescript:
        return {}
    include = ["src/**/*.ts", "src/**/*.tsx", "src/**/*.vue"] if config.framework is Framework.VUE else ["src"]
    base = {
        "files": [],
        "references": [{"path": "./tsconfig.app.json"}, {"path": "./tsconfig.node.json"}],
    }
    app = {"compilerOptions": _app_compiler_options(config), "include": include}
    node = {
        "compilerOptions": {
            "target": "ES2023",
            "lib": ["ES2023"],
            "module": "ESNext",
            "skipLibCheck": True,
            "moduleResolution": "bundler",
            "allowImportingTsExtensions": True,
            "isolatedModules": True,
            "moduleDetection": "force",
            "noEmit": True,
            "strict": True,
            "noUnusedLocals": True,
            "noUnusedParameters": True,
            "noFallthroughCasesInSwitch": True,
        },
        "include": [f"vite.config.{script_ext(config)}", *_node_includes(config)],
    }
    return {
        "tsconfig.json": encode_json(base),
        "tsconfig.app.json": encode_json(app),
        "tsconfig.node.json": encode_json(node),
    }


def _node_includes(config: "ProjectConfig") -> list[str]:
    match config.testing:
        case Testing.VITEST:
            return ["vitest.config.ts"]
        case Testing.PLAYWRIGHT:
            return ["playwright.config.ts"]
        case _:
            return []


def eslint_config(config: "ProjectConfig") -> dict[str, str]:
    return {"eslint.config.js": render_template("common/eslint.config.js.j2", build_context(config))}


def gitignore(config: "ProjectConfig") -> dict[str, str]:
    return {".gitignore": render_template("common/gitignore.j2", build_context(config))}


def readme(config: "ProjectConfig", *, source_dirs: "tuple[str, ...]" = ()) -> dict[str, str]:
    options = {key: value for key, value in config.to_dict().items() if value not in {"None", "", None}}
    for key in ("project_path", "project_name", "dry_run", "auto_install"):
        options.pop(key, None)
    context = build_context(config, chosen=options, source_dirs=source_dirs)
    return {"README.md": render_template("common/README.md.j2", context)}


def test_config_files(config: "ProjectConfig", *, setup_dir: str = "src/test") -> dict[str, str]:
    """Return the test runner config and setup files for the selected runner."""
    ext = script_ext(config)
    context = build_context(config, setup_file=f"./{setup_dir}/setup.{ext}")
    match config.testing:
        case Testing.VITEST:
            return {
                f"vitest.config.{ext}": render_template("common/vitest.config.js.j2", context),
                f"{setup_dir}/setup.{ext}": render_template("common/test-setup.js.j2", context),
            }
        case Testing.JEST:
            return {
                "jest.config.js": render_template("common/jest.config.js.j2", context),
                f"{setup_dir}/setup.{ext}": render_template("common/test-setup.js.j2", context),
            }
        case Testing.PLAYWRIGHT:
            return {
                f"playwright.config.{ext}": render_template("common/playwright.config.js.j2", context),
                f"e2e/example.spec.{ext}": render_template("common/example.spec.js.j2", context),
            }
        case _:
            return {}
