"""Framework-free generator."""

from typing import TYPE_CHECKING, ClassVar

from frontforge.config import Framework
from frontforge.generators.core._base import ViteGenerator
from frontforge.generators.shared import Packages, VitePlugin, build_context, render_template, stylesheet_import

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("VanillaGenerator",)


class VanillaGenerator(ViteGenerator):
    """Plain TypeScript or JavaScript with Vite."""

    framework = Framework.VANILLA
    mount_id: ClassVar[str] = "app"
    typecheck_script: ClassVar["str | None"] = "tsc --noEmit -p tsconfig.app.json"

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        return Packages()

    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        return []

    def main_entry(self, config: "ProjectConfig") -> str:
        imports: list[str] = []
        style = stylesheet_import(config)
        if style:
            imports.append(style)
        imports.append("import { setupApp } from './App'")
        root = "document.querySelector<HTMLDivElement>('#app')!" if config.is_typescript else "document.querySelector('#app')"
        return "\n".join([*imports, "", f"setupApp({root})", ""])

    def root_component(self, config: "ProjectConfig") -> str:
        return render_template("vanilla/App.js.j2", build_context(config))
