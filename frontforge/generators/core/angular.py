"""Angular generator.

Angular projects are built with Vite through ``@analogjs/vite-plugin-angular``
and run zoneless.
"""

from typing import TYPE_CHECKING, ClassVar

from frontforge.config import Framework, Routing, StateManagement
from frontforge.generators.core._base import ViteGenerator
from frontforge.generators.shared import Packages, VitePlugin, build_context, render_template, stylesheet_import

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("AngularGenerator",)


class AngularGenerator(ViteGenerator):
    """Angular on Vite."""

    framework = Framework.ANGULAR
    typecheck_script: ClassVar["str | None"] = "tsc -p tsconfig.app.json"

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        return Packages(
            (
                "@angular/common",
                "@angular/compiler",
                "@angular/core",
                "@angular/forms",
                "@angular/platform-browser",
                "rxjs",
                "tslib",
            ),
            ("@analogjs/vite-plugin-angular", "@angular/build", "@angular/compiler-cli"),
        )

    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        return [VitePlugin("import angular from '@analogjs/vite-plugin-angular'", "angular()")]

    def html_body(self, config: "ProjectConfig") -> str:
        return "<app-root></app-root>"

    def main_entry(self, config: "ProjectConfig") -> str:
        imports = [
            "import '@angular/compiler'",
            "import { bootstrapApplication } from '@angular/platform-browser'",
            "import { appConfig } from './app/app.config'",
            "import { AppComponent } from './app/app.component'",
        ]
        style = stylesheet_import(config)
        if style:
            imports.append(style)
        return "\n".join([*imports, "", "bootstrapApplication(AppComponent, appConfig).catch((err) => console.error(err))", ""])

    def app_config(self, config: "ProjectConfig") -> str:
        core = ["ApplicationConfig", "provideZonelessChangeDetection"]
        imports: list[str] = []
        providers = ["provideZonelessChangeDetection()"]
        if config.routing is Routing.ANGULAR_ROUTER:
            imports += ["import { provideRouter } from '@angular/router'", "import { routes } from './app.routes'"]
            providers.append("provideRouter(routes)")
        if config.state_management is StateManagement.NGRX:
            imports += ["import { provideStore } from '@ngrx/store'", "import { counterReducer } from './counter.reducer'"]
            providers.append("provideStore({ count: counterReducer })")
        lines = [
            f"import {{ {', '.join(core)} }} from '@angular/core'",
            *imports,
            "",
            "export const appConfig: ApplicationConfig = {",
            "  providers: [",
            *(f"    {provider}," for provider in providers),
            "  ],",
            "}",
            "",
        ]
        return "\n".join(lines)

    def root_component(self, config: "ProjectConfig") -> str:
        return render_template("angular/app.component.ts.j2", build_context(config))

    def extra_files(self, config: "ProjectConfig") -> dict[str, str]:
        context = build_context(config)
        files = {"src/app/app.config.ts": self.app_config(config)}
        if config.routing is Routing.ANGULAR_ROUTER:
            files["src/app/app.routes.ts"] = render_template("angular/app.routes.ts.j2", context)
        if config.state_management is StateManagement.NGRX:
            files["src/app/counter.reducer.ts"] = render_template("angular/counter.reducer.ts.j2", context)
        return files
