"""Astro generator."""

from typing import TYPE_CHECKING

from frontforge.config import Framework
from frontforge.generators.meta._base import MetaFrameworkGenerator
from frontforge.generators.shared import (
    Packages,
    build_context,
    encode_json,
    global_stylesheet,
    render_template,
    stylesheet_files,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("AstroGenerator",)


class AstroGenerator(MetaFrameworkGenerator):
    """Astro with file-based pages."""

    framework = Framework.ASTRO

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        dev = ("typescript", "@astrojs/check") if config.is_typescript else ()
        return Packages(("astro",), dev)

    def base_scripts(self, config: "ProjectConfig") -> dict[str, str]:
        build = "astro check && astro build" if config.is_typescript else "astro build"
        return {"dev": "astro dev", "build": build, "preview": "astro preview", "astro": "astro"}

    def framework_files(self, config: "ProjectConfig") -> dict[str, str]:
        stylesheet = global_stylesheet(config, stem="global")
        context = build_context(
            config,
            global_stylesheet=f"../styles/{stylesheet}" if stylesheet else None,
        )
        # Astro type-checks .astro files even in JavaScript projects.
        preset = "strict" if config.is_typescript else "base"
        files = {
            "astro.config.mjs": render_template("astro/astro.config.mjs.j2", context),
            "tsconfig.json": encode_json(
                {"extends": f"astro/tsconfigs/{preset}", "include": [".astro/types.d.ts", "**/*"], "exclude": ["dist"]},
            ),
            "src/layouts/Layout.astro": render_template("astro/Layout.astro.j2", context),
            "src/pages/index.astro": render_template("astro/index.astro.j2", context),
            "public/favicon.svg": render_template("astro/favicon.svg.j2", context),
        }
        files.update(stylesheet_files(config, directory="src/styles", stem="global", module_stem="Page"))
        return files
