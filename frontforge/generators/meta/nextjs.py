"""Next.js generator (App Router, ``src`` directory)."""

from typing import TYPE_CHECKING

from frontforge.config import Framework, Styling, Testing
from frontforge.generators.core.react import react_providers, react_state_files
from frontforge.generators.meta._base import MetaFrameworkGenerator
from frontforge.generators.shared import (
    Packages,
    build_context,
    encode_json,
    jsx_ext,
    nest_jsx,
    render_template,
    stylesheet_files,
    stylesheet_import,
)

if TYPE_CHECKING:
    from frontforge.config import ProjectConfig

__all__ = ("NextJSGenerator",)


class NextJSGenerator(MetaFrameworkGenerator):
    """Next.js with the App Router."""

    framework = Framework.NEXTJS

    def framework_packages(self, config: "ProjectConfig") -> Packages:
        dev: tuple[str, ...] = ()
        if config.is_typescript:
            dev = ("typescript", "@types/node", "@types/react", "@types/react-dom")
        if config.testing is Testing.VITEST:
            dev = (*dev, "@vitejs/plugin-react")
        return Packages(("next", "react", "react-dom"), dev)

    def base_scripts(self, config: "ProjectConfig") -> dict[str, str]:
        return {"dev": "next dev --turbopack", "build": "next build", "start": "next start", "lint": "eslint ."}

    def providers(self, config: "ProjectConfig") -> "str | None":
        """Return the client providers module, or None when no provider is selected."""
        path = f"src/app/providers.{jsx_ext(config)}"
        imports, wrappers = react_providers(config, path)
        if not wrappers:
            return None
        props = "{ children }: { children: React.ReactNode }" if config.is_typescript else "{ children }"
        lines = [
            "'use client'",
            "",
            *imports,
            "",
            f"export default function Providers({props}) {{",
            "  return (",
            nest_jsx("{children}", wrappers, indent=4),
            "  )",
            "}",
            "",
        ]
        return "\n".join(lines)

    def tsconfig(self, config: "ProjectConfig") -> dict[str, str]:
        compiler_options = {
            "target": "ES2017",
            "lib": ["dom", "dom.iterable", "esnext"],
            "allowJs": True,
            "skipLibCheck": True,
            "strict": True,
            "noEmit": True,
            "esModuleInterop": True,
            "module": "esnext",
            "moduleResolution": "bundler",
            "resolveJsonModule": True,
            "isolatedModules": True,
            "jsx": "react-jsx",
            "incremental": True,
            "plugins": [{"name": "next"}],
            "paths": {"@/*": ["./src/*"]},
        }
        if config.is_typescript:
            document = {
                "compilerOptions": compiler_options,
                "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
                "exclude": ["node_modules"],
            }
            return {"tsconfig.json": encode_json(document)}
        return {"jsconfig.json": encode_json({"compilerOptions": {"paths": {"@/*": ["./src/*"]}}})}

    def framework_files(self, config: "ProjectConfig") -> dict[str, str]:
        ext = jsx_ext(config)
        providers = self.providers(config)
        context = build_context(
            config,
            stylesheet_import=stylesheet_import(config, stem="globals"),
            has_providers=providers is not None,
        )
        config_name = "next.config.ts" if config.is_typescript else "next.config.mjs"
        files = {
            config_name: render_template("nextjs/next.config.js.j2", context),
            f"src/app/layout.{ext}": render_template("nextjs/layout.jsx.j2", context),
            f"src/app/page.{ext}": render_template("nextjs/page.jsx.j2", context),
            "public/next.svg": render_template("nextjs/next.svg.j2", context),
        }
        files.update(self.tsconfig(config))
        if config.is_typescript:
            files["next-env.d.ts"] = render_template("nextjs/next-env.d.ts.j2", context)
        if providers is not None:
            files[f"src/app/providers.{ext}"] = providers
        if config.styling is Styling.TAILWIND:
            files["postcss.config.mjs"] = render_template("nextjs/postcss.config.mjs.j2", context)
        files.update(stylesheet_files(config, directory="src/app", stem="globals", module_stem="page"))
        files.update(react_state_files(config))
        return files
