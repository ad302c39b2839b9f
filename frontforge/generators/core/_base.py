"""Shared pipeline for frameworks built on a project-level Vite config."""

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from frontforge.exceptions import ConfigurationError
from frontforge.generators.base import ArtifactSet, Generator, GeneratorCapability
from frontforge.generators.capabilities import COMPATIBILITY
from frontforge.generators.shared import (
    Packages,
    build_context,
    build_package_json,
    bundler_config_path,
    data_fetching_files,
    directory_layout,
    eslint_config,
    eslint_packages,
    gitignore,
    main_entry_path,
    option_packages,
    readme,
    render_template,
    root_component_path,
    structure_files,
    stylesheet_files,
    test_config_files,
    test_scripts,
    tsconfig_files,
    vite_config,
)

if TYPE_CHECKING:
    from frontforge.config import Framework, ProjectConfig
    from frontforge.generators.shared import VitePlugin

__all__ = ("ViteGenerator", "check_target")

logger = logging.getLogger(__name__)


def check_target(generator: Generator, config: "ProjectConfig") -> None:
    """Refuse configurations meant for another framework or outside the capability set.

    Raises:
        ConfigurationError: On a framework mismatch or an unsupported option.
    """
    if config.framework is not generator.framework:
        msg = f"{generator.framework.value} generator cannot generate a {config.framework.value} project"
        raise ConfigurationError(msg, framework=config.framework.value)
    generator.supported_options().check(config)


class ViteGenerator(Generator):
    """Base class for React, Vue, Svelte, Solid, Angular and vanilla projects.

    Subclasses provide the framework packages, Vite plugins, entry module and
    root component. Everything else is shared.
    """

    framework: "ClassVar[Framework]"
    mount_id: ClassVar[str] = "root"
    typecheck_script: ClassVar["str | None"] = "tsc -b"

    def supported_options(self) -> GeneratorCapability:
        return COMPATIBILITY[self.framework]

    @abstractmethod
    def framework_packages(self, config: "ProjectConfig") -> Packages:
        """Return the framework runtime, its Vite plugin and its type packages."""

    @abstractmethod
    def vite_plugins(self, config: "ProjectConfig") -> "list[VitePlugin]":
        """Return the framework's Vite plugins."""

    @abstractmethod
    def main_entry(self, config: "ProjectConfig") -> str:
        """Return the browser entry module."""

    @abstractmethod
    def root_component(self, config: "ProjectConfig") -> str:
        """Return the root component."""

    def extra_files(self, config: "ProjectConfig") -> dict[str, str]:
        """Return framework specific modules such as routers and stores."""
        return {}

    def html_body(self, config: "ProjectConfig") -> str:
        return f'<div id="{self.mount_id}"></div>'

    def scripts(self, config: "ProjectConfig") -> dict[str, str]:
        scripts = {"dev": "vite", "build": "vite build", "preview": "vite preview", "lint": "eslint ."}
        if config.is_typescript and self.typecheck_script:
            scripts["typecheck"] = self.typecheck_script
        scripts.update(test_scripts(config))
        return scripts

    def packages(self, config: "ProjectConfig") -> Packages:
        tooling = Packages(dev_dependencies=("vite",))
        if config.is_typescript:
            tooling += Packages(dev_dependencies=("typescript", "@types/node"))
        return self.framework_packages(config) + tooling + eslint_packages(config) + option_packages(config)

    def generate(self, config: "ProjectConfig") -> ArtifactSet:
        check_target(self, config)
        logger.debug("Generating %s project %r", self.framework.value, config.project_name)
        context = build_context(config, html_body=self.html_body(config))
        main_entry = main_entry_path(config)
        if main_entry is None:  # pragma: no cover
            msg = f"{self.framework.value} has no browser entry module"
            raise ConfigurationError(msg, framework=self.framework.value)

        files: dict[str, str] = {
            "package.json": build_package_json(config, scripts=self.scripts(config), packages=self.packages(config)),
            bundler_config_path(config): vite_config(config, self.vite_plugins(config)),
            "index.html": render_template("common/index.html.j2", context),
            "public/vite.svg": render_template("common/vite.svg.j2", context),
            main_entry: self.main_entry(config),
            root_component_path(config): self.root_component(config),
        }
        files.update(tsconfig_files(config))
        files.update(structure_files(config))
        files.update(stylesheet_files(config))
        files.update(test_config_files(config))
        files.update(data_fetching_files(config))
        files.update(self.extra_files(config))
        files.update(eslint_config(config))
        files.update(gitignore(config))
        files.update(readme(config, source_dirs=directory_layout(config)))
        return ArtifactSet(files=dict(sorted(files.items())), directories=directory_layout(config))
