"""Shared pipeline for frameworks that own their build pipeline.

Meta generators write the same files the framework's own project creator
would, without running it, so their output stays a pure function of the
configuration.
"""

import logging
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar

from frontforge.generators.base import ArtifactSet, Generator, GeneratorCapability
from frontforge.generators.capabilities import COMPATIBILITY
from frontforge.generators.core import check_target
from frontforge.generators.shared import (
    Packages,
    build_package_json,
    data_fetching_files,
    directory_layout,
    eslint_config,
    eslint_packages,
    gitignore,
    option_packages,
    readme,
    structure_files,
    test_config_files,
    test_scripts,
)

if TYPE_CHECKING:
    from frontforge.config import Framework, ProjectConfig

__all__ = ("MetaFrameworkGenerator",)

logger = logging.getLogger(__name__)


class MetaFrameworkGenerator(Generator):
    """Base class for Next.js, Astro and SvelteKit projects."""

    framework: "ClassVar[Framework]"
    test_setup_dir: ClassVar[str] = "src/test"

    def supported_options(self) -> GeneratorCapability:
        return COMPATIBILITY[self.framework]

    @abstractmethod
    def framework_packages(self, config: "ProjectConfig") -> Packages:
        """Return the framework and its build tooling."""

    @abstractmethod
    def base_scripts(self, config: "ProjectConfig") -> dict[str, str]:
        """Return the framework's own package scripts."""

    @abstractmethod
    def framework_files(self, config: "ProjectConfig") -> dict[str, str]:
        """Return the config, layout, route and style files of the framework."""

    def packages(self, config: "ProjectConfig") -> Packages:
        return self.framework_packages(config) + eslint_packages(config) + option_packages(config)

    def scripts(self, config: "ProjectConfig") -> dict[str, str]:
        scripts = self.base_scripts(config)
        scripts.setdefault("lint", "eslint .")
        scripts.update(test_scripts(config))
        return scripts

    def generate(self, config: "ProjectConfig") -> ArtifactSet:
        check_target(self, config)
        logger.debug("Generating %s project %r", self.framework.value, config.project_name)
        files = {"package.json": build_package_json(config, scripts=self.scripts(config), packages=self.packages(config))}
        files.update(self.framework_files(config))
        files.update(structure_files(config))
        files.update(test_config_files(config, setup_dir=self.test_setup_dir))
        files.update(data_fetching_files(config))
        files.update(eslint_config(config))
        files.update(gitignore(config))
        files.update(readme(config, source_dirs=directory_layout(config)))
        return ArtifactSet(files=dict(sorted(files.items())), directories=directory_layout(config))
