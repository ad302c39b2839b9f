"""Generator registry."""

import logging
from typing import TYPE_CHECKING

from frontforge.config import Framework, parse_option
from frontforge.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from frontforge.generators.base import Generator

__all__ = ("GeneratorRegistry", "default_registry")

logger = logging.getLogger(__name__)


class GeneratorRegistry:
    """Maps each framework to the generator that handles it.

    A registry is built once at process entry and passed to the orchestrator;
    there is no module level registration.
    """

    def __init__(self, generators: "list[Generator] | None" = None) -> None:
        self._generators: dict[Framework, Generator] = {}
        for generator in generators or []:
            self.register(generator)

    def register(self, generator: "Generator", *, replace: bool = False) -> None:
        """Add a generator under its framework.

        Args:
            generator: The generator to add.
            replace: Allow replacing an existing registration.

        Raises:
            ConfigurationError: If the framework is already registered and ``replace`` is False.
        """
        framework = generator.framework
        if framework in self._generators and not replace:
            msg = f"A generator for {framework.value} is already registered"
            raise ConfigurationError(msg, framework=framework.value)
        self._generators[framework] = generator
        logger.debug("Registered %s generator", framework.value)

    def get(self, name: "Framework | str") -> "Generator | None":
        """Look up the generator for a framework.

        Args:
            name: A framework member or any spelling :func:`parse_option` accepts.

        Returns:
            The generator, or None when nothing is registered for the framework.
        """
        try:
            framework = parse_option(Framework, name)
        except ConfigurationError:
            return None
        return self._generators.get(framework)

    def require(self, name: "Framework | str") -> "Generator":
        """Like :meth:`get`, but a missing framework is a configuration error.

        Raises:
            ConfigurationError: If no generator is registered for ``name``.
        """
        generator = self.get(name)
        if generator is None:
            label = name.value if isinstance(name, Framework) else str(name)
            msg = f"No generator registered for framework {label!r}"
            raise ConfigurationError(msg, framework=label)
        return generator

    def frameworks(self) -> tuple[Framework, ...]:
        """Return the registered frameworks in registration order."""
        return tuple(self._generators)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (Framework, str)):
            return False
        return self.get(name) is not None

    def __iter__(self) -> "Iterator[Generator]":
        return iter(self._generators.values())

    def __len__(self) -> int:
        return len(self._generators)


def default_registry() -> GeneratorRegistry:
    """Build a registry holding every built-in generator."""
    from frontforge.generators.core import (
        AngularGenerator,
        ReactGenerator,
        SolidGenerator,
        SvelteGenerator,
        VanillaGenerator,
        VueGenerator,
    )
    from frontforge.generators.meta import AstroGenerator, NextJSGenerator, SvelteKitGenerator

    return GeneratorRegistry(
        [
            ReactGenerator(),
            VueGenerator(),
            AngularGenerator(),
            SvelteGenerator(),
            SolidGenerator(),
            VanillaGenerator(),
            NextJSGenerator(),
            AstroGenerator(),
            SvelteKitGenerator(),
        ],
    )
