"""Generator contract and capability sets."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import TYPE_CHECKING

from frontforge.config import OPTION_AXES, Language
from frontforge.exceptions import ConfigurationError

if TYPE_CHECKING:
    from frontforge.config import (
        Animation,
        DataFetching,
        DataViz,
        FormManagement,
        Framework,
        I18n,
        Icons,
        ProjectConfig,
        Routing,
        StateManagement,
        Styling,
        Testing,
        UILibrary,
        Utilities,
    )

__all__ = ("ArtifactSet", "Generator", "GeneratorCapability")

NONE_VALUE = "None"


def _languages_factory() -> "tuple[Language, ...]":
    return (Language.TYPESCRIPT, Language.JAVASCRIPT)


@dataclass(frozen=True)
class GeneratorCapability:
    """The option values a generator declares it can produce.

    Each axis holds the non-``None`` values the framework supports. ``None`` is
    always accepted on every axis. An empty tuple means the axis is shown but
    only ``None`` is valid; ``None`` as the attribute value means the framework
    does not expose the axis at all.
    """

    styling: "tuple[Styling, ...]"
    testing: "tuple[Testing, ...]"
    routing: "tuple[Routing, ...] | None" = None
    state_management: "tuple[StateManagement, ...] | None" = None
    data_fetching: "tuple[DataFetching, ...] | None" = None
    ui_library: "tuple[UILibrary, ...] | None" = None
    form_management: "tuple[FormManagement, ...] | None" = None
    animation: "tuple[Animation, ...] | None" = None
    icons: "tuple[Icons, ...] | None" = None
    data_viz: "tuple[DataViz, ...] | None" = None
    utilities: "tuple[Utilities, ...] | None" = None
    i18n: "tuple[I18n, ...] | None" = None
    languages: "tuple[Language, ...]" = field(default_factory=_languages_factory)

    def allowed(self, axis: str) -> "tuple[Enum, ...] | None":
        """Return the declared values for ``axis``, or ``None`` if it is not exposed.

        Raises:
            KeyError: If ``axis`` is not a capability axis.
        """
        if axis not in OPTION_AXES:
            raise KeyError(axis)
        return getattr(self, axis)

    def exposed_axes(self) -> tuple[str, ...]:
        """Return the axes this framework shows, in display order."""
        return tuple(axis for axis in OPTION_AXES if getattr(self, axis) is not None)

    def supports(self, axis: str, value: Enum) -> bool:
        """Check a single value against the capability set."""
        if value.value == NONE_VALUE:
            return True
        allowed = self.allowed(axis)
        return allowed is not None and value in allowed

    def check(self, config: "ProjectConfig") -> None:
        """Fail on the first option the capability set does not cover.

        Raises:
            ConfigurationError: If the language or any selected option is unsupported.
        """
        framework = config.framework.value
        if config.language not in self.languages:
            msg = f"{framework} does not support {config.language.value}"
            raise ConfigurationError(msg, framework=framework, axis="language", value=config.language.value)
        for axis, value in config.selected_options().items():
            if self.supports(axis, value):
                continue
            allowed = self.allowed(axis)
            if allowed is None:
                msg = f"{framework} does not offer a {axis.replace('_', ' ')} option (got {value.value!r})"
            else:
                choices = ", ".join([item.value for item in allowed] + [NONE_VALUE])
                msg = f"{value.value!r} is not a supported {axis.replace('_', ' ')} option for {framework}. Expected one of: {choices}"
            raise ConfigurationError(msg, framework=framework, axis=axis, value=value.value)

    def to_dict(self) -> "dict[str, list[str] | None]":
        """Convert to plain labels for display."""
        data: dict[str, list[str] | None] = {}
        for item in fields(self):
            values = getattr(self, item.name)
            data[item.name] = None if values is None else [value.value for value in values]
        return data


@dataclass(frozen=True)
class ArtifactSet:
    """The output of one generator run.

    Attributes:
        files: Relative POSIX path to file content.
        directories: Relative directories to create, in creation order. Parent
            directories of files are created on demand and need not be listed.
    """

    files: "Mapping[str, str]"
    directories: "tuple[str, ...]" = ()

    def paths(self) -> tuple[str, ...]:
        """Return every directory and file path, directories first."""
        return (*self.directories, *sorted(self.files))


class Generator(ABC):
    """A framework generator.

    Implementations are pure: :meth:`generate` returns the same artifacts for
    the same configuration and touches nothing outside the returned value.
    """

    framework: "Framework"

    @abstractmethod
    def supported_options(self) -> GeneratorCapability:
        """Return the option values this generator can produce."""

    @abstractmethod
    def generate(self, config: "ProjectConfig") -> ArtifactSet:
        """Produce every artifact for ``config``.

        Raises:
            ConfigurationError: If ``config`` targets another framework or an unsupported option.
            GenerationError: If an artifact cannot be rendered.
        """
