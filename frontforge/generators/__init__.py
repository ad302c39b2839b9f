"""Per-framework project generators.

Each generator turns a :class:`~frontforge.config.ProjectConfig` into an
:class:`ArtifactSet` without touching the filesystem. The registry maps
frameworks to generators; :func:`default_registry` holds the built-in set.
"""

from frontforge.generators.base import ArtifactSet, Generator, GeneratorCapability
from frontforge.generators.capabilities import COMPATIBILITY
from frontforge.generators.registry import GeneratorRegistry, default_registry

__all__ = (
    "COMPATIBILITY",
    "ArtifactSet",
    "Generator",
    "GeneratorCapability",
    "GeneratorRegistry",
    "default_registry",
)
