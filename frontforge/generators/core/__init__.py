"""Generators for frameworks that use a project-level Vite config."""

from frontforge.generators.core._base import ViteGenerator, check_target
from frontforge.generators.core.angular import AngularGenerator
from frontforge.generators.core.react import ReactGenerator
from frontforge.generators.core.solid import SolidGenerator
from frontforge.generators.core.svelte import SvelteGenerator
from frontforge.generators.core.vanilla import VanillaGenerator
from frontforge.generators.core.vue import VueGenerator

__all__ = (
    "AngularGenerator",
    "ReactGenerator",
    "SolidGenerator",
    "SvelteGenerator",
    "VanillaGenerator",
    "ViteGenerator",
    "VueGenerator",
    "check_target",
)
