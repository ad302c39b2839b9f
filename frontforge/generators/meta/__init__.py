"""Generators for frameworks that own their build pipeline."""

from frontforge.generators.meta._base import MetaFrameworkGenerator
from frontforge.generators.meta.astro import AstroGenerator
from frontforge.generators.meta.nextjs import NextJSGenerator
from frontforge.generators.meta.sveltekit import SvelteKitGenerator

__all__ = (
    "AstroGenerator",
    "MetaFrameworkGenerator",
    "NextJSGenerator",
    "SvelteKitGenerator",
)
