"""Dependency manifest (``package.json``) assembly.

Each option axis maps its selected value to the packages it needs. ``None``
maps to nothing. Axes own disjoint package names, so merging the per-axis
results never overwrites an entry.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from frontforge.config import (
    Animation,
    DataFetching,
    DataViz,
    FormManagement,
    Framework,
    I18n,
    Icons,
    Routing,
    StateManagement,
    Styling,
    Testing,
    UILibrary,
    Utilities,
)
from frontforge.generators.shared._json import encode_json
from frontforge.generators.shared._versions import version_of

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from frontforge.config import ProjectConfig

__all__ = ("Packages", "build_package_json", "eslint_packages", "option_packages", "pin", "test_scripts")

_REACT_FAMILY = {Framework.REACT, Framework.NEXTJS}
_SVELTE_FAMILY = {Framework.SVELTE, Framework.SVELTEKIT}


@dataclass(frozen=True)
class Packages:
    """Runtime and development packages contributed by one fragment."""

    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()

    def __add__(self, other: "Packages") -> "Packages":
        return Packages(
            (*self.dependencies, *other.dependencies),
            (*self.dev_dependencies, *other.dev_dependencies),
        )


NOTHING = Packages()


def _styling(config: "ProjectConfig") -> Packages:
    match config.styling:
        case Styling.TAILWIND if config.framework is Framework.NEXTJS:
            return Packages(dev_dependencies=("tailwindcss", "@tailwindcss/postcss"))
        case Styling.TAILWIND:
            return Packages(dev_dependencies=("tailwindcss", "@tailwindcss/vite"))
        case Styling.BOOTSTRAP:
            return Packages(("bootstrap",))
        case Styling.SASS:
            return Packages(dev_dependencies=("sass",))
        case Styling.STYLED_COMPONENTS:
            return Packages(("styled-components",))
        case _:
            return NOTHING


_ROUTING: dict[Routing, Packages] = {
    Routing.REACT_ROUTER: Packages(("react-router",)),
    Routing.TANSTACK_ROUTER: Packages(("@tanstack/react-router",)),
    Routing.VUE_ROUTER: Packages(("vue-router",)),
    Routing.ANGULAR_ROUTER: Packages(("@angular/router",)),
    Routing.SOLID_ROUTER: Packages(("@solidjs/router",)),
}

_STATE: dict[StateManagement, Packages] = {
    StateManagement.ZUSTAND: Packages(("zustand",)),
    StateManagement.REDUX_TOOLKIT: Packages(("@reduxjs/toolkit", "react-redux")),
    StateManagement.PINIA: Packages(("pinia",)),
    StateManagement.VUEX: Packages(("vuex",)),
    StateManagement.NGRX: Packages(("@ngrx/store",)),
}


def _data_fetching(config: "ProjectConfig") -> Packages:
    match config.data_fetching:
        case DataFetching.TANSTACK_QUERY if config.framework in _REACT_FAMILY:
            return Packages(("@tanstack/react-query",), ("@tanstack/react-query-devtools",))
        case DataFetching.TANSTACK_QUERY if config.framework is Framework.VUE:
            return Packages(("@tanstack/vue-query",))
        case DataFetching.TANSTACK_QUERY if config.framework in _SVELTE_FAMILY:
            return Packages(("@tanstack/svelte-query",))
        case DataFetching.TANSTACK_QUERY if config.framework is Framework.SOLID:
            return Packages(("@tanstack/solid-query",))
        case DataFetching.SWR:
            return Packages(("swr",))
        case DataFetching.AXIOS:
            return Packages(("axios",))
        case _:
            return NOTHING


_TESTING_LIBRARIES: dict[Framework, str] = {
    Framework.REACT: "@testing-library/react",
    Framework.NEXTJS: "@testing-library/react",
    Framework.VUE: "@testing-library/vue",
    Framework.SVELTE: "@testing-library/svelte",
    Framework.SVELTEKIT: "@testing-library/svelte",
    Framework.SOLID: "@solidjs/testing-library",
}


def _testing(config: "ProjectConfig") -> Packages:
    library = _TESTING_LIBRARIES.get(config.framework)
    extras = (library,) if library else ()
    match config.testing:
        case Testing.VITEST:
            return Packages(dev_dependencies=("vitest", "jsdom", "@testing-library/jest-dom", *extras))
        case Testing.JEST:
            typed = ("ts-jest", "@types/jest") if config.is_typescript else ()
            return Packages(
                dev_dependencies=("jest", "jest-environment-jsdom", "@testing-library/jest-dom", *extras, *typed),
            )
        case Testing.PLAYWRIGHT:
            return Packages(dev_dependencies=("@playwright/test",))
        case _:
            return NOTHING


_UI: dict[UILibrary, Packages] = {
    UILibrary.SHADCN: Packages(("class-variance-authority", "clsx", "tailwind-merge", "@radix-ui/react-slot")),
    UILibrary.MUI: Packages(("@mui/material", "@emotion/react", "@emotion/styled")),
    UILibrary.CHAKRA: Packages(("@chakra-ui/react", "@emotion/react")),
    UILibrary.ANT_DESIGN: Packages(("antd",)),
    UILibrary.HEADLESS_UI: Packages(("@headlessui/react",)),
    UILibrary.VUETIFY: Packages(("vuetify",)),
    UILibrary.PRIMEVUE: Packages(("primevue", "@primeuix/themes")),
    UILibrary.ELEMENT_PLUS: Packages(("element-plus",)),
    UILibrary.NAIVE_UI: Packages(("naive-ui",)),
    UILibrary.ANGULAR_MATERIAL: Packages(("@angular/material", "@angular/cdk")),
    UILibrary.PRIMENG: Packages(("primeng", "@primeuix/themes")),
    UILibrary.NG_ZORRO: Packages(("ng-zorro-antd",)),
}

_FORMS: dict[FormManagement, Packages] = {
    FormManagement.REACT_HOOK_FORM: Packages(("react-hook-form", "@hookform/resolvers", "zod")),
    FormManagement.FORMIK: Packages(("formik", "yup")),
    FormManagement.TANSTACK_FORM: Packages(("@tanstack/react-form",)),
    FormManagement.VEE_VALIDATE: Packages(("vee-validate",)),
    FormManagement.ZOD: Packages(("zod",)),
    FormManagement.YUP: Packages(("yup",)),
}

_ANIMATION: dict[Animation, Packages] = {
    Animation.FRAMER_MOTION: Packages(("motion",)),
    Animation.GSAP: Packages(("gsap",)),
    Animation.AUTO_ANIMATE: Packages(("@formkit/auto-animate",)),
    Animation.REACT_SPRING: Packages(("@react-spring/web",)),
}

_LUCIDE: dict[Framework, str] = {
    Framework.REACT: "lucide-react",
    Framework.VUE: "lucide-vue-next",
    Framework.SVELTE: "@lucide/svelte",
    Framework.SOLID: "lucide-solid",
    Framework.ANGULAR: "lucide-angular",
}

_FONT_AWESOME: dict[Framework, str] = {
    Framework.REACT: "@fortawesome/react-fontawesome",
    Framework.VUE: "@fortawesome/vue-fontawesome",
    Framework.ANGULAR: "@fortawesome/angular-fontawesome",
}


def _icons(config: "ProjectConfig") -> Packages:
    match config.icons:
        case Icons.REACT_ICONS:
            return Packages(("react-icons",))
        case Icons.HEROICONS:
            return Packages(("@heroicons/vue",) if config.framework is Framework.VUE else ("@heroicons/react",))
        case Icons.LUCIDE:
            return Packages((_LUCIDE[config.framework],))
        case Icons.FONT_AWESOME:
            return Packages(
                (
                    "@fortawesome/fontawesome-svg-core",
                    "@fortawesome/free-solid-svg-icons",
                    _FONT_AWESOME[config.framework],
                ),
            )
        case _:
            return NOTHING


def _data_viz(config: "ProjectConfig") -> Packages:
    react = config.framework is Framework.REACT
    vue = config.framework is Framework.VUE
    match config.data_viz:
        case DataViz.RECHARTS:
            return Packages(("recharts",))
        case DataViz.CHARTJS:
            binding = ("react-chartjs-2",) if react else ("vue-chartjs",) if vue else ()
            return Packages(("chart.js", *binding))
        case DataViz.ECHARTS:
            binding = ("echarts-for-react",) if react else ("vue-echarts",) if vue else ()
            return Packages(("echarts", *binding))
        case DataViz.NIVO:
            return Packages(("@nivo/core", "@nivo/bar"))
        case _:
            return NOTHING


def _utilities(config: "ProjectConfig") -> Packages:
    match config.utilities:
        case Utilities.DATE_FNS:
            return Packages(("date-fns",))
        case Utilities.DAYJS:
            return Packages(("dayjs",))
        case Utilities.LODASH:
            return Packages(("lodash-es",), ("@types/lodash-es",) if config.is_typescript else ())
        case _:
            return NOTHING


_I18N: dict[I18n, Packages] = {
    I18n.REACT_I18NEXT: Packages(("i18next", "react-i18next")),
    I18n.VUE_I18N: Packages(("vue-i18n",)),
}

_AXIS_PACKAGES: "tuple[Callable[[ProjectConfig], Packages], ...]" = (
    _styling,
    lambda config: _ROUTING.get(config.routing, NOTHING),
    lambda config: _STATE.get(config.state_management, NOTHING),
    _data_fetching,
    _testing,
    lambda config: _UI.get(config.ui_library, NOTHING),
    lambda config: _FORMS.get(config.form_management, NOTHING),
    lambda config: _ANIMATION.get(config.animation, NOTHING),
    _icons,
    _data_viz,
    _utilities,
    lambda config: _I18N.get(config.i18n, NOTHING),
)


def option_packages(config: "ProjectConfig") -> Packages:
    """Collect the packages every selected option contributes.

    Returns:
        The combined packages, in axis order.
    """
    total = NOTHING
    for contribute in _AXIS_PACKAGES:
        total += contribute(config)
    return total


def eslint_packages(config: "ProjectConfig") -> Packages:
    """Return the lint tooling for the framework and language."""
    dev = ["eslint", "@eslint/js", "globals"]
    if config.is_typescript:
        dev.append("typescript-eslint")
    match config.framework:
        case Framework.REACT:
            dev += ["eslint-plugin-react-hooks", "eslint-plugin-react-refresh"]
        case Framework.NEXTJS:
            dev.append("eslint-config-next")
        case Framework.VUE:
            dev.append("eslint-plugin-vue")
        case Framework.SVELTE | Framework.SVELTEKIT:
            dev.append("eslint-plugin-svelte")
        case Framework.ASTRO:
            dev.append("eslint-plugin-astro")
        case _:
            pass
    return Packages(dev_dependencies=tuple(dev))


def test_scripts(config: "ProjectConfig") -> dict[str, str]:
    """Return the package scripts for the selected test runner."""
    match config.testing:
        case Testing.VITEST:
            return {"test": "vitest"}
        case Testing.JEST:
            return {"test": "jest"}
        case Testing.PLAYWRIGHT:
            return {"test": "playwright test"}
        case _:
            return {}


def pin(packages: "Iterable[str]") -> dict[str, str]:
    """Map package names to their version ranges, sorted by name."""
    return {name: version_of(name) for name in sorted(set(packages))}


def build_package_json(
    config: "ProjectConfig",
    *,
    scripts: "Mapping[str, str]",
    packages: Packages,
) -> str:
    """Render ``package.json``.

    Args:
        config: The resolved project configuration.
        scripts: Package scripts in display order.
        packages: Framework, tooling and option packages combined.

    Returns:
        The manifest as formatted JSON.
    """
    dependencies = pin(packages.dependencies)
    # A package needed at runtime is never also listed as a dev dependency.
    dev_dependencies = pin(name for name in packages.dev_dependencies if name not in dependencies)
    manifest = {
        "name": config.project_name,
        "private": True,
        "version": "0.0.0",
        "type": "module",
        "scripts": dict(scripts),
        "dependencies": dependencies,
        "devDependencies": dev_dependencies,
    }
    return encode_json(manifest)
