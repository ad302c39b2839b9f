"""Tests for the framework generators."""

from dataclasses import replace
from typing import Any

import msgspec
import pytest

from frontforge.config import (
    DataFetching,
    Framework,
    Language,
    ProjectConfig,
    Routing,
    StateManagement,
    Structure,
    Styling,
    Testing,
    quick_preset,
)
from frontforge.exceptions import ConfigurationError
from frontforge.generators import ArtifactSet, GeneratorRegistry
from frontforge.generators.shared import framework_package
from tests.conftest import config_for

_LANGUAGE_CASES = [
    (framework, language)
    for framework in Framework
    for language in Language
    if not (framework is Framework.ANGULAR and language is Language.JAVASCRIPT)
]


def _manifest(artifacts: ArtifactSet) -> "dict[str, Any]":
    return msgspec.json.decode(artifacts.files["package.json"])


# =====================================================
# Properties shared by every generator
# =====================================================


@pytest.mark.parametrize(("framework", "language"), _LANGUAGE_CASES)
def test_generate_is_deterministic(registry: GeneratorRegistry, framework: Framework, language: Language) -> None:
    config = config_for(framework, language=language)
    generator = registry.require(framework)

    first = generator.generate(config)
    second = generator.generate(config)

    assert first.files == second.files
    assert first.directories == second.directories
    assert list(first.files) == sorted(first.files)


@pytest.mark.parametrize(("framework", "language"), _LANGUAGE_CASES)
def test_generate_writes_valid_manifest(registry: GeneratorRegistry, framework: Framework, language: Language) -> None:
    artifacts = registry.require(framework).generate(config_for(framework, language=language))
    manifest = _manifest(artifacts)

    assert manifest["name"] == "demo"
    assert "dev" in manifest["scripts"]
    package = framework_package(framework)
    assert package in manifest["dependencies"] or package in manifest["devDependencies"]
    assert not set(manifest["dependencies"]) & set(manifest["devDependencies"])
    assert list(manifest["dependencies"]) == sorted(manifest["dependencies"])


@pytest.mark.parametrize(("framework", "language"), _LANGUAGE_CASES)
def test_generate_uses_relative_paths(registry: GeneratorRegistry, framework: Framework, language: Language) -> None:
    artifacts = registry.require(framework).generate(config_for(framework, language=language))

    for path in artifacts.paths():
        assert not path.startswith("/")
        assert ".." not in path.split("/")
        assert "\\" not in path
    assert all(content for content in artifacts.files.values())


@pytest.mark.parametrize("framework", list(Framework))
def test_generate_minimal_configuration(registry: GeneratorRegistry, framework: Framework) -> None:
    config = ProjectConfig(project_name="bare", framework=framework)

    artifacts = registry.require(framework).generate(config)

    assert "package.json" in artifacts.files
    assert "README.md" in artifacts.files
    assert ".gitignore" in artifacts.files


def test_generate_refuses_unsupported_option(registry: GeneratorRegistry) -> None:
    config = replace(quick_preset(project_name="demo"), state_management=StateManagement.PINIA)

    with pytest.raises(ConfigurationError):
        registry.require(Framework.REACT).generate(config)


def test_artifact_paths_list_directories_first() -> None:
    artifacts = ArtifactSet(files={"b.txt": "b", "a.txt": "a"}, directories=("src", "src/lib"))

    assert artifacts.paths() == ("src", "src/lib", "a.txt", "b.txt")


# =====================================================
# React
# =====================================================


def test_react_quick_preset_entry(registry: GeneratorRegistry) -> None:
    artifacts = registry.require(Framework.REACT).generate(quick_preset(project_name="my-app"))
    main = artifacts.files["src/main.tsx"]

    positions = [main.index(tag) for tag in ("<StrictMode>", "<QueryClientProvider", "<BrowserRouter>", "<App />")]
    assert positions == sorted(positions)
    assert "<ReactQueryDevtools initialIsOpen={false} />" in main
    assert "import { queryClient } from './lib/queryClient'" in main
    assert "document.getElementById('root')!" in main
    assert "import './index.css'" in main


def test_react_quick_preset_manifest(registry: GeneratorRegistry) -> None:
    manifest = _manifest(registry.require(Framework.REACT).generate(quick_preset(project_name="my-app")))

    for package in ("react", "react-dom", "react-router", "zustand", "@tanstack/react-query"):
        assert package in manifest["dependencies"]
    for package in ("vite", "typescript", "@vitejs/plugin-react", "tailwindcss", "@tailwindcss/vite", "vitest"):
        assert package in manifest["devDependencies"]
    assert manifest["scripts"]["test"] == "vitest"
    assert manifest["private"] is True


def test_react_quick_preset_files(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.REACT).generate(quick_preset(project_name="my-app")).files

    for path in (
        "index.html",
        "vite.config.ts",
        "tsconfig.json",
        "tsconfig.app.json",
        "tsconfig.node.json",
        "src/App.tsx",
        "src/index.css",
        "src/store/useCounterStore.ts",
        "src/lib/queryClient.ts",
        "src/lib/utils.ts",
        "src/features/README.md",
        "vitest.config.ts",
        "src/test/setup.ts",
        "eslint.config.js",
    ):
        assert path in files
    assert "/src/main.tsx" in files["index.html"]
    assert "plugins: [tailwindcss(), react()]" in files["vite.config.ts"]
    assert "export function cn(" in files["src/lib/utils.ts"]
    assert msgspec.json.decode(files["tsconfig.app.json"])["compilerOptions"]["jsx"] == "react-jsx"


def test_react_redux_sits_between_query_and_router(registry: GeneratorRegistry) -> None:
    config = replace(quick_preset(project_name="demo"), state_management=StateManagement.REDUX_TOOLKIT)

    files = registry.require(Framework.REACT).generate(config).files
    main = files["src/main.tsx"]

    positions = [main.index(tag) for tag in ("<QueryClientProvider", "<Provider store={store}>", "<BrowserRouter>")]
    assert positions == sorted(positions)
    assert "src/store/index.ts" in files


def test_react_javascript(registry: GeneratorRegistry) -> None:
    config = replace(quick_preset(project_name="demo"), language=Language.JAVASCRIPT)

    files = registry.require(Framework.REACT).generate(config).files

    assert "src/main.jsx" in files
    assert "document.getElementById('root')!" not in files["src/main.jsx"]
    assert "tsconfig.json" not in files
    assert "vite.config.js" in files
    assert "typescript" not in _manifest(ArtifactSet(files))["devDependencies"]


def test_react_without_providers(registry: GeneratorRegistry) -> None:
    main = registry.require(Framework.REACT).generate(ProjectConfig(project_name="demo")).files["src/main.tsx"]

    assert "  <StrictMode>\n    <App />\n  </StrictMode>" in main
    assert "QueryClientProvider" not in main


def test_react_tanstack_router(registry: GeneratorRegistry) -> None:
    config = ProjectConfig(project_name="demo", routing=Routing.TANSTACK_ROUTER)

    files = registry.require(Framework.REACT).generate(config).files

    assert "<RouterProvider router={router} />" in files["src/main.tsx"]
    assert "src/router.tsx" in files


def test_react_css_modules(registry: GeneratorRegistry) -> None:
    config = ProjectConfig(project_name="demo", styling=Styling.CSS_MODULES)

    files = registry.require(Framework.REACT).generate(config).files

    assert "src/App.module.css" in files
    assert "import styles from './App.module.css'" in files["src/App.tsx"]
    assert "src/index.css" not in files


def test_react_layer_based_structure(registry: GeneratorRegistry) -> None:
    config = ProjectConfig(project_name="demo", structure=Structure.LAYER_BASED, data_fetching=DataFetching.FETCH_API)

    artifacts = registry.require(Framework.REACT).generate(config)

    assert "src/services" in artifacts.directories
    assert "src/features" not in artifacts.directories
    assert "src/services/api.ts" in artifacts.files
    assert "src/features/README.md" not in artifacts.files


# =====================================================
# Other Vite frameworks
# =====================================================


def test_vue_entry(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.VUE).generate(config_for(Framework.VUE)).files
    main = files["src/main.ts"]

    assert "app.use(router)" in main
    assert "app.use(createPinia())" in main
    assert "app.mount('#app')" in main
    assert "src/router/index.ts" in files
    assert "src/stores/counter.ts" in files
    assert '<div id="app"></div>' in files["index.html"]


def test_angular_files(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.ANGULAR).generate(config_for(Framework.ANGULAR)).files

    assert "<app-root></app-root>" in files["index.html"]
    assert "provideRouter(routes)" in files["src/app/app.config.ts"]
    assert "src/app/app.routes.ts" in files
    assert "src/app/counter.reducer.ts" in files
    assert "{{ count() }}" in files["src/app/app.component.ts"]


def test_svelte_stores(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.SVELTE).generate(config_for(Framework.SVELTE)).files

    assert "src/lib/stores.ts" in files
    assert "import { count } from './lib/stores'" in files["src/App.svelte"]
    assert "svelte.config.js" in files


def test_solid_entry(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.SOLID).generate(config_for(Framework.SOLID)).files

    assert "src/main.tsx" in files
    assert "src/store.ts" in files


def test_vanilla_entry(registry: GeneratorRegistry) -> None:
    config = ProjectConfig(project_name="demo", framework=Framework.VANILLA, language=Language.JAVASCRIPT)

    files = registry.require(Framework.VANILLA).generate(config).files

    assert "src/main.js" in files
    assert "src/App.js" in files
    assert "/src/main.js" in files["index.html"]


# =====================================================
# Meta frameworks
# =====================================================


def test_nextjs_files(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.NEXTJS).generate(config_for(Framework.NEXTJS)).files

    assert "index.html" not in files
    assert not any(path.startswith("vite.config") for path in files)
    for path in ("next.config.ts", "src/app/layout.tsx", "src/app/page.tsx", "next-env.d.ts", "tsconfig.json"):
        assert path in files
    assert "postcss.config.mjs" in files
    assert "src/app/globals.css" in files


def test_nextjs_providers_module(registry: GeneratorRegistry) -> None:
    config = replace(config_for(Framework.NEXTJS), data_fetching=DataFetching.TANSTACK_QUERY)

    files = registry.require(Framework.NEXTJS).generate(config).files
    providers = files["src/app/providers.tsx"]

    assert providers.startswith("'use client'")
    assert "<QueryClientProvider client={queryClient}>" in providers
    assert "import { queryClient } from '../lib/queryClient'" in providers


def test_nextjs_javascript(registry: GeneratorRegistry) -> None:
    config = replace(config_for(Framework.NEXTJS), language=Language.JAVASCRIPT)

    files = registry.require(Framework.NEXTJS).generate(config).files

    assert "next.config.mjs" in files
    assert "jsconfig.json" in files
    assert "tsconfig.json" not in files
    assert "src/app/page.jsx" in files


def test_astro_files(registry: GeneratorRegistry) -> None:
    files = registry.require(Framework.ASTRO).generate(config_for(Framework.ASTRO, language=Language.JAVASCRIPT)).files

    for path in ("astro.config.mjs", "src/pages/index.astro", "src/layouts/Layout.astro", "tsconfig.json"):
        assert path in files
    assert "astro/tsconfigs/base" in files["tsconfig.json"]
    assert "index.html" not in files


def test_sveltekit_files(registry: GeneratorRegistry) -> None:
    artifacts = registry.require(Framework.SVELTEKIT).generate(config_for(Framework.SVELTEKIT))
    files = artifacts.files

    for path in ("svelte.config.js", "src/app.html", "src/routes/+page.svelte", "src/routes/+layout.svelte"):
        assert path in files
    assert "sveltekit()" in files["vite.config.ts"]
    assert "src/lib/stores/counter.ts" in files
    assert "static" in artifacts.directories


def test_sveltekit_vitest_setup_location(registry: GeneratorRegistry) -> None:
    config = replace(config_for(Framework.SVELTEKIT), testing=Testing.VITEST)

    files = registry.require(Framework.SVELTEKIT).generate(config).files

    assert "src/lib/test/setup.ts" in files
