from collections.abc import Generator
from dataclasses import replace
from pathlib import Path

import pytest

from frontforge.config import Framework, ProjectConfig, framework_defaults, quick_preset
from frontforge.generators import GeneratorRegistry, default_registry

# Environment variables that may affect test behavior - clear before each test
_FRONTFORGE_ENV_VARS = [
    "FRONTFORGE_LOG_LEVEL",
    "FRONTFORGE_NO_COLOR",
]


@pytest.fixture(autouse=True)
def clean_frontforge_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear Frontforge environment variables before each test for isolation."""
    for var in _FRONTFORGE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def registry() -> GeneratorRegistry:
    return default_registry()


@pytest.fixture
def react_config(tmp_path: Path) -> ProjectConfig:
    """The recommended React setup, targeting a fresh directory."""
    return quick_preset(project_name="my-app", project_path=tmp_path / "my-app")


def config_for(framework: Framework, **changes: object) -> ProjectConfig:
    """Build a supported configuration for ``framework`` named ``demo``."""
    return replace(framework_defaults(framework), project_name="demo", **changes)
