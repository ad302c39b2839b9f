"""Post-generation validation of a project tree.

Every check runs independently: a check that fails, or that cannot read its
file, is reported and the remaining checks still run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgspec
from rich.markup import escape
from rich.table import Table

from frontforge._console import console
from frontforge.exceptions import FrontForgeError
from frontforge.generators.shared import (
    bundler_config_path,
    framework_package,
    html_entry_path,
    main_entry_path,
    typecheck_config_paths,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from frontforge.config import ProjectConfig
    from frontforge.generators import GeneratorRegistry

__all__ = ("ValidationResult", "print_validation_report", "validate_project")

logger = logging.getLogger(__name__)

_MANIFEST_FIELDS = ("name", "scripts", "dependencies")
_OBJECT_FIELDS = ("scripts", "dependencies", "devDependencies")


@dataclass
class ValidationResult:
    """One named check over a generated project."""

    check: str
    passed: bool
    detail: str = ""


def _read_manifest(root: Path) -> "dict[str, Any]":
    data = msgspec.json.decode((root / "package.json").read_bytes())
    if not isinstance(data, dict):
        msg = "package.json is not a JSON object"
        raise msgspec.DecodeError(msg)
    for key in _OBJECT_FIELDS:
        if key in data and not isinstance(data[key], dict):
            msg = f"package.json field {key!r} is not a JSON object"
            raise msgspec.DecodeError(msg)
    return data


def _check_artifacts(root: Path, config: "ProjectConfig", registry: "GeneratorRegistry") -> ValidationResult:
    name = "Generated files"
    try:
        artifacts = registry.require(config.framework).generate(config)
    except FrontForgeError as exc:
        return ValidationResult(name, False, str(exc))
    missing = [path for path in artifacts.files if not (root / path).is_file()]
    empty = [path for path in artifacts.files if path not in missing and (root / path).stat().st_size == 0]
    if missing:
        return ValidationResult(name, False, f"missing: {', '.join(missing)}")
    if empty:
        return ValidationResult(name, False, f"empty: {', '.join(empty)}")
    return ValidationResult(name, True, f"{len(artifacts.files)} files present")


def _check_manifest(root: Path, config: "ProjectConfig") -> ValidationResult:
    name = "package.json"
    manifest = _read_manifest(root)
    absent = [key for key in _MANIFEST_FIELDS if key not in manifest]
    if absent:
        return ValidationResult(name, False, f"missing fields: {', '.join(absent)}")
    if "dev" not in manifest["scripts"]:
        return ValidationResult(name, False, "no dev script")
    return ValidationResult(name, True, "valid manifest with a dev script")


def _check_framework_dependency(root: Path, config: "ProjectConfig") -> ValidationResult:
    package = framework_package(config.framework)
    name = f"{config.framework.value} dependency"
    manifest = _read_manifest(root)
    if package in manifest.get("dependencies", {}) or package in manifest.get("devDependencies", {}):
        return ValidationResult(name, True, f"{package} is listed")
    return ValidationResult(name, False, f"{package} is not listed in package.json")


def _check_html_entry(root: Path, config: "ProjectConfig") -> ValidationResult:
    html = html_entry_path(config)
    name = "HTML entry"
    if html is None:
        return ValidationResult(name, True, f"{config.framework.value} renders its own document")
    content = (root / html).read_text(encoding="utf-8")
    entry = main_entry_path(config)
    if entry is not None and f"/{entry}" not in content:
        return ValidationResult(name, False, f"{html} does not reference /{entry}")
    return ValidationResult(name, True, html)


def _check_bundler_config(root: Path, config: "ProjectConfig") -> ValidationResult:
    path = bundler_config_path(config)
    passed = (root / path).is_file()
    return ValidationResult("Bundler config", passed, path if passed else f"{path} not found")


def _check_typecheck_configs(root: Path, config: "ProjectConfig") -> ValidationResult:
    paths = typecheck_config_paths(config)
    missing = [path for path in paths if not (root / path).is_file()]
    if missing:
        return ValidationResult("TypeScript config", False, f"missing: {', '.join(missing)}")
    return ValidationResult("TypeScript config", True, ", ".join(paths) or "not used")


def validate_project(
    path: "str | Path",
    config: "ProjectConfig",
    *,
    registry: "GeneratorRegistry | None" = None,
) -> "list[ValidationResult]":
    """Inspect a generated project.

    Args:
        path: The project directory.
        config: The resolved configuration the project was generated from.
        registry: Generators used to list the expected files. Defaults to the built-in set.

    Returns:
        One result per check, in a fixed order.
    """
    if registry is None:
        from frontforge.generators import default_registry

        registry = default_registry()
    root = Path(path)
    checks: list[tuple[str, Callable[[Path, ProjectConfig], ValidationResult]]] = [
        ("Generated files", lambda r, c: _check_artifacts(r, c, registry)),
        ("package.json", _check_manifest),
        (f"{config.framework.value} dependency", _check_framework_dependency),
        ("HTML entry", _check_html_entry),
        ("Bundler config", _check_bundler_config),
        ("TypeScript config", _check_typecheck_configs),
    ]
    results: list[ValidationResult] = []
    for name, check in checks:
        try:
            result = check(root, config)
        except (OSError, UnicodeDecodeError, msgspec.DecodeError) as exc:
            result = ValidationResult(name, False, str(exc))
        logger.debug("Check %s: %s", result.check, "passed" if result.passed else f"failed ({result.detail})")
        results.append(result)
    return results


def print_validation_report(results: "list[ValidationResult]") -> None:
    """Print validation results as a table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Status", style="dim")
    table.add_column("Check")
    table.add_column("Detail")
    for result in results:
        status = "[green]PASS[/]" if result.passed else "[red]FAIL[/]"
        table.add_row(status, escape(result.check), escape(result.detail))
    console.print(table)
