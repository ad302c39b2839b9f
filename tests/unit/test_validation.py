"""Tests for frontforge.validation module."""

from dataclasses import replace
from pathlib import Path

from frontforge._console import console
from frontforge.config import Framework, ProjectConfig
from frontforge.generators import GeneratorRegistry
from frontforge.project import SetupResult, setup_project
from frontforge.validation import ValidationResult, print_validation_report, validate_project
from tests.conftest import config_for

_CHECKS = ["Generated files", "package.json", "React dependency", "HTML entry", "Bundler config", "TypeScript config"]


def _created(config: ProjectConfig, registry: GeneratorRegistry) -> SetupResult:
    return setup_project(config, registry)


def test_validate_generated_project_passes(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)

    assert [check.check for check in result.validation] == _CHECKS
    assert all(check.passed for check in result.validation)
    assert result.passed


def test_validate_missing_html_entry(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)
    (result.project_path / "index.html").unlink()

    checks = {check.check: check for check in validate_project(result.project_path, result.config, registry=registry)}

    assert not checks["Generated files"].passed
    assert "index.html" in checks["Generated files"].detail
    assert not checks["HTML entry"].passed
    assert checks["package.json"].passed


def test_validate_html_entry_must_reference_main_module(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)
    (result.project_path / "index.html").write_text("<html></html>\n")

    checks = {check.check: check for check in validate_project(result.project_path, result.config, registry=registry)}

    assert not checks["HTML entry"].passed
    assert "/src/main.tsx" in checks["HTML entry"].detail


def test_validate_corrupt_manifest_does_not_stop_other_checks(
    react_config: ProjectConfig,
    registry: GeneratorRegistry,
) -> None:
    result = _created(react_config, registry)
    (result.project_path / "package.json").write_text("{not json")

    checks = validate_project(result.project_path, result.config, registry=registry)

    assert len(checks) == len(_CHECKS)
    by_name = {check.check: check for check in checks}
    assert not by_name["package.json"].passed
    assert not by_name["React dependency"].passed
    assert by_name["Bundler config"].passed


def test_validate_manifest_without_dev_script(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)
    (result.project_path / "package.json").write_text('{"name": "x", "scripts": {}, "dependencies": {}}')

    checks = {check.check: check for check in validate_project(result.project_path, result.config, registry=registry)}

    assert checks["package.json"].detail == "no dev script"
    assert checks["React dependency"].detail == "react is not listed in package.json"


def test_validate_empty_file(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)
    (result.project_path / "README.md").write_text("")

    checks = {check.check: check for check in validate_project(result.project_path, result.config, registry=registry)}

    assert checks["Generated files"].detail == "empty: README.md"


def test_validate_meta_framework_without_html(tmp_path: Path, registry: GeneratorRegistry) -> None:
    config = replace(config_for(Framework.NEXTJS), project_path=tmp_path / "next-app")
    result = setup_project(config, registry)

    checks = {check.check: check for check in result.validation}
    assert checks["HTML entry"].passed
    assert checks["HTML entry"].detail == "Next.js renders its own document"
    assert checks["Bundler config"].detail == "next.config.ts"
    assert result.passed


def test_print_validation_report() -> None:
    with console.capture() as capture:
        print_validation_report([ValidationResult("package.json", True), ValidationResult("HTML entry", False, "gone")])

    output = capture.get()
    assert "PASS" in output
    assert "FAIL" in output


def test_validate_manifest_with_non_object_fields(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)
    (result.project_path / "package.json").write_text('{"name": "a", "scripts": 5, "dependencies": null}')

    checks = validate_project(result.project_path, result.config, registry=registry)

    assert [check.check for check in checks] == _CHECKS
    by_name = {check.check: check for check in checks}
    assert not by_name["package.json"].passed
    assert "'scripts' is not a JSON object" in by_name["package.json"].detail
    assert not by_name["React dependency"].passed
    assert by_name["Bundler config"].passed
    assert by_name["HTML entry"].passed


def test_validate_undecodable_html_entry(react_config: ProjectConfig, registry: GeneratorRegistry) -> None:
    result = _created(react_config, registry)
    (result.project_path / "index.html").write_bytes(b"\xff\xfe\x00bad")

    checks = validate_project(result.project_path, result.config, registry=registry)

    assert [check.check for check in checks] == _CHECKS
    by_name = {check.check: check for check in checks}
    assert not by_name["HTML entry"].passed
    assert by_name["package.json"].passed
    assert by_name["TypeScript config"].passed


def test_print_validation_report_keeps_brackets() -> None:
    with console.capture() as capture:
        print_validation_report([ValidationResult("Generated files", False, "missing: [red]x")])

    assert "[red]x" in capture.get()
