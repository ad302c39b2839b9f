"""Tests for frontforge.preflight module."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from frontforge._console import console
from frontforge.config import PackageManager, ProjectConfig
from frontforge.preflight import (
    MIN_DISK_SPACE_MB,
    PreflightCheck,
    _parse_version,
    check_disk_space,
    check_node,
    check_package_manager,
    has_fatal_failures,
    print_preflight_report,
    run_preflight_checks,
)

_MB = 1024 * 1024


@pytest.mark.parametrize(
    ("text", "expected"),
    [("v20.19.0\n", (20, 19, 0)), ("22.1.3", (22, 1, 3)), ("node", None)],
)
def test_parse_version(text: str, expected: "tuple[int, int, int] | None") -> None:
    assert _parse_version(text) == expected


# =====================================================
# Node.js
# =====================================================


@patch("shutil.which")
def test_check_node_missing(mock_which: Mock) -> None:
    mock_which.return_value = None

    check = check_node()

    assert check.name == "Node.js"
    assert not check.passed
    assert check.fatal
    assert "nodejs.org" in check.suggestion


@patch("subprocess.run")
@patch("shutil.which")
def test_check_node_recent(mock_which: Mock, mock_run: Mock) -> None:
    mock_which.return_value = "/usr/bin/node"
    mock_run.return_value = Mock(returncode=0, stdout="v22.12.0\n")

    check = check_node()

    assert check.passed
    assert check.message == "found 22.12.0"
    args, kwargs = mock_run.call_args
    assert args[0] == ["/usr/bin/node", "--version"]
    assert kwargs["check"] is False


@patch("subprocess.run")
@patch("shutil.which")
def test_check_node_too_old(mock_which: Mock, mock_run: Mock) -> None:
    mock_which.return_value = "/usr/bin/node"
    mock_run.return_value = Mock(returncode=0, stdout="v18.20.4\n")

    check = check_node()

    assert not check.passed
    assert "found 18.20.4" in check.message


@patch("subprocess.run")
@patch("shutil.which")
def test_check_node_unreadable_version(mock_which: Mock, mock_run: Mock) -> None:
    mock_which.return_value = "/usr/bin/node"
    mock_run.return_value = Mock(returncode=1, stdout="")

    assert not check_node().passed


@patch("subprocess.run")
@patch("shutil.which")
def test_check_node_timeout(mock_which: Mock, mock_run: Mock) -> None:
    mock_which.return_value = "/usr/bin/node"
    mock_run.side_effect = subprocess.TimeoutExpired(["node", "--version"], 10)

    check = check_node()

    assert not check.passed
    assert check.message.startswith("could not run node")


# =====================================================
# Package manager and disk space
# =====================================================


@patch("shutil.which")
def test_check_package_manager(mock_which: Mock) -> None:
    mock_which.return_value = "/usr/bin/pnpm"

    check = check_package_manager(PackageManager.PNPM)

    assert check.passed
    assert check.name == "Package manager (pnpm)"
    mock_which.assert_called_once_with("pnpm")


@patch("shutil.which")
def test_check_package_manager_missing(mock_which: Mock) -> None:
    mock_which.return_value = None

    check = check_package_manager(PackageManager.YARN)

    assert not check.passed
    assert "--pm" in check.suggestion


@patch("shutil.disk_usage")
def test_check_disk_space_uses_existing_ancestor(mock_usage: Mock, tmp_path: Path) -> None:
    mock_usage.return_value = Mock(free=2048 * _MB)

    check = check_disk_space(tmp_path / "not" / "created")

    assert check.passed
    assert check.message == "2048 MB free"
    mock_usage.assert_called_once_with(tmp_path)


@patch("shutil.disk_usage")
def test_check_disk_space_low_is_not_fatal(mock_usage: Mock, tmp_path: Path) -> None:
    mock_usage.return_value = Mock(free=100 * _MB)

    check = check_disk_space(tmp_path)

    assert not check.passed
    assert not check.fatal
    assert f"{MIN_DISK_SPACE_MB} MB recommended" in check.message


# =====================================================
# Aggregation
# =====================================================


def test_has_fatal_failures() -> None:
    warning = PreflightCheck("Disk space", False, "low", fatal=False)
    error = PreflightCheck("Node.js", False, "missing")
    ok = PreflightCheck("Node.js", True, "found 22.0.0")

    assert not has_fatal_failures([ok, warning])
    assert has_fatal_failures([ok, warning, error])


@patch("shutil.disk_usage")
@patch("subprocess.run")
@patch("shutil.which")
def test_run_preflight_checks(mock_which: Mock, mock_run: Mock, mock_usage: Mock, tmp_path: Path) -> None:
    mock_which.return_value = "/usr/bin/tool"
    mock_run.return_value = Mock(returncode=0, stdout="v22.12.0\n")
    mock_usage.return_value = Mock(free=4096 * _MB)
    config = ProjectConfig(project_path=tmp_path / "app", package_manager=PackageManager.BUN)

    checks = run_preflight_checks(config)

    assert [check.name for check in checks] == ["Node.js", "Package manager (bun)", "Disk space"]
    assert not has_fatal_failures(checks)


def test_print_preflight_report() -> None:
    checks = [
        PreflightCheck("Node.js", True, "found 22.12.0"),
        PreflightCheck("Disk space", False, "100 MB free", "Free up disk space", fatal=False),
    ]

    with console.capture() as capture:
        print_preflight_report(checks)

    output = capture.get()
    assert "Node.js" in output
    assert "WARNING" in output
