"""Tests for frontforge.executor module."""

import sys
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from frontforge.config import PackageManager
from frontforge.exceptions import ExecutableNotFoundError, InstallError
from frontforge.executor import (
    STDERR_TAIL_LINES,
    BunExecutor,
    CommandExecutor,
    NodeExecutor,
    PnpmExecutor,
    YarnExecutor,
    get_executor,
)


def _python_executor(script: str) -> CommandExecutor:
    """An executor whose "install" runs a Python snippet with the current interpreter."""

    class PythonExecutor(CommandExecutor):
        bin_name = "python"
        install_args = ("-c", script)

    return PythonExecutor(executable_path=sys.executable)


# =====================================================
# Executable resolution
# =====================================================


@patch("shutil.which")
def test_executor_resolve_executable_found(mock_which: Mock) -> None:
    """Test that resolve_executable returns the path when found."""
    mock_which.return_value = "/usr/bin/npm"
    executor = NodeExecutor()
    assert executor._resolve_executable() == "/usr/bin/npm"
    mock_which.assert_called_once_with("npm")


@patch("shutil.which")
def test_executor_resolve_executable_not_found(mock_which: Mock) -> None:
    """Test that resolve_executable raises when executable not found."""
    mock_which.return_value = None
    executor = YarnExecutor()
    with pytest.raises(ExecutableNotFoundError) as exc_info:
        executor._resolve_executable()
    assert exc_info.value.executable == "yarn"
    assert isinstance(exc_info.value, InstallError)


def test_executor_resolve_executable_custom_path() -> None:
    """Test that custom executable path is used directly."""
    executor = NodeExecutor(executable_path="/custom/npm")
    assert executor._resolve_executable() == "/custom/npm"


def test_executor_commands() -> None:
    executor = PnpmExecutor()

    assert executor.install_command == ["pnpm", "install"]
    assert executor.dev_command == ["pnpm", "run", "dev"]
    assert executor.build_command == ["pnpm", "run", "build"]


@pytest.mark.parametrize(
    ("package_manager", "executor_cls"),
    [
        (PackageManager.NPM, NodeExecutor),
        (PackageManager.YARN, YarnExecutor),
        (PackageManager.PNPM, PnpmExecutor),
        ("bun", BunExecutor),
    ],
)
def test_get_executor(package_manager: "PackageManager | str", executor_cls: type) -> None:
    assert type(get_executor(package_manager)) is executor_cls


def test_get_executor_custom_path() -> None:
    assert get_executor(PackageManager.BUN, "/opt/bun").executable_path == "/opt/bun"


@patch("frontforge.executor.anyio.run")
@patch("shutil.which")
def test_executor_install_command(mock_which: Mock, mock_run: Mock, tmp_path: Path) -> None:
    """Test executor install runs the resolved install command in the project directory."""
    mock_which.return_value = "/usr/bin/npm"
    executor = NodeExecutor()

    executor.install(tmp_path)

    mock_run.assert_called_once()
    args, _ = mock_run.call_args
    assert args[1] == ["/usr/bin/npm", "install"]
    assert args[2] == tmp_path


@patch("shutil.which")
def test_executor_install_missing_executable(mock_which: Mock, tmp_path: Path) -> None:
    mock_which.return_value = None

    with pytest.raises(ExecutableNotFoundError):
        BunExecutor().install(tmp_path)


# =====================================================
# Process execution
# =====================================================


def test_executor_install_streams_both_streams(tmp_path: Path) -> None:
    executor = _python_executor("import sys; print('out line'); print('err line', file=sys.stderr)")
    lines: list[str] = []

    executor.install(tmp_path, on_line=lines.append, timeout=60)

    assert sorted(lines) == ["err line", "out line"]


def test_executor_install_runs_in_project_directory(tmp_path: Path) -> None:
    executor = _python_executor("import os; print(os.getcwd())")
    lines: list[str] = []

    executor.install(tmp_path, on_line=lines.append, timeout=60)

    assert Path(lines[0]).resolve() == tmp_path.resolve()


def test_executor_install_failure_keeps_stderr(tmp_path: Path) -> None:
    executor = _python_executor("import sys; print('boom', file=sys.stderr); sys.exit(3)")

    with pytest.raises(InstallError) as exc_info:
        executor.install(tmp_path, timeout=60)

    assert exc_info.value.return_code == 3
    assert exc_info.value.stderr == "boom"
    assert exc_info.value.command[0] == sys.executable


def test_executor_install_stderr_tail_is_bounded(tmp_path: Path) -> None:
    script = "import sys\nfor i in range(80):\n    print(f'line {i}', file=sys.stderr)\nsys.exit(1)"
    executor = _python_executor(script)

    with pytest.raises(InstallError) as exc_info:
        executor.install(tmp_path, timeout=60)

    tail = exc_info.value.stderr.splitlines()
    assert len(tail) == STDERR_TAIL_LINES
    assert tail[-1] == "line 79"


def test_executor_install_timeout(tmp_path: Path) -> None:
    executor = _python_executor("import time; time.sleep(30)")

    with pytest.raises(InstallError) as exc_info:
        executor.install(tmp_path, timeout=0.5)

    assert exc_info.value.return_code is None
    assert "timed out" in exc_info.value.stderr


def test_executor_install_unstartable_process(tmp_path: Path) -> None:
    executor = NodeExecutor(executable_path=tmp_path / "missing" / "npm")

    with pytest.raises(InstallError) as exc_info:
        executor.install(tmp_path, timeout=60)

    assert exc_info.value.return_code is None
