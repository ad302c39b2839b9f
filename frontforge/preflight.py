"""Environment checks run before dependencies are installed."""

import logging
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from frontforge._console import console

if TYPE_CHECKING:
    from frontforge.config import PackageManager, ProjectConfig

__all__ = (
    "MIN_DISK_SPACE_MB",
    "MIN_NODE_VERSION",
    "PreflightCheck",
    "check_disk_space",
    "check_node",
    "check_package_manager",
    "has_fatal_failures",
    "print_preflight_report",
    "run_preflight_checks",
)

logger = logging.getLogger(__name__)

MIN_NODE_VERSION: tuple[int, int, int] = (20, 19, 0)
"""Oldest Node.js release supported by the generated toolchains."""

MIN_DISK_SPACE_MB = 500
"""Free space needed for a typical ``node_modules`` directory."""

_VERSION_RE = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


@dataclass
class PreflightCheck:
    """Result of one environment check."""

    name: str
    passed: bool
    message: str
    suggestion: str = ""
    fatal: bool = True


def _parse_version(text: str) -> "tuple[int, int, int] | None":
    match = _VERSION_RE.search(text)
    if match is None:
        return None
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


def check_node() -> PreflightCheck:
    """Check that Node.js is installed and recent enough."""
    name = "Node.js"
    required = ".".join(str(part) for part in MIN_NODE_VERSION)
    suggestion = f"Install Node.js {required} or newer from https://nodejs.org"
    executable = shutil.which("node")
    if executable is None:
        return PreflightCheck(name, False, "node not found on PATH", suggestion)
    try:
        process = subprocess.run(  # noqa: S603
            [executable, "--version"],
            capture_output=True,
            text=True,
            check=False,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        return PreflightCheck(name, False, f"could not run node: {exc}", suggestion)
    version = _parse_version(process.stdout)
    if process.returncode != 0 or version is None:
        return PreflightCheck(name, False, f"could not read the node version from {process.stdout.strip()!r}", suggestion)
    found = ".".join(str(part) for part in version)
    if version < MIN_NODE_VERSION:
        return PreflightCheck(name, False, f"found {found}, need {required} or newer", suggestion)
    return PreflightCheck(name, True, f"found {found}")


def check_package_manager(package_manager: "PackageManager") -> PreflightCheck:
    """Check that the package manager executable is on ``PATH``."""
    name = f"Package manager ({package_manager.value})"
    if shutil.which(package_manager.value) is None:
        return PreflightCheck(
            name,
            False,
            f"{package_manager.value} not found on PATH",
            f"Install {package_manager.value} or choose another package manager with --pm",
        )
    return PreflightCheck(name, True, f"{package_manager.value} is available")


def _existing_ancestor(path: Path) -> Path:
    current = path
    while not current.exists() and current.parent != current:
        current = current.parent
    return current


def check_disk_space(path: "str | Path", minimum_mb: int = MIN_DISK_SPACE_MB) -> PreflightCheck:
    """Check the free space on the filesystem that will hold ``path``.

    A failed disk space check is a warning, not a fatal failure.
    """
    name = "Disk space"
    target = _existing_ancestor(Path(path))
    try:
        free_mb = shutil.disk_usage(target).free // (1024 * 1024)
    except OSError as exc:
        return PreflightCheck(name, False, f"could not read free space of {target}: {exc}", fatal=False)
    if free_mb < minimum_mb:
        return PreflightCheck(
            name,
            False,
            f"{free_mb} MB free, {minimum_mb} MB recommended",
            "Free up disk space before installing dependencies",
            fatal=False,
        )
    return PreflightCheck(name, True, f"{free_mb} MB free")


def run_preflight_checks(config: "ProjectConfig") -> "list[PreflightCheck]":
    """Run the checks relevant to installing dependencies for ``config``.

    Returns:
        The check results in display order.
    """
    checks = [check_node()]
    if config.package_manager is not None:
        checks.append(check_package_manager(config.package_manager))
    checks.append(check_disk_space(config.project_path or Path.cwd()))
    for check in checks:
        logger.debug("Preflight %s: %s (%s)", check.name, "ok" if check.passed else "failed", check.message)
    return checks


def has_fatal_failures(checks: "list[PreflightCheck]") -> bool:
    return any(not check.passed and check.fatal for check in checks)


def print_preflight_report(checks: "list[PreflightCheck]") -> None:
    """Print preflight results as a table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Status", style="dim")
    table.add_column("Check")
    table.add_column("Message")
    table.add_column("Suggestion")
    for check in checks:
        if check.passed:
            status = "[green]OK[/]"
        elif check.fatal:
            status = "[red]ERROR[/]"
        else:
            status = "[yellow]WARNING[/]"
        table.add_row(status, escape(check.name), escape(check.message), escape(check.suggestion))
    console.print(table)
