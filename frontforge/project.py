"""Project setup orchestration.

:func:`setup_project` runs the stages of one generation run strictly in order:

1. Resolve the target path and derive the project name.
2. Validate that the target is missing or an empty directory.
3. Look up the generator and check the options against its capability set.
4. Generate every artifact in memory.
5. Materialize directories and files (skipped on dry run).
6. Install dependencies (optional, skipped on dry run).

Stages 1 to 4 never touch the filesystem, so their failures leave nothing
behind. A failure while writing removes what this run created. An install
failure is recorded on the result and leaves the written project in place.
"""

import logging
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from frontforge.exceptions import ConfigurationError, InstallError, PathError
from frontforge.executor import get_executor
from frontforge.paths import ensure_parent_dir, normalize_path, project_name_from_path, validate_project_path
from frontforge.validation import validate_project

if TYPE_CHECKING:
    from collections.abc import Callable

    from frontforge.config import PackageManager, ProjectConfig
    from frontforge.executor import JSExecutor
    from frontforge.generators import ArtifactSet, GeneratorRegistry
    from frontforge.validation import ValidationResult

__all__ = ("SetupResult", "resolve_config", "setup_project")

logger = logging.getLogger(__name__)


@dataclass
class SetupResult:
    """Outcome of a setup run.

    Attributes:
        project_path: The resolved absolute project directory.
        config: The configuration with the resolved path and derived name.
        files: Relative paths of the files written, or that would be written on a dry run.
        directories: Relative paths of the layout directories.
        dry_run: Whether the run skipped all filesystem mutation.
        install_error: The install failure, if the install stage ran and failed.
        validation: Post-generation checks; empty on a dry run.
    """

    project_path: Path
    config: "ProjectConfig"
    files: tuple[str, ...] = ()
    directories: tuple[str, ...] = ()
    dry_run: bool = False
    install_error: "InstallError | None" = None
    validation: "list[ValidationResult]" = field(default_factory=list)

    @property
    def installed(self) -> bool:
        """Return True if dependencies were installed successfully."""
        if not self.config.auto_install or self.config.package_manager is None:
            return False
        return not self.dry_run and self.install_error is None

    @property
    def passed(self) -> bool:
        """Return True if every validation check passed."""
        return all(result.passed for result in self.validation)


def resolve_config(config: "ProjectConfig", cwd: "str | Path | None" = None) -> "ProjectConfig":
    """Resolve the project path and fill in the project name.

    Args:
        config: The configuration as entered.
        cwd: Directory relative paths are resolved against.

    Raises:
        PathError: If the path is empty or unsafe.
        ConfigurationError: If no project name can be derived.

    Returns:
        A copy of ``config`` with an absolute ``project_path`` and a ``project_name``.
    """
    path = normalize_path(config.project_path, cwd)
    name = config.project_name or project_name_from_path(path)
    if not name:
        msg = f"Cannot derive a project name from {str(path)!r}"
        raise ConfigurationError(msg, framework=config.framework.value)
    return replace(config, project_path=path, project_name=name)


def _materialize(root: Path, artifacts: "ArtifactSet") -> None:
    """Write the directory layout and every artifact below ``root``.

    Raises:
        PathError: If a directory or file cannot be written. Everything created
            by this call has been removed when it is raised.
    """
    root_created = not root.exists()
    created_files: list[Path] = []
    created_dirs: list[Path] = []
    try:
        if root_created:
            created_dirs += ensure_parent_dir(root)
            root.mkdir(exist_ok=True)
            created_dirs.append(root)
        for directory in artifacts.directories:
            target = root / directory
            created_dirs += ensure_parent_dir(target)
            if not target.exists():
                target.mkdir()
                created_dirs.append(target)
        for relative, content in artifacts.files.items():
            target = root / relative
            created_dirs += ensure_parent_dir(target)
            target.write_text(content, encoding="utf-8")
            created_files.append(target)
            logger.debug("Wrote %s", relative)
    except (OSError, PathError) as exc:
        _rollback(created_files, created_dirs)
        if isinstance(exc, PathError):
            raise
        raise PathError(str(root), "failed to write project files", exc) from exc


def _rollback(files: "list[Path]", directories: "list[Path]") -> None:
    for path in reversed(files):
        path.unlink(missing_ok=True)
    for directory in reversed(directories):
        if directory.is_dir():
            shutil.rmtree(directory, ignore_errors=True)
    logger.debug("Rolled back %d file(s) and %d directory(ies)", len(files), len(directories))


def _install(
    project_path: Path,
    package_manager: "PackageManager",
    executor_factory: "Callable[[PackageManager], JSExecutor]",
    on_line: "Callable[[str], None] | None",
    timeout: "float | None",
) -> "InstallError | None":
    executor = executor_factory(package_manager)
    try:
        executor.install(project_path, on_line=on_line, timeout=timeout)
    except InstallError as exc:
        logger.warning("Dependency install failed: %s", exc)
        return exc
    return None


def setup_project(
    config: "ProjectConfig",
    registry: "GeneratorRegistry",
    *,
    cwd: "str | Path | None" = None,
    executor_factory: "Callable[[PackageManager], JSExecutor] | None" = None,
    on_install_line: "Callable[[str], None] | None" = None,
    install_timeout: "float | None" = None,
) -> SetupResult:
    """Generate a project from ``config``.

    Args:
        config: The project configuration.
        registry: Generators by framework.
        cwd: Directory relative project paths are resolved against.
        executor_factory: Builds the install executor for a package manager.
        on_install_line: Receives each line of install output.
        install_timeout: Seconds before the install is aborted.

    Raises:
        PathError: If the target is empty, unsafe, occupied or cannot be written.
        ConfigurationError: If the framework is unregistered or an option is unsupported.
        GenerationError: If an artifact cannot be produced.

    Returns:
        The written (or, on a dry run, planned) files and the validation report.
    """
    resolved = resolve_config(config, cwd)
    project_path = Path(resolved.project_path)
    logger.debug("Resolved project path %s", project_path)

    validate_project_path(project_path)

    generator = registry.require(resolved.framework)
    generator.supported_options().check(resolved)
    logger.debug("Options accepted by the %s generator", resolved.framework.value)

    artifacts = generator.generate(resolved)
    result = SetupResult(
        project_path=project_path,
        config=resolved,
        files=tuple(artifacts.files),
        directories=artifacts.directories,
        dry_run=resolved.dry_run,
    )
    if resolved.dry_run:
        logger.info("Dry run: %d file(s) would be written to %s", len(result.files), project_path)
        return result

    _materialize(project_path, artifacts)
    logger.info("Wrote %d file(s) to %s", len(result.files), project_path)

    if resolved.auto_install and resolved.package_manager is not None:
        result.install_error = _install(
            project_path,
            resolved.package_manager,
            executor_factory or get_executor,
            on_install_line,
            install_timeout,
        )

    result.validation = validate_project(project_path, resolved, registry=registry)
    return result
