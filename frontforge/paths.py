"""Target path resolution and safety checks.

Callers run :func:`normalize_path` first; it already applies
:func:`validate_path_safety`. :func:`validate_project_path` then decides whether
the resolved directory may receive a new project.
"""

import functools
import logging
import os
import tempfile
from pathlib import Path

from frontforge.exceptions import PathError

__all__ = (
    "FORBIDDEN_PATHS",
    "ensure_parent_dir",
    "normalize_path",
    "project_name_from_path",
    "validate_path_safety",
    "validate_project_path",
)

logger = logging.getLogger(__name__)

FORBIDDEN_PATHS: tuple[str, ...] = (
    "/",
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/lib",
    "/lib64",
    "/proc",
    "/root",
    "/sbin",
    "/sys",
    "/usr",
    "/var",
    "/System",
    "/Library",
    "/Applications",
    "C:\\Windows",
    "C:\\Program Files",
)
"""System directories that a project may not be created in or under."""


@functools.cache
def _temp_root() -> str:
    return _clean(tempfile.gettempdir())


def _clean(path: "str | Path") -> str:
    return os.path.normcase(os.path.normpath(os.fspath(path)))


def _is_same_or_nested(path: str, parent: str) -> bool:
    if path == parent:
        return True
    # A filesystem root only matches itself.
    if parent.endswith(os.sep):
        return False
    return path.startswith(parent + os.sep)


def normalize_path(user_path: "str | Path", cwd: "str | Path | None" = None) -> Path:
    """Resolve a user supplied path to a clean absolute path.

    Relative paths are joined onto ``cwd`` (the current working directory when
    omitted) and ``.``/``..`` segments are collapsed. The result must pass
    :func:`validate_path_safety`.

    Args:
        user_path: Path as typed by the user.
        cwd: Directory relative paths are resolved against.

    Raises:
        PathError: If the path is empty, cannot be resolved or is unsafe.

    Returns:
        The absolute, cleaned path.
    """
    raw = os.fspath(user_path).strip() if user_path is not None else ""
    if not raw:
        raise PathError(raw, "path cannot be empty")
    try:
        base = Path(cwd) if cwd is not None else Path.cwd()
        joined = Path(raw).expanduser()
        if not joined.is_absolute():
            joined = base / joined
        cleaned = Path(os.path.normpath(joined))
        if not cleaned.is_absolute():
            cleaned = Path(os.path.abspath(cleaned))
    except (OSError, RuntimeError) as exc:
        raise PathError(raw, "failed to resolve absolute path", exc) from exc
    validate_path_safety(cleaned)
    return cleaned


def validate_path_safety(abs_path: "str | Path") -> None:
    """Reject system directories, except when the path lies in the temp directory.

    Matching compares cleaned, separator-terminated prefixes, so ``/userbin``
    is not treated as nested under ``/usr``.

    Args:
        abs_path: An absolute path, normally from :func:`normalize_path`.

    Raises:
        PathError: If the path equals or is nested under a forbidden directory.
    """
    cleaned = _clean(abs_path)
    if _is_same_or_nested(cleaned, _temp_root()):
        return
    for forbidden in FORBIDDEN_PATHS:
        if _is_same_or_nested(cleaned, _clean(forbidden)):
            raise PathError(str(abs_path), f"cannot create project in system directory: {forbidden}")


def validate_project_path(abs_path: "str | Path") -> None:
    """Ensure the target is safe and is either missing or an empty directory.

    Args:
        abs_path: The resolved target directory.

    Raises:
        PathError: If the path is unsafe, is not a directory or has entries.
    """
    validate_path_safety(abs_path)
    target = Path(abs_path)
    if not target.exists():
        return
    if not target.is_dir():
        raise PathError(str(target), "path exists but is not a directory")
    try:
        entries = list(target.iterdir())
    except OSError as exc:
        raise PathError(str(target), "cannot read directory", exc) from exc
    if entries:
        raise PathError(str(target), f"directory is not empty ({len(entries)} file(s) found)")


def project_name_from_path(abs_path: "str | Path") -> str:
    """Return the last path component, used as the default project name."""
    return Path(abs_path).name


def ensure_parent_dir(file_path: "str | Path") -> "list[Path]":
    """Create the parent directory of ``file_path`` when it is missing.

    Returns:
        The directories that were created, outermost first.

    Raises:
        PathError: If a directory cannot be created.
    """
    parent = Path(file_path).parent
    missing: list[Path] = []
    current = parent
    while not current.exists():
        missing.append(current)
        if current.parent == current:
            break
        current = current.parent
    created: list[Path] = []
    for directory in reversed(missing):
        try:
            directory.mkdir()
        except FileExistsError:
            continue
        except OSError as exc:
            raise PathError(str(directory), "failed to create directory", exc) from exc
        logger.debug("Created directory %s", directory)
        created.append(directory)
    return created
