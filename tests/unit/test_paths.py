"""Tests for frontforge.paths module."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from frontforge.exceptions import PathError
from frontforge.paths import (
    ensure_parent_dir,
    normalize_path,
    project_name_from_path,
    validate_path_safety,
    validate_project_path,
)

# =====================================================
# normalize_path
# =====================================================


@pytest.mark.parametrize("value", ["", "   "])
def test_normalize_path_rejects_empty(value: str) -> None:
    with pytest.raises(PathError, match="path cannot be empty"):
        normalize_path(value)


def test_normalize_path_joins_relative_onto_cwd(tmp_path: Path) -> None:
    assert normalize_path("my-app", tmp_path) == tmp_path / "my-app"


def test_normalize_path_collapses_dot_segments(tmp_path: Path) -> None:
    assert normalize_path("./a/../b/./c", tmp_path) == tmp_path / "b" / "c"


def test_normalize_path_keeps_absolute_paths(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"
    assert normalize_path(str(target), "/does/not/matter") == target


def test_normalize_path_rejects_system_directory() -> None:
    with pytest.raises(PathError, match="system directory: /etc"):
        normalize_path("/etc/newproj")


def test_normalize_path_rejects_escape_into_system_directory(tmp_path: Path) -> None:
    depth = len(tmp_path.parts)
    escape = "/".join([".."] * depth) + "/usr/local/app"
    with pytest.raises(PathError):
        normalize_path(escape, tmp_path)


# =====================================================
# validate_path_safety
# =====================================================


@pytest.mark.parametrize("path", ["/", "/etc", "/etc/nginx/site", "/usr/local/app", "/root/work", "/var/www/app"])
def test_validate_path_safety_rejects_forbidden(path: str) -> None:
    with pytest.raises(PathError) as exc_info:
        validate_path_safety(path)
    assert exc_info.value.path == path


@pytest.mark.parametrize("path", ["/userbin/app", "/etcetera/app", "/home/dev/projects/app"])
def test_validate_path_safety_matches_whole_segments(path: str) -> None:
    validate_path_safety(path)


def test_validate_path_safety_allows_temp_directory(tmp_path: Path) -> None:
    validate_path_safety(tmp_path / "project")


def test_validate_path_safety_temp_directory_overrides_forbidden() -> None:
    """A temp directory placed under a system directory is still usable."""
    with patch("frontforge.paths._temp_root", return_value=os.path.normcase("/var/tmp/scratch")):
        validate_path_safety("/var/tmp/scratch/project")
        with pytest.raises(PathError):
            validate_path_safety("/var/tmp/other")


# =====================================================
# validate_project_path
# =====================================================


def test_validate_project_path_accepts_missing(tmp_path: Path) -> None:
    validate_project_path(tmp_path / "new")


def test_validate_project_path_accepts_empty_directory(tmp_path: Path) -> None:
    target = tmp_path / "empty"
    target.mkdir()
    validate_project_path(target)


def test_validate_project_path_rejects_file(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x")
    with pytest.raises(PathError, match="not a directory"):
        validate_project_path(target)


def test_validate_project_path_reports_entry_count(tmp_path: Path) -> None:
    target = tmp_path / "busy"
    target.mkdir()
    (target / "a.txt").write_text("a")
    (target / ".hidden").write_text("b")
    with pytest.raises(PathError, match=r"directory is not empty \(2 file\(s\) found\)"):
        validate_project_path(target)


def test_validate_project_path_rejects_system_directory() -> None:
    with pytest.raises(PathError):
        validate_project_path("/etc/newproj")


# =====================================================
# helpers
# =====================================================


def test_project_name_from_path() -> None:
    assert project_name_from_path("/home/dev/my-app") == "my-app"


def test_ensure_parent_dir_creates_missing_parents(tmp_path: Path) -> None:
    created = ensure_parent_dir(tmp_path / "a" / "b" / "file.txt")

    assert created == [tmp_path / "a", tmp_path / "a" / "b"]
    assert (tmp_path / "a" / "b").is_dir()


def test_ensure_parent_dir_existing_parent(tmp_path: Path) -> None:
    assert ensure_parent_dir(tmp_path / "file.txt") == []
