"""Dry-run output."""

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.tree import Tree

from frontforge._console import console

if TYPE_CHECKING:
    from frontforge.project import SetupResult

__all__ = ("build_manifest_tree", "print_dry_run")


def build_manifest_tree(result: "SetupResult") -> Tree:
    """Build a tree of the directories and files a dry run would create.

    Args:
        result: The result of a dry run.

    Returns:
        A tree rooted at the project directory.
    """
    tree = Tree(f"[bold]{escape(str(result.project_path))}[/]")
    nodes: dict[str, Tree] = {"": tree}

    def node_for(directory: str) -> Tree:
        if directory in nodes:
            return nodes[directory]
        parent, _, name = directory.rpartition("/")
        node = node_for(parent).add(f"[blue]{escape(name)}/[/]")
        nodes[directory] = node
        return node

    for directory in result.directories:
        node_for(directory)
    for path in result.files:
        parent, _, name = path.rpartition("/")
        node_for(parent).add(escape(name))
    return tree


def print_dry_run(result: "SetupResult") -> None:
    """Print the dry-run tree and the number of files it would create."""
    console.print("[yellow]Dry run - files that would be generated:[/]")
    console.print(build_manifest_tree(result))
    console.print(f"\n[bold]{len(result.files)} files would be created[/]")
