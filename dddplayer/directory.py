"""Directory trees built from file paths."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import Any, Callable

_SEP = "/"


class NodeNotFoundError(LookupError):
    """Raised when a path does not lead to a node in the tree."""


@dataclass(eq=False)
class TreeNode:
    """A directory node with named children and an optional value."""

    name: str
    children: dict[str, TreeNode] = field(default_factory=dict)
    value: Any = None

    def add_path(self, path: str) -> None:
        """Create every directory along ``path`` below this node."""
        current = self
        for component in path.split(_SEP):
            current = current.children.setdefault(component, TreeNode(component))

    def _child_for(self, path: str) -> tuple[TreeNode, str | None]:
        head, sep, rest = path.partition(_SEP)
        child = self.children.get(head)
        if child is None:
            raise NodeNotFoundError(f"node not found: {path}")
        return child, (rest if sep else None)

    def add_value(self, child_path: str, value: Any) -> None:
        """Set the value of the node at ``child_path``."""
        child, rest = self._child_for(child_path)
        if rest is not None:
            child.add_value(rest, value)
        else:
            child.value = value

    def get_value(self, path: str) -> Any:
        """Return the value of the node at ``path``."""
        child, rest = self._child_for(path)
        if rest is not None:
            return child.get_value(rest)
        return child.value

    def get_node(self, path: str) -> TreeNode | None:
        """Return the node at ``path``, or None."""
        try:
            child, rest = self._child_for(path)
        except NodeNotFoundError:
            return None
        if rest is not None:
            return child.get_node(rest)
        return child

    def _walk(self, current_dir: str, callback: Callable[[str, Any], None]) -> None:
        directory = _join(current_dir, self.name)
        callback(directory, self.value)
        for child in self.children.values():
            child._walk(directory, callback)


def _dir(path: str) -> str:
    parent = posixpath.dirname(path)
    return posixpath.normpath(parent) if parent else "."


def _join(*parts: str) -> str:
    joined = _SEP.join(p for p in parts if p)
    return posixpath.normpath(joined) if joined else ""


def find_common_root_directory(file_paths: list[str]) -> str:
    """Find the directory shared by all the given file paths."""
    if not file_paths:
        return ""
    root = _dir(file_paths[0])
    for file_path in file_paths:
        if not file_path.startswith(root):
            root = _dir(root)
    return posixpath.normpath(root)


def build_directory_tree(file_paths: list[str]) -> TreeNode:
    """Build a tree of the directories holding the given files, under their common root."""
    root_directory = find_common_root_directory(file_paths)
    root = TreeNode(root_directory)
    for file_path in file_paths:
        directory = _dir(file_path).removeprefix(root_directory)
        directory = directory.removeprefix(_SEP).removesuffix(_SEP)
        if directory:
            root.add_path(directory)
    return root


def walk(node: TreeNode, callback: Callable[[str, Any], None]) -> None:
    """Call ``callback(directory, value)`` for the node and all its descendants."""
    node._walk("", callback)