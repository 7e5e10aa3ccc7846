"""Radix tree keyed by strings, with ordered depth-first walking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional


class WalkStatus(IntEnum):
    """What a walker asks the tree to do next."""

    STOP = 1
    CONTINUE = 2


class WalkState(IntEnum):
    """Whether a node is being entered or left during a walk."""

    IN = 1
    OUT = 2


Walker = Callable[[str, Any, WalkState], Optional[WalkStatus]]


def longest_prefix(k1: str, k2: str) -> int:
    """Return the length of the prefix shared by two strings."""
    length = 0
    for a, b in zip(k1, k2):
        if a != b:
            break
        length += 1
    return length


@dataclass(eq=False)
class _Node:
    value: Any = None
    prefix: Optional[_Edge] = None
    suffixes: list[_Edge] = field(default_factory=list)

    def edge_for(self, path: str) -> Optional[_Edge]:
        first = path[:1]
        return next((e for e in self.suffixes if e.name[:1] == first), None)

    def add_edge(self, edge: _Edge) -> None:
        edge.start = self
        self.suffixes.append(edge)
        self.suffixes.sort(key=lambda e: e.name[:1])

    def del_edge(self, edge: _Edge) -> None:
        if edge.start is self and edge in self.suffixes:
            self.suffixes.remove(edge)


@dataclass(eq=False)
class _Edge:
    name: str
    start: Optional[_Node] = None
    end: _Node = field(default_factory=lambda: _Node())

    def __post_init__(self) -> None:
        self.end.prefix = self


def _new_edge(name: str, value: Any) -> _Edge:
    edge = _Edge(name)
    edge.end.value = value
    return edge


class Tree:
    """A radix tree mapping string keys to values."""

    def __init__(self, root_value: Any = "TreeRoot") -> None:
        self._root = _Node(root_value)

    def get(self, key: str) -> Any:
        """Return the value stored at ``key``; raise KeyError if the key has no node."""
        node = self._root
        path = key
        while True:
            if not path:
                return node.value
            edge = node.edge_for(path)
            if edge is None or not edge.name or not path.startswith(edge.name):
                break
            path = path[len(edge.name):]
            node = edge.end
        raise KeyError(key)

    def insert(self, key: str, value: Any) -> None:
        """Add or update the value stored at ``key``."""
        if not key:
            raise ValueError("empty key not supported")

        node = self._root
        path = key
        while True:
            if not path:
                node.value = value
                return

            edge = node.edge_for(path)
            if edge is None:
                node.add_edge(_new_edge(path, value))
                return

            common = longest_prefix(path, edge.name)
            if common == len(edge.name):
                path = path[common:]
                node = edge.end
                continue

            parent = edge.start
            common_edge = _Edge(path[:common])
            parent.add_edge(common_edge)
            parent.del_edge(edge)
            edge.name = edge.name[common:]
            common_edge.end.add_edge(edge)

            fresh = path[common:]
            if fresh:
                common_edge.end.add_edge(_new_edge(fresh, value))
            else:
                common_edge.end.value = value
            return

    def walk(self, walker: Walker) -> None:
        """Visit every node depth first, calling ``walker`` on entry and on exit."""
        _walk_node("", self._root, walker)


def _walk_node(prefix: str, node: _Node, walker: Walker) -> Optional[WalkStatus]:
    path = prefix + node.prefix.name if node.prefix is not None else prefix
    if walker(path, node.value, WalkState.IN) != WalkStatus.STOP:
        for edge in list(node.suffixes):
            if _walk_node(path, edge.end, walker) == WalkStatus.STOP:
                return WalkStatus.STOP
    return walker(path, node.value, WalkState.OUT)