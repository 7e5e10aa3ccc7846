"""A simple directed graph with keyed nodes and prefix path search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Edge:
    """A directed edge between two nodes."""

    from_node: Node
    to_node: Node
    kind: Any = None
    value: Any = None


@dataclass(eq=False)
class Node:
    """A graph node with its outgoing edges."""

    key: str
    value: Any = None
    edges: list[Edge] = field(default_factory=list)


@dataclass
class Graph:
    """A directed graph whose nodes are identified by unique keys."""

    nodes: list[Node] = field(default_factory=list)

    def add_node(self, key: str, value: Any) -> None:
        """Add a node; raise ValueError for an empty or duplicate key."""
        if not key:
            raise ValueError("key cannot be empty")
        if self.find_node_by_key(key) is not None:
            raise ValueError(f"key conflict: {key}")
        self.nodes.append(Node(key, value))

    def find_node_by_key(self, key: str) -> Node | None:
        """Return the node with ``key``, or None."""
        return next((node for node in self.nodes if node.key == key), None)

    def add_edge(self, from_key: str, to_key: str, kind: Any, value: Any) -> None:
        """Add an edge between two existing nodes; raise KeyError if either is missing."""
        from_node = self.find_node_by_key(from_key)
        to_node = self.find_node_by_key(to_key)
        if from_node is None:
            raise KeyError(f"from node: {from_key} not found in Digraph")
        if to_node is None:
            raise KeyError(f"to node: {to_key} not found in Digraph")
        from_node.edges.append(Edge(from_node, to_node, kind, value))

    def find_paths_to_prefix(self, start_key: str, end_key_prefix: str) -> list[list[Node]]:
        """Return every simple path from the start node to a node whose key has the prefix."""
        start = self.find_node_by_key(start_key)
        if start is None:
            return []

        paths: list[list[Node]] = []
        visited: set[Node] = set()

        def explore(node: Node, path: list[Node]) -> None:
            if node.key.startswith(end_key_prefix):
                paths.append(list(path))
                return
            visited.add(node)
            for edge in node.edges:
                nxt = edge.to_node
                if nxt not in visited:
                    explore(nxt, [*path, nxt])
            visited.discard(node)

        explore(start, [start])
        return paths