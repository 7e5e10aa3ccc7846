"""Undirected graph measuring how closely two named items relate."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_ROOT_NAME = "intimacy_tree_root_node"


@dataclass(eq=False)
class _Node:
    name: str
    edges: list[_Edge] = field(default_factory=list)


@dataclass(eq=False)
class _Edge:
    value: int
    first: _Node
    second: _Node

    def another(self, node: _Node) -> _Node:
        return self.second if self.first is node else self.first


class IntimacyGraph:
    """Counts pairwise links and scores the closeness of two names."""

    def __init__(self) -> None:
        self._root = _Node(_ROOT_NAME)

    def intimacy(self, first: str, second: str) -> float:
        """Return direct link count plus the shared-neighbour ratio; 0.0 if either is unknown."""
        fn = self._find(first)
        if fn is None:
            return 0.0
        sn = self._find(second)
        if sn is None:
            return 0.0

        direct = 0.0
        for edge in fn.edges:
            if edge.another(fn).name == sn.name:
                direct = float(edge.value)

        fn_nodes = [edge.another(fn) for edge in fn.edges]
        sn_nodes = [edge.another(sn) for edge in sn.edges]
        shared = [n for n in fn_nodes if any(n is m for m in sn_nodes)]
        union = {id(n) for n in (*fn_nodes, *sn_nodes)}

        indirect = len(shared) / len(union) if union else math.nan
        return direct + indirect

    def intimacy_plus_one(self, first: str, second: str) -> None:
        """Strengthen the link between two names, creating them as needed."""
        fn = self._find(first) or self._add(first)
        sn = self._find(second) or self._add(second)

        for edge in fn.edges:
            if edge.another(fn).name == sn.name:
                edge.value += 1
                return

        edge = _Edge(1, fn, sn)
        fn.edges.append(edge)
        sn.edges.append(edge)

    def _add(self, name: str) -> _Node:
        node = _Node(name)
        self._root.edges.append(_Edge(0, self._root, node))
        return node

    def _find(self, name: str) -> _Node | None:
        for edge in self._root.edges:
            if edge.first.name == name:
                return edge.first
            if edge.second.name == name:
                return edge.second
        return None