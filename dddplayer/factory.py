"""Build dot diagrams from architecture diagrams."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Protocol, Sequence

from dddplayer.dot_entity import Dot, Edge, Node, SubGraph, Table
from dddplayer.port import EdgeArrowHead, EdgeType, port_str
from dddplayer.templates import DEFAULT_TEMPLATES


class RelationType(Enum):
    """Kinds of relation between architecture objects."""

    NONE = "none"
    ASSOCIATION = "association"
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"
    AGGREGATION_ROOT = "aggregation_root"
    DEPENDENCY = "dependency"


class DiagramType(Enum):
    """How a diagram is drawn: plain nodes or summary tables."""

    PLAIN = "plain"
    TABLE = "table"


class Position(Protocol):
    filename: str
    line: int
    column: int


class RelationPos(Protocol):
    source: Position
    target: Position


class ArchEdge(Protocol):
    source: str
    target: str
    count: int
    positions: Sequence[RelationPos]
    type: RelationType


class ArchNode(Protocol):
    id: str
    name: str
    color: str


class SubDiagram(Protocol):
    name: str
    nodes: Sequence[ArchNode]
    summary: Optional[Sequence[Any]]
    sub_graphs: Optional[Sequence["SubDiagram"]]


class Diagram(Protocol):
    name: str
    type: DiagramType
    sub_diagrams: Sequence[SubDiagram]
    edges: Sequence[ArchEdge]


def _base(path: str) -> str:
    """Return the last element of a slash-separated path."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


def new_sub_graph(sub_diagram: SubDiagram) -> SubGraph:
    """Make a sub graph drawing each node of the sub diagram as a filled box."""
    nodes = [
        Node(id=port_str(n.id), name=_base(n.name), bg_color=n.color, table=None)
        for n in sub_diagram.nodes
    ]
    return SubGraph(name=port_str(sub_diagram.name), label=sub_diagram.name, nodes=nodes)


def new_summary_sub_graph(sub_diagram: SubDiagram) -> SubGraph:
    """Make a sub graph holding one table node that summarises the sub diagram."""
    node = Node(id=port_str(sub_diagram.name), name=_base(sub_diagram.name), table=Table())
    node.build(list(sub_diagram.summary or []))
    return SubGraph(name=port_str(sub_diagram.name), label=sub_diagram.name, nodes=[node])


def concatenate_relation_pos(relations: Sequence[RelationPos]) -> str:
    """Describe where each relation starts and ends, one line per relation."""
    lines = []
    for relation in relations:
        src, dst = relation.source, relation.target
        lines.append(
            f"From: {_base(src.filename)} (Line: {src.line}, Column: {src.column}) "
            f"To: {_base(dst.filename)} (Line: {dst.line}, Column: {dst.column})\n"
        )
    return "".join(lines)


class DotBuilder:
    """Turns an architecture diagram into a renderable dot diagram."""

    def __init__(self, diagram: Diagram) -> None:
        self.diagram = diagram
        self.port_map: dict[str, str] = {}

    def build(self) -> Dot:
        """Build the dot diagram with its sub graphs, edges and templates."""
        name = self.diagram.name
        dot = Dot(
            name=name,
            label=f"\n\n{name}\nDomain Model\n\nPowered by DDD Player",
        )
        dot.sub_graphs = [self._graph(sd) for sd in self.diagram.sub_diagrams]
        dot.edges = [self._edge(e) for e in self.diagram.edges]
        dot.templates = list(DEFAULT_TEMPLATES)
        return dot

    def _graph(self, sub_diagram: SubDiagram) -> SubGraph:
        if self.is_deep_mode():
            graph = new_summary_sub_graph(sub_diagram)
            self._map_ports(graph)
        else:
            graph = new_sub_graph(sub_diagram)
        for child in sub_diagram.sub_graphs or ():
            graph.sub_graphs.append(self._graph(child))
        return graph

    def _map_ports(self, graph: SubGraph) -> None:
        for node in graph.nodes:
            if node.table is None:
                continue
            for row in node.table.rows:
                for cell in row.data:
                    if cell.port:
                        self.port_map[cell.port] = node.id

    def _edge(self, edge: ArchEdge) -> Edge:
        source = port_str(edge.source)
        target = port_str(edge.target)
        if self.is_deep_mode():
            if node_port := self.port_map.get(source):
                source = f"{node_port}:{source}"
            if node_port := self.port_map.get(target):
                target = f"{node_port}:{target}"
        tooltip = (
            f"{_base(edge.source)} -> {_base(edge.target)}: \n\n"
            f"{concatenate_relation_pos(edge.positions)}"
        )
        return Edge(
            source=source,
            target=target,
            tooltip=tooltip,
            label=str(edge.count),
            style=self.edge_style(edge).value,
            arrow_head=self.arrow_head(edge).value,
        )

    def arrow_head(self, edge: ArchEdge) -> EdgeArrowHead:
        """Pick the arrow head for the edge's relation type."""
        if edge.type in (RelationType.AGGREGATION_ROOT, RelationType.AGGREGATION):
            return EdgeArrowHead.DIAMOND
        if edge.type == RelationType.ASSOCIATION:
            return EdgeArrowHead.NONE
        return EdgeArrowHead.NORMAL

    def edge_style(self, edge: ArchEdge) -> EdgeType:
        """Dependencies are solid; everything else is dotted."""
        if edge.type == RelationType.DEPENDENCY:
            return EdgeType.SOLID
        return EdgeType.DOT

    def is_deep_mode(self) -> bool:
        """True when nodes are drawn as summary tables."""
        return self.diagram.type == DiagramType.TABLE