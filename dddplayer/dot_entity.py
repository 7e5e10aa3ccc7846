"""Dot diagram entities and the table layout of summary nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, TextIO

from dddplayer.port import port_str
from dddplayer.templates import render

FIRST_ROW_PORT = "first_blank_row"
DOMAIN_OBJ_BLOCK_NUM = 1
ROW_START_EMPTY_BLOCK_NUM = 1
ROW_END_EMPTY_BLOCK_NUM = 1
EMPTY_BLOCK_BEFORE_DOMAIN_OBJ_NUM = 1
MAX_NUM = 3
MIN_NUM = 1


@dataclass
class Data:
    """A table cell."""

    text: str = ""
    port: str = ""
    bg_color: str = "white"
    row_span: int = 1
    col_span: int = 1


@dataclass
class Row:
    data: list[Data] = field(default_factory=list)


@dataclass
class Table:
    rows: list[Row] = field(default_factory=list)


@dataclass
class Node:
    """A diagram node, optionally drawn as a table."""

    id: str = ""
    name: str = ""
    bg_color: str = ""
    table: Optional[Table] = None

    def build(self, elements: Sequence[Any]) -> None:
        """Lay out ``elements`` as rows of this node's table."""
        if self.table is None:
            self.table = Table()
        rows = self.table.rows

        first = blank_row()
        first.data[0].port = FIRST_ROW_PORT
        rows.append(first)

        max_left, max_right = elements_indicators(elements)
        cols = (ROW_START_EMPTY_BLOCK_NUM + max_left + EMPTY_BLOCK_BEFORE_DOMAIN_OBJ_NUM
                + DOMAIN_OBJ_BLOCK_NUM + max_right + ROW_END_EMPTY_BLOCK_NUM)

        for element in elements:
            if is_left_right_structure(element):
                left_right_row(self, element, max_left, max_right)
                continue
            attrs = [n for group in element.children for n in group]
            max_attrs = (cols - ROW_START_EMPTY_BLOCK_NUM - ROW_END_EMPTY_BLOCK_NUM) // 2
            rows.extend(line_row(chunk, cols) for chunk in chunk_slice(attrs, max_attrs))
            rows.append(blank_row())

        rows.append(name_row(self.name, cols))


@dataclass
class SubGraph:
    name: str = ""
    label: str = ""
    nodes: list[Node] = field(default_factory=list)
    sub_graphs: list[SubGraph] = field(default_factory=list)


@dataclass
class Edge:
    source: str = ""
    target: str = ""
    tooltip: str = ""
    label: str = ""
    style: str = ""
    arrow_head: str = ""


@dataclass
class Dot:
    """A whole diagram and the templates that render it."""

    name: str = ""
    label: str = ""
    sub_graphs: list[SubGraph] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    templates: list[str] = field(default_factory=list)

    def write(self, stream: TextIO) -> None:
        """Render the diagram into ``stream``."""
        stream.write(render(self.templates, {"dot": self}))


def _clamp(value: int) -> int:
    return max(MIN_NUM, min(MAX_NUM, value))


def elements_indicators(elements: Sequence[Any]) -> tuple[int, int]:
    """Return the clamped widest left and right child groups."""
    max_left = max_right = 0
    for element in elements:
        children = element.children
        if len(children) > 0:
            max_left = max(max_left, len(children[0]))
        if len(children) > 1:
            max_right = max(max_right, len(children[1]))
    return _clamp(max_left), _clamp(max_right)


def blank_column() -> Data:
    return Data()


def column(name: str, identifier: str, bg_color: str) -> Data:
    return Data(text=name, port=port_str(identifier), bg_color=bg_color)


def blank_row() -> Row:
    return Row([blank_column() for _ in range(ROW_START_EMPTY_BLOCK_NUM)])


def name_row(name: str, col_span: int) -> Row:
    return Row([Data(text=name, col_span=col_span)])


def chunk_slice(items: Sequence[Any], size: int) -> list[list[Any]]:
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def is_left_right_structure(element: Any) -> bool:
    return len(element.children) >= 2


def line_row(fields: Sequence[Any], columns: int) -> Row:
    """Lay fields out across one row of ``columns`` cells."""
    row = blank_row()
    count = len(fields)
    if count == 0:
        return row
    usable = columns - (count - 1) - ROW_START_EMPTY_BLOCK_NUM - ROW_END_EMPTY_BLOCK_NUM
    span = usable // count
    for i, f in enumerate(fields):
        cell = column(f.name, f.id, f.color)
        cell.col_span = span
        row.data.append(cell)
        if i + 1 < count:
            row.data.append(blank_column())
    row.data.extend(blank_column() for _ in range(ROW_END_EMPTY_BLOCK_NUM))
    return row


def count_row(num: int, row_capacity: int) -> int:
    return -(-num // row_capacity)


def row_first_padding(source: Sequence[Any], row: int, column: int) -> list[list[Any]]:
    """Fill ``row`` rows of ``column`` cells row by row, padding with None."""
    padded = list(source) + [None] * max(0, row * column - len(source))
    return [padded[i * column:(i + 1) * column] for i in range(row)]


def column_first_padding(source: Sequence[Any], row: int, column: int) -> list[list[Any]]:
    """Spread ``source`` evenly over ``row`` rows, padding each to ``column`` cells."""
    width = count_row(len(source), row)
    if width > column:
        raise ValueError(f"{len(source)} items do not fit in {row}x{column}")
    result = []
    for i in range(row):
        chunk = list(source[i * width:(i + 1) * width])
        result.append(chunk + [None] * (column - len(chunk)))
    return result


def left_right_row(node: Node, element: Any, max_left: int, max_right: int) -> None:
    """Append the rows for an element with left and/or right child groups."""
    children = element.children
    rows = node.table.rows
    if len(children) == 2:
        left, right = children
        left_rows_num = count_row(len(left), max_left)
        right_rows_num = count_row(len(right), max_right)
        row = 0
        if left_rows_num >= right_rows_num and left_rows_num > 0:
            row = left_rows_num
            l_rows = row_first_padding(left, row, max_left)
            r_rows = column_first_padding(right, row, max_right)
        elif right_rows_num >= left_rows_num and right_rows_num > 0:
            row = right_rows_num
            r_rows = row_first_padding(right, row, max_right)
            l_rows = column_first_padding(left, row, max_left)
        for rn in range(row):
            rows.append(build_node_row(l_rows[rn], r_rows[rn], rn == 0, element, max_right, row))
        rows.append(blank_row())
    elif len(children) == 1:
        methods = children[0]
        row = count_row(len(methods), max_left)
        for rn, ms in enumerate(row_first_padding(methods, row, max_left)):
            rows.append(build_node_row(ms, None, rn == 0, element, max_right, row))
        rows.append(blank_row())


def build_node_row(left: Sequence[Any], right: Optional[Sequence[Any]], is_first_row: bool,
                   element: Any, right_width: int, row: int) -> Row:
    """Build one row: reversed left cells, the element (first row only), right cells."""

    def cell(item: Any) -> Data:
        return blank_column() if item is None else column(item.name, item.id, item.color)

    result = blank_row()
    result.data.extend(cell(m) for m in reversed(left))
    result.data.extend(blank_column() for _ in range(EMPTY_BLOCK_BEFORE_DOMAIN_OBJ_NUM))
    if is_first_row:
        obj = column(element.name, element.id, element.color)
        obj.row_span = row
        result.data.append(obj)
    if right is not None:
        result.data.extend(cell(a) for a in right)
    else:
        result.data.extend(blank_column() for _ in range(right_width))
    result.data.extend(blank_column() for _ in range(ROW_END_EMPTY_BLOCK_NUM))
    return result