"""Jinja templates that render a dot diagram."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

import jinja2


def _quote(value: Any) -> str:
    return json.dumps(str(value), ensure_ascii=False)


EDGE = """{% macro edge(e) -%}
{{ e.source }} -> {{ e.target }}  [style={{ e.style }} arrowhead={{ e.arrow_head }} label={{ e.label|q }} tooltip={{ e.tooltip|q }}]
{%- endmacro %}"""

COLUMN = """{% macro column(d) -%}
<td port={{ d.port|q }} bgcolor={{ d.bg_color|q }} rowspan="{{ d.row_span }}" colspan="{{ d.col_span }}">{{ d.text }}</td>
{%- endmacro %}"""

ROW = """{% from "column" import column %}{% macro row(r) -%}
<tr>
{%- for d in r.data %}
			{{ column(d) }}
{%- endfor %}
	</tr>
{%- endmacro %}"""

SIMPLE_NODE = """{% from "row" import row %}{% macro simple_node(n) -%}
{%- if n.table %}
    	{{ n.id }} [label=<
        <table border="0" cellpadding="10">
{%- for r in n.table.rows %}
				{{ row(r) }}
{%- endfor %}
        </table>
        > ]
{%- else %}
		{{ n.id }} [label={{ n.name|q }} style=filled fillcolor={{ n.bg_color|q }}]
{%- endif %}
{%- endmacro %}"""

SIMPLE_SUBGRAPH = """{% from "simple_node" import simple_node %}{% macro simple_subgraph(g) -%}
subgraph cluster_{{ g.name }} {
{%- for n in g.nodes %}
		{{ simple_node(n) }}
{%- endfor %}

	label = {{ g.label|q }}
{% for sg in g.sub_graphs %}
		{{ simple_subgraph(sg) }}
{%- endfor %}
    }
{%- endmacro %}"""

SIMPLE_GRAPH = """{% from "simple_subgraph" import simple_subgraph %}{% from "edge" import edge %}digraph {
	node [style=dotted shape=rect]

    subgraph cluster_ddd_concept{
		node [color=white]

        ddd_concept [label=<
        <table border="0" cellpadding="10">
		<tr>
			<td bgcolor="#ffffff00" rowspan="1" colspan="1">BoundedContext</td>
			<td bgcolor="#ffd966ff" rowspan="1" colspan="1">AggregateRoot</td>
			<td bgcolor="#ffe599ff" rowspan="1" colspan="1">Entity</td>
			<td bgcolor="#a2c4c9ff" rowspan="1" colspan="1">ValueObject</td>
			<td bgcolor="#e69138ff" rowspan="1" colspan="1">Service</td>
		</tr>
		<tr>
			<td bgcolor="white" rowspan="1" colspan="1"></td>
			<td bgcolor="#a4c2f4ff" rowspan="1" colspan="1">Command</td>
			<td bgcolor="#f6b26bff" rowspan="1" colspan="1">Event</td>
			<td bgcolor="#cfe2f3ff" rowspan="1" colspan="1">Factory</td>
			<td bgcolor="#b4a7d6ff" rowspan="1" colspan="1">Class</td>
		</tr>
		<tr>
			<td bgcolor="white" rowspan="1" colspan="1"></td>
			<td bgcolor="#f4ccccff" rowspan="1" colspan="1">General</td>
			<td bgcolor="#ead1dcff" rowspan="1" colspan="1">Function</td>
			<td bgcolor="#9fc5e8ff" rowspan="1" colspan="1">Interface</td>
			<td bgcolor="#f3f3f3ff" rowspan="1" colspan="1">Attribute</td>
		</tr>
        </table>
        > ]
	}
{% for g in dot.sub_graphs %}
		{{ simple_subgraph(g) }}
{%- endfor %}
{% for e in dot.edges %}
		{{ edge(e) }}
{%- endfor %}

	label = {{ dot.label|q }};
    fontsize=20;
}
"""

TEMPLATES: dict[str, str] = {
    "edge": EDGE,
    "column": COLUMN,
    "row": ROW,
    "simple_node": SIMPLE_NODE,
    "simple_subgraph": SIMPLE_SUBGRAPH,
    "simple_graph": SIMPLE_GRAPH,
}

DEFAULT_TEMPLATES = list(TEMPLATES)


def render(template_names: Iterable[str], context: Mapping[str, Any]) -> str:
    """Render the last of ``template_names`` with the others available to it."""
    names = list(template_names)
    if not names:
        raise ValueError("no templates given")
    env = jinja2.Environment(
        loader=jinja2.DictLoader({name: TEMPLATES[name] for name in names}),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["q"] = _quote
    return env.get_template(names[-1]).render(**context)