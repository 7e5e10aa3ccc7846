from types import SimpleNamespace as NS

import jinja2
import pytest

from dddplayer.templates import DEFAULT_TEMPLATES, render


def _dot():
    data = NS(text="Order", port="dp1", bg_color="white", row_span=1, col_span=2)
    table_node = NS(id="dn1", name="n1", bg_color="", table=NS(rows=[NS(data=[data])]))
    plain_node = NS(id="dn2", name='say "hi"', bg_color="red", table=None)
    child = NS(name="dchild", label="child", nodes=[plain_node], sub_graphs=[])
    sub = NS(name="dsub", label="sub", nodes=[table_node], sub_graphs=[child])
    edge = NS(source="da", target="db", style="solid", arrow_head="normal",
              label="1", tooltip="a -> b")
    return NS(label="the label", sub_graphs=[sub], edges=[edge])


def test_render_graph_contents():
    out = render(DEFAULT_TEMPLATES, {"dot": _dot()})
    assert out.startswith("digraph {")
    assert 'label = "the label";' in out
    assert 'da -> db  [style=solid arrowhead=normal label="1" tooltip="a -> b"]' in out
    assert "subgraph cluster_dsub {" in out
    assert "subgraph cluster_dchild {" in out
    assert '<td port="dp1" bgcolor="white" rowspan="1" colspan="2">Order</td>' in out


def test_render_quotes_names():
    out = render(DEFAULT_TEMPLATES, {"dot": _dot()})
    assert 'dn2 [label="say \\"hi\\"" style=filled fillcolor="red"]' in out


def test_render_requires_templates():
    with pytest.raises(ValueError):
        render([], {})


def test_render_missing_dependency():
    with pytest.raises(jinja2.TemplateNotFound):
        render(["simple_graph"], {"dot": _dot()})