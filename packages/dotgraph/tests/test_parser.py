import pytest

from dotgraph.attrs import HtmlString
from dotgraph.errors import DotSyntaxError, UnknownScopeError
from dotgraph.graph import Graph
from dotgraph.parser.parser import parse_dot


def test_parser_supports_nodes_edges_defaults_and_chains():
    dot = """
    digraph Flow {
      graph [rankdir=LR];
      node [shape=box];
      edge [color=gray];
      start [type=start, class=entry];
      step;
      finish [type=exit];
      start -> step -> finish [label=next, when="context.ok = yes"];
    }
    """

    graph = parse_dot(dot)

    assert isinstance(graph, Graph)
    assert graph.name == "Flow"
    assert graph.directed
    assert not graph.strict
    assert graph.attrs == {"rankdir": "LR"}
    assert graph.nodes.get("start").attrs == {"shape": "box", "type": "start", "class": "entry"}
    assert graph.nodes.get("step").attrs == {"shape": "box"}
    edges = graph.edges.edges()
    assert len(edges) == 2
    assert (edges[0].src, edges[0].dst, edges[0].directed) == ("start", "step", True)
    assert edges[0].attrs == {"color": "gray", "label": "next", "when": "context.ok = yes"}
    assert (edges[1].src, edges[1].dst) == ("step", "finish")
    assert graph.children("Flow") == ["start", "step", "finish"]


def test_parser_builds_subgraph_membership_and_scoped_defaults():
    dot = """
    strict graph {
      node [shape=box];
      label = "Top";
      subgraph cluster_a {
        node [color=red];
        label = "A";
        x;
        subgraph inner { y [shape=circle] }
      }
      z;
      x -- z;
    }
    """

    graph = parse_dot(dot)

    assert graph.strict
    assert not graph.directed
    assert graph.name == ""
    assert graph.attrs == {"label": "Top"}
    assert graph.subgraphs.get("cluster_a").attrs == {"label": "A"}
    assert graph.children("") == ["cluster_a", "z"]
    assert graph.children("cluster_a") == ["x", "inner"]
    assert graph.children("inner") == ["y"]
    assert graph.nodes.get("x").attrs == {"shape": "box", "color": "red"}
    assert graph.nodes.get("y").attrs == {"shape": "circle", "color": "red"}
    assert graph.nodes.get("z").attrs == {"shape": "box"}
    assert graph.edges.edges()[0].directed is False


def test_edges_to_subgraphs_fan_out_to_members():
    graph = parse_dot("digraph { a -> { b c } ; subgraph s { d } a -> subgraph s }")

    assert [(edge.src, edge.dst) for edge in graph.edges] == [
        ("a", "b"),
        ("a", "c"),
        ("a", "d"),
    ]
    assert graph.is_sub_graph("anonymous1")
    assert graph.children("anonymous1") == ["b", "c"]


def test_edge_statements_declare_nodes_in_their_scope():
    graph = parse_dot("digraph G { subgraph s { a -> b } b; }")

    assert graph.children("s") == ["a", "b"]
    assert graph.children("G") == ["s", "b"]
    assert graph.relations.parents("b") == ["s", "G"]


def test_ports_and_bare_attributes():
    graph = parse_dot("digraph { a:out:e -> b:in [bold][weight=2; dir=back] }")
    edge = graph.edges.edges()[0]

    assert (edge.src_port, edge.dst_port) == ("out:e", "in")
    assert edge.attrs == {"bold": "true", "weight": "2", "dir": "back"}


def test_repeated_node_declarations_merge():
    graph = parse_dot('graph { a [label="one"]; a [color=blue]; a [label="two"] }')

    assert graph.nodes.get("a").attrs == {"label": "two", "color": "blue"}
    assert graph.children("") == ["a"]


@pytest.mark.parametrize(
    "source",
    [
        "tree { a }",
        "digraph { a -> }",
        "digraph { a [x=] }",
        "digraph { node }",
        "digraph { a",
        "digraph { } trailing",
    ],
)
def test_parser_rejects_malformed_source(source):
    with pytest.raises(DotSyntaxError):
        parse_dot(source)


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_dot("digraph {")


def test_unknown_scope_is_not_a_syntax_error():
    assert not issubclass(UnknownScopeError, ValueError)


def test_html_values_are_kept_apart_from_quoted_text():
    graph = parse_dot('digraph { a [label=<<b>x</b>>]; b [label="<b>x</b>"] }')

    html = graph.nodes.get("a").attrs["label"]
    text = graph.nodes.get("b").attrs["label"]
    assert isinstance(html, HtmlString)
    assert html == "<b>x</b>"
    assert not isinstance(text, HtmlString)
    assert text == "<b>x</b>"
