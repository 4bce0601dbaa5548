from dotgraph.attrs import HtmlString
from dotgraph.formatter import FormatOptions, format_tree, quote_id
from dotgraph.graph import Graph
from dotgraph.tree import DotGraph, EdgeStmt, NodeStmt


def test_quote_id_leaves_plain_ids_bare():
    assert quote_id("node_1") == "node_1"
    assert quote_id("-1.5") == "-1.5"
    assert quote_id(".5") == ".5"
    assert quote_id(HtmlString("<b>bold</b>")) == "<<b>bold</b>>"


def test_quote_id_quotes_everything_else():
    assert quote_id("") == '""'
    assert quote_id("two words") == '"two words"'
    assert quote_id('say "hi"') == '"say \\"hi\\""'
    assert quote_id("1abc") == '"1abc"'
    assert quote_id("node") == '"node"'


def test_format_full_graph():
    graph = Graph(name="Flow", directed=True, strict=True)
    graph.add_attr("Flow", "rankdir", "LR")
    graph.add_sub_graph("Flow", "cluster_a", {"label": "Stage A"})
    graph.add_node("cluster_a", "a", {"shape": "box", "color": "red"})
    graph.add_node("Flow", "b")
    graph.add_port_edge("a", "out", "b", "in:n", True, {"label": "go"})
    graph.add_edge("b", "a", False)

    assert graph.to_text() == (
        "strict digraph Flow {\n"
        "\trankdir=LR;\n"
        "\tsubgraph cluster_a {\n"
        '\t\tlabel="Stage A";\n'
        "\t\ta [shape=box, color=red];\n"
        "\t}\n"
        "\tb;\n"
        "\ta:out -> b:in:n [label=go];\n"
        "\tb -- a;\n"
        "}\n"
    )


def test_format_options_indent():
    tree = DotGraph(
        name="",
        statements=[NodeStmt(name="x"), EdgeStmt(src="x", dst="y", directed=False)],
    )

    assert format_tree(tree, FormatOptions(indent="  ")) == "graph {\n  x;\n  x -- y;\n}\n"


def test_only_balanced_html_strings_are_written_bare():
    assert quote_id("<b>") == '"<b>"'
    assert quote_id("<x> and <y>") == '"<x> and <y>"'
    assert quote_id(HtmlString("a> and <b")) == '"a> and <b"'


def test_backslashes_are_escaped_only_where_they_would_pair_up():
    assert quote_id("C:\\") == '"C:\\\\"'
    assert quote_id('a\\"b') == '"a\\\\\\"b"'
    assert quote_id("a\\\\b") == '"a\\\\\\b"'
    assert quote_id("line\\nbreak") == '"line\\nbreak"'
