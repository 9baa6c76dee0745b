"""Tests for the %%dag directive parser."""

import pytest

from dag_bands.parser.mermaid import parse_dag_mermaid
from dag_bands.parser.model import Orientation


def test_parse_title():
    graph = parse_dag_mermaid("%%dag title: Mediation\ngraph LR\n")
    assert graph.title == "Mediation"


def test_parse_radius_and_orientation():
    graph = parse_dag_mermaid(
        "%%dag radius: 25\n%%dag orientation: horizontal\ngraph LR\n"
    )
    assert graph.node_radius == 25.0
    assert graph.orientation is Orientation.HORIZONTAL


def test_defaults():
    graph = parse_dag_mermaid("graph LR\n")
    assert graph.node_radius == 40.0
    assert graph.orientation is Orientation.VERTICAL
    assert graph.nodes == {}


def test_parse_nodes_and_labels():
    graph = parse_dag_mermaid("graph LR\n    a[Alpha]\n    b((Beta))\n    c\n")
    assert graph.nodes["a"].label == "Alpha"
    assert graph.nodes["b"].label == "Beta"
    assert graph.nodes["c"].label == "c"


def test_parse_edges():
    graph = parse_dag_mermaid(
        "graph LR\n    a --> b\n    b -->|0.25| c\n    a -.->|0.5| c\n"
    )
    assert len(graph.edges) == 3
    first, second, third = graph.edges
    assert (first.source, first.target, first.strength, first.blocked) == ("a", "b", 1.0, False)
    assert second.strength == 0.25
    assert third.blocked
    assert graph.blocked_edges() == [third]


def test_edge_label_updates_later():
    graph = parse_dag_mermaid("graph LR\n    a --> b\n    a[Alpha]\n")
    assert graph.nodes["a"].label == "Alpha"


def test_parse_positions_and_colors():
    graph = parse_dag_mermaid(
        "graph LR\n    a\n%%dag pos: a | 10.5, -3\n%%dag color: a | #9b332b\n"
    )
    node = graph.nodes["a"]
    assert (node.x, node.y) == (10.5, -3.0)
    assert node.color == "#9b332b"
    assert graph.unplaced_nodes() == []


def test_directive_creates_node():
    graph = parse_dag_mermaid("%%dag pos: z | 1, 2\ngraph LR\n")
    assert "z" in graph.nodes


def test_parse_bands():
    graph = parse_dag_mermaid(
        "graph LR\n    y\n"
        "%%dag bands: y | up | 0.3 x, 0.4 #00ff00\n"
        "%%dag bands: y | up | 0.1 conf\n"
        "%%dag bands: y | down | 0.2 y\n"
    )
    stacks = graph.nodes["y"].bands
    assert [(b.proportion, b.fill) for b in stacks.primary] == [
        (0.3, "x"), (0.4, "#00ff00"), (0.1, "conf"),
    ]
    assert [(b.proportion, b.fill) for b in stacks.secondary] == [(0.2, "y")]


def test_parse_left_right_stacks():
    graph = parse_dag_mermaid(
        "%%dag bands: n | left | 0.5 a\n%%dag bands: n | right | 0.5 b\n"
    )
    stacks = graph.nodes["n"].bands
    assert stacks.primary[0].fill == "a"
    assert stacks.secondary[0].fill == "b"


def test_parse_node_orientation_override():
    graph = parse_dag_mermaid("graph LR\n    a\n    b\n%%dag orient: b | horizontal\n")
    assert graph.node_orientation("a") is Orientation.VERTICAL
    assert graph.node_orientation("b") is Orientation.HORIZONTAL


def test_parse_solid():
    graph = parse_dag_mermaid("%%dag solid: a | 0.6\n%%dag solid: b\n")
    assert graph.nodes["a"].solid and graph.nodes["a"].opacity == 0.6
    assert graph.nodes["b"].solid and graph.nodes["b"].opacity == 1.0


def test_parse_hatch():
    graph = parse_dag_mermaid("%%dag hatch: conf | #d39a2d | #9b332b | -45\n")
    hatch = graph.hatches["conf"]
    assert (hatch.background, hatch.stripe, hatch.rotation) == ("#d39a2d", "#9b332b", -45.0)


def test_hatch_default_rotation():
    graph = parse_dag_mermaid("%%dag hatch: med | #9b332b | #d39a2d\n")
    assert graph.hatches["med"].rotation == 45.0


def test_unknown_directive_ignored():
    graph = parse_dag_mermaid("%%dag frobnicate: yes\ngraph LR\n")
    assert graph.nodes == {}


class TestParseErrors:
    def test_bad_proportion(self):
        with pytest.raises(ValueError, match="Line 1"):
            parse_dag_mermaid("%%dag bands: a | up | 1.5 red\n")

    def test_bad_number(self):
        with pytest.raises(ValueError, match="band proportion"):
            parse_dag_mermaid("%%dag bands: a | up | lots red\n")

    def test_bad_stack(self):
        with pytest.raises(ValueError, match="band stack"):
            parse_dag_mermaid("%%dag bands: a | sideways | 0.5 red\n")

    def test_bad_orientation(self):
        with pytest.raises(ValueError, match="orientation"):
            parse_dag_mermaid("%%dag orientation: diagonal\n")

    def test_bad_position(self):
        with pytest.raises(ValueError, match="Position"):
            parse_dag_mermaid("%%dag pos: a | 10\n")

    def test_negative_radius(self):
        with pytest.raises(ValueError, match="non-negative"):
            parse_dag_mermaid("%%dag radius: -4\n")

    def test_strength_out_of_range(self):
        with pytest.raises(ValueError, match="Line 2"):
            parse_dag_mermaid("graph LR\n    a -->|2| b\n")


@pytest.mark.parametrize("directive", [
    "%%dag hatch: conf | #d39a2d",
    "%%dag pos: a",
    "%%dag color: a",
    "%%dag orient: a",
    "%%dag bands: a | up",
    "%%dag solid:",
])
def test_directive_missing_fields(directive):
    with pytest.raises(ValueError, match="Line 1: .*expects"):
        parse_dag_mermaid(directive + "\n")


@pytest.mark.parametrize("opacity", ["1.5", "-0.1", "nan"])
def test_solid_opacity_out_of_range(opacity):
    with pytest.raises(ValueError, match="Opacity"):
        parse_dag_mermaid(f"%%dag solid: a | {opacity}\n")


def test_nan_radius_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        parse_dag_mermaid("%%dag radius: nan\n")
