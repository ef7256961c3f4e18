"""Prototype chains as graphs, with Graphviz export."""
from __future__ import annotations

from pathlib import Path

import networkx as nx
import pydot

from ..typetag import type_of
from .container import Prototype, iterate_public

ROOT_COLOR = "#B0BEC5"
PROTOTYPE_COLOR = "#8BC34A"


def lineage(value: Prototype) -> list[Prototype]:
    """Return ``value`` followed by each of its ancestors up to the root."""

    if not isinstance(value, Prototype):
        raise TypeError(f"lineage requires a prototype, got {type_of(value)}")
    chain = []
    while value is not None:
        chain.append(value)
        value = value.__prototype__
    return chain


def _node_id(value: Prototype) -> str:
    return f"p{id(value):x}"


def lineage_graph(*values: Prototype) -> nx.DiGraph:
    """Build a graph with an edge from every prototype to its parent."""

    graph = nx.DiGraph()
    for value in values:
        for proto in lineage(value):
            node = _node_id(proto)
            if node in graph and graph.nodes[node].get("type") is not None:
                break
            graph.add_node(
                node,
                type=type_of(proto),
                fields=[key for key, _ in iterate_public(proto)],
            )
            parent = proto.__prototype__
            if parent is not None:
                graph.add_edge(node, _node_id(parent))
    return graph


def is_linear(graph: nx.DiGraph) -> bool:
    """True when every prototype has at most one parent and nothing loops."""

    if any(degree > 1 for _, degree in graph.out_degree()):
        return False
    return nx.is_directed_acyclic_graph(graph)


def to_pydot(graph: nx.DiGraph) -> pydot.Dot:
    dot = pydot.Dot(
        "protochain_lineage",
        graph_type="digraph",
        rankdir="BT",
        fontname="Helvetica",
    )
    for node, attrs in graph.nodes(data=True):
        fields = attrs.get("fields") or []
        label = attrs.get("type", node)
        if fields:
            label = f"{label}\\n{', '.join(str(f) for f in fields)}"
        is_root = graph.out_degree(node) == 0
        dot.add_node(
            pydot.Node(
                node,
                label=label,
                shape="box",
                style="filled,rounded",
                fillcolor=ROOT_COLOR if is_root else PROTOTYPE_COLOR,
                fontname="Helvetica",
            )
        )
    for child, parent in graph.edges():
        dot.add_edge(pydot.Edge(child, parent, arrowsize="0.8", color="#34495e"))
    return dot


def export_graphviz(values, output_path) -> Path:
    """Write the lineage of ``values`` as Graphviz.

    A ``.dot`` suffix writes DOT source; any other suffix is rendered
    by Graphviz in that format.
    """

    dot = to_pydot(lineage_graph(*values))
    output_path = Path(output_path)
    if output_path.parent and not output_path.parent.exists():
        output_path.parent.mkdir(parents=True, exist_ok=True)
    suffix = output_path.suffix.lstrip(".") or "dot"
    if suffix == "dot":
        dot.write_raw(str(output_path))
    else:
        dot.write(str(output_path), format=suffix)
    return output_path


__all__ = [
    "export_graphviz",
    "is_linear",
    "lineage",
    "lineage_graph",
    "to_pydot",
]
