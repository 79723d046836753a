"""NetworkX adapters — graphs into link/node tables, trees into hierarchies."""

from __future__ import annotations

from typing import Any

import networkx as nx
from networkx.readwrite import json_graph

from netd3.domain.errors import InvalidInputError
from netd3.domain.inputs import TableInput


def tables_from_networkx(
    graph: nx.Graph,
    *,
    group: str = "group",
    value: str = "weight",
) -> tuple[TableInput, TableInput]:
    """Split *graph* into positional ``(links, nodes)`` tables.

    Nodes keep the graph's iteration order; links reference them by
    position. The ``value`` column is only present when every edge carries
    the *value* attribute. Nodes without a *group* attribute get group 1.
    """
    if not isinstance(graph, nx.Graph):
        msg = f"Expected a networkx graph, got {type(graph).__name__}"
        raise InvalidInputError(msg)

    positions = {node: i for i, node in enumerate(graph.nodes)}
    nodes = TableInput(
        columns=("name", "group"),
        rows=tuple((str(node), data.get(group, 1)) for node, data in graph.nodes(data=True)),
    )

    edges = list(graph.edges(data=True))
    weighted = bool(edges) and all(value in data for _u, _v, data in edges)
    if weighted:
        links = TableInput(
            columns=("source", "target", "value"),
            rows=tuple((positions[u], positions[v], data[value]) for u, v, data in edges),
        )
    else:
        links = TableInput(
            columns=("source", "target"),
            rows=tuple((positions[u], positions[v]) for u, v, _data in edges),
        )
    return links, nodes


def hierarchy_from_networkx(tree: nx.DiGraph, root: Any) -> dict[str, Any]:
    """Nest a directed tree below *root* as ``{"name", "children"}`` mappings."""
    if root not in tree:
        msg = f"Root {root!r} is not a node of the graph"
        raise InvalidInputError(msg)
    try:
        return json_graph.tree_data(tree, root, ident="name", children="children")
    except (TypeError, nx.NetworkXError) as exc:
        msg = f"Graph is not a directed tree: {exc}"
        raise InvalidInputError(msg) from exc
