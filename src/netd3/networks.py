"""Graph construction operations.

Each function validates its inputs, projects the data, assembles options,
and returns one immutable :class:`WidgetPayload`. Any failure raises a
:class:`NetD3Error` subclass and nothing is returned.

Usage::

    payload = force_network(
        links, nodes,
        source="source", target="target", value="value",
        node_id="name", group="group", opacity=0.4,
    )
    document = payload.model_dump_json()
"""

from __future__ import annotations

from typing import Any

from netd3.domain.extract import project_links, project_nodes, resolve_endpoints, unique_names
from netd3.domain.hierarchy import normalize_hierarchy
from netd3.domain.inputs import TableInput
from netd3.domain.options import (
    ForceStyle,
    SankeyStyle,
    SimpleStyle,
    TreeStyle,
    assemble_options,
    build_style,
)
from netd3.domain.payload import WidgetPayload, build_payload
from netd3.domain.types import GraphKind
from netd3.infrastructure.tables import as_table

type Column = str | int


def simple_network(
    data: Any,
    source: Column = 0,
    target: Column = 1,
    *,
    width: int | None = None,
    height: int | None = None,
    defaults: SimpleStyle | None = None,
    **style: Any,
) -> WidgetPayload:
    """Node-link diagram from a single edge table.

    *source*/*target* name columns, or give their positions (first two
    columns by default). Nodes are the distinct endpoint names.
    """
    table = as_table(data, label="data")
    resolved_style = build_style(SimpleStyle, defaults, style)

    raw_links = project_links(table, source, target)
    names = unique_names(raw_links)
    links = resolve_endpoints(raw_links, names, by_name=True)
    nodes = [{"name": name} for name in names]

    options = assemble_options(resolved_style)
    return build_payload(
        GraphKind.SIMPLE,
        {"links": links, "nodes": nodes},
        options,
        width=width,
        height=height,
    )


def force_network(
    links: Any,
    nodes: Any,
    *,
    source: Column,
    target: Column,
    node_id: Column,
    group: Column | None = None,
    value: Column | None = None,
    nodesize: Column | None = None,
    width: int | None = None,
    height: int | None = None,
    defaults: ForceStyle | None = None,
    **style: Any,
) -> WidgetPayload:
    """Force-directed graph from link and node tables.

    Integer-coded links index the node rows directly (0-based); otherwise
    endpoints are matched against the *node_id* column.
    """
    links_table = as_table(links, label="links")
    nodes_table = as_table(nodes, label="nodes")
    resolved_style = build_style(ForceStyle, defaults, style)

    link_records = project_links(links_table, source, target, value)
    node_records = project_nodes(nodes_table, node_id, group, nodesize)
    link_records = resolve_endpoints(link_records, [n["name"] for n in node_records])

    options = assemble_options(
        resolved_style,
        NodeID=nodes_table.column_name(node_id),
        Group=nodes_table.column_name(group) if group is not None else None,
        nodesize=nodesize is not None,
    )
    return build_payload(
        GraphKind.FORCE,
        {"links": link_records, "nodes": node_records},
        options,
        width=width,
        height=height,
    )


def tree_network(
    root: Any,
    *,
    width: int | None = 900,
    height: int | None = 600,
    defaults: TreeStyle | None = None,
    **style: Any,
) -> WidgetPayload:
    """Radial tree from a ``{"name", "children": [...]}`` hierarchy."""
    hierarchy = normalize_hierarchy(root)
    resolved_style = build_style(TreeStyle, defaults, style)
    return build_payload(
        GraphKind.TREE,
        {"root": hierarchy},
        assemble_options(resolved_style),
        width=width,
        height=height,
    )


def sankey_network(
    links: Any,
    nodes: Any,
    *,
    source: Column,
    target: Column,
    value: Column,
    node_id: Column,
    node_group: Column | None = None,
    units: str = "",
    width: int | None = None,
    height: int | None = None,
    defaults: SankeyStyle | None = None,
    **style: Any,
) -> WidgetPayload:
    """Sankey flow diagram; link *value* sets the flow width and is required."""
    links_table = as_table(links, label="links")
    nodes_table = as_table(nodes, label="nodes")
    resolved_style = build_style(SankeyStyle, defaults, style)

    link_records = project_links(links_table, source, target, value)
    node_records = project_nodes(nodes_table, node_id, node_group)
    link_records = resolve_endpoints(link_records, [n["name"] for n in node_records])

    options = assemble_options(
        resolved_style,
        NodeID=nodes_table.column_name(node_id),
        NodeGroup=nodes_table.column_name(node_group) if node_group is not None else None,
        units=units,
    )
    return build_payload(
        GraphKind.SANKEY,
        {"links": link_records, "nodes": node_records},
        options,
        width=width,
        height=height,
    )


def node_table(names: list[Any], *, column: str = "name") -> TableInput:
    """One-column nodes table, for callers holding a bare list of ids."""
    return TableInput(columns=(column,), rows=tuple((name,) for name in names))
