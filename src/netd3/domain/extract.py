"""Tabular link/node extraction.

Projects named columns out of link and node tables into the record shapes
the renderer consumes::

    links: [{"source": 0, "target": 1, "value": 3}, ...]
    nodes: [{"name": "A", "group": 1, "nodesize": 12}, ...]

Optional fields are omitted, never zero-filled.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from typing import Any

from netd3.domain.errors import InvalidInputError
from netd3.domain.inputs import TableInput

logger = logging.getLogger(__name__)


def project_links(
    table: TableInput,
    source: str | int,
    target: str | int,
    value: str | int | None = None,
) -> list[dict[str, Any]]:
    """Project source/target (and optionally value) columns into link records."""
    sources = table.column(source)
    targets = table.column(target)
    values = table.column(value) if value is not None else None

    links: list[dict[str, Any]] = []
    for i, (src, tgt) in enumerate(zip(sources, targets, strict=True)):
        record: dict[str, Any] = {"source": src, "target": tgt}
        if values is not None:
            record["value"] = values[i]
        links.append(record)
    return links


def project_nodes(
    table: TableInput,
    node_id: str | int,
    group: str | int | None = None,
    nodesize: str | int | None = None,
) -> list[dict[str, Any]]:
    """Project id/group/size columns into node records in row order."""
    names = table.column(node_id)
    groups = table.column(group) if group is not None else None
    sizes = table.column(nodesize) if nodesize is not None else None

    nodes: list[dict[str, Any]] = []
    for i, name in enumerate(names):
        record: dict[str, Any] = {"name": name}
        if groups is not None:
            record["group"] = groups[i]
        if sizes is not None:
            record["nodesize"] = sizes[i]
        nodes.append(record)
    return nodes


def unique_names(links: Sequence[dict[str, Any]]) -> list[Any]:
    """Distinct endpoint names: all sources first, then targets, first-seen order."""
    seen: dict[Any, None] = {}
    for key in ("source", "target"):
        for link in links:
            seen.setdefault(link[key], None)
    return list(seen)


def _is_position(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def resolve_endpoints(
    links: Sequence[dict[str, Any]],
    names: Sequence[Any],
    *,
    by_name: bool = False,
) -> list[dict[str, Any]]:
    """Rewrite link endpoints as 0-based positions into *names*.

    Integer-coded links are positional (row order of the nodes table) and are
    only bounds-checked. Otherwise, or always when *by_name* is set, each
    endpoint is looked up by node name; duplicate names resolve to their
    first row.
    """
    count = len(names)
    positional = not by_name and all(
        _is_position(link["source"]) and _is_position(link["target"]) for link in links
    )

    lookup: dict[Hashable, int] = {}
    if not positional:
        for idx, name in enumerate(names):
            if isinstance(name, Hashable):
                lookup.setdefault(name, idx)

    resolved: list[dict[str, Any]] = []
    for row, link in enumerate(links):
        record = dict(link)
        for key in ("source", "target"):
            endpoint = link[key]
            if positional:
                if not 0 <= endpoint < count:
                    msg = f"Link {row} {key} {endpoint} is outside the {count} nodes"
                    raise InvalidInputError(msg, row=row, field=key, value=endpoint)
                continue
            idx = lookup.get(endpoint) if isinstance(endpoint, Hashable) else None
            if idx is None:
                msg = f"Link {row} {key} {endpoint!r} does not match any node"
                raise InvalidInputError(msg, row=row, field=key, value=repr(endpoint))
            record[key] = idx
        resolved.append(record)

    logger.debug(
        "Resolved %d links against %d nodes (%s)",
        len(resolved),
        count,
        "positional" if positional else "by name",
    )
    return resolved
