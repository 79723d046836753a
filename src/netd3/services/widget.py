"""WidgetService — build widget payloads from files for the CLI.

Loads tables or hierarchies from disk, applies configured style defaults
from :class:`NetSettings`, and wraps the payload (or the construction
error) in a ServiceResult.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import structlog

from netd3 import networks
from netd3.domain.errors import NetD3Error
from netd3.domain.payload import WidgetPayload
from netd3.infrastructure.tables import load_hierarchy, load_table
from netd3.services.base import BaseService
from netd3.services.result import ServiceResult

log = structlog.get_logger(__name__)


def _count_tree(node: Any) -> int:
    if not isinstance(node, Mapping):
        return 0
    children = node.get("children") or []
    return 1 + sum(_count_tree(child) for child in children if isinstance(child, Mapping))


class WidgetService(BaseService):
    """Construct one payload per call; never raises NetD3Error."""

    def _run(self, op: str, build: Callable[[], WidgetPayload]) -> ServiceResult:
        try:
            payload = build()
        except NetD3Error as exc:
            log.warning("widget.failed", op=op, code=exc.code, error=exc.message)
            return ServiceResult.failure(op, exc)

        data: dict[str, Any] = {
            "widget": payload.widget.value,
            "payload": payload.model_dump(mode="json"),
        }
        if "links" in payload.data:
            data["link_count"] = len(payload.data["links"])
            data["node_count"] = len(payload.data["nodes"])
        else:
            data["node_count"] = _count_tree(payload.data["root"])

        log.debug("widget.built", op=op, widget=payload.widget.value, options=len(payload.options))
        return ServiceResult(ok=True, op=op, data=data)

    def build_simple(
        self,
        data_path: Path,
        *,
        source: str | int = 0,
        target: str | int = 1,
        array: str | None = None,
        width: int | None = None,
        height: int | None = None,
        style: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        def build() -> WidgetPayload:
            return networks.simple_network(
                load_table(data_path, array=array),
                source,
                target,
                width=width,
                height=height,
                defaults=self._settings.simple,
                **dict(style or {}),
            )

        return self._run("build_simple", build)

    def build_force(
        self,
        links_path: Path,
        nodes_path: Path,
        *,
        source: str,
        target: str,
        node_id: str,
        group: str | None = None,
        value: str | None = None,
        nodesize: str | None = None,
        width: int | None = None,
        height: int | None = None,
        style: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        """Force-directed graph from link and node files.

        JSON files holding both arrays (``{"links": [...], "nodes": [...]}``)
        may be passed as both paths.
        """

        def build() -> WidgetPayload:
            return networks.force_network(
                load_table(links_path, array=_array_for(links_path, "links")),
                load_table(nodes_path, array=_array_for(nodes_path, "nodes")),
                source=source,
                target=target,
                node_id=node_id,
                group=group,
                value=value,
                nodesize=nodesize,
                width=width,
                height=height,
                defaults=self._settings.force,
                **dict(style or {}),
            )

        return self._run("build_force", build)

    def build_sankey(
        self,
        links_path: Path,
        nodes_path: Path,
        *,
        source: str,
        target: str,
        value: str,
        node_id: str,
        node_group: str | None = None,
        units: str = "",
        width: int | None = None,
        height: int | None = None,
        style: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        def build() -> WidgetPayload:
            return networks.sankey_network(
                load_table(links_path, array=_array_for(links_path, "links")),
                load_table(nodes_path, array=_array_for(nodes_path, "nodes")),
                source=source,
                target=target,
                value=value,
                node_id=node_id,
                node_group=node_group,
                units=units,
                width=width,
                height=height,
                defaults=self._settings.sankey,
                **dict(style or {}),
            )

        return self._run("build_sankey", build)

    def build_tree(
        self,
        root_path: Path,
        *,
        width: int | None = 900,
        height: int | None = 600,
        style: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        def build() -> WidgetPayload:
            return networks.tree_network(
                load_hierarchy(root_path),
                width=width,
                height=height,
                defaults=self._settings.tree,
                **dict(style or {}),
            )

        return self._run("build_tree", build)


def _array_for(path: Path, name: str) -> str | None:
    """JSON inputs are read as ``{"links": [...], "nodes": [...]}`` documents."""
    return name if path.suffix.lower() == ".json" else None
