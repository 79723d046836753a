"""WidgetPayload — the unit handed to the external renderer.

Built once, frozen, and never serialized here: the boundary calls
``payload.model_dump(mode="json")`` or ``model_dump_json()`` itself.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, Field

from netd3.domain.types import GraphKind

logger = logging.getLogger(__name__)


class SizingPolicy(BaseModel):
    """Frame size and fill behaviour.

    ``width``/``height`` of None means "fill the container".
    """

    model_config = {"frozen": True}

    width: int | None = None
    height: int | None = None
    padding: int = 0
    browser_fill: bool = True


class WidgetPayload(BaseModel):
    """Data + options + sizing for one widget.

    Attributes:
        widget: Which renderer variant to use.
        data: ``{"links", "nodes"}`` for network variants, ``{"root"}`` for trees.
        options: Flat renderer configuration.
        sizing: Frame sizing policy.
    """

    model_config = {"frozen": True}

    widget: GraphKind
    data: dict[str, Any]
    options: dict[str, Any] = Field(default_factory=dict)
    sizing: SizingPolicy = Field(default_factory=SizingPolicy)


def build_payload(
    kind: GraphKind,
    data: dict[str, Any],
    options: dict[str, Any],
    *,
    width: int | None = None,
    height: int | None = None,
) -> WidgetPayload:
    """Compose extracted data and assembled options into a payload."""
    payload = WidgetPayload(
        widget=kind,
        data=data,
        options=options,
        sizing=SizingPolicy(width=width, height=height),
    )
    logger.debug("Built %s payload with %d options", kind.value, len(options))
    return payload
