"""Graph variant discriminator shared by the payload and the renderer."""

from __future__ import annotations

from enum import StrEnum


class GraphKind(StrEnum):
    """Widget names understood by the external D3 renderer."""

    SIMPLE = "simpleNetwork"
    FORCE = "forceNetwork"
    TREE = "treeNetwork"
    SANKEY = "sankeyNetwork"

    @classmethod
    def from_alias(cls, value: str) -> GraphKind:
        """Resolve a short alias (``force``) or a widget name (``forceNetwork``)."""
        lowered = value.lower()
        for kind in cls:
            if lowered in (kind.value.lower(), kind.name.lower()):
                return kind
        if lowered == "flow":
            return cls.SANKEY
        msg = f"Unknown graph kind: {value!r}"
        raise ValueError(msg)
