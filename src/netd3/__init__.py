"""netd3 — D3 network and tree widget payloads from tables and hierarchies."""

from __future__ import annotations

from netd3.domain.errors import InvalidInputError, MissingColumnError, NetD3Error
from netd3.domain.inputs import HierarchyInput, TableInput
from netd3.domain.payload import SizingPolicy, WidgetPayload
from netd3.domain.types import GraphKind
from netd3.networks import force_network, sankey_network, simple_network, tree_network

__version__ = "0.2.0"

__all__ = [
    "GraphKind",
    "HierarchyInput",
    "InvalidInputError",
    "MissingColumnError",
    "NetD3Error",
    "SizingPolicy",
    "TableInput",
    "WidgetPayload",
    "__version__",
    "force_network",
    "sankey_network",
    "simple_network",
    "tree_network",
]
