"""Hierarchy normalizer for tree widgets."""

from __future__ import annotations

import copy
from typing import Any

from netd3.domain.inputs import as_hierarchy


def normalize_hierarchy(value: Any) -> dict[str, Any]:
    """Accept a root node and return a detached copy of it.

    Only the top level is checked. Malformed deeper nodes are forwarded
    unchanged and surface when the renderer walks the tree.
    """
    tagged = as_hierarchy(value)
    return copy.deepcopy(dict(tagged.root))
