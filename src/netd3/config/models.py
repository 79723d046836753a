"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live on the style models, netd3.toml only
holds overrides, e.g.::

    [force]
    opacity = 0.4
    legend = true
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from netd3.domain.options import ForceStyle, SankeyStyle, SimpleStyle, TreeStyle


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int | None = 2


class NetConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    simple: SimpleStyle = Field(default_factory=SimpleStyle)
    force: ForceStyle = Field(default_factory=ForceStyle)
    tree: TreeStyle = Field(default_factory=TreeStyle)
    sankey: SankeyStyle = Field(default_factory=SankeyStyle)
    output: OutputConfig = Field(default_factory=OutputConfig)
