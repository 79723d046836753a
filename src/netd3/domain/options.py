"""Style models and the options assembler.

Each graph variant has a frozen style model with code-baked defaults.
Field names are snake_case in Python and camelCase on the wire, matching
the keys the renderer reads (``linkColour``, ``radiusCalculation``, ...).

Expression fields (``link_width``, ``radius_calculation`` and a string
``link_distance``) are opaque: they are forwarded to the renderer's
expression evaluator without parsing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from netd3.domain.errors import InvalidInputError

# Interactive (clicked/hovered) label size relative to the base font size.
CLICK_TEXT_MULTIPLIER = 2.5
# Link transparency relative to the overall opacity.
LINK_OPACITY_FRACTION = 0.5

_STYLE_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    populate_by_name=True,
    alias_generator=to_camel,
)


def click_text_size(fontsize: float) -> float:
    return fontsize * CLICK_TEXT_MULTIPLIER


def link_opacity(opacity: float) -> float:
    return opacity * LINK_OPACITY_FRACTION


class _LabelledStyle(BaseModel):
    """Variants with hoverable labels and translucent links."""

    model_config = _STYLE_CONFIG

    fontsize: float = 7
    opacity: float = 0.6

    def derived(self) -> dict[str, Any]:
        return {
            "clickTextSize": click_text_size(self.fontsize),
            "linkOpacity": link_opacity(self.opacity),
        }


class SimpleStyle(_LabelledStyle):
    """[simple] section — plain node-link diagram."""

    link_distance: int | float | str = 50
    charge: float = -200
    link_colour: str = "#666"
    node_colour: str = "#3182bd"
    node_click_colour: str = "#E34A33"
    text_colour: str = "#3182bd"
    zoom: bool = False


class ForceStyle(_LabelledStyle):
    """[force] section — force-directed graph with groups and optional sizes."""

    colour_scale: str = "d3.scale.category20()"
    link_distance: int | float | str = 50
    link_width: int | float | str = "function(d) { return Math.sqrt(d.value); }"
    radius_calculation: str = " Math.sqrt(d.nodesize)+6"
    charge: float = -120
    link_colour: str = "#666"
    zoom: bool = False
    legend: bool = False
    bounded: bool = False


class TreeStyle(_LabelledStyle):
    """[tree] section — radial Reingold-Tilford tree."""

    fontsize: float = 10
    opacity: float = 0.9
    link_colour: str = "#ccc"
    node_colour: str = "#3182bd"
    text_colour: str = "#3182bd"
    diameter: float = 980
    zoom: bool = False


class SankeyStyle(BaseModel):
    """[sankey] section — flow diagram."""

    model_config = _STYLE_CONFIG

    colour_scale: str = "d3.scale.category20()"
    fontsize: float = 7
    node_width: float = 15
    node_padding: float = 10
    iterations: int = 32
    sinks_right: bool = True

    def derived(self) -> dict[str, Any]:
        return {}


type Style = SimpleStyle | ForceStyle | TreeStyle | SankeyStyle


def _field_names(model: type[BaseModel]) -> dict[str, str]:
    """Map both wire aliases and Python names onto Python field names."""
    names: dict[str, str] = {}
    for name, info in model.model_fields.items():
        names[name] = name
        if info.alias:
            names[info.alias] = name
    return names


def build_style[S: BaseModel](
    model: type[S],
    defaults: S | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> S:
    """Layer code defaults, configured *defaults*, then call *overrides*.

    Override keys may use either the Python name or the wire name.
    Unknown keys and wrongly typed values raise InvalidInputError.
    """
    names = _field_names(model)
    merged: dict[str, Any] = defaults.model_dump() if defaults is not None else {}
    for key, value in (overrides or {}).items():
        merged[names.get(key, key)] = value
    try:
        return model.model_validate(merged)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        msg = f"Invalid {model.__name__} options: {'; '.join(problems)}"
        raise InvalidInputError(msg, errors=problems) from exc


def assemble_options(style: Style, **structural: Any) -> dict[str, Any]:
    """Flatten *style*, its derived values, and structural keys into one mapping.

    Structural keys describe the data shape (``NodeID``, ``Group``,
    ``nodesize``) rather than appearance; they never collide with style keys.
    """
    options: dict[str, Any] = {**structural}
    options.update(style.model_dump(by_alias=True))
    options.update(style.derived())
    return options
