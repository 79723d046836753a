"""Host bindings — explicit output-slot and render factories.

Nothing is registered globally. A hosting application asks for the binding
of a graph kind and wires the two plain functions into its own component
registry::

    binding = binding_for(GraphKind.FORCE)
    slot = binding.output("network", height="700px")
    render = binding.render(lambda: force_network(links, nodes, ...))
    host.register(slot.output_id, render)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from netd3.domain.errors import InvalidInputError
from netd3.domain.payload import WidgetPayload
from netd3.domain.types import GraphKind


@dataclass(frozen=True)
class OutputSlot:
    """Placeholder the host reserves in its layout for one widget."""

    output_id: str
    widget: GraphKind
    width: str = "100%"
    height: str = "500px"

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.output_id,
            "widget": self.widget.value,
            "width": self.width,
            "height": self.height,
        }


def widget_output(
    output_id: str,
    kind: GraphKind,
    width: str = "100%",
    height: str = "500px",
) -> OutputSlot:
    """Describe the container a rendered widget of *kind* will fill."""
    return OutputSlot(output_id=output_id, widget=kind, width=width, height=height)


def render_widget(
    kind: GraphKind,
    expr: Callable[[], WidgetPayload],
) -> Callable[[], dict[str, Any]]:
    """Wrap a payload-producing callable for deferred, repeatable rendering.

    *expr* is evaluated on every call so the host can re-render when its
    inputs change. A payload of a different kind raises InvalidInputError.
    """

    def render() -> dict[str, Any]:
        payload = expr()
        if not isinstance(payload, WidgetPayload):
            msg = f"Render expression must return a WidgetPayload, got {type(payload).__name__}"
            raise InvalidInputError(msg)
        if payload.widget is not kind:
            msg = f"Expected a {kind.value} payload, got {payload.widget.value}"
            raise InvalidInputError(msg, expected=kind.value, actual=payload.widget.value)
        return payload.model_dump(mode="json")

    return render


@dataclass(frozen=True)
class WidgetBinding:
    """Output and render factories for one graph kind."""

    kind: GraphKind
    output: Callable[..., OutputSlot]
    render: Callable[[Callable[[], WidgetPayload]], Callable[[], dict[str, Any]]]


def binding_for(kind: GraphKind | str) -> WidgetBinding:
    """Return the factories bound to *kind* (a GraphKind or an alias like ``"force"``)."""
    if not isinstance(kind, GraphKind):
        try:
            kind = GraphKind.from_alias(kind)
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc

    def output(output_id: str, width: str = "100%", height: str = "500px") -> OutputSlot:
        return widget_output(output_id, kind, width=width, height=height)

    def render(expr: Callable[[], WidgetPayload]) -> Callable[[], dict[str, Any]]:
        return render_widget(kind, expr)

    return WidgetBinding(kind=kind, output=output, render=render)
