"""Command group: build widget payloads (simple, force, tree, sankey)."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from netd3.commands._base import NetGroup
from netd3.services.result import ServiceError

if TYPE_CHECKING:
    from netd3.commands._context import AppContext
    from netd3.services.result import ServiceResult

_BUILD_EXAMPLES = """\
  netd3 build simple edges.csv --source from --target to
  netd3 build force links.csv nodes.csv --source source --target target --node-id name --group group
  netd3 build tree flare.json --option fontsize=12 --output tree.json
  netd3 build sankey energy.json energy.json --source source --target target \\
      --value value --node-id name"""

_EXISTING_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _parse_options(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` pairs into a style mapping; VALUE is JSON or a raw string."""
    style: dict[str, Any] = {}
    for item in values:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            msg = f"Expected KEY=VALUE, got {item!r}"
            raise click.BadParameter(msg)
        try:
            style[key] = json.loads(raw)
        except json.JSONDecodeError:
            style[key] = raw
    return style


def _widget_options[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Apply the flags shared by every build subcommand."""
    func = click.option(
        "--output",
        "output_file",
        type=click.Path(dir_okay=False),
        default=None,
        help="Write the payload JSON here (omit to print to stdout).",
    )(func)
    func = click.option("--height", type=int, default=None, help="Frame height in pixels.")(func)
    func = click.option("--width", type=int, default=None, help="Frame width in pixels.")(func)
    func = click.option(
        "--option",
        "style",
        multiple=True,
        callback=_parse_options,
        help="Style option KEY=VALUE (repeatable), e.g. opacity=0.4.",
    )(func)
    return func


def _deliver(app: AppContext, result: ServiceResult, output_file: str | None) -> None:
    """Print the payload, or write it to *output_file* and print a summary."""
    if not result.ok:
        app.emit(result)
        return

    payload = result.data["payload"]
    document = json.dumps(payload, indent=app.settings.output.indent)
    if not output_file:
        click.echo(document)
        return

    try:
        Path(output_file).write_text(document + "\n", encoding="utf-8")
    except OSError as exc:
        error = ServiceError(
            code="OUTPUT_ERROR",
            message=f"Cannot write {output_file}: {exc}",
            detail={"path": output_file},
        )
        app.emit(result.model_copy(update={"ok": False, "data": {}, "error": error}))
        return

    summary = {k: v for k, v in result.data.items() if k != "payload"}
    summary.update(output_file=output_file, sizing=payload["sizing"], options=payload["options"])
    app.emit(result.model_copy(update={"data": summary}))


@click.group(cls=NetGroup, examples=_BUILD_EXAMPLES)
def build() -> None:
    """Build a widget payload for the D3 renderer."""


@build.command(
    examples="""\
  netd3 build simple edges.csv
  netd3 build simple edges.csv --source from --target to --option zoom=true"""
)
@click.argument("data", type=_EXISTING_FILE)
@click.option("--source", default=None, help="Source column (default: first column).")
@click.option("--target", default=None, help="Target column (default: second column).")
@click.option("--array", default=None, help="Array name when DATA is a JSON object.")
@_widget_options
@click.pass_obj
def simple(
    app: AppContext,
    data: Path,
    source: str | None,
    target: str | None,
    array: str | None,
    style: dict[str, Any],
    width: int | None,
    height: int | None,
    output_file: str | None,
) -> None:
    """Simple node-link diagram from one edge table."""
    from netd3.services.widget import WidgetService

    result = WidgetService(app.settings).build_simple(
        data,
        source=source if source is not None else 0,
        target=target if target is not None else 1,
        array=array,
        width=width,
        height=height,
        style=style,
    )
    _deliver(app, result, output_file)


@build.command(
    examples="""\
  netd3 build force links.csv nodes.csv --source source --target target --node-id name --group group
  netd3 build force mis.json mis.json --source source --target target --value value \\
      --node-id name --group group --nodesize size --option legend=true"""
)
@click.argument("links", type=_EXISTING_FILE)
@click.argument("nodes", type=_EXISTING_FILE)
@click.option("--source", required=True, help="Link source column.")
@click.option("--target", required=True, help="Link target column.")
@click.option("--value", default=None, help="Link weight column.")
@click.option("--node-id", required=True, help="Node id column.")
@click.option("--group", default=None, help="Node group column.")
@click.option("--nodesize", default=None, help="Node size column.")
@_widget_options
@click.pass_obj
def force(
    app: AppContext,
    links: Path,
    nodes: Path,
    source: str,
    target: str,
    value: str | None,
    node_id: str,
    group: str | None,
    nodesize: str | None,
    style: dict[str, Any],
    width: int | None,
    height: int | None,
    output_file: str | None,
) -> None:
    """Force-directed network from link and node tables."""
    from netd3.services.widget import WidgetService

    result = WidgetService(app.settings).build_force(
        links,
        nodes,
        source=source,
        target=target,
        node_id=node_id,
        group=group,
        value=value,
        nodesize=nodesize,
        width=width,
        height=height,
        style=style,
    )
    _deliver(app, result, output_file)


@build.command(
    examples="""\
  netd3 build tree flare.json
  netd3 build tree canada.json --option diameter=500 --option fontsize=10"""
)
@click.argument("root", type=_EXISTING_FILE)
@_widget_options
@click.pass_obj
def tree(
    app: AppContext,
    root: Path,
    style: dict[str, Any],
    width: int | None,
    height: int | None,
    output_file: str | None,
) -> None:
    """Radial tree from a JSON hierarchy of {name, children}."""
    from netd3.services.widget import WidgetService

    result = WidgetService(app.settings).build_tree(
        root,
        width=width if width is not None else 900,
        height=height if height is not None else 600,
        style=style,
    )
    _deliver(app, result, output_file)


@build.command(
    examples="""\
  netd3 build sankey energy.json energy.json --source source --target target \\
      --value value --node-id name --units TWh"""
)
@click.argument("links", type=_EXISTING_FILE)
@click.argument("nodes", type=_EXISTING_FILE)
@click.option("--source", required=True, help="Link source column.")
@click.option("--target", required=True, help="Link target column.")
@click.option("--value", required=True, help="Link flow column.")
@click.option("--node-id", required=True, help="Node id column.")
@click.option("--node-group", default=None, help="Node group column.")
@click.option("--units", default="", help="Unit label for flow values.")
@_widget_options
@click.pass_obj
def sankey(
    app: AppContext,
    links: Path,
    nodes: Path,
    source: str,
    target: str,
    value: str,
    node_id: str,
    node_group: str | None,
    units: str,
    style: dict[str, Any],
    width: int | None,
    height: int | None,
    output_file: str | None,
) -> None:
    """Sankey flow diagram from link and node tables."""
    from netd3.services.widget import WidgetService

    result = WidgetService(app.settings).build_sankey(
        links,
        nodes,
        source=source,
        target=target,
        value=value,
        node_id=node_id,
        node_group=node_group,
        units=units,
        width=width,
        height=height,
        style=style,
    )
    _deliver(app, result, output_file)
