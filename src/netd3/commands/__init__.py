"""Subcommand modules for netd3."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach command groups to the root CLI group (imported lazily)."""
    from netd3.commands.build import build

    cli.add_command(build)
