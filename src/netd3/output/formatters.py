"""Dispatch a ServiceResult to JSON, quiet, or Rich rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from netd3.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from netd3.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int | None = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the human renderer.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.indent)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
