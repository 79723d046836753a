"""BaseService — shared construction for netd3 services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netd3.config.settings import NetSettings


class BaseService:
    """Base for service classes.

    Services receive the frozen :class:`NetSettings` so configured style
    defaults (``netd3.toml``) flow into every construction.
    """

    def __init__(self, settings: NetSettings) -> None:
        self._settings = settings
