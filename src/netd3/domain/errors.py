"""Error taxonomy for payload construction.

Every failure aborts the whole construction; nothing partial is returned.
The service layer maps ``code`` onto ``ServiceError.code``.
"""

from __future__ import annotations

from typing import Any


class NetD3Error(Exception):
    """Base class for all netd3 construction failures."""

    code = "NETD3_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class InvalidInputError(NetD3Error):
    """Input is not of the required shape (table or hierarchy)."""

    code = "INVALID_INPUT"


class MissingColumnError(NetD3Error):
    """A named column does not exist in the given table."""

    code = "MISSING_COLUMN"

    def __init__(self, column: str | int, available: tuple[str, ...]) -> None:
        super().__init__(
            f"Column {column!r} not found (available: {', '.join(map(str, available)) or 'none'})",
            column=column,
            available=list(available),
        )
        self.column = column
        self.available = available
