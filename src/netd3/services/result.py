"""ServiceResult and ServiceError — the contract between services and the CLI.

The core raises NetD3Error; services convert it here so every interface
renders success and failure the same way.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from netd3.domain.errors import NetD3Error


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: NetD3Error) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"build_force"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, source files).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: NetD3Error) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
