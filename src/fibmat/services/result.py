"""Return type shared by every FibonacciService call.

Commands never see exceptions from the service; they inspect ``ok`` and
either render ``data`` or route ``error`` to stderr.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable ``code`` plus a message fit for the user."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation; ``meta`` holds the span tree under ``--verbose``."""

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
