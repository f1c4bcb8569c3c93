"""Result records returned by mdfront services and consumed by the CLI."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` carries e.g. the offending path."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    A failed call sets ``ok=False`` and ``error``.  A call that succeeds
    with caveats, such as a file without front matter, stays ``ok`` and
    lists them in ``warnings``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
