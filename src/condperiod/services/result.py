"""Return types of the service layer.

Every public RuleService method answers with a :class:`ServiceResult`.
Domain exceptions stop at the service boundary and come back as a
:class:`ServiceError`, so the CLI renders results and never catches.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    Attributes:
        code: Failure kind, one of the constants in
            :mod:`condperiod.services._helpers` (``FORMAT_ERROR``, ...).
        message: The domain exception message, prefix included.
        detail: Operation inputs worth echoing back (e.g. the looked-up value).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation, serializable as-is for ``--json``.

    ``data`` is filled on success, ``error`` on failure. ``warnings``
    carry non-fatal findings such as an unmatched lookup.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
