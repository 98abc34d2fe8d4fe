"""Shared service-layer helper functions."""

from __future__ import annotations

import json
import re

from condperiod.domain.errors import FormatError, ValidationError
from condperiod.services.result import ServiceError, ServiceResult

VALIDATION_ERROR = "VALIDATION_ERROR"
FORMAT_ERROR = "FORMAT_ERROR"
TYPE_ERROR = "TYPE_ERROR"
JSON_ERROR = "JSON_ERROR"
NO_RULES = "NO_RULES"

_CATEGORY_TEXT = re.compile(r"[+-]?\d+")


class NoRulesError(LookupError):
    """Neither the caller nor the configuration supplied a rule table."""


def parse_lookup_value(text: str) -> int | str:
    """Interpret command-line input as a category or a duration string.

    Examples:
        >>> parse_lookup_value("3")
        3
        >>> parse_lookup_value("P2D")
        'P2D'
    """
    text = text.strip()
    if _CATEGORY_TEXT.fullmatch(text):
        return int(text)
    return text


def error_code(exc: Exception) -> str:
    """Map a library exception to a ServiceError code."""
    if isinstance(exc, NoRulesError):
        return NO_RULES
    if isinstance(exc, FormatError):
        return FORMAT_ERROR
    if isinstance(exc, ValidationError):
        return VALIDATION_ERROR
    if isinstance(exc, json.JSONDecodeError):
        return JSON_ERROR
    return TYPE_ERROR


def failure(op: str, exc: Exception, **detail: object) -> ServiceResult:
    """Build a failed ServiceResult from a library exception."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=error_code(exc), message=str(exc), detail=dict(detail)),
    )
