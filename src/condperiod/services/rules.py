"""RuleService — load rule tables, resolve values, convert encodings.

Rule tables come from the caller (compact string or JSON array) or,
when the caller passes none, from the configured ``[rules] table``.
Library errors never escape: they become a failed ServiceResult whose
error code names the failure kind.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Literal

from condperiod.domain.durations import format_duration
from condperiod.domain.errors import ConditionalError
from condperiod.domain.period import ConditionalPeriod, is_category
from condperiod.services._helpers import NoRulesError, failure, parse_lookup_value
from condperiod.services.base import BaseService
from condperiod.services.result import ServiceResult

logger = logging.getLogger(__name__)

# Everything the domain may raise for bad input.
_INPUT_ERRORS = (ConditionalError, TypeError, json.JSONDecodeError, NoRulesError)


def describe_period(period: ConditionalPeriod, index: int) -> dict[str, Any]:
    """Flatten a period into JSON-safe fields."""
    if is_category(period.lower):
        lower: str | int = period.lower  # type: ignore[assignment]
        upper: str | int = period.upper  # type: ignore[assignment]
    else:
        lower = format_duration(period.lower)  # type: ignore[arg-type]
        upper = format_duration(period.upper)  # type: ignore[arg-type]
    return {
        "index": index,
        "id": period.id,
        "kind": period.kind.name.lower(),
        "lower": lower,
        "upper": upper,
        "unbounded": period.is_unbounded,
        "result": format_duration(period.result),
        "period": str(period),
    }


class RuleService(BaseService):
    """Operations over a single rule table."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def find(
        self,
        value: str,
        rules: str | None = None,
        *,
        from_json: bool = False,
    ) -> ServiceResult:
        """Resolve *value* against the rule table.

        Digit-only input is looked up as a category, anything else as an
        ISO 8601 duration. No match is a success with ``matched: false``.
        """
        op = "find"
        lookup = parse_lookup_value(value)
        try:
            collection = self._load(rules, from_json=from_json)
            period = collection.find(lookup)
        except _INPUT_ERRORS as exc:
            logger.debug("find failed for %r: %s", value, exc)
            return failure(op, exc, value=value)

        if period is None:
            logger.debug("No period matched %r", value)
            return ServiceResult(
                ok=True,
                op=op,
                data={"value": value, "matched": False},
                warnings=[f"No period matches {value}"],
            )

        index = next(i for i, stored in enumerate(collection) if stored is period)
        data = {"value": value, "matched": True, **describe_period(period, index)}
        return ServiceResult(ok=True, op=op, data=data)

    def check(self, rules: str | None = None, *, from_json: bool = False) -> ServiceResult:
        """Validate a rule table and report its canonical form."""
        op = "check"
        try:
            collection = self._load(rules, from_json=from_json)
        except _INPUT_ERRORS as exc:
            logger.debug("check failed: %s", exc)
            return failure(op, exc)

        data: dict[str, Any] = {
            "kind": collection.kind.name.lower() if collection.kind else None,
            "count": len(collection),
            "canonical": str(collection),
        }
        warnings: list[str] = []
        if rules is not None and not from_json and data["canonical"] != rules:
            warnings.append("Rule table is not in canonical form")
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def convert(
        self,
        rules: str | None = None,
        *,
        to: Literal["json", "string"] = "json",
        from_json: bool = False,
    ) -> ServiceResult:
        """Re-encode a rule table as a JSON array or a compact string."""
        op = "convert"
        try:
            collection = self._load(rules, from_json=from_json)
        except _INPUT_ERRORS as exc:
            logger.debug("convert failed: %s", exc)
            return failure(op, exc)

        output = collection.to_json() if to == "json" else str(collection)
        return ServiceResult(ok=True, op=op, data={"format": to, "output": output})

    def show(self, rules: str | None = None, *, from_json: bool = False) -> ServiceResult:
        """List every period of a rule table, in lookup order."""
        op = "show"
        try:
            collection = self._load(rules, from_json=from_json)
        except _INPUT_ERRORS as exc:
            logger.debug("show failed: %s", exc)
            return failure(op, exc)

        periods = [describe_period(period, i) for i, period in enumerate(collection)]
        return ServiceResult(ok=True, op=op, data={"count": len(periods), "periods": periods})
