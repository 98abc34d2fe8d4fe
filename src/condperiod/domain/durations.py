"""Calendar-duration glue over isodate.

Durations are kept in their parsed calendar composition: ``timedelta``
for day/time-only values, ``isodate.Duration`` once years or months are
involved. Ordering and equality go through a normalized projection
where a year counts as 365 days and a month as 30 days.
"""

from __future__ import annotations

from datetime import timedelta

import isodate

from condperiod.domain.errors import ValidationError

CalendarDuration = timedelta | isodate.Duration

SECONDS_PER_DAY = 86_400
DAYS_PER_YEAR = 365
DAYS_PER_MONTH = 30


def is_duration(value: object) -> bool:
    """Check whether *value* is a structured calendar duration."""
    return isinstance(value, (timedelta, isodate.Duration))


def parse_duration(text: str) -> CalendarDuration:
    """Parse an ISO 8601 duration string.

    Raises:
        ValidationError: *text* is not a valid ISO 8601 duration.
    """
    try:
        return isodate.parse_duration(text)
    except (ValueError, OverflowError) as exc:
        # ISO8601Error is a ValueError; out-of-range day counts overflow timedelta.
        msg = f"Invalid ISO 8601 duration: {text!r}"
        raise ValidationError(msg) from exc


def format_duration(value: CalendarDuration) -> str:
    """Return the canonical ISO 8601 form of *value*."""
    return isodate.duration_isoformat(value)


def total_seconds(value: CalendarDuration) -> float:
    """Project *value* onto seconds for ordering comparisons."""
    if isinstance(value, isodate.Duration):
        calendar_days = float(value.years) * DAYS_PER_YEAR + float(value.months) * DAYS_PER_MONTH
        return calendar_days * SECONDS_PER_DAY + value.tdelta.total_seconds()
    return value.total_seconds()


def total_milliseconds(value: CalendarDuration) -> int:
    """Project *value* onto whole milliseconds for equality comparisons."""
    return round(total_seconds(value) * 1000)


def copy_duration(value: CalendarDuration) -> CalendarDuration:
    """Copy *value* without collapsing its calendar units."""
    if isinstance(value, isodate.Duration):
        tdelta = value.tdelta
        return isodate.Duration(
            days=tdelta.days,
            seconds=tdelta.seconds,
            microseconds=tdelta.microseconds,
            months=value.months,
            years=value.years,
        )
    return timedelta(days=value.days, seconds=value.seconds, microseconds=value.microseconds)


def coerce_duration(value: object, ordinal: str) -> CalendarDuration:
    """Turn a duration or ISO 8601 string into a duration.

    *ordinal* names the constructor argument being checked ("second",
    "third", "fourth") and prefixes the error message.

    Structured inputs are copied, so later changes to the caller's
    object do not reach the period holding the result.

    Raises:
        ValidationError: *value* is neither a duration nor a parseable
            string, or it is negative.
    """
    msg = (
        f"The {ordinal} argument must be a valid duration, or an ISO 8601 "
        f"duration string. Input was: ({type(value).__name__}) {value!r}"
    )
    if is_duration(value):
        duration = copy_duration(value)  # type: ignore[arg-type]
    elif isinstance(value, str):
        try:
            duration = parse_duration(value)
        except ValidationError as exc:
            raise ValidationError(msg) from exc
    else:
        raise ValidationError(msg)

    # Negative durations have no compact form.
    if total_seconds(duration) < 0:
        raise ValidationError(msg)
    return duration
