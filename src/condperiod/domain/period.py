"""ConditionalPeriod — one interval-to-result rule.

A period maps every value of an inclusive interval to a result duration.
Two bound kinds exist (see :class:`~condperiod.domain.types.Kind`):

- Category: positive integers, compared directly.
- Duration: calendar durations, compared by their seconds projection.

Compact form::

    C3-5P10D       category 3 to 5 gives 10 days
    DP3DP5DP10D    duration P3D to P5D gives 10 days

An upper bound of ``0`` (or a zero-length duration) leaves the interval
unbounded above: ``C5-0P1Y`` matches every category from 5 upwards.

INVARIANT: Periods are immutable. Assignment raises FrozenInstanceError.
"""

from __future__ import annotations

import json
import re
from dataclasses import InitVar, dataclass, field
from typing import Any, Self

from condperiod.domain.durations import (
    CalendarDuration,
    coerce_duration,
    format_duration,
    is_duration,
    parse_duration,
    total_milliseconds,
    total_seconds,
)
from condperiod.domain.errors import FormatError, ValidationError
from condperiod.domain.ids import generate_period_id
from condperiod.domain.types import Kind

Bound = int | CalendarDuration

CONSTRUCTOR_ARITY = 4

_KIND_TAGS = frozenset(kind.value for kind in Kind)

# Bound tokens made only of digits are categories.
_INTEGER_TOKEN = re.compile(r"[+-]?\d+")


def is_category(value: object) -> bool:
    """Check whether *value* can be compared as a category (bool excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)


def _describe(value: object) -> str:
    return f"({type(value).__name__}) {value!r}"


def _check_kind(value: object) -> Kind:
    if isinstance(value, Kind):
        return value
    if isinstance(value, str) and value in _KIND_TAGS:
        return Kind(value)
    msg = (
        "The first argument must be one of the Kind constants "
        f"(Kind.CATEGORY or Kind.DURATION). Input was: {_describe(value)}"
    )
    raise ValidationError(msg)


def _check_lower(kind: Kind, value: object) -> Bound:
    if kind is Kind.DURATION:
        return coerce_duration(value, "second")
    if not is_category(value) or value <= 0:  # type: ignore[operator]
        msg = (
            "The second argument must be a valid category "
            f"(non null, positive integer). Input was: {_describe(value)}"
        )
        raise ValidationError(msg)
    return value  # type: ignore[return-value]


def _check_upper(kind: Kind, lower: Bound, value: object) -> Bound:
    if kind is Kind.DURATION:
        upper = coerce_duration(value, "third")
        below = total_seconds(upper) != 0 and total_seconds(upper) < total_seconds(lower)  # type: ignore[arg-type]
    else:
        if not is_category(value) or value < 0:  # type: ignore[operator]
            msg = (
                "The third argument must be a valid category "
                f"(positive integer, or 0 for no upper bound). Input was: {_describe(value)}"
            )
            raise ValidationError(msg)
        upper = value  # type: ignore[assignment]
        below = upper != 0 and upper < lower  # type: ignore[operator]

    if below:
        msg = (
            "The third argument must be greater than or equal to lower. "
            f"lower was ({_format_bound(lower)}) and upper was ({_format_bound(upper)})"
        )
        raise ValidationError(msg)
    return upper


def _format_bound(value: Bound) -> str:
    if is_category(value):
        return str(value)
    return format_duration(value)  # type: ignore[arg-type]


@dataclass(frozen=True, eq=False, repr=False)
class ConditionalPeriod:
    """A result duration selected by an inclusive interval condition.

    Attributes:
        kind: Bound kind, decides the comparison semantics.
        lower: Lower bound, included.
        upper: Upper bound, included. ``0`` means no upper bound.
        result: Duration returned when the period matches.
        id: Random debugging token, ``None`` when suppressed. Not part
            of equality or of the compact form.
    """

    kind: Kind
    lower: Bound
    upper: Bound
    result: CalendarDuration
    suppress_id: InitVar[bool] = False
    id: str | None = field(init=False, default=None)

    def __post_init__(self, suppress_id: bool) -> None:
        kind = _check_kind(self.kind)
        lower = _check_lower(kind, self.lower)
        upper = _check_upper(kind, lower, self.upper)
        result = coerce_duration(self.result, "fourth")

        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "lower", lower)
        object.__setattr__(self, "upper", upper)
        object.__setattr__(self, "result", result)
        object.__setattr__(self, "id", None if suppress_id else generate_period_id())

    # ------------------------------------------------------------------
    # Construction from positional arguments and compact strings
    # ------------------------------------------------------------------

    @classmethod
    def from_args(cls, *args: Any) -> Self:
        """Build a period from exactly four positional arguments.

        Raises:
            ValidationError: Wrong number of arguments, or an invalid field.
        """
        if len(args) != CONSTRUCTOR_ARITY:
            msg = (
                f"ConditionalPeriod must be instantiated with {CONSTRUCTOR_ARITY} "
                f"arguments. {len(args)} given."
            )
            raise ValidationError(msg)
        return cls(*args)

    @staticmethod
    def parse_to_array(text: str) -> list[str | int]:
        """Split a compact string into the four constructor arguments.

        Character 0 is the kind tag. Each bound ends at the next ``-``
        (consumed) or, failing that, at the next ``P`` (kept as the start
        of the following token). Both searches start one character past
        the cursor so a bound's own leading ``P`` is skipped. The result
        runs to the end of the string.

        Examples:
            >>> ConditionalPeriod.parse_to_array("C2-4P6D")
            ['C', 2, 4, 'P6D']
            >>> ConditionalPeriod.parse_to_array("DP2DP4DP6D")
            ['D', 'P2D', 'P4D', 'P6D']

        Raises:
            TypeError: *text* is not a string.
            FormatError: A bound or the result cannot be located.
        """
        if not isinstance(text, str):
            msg = (
                "Argument passed to parse_to_array() must be a string, "
                f"{type(text).__name__} given."
            )
            raise TypeError(msg)

        tokens: list[str | int] = [text[:1]]
        cursor = 1
        for position in (1, 2):
            delimiter = text.find("-", cursor + 1)
            if delimiter != -1:
                token = text[cursor:delimiter]
                cursor = delimiter + 1
            else:
                delimiter = text.find("P", cursor + 1)
                if delimiter == -1:
                    msg = f"Invalid string format: Can't find argument {position}. Given: {text}"
                    raise FormatError(msg)
                token = text[cursor:delimiter]
                cursor = delimiter
            tokens.append(int(token) if _INTEGER_TOKEN.fullmatch(token) else token)

        if cursor >= len(text):
            msg = f"Invalid string format: Can't find result. Given: {text}"
            raise FormatError(msg)
        tokens.append(text[cursor:])
        return tokens

    @classmethod
    def parse(cls, text: str) -> Self:
        """Build a period from its compact string form."""
        return cls(*cls.parse_to_array(text))

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    @property
    def is_unbounded(self) -> bool:
        """Whether the upper bound is the open-ended ``0`` sentinel."""
        if self.kind is Kind.CATEGORY:
            return self.upper == 0
        return total_seconds(self.upper) == 0  # type: ignore[arg-type]

    def match(self, value: int | CalendarDuration | str) -> bool:
        """Check whether *value* lies within the interval, both ends included.

        Category periods take an integer; duration periods take a
        duration or an ISO 8601 duration string.

        Raises:
            TypeError: *value* does not fit this period's kind.
            ValidationError: *value* is a string but not a valid duration.
        """
        if self.kind is Kind.CATEGORY:
            if not is_category(value):
                msg = (
                    "Only integers can be matched against a category period. "
                    f"Given: {_describe(value)}"
                )
                raise TypeError(msg)
            return self.lower <= value and (self.is_unbounded or value <= self.upper)  # type: ignore[operator]

        if isinstance(value, str):
            value = parse_duration(value)
        elif not is_duration(value):
            msg = (
                "Only durations (as object or ISO 8601 string) can be matched "
                f"against a duration period. Given: {_describe(value)}"
            )
            raise TypeError(msg)
        seconds = total_seconds(value)  # type: ignore[arg-type]
        if seconds < total_seconds(self.lower):  # type: ignore[arg-type]
            return False
        return self.is_unbounded or seconds <= total_seconds(self.upper)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Equality and copies
    # ------------------------------------------------------------------

    def _key(self) -> tuple[Kind, int, int, int]:
        if self.kind is Kind.CATEGORY:
            lower, upper = self.lower, self.upper
        else:
            lower = total_milliseconds(self.lower)  # type: ignore[arg-type]
            upper = total_milliseconds(self.upper)  # type: ignore[arg-type]
        return self.kind, lower, upper, total_milliseconds(self.result)  # type: ignore[return-value]

    def equals(self, other: ConditionalPeriod) -> bool:
        """Structural equality, ignoring ``id``.

        Raises:
            TypeError: *other* is not a ConditionalPeriod.
        """
        if not isinstance(other, ConditionalPeriod):
            msg = (
                "Only a ConditionalPeriod can be compared to a ConditionalPeriod. "
                f"Given: {type(other).__name__}"
            )
            raise TypeError(msg)
        return self._key() == other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConditionalPeriod):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def clone(self) -> Self:
        """Return an equal period with copied durations and a fresh ``id``."""
        return type(self)(self.kind, self.lower, self.upper, self.result)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        if self.kind is Kind.CATEGORY:
            bounds = f"{self.lower}-{self.upper}"
        else:
            bounds = format_duration(self.lower) + format_duration(self.upper)  # type: ignore[arg-type]
        return f"{self.kind.value}{bounds}{format_duration(self.result)}"

    def __repr__(self) -> str:
        return f"ConditionalPeriod({str(self)!r}, id={self.id!r})"

    def for_json(self) -> str:
        """Value a JSON encoder should emit for this period: its compact form."""
        return str(self)

    def to_json(self) -> str:
        """Serialize to a JSON string holding the compact form."""
        return json.dumps(self.for_json())
