"""ConditionalCollection — an ordered rule set of conditional periods.

Insertion order is lookup priority: :meth:`ConditionalCollection.find`
returns the first period matching a value. All periods of a collection
share one :class:`~condperiod.domain.types.Kind`.

The collection only grows. ``push`` is its single mutator; there is no
removal.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from typing import Self

from condperiod.domain.durations import CalendarDuration, is_duration, parse_duration
from condperiod.domain.period import ConditionalPeriod, is_category
from condperiod.domain.types import Kind

PERIOD_SEPARATOR = ","


def _coerce_period(value: ConditionalPeriod | str) -> ConditionalPeriod:
    """Turn a period or its compact string into a period."""
    if isinstance(value, str):
        return ConditionalPeriod.parse(value)
    if not isinstance(value, ConditionalPeriod):
        msg = (
            "Only ConditionalPeriod (as object or string form) can be stored. "
            f"Given: {type(value).__name__}"
        )
        raise TypeError(msg)
    return value


class ConditionalCollection:
    """Ordered, kind-homogeneous sequence of :class:`ConditionalPeriod`."""

    __slots__ = ("_periods",)

    def __init__(self) -> None:
        self._periods: list[ConditionalPeriod] = []

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def create(cls, value: ConditionalPeriod | str) -> Self:
        """Build a collection holding a single period."""
        return cls().push(value)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Build a collection from its comma-joined compact form.

        Blank text gives an empty collection, the inverse of
        ``str(ConditionalCollection())``.

        Raises:
            TypeError: *text* is not a string.
            FormatError: A segment does not follow the compact grammar.
        """
        if not isinstance(text, str):
            msg = f"First argument of parse() must be a string. {type(text).__name__} given."
            raise TypeError(msg)

        collection = cls()
        if not text.strip():
            return collection
        for segment in text.split(PERIOD_SEPARATOR):
            collection.push(ConditionalPeriod.parse(segment.strip()))
        return collection

    @classmethod
    def from_array(cls, items: Sequence[ConditionalPeriod | str]) -> Self:
        """Build a collection from periods and/or their compact strings.

        Raises:
            TypeError: *items* is not a list or tuple, or holds an element
                that is neither a period nor a string.
        """
        if not isinstance(items, (list, tuple)):
            msg = f"First argument of from_array() must be a list. {type(items).__name__} given."
            raise TypeError(msg)

        collection = cls()
        for position, item in enumerate(items):
            if not isinstance(item, (ConditionalPeriod, str)):
                msg = (
                    "First argument of from_array() must only contain ConditionalPeriod "
                    f"or its string form. {type(item).__name__} given at position {position}."
                )
                raise TypeError(msg)
            collection.push(item)
        return collection

    @classmethod
    def from_json(cls, text: str) -> Self:
        """Build a collection from a JSON array of compact strings.

        Raises:
            TypeError: *text* is not a string, or does not hold an array.
            json.JSONDecodeError: *text* is not valid JSON.
        """
        if not isinstance(text, str):
            msg = f"First argument of from_json() must be a string. {type(text).__name__} given."
            raise TypeError(msg)
        return cls.from_array(json.loads(text))

    # ------------------------------------------------------------------
    # Mutation and lookup
    # ------------------------------------------------------------------

    @property
    def kind(self) -> Kind | None:
        """Kind shared by every stored period, ``None`` while empty."""
        return self._periods[0].kind if self._periods else None

    def push(self, value: ConditionalPeriod | str, index: int | None = None) -> Self:
        """Insert a period at *index* (append by default) and return self.

        Raises:
            TypeError: *value* is not a period or compact string, or its
                kind differs from the periods already stored.
            FormatError: *value* is a malformed compact string.
        """
        period = _coerce_period(value)

        if self._periods and period.kind is not self.kind:
            msg = (
                "The ConditionalPeriod set must have the same kind as all the periods "
                f"stored. Expected: Kind.{self.kind.name}, given: Kind.{period.kind.name}"  # type: ignore[union-attr]
            )
            raise TypeError(msg)

        if index is None:
            self._periods.append(period)
        else:
            self._periods.insert(index, period)
        return self

    def find(self, value: int | CalendarDuration | str) -> ConditionalPeriod | None:
        """Return the first period matching *value*, or ``None``.

        Raises:
            TypeError: *value* is neither an integer, a duration nor a string,
                or does not fit the kind of the stored periods.
            ValidationError: *value* is a string but not a valid duration.
        """
        if isinstance(value, str):
            value = parse_duration(value)
        elif not is_category(value) and not is_duration(value):
            msg = (
                "Only durations (as object or ISO 8601 string) or integers can be found. "
                f"Given: {type(value).__name__}"
            )
            raise TypeError(msg)

        for period in self._periods:
            if period.match(value):
                return period
        return None

    # ------------------------------------------------------------------
    # Read-only container protocol
    # ------------------------------------------------------------------

    @property
    def periods(self) -> tuple[ConditionalPeriod, ...]:
        """Snapshot of the stored periods, in order."""
        return tuple(self._periods)

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[ConditionalPeriod]:
        return iter(tuple(self._periods))

    def __getitem__(self, index: int) -> ConditionalPeriod:
        return self._periods[index]

    # ------------------------------------------------------------------
    # Equality and copies
    # ------------------------------------------------------------------

    def equals(self, other: ConditionalCollection) -> bool:
        """Pairwise period equality over the full ordered sequence.

        Raises:
            TypeError: *other* is not a ConditionalCollection.
        """
        if not isinstance(other, ConditionalCollection):
            msg = (
                "Only a ConditionalCollection can be compared to a ConditionalCollection. "
                f"Given: {type(other).__name__}"
            )
            raise TypeError(msg)
        return self._periods == other._periods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConditionalCollection):
            return NotImplemented
        return self._periods == other._periods

    __hash__ = None  # type: ignore[assignment]

    def clone(self) -> Self:
        """Return a new collection holding clones of every period."""
        collection = type(self)()
        collection._periods = [period.clone() for period in self._periods]
        return collection

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_array(self) -> list[str]:
        """Compact forms of the stored periods, in order."""
        return [str(period) for period in self._periods]

    def to_json(self) -> str:
        """Serialize to a JSON array of compact forms."""
        return json.dumps(self.to_array())

    def __str__(self) -> str:
        return PERIOD_SEPARATOR.join(self.to_array())

    def __repr__(self) -> str:
        return f"ConditionalCollection({str(self)!r})"
