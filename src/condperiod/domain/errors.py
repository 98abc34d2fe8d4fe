"""Domain error hierarchy.

Messages carry stable prefixes so callers can match on them.
Shape mismatches between a value and its receiver raise the builtin
``TypeError`` instead.
"""

from __future__ import annotations


class ConditionalError(Exception):
    """Base class for errors raised by condperiod."""


class ValidationError(ConditionalError, ValueError):
    """A period field violates its kind-specific contract."""


class FormatError(ConditionalError, ValueError):
    """The compact string grammar could not be matched."""
