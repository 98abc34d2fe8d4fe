"""condperiod — tiered rules mapping categories or durations to result durations."""

from __future__ import annotations

from condperiod.domain.collection import ConditionalCollection
from condperiod.domain.errors import ConditionalError, FormatError, ValidationError
from condperiod.domain.period import ConditionalPeriod
from condperiod.domain.types import Kind

__version__ = "0.1.0"

__all__ = [
    "ConditionalCollection",
    "ConditionalError",
    "ConditionalPeriod",
    "FormatError",
    "Kind",
    "ValidationError",
    "__version__",
]
