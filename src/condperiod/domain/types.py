"""Period kinds.

The kind decides which comparison semantics apply to a period's bounds:
integer categories or calendar durations. Each value doubles as the
kind tag of the compact string form.
"""

from __future__ import annotations

from enum import StrEnum


class Kind(StrEnum):
    """Bound kind of a conditional period."""

    CATEGORY = "C"
    DURATION = "D"
