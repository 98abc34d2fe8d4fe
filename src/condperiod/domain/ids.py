"""Period identifiers.

Identifiers are opaque debugging tokens: 4 lowercase hex characters
drawn from a process-local random source. They never take part in
equality or in the compact form, and are regenerated on every parse
and clone.
"""

from __future__ import annotations

import re
import secrets

PERIOD_ID_LENGTH = 4

PERIOD_ID_PATTERN: re.Pattern[str] = re.compile(rf"^[0-9a-f]{{{PERIOD_ID_LENGTH}}}$")


def generate_period_id() -> str:
    """Return a fresh random period identifier."""
    return secrets.token_hex(PERIOD_ID_LENGTH // 2)


def validate_period_id(period_id: str) -> bool:
    """Check whether *period_id* looks like a generated identifier."""
    return PERIOD_ID_PATTERN.match(period_id) is not None
