"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, condperiod.toml only contains
overrides. A typical file needs only ``[rules] table``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from condperiod.domain.collection import ConditionalCollection
from condperiod.domain.types import Kind


class RulesConfig(BaseModel):
    """[rules] section."""

    model_config = {"frozen": True}

    table: str = ""
    kind: Kind | None = None

    @model_validator(mode="after")
    def _check_table(self) -> RulesConfig:
        """Reject a table that does not parse, or parses to the wrong kind."""
        if not self.table:
            return self
        try:
            collection = ConditionalCollection.parse(self.table)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc
        if self.kind is not None and collection.kind is not self.kind:
            msg = f"[rules] table holds {collection.kind!r} periods, expected {self.kind!r}"
            raise ValueError(msg)
        return self


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True, "populate_by_name": True}

    json_output: bool = Field(default=False, alias="json")


class CondperiodConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    rules: RulesConfig = Field(default_factory=RulesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
