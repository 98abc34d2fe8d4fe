"""CondperiodSettings — one frozen object for every configuration layer.

Highest priority first:

1. keyword arguments, i.e. the CLI flags handed over by Click;
2. ``CONDPERIOD_*`` environment variables (``__`` reaches into sections,
   e.g. ``CONDPERIOD_RULES__TABLE``);
3. the ``condperiod.toml`` located by :func:`~condperiod.config.discovery.find_config`;
4. defaults baked into :mod:`condperiod.config.models`.
"""

from __future__ import annotations

import threading
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from condperiod.config.discovery import find_config, read_toml
from condperiod.config.models import OutputConfig, RulesConfig

# pydantic-settings builds sources from a classmethod, so the TOML path
# travels through thread-local state for the duration of one construction.
_pending = threading.local()


@contextmanager
def _toml_path(path: Path | None) -> Iterator[None]:
    _pending.path = path
    try:
        yield
    finally:
        _pending.path = None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML file (or nothing)."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._path = path
        self._data: dict[str, Any] = self._read(path) if path else {}

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            return read_toml(path)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class CondperiodSettings(BaseSettings):
    """Resolved settings for one condperiod invocation.

    Attributes:
        config_path: The TOML file that was read, ``None`` without one.
        json_output: ``--json`` flag.
        verbose: ``-v`` flag, also enables debug logging.
        log_json: ``--log-json`` flag.
        rules: ``[rules]`` section.
        output: ``[output]`` section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CONDPERIOD_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    rules: RulesConfig = Field(default_factory=RulesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def wants_json(self) -> bool:
        """``--json`` was passed or ``[output] json`` is set."""
        return self.json_output or self.output.json_output

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> CondperiodSettings:
        """Resolve settings for a CLI run.

        *config_path* (``-c``) replaces discovery; a path that is not a
        file is ignored. Otherwise ``condperiod.toml`` is searched upwards
        from *cwd*.

        Raises:
            click.ClickException: The TOML file does not parse.
            pydantic.ValidationError: A value fails validation.
        """
        if config_path:
            explicit = Path(config_path)
            toml = explicit if explicit.is_file() else None
        else:
            toml = find_config(cwd)

        with _toml_path(toml):
            return cls(config_path=toml, **cli_flags)
