"""Locate and read ``condperiod.toml``.

Lookup order: the file named by ``CONDPERIOD_CONFIG``, then the nearest
``condperiod.toml`` in the starting directory or one of its parents.
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from condperiod.config.models import CondperiodConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "condperiod.toml"
CONFIG_ENV_VAR = "CONDPERIOD_CONFIG"


def _candidates(start: Path) -> Iterator[Path]:
    here = start.resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A set ``CONDPERIOD_CONFIG`` always wins. When it names a missing
    file the result is ``None``; the walk-up is not attempted.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    return next((c for c in _candidates(start or Path.cwd()) if c.is_file()), None)


def read_toml(path: Path) -> dict[str, Any]:
    """Decode a TOML file.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
    """
    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(path: Path | None = None, cwd: Path | None = None) -> CondperiodConfig:
    """Validate the config at *path*, discovered from *cwd* when omitted.

    Without any file the code defaults apply.
    """
    path = path or find_config(cwd)
    if path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return CondperiodConfig()
    logger.debug("Reading config from %s", path)
    return CondperiodConfig.model_validate(read_toml(path))
