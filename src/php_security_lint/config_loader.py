# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load :class:`LinterSettings` from TOML with command-line overrides."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import ConfigError, LinterSettings
from .constants import DEFAULT_CONFIG_FILENAME

LOGGER = logging.getLogger(__name__)


def load_toml(path: Path) -> dict[str, Any]:
    """Read ``path`` as a TOML table.

    Args:
        path: TOML document to parse.

    Returns:
        dict[str, Any]: Parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """

    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    LOGGER.debug("loaded configuration from %s", path)
    return data


def build_settings(data: Mapping[str, Any], *, source: str = "<memory>") -> LinterSettings:
    """Validate raw ``data`` into settings.

    Raises:
        ConfigError: If keys are unknown or values have the wrong type.
    """

    try:
        return LinterSettings.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def load_settings(
    config_path: Path | None = None,
    *,
    search_dir: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> LinterSettings:
    """Return settings layered as defaults, then file, then ``overrides``.

    An explicit ``config_path`` must exist. Without one, the default
    configuration file in ``search_dir`` (current directory by default) is
    used when present.

    Args:
        config_path: Explicit configuration file.
        search_dir: Directory searched for the default configuration file.
        overrides: Values taken from the command line; ``None`` entries are
            ignored.

    Returns:
        LinterSettings: Validated settings.

    Raises:
        ConfigError: If the explicit file is missing or any layer is invalid.
    """

    data: dict[str, Any] = {}
    source = "defaults"
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"Configuration file not found: {config_path}")
        data = load_toml(config_path)
        source = str(config_path)
    else:
        candidate = (search_dir or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        if candidate.is_file():
            data = load_toml(candidate)
            source = str(candidate)

    settings = build_settings(data, source=source)
    if not overrides:
        return settings
    merged = settings.model_dump()
    for key, value in overrides.items():
        if value is None:
            continue
        if key == "functions":
            merged["functions"] = {**merged["functions"], **value}
        else:
            merged[key] = value
    return build_settings(merged, source=f"{source} + command line")


__all__ = ["build_settings", "load_settings", "load_toml"]
