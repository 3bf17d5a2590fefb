# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the security linter."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_EXCLUDE_PATTERNS


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LinterSettings(BaseModel):
    """Declarative linter configuration loaded from TOML or the command line."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    exclude_functions: list[str] = Field(default_factory=list)
    remove_functions: list[str] = Field(default_factory=list)
    functions: dict[str, str] = Field(default_factory=dict)
    strict: bool = False

    @field_validator("functions")
    @classmethod
    def _reject_blank_names(cls, value: dict[str, str]) -> dict[str, str]:
        """Refuse empty function names, which would match every call."""
        for name in value:
            if not name.strip():
                raise ValueError("function names must not be blank")
        return value


__all__ = ["ConfigError", "LinterSettings"]
