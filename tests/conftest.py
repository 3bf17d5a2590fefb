# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from php_security_lint import SecurityLinter

WritePhp = Callable[[str, str], Path]


@pytest.fixture
def linter() -> SecurityLinter:
    """Return a linter with the built-in configuration."""
    return SecurityLinter()


@pytest.fixture
def write_php(tmp_path: Path) -> WritePhp:
    """Return a helper writing ``content`` to ``name`` beneath ``tmp_path``."""

    def _write(name: str, content: str) -> Path:
        target = tmp_path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write
