# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared Rich console used by the reporters and console helpers."""

from __future__ import annotations

import sys
from functools import lru_cache

from rich.console import Console


def stdout_is_terminal() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


def get_console(*, color: bool, emoji: bool) -> Console:
    """Return the console for the given output preferences.

    Colour is only emitted when requested and stdout is a terminal, so piped
    output and ``--no-color`` both produce plain text.
    """

    return _console_for(color and stdout_is_terminal(), emoji)


@lru_cache(maxsize=8)
def _console_for(styled: bool, emoji: bool) -> Console:
    return Console(
        color_system="auto" if styled else None,
        force_terminal=styled,
        no_color=not styled,
        emoji=emoji,
        soft_wrap=True,
    )


__all__ = ["get_console", "stdout_is_terminal"]
