# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console status messages for the command line.

These helpers are for people reading the terminal. Diagnostic tracing goes
through the standard :mod:`logging` module instead.
"""

from __future__ import annotations

from typing import Final

from rich.rule import Rule
from rich.text import Text

from .console import get_console, stdout_is_terminal

# level -> (emoji prefix, style)
_LEVELS: Final[dict[str, tuple[str, str]]] = {
    "info": ("ℹ️ ", "cyan"),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}


def _emit(level: str, msg: str, use_emoji: bool, use_color: bool | None) -> None:
    prefix, style = _LEVELS[level]
    color = stdout_is_terminal() if use_color is None else use_color
    text = Text(f"{prefix if use_emoji else ''}{msg}", style=style if color else "")
    get_console(color=color, emoji=use_emoji).print(text)


def section(title: str, *, use_color: bool) -> None:
    """Print a heading that separates one block of output from the next.

    Args:
        title: Heading text.
        use_color: Draw a Rich rule when colour is enabled on a terminal,
            otherwise fall back to a plain ``--- title ---`` line.
    """

    console = get_console(color=use_color, emoji=True)
    if use_color and stdout_is_terminal():
        console.print()
        console.print(Rule(Text(title)))
    else:
        console.print(f"\n--- {title} ---", markup=False)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an informational message."""

    _emit("info", msg, use_emoji, use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit("ok", msg, use_emoji, use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    _emit("warn", msg, use_emoji, use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print an error message."""

    _emit("fail", msg, use_emoji, use_color)


__all__ = ["fail", "info", "ok", "section", "warn"]
