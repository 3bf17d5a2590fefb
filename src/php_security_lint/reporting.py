# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render lint results as text, JSON or a table."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Final

from rich import box
from rich.table import Table
from rich.text import Text

from .console import get_console
from .logging import info, ok, section
from .models import LintResult
from .severity import SEVERITY_ICONS, Severity, severity_for_function

EXIT_SUCCESS: Final[int] = 0
EXIT_FAILURE: Final[int] = 1


class OutputFormat(str, Enum):
    """Supported report formats."""

    TEXT = "text"
    JSON = "json"
    TABLE = "table"


@dataclass(slots=True)
class RenderOptions:
    """Presentation flags shared by every renderer."""

    use_color: bool = True
    use_emoji: bool = True
    show_progress: bool = True


def exit_code_for(result: LintResult) -> int:
    """Return the process status for ``result``: failure on any issue."""

    return EXIT_FAILURE if result.has_issues() else EXIT_SUCCESS


def render_json(result: LintResult) -> str:
    """Return the JSON document for ``result``.

    Slashes are left unescaped and non-ASCII context text is kept verbatim.
    """

    return json.dumps(result.to_dict(), indent=4, ensure_ascii=False)


def render_text(result: LintResult, options: RenderOptions) -> int:
    """Print violations grouped by file followed by the summary.

    Args:
        result: Completed lint result.
        options: Presentation flags.

    Returns:
        int: Exit status for the command.
    """

    if not result.violations:
        if options.show_progress:
            ok("No security violations found!", use_emoji=options.use_emoji, use_color=options.use_color)
            info(
                f"Files scanned: {result.files_scanned}",
                use_emoji=options.use_emoji,
                use_color=options.use_color,
            )
        return EXIT_SUCCESS

    console = get_console(color=options.use_color, emoji=options.use_emoji)
    for file, violations in result.violations_by_file().items():
        section(f"File: {file}", use_color=options.use_color)
        for violation in violations:
            icon = SEVERITY_ICONS[violation.severity] if options.use_emoji else f"[{violation.severity.value}]"
            line = Text(f"  {icon} ")
            line.append(f"Line {violation.line}:{violation.column}", style="yellow" if options.use_color else None)
            line.append(" - ")
            line.append(f"{violation.function}()", style="red" if options.use_color else None)
            line.append(f" - {violation.reason}")
            console.print(line)
            console.print(Text(f"    Context: {violation.context}", style="bright_black" if options.use_color else ""))

    console.print()
    console.print(_summary_table(result.summary().to_dict(), options))
    return EXIT_FAILURE


def render_table(result: LintResult, options: RenderOptions) -> int:
    """Print one table row per violation followed by a one-line summary."""

    if not result.violations:
        ok("No security violations found!", use_emoji=options.use_emoji, use_color=options.use_color)
        return EXIT_SUCCESS

    console = get_console(color=options.use_color, emoji=options.use_emoji)
    table = Table(box=box.SQUARE if options.use_color else box.ASCII, expand=False)
    for header in ("File", "Line", "Function", "Severity"):
        table.add_column(header, no_wrap=True)
    table.add_column("Reason", overflow="fold")
    for violation in result.violations:
        table.add_row(
            PurePath(violation.file).name,
            str(violation.line),
            violation.function,
            Text(violation.severity.value.upper(), style=_severity_style(violation.severity, options)),
            violation.reason,
        )
    console.print(table)
    summary = result.summary()
    info(
        f"Summary: {summary.total_violations} violations in {summary.files_with_violations} files",
        use_emoji=options.use_emoji,
        use_color=options.use_color,
    )
    return EXIT_FAILURE


def render_rules(rules: Mapping[str, str], options: RenderOptions) -> None:
    """Print the active rule table with derived severities."""

    console = get_console(color=options.use_color, emoji=options.use_emoji)
    table = Table(box=box.SQUARE if options.use_color else box.ASCII, expand=False)
    table.add_column("Function", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Reason", overflow="fold")
    for name, reason in rules.items():
        severity = severity_for_function(name)
        table.add_row(name, Text(severity.value.upper(), style=_severity_style(severity, options)), reason)
    console.print(table)


def _summary_table(summary: Mapping[str, int], options: RenderOptions) -> Table:
    table = Table(show_header=False, box=box.SIMPLE, pad_edge=False, expand=False)
    label_style = "yellow" if options.use_color else None
    table.add_column(style=label_style, justify="left", no_wrap=True)
    table.add_column(justify="right", no_wrap=True)
    table.add_row("Files scanned", str(summary["files_scanned"]))
    table.add_row("Files with violations", str(summary["files_with_violations"]))
    table.add_row("Total violations", str(summary["total_violations"]))
    return table


_SEVERITY_STYLES: Final[dict[Severity, str]] = {
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "cyan",
}


def _severity_style(severity: Severity, options: RenderOptions) -> str:
    return _SEVERITY_STYLES[severity] if options.use_color else ""


__all__ = [
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "OutputFormat",
    "RenderOptions",
    "exit_code_for",
    "render_json",
    "render_rules",
    "render_table",
    "render_text",
]
