# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Option declarations and normalisation for the lint and rules commands."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer

from ..reporting import OutputFormat

PATH_ARGUMENT = Annotated[
    Path,
    typer.Argument(metavar="PATH", help="Path to file or directory to scan."),
]
FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", case_sensitive=False, help="Output format (text, json, table)."),
]
EXCLUDE_OPTION = Annotated[
    list[str] | None,
    typer.Option("--exclude", help="Exclude path patterns (e.g. vendor, tests). Replaces the defaults."),
]
EXCLUDE_FUNCTIONS_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--exclude-functions",
        "-e",
        help="Disable linting for specific functions (e.g. var_dump, print_r).",
    ),
]
ADD_FUNCTION_OPTION = Annotated[
    list[str] | None,
    typer.Option("--add-function", metavar="NAME=REASON", help="Flag an additional function."),
]
STRICT_OPTION = Annotated[
    bool,
    typer.Option("--strict", "-s", help="Strict mode - treat all findings as errors."),
]
NO_PROGRESS_OPTION = Annotated[
    bool,
    typer.Option("--no-progress", help="Disable progress output."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Configuration file (defaults to .php-security-lint.toml)."),
]
NO_EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--no-emoji", help="Disable emoji in output."),
]
NO_COLOR_OPTION = Annotated[
    bool,
    typer.Option("--no-color", help="Disable coloured output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log traversal details to stderr."),
]


@dataclass(slots=True)
class LintCLIOptions:
    """Normalised CLI inputs for the lint command."""

    path: Path
    output_format: OutputFormat
    config: Path | None
    overrides: dict[str, Any]
    show_progress: bool
    use_emoji: bool
    use_color: bool
    verbose: bool


def parse_function_definitions(values: Sequence[str] | None) -> dict[str, str] | None:
    """Parse ``NAME=REASON`` pairs into a mapping.

    Raises:
        typer.BadParameter: If an entry lacks ``=`` or has an empty name.
    """

    if not values:
        return None
    functions: dict[str, str] = {}
    for value in values:
        name, separator, reason = value.partition("=")
        name = name.strip()
        if not separator or not name:
            raise typer.BadParameter(f"expected NAME=REASON, got '{value}'", param_hint="--add-function")
        functions[name] = reason.strip() or "Custom insecure function"
    return functions


def build_overrides(
    *,
    exclude: Sequence[str] | None,
    exclude_functions: Sequence[str] | None,
    add_function: Sequence[str] | None,
    strict: bool,
) -> dict[str, Any]:
    """Return settings overrides for values actually given on the command line."""

    return {
        "exclude": list(exclude) if exclude else None,
        "exclude_functions": list(exclude_functions) if exclude_functions else None,
        "functions": parse_function_definitions(add_function),
        "strict": True if strict else None,
    }


def build_lint_options(
    *,
    path: Path,
    output_format: OutputFormat,
    exclude: Sequence[str] | None,
    exclude_functions: Sequence[str] | None,
    add_function: Sequence[str] | None,
    strict: bool,
    no_progress: bool,
    config: Path | None,
    no_emoji: bool,
    no_color: bool,
    verbose: bool,
) -> LintCLIOptions:
    """Construct :class:`LintCLIOptions` from Typer parameters."""

    return LintCLIOptions(
        path=path.expanduser(),
        output_format=output_format,
        config=config.expanduser() if config else None,
        overrides=build_overrides(
            exclude=exclude,
            exclude_functions=exclude_functions,
            add_function=add_function,
            strict=strict,
        ),
        show_progress=not no_progress and output_format is not OutputFormat.JSON,
        use_emoji=not no_emoji,
        use_color=not no_color,
        verbose=verbose,
    )


__all__ = [
    "ADD_FUNCTION_OPTION",
    "CONFIG_OPTION",
    "EXCLUDE_FUNCTIONS_OPTION",
    "EXCLUDE_OPTION",
    "FORMAT_OPTION",
    "LintCLIOptions",
    "NO_COLOR_OPTION",
    "NO_EMOJI_OPTION",
    "NO_PROGRESS_OPTION",
    "PATH_ARGUMENT",
    "STRICT_OPTION",
    "VERBOSE_OPTION",
    "build_lint_options",
    "build_overrides",
    "parse_function_definitions",
]
