# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point for php-security-lint."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from ..config import ConfigError, LinterSettings
from ..config_loader import load_settings
from ..linter import SecurityLinter
from ..logging import fail, info, warn
from ..reporting import (
    EXIT_FAILURE,
    OutputFormat,
    RenderOptions,
    exit_code_for,
    render_json,
    render_rules,
    render_table,
    render_text,
)
from ._lint_cli_models import (
    ADD_FUNCTION_OPTION,
    CONFIG_OPTION,
    EXCLUDE_FUNCTIONS_OPTION,
    EXCLUDE_OPTION,
    FORMAT_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    NO_PROGRESS_OPTION,
    PATH_ARGUMENT,
    STRICT_OPTION,
    VERBOSE_OPTION,
    LintCLIOptions,
    build_lint_options,
    build_overrides,
)

app = typer.Typer(
    name="php-security-lint",
    help="Lint PHP files for insecure functions like var_dump, exec and eval.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command("lint")
def lint_command(
    path: PATH_ARGUMENT,
    output_format: FORMAT_OPTION = OutputFormat.TEXT,
    exclude: EXCLUDE_OPTION = None,
    exclude_functions: EXCLUDE_FUNCTIONS_OPTION = None,
    add_function: ADD_FUNCTION_OPTION = None,
    strict: STRICT_OPTION = False,
    no_progress: NO_PROGRESS_OPTION = False,
    config: CONFIG_OPTION = None,
    no_emoji: NO_EMOJI_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    verbose: VERBOSE_OPTION = False,
) -> None:
    """Scan PHP files for potentially insecure functions.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = build_lint_options(
        path=path,
        output_format=output_format,
        exclude=exclude,
        exclude_functions=exclude_functions,
        add_function=add_function,
        strict=strict,
        no_progress=no_progress,
        config=config,
        no_emoji=no_emoji,
        no_color=no_color,
        verbose=verbose,
    )
    raise typer.Exit(code=_run_lint(options))


@app.command("rules")
def rules_command(
    exclude_functions: EXCLUDE_FUNCTIONS_OPTION = None,
    add_function: ADD_FUNCTION_OPTION = None,
    config: CONFIG_OPTION = None,
    no_emoji: NO_EMOJI_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
) -> None:
    """List the functions that will be checked and their severities."""

    overrides = build_overrides(
        exclude=None,
        exclude_functions=exclude_functions,
        add_function=add_function,
        strict=False,
    )
    settings = _load_settings(config, overrides)
    linter = SecurityLinter.from_settings(settings)
    render_rules(linter.get_active_functions(), RenderOptions(use_color=not no_color, use_emoji=not no_emoji))


def _run_lint(options: LintCLIOptions) -> int:
    """Execute a scan described by ``options`` and return the exit status."""

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = _load_settings(options.config, options.overrides)
    render_options = RenderOptions(
        use_color=options.use_color,
        use_emoji=options.use_emoji,
        show_progress=options.show_progress,
    )

    if not options.path.exists():
        fail(f"Path does not exist: {options.path}", use_emoji=options.use_emoji, use_color=options.use_color)
        return EXIT_FAILURE

    linter = SecurityLinter.from_settings(settings)
    if options.show_progress:
        if settings.exclude_functions:
            info(
                "Excluding functions from linting: " + ", ".join(settings.exclude_functions),
                use_emoji=options.use_emoji,
                use_color=options.use_color,
            )
        if not linter.get_active_functions():
            warn(
                "Every function is excluded; nothing will be reported.",
                use_emoji=options.use_emoji,
                use_color=options.use_color,
            )
        info(f"Scanning: {options.path}", use_emoji=options.use_emoji, use_color=options.use_color)

    result = linter.lint(options.path)

    if result.errors:
        for error in result.errors:
            fail(error, use_emoji=options.use_emoji, use_color=options.use_color)
        return EXIT_FAILURE

    if options.output_format is OutputFormat.JSON:
        typer.echo(render_json(result))
        return exit_code_for(result)
    if options.output_format is OutputFormat.TABLE:
        return render_table(result, render_options)
    return render_text(result, render_options)


def _load_settings(config: Path | None, overrides: dict[str, object]) -> LinterSettings:
    try:
        return load_settings(config, overrides=overrides)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


__all__ = ["app", "lint_command", "rules_command"]
