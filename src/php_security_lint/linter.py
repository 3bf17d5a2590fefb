# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Facade owning linter configuration and running scans."""

from __future__ import annotations

import os
from collections.abc import Iterable

from .config import LinterSettings
from .constants import DEFAULT_EXCLUDE_PATTERNS
from .discovery import FileWalker
from .filters import PathFilter
from .models import LintResult
from .rules import RuleTable


class SecurityLinter:
    """Scan PHP sources for calls to configured insecure functions.

    Configuration setters take effect on the next :meth:`lint` call; results
    already returned are independent snapshots.
    """

    def __init__(self, rules: RuleTable | None = None) -> None:
        self._rules = rules.copy() if rules is not None else RuleTable()
        self._exclude_patterns: list[str] = list(DEFAULT_EXCLUDE_PATTERNS)
        self._excluded_functions: frozenset[str] = frozenset()
        self._strict_mode = False

    @classmethod
    def from_settings(cls, settings: LinterSettings) -> SecurityLinter:
        """Build a linter configured from ``settings``.

        Removals are applied before custom additions, so a function listed in
        both ends up with the custom reason.
        """

        linter = cls()
        for name in settings.remove_functions:
            linter.remove_insecure_function(name)
        for name, reason in settings.functions.items():
            linter.add_insecure_function(name, reason)
        linter.set_exclude_patterns(settings.exclude)
        linter.set_excluded_functions(settings.exclude_functions)
        linter.set_strict_mode(settings.strict)
        return linter

    def set_exclude_patterns(self, patterns: Iterable[str]) -> None:
        """Replace the path exclude patterns used for directory scans."""

        self._exclude_patterns = list(patterns)

    def set_excluded_functions(self, functions: Iterable[str]) -> None:
        """Skip ``functions`` (case-insensitively) without removing their rules."""

        self._excluded_functions = frozenset(name.lower() for name in functions)

    def set_strict_mode(self, strict: bool) -> None:
        self._strict_mode = strict

    def add_insecure_function(self, function: str, reason: str) -> None:
        self._rules.add(function, reason)

    def remove_insecure_function(self, function: str) -> None:
        self._rules.remove(function)

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        return tuple(self._exclude_patterns)

    @property
    def excluded_functions(self) -> frozenset[str]:
        return self._excluded_functions

    @property
    def strict_mode(self) -> bool:
        return self._strict_mode

    def get_active_functions(self) -> dict[str, str]:
        """Return the rules that will be matched, minus excluded functions."""

        return self._rules.active_rules(self._excluded_functions)

    def lint(self, path: str | os.PathLike[str]) -> LintResult:
        """Scan ``path`` (file or directory) and return a new result.

        Args:
            path: File or directory to scan.

        Returns:
            LintResult: Result populated by a fresh :class:`FileWalker`.
        """

        walker = FileWalker(
            rules=self.get_active_functions(),
            path_filter=PathFilter.from_patterns(self._exclude_patterns),
        )
        return walker.walk(path)


__all__ = ["SecurityLinter"]
