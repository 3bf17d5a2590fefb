# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Per-line matching of insecure function calls."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache

from .constants import COMMENT_PREFIXES
from .models import Violation

_PATTERN_CACHE_SIZE = 512


def is_comment_line(line: str) -> bool:
    """Return ``True`` when ``line`` looks like a single-line comment.

    Only the start of the line is inspected; block comments spanning several
    lines are not tracked, and a line starting with ``*`` is always treated as
    a comment continuation.

    Args:
        line: Raw source line.

    Returns:
        bool: ``True`` when the line starts with ``//``, ``/*`` or ``*`` after
        leading whitespace.
    """

    return line.lstrip().startswith(COMMENT_PREFIXES)


@lru_cache(maxsize=_PATTERN_CACHE_SIZE)
def call_pattern(function: str) -> re.Pattern[str]:
    """Return the compiled pattern matching a call to ``function``.

    Word boundaries and whitespace are ASCII-only, so a non-ASCII letter
    before the name still counts as a boundary.
    """

    return re.compile(rf"\b{re.escape(function)}\s*\(", re.ASCII)


@dataclass(frozen=True, slots=True)
class LineScanner:
    """Match one line at a time against an active rule mapping."""

    rules: Mapping[str, str]

    def scan_line(self, file: str, line_number: int, line: str) -> list[Violation]:
        """Return every violation found on ``line``.

        Args:
            file: Path reported with each violation.
            line_number: 1-based line number.
            line: Raw line text.

        Returns:
            list[Violation]: Violations ordered by rule, then by column.
        """

        return scan_line(file, line_number, line, self.rules)

    def scan_text(self, file: str, text: str) -> Iterator[Violation]:
        """Yield violations for every line of ``text`` split on ``\\n``."""

        for index, line in enumerate(text.split("\n"), start=1):
            yield from scan_line(file, index, line, self.rules)


def scan_line(file: str, line_number: int, line: str, rules: Mapping[str, str]) -> list[Violation]:
    """Match ``line`` against ``rules`` and build violations for each hit.

    Args:
        file: Path reported with each violation.
        line_number: 1-based line number.
        line: Raw line text.
        rules: Ordered mapping of function name to reason.

    Returns:
        list[Violation]: Violations ordered by rule, then by column.
    """

    if is_comment_line(line):
        return []
    violations: list[Violation] = []
    context = line.strip()
    for function, reason in rules.items():
        for match in call_pattern(function).finditer(line):
            violations.append(
                Violation(
                    file=file,
                    line=line_number,
                    column=match.start() + 1,
                    function=function,
                    reason=reason,
                    context=context,
                ),
            )
    return violations


__all__ = ["LineScanner", "call_pattern", "is_comment_line", "scan_line"]
