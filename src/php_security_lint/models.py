# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Violation records and the per-scan result accumulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .severity import Severity, severity_for_function


class Violation(BaseModel):
    """One call site of an insecure function at a file, line and column."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    function: str
    reason: str
    context: str

    @computed_field  # type: ignore[prop-decorator]
    @property
    def severity(self) -> Severity:
        """Return the severity derived from :attr:`function`."""
        return severity_for_function(self.function)

    @property
    def message(self) -> str:
        """Return a one-line human readable description of the violation."""
        return (
            f"Found insecure function '{self.function}' at "
            f"{self.file}:{self.line}:{self.column} - {self.reason}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible representation used by reports."""
        return self.model_dump(mode="json")


class LintSummary(BaseModel):
    """Counts reported at the end of a scan."""

    model_config = ConfigDict(frozen=True)

    files_scanned: int = 0
    files_with_violations: int = 0
    total_violations: int = 0
    total_errors: int = 0

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()


@dataclass
class LintResult:
    """Aggregated violations and errors collected by a single ``lint`` call."""

    _violations: list[Violation] = field(default_factory=list, init=False, repr=False)
    _errors: list[str] = field(default_factory=list, init=False, repr=False)
    _files_scanned: int = field(default=0, init=False)

    def add_violation(self, violation: Violation) -> None:
        """Record ``violation`` after every previously discovered one."""

        self._violations.append(violation)

    def add_error(self, error: str) -> None:
        """Record a path or file read diagnostic."""

        self._errors.append(error)

    def increment_files_scanned(self) -> None:
        self._files_scanned += 1

    @property
    def violations(self) -> tuple[Violation, ...]:
        return tuple(self._violations)

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    @property
    def files_scanned(self) -> int:
        return self._files_scanned

    @property
    def violation_count(self) -> int:
        return len(self._violations)

    @property
    def error_count(self) -> int:
        return len(self._errors)

    def has_issues(self) -> bool:
        """Return ``True`` when any violation or error was recorded."""

        return bool(self._violations or self._errors)

    def violations_by_file(self) -> dict[str, list[Violation]]:
        """Group violations by file, keeping the order files were first seen.

        Returns:
            dict[str, list[Violation]]: Violations keyed by their file path.
        """

        grouped: dict[str, list[Violation]] = {}
        for violation in self._violations:
            grouped.setdefault(violation.file, []).append(violation)
        return grouped

    def files_with_violations(self) -> list[str]:
        """Return distinct files containing violations in first-seen order."""

        return list(dict.fromkeys(violation.file for violation in self._violations))

    def summary(self) -> LintSummary:
        """Return the summary counts for this result."""

        return LintSummary(
            files_scanned=self._files_scanned,
            files_with_violations=len(self.files_with_violations()),
            total_violations=self.violation_count,
            total_errors=self.error_count,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the report payload consumed by the JSON renderer."""

        return {
            "summary": self.summary().to_dict(),
            "violations": [violation.to_dict() for violation in self._violations],
            "errors": list(self._errors),
        }


__all__ = ["LintResult", "LintSummary", "Violation"]
