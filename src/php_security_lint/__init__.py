# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line-oriented scanner for insecure PHP function calls."""

from __future__ import annotations

from importlib import metadata

from .linter import SecurityLinter
from .models import LintResult, LintSummary, Violation
from .rules import RuleTable
from .severity import Severity, severity_for_function

__all__ = [
    "LintResult",
    "LintSummary",
    "RuleTable",
    "SecurityLinter",
    "Severity",
    "Violation",
    "__version__",
    "severity_for_function",
]

try:
    __version__ = metadata.version("php-security-lint")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
