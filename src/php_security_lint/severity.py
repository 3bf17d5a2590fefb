# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final

from .constants import HIGH_RISK_FUNCTIONS, MEDIUM_RISK_FUNCTIONS


class Severity(str, Enum):
    """Risk level attached to an insecure function call."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


SEVERITY_ICONS: Final[dict[Severity, str]] = {
    Severity.HIGH: "🔴",
    Severity.MEDIUM: "🟡",
    Severity.LOW: "🔵",
}


def severity_for_function(function: str) -> Severity:
    """Classify ``function`` using the fixed high and medium membership lists.

    Args:
        function: Function name exactly as reported by the scanner.

    Returns:
        Severity: ``HIGH`` or ``MEDIUM`` for listed names, ``LOW`` otherwise.
    """

    if function in HIGH_RISK_FUNCTIONS:
        return Severity.HIGH
    if function in MEDIUM_RISK_FUNCTIONS:
        return Severity.MEDIUM
    return Severity.LOW


__all__ = ["SEVERITY_ICONS", "Severity", "severity_for_function"]
