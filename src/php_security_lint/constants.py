# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in rule tables, severity membership and traversal defaults."""

from __future__ import annotations

from typing import Final

_DEBUG_REASON: Final[str] = "Debug function that should not be used in production"
_OUTPUT_REASON: Final[str] = "Output function - ensure proper escaping when outputting user data"

# Insertion order is the rule order used when reporting several hits on one line.
DEFAULT_INSECURE_FUNCTIONS: Final[dict[str, str]] = {
    # Debug functions
    "var_dump": _DEBUG_REASON,
    "print_r": _DEBUG_REASON,
    "var_export": _DEBUG_REASON,
    "debug_print_backtrace": _DEBUG_REASON,
    "debug_backtrace": _DEBUG_REASON,
    "phpinfo": "Information disclosure function that should not be used in production",
    # Execution functions
    "unserialize": "Potentially dangerous function - use with caution",
    "eval": "Dangerous function - can execute arbitrary code",
    "exec": "Dangerous function - can execute shell commands",
    "shell_exec": "Dangerous function - can execute shell commands",
    "system": "Dangerous function - can execute system commands",
    "passthru": "Dangerous function - can execute system commands",
    # Database functions
    "mysql_query": "Deprecated MySQL function - use prepared statements instead",
    "mysqli_query": "Raw query function - ensure proper sanitization or use prepared statements",
    # Output functions
    "echo": _OUTPUT_REASON,
    "print": _OUTPUT_REASON,
    "printf": _OUTPUT_REASON,
}

HIGH_RISK_FUNCTIONS: Final[frozenset[str]] = frozenset(
    {"eval", "exec", "shell_exec", "system", "passthru", "unserialize"},
)
MEDIUM_RISK_FUNCTIONS: Final[frozenset[str]] = frozenset(
    {"var_dump", "print_r", "phpinfo", "debug_print_backtrace"},
)

DEFAULT_EXCLUDE_PATTERNS: Final[tuple[str, ...]] = ("vendor", "node_modules", "tests", "test")

VCS_DIRECTORIES: Final[frozenset[str]] = frozenset(
    {".git", ".svn", ".hg", ".bzr", "_darcs", "CVS", ".arch-params", ".monotone"},
)

SOURCE_SUFFIX: Final[str] = ".php"

COMMENT_PREFIXES: Final[tuple[str, ...]] = ("//", "/*", "*")

DEFAULT_CONFIG_FILENAME: Final[str] = ".php-security-lint.toml"

__all__ = [
    "COMMENT_PREFIXES",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_EXCLUDE_PATTERNS",
    "DEFAULT_INSECURE_FUNCTIONS",
    "HIGH_RISK_FUNCTIONS",
    "MEDIUM_RISK_FUNCTIONS",
    "SOURCE_SUFFIX",
    "VCS_DIRECTORIES",
]
