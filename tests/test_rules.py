# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the rule table and severity classification."""

from __future__ import annotations

import pytest

from php_security_lint.constants import DEFAULT_INSECURE_FUNCTIONS
from php_security_lint.rules import RuleTable
from php_security_lint.severity import Severity, severity_for_function


def test_default_table_order_and_size() -> None:
    table = RuleTable()
    assert list(table) == [
        "var_dump",
        "print_r",
        "var_export",
        "debug_print_backtrace",
        "debug_backtrace",
        "phpinfo",
        "unserialize",
        "eval",
        "exec",
        "shell_exec",
        "system",
        "passthru",
        "mysql_query",
        "mysqli_query",
        "echo",
        "print",
        "printf",
    ]
    assert table.entries["eval"] == "Dangerous function - can execute arbitrary code"


def test_tables_do_not_share_state() -> None:
    first = RuleTable()
    second = RuleTable()
    first.add("my_debug", "Custom")
    first.remove("eval")

    assert "my_debug" not in second
    assert "eval" in second
    assert "eval" in DEFAULT_INSECURE_FUNCTIONS


def test_add_overwrites_and_remove_is_silent() -> None:
    table = RuleTable()
    table.add("eval", "Overridden")
    table.remove("does_not_exist")

    assert table.entries["eval"] == "Overridden"
    assert len(table) == len(DEFAULT_INSECURE_FUNCTIONS)


def test_active_rules_excludes_case_folded_names() -> None:
    table = RuleTable()
    table.add("My_Debug", "Custom")

    active = table.active_rules({"var_dump", "my_debug"})

    assert "var_dump" not in active
    assert "My_Debug" not in active
    assert "print_r" in active
    assert "var_dump" in table


def test_active_rules_returns_copy() -> None:
    table = RuleTable()
    active = table.active_rules()
    active.pop("eval")
    assert "eval" in table


@pytest.mark.parametrize(
    ("function", "expected"),
    [
        ("eval", Severity.HIGH),
        ("unserialize", Severity.HIGH),
        ("var_dump", Severity.MEDIUM),
        ("debug_print_backtrace", Severity.MEDIUM),
        ("var_export", Severity.LOW),
        ("echo", Severity.LOW),
        ("my_debug", Severity.LOW),
        ("EVAL", Severity.LOW),
    ],
)
def test_severity_for_function(function: str, expected: Severity) -> None:
    assert severity_for_function(function) is expected
