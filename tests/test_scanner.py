# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for line level comment suppression and call matching."""

from __future__ import annotations

import pytest

from php_security_lint.constants import DEFAULT_INSECURE_FUNCTIONS
from php_security_lint.scanner import LineScanner, call_pattern, is_comment_line, scan_line
from php_security_lint.severity import Severity

RULES = dict(DEFAULT_INSECURE_FUNCTIONS)


@pytest.mark.parametrize(
    "line",
    [
        "   // var_dump($x);",
        "/* eval($code); */",
        "* eval(1);",
        "\t * exec('ls');",
    ],
)
def test_comment_lines_produce_nothing(line: str) -> None:
    assert is_comment_line(line)
    assert scan_line("a.php", 1, line, RULES) == []


def test_trailing_comment_is_still_scanned() -> None:
    violations = scan_line("a.php", 1, "$x = 1; // var_dump($x);", RULES)
    assert [violation.function for violation in violations] == ["var_dump"]


def test_single_match_metadata() -> None:
    violations = scan_line("a.php", 7, "var_dump($data);", RULES)

    assert len(violations) == 1
    violation = violations[0]
    assert violation.function == "var_dump"
    assert violation.line == 7
    assert violation.column == 1
    assert violation.severity is Severity.MEDIUM
    assert violation.reason == RULES["var_dump"]


def test_column_and_context_use_raw_offset() -> None:
    violations = scan_line("a.php", 3, "    eval($code);   ", RULES)

    assert violations[0].column == 5
    assert violations[0].context == "eval($code);"


def test_multiple_rules_follow_table_order() -> None:
    line = "print_r($b); var_dump($a);"
    violations = scan_line("a.php", 1, line, RULES)

    assert [violation.function for violation in violations] == ["var_dump", "print_r"]
    assert [violation.column for violation in violations] == [line.index("var_dump") + 1, 1]


def test_every_occurrence_of_a_rule_is_reported() -> None:
    line = "var_dump($a); var_dump ($b);"
    violations = scan_line("a.php", 1, line, RULES)

    assert [violation.column for violation in violations] == [1, 15]


def test_whole_word_and_call_required() -> None:
    assert scan_line("a.php", 1, "$my_var_dump($x);", RULES) == []
    assert scan_line("a.php", 1, "$evaluation = 1;", RULES) == []
    assert scan_line("a.php", 1, "$system = 'x';", RULES) == []
    assert scan_line("a.php", 1, "VAR_DUMP($x);", RULES) == []


def test_overlapping_names_are_reported_independently() -> None:
    rules = {"print": "a", "printf": "b"}
    violations = scan_line("a.php", 1, "printf('%s', print ($x));", rules)
    assert [violation.function for violation in violations] == ["print", "printf"]

    violations = scan_line("a.php", 1, "exec($a); shell_exec($b);", RULES)
    assert [violation.function for violation in violations] == ["exec", "shell_exec"]


def test_function_names_are_literal() -> None:
    pattern = call_pattern("a.b")
    assert pattern.search("a.b(1)")
    assert not pattern.search("axb(1)")


def test_line_scanner_scan_text_numbers_lines() -> None:
    scanner = LineScanner({"eval": "danger"})
    text = "<?php\n// eval($x);\n  eval($y);\n"

    violations = list(scanner.scan_text("a.php", text))

    assert [(violation.line, violation.column) for violation in violations] == [(3, 3)]


def test_line_scanner_scan_line_uses_bound_rules() -> None:
    scanner = LineScanner({"my_debug": "Custom"})

    violations = scanner.scan_line("a.php", 2, "my_debug($x); var_dump($y);")

    assert [(violation.function, violation.reason) for violation in violations] == [("my_debug", "Custom")]


def test_boundaries_and_whitespace_are_ascii_only() -> None:
    accented = scan_line("a.php", 1, "$x=1;\u00e9var_dump($a);", RULES)
    nbsp = scan_line("a.php", 1, "var_dump\u00a0($a);", RULES)

    assert [(violation.function, violation.column) for violation in accented] == [("var_dump", 7)]
    assert nbsp == []
