# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for exclude pattern normalisation."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from php_security_lint.filters import PathFilter, is_vcs_directory, normalize_exclude_pattern, should_exclude


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("*/vendor/*", "vendor"),
        ("*/vendor", "vendor"),
        ("vendor/*", "vendor"),
        ("./vendor", "vendor"),
        ("vendor", "vendor"),
        ("src/legacy", "src/legacy"),
        ("*.php", "*.php"),
    ],
)
def test_normalize_exclude_pattern(pattern: str, expected: str) -> None:
    assert normalize_exclude_pattern(pattern) == expected


def test_substring_matching_is_not_segment_aware() -> None:
    path_filter = PathFilter.from_patterns(["vendor"])

    assert path_filter.should_exclude("vendor/lib.php")
    assert path_filter.should_exclude("src/myvendorstuff/lib.php")
    assert not path_filter.should_exclude("src/app.php")


def test_should_exclude_accepts_pure_paths() -> None:
    assert should_exclude(PurePosixPath("app/node_modules/x.php"), ["*/node_modules/*"])
    assert not should_exclude("app/x.php", ["*/node_modules/*"])


def test_empty_patterns_never_exclude() -> None:
    path_filter = PathFilter.from_patterns(["", "*/", "/*"])
    assert path_filter.normalized_patterns == ()
    assert not path_filter.should_exclude("anything.php")


def test_default_patterns() -> None:
    path_filter = PathFilter()
    assert path_filter.normalized_patterns == ("vendor", "node_modules", "tests", "test")
    assert path_filter.should_exclude("unit_test_helpers.php")


def test_vcs_directories() -> None:
    assert is_vcs_directory(".git")
    assert is_vcs_directory(".svn")
    assert not is_vcs_directory("src")
