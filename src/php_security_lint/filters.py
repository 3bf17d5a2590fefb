# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exclude-pattern normalisation and path pruning."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import PurePath

from .constants import DEFAULT_EXCLUDE_PATTERNS, VCS_DIRECTORIES


def normalize_exclude_pattern(pattern: str) -> str:
    """Reduce the supported glob shapes to a plain path substring.

    ``*/vendor/*``, ``*/vendor``, ``vendor/*`` and ``./vendor`` all collapse
    to ``vendor``; anything else is used verbatim.

    Args:
        pattern: Exclude pattern supplied by the user.

    Returns:
        str: Substring tested against candidate paths.
    """

    if pattern.startswith("*/") and pattern.endswith("/*"):
        return pattern.strip("*/")
    if pattern.startswith("*/"):
        return pattern.lstrip("*/")
    if pattern.endswith("/*"):
        return pattern.rstrip("/*")
    if pattern.startswith("./"):
        return pattern.lstrip("./")
    return pattern


def _as_posix(path: str | PurePath) -> str:
    return path.as_posix() if isinstance(path, PurePath) else path.replace("\\", "/")


@dataclass(frozen=True, slots=True)
class PathFilter:
    """Substring based exclusion applied while walking a directory tree.

    Matching is deliberately coarse: ``vendor`` excludes every path that
    contains the text ``vendor`` anywhere, not only a ``vendor`` segment.
    """

    patterns: tuple[str, ...] = DEFAULT_EXCLUDE_PATTERNS
    _normalized: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        normalized = tuple(
            dict.fromkeys(cleaned for cleaned in map(normalize_exclude_pattern, self.patterns) if cleaned),
        )
        object.__setattr__(self, "_normalized", normalized)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> PathFilter:
        return cls(patterns=tuple(patterns))

    @property
    def normalized_patterns(self) -> tuple[str, ...]:
        return self._normalized

    def should_exclude(self, path: str | PurePath) -> bool:
        """Return whether ``path`` contains any normalised pattern.

        Args:
            path: Candidate path, usually relative to the scan root.

        Returns:
            bool: ``True`` when the path must be skipped.
        """

        candidate = _as_posix(path)
        return any(pattern in candidate for pattern in self._normalized)


def should_exclude(path: str | PurePath, patterns: Sequence[str]) -> bool:
    """Return whether ``path`` is excluded by any of ``patterns``."""

    return PathFilter.from_patterns(patterns).should_exclude(path)


def is_vcs_directory(name: str) -> bool:
    """Return ``True`` for version-control metadata directory names."""

    return name in VCS_DIRECTORIES


__all__ = ["PathFilter", "is_vcs_directory", "normalize_exclude_pattern", "should_exclude"]
