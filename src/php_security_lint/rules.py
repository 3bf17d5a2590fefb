# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Mutable table of insecure function names and their reasons."""

from __future__ import annotations

from collections.abc import Collection, Iterator
from dataclasses import dataclass, field

from .constants import DEFAULT_INSECURE_FUNCTIONS


@dataclass
class RuleTable:
    """Ordered mapping of function name to the reason it is flagged."""

    entries: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_INSECURE_FUNCTIONS))

    def add(self, name: str, reason: str) -> None:
        """Insert or overwrite the rule for ``name``.

        Args:
            name: Function name matched literally and case-sensitively.
            reason: Human-readable explanation reported with each hit.
        """

        self.entries[name] = reason

    def remove(self, name: str) -> None:
        """Drop the rule for ``name`` when present."""

        self.entries.pop(name, None)

    def active_rules(self, excluded: Collection[str] = ()) -> dict[str, str]:
        """Return the rules whose case-folded name is not in ``excluded``.

        Args:
            excluded: Lower-cased function names to leave out.

        Returns:
            dict[str, str]: New mapping preserving table order.
        """

        if not excluded:
            return dict(self.entries)
        return {name: reason for name, reason in self.entries.items() if name.lower() not in excluded}

    def copy(self) -> RuleTable:
        return RuleTable(entries=dict(self.entries))

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["RuleTable"]
