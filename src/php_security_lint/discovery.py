# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem traversal feeding files to the line scanner."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .constants import SOURCE_SUFFIX
from .filters import PathFilter, is_vcs_directory
from .models import LintResult
from .scanner import LineScanner

LOGGER = logging.getLogger(__name__)

_BOM = "\ufeff"


@dataclass(frozen=True, slots=True)
class FileWalker:
    """Walk a file or directory and collect violations into a fresh result."""

    rules: Mapping[str, str]
    path_filter: PathFilter = field(default_factory=PathFilter)
    suffix: str = SOURCE_SUFFIX

    def walk(self, root: str | os.PathLike[str]) -> LintResult:
        """Scan ``root`` and return the populated result.

        A missing root records a single error. A file root is scanned as-is,
        bypassing suffix and exclude checks. A directory root is traversed
        recursively in sorted order.

        Args:
            root: File or directory to scan.

        Returns:
            LintResult: Violations, errors and the scanned-file count.
        """

        result = LintResult()
        target = Path(root)
        if target.is_file():
            self._scan_file(target, os.fspath(root), result)
        elif target.is_dir():
            for candidate in self.iter_candidates(target, on_error=result.add_error):
                self._scan_file(candidate, os.fspath(candidate), result)
        else:
            result.add_error(f"Path not found: {os.fspath(root)}")
        return result

    def iter_candidates(
        self,
        base: Path,
        *,
        on_error: Callable[[str], None] | None = None,
    ) -> Iterator[Path]:
        """Yield resolved source files beneath ``base`` sorted by relative path.

        Args:
            base: Directory to traverse.
            on_error: Receives a ``Cannot read directory`` message for every
                directory that could not be listed. The walk continues past it.

        Yields:
            Path: Absolute paths of files that survive the exclusion rules.
        """

        def _report(exc: OSError) -> None:
            directory = Path(exc.filename) if exc.filename is not None else base
            LOGGER.debug("cannot list %s: %s", directory, exc)
            if on_error is not None:
                on_error(f"Cannot read directory: {directory.resolve()}")

        found: list[tuple[str, Path]] = []
        for dirpath, dirnames, filenames in os.walk(base, onerror=_report):
            current = Path(dirpath)
            dirnames[:] = sorted(name for name in dirnames if not self._should_skip_directory(current / name, base))
            for filename in filenames:
                if not filename.endswith(self.suffix):
                    continue
                candidate = current / filename
                relative = candidate.relative_to(base).as_posix()
                if self.path_filter.should_exclude(relative):
                    LOGGER.debug("excluded file %s", relative)
                    continue
                found.append((relative, candidate))
        for _, candidate in sorted(found, key=lambda item: item[0]):
            yield candidate.resolve()

    def _should_skip_directory(self, directory: Path, base: Path) -> bool:
        if is_vcs_directory(directory.name):
            return True
        relative = directory.relative_to(base).as_posix()
        if self.path_filter.should_exclude(relative):
            LOGGER.debug("excluded directory %s", relative)
            return True
        return False

    def _scan_file(self, path: Path, display: str, result: LintResult) -> None:
        """Scan a single file, recording an error instead of raising on I/O failure."""

        try:
            handle = path.open("rb")
        except OSError as exc:
            LOGGER.debug("cannot open %s: %s", display, exc)
            result.add_error(f"Cannot read file: {display}")
            return
        with handle:
            try:
                raw = handle.read()
            except OSError as exc:
                LOGGER.debug("cannot read %s: %s", display, exc)
                result.add_error(f"Cannot read file content: {display}")
                return

        result.increment_files_scanned()
        text = raw.decode("utf-8", errors="replace").removeprefix(_BOM)
        for violation in LineScanner(self.rules).scan_text(display, text):
            result.add_violation(violation)


__all__ = ["FileWalker"]
