"""Directory traversal driven by the ignore matcher."""

from __future__ import annotations

import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from code_snapshot.errors import FileReadError
from code_snapshot.ignore.matcher import IgnoreMatcher


EmitFn = Callable[[Path], None]
ReportErrorFn = Callable[[Path, FileReadError], None]


@dataclass(frozen=True)
class TraversalEntry:
    path: Path
    relative: str
    is_directory: bool


@dataclass
class WalkReport:
    emitted: int = 0
    ignored: int = 0
    skipped: int = 0
    failures: list[FileReadError] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)


class TreeWalker:
    def __init__(self, matcher: IgnoreMatcher, self_path: Optional[Path] = None) -> None:
        self._matcher = matcher
        self._self_path = _resolve_quiet(self_path) if self_path is not None else None

    def walk(self, root: Path, emit: EmitFn, report_error: ReportErrorFn) -> WalkReport:
        report = WalkReport()
        root_abs = _resolve_quiet(root)
        # Each pending directory carries the resolved paths of itself and its ancestors.
        pending: list[tuple[Path, frozenset[Path]]] = [(root_abs, frozenset({root_abs}))]

        while pending:
            current, ancestors = pending.pop()
            for child in self._children(current):
                kind = _entry_kind(child)
                if kind is None:
                    report.skipped += 1
                    continue

                entry = TraversalEntry(
                    path=child,
                    relative=child.relative_to(root_abs).as_posix(),
                    is_directory=stat.S_ISDIR(kind),
                )
                if self._matcher.is_ignored(entry.relative, entry.is_directory):
                    report.ignored += 1
                    continue

                if entry.is_directory:
                    # A symlinked directory pointing back at an ancestor would never end.
                    real = _resolve_quiet(entry.path)
                    if real not in ancestors:
                        pending.append((entry.path, ancestors | {real}))
                    continue

                if not stat.S_ISREG(kind):
                    report.skipped += 1
                    continue

                if self._is_self(entry.path):
                    report.skipped += 1
                    continue

                try:
                    emit(entry.path)
                except FileReadError as exc:
                    report.failures.append(exc)
                    report_error(entry.path, exc)
                    continue
                report.emitted += 1

        return report

    def list_files(self, root: Path) -> list[Path]:
        """Return the files a walk would emit, in walk order, without reading them."""
        collected: list[Path] = []
        self.walk(root, collected.append, lambda _path, _exc: None)
        return collected

    def _is_self(self, path: Path) -> bool:
        if self._self_path is None:
            return False
        return _resolve_quiet(path) == self._self_path

    @staticmethod
    def _children(directory: Path) -> list[Path]:
        try:
            return sorted(directory.iterdir(), key=lambda child: child.name)
        except OSError:
            return []


def _entry_kind(path: Path) -> Optional[int]:
    try:
        return path.stat().st_mode
    except OSError:
        return None


def _resolve_quiet(path: Path) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path.absolute()
