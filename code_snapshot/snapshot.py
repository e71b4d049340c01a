"""Fenced snapshot output for every non-ignored file under a root."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional

from code_snapshot.config import SnapshotConfig
from code_snapshot.constants import DEFAULT_FENCE
from code_snapshot.errors import FileReadError, OutputOpenError, RootNotFoundError
from code_snapshot.ignore.matcher import IgnoreMatcher
from code_snapshot.ignore.parser import load_rule_set
from code_snapshot.utils import read_bytes
from code_snapshot.walker import TreeWalker, WalkReport


ErrorLineFn = Callable[[str], None]


class SnapshotWriter:
    """Write one fenced block per file to a binary sink.

    Each block is the resolved path, an opening fence, the raw bytes (with a
    newline appended when non-empty content lacks one), a closing fence and a
    blank separator line. Unreadable files get a single error line instead.
    """

    def __init__(
        self,
        sink: BinaryIO,
        fence: str = DEFAULT_FENCE,
        on_error_line: Optional[ErrorLineFn] = None,
    ) -> None:
        self._sink = sink
        self._fence = fence.encode("utf-8")
        self._on_error_line = on_error_line

    def write_file(self, path: Path) -> None:
        try:
            content = read_bytes(path)
        except OSError as exc:
            raise FileReadError(path, exc.strerror or type(exc).__name__) from exc

        header = str(path.resolve()).encode("utf-8", errors="surrogateescape")
        self._sink.write(header + b"\n")
        self._sink.write(self._fence + b"\n")
        self._sink.write(content)
        if content and not content.endswith(b"\n"):
            self._sink.write(b"\n")
        self._sink.write(self._fence + b"\n\n")

    def write_error(self, path: Path, cause: FileReadError) -> None:
        line = f"Failed to read file {path}: {cause.detail}"
        self._sink.write(line.encode("utf-8", errors="surrogateescape") + b"\n\n")
        if self._on_error_line is not None:
            self._on_error_line(line)


class SnapshotService:
    def __init__(
        self,
        config: Optional[SnapshotConfig] = None,
        self_path: Optional[Path] = None,
        on_error_line: Optional[ErrorLineFn] = None,
    ) -> None:
        self._config = config or SnapshotConfig()
        self._self_path = self_path
        self._on_error_line = on_error_line

    @property
    def config(self) -> SnapshotConfig:
        return self._config

    def validate_root(self, root: Path) -> Path:
        if not root.exists() or not root.is_dir():
            raise RootNotFoundError(root)
        return root.resolve()

    def build_walker(self, root: Path) -> TreeWalker:
        rule_set = load_rule_set(root, self._config.rules_file)
        return TreeWalker(IgnoreMatcher(rule_set), self_path=self._self_path)

    def plan(self, root: Path) -> list[Path]:
        root_abs = self.validate_root(root)
        return self.build_walker(root_abs).list_files(root_abs)

    def run(self, root: Path, out_path: Optional[Path] = None) -> WalkReport:
        root_abs = self.validate_root(root)
        walker = self.build_walker(root_abs)
        with _open_sink(out_path) as sink:
            writer = SnapshotWriter(sink, fence=self._config.fence, on_error_line=self._on_error_line)
            report = walker.walk(root_abs, writer.write_file, writer.write_error)
            sink.flush()
        return report


@contextmanager
def _open_sink(out_path: Optional[Path]) -> Iterator[BinaryIO]:
    if out_path is None:
        yield sys.stdout.buffer
        return
    try:
        handle = out_path.open("wb")
    except OSError as exc:
        raise OutputOpenError(out_path, exc.strerror or type(exc).__name__) from exc
    with handle:
        yield handle
