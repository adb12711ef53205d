"""Sources that read a file or standard input once."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import BinaryIO

from datagenerator.core.errors import InputOutputError
from datagenerator.core.logging import get_logger
from datagenerator.sources.base import CachedSource


STDIN_PATH = "-"


def _stdin_buffer() -> BinaryIO:
    return sys.stdin.buffer


class FileContents(CachedSource):
    """Whole file contents; the path ``-`` reads standard input to its end."""

    def __init__(self, path: str | Path, stream: BinaryIO | None = None) -> None:
        super().__init__()
        self.path = str(path)
        self._stream = stream
        self.logger = get_logger("datagenerator.sources.file")

    @property
    def name(self) -> str:
        return "file"

    def _resolve(self) -> bytes:
        if self.path == STDIN_PATH:
            stream = self._stream or _stdin_buffer()
            try:
                data = stream.read()
            except OSError as exc:
                raise InputOutputError(f"failed to read standard input: {exc}") from exc
        else:
            try:
                with open(self.path, "rb") as handle:
                    data = handle.read()
            except OSError as exc:
                raise InputOutputError(f"failed to read input file '{self.path}': {exc}") from exc
        self.logger.debug(
            "input file resolved",
            extra={"event_action": "source_resolved", "payload": {"path": self.path, "bytes": len(data)}},
        )
        return data


class StandardInputBounded(CachedSource):
    """At most ``max_length`` bytes of standard input, read exactly once.

    End-of-stream before the bound truncates the unit without error.
    """

    def __init__(self, max_length: int, stream: BinaryIO | None = None) -> None:
        super().__init__()
        if max_length < 0:
            raise ValueError("max_length must be greater than or equal to zero")
        self.max_length = int(max_length)
        self._stream = stream
        self.logger = get_logger("datagenerator.sources.stdin")

    @property
    def name(self) -> str:
        return "stdin"

    def _resolve(self) -> bytes:
        stream = self._stream or _stdin_buffer()
        try:
            buffer = bytearray(self.max_length)
        except (MemoryError, OverflowError) as exc:
            raise InputOutputError(f"cannot allocate {self.max_length} bytes for standard input") from exc
        view = memoryview(buffer)
        total = 0
        try:
            while total < self.max_length:
                read = stream.readinto(view[total:])
                if not read:
                    break
                total += read
        except OSError as exc:
            raise InputOutputError(f"failed to read standard input: {exc}") from exc
        self.logger.debug(
            "standard input resolved",
            extra={
                "event_action": "source_resolved",
                "payload": {"max_length": self.max_length, "bytes": total},
            },
        )
        return bytes(buffer[: min(total, self.max_length)])
