"""Output destinations for generated bytes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
import os
from pathlib import Path
import sys
from typing import BinaryIO, Iterator

from datagenerator.core.errors import InputOutputError


class OutputSink(ABC):
    """Unbuffered writable destination; buffering belongs to the generation loop."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        try:
            self._stream.write(data)
        except OSError as exc:
            raise InputOutputError(f"failed to write to {self.name}: {exc}") from exc

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise InputOutputError(f"failed to flush {self.name}: {exc}") from exc

    @abstractmethod
    def close(self) -> None: ...

    def discard(self) -> None:
        """Release the sink while another error is already propagating."""
        try:
            self.close()
        except InputOutputError:
            return

    @property
    @abstractmethod
    def name(self) -> str: ...


class StdoutSink(OutputSink):
    def __init__(self, stream: BinaryIO | None = None) -> None:
        super().__init__(stream or sys.stdout.buffer)

    @property
    def name(self) -> str:
        return "stdout"

    def close(self) -> None:
        # The process owns stdout; release only pushes pending bytes out.
        self.flush()

    def discard(self) -> None:
        try:
            self.flush()
        except InputOutputError:
            self._silence()

    def _silence(self) -> None:
        # Pending bytes can never be delivered; point the descriptor at devnull
        # so the interpreter's final flush of stdout does not fail again.
        try:
            fd = self._stream.fileno()
        except (OSError, ValueError):
            return
        devnull = os.open(os.devnull, os.O_WRONLY)
        try:
            os.dup2(devnull, fd)
        finally:
            os.close(devnull)


class FileSink(OutputSink):
    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        try:
            stream = self.path.open("wb")
        except OSError as exc:
            raise InputOutputError(f"failed to create output file '{self.path}': {exc}") from exc
        super().__init__(stream)

    @property
    def name(self) -> str:
        return f"output file '{self.path}'"

    def close(self) -> None:
        if self._stream.closed:
            return
        try:
            self._stream.close()
        except OSError as exc:
            raise InputOutputError(f"failed to close {self.name}: {exc}") from exc


@contextmanager
def open_sink(path: Path | None) -> Iterator[OutputSink]:
    sink: OutputSink = FileSink(path) if path is not None else StdoutSink()
    try:
        yield sink
    except BaseException:
        sink.discard()
        raise
    sink.close()
