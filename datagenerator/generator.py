"""Repeat, delimit and buffer loop driving a generation run."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from datagenerator.core.logging import emit_metric, get_logger
from datagenerator.sinks import OutputSink
from datagenerator.sources.base import InputSource


FLUSH_THRESHOLD_BYTES = 4096
UNIT_LENGTH = 1


@dataclass(slots=True)
class GenerationReport:
    units: int = 0
    bytes_written: int = 0
    writes: int = 0


class GenerationLoop:
    """Pulls ``count`` units from a source and writes them to a sink.

    Units are separated by the delimiter, which never follows the last unit.
    Output accumulates in memory and is written whenever the buffer reaches
    ``flush_threshold`` bytes, then once more for the remainder. The first
    source or sink error aborts the run; bytes already written stay written.
    """

    def __init__(
        self,
        flush_threshold: int = FLUSH_THRESHOLD_BYTES,
        logger: logging.Logger | None = None,
    ) -> None:
        if flush_threshold <= 0:
            raise ValueError("flush_threshold must be greater than zero")
        self.flush_threshold = flush_threshold
        self.logger = logger or get_logger("datagenerator.generator")

    def run(self, source: InputSource, sink: OutputSink, delimiter: bytes, count: int) -> GenerationReport:
        if count < 0:
            raise ValueError("count must be greater than or equal to zero")

        report = GenerationReport()
        buffer = bytearray()
        for index in range(count):
            buffer += source.extract(UNIT_LENGTH)
            report.units += 1
            if index + 1 < count:
                buffer += delimiter
            if len(buffer) >= self.flush_threshold:
                self._write(sink, buffer, report)
        if buffer:
            self._write(sink, buffer, report)
        if report.writes:
            sink.flush()

        self.logger.info(
            "generation complete",
            extra={
                "event_action": "generation_complete",
                "event_outcome": "success",
                "payload": {
                    "source": source.name,
                    "sink": sink.name,
                    "units": report.units,
                    "bytes_written": report.bytes_written,
                    "writes": report.writes,
                },
            },
        )
        emit_metric(self.logger, name="bytes_written", value=report.bytes_written, payload={"source": source.name})
        return report

    def _write(self, sink: OutputSink, buffer: bytearray, report: GenerationReport) -> None:
        size = len(buffer)
        sink.write(bytes(buffer))
        buffer.clear()
        report.writes += 1
        report.bytes_written += size
        self.logger.debug(
            "buffer flushed",
            extra={"event_action": "buffer_flush", "payload": {"bytes": size, "writes": report.writes}},
        )
