"""Dataclasses for application config and argument value parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import Any

from datagenerator.core.errors import ParseError


@dataclass(slots=True)
class LoggingConfig:
    level: str = "WARNING"
    fmt: str = "json"
    sink: str = "stderr"
    file_path: str | None = None
    service_name: str = "datagenerator"


@dataclass(slots=True)
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)


VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
VALID_LOG_FORMATS = {"json", "text"}
# stdout carries generated data and is never a log sink.
VALID_LOG_SINKS = {"stderr", "file"}
_UNSIGNED_INT_RE = re.compile(r"[0-9]+")


def parse_non_negative_int(raw: Any, *, field_name: str) -> int:
    if isinstance(raw, bool):
        raise ParseError(field_name, "expected an integer")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not _UNSIGNED_INT_RE.fullmatch(text):
            raise ParseError(field_name, f"expected a non-negative integer, got '{raw}'")
        value = int(text)
    if value < 0:
        raise ParseError(field_name, "must be greater than or equal to zero")
    return value


def parse_logging_config(raw: Any) -> LoggingConfig:
    if not isinstance(raw, dict):
        raise ValueError("'logging' must be an object")
    level = str(raw.get("level", "WARNING")).upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"invalid log level '{level}'")
    log_format = str(raw.get("format", "json")).lower()
    if log_format not in VALID_LOG_FORMATS:
        raise ValueError(f"invalid log format '{log_format}'")
    sink = str(raw.get("sink", "stderr")).lower()
    if sink not in VALID_LOG_SINKS:
        raise ValueError(f"invalid log sink '{sink}'")
    file_path = raw.get("file_path")
    if sink == "file" and not file_path:
        raise ValueError("logging.file_path is required when logging.sink is 'file'")
    service_name = str(raw.get("service_name", "datagenerator")).strip() or "datagenerator"
    return LoggingConfig(
        level=level,
        fmt=log_format,
        sink=sink,
        file_path=str(file_path) if file_path else None,
        service_name=service_name,
    )


def parse_config(data: dict[str, Any]) -> AppConfig:
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")
    return AppConfig(logging=parse_logging_config(data.get("logging", {})))
