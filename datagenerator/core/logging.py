"""Structured logging for generation runs.

Standard output carries generated data, so log records only ever go to
standard error or a file.
"""

from __future__ import annotations

from datetime import UTC, datetime
import json
import logging
from pathlib import Path

from datagenerator.config.schema import LoggingConfig


ROOT_LOGGER_NAME = "datagenerator"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _strip_empty(value: object) -> object | None:
    if isinstance(value, dict):
        cleaned = {key: _strip_empty(item) for key, item in value.items()}
        return {key: item for key, item in cleaned.items() if item is not None} or None
    if isinstance(value, list):
        cleaned_list = [_strip_empty(item) for item in value]
        return [item for item in cleaned_list if item is not None] or None
    if value in ("", None):
        return None
    return value


class JsonLogFormatter(logging.Formatter):
    def __init__(self, service_name: str = ROOT_LOGGER_NAME) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).isoformat(timespec="microseconds")
        payload: dict[str, object] = {
            "@timestamp": timestamp,
            "message": record.getMessage(),
            "log": {
                "level": record.levelname.lower(),
                "logger": record.name,
            },
            "service": {
                "name": self.service_name,
            },
            "event": {
                "category": getattr(record, "event_category", "generation"),
                "action": getattr(record, "event_action", None),
                "outcome": getattr(record, "event_outcome", None),
            },
            "datagenerator": {
                "payload": getattr(record, "payload", None),
            },
        }
        if record.exc_info:
            payload["error"] = {"stack_trace": self.formatException(record.exc_info)}
        cleaned = _strip_empty(payload) or {}
        return json.dumps(cleaned, separators=(",", ":"))


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.fmt == "text":
        return logging.Formatter(TEXT_FORMAT)
    return JsonLogFormatter(service_name=config.service_name)


def _sink_handler(config: LoggingConfig, formatter: logging.Formatter) -> logging.Handler:
    if config.sink == "file":
        file_path = config.file_path or "logs/datagenerator.log"
        log_file = Path(file_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    return handler


def configure_logging(config: LoggingConfig, force: bool = False) -> None:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if getattr(root, "_datagenerator_configured", False) and not force:
        return

    root.setLevel(config.level)
    for existing in list(root.handlers):
        existing.close()
    root.handlers.clear()
    root.addHandler(_sink_handler(config, _build_formatter(config)))
    root.propagate = False
    setattr(root, "_datagenerator_configured", True)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers or name.startswith(ROOT_LOGGER_NAME):
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonLogFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def emit_metric(
    logger: logging.Logger,
    *,
    name: str,
    value: float,
    payload: dict[str, object] | None = None,
    level: str = "INFO",
) -> None:
    metric_name = name.strip() or "metric"
    metric_payload: dict[str, object] = {"metric_name": metric_name, "metric_value": float(value)}
    if payload:
        metric_payload.update(payload)
    logger.log(
        getattr(logging, level.upper(), logging.INFO),
        f"metric:{metric_name}",
        extra={
            "event_action": metric_name,
            "event_category": "metric",
            "event_outcome": "success",
            "payload": metric_payload,
        },
    )
