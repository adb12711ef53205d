"""Config loading."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml

from datagenerator.config.schema import AppConfig, parse_config
from datagenerator.core.errors import ConfigError


DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaults.yml")
# ${NAME} or ${NAME:-default}
_ENV_REF_RE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}")


def load_config(path: Path | None = None) -> AppConfig:
    config_path = path or DEFAULT_CONFIG_PATH
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read config file '{config_path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"config file '{config_path}' is not valid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config file '{config_path}' must contain a mapping")
    logging_raw = raw.get("logging")
    if isinstance(logging_raw, dict):
        raw = {**raw, "logging": _expand_logging_section(logging_raw)}
    try:
        return parse_config(raw)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def _expand_logging_section(section: dict[str, Any]) -> dict[str, Any]:
    return {
        key: _expand_env_refs(value, field_name=f"logging.{key}") if isinstance(value, str) else value
        for key, value in section.items()
    }


def _expand_env_refs(value: str, *, field_name: str) -> str:
    def _lookup(match: re.Match[str]) -> str:
        name = match.group("name")
        resolved = os.environ.get(name, match.group("default"))
        if resolved is None:
            raise ConfigError(f"'{field_name}' references unset environment variable '{name}'")
        return resolved

    return _ENV_REF_RE.sub(_lookup, value)
