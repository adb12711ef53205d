"""Shared runtime helpers."""

from .errors import (
    ConfigError,
    DataGeneratorError,
    DecodeError,
    InputOutputError,
    ParseError,
    RandomGeneratorError,
    UnresolvedSourceError,
)

__all__ = [
    "ConfigError",
    "DataGeneratorError",
    "DecodeError",
    "InputOutputError",
    "ParseError",
    "RandomGeneratorError",
    "UnresolvedSourceError",
]
