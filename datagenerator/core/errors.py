"""Error taxonomy for generation runs."""

from __future__ import annotations


class DataGeneratorError(RuntimeError):
    """Base error for every failure that aborts a generation run."""


class ConfigError(DataGeneratorError):
    """The config file could not be read, interpolated or validated."""


class InputOutputError(DataGeneratorError):
    """Reading an input or writing an output failed."""


class DecodeError(DataGeneratorError):
    """A hex, base64 or utf-8 literal could not be converted to bytes."""

    def __init__(self, encoding: str, message: str) -> None:
        super().__init__(f"invalid {encoding} input: {message}")
        self.encoding = encoding


class ParseError(DataGeneratorError):
    """An integer argument was malformed or out of range."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"invalid value for '{field_name}': {message}")
        self.field_name = field_name


class RandomGeneratorError(DataGeneratorError):
    """The pseudo-random generator could not produce the requested bytes."""


class UnresolvedSourceError(DataGeneratorError):
    """Extraction was attempted without a configured input source."""
