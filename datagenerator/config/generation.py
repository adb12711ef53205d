"""Resolution of command line selections into a generation configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Any

from datagenerator.config.schema import parse_non_negative_int
from datagenerator.core.errors import ParseError
from datagenerator.sources import (
    Base64Literal,
    FileContents,
    HexLiteral,
    InputSource,
    RandomBytes,
    StandardInputBounded,
    UnresolvedSource,
    Utf8Literal,
    decode_hex,
)


@dataclass(frozen=True, slots=True)
class GenerationConfiguration:
    source: InputSource
    count: int
    delimiter: bytes = b""
    output: Path | None = None

    @property
    def is_random(self) -> bool:
        return self.source.is_random


def resolve_source(
    *,
    file: str | None = None,
    hex_text: str | None = None,
    base64_text: str | None = None,
    string: str | None = None,
    random: bool = False,
    stdin: Any = None,
    seed: Any = None,
) -> InputSource:
    if file is not None:
        return FileContents(file)
    if hex_text is not None:
        return HexLiteral(hex_text)
    if base64_text is not None:
        return Base64Literal(base64_text)
    if string is not None:
        return Utf8Literal(string)
    if random:
        parsed_seed = None if seed is None else parse_non_negative_int(seed, field_name="seed")
        return RandomBytes(seed=parsed_seed)
    if stdin is not None:
        max_length = parse_non_negative_int(stdin, field_name="stdin")
        if max_length > sys.maxsize:
            raise ParseError("stdin", f"must be at most {sys.maxsize}")
        return StandardInputBounded(max_length)
    return UnresolvedSource()


def build_configuration(
    *,
    count: Any,
    delimiter: str | None = None,
    output: str | Path | None = None,
    **selection: Any,
) -> GenerationConfiguration:
    """Build the configuration for one run.

    Integer arguments raise ``ParseError`` and the delimiter raises
    ``DecodeError``, before any input is touched.
    """
    parsed_count = parse_non_negative_int(count, field_name="count")
    delimiter_bytes = decode_hex(delimiter) if delimiter else b""
    return GenerationConfiguration(
        source=resolve_source(**selection),
        count=parsed_count,
        delimiter=delimiter_bytes,
        output=Path(output) if output is not None else None,
    )
