"""Sources backed by a literal given on the command line."""

from __future__ import annotations

import base64
import binascii

from datagenerator.core.errors import DecodeError
from datagenerator.sources.base import CachedSource


def decode_hex(text: str) -> bytes:
    """Decode a plain hex string (no ``0x`` prefix, no separators)."""
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("hex", str(exc)) from exc


def decode_base64(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError("base64", str(exc)) from exc


class HexLiteral(CachedSource):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    @property
    def name(self) -> str:
        return "hex"

    def _resolve(self) -> bytes:
        return decode_hex(self.text)


class Base64Literal(CachedSource):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    @property
    def name(self) -> str:
        return "base64"

    def _resolve(self) -> bytes:
        return decode_base64(self.text)


class Utf8Literal(CachedSource):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text

    @property
    def name(self) -> str:
        return "string"

    def _resolve(self) -> bytes:
        try:
            return self.text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise DecodeError("utf-8", str(exc)) from exc
