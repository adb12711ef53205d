"""Input sources for generation runs."""

from .base import CachedSource, InputSource
from .literal import Base64Literal, HexLiteral, Utf8Literal, decode_base64, decode_hex
from .random import RandomBytes
from .stream import FileContents, StandardInputBounded
from .unresolved import UnresolvedSource

__all__ = [
    "InputSource",
    "CachedSource",
    "HexLiteral",
    "Base64Literal",
    "Utf8Literal",
    "FileContents",
    "StandardInputBounded",
    "RandomBytes",
    "UnresolvedSource",
    "decode_hex",
    "decode_base64",
]
