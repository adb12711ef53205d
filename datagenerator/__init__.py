"""Byte stream generator: repeat a unit of bytes with an optional delimiter."""

__version__ = "0.1.0"
