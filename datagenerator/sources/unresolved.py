"""Placeholder for a run with no input selected."""

from __future__ import annotations

from datagenerator.core.errors import UnresolvedSourceError
from datagenerator.sources.base import InputSource


class UnresolvedSource(InputSource):
    @property
    def name(self) -> str:
        return "unresolved"

    def extract(self, requested_length: int) -> bytes:
        raise UnresolvedSourceError("no input source was configured")
