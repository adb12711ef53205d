"""Input source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class InputSource(ABC):
    """Produces the byte unit repeated by a generation run."""

    is_random = False

    @abstractmethod
    def extract(self, requested_length: int) -> bytes: ...

    @property
    @abstractmethod
    def name(self) -> str: ...


class CachedSource(InputSource):
    """Source resolved on first extraction and replayed unchanged afterwards.

    ``requested_length`` is ignored: every extraction returns the full cached
    unit. Callers that need per-call sizing use :class:`RandomBytes`.
    """

    def __init__(self) -> None:
        self._cache: bytes | None = None

    @property
    def resolved(self) -> bool:
        return self._cache is not None

    def extract(self, requested_length: int) -> bytes:
        _ = requested_length
        if self._cache is None:
            self._cache = bytes(self._resolve())
        return self._cache

    @abstractmethod
    def _resolve(self) -> bytes: ...
