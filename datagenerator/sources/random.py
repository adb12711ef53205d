"""Pseudo-random bytes, re-sampled on every extraction."""

from __future__ import annotations

import random

from datagenerator.core.errors import RandomGeneratorError
from datagenerator.sources.base import InputSource


class RandomBytes(InputSource):
    """Non-cryptographic random source. Nothing is cached between calls."""

    is_random = True

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return "random"

    def extract(self, requested_length: int) -> bytes:
        try:
            return self._rng.randbytes(requested_length)
        except (ValueError, OverflowError, MemoryError) as exc:
            raise RandomGeneratorError(f"failed to sample {requested_length} random bytes: {exc}") from exc
