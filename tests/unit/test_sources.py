import io
from collections import Counter
from pathlib import Path
import sys

import pytest

from datagenerator.core.errors import (
    DecodeError,
    InputOutputError,
    RandomGeneratorError,
    UnresolvedSourceError,
)
from datagenerator.sources import (
    Base64Literal,
    FileContents,
    HexLiteral,
    RandomBytes,
    StandardInputBounded,
    UnresolvedSource,
    Utf8Literal,
)


class _ChunkedStream:
    """Binary stream that hands out at most ``chunk_size`` bytes per read."""

    def __init__(self, data: bytes, chunk_size: int) -> None:
        self._data = data
        self._offset = 0
        self.chunk_size = chunk_size
        self.reads = 0

    def readinto(self, target) -> int:
        self.reads += 1
        chunk = self._data[self._offset : self._offset + min(self.chunk_size, len(target))]
        target[: len(chunk)] = chunk
        self._offset += len(chunk)
        return len(chunk)

    def read(self) -> bytes:
        self.reads += 1
        chunk = self._data[self._offset :]
        self._offset = len(self._data)
        return chunk


def test_literal_sources_decode_payloads() -> None:
    assert HexLiteral("00ff10").extract(1) == b"\x00\xff\x10"
    assert HexLiteral("ABcd").extract(1) == b"\xab\xcd"
    assert Base64Literal("aGVsbG8=").extract(1) == b"hello"
    assert Utf8Literal("hé").extract(1) == "hé".encode("utf-8")


@pytest.mark.parametrize(
    "source",
    [HexLiteral("deadbeef"), Base64Literal("AAEC"), Utf8Literal("unit")],
)
def test_cached_sources_return_identical_bytes(source) -> None:
    first = source.extract(1)
    second = source.extract(1)
    assert first == second
    assert source.resolved is True
    assert source.is_random is False


def test_cached_sources_ignore_requested_length() -> None:
    source = HexLiteral("010203")
    assert source.extract(1) == b"\x01\x02\x03"
    assert source.extract(64) == b"\x01\x02\x03"


def test_hex_literal_rejects_non_hex_digits() -> None:
    with pytest.raises(DecodeError) as excinfo:
        HexLiteral("zz").extract(1)
    assert excinfo.value.encoding == "hex"


@pytest.mark.parametrize("text", ["abc", "0x00", "00 11"])
def test_hex_literal_rejects_odd_length_prefix_and_whitespace(text: str) -> None:
    with pytest.raises(DecodeError):
        HexLiteral(text).extract(1)


def test_base64_literal_rejects_invalid_length() -> None:
    with pytest.raises(DecodeError) as excinfo:
        Base64Literal("a").extract(1)
    assert excinfo.value.encoding == "base64"
    assert "base64" in str(excinfo.value)


def test_base64_literal_rejects_characters_outside_alphabet() -> None:
    with pytest.raises(DecodeError):
        Base64Literal("aGVs*G8=").extract(1)


def test_decode_failure_leaves_cache_empty() -> None:
    source = HexLiteral("zz")
    with pytest.raises(DecodeError):
        source.extract(1)
    assert source.resolved is False


def test_file_contents_reads_file_once(tmp_path: Path) -> None:
    path = tmp_path / "unit.bin"
    path.write_bytes(b"\x01\x02payload")
    source = FileContents(path)
    assert source.extract(1) == b"\x01\x02payload"

    path.write_bytes(b"changed")
    assert source.extract(1) == b"\x01\x02payload"


def test_file_contents_missing_file_raises_io_error(tmp_path: Path) -> None:
    source = FileContents(tmp_path / "missing.bin")
    with pytest.raises(InputOutputError) as excinfo:
        source.extract(1)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_file_contents_dash_reads_stdin_to_end() -> None:
    stream = _ChunkedStream(b"from-stdin", chunk_size=4)
    source = FileContents("-", stream=stream)
    assert source.extract(1) == b"from-stdin"
    assert source.extract(1) == b"from-stdin"
    assert stream.reads == 1


def test_stdin_bounded_truncates_on_end_of_stream() -> None:
    source = StandardInputBounded(10, stream=io.BytesIO(b"abc"))
    assert source.extract(1) == b"abc"
    assert len(source.extract(1)) == 3


def test_stdin_bounded_stops_at_max_length() -> None:
    stream = _ChunkedStream(b"0123456789abcdef", chunk_size=3)
    source = StandardInputBounded(8, stream=stream)
    assert source.extract(1) == b"01234567"
    reads = stream.reads
    assert source.extract(1) == b"01234567"
    assert stream.reads == reads


def test_stdin_bounded_accumulates_short_reads() -> None:
    stream = _ChunkedStream(b"abcdefg", chunk_size=2)
    source = StandardInputBounded(100, stream=stream)
    assert source.extract(1) == b"abcdefg"
    # four data reads plus the zero-length end-of-stream read
    assert stream.reads == 5


def test_stdin_bounded_zero_length_reads_nothing() -> None:
    stream = _ChunkedStream(b"ignored", chunk_size=4)
    source = StandardInputBounded(0, stream=stream)
    assert source.extract(1) == b""
    assert stream.reads == 0


def test_stdin_bounded_uses_process_stdin(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"xyz")))
    assert StandardInputBounded(2).extract(1) == b"xy"


def test_stdin_bounded_rejects_negative_bound() -> None:
    with pytest.raises(ValueError):
        StandardInputBounded(-1)


def test_stdin_bounded_unallocatable_bound_raises_io_error() -> None:
    source = StandardInputBounded(sys.maxsize, stream=io.BytesIO(b"abc"))
    with pytest.raises(InputOutputError, match="cannot allocate"):
        source.extract(1)


def test_random_bytes_returns_requested_length_without_caching() -> None:
    source = RandomBytes(seed=7)
    assert source.is_random is True
    assert len(source.extract(1)) == 1
    assert len(source.extract(16)) == 16
    draws = {source.extract(4) for _ in range(32)}
    assert len(draws) > 1


def test_random_bytes_with_seed_is_reproducible() -> None:
    left = RandomBytes(seed=1234)
    right = RandomBytes(seed=1234)
    assert [left.extract(1) for _ in range(64)] == [right.extract(1) for _ in range(64)]


def test_random_bytes_distribution_is_roughly_uniform() -> None:
    source = RandomBytes(seed=99)
    draws = 256 * 200
    counts = Counter(source.extract(1)[0] for _ in range(draws))
    assert len(counts) == 256
    expected = draws / 256
    assert all(expected * 0.6 < count < expected * 1.4 for count in counts.values())


def test_random_bytes_negative_length_raises_generator_error() -> None:
    with pytest.raises(RandomGeneratorError):
        RandomBytes().extract(-1)


def test_unresolved_source_always_fails() -> None:
    source = UnresolvedSource()
    with pytest.raises(UnresolvedSourceError):
        source.extract(1)
    with pytest.raises(UnresolvedSourceError):
        source.extract(1)
