"""UTF-8 sequences: decoding, encoding, counting and conversion to other encodings."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Union

from fswatchkit.utf_codec import (
    Decoded,
    decode_ansi,
    decode_utf8,
    decode_wide,
    encode_ansi,
    encode_utf8,
    encode_utf16,
    encode_wide,
)

__all__ = ["Utf8"]


def _codepoints(data: Sequence[int], replacement: int = 0) -> Iterator[int]:
    """Yield the code points of a UTF-8 sequence, one per character."""
    position = 0
    end = len(data)
    while position < end:
        codepoint, position = decode_utf8(data, position, replacement)
        yield codepoint


class Utf8:
    """Operations on UTF-8 data, given as bytes or any sequence of byte values."""

    @staticmethod
    def decode(data: Sequence[int], start: int = 0, replacement: int = 0) -> Decoded:
        """Decode the character at ``data[start]``; see ``decode_utf8``."""
        return decode_utf8(data, start, replacement)

    @staticmethod
    def encode(codepoint: int, replacement: int = 0) -> bytes:
        """Encode one code point as UTF-8; see ``encode_utf8``."""
        return encode_utf8(codepoint, replacement)

    @staticmethod
    def next(data: Sequence[int], start: int = 0) -> int:
        """Return the index just past the character that begins at ``data[start]``."""
        return decode_utf8(data, start).end

    @staticmethod
    def count(data: Sequence[int]) -> int:
        """Return the number of characters in a UTF-8 sequence."""
        return sum(1 for _ in _codepoints(data))

    @staticmethod
    def from_ansi(data: Iterable[int], encoding: Optional[str] = None) -> bytes:
        """Convert bytes in the locale's (or the given) encoding to UTF-8."""
        return b"".join(encode_utf8(decode_ansi(byte, encoding)) for byte in data)

    @staticmethod
    def from_wide(chars: Iterable[Union[str, int]]) -> bytes:
        """Convert wide characters (a string or code point values) to UTF-8."""
        return b"".join(encode_utf8(decode_wide(char)) for char in chars)

    @staticmethod
    def from_latin1(data: Iterable[int]) -> bytes:
        """Convert Latin-1 bytes to UTF-8."""
        return b"".join(encode_utf8(byte) for byte in data)

    @staticmethod
    def to_ansi(
        data: Sequence[int], replacement: int = 0, encoding: Optional[str] = None
    ) -> bytes:
        """Convert UTF-8 to single bytes of the locale's (or the given) encoding.

        Characters without a single-byte form become ``replacement``.
        """
        return b"".join(
            encode_ansi(codepoint, replacement, encoding) for codepoint in _codepoints(data)
        )

    @staticmethod
    def to_wide(data: Sequence[int], replacement: str = "") -> str:
        """Convert UTF-8 to a string of wide characters."""
        return "".join(encode_wide(codepoint, replacement) for codepoint in _codepoints(data))

    @staticmethod
    def to_latin1(data: Sequence[int], replacement: int = 0) -> bytes:
        """Convert UTF-8 to Latin-1; characters above U+00FF become ``replacement``."""
        return bytes(
            codepoint if codepoint < 256 else replacement for codepoint in _codepoints(data)
        )

    @staticmethod
    def to_utf8(data: Iterable[int]) -> bytes:
        """Return a copy of the UTF-8 data."""
        return bytes(data)

    @staticmethod
    def to_utf16(data: Sequence[int]) -> tuple[int, ...]:
        """Convert UTF-8 to UTF-16 code units."""
        return tuple(unit for codepoint in _codepoints(data) for unit in encode_utf16(codepoint))

    @staticmethod
    def to_utf32(data: Sequence[int]) -> tuple[int, ...]:
        """Convert UTF-8 to UTF-32 code points."""
        return tuple(_codepoints(data))