"""UTF-16 sequences: decoding, encoding, counting and conversion to other encodings."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Union

from fswatchkit.utf_codec import (
    Decoded,
    decode_ansi,
    decode_utf16,
    decode_wide,
    encode_ansi,
    encode_utf8,
    encode_utf16,
    encode_wide,
)

__all__ = ["Utf16"]


def _codepoints(data: Sequence[int], replacement: int = 0) -> Iterator[int]:
    """Yield the code points of a UTF-16 sequence, one per character."""
    position = 0
    end = len(data)
    while position < end:
        codepoint, position = decode_utf16(data, position, replacement)
        yield codepoint


class Utf16:
    """Operations on UTF-16 data, given as a sequence of 16-bit unit values."""

    @staticmethod
    def decode(data: Sequence[int], start: int = 0, replacement: int = 0) -> Decoded:
        """Decode the character at ``data[start]``; see ``decode_utf16``."""
        return decode_utf16(data, start, replacement)

    @staticmethod
    def encode(codepoint: int, replacement: int = 0) -> tuple[int, ...]:
        """Encode one code point as UTF-16 units; see ``encode_utf16``."""
        return encode_utf16(codepoint, replacement)

    @staticmethod
    def next(data: Sequence[int], start: int = 0) -> int:
        """Return the index just past the character that begins at ``data[start]``."""
        return decode_utf16(data, start).end

    @staticmethod
    def count(data: Sequence[int]) -> int:
        """Return the number of characters in a UTF-16 sequence."""
        return sum(1 for _ in _codepoints(data))

    @staticmethod
    def from_ansi(data: Iterable[int], encoding: Optional[str] = None) -> tuple[int, ...]:
        """Convert bytes in the locale's (or the given) encoding to UTF-16 units."""
        return tuple(
            unit for byte in data for unit in encode_utf16(decode_ansi(byte, encoding))
        )

    @staticmethod
    def from_wide(chars: Iterable[Union[str, int]]) -> tuple[int, ...]:
        """Convert wide characters (a string or code point values) to UTF-16 units."""
        return tuple(unit for char in chars for unit in encode_utf16(decode_wide(char)))

    @staticmethod
    def from_latin1(data: Iterable[int]) -> tuple[int, ...]:
        """Convert Latin-1 bytes to UTF-16 units; each byte is copied as one unit."""
        return tuple(data)

    @staticmethod
    def to_ansi(
        data: Sequence[int], replacement: int = 0, encoding: Optional[str] = None
    ) -> bytes:
        """Convert UTF-16 to single bytes of the locale's (or the given) encoding.

        Characters without a single-byte form become ``replacement``.
        """
        return b"".join(
            encode_ansi(codepoint, replacement, encoding) for codepoint in _codepoints(data)
        )

    @staticmethod
    def to_wide(data: Sequence[int], replacement: str = "") -> str:
        """Convert UTF-16 to a string of wide characters."""
        return "".join(encode_wide(codepoint, replacement) for codepoint in _codepoints(data))

    @staticmethod
    def to_latin1(data: Iterable[int], replacement: int = 0) -> bytes:
        """Convert UTF-16 units to Latin-1, unit by unit.

        Units above 0xFF, including both halves of a surrogate pair, become ``replacement``.
        """
        return bytes(unit if unit < 256 else replacement for unit in data)

    @staticmethod
    def to_utf8(data: Sequence[int]) -> bytes:
        """Convert UTF-16 to UTF-8."""
        return b"".join(encode_utf8(codepoint) for codepoint in _codepoints(data))

    @staticmethod
    def to_utf16(data: Iterable[int]) -> tuple[int, ...]:
        """Return a copy of the UTF-16 data."""
        return tuple(data)

    @staticmethod
    def to_utf32(data: Sequence[int]) -> tuple[int, ...]:
        """Convert UTF-16 to UTF-32 code points."""
        return tuple(_codepoints(data))