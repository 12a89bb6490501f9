"""UTF-32 sequences: decoding, encoding, counting and conversion to other encodings."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from fswatchkit.utf_codec import (
    Decoded,
    decode_ansi as _decode_ansi,
    decode_wide as _decode_wide,
    encode_ansi as _encode_ansi,
    encode_utf8,
    encode_utf16,
    encode_wide as _encode_wide,
)

__all__ = ["Utf32"]


class Utf32:
    """Operations on UTF-32 data, given as a sequence of code point values.

    In UTF-32 every character is one unit and the unit is the code point itself.
    """

    @staticmethod
    def decode(data: Sequence[int], start: int = 0, replacement: int = 0) -> Decoded:
        """Return the code point at ``data[start]`` and the index after it.

        ``replacement`` is accepted for symmetry with the other encodings; every
        UTF-32 unit decodes to itself.
        """
        if not 0 <= start < len(data):
            raise IndexError(f"start index {start} outside data of length {len(data)}")
        return Decoded(data[start], start + 1)

    @staticmethod
    def encode(codepoint: int, replacement: int = 0) -> tuple[int, ...]:
        """Return the single UTF-32 unit for ``codepoint``."""
        return (codepoint,)

    @staticmethod
    def next(data: Sequence[int], start: int = 0) -> int:
        """Return the index just past the character at ``data[start]``."""
        return start + 1

    @staticmethod
    def count(data: Sequence[int]) -> int:
        """Return the number of characters, which is the number of units."""
        return len(data)

    @staticmethod
    def from_ansi(data: Iterable[int], encoding: Optional[str] = None) -> tuple[int, ...]:
        """Convert bytes in the locale's (or the given) encoding to code points."""
        return tuple(_decode_ansi(byte, encoding) for byte in data)

    @staticmethod
    def from_wide(chars: Iterable[Union[str, int]]) -> tuple[int, ...]:
        """Convert wide characters (a string or code point values) to code points."""
        return tuple(_decode_wide(char) for char in chars)

    @staticmethod
    def from_latin1(data: Iterable[int]) -> tuple[int, ...]:
        """Convert Latin-1 bytes to code points; each byte is its own code point."""
        return tuple(data)

    @staticmethod
    def to_ansi(
        data: Iterable[int], replacement: int = 0, encoding: Optional[str] = None
    ) -> bytes:
        """Convert code points to single bytes of the locale's (or the given) encoding.

        Characters without a single-byte form become ``replacement``.
        """
        return b"".join(_encode_ansi(codepoint, replacement, encoding) for codepoint in data)

    @staticmethod
    def to_wide(data: Iterable[int], replacement: str = "") -> str:
        """Convert code points to a string of wide characters."""
        return "".join(_encode_wide(codepoint, replacement) for codepoint in data)

    @staticmethod
    def to_latin1(data: Iterable[int], replacement: int = 0) -> bytes:
        """Convert code points to Latin-1; those above U+00FF become ``replacement``."""
        return bytes(codepoint if codepoint < 256 else replacement for codepoint in data)

    @staticmethod
    def to_utf8(data: Iterable[int]) -> bytes:
        """Convert code points to UTF-8; unencodable ones are dropped."""
        return b"".join(encode_utf8(codepoint) for codepoint in data)

    @staticmethod
    def to_utf16(data: Iterable[int]) -> tuple[int, ...]:
        """Convert code points to UTF-16 units; unencodable ones are dropped."""
        return tuple(unit for codepoint in data for unit in encode_utf16(codepoint))

    @staticmethod
    def to_utf32(data: Iterable[int]) -> tuple[int, ...]:
        """Return a copy of the UTF-32 data."""
        return tuple(data)

    @staticmethod
    def decode_ansi(byte: Union[int, bytes, bytearray], encoding: Optional[str] = None) -> int:
        """Widen one byte of the locale's (or the given) encoding to a code point."""
        return _decode_ansi(byte, encoding)

    @staticmethod
    def decode_wide(char: Union[str, int]) -> int:
        """Return the code point of a wide character."""
        return _decode_wide(char)

    @staticmethod
    def encode_ansi(
        codepoint: int, replacement: int = 0, encoding: Optional[str] = None
    ) -> bytes:
        """Narrow a code point to one byte of the locale's (or the given) encoding."""
        return _encode_ansi(codepoint, replacement, encoding)

    @staticmethod
    def encode_wide(codepoint: int, replacement: str = "") -> str:
        """Return the wide character for a code point, or ``replacement`` if invalid."""
        return _encode_wide(codepoint, replacement)