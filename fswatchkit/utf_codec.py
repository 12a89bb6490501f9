"""Single-character codecs for UTF-8, UTF-16, ANSI (locale) and wide characters.

Decoders take a sequence of code units and a start index and return the decoded
code point together with the index just past what was read. Encoders take a code
point and return the code units it becomes; a code point that cannot be encoded
is replaced by ``replacement``, or dropped when the replacement is 0 or empty.
"""

from __future__ import annotations

import locale
from typing import NamedTuple, Optional, Sequence, Union

__all__ = [
    "Decoded",
    "MAX_CODEPOINT",
    "REPLACEMENT_CHARACTER",
    "decode_utf8",
    "encode_utf8",
    "decode_utf16",
    "encode_utf16",
    "decode_ansi",
    "encode_ansi",
    "decode_wide",
    "encode_wide",
]

MAX_CODEPOINT = 0x10FFFF
REPLACEMENT_CHARACTER = 0xFFFD

_UINT32_MASK = 0xFFFFFFFF

# Value to subtract from the accumulated bytes of a sequence with N trailing bytes.
_UTF8_OFFSETS = (
    0x00000000,
    0x00003080,
    0x000E2080,
    0x03C82080,
    0xFA082080,
    0x82082080,
)

# Lead byte marker for a sequence of N bytes.
_UTF8_FIRST_BYTES = (0x00, 0x00, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC)

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)
_SURROGATES = range(0xD800, 0xE000)


class Decoded(NamedTuple):
    """A decoded code point and the index just past the units it used."""

    codepoint: int
    end: int


def _trailing_bytes(lead: int) -> int:
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 1
    if lead < 0xF0:
        return 2
    if lead < 0xF8:
        return 3
    if lead < 0xFC:
        return 4
    return 5


def _check_start(data: Sequence[int], start: int) -> None:
    if not 0 <= start < len(data):
        raise IndexError(f"start index {start} outside data of length {len(data)}")


def decode_utf8(data: Sequence[int], start: int = 0, replacement: int = 0) -> Decoded:
    """Decode the UTF-8 character beginning at ``data[start]``.

    An incomplete sequence yields ``replacement`` and consumes the rest of the data.
    """
    _check_start(data, start)
    trailing = _trailing_bytes(data[start] & 0xFF)
    end = len(data)
    if start + trailing >= end:
        return Decoded(replacement, end)

    value = 0
    for byte in data[start : start + trailing + 1]:
        value = (value << 6) + (byte & 0xFF)
    value = (value - _UTF8_OFFSETS[trailing]) & _UINT32_MASK
    return Decoded(value, start + trailing + 1)


def encode_utf8(codepoint: int, replacement: int = 0) -> bytes:
    """Encode one code point as UTF-8.

    Code points above U+10FFFF and high surrogates become the single byte
    ``replacement``, or nothing when it is 0.
    """
    if codepoint > MAX_CODEPOINT or codepoint < 0 or codepoint in _HIGH_SURROGATES:
        return bytes([replacement]) if replacement else b""

    if codepoint < 0x80:
        length = 1
    elif codepoint < 0x800:
        length = 2
    elif codepoint < 0x10000:
        length = 3
    else:
        length = 4

    out = bytearray(length)
    value = codepoint
    for position in range(length - 1, 0, -1):
        out[position] = (value | 0x80) & 0xBF
        value >>= 6
    out[0] = (value | _UTF8_FIRST_BYTES[length]) & 0xFF
    return bytes(out)


def decode_utf16(data: Sequence[int], start: int = 0, replacement: int = 0) -> Decoded:
    """Decode the UTF-16 character beginning at ``data[start]``.

    A high surrogate followed by anything but a low surrogate yields ``replacement``
    and consumes both units; a high surrogate at the very end consumes the rest.
    """
    _check_start(data, start)
    first = data[start] & 0xFFFF
    position = start + 1

    if first not in _HIGH_SURROGATES:
        return Decoded(first, position)

    if position >= len(data):
        return Decoded(replacement, len(data))

    second = data[position]
    position += 1
    if second in _LOW_SURROGATES:
        return Decoded(((first - 0xD800) << 10) + (second - 0xDC00) + 0x10000, position)
    return Decoded(replacement, position)


def encode_utf16(codepoint: int, replacement: int = 0) -> tuple[int, ...]:
    """Encode one code point as one or two UTF-16 units.

    Surrogate code points and values above U+10FFFF become ``replacement``,
    or nothing when it is 0.
    """
    invalid = (replacement & 0xFFFF,) if replacement else ()
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        return invalid
    if codepoint <= 0xFFFF:
        if codepoint in _SURROGATES:
            return invalid
        return (codepoint,)
    value = codepoint - 0x10000
    return ((value >> 10) + 0xD800, (value & 0x3FF) + 0xDC00)


def _ansi_encoding(encoding: Optional[str]) -> str:
    return encoding or locale.getpreferredencoding(False)


def _as_byte(value: Union[int, bytes, bytearray]) -> int:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise ValueError("expected a single byte")
        return value[0]
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


def decode_ansi(byte: Union[int, bytes, bytearray], encoding: Optional[str] = None) -> int:
    """Widen one byte of the locale's (or the given) encoding to a code point.

    A byte the encoding cannot map on its own yields U+FFFD.
    """
    raw = bytes([_as_byte(byte)])
    try:
        text = raw.decode(_ansi_encoding(encoding))
    except UnicodeDecodeError:
        return REPLACEMENT_CHARACTER
    if len(text) != 1:
        return REPLACEMENT_CHARACTER
    return ord(text)


def encode_ansi(codepoint: int, replacement: int = 0, encoding: Optional[str] = None) -> bytes:
    """Narrow a code point to one byte of the locale's (or the given) encoding.

    Always yields one byte: ``replacement`` when the code point has no single-byte form.
    """
    fallback = bytes([_as_byte(replacement)])
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        return fallback
    try:
        encoded = chr(codepoint).encode(_ansi_encoding(encoding))
    except (UnicodeEncodeError, LookupError):
        return fallback
    return encoded if len(encoded) == 1 else fallback


def decode_wide(char: Union[str, int]) -> int:
    """Return the code point of a wide character (a one-character string or an int)."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return char


def encode_wide(codepoint: int, replacement: str = "") -> str:
    """Return the wide character for a code point.

    A value outside the Unicode range becomes ``replacement`` (empty drops it).
    """
    if 0 <= codepoint <= MAX_CODEPOINT:
        return chr(codepoint)
    return replacement