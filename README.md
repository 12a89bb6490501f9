# fswatchkit

Unicode conversion at the level of single code points. It converts between
UTF-8, UTF-16, UTF-32, Latin-1, wide characters (Python strings) and the
locale's single-byte ("ANSI") encoding. A replacement value stands in for
anything that cannot be converted. There are no dependencies outside the
standard library.

## Modules

- `fswatchkit.utf_codec` holds the single-character codecs:
  - `decode_utf8` and `encode_utf8`
  - `decode_utf16` and `encode_utf16`
  - `decode_ansi` and `encode_ansi`
  - `decode_wide` and `encode_wide`

  It also defines the `Decoded` named tuple, which holds `codepoint` and `end`, and the constants `MAX_CODEPOINT` and `REPLACEMENT_CHARACTER`.
- `fswatchkit.utf8.Utf8` works on UTF-8 data, given as `bytes` or any sequence of byte values.
- `fswatchkit.utf16.Utf16` works on UTF-16 data, given as a sequence of 16-bit unit values.
- `fswatchkit.utf32.Utf32` works on UTF-32 data, given as a sequence of code points. It also has `decode_ansi`, `decode_wide`, `encode_ansi` and `encode_wide`.

Each of the three classes offers these static methods:

- `decode` and `encode`
- `next` and `count`
- `from_ansi`, `from_wide` and `from_latin1`
- `to_ansi`, `to_wide` and `to_latin1`
- `to_utf8`, `to_utf16` and `to_utf32`

## Behaviour worth knowing

- **Decoders.**
  - The decoders take `(data, start, replacement)` and return `Decoded(codepoint, end)`. `end` is the index just past the units that were read.
  - A `start` outside the data raises `IndexError`.
- **Broken UTF-8.** An incomplete UTF-8 sequence decodes to `replacement` and consumes the rest of the data.
- **Broken UTF-16.**
  - A high surrogate followed by a unit that is not a low surrogate decodes to `replacement`, and both units are consumed.
  - A high surrogate as the last unit decodes to `replacement` and consumes the rest of the data.
- **`encode_utf8`.** Code points above U+10FFFF and high surrogates (U+D800–U+DBFF) become the single byte `replacement`. When `replacement` is 0 they are dropped.
- **`encode_utf16`.** Code points in the surrogate range and values above U+10FFFF become `replacement`. When `replacement` is 0 they are dropped.
- **The locale's encoding.**
  - The ANSI functions use `locale.getpreferredencoding(False)` unless an `encoding` is given.
  - `decode_ansi` yields U+FFFD for a byte that does not map to one character.
  - `encode_ansi` always yields exactly one byte. That byte is `replacement` when the code point has no single-byte form.
- **Latin-1 from UTF-8 and UTF-32.** `to_latin1` on `Utf8` and `Utf32` replaces code points above U+00FF.
- **Latin-1 from UTF-16.** `Utf16.to_latin1` works unit by unit, so both halves of a surrogate pair are replaced.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from fswatchkit.utf8 import Utf8
from fswatchkit.utf16 import Utf16
from fswatchkit.utf32 import Utf32

units = Utf8.to_utf16("héllo €".encode("utf-8"))
print(Utf16.count(units))                       # 7
print(Utf16.to_utf8(units).decode("utf-8"))     # héllo €

print(Utf8.decode(b"\xc3\xa9x"))                # Decoded(codepoint=233, end=2)
print(Utf8.to_latin1(b"\xc3\xa9"))              # b'\xe9'
print(Utf32.to_utf8((0x48, 0x1F600)))           # b'H\xf0\x9f\x98\x80'
print(Utf16.encode(0x1F600))                    # (55357, 56832)
```

## What this package does not do

This package does not watch directories and does not deliver file events. It
has no listener interface and no error log. It does not provide threads or
locks, file system queries or a command-line program. It provides only the
Unicode conversion described above.