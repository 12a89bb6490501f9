import struct

import pytest

from fswatchkit.utf16 import Utf16

SAMPLE = "aé€😀z"


def units(text):
    raw = text.encode("utf-16-le")
    return struct.unpack("<%dH" % (len(raw) // 2), raw)


def test_decode_bmp_character():
    data = units("A")
    assert Utf16.decode(data) == (ord("A"), 1)


def test_decode_surrogate_pair():
    data = units("😀x")
    assert Utf16.decode(data) == (ord("😀"), 2)
    assert Utf16.decode(data, 2) == (ord("x"), 3)


def test_decode_unpaired_high_surrogate_at_end():
    data = units("a") + (0xD800,)
    result = Utf16.decode(data, 1, ord("?"))
    assert result.codepoint == ord("?")
    assert result.end == len(data)


def test_decode_high_surrogate_followed_by_non_low():
    data = (0xD800,) + units("bc")
    result = Utf16.decode(data, 0, ord("?"))
    assert result == (ord("?"), 2)


def test_decode_out_of_range_raises():
    with pytest.raises(IndexError):
        Utf16.decode(())


@pytest.mark.parametrize("char", ["A", "é", "€", "\uffff", "😀", "\U0010ffff"])
def test_encode_matches_standard_codec(char):
    assert Utf16.encode(ord(char)) == units(char)


@pytest.mark.parametrize("char", ["A", "€", "😀", "\U0010ffff"])
def test_encode_decode_round_trip(char):
    encoded = Utf16.encode(ord(char))
    assert Utf16.decode(encoded) == (ord(char), len(encoded))


def test_encode_surrogate_is_dropped_or_replaced():
    assert Utf16.encode(0xDC00) == ()
    assert Utf16.encode(0xDC00, ord("?")) == (ord("?"),)


def test_encode_beyond_unicode_range():
    assert Utf16.encode(0x110000) == ()
    assert Utf16.encode(0x110000, ord("?")) == (ord("?"),)


def test_next_advances_over_pairs():
    data = units("😀a")
    assert Utf16.next(data) == 2
    assert Utf16.next(data, 2) == 3


def test_count_characters():
    assert Utf16.count(units(SAMPLE)) == len(SAMPLE)
    assert Utf16.count(()) == 0


def test_from_ansi():
    assert Utf16.from_ansi(b"abc", "ascii") == units("abc")
    assert Utf16.from_ansi("é".encode("cp1252"), "cp1252") == units("é")


def test_from_wide_string():
    assert Utf16.from_wide(SAMPLE) == units(SAMPLE)


def test_from_wide_codepoints():
    assert Utf16.from_wide([ord(c) for c in SAMPLE]) == units(SAMPLE)


def test_from_latin1_copies_bytes():
    text = "héllo"
    assert Utf16.from_latin1(text.encode("latin-1")) == units(text)


def test_to_ansi_with_replacement():
    result = Utf16.to_ansi(units("aé€"), ord("?"), "latin-1")
    assert result == "aé?".encode("latin-1")


def test_to_wide_round_trip():
    assert Utf16.to_wide(units(SAMPLE)) == SAMPLE


def test_to_latin1_replaces_wide_units():
    result = Utf16.to_latin1(units("aé€"), ord("?"))
    assert result == "aé?".encode("latin-1")


def test_to_latin1_replaces_each_surrogate_half():
    result = Utf16.to_latin1(units("😀"), ord("?"))
    assert result == b"??"


def test_to_utf8_matches_standard_codec():
    assert Utf16.to_utf8(units(SAMPLE)) == SAMPLE.encode("utf-8")


def test_to_utf16_copies():
    data = units(SAMPLE)
    assert Utf16.to_utf16(data) == data


def test_to_utf32():
    assert Utf16.to_utf32(units(SAMPLE)) == tuple(ord(c) for c in SAMPLE)


def test_wide_and_utf32_agree():
    data = units(SAMPLE)
    assert tuple(ord(c) for c in Utf16.to_wide(data)) == Utf16.to_utf32(data)