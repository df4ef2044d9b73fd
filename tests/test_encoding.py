from __future__ import annotations

import pytest

from qrforge.encoding import (
    MODE_ALPHANUMERIC,
    MODE_BYTE,
    MODE_NUMERIC,
    build_data_codewords,
    character_count_bits,
    detect_mode,
    encoded_bit_length,
    select_encoding,
)
from qrforge.exceptions import EmptyTextError, EncodingModeError, InvalidECLevelError, TextTooLongError
from qrforge.tables import EC_LEVELS, data_codewords


@pytest.mark.parametrize(
    "text, mode",
    [
        ("0123456789", MODE_NUMERIC),
        ("HELLO WORLD", MODE_ALPHANUMERIC),
        ("HTTPS://EXAMPLE.COM/$%*+-", MODE_ALPHANUMERIC),
        ("Hello", MODE_BYTE),
        ("https://example.com", MODE_BYTE),
        ("안녕하세요", MODE_BYTE),
        ("٣٤٥", MODE_BYTE),
    ],
)
def test_detect_mode(text: str, mode: int) -> None:
    assert detect_mode(text) == mode


def test_character_count_bits_tiers() -> None:
    assert character_count_bits(MODE_NUMERIC, 9) == 10
    assert character_count_bits(MODE_NUMERIC, 10) == 12
    assert character_count_bits(MODE_ALPHANUMERIC, 1) == 9
    assert character_count_bits(MODE_ALPHANUMERIC, 26) == 11
    assert character_count_bits(MODE_BYTE, 9) == 8
    assert character_count_bits(MODE_BYTE, 10) == 16
    assert character_count_bits(MODE_BYTE, 27) == 16


def test_encoded_bit_length() -> None:
    # 4 + 10 + 2 * 10 + 7
    assert encoded_bit_length("01234567", MODE_NUMERIC, 1) == 41
    # 4 + 9 + 5 * 11 + 6
    assert encoded_bit_length("HELLO WORLD", MODE_ALPHANUMERIC, 1) == 74
    # each hangul syllable is three UTF-8 bytes
    assert encoded_bit_length("안녕", MODE_BYTE, 1) == 4 + 8 + 48


def test_numeric_codewords() -> None:
    assert build_data_codewords("01234567", MODE_NUMERIC, 1, "M") == [
        16, 32, 12, 86, 97, 128, 236, 17, 236, 17, 236, 17, 236, 17, 236, 17,
    ]


def test_alphanumeric_codewords() -> None:
    assert build_data_codewords("HELLO WORLD", MODE_ALPHANUMERIC, 1, "M") == [
        32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17,
    ]


def test_byte_codewords() -> None:
    codewords = build_data_codewords("Hi", MODE_BYTE, 1, "L")
    # 0100 00000010 01001000 01101001 0000
    assert codewords[:4] == [0x40, 0x24, 0x86, 0x90]
    assert codewords[4:8] == [236, 17, 236, 17]
    assert len(codewords) == 19


@pytest.mark.parametrize("ec_level", EC_LEVELS)
@pytest.mark.parametrize("version", range(1, 11))
def test_codewords_fill_capacity_exactly(version: int, ec_level: str) -> None:
    codewords = build_data_codewords("A1", MODE_ALPHANUMERIC, version, ec_level)
    assert len(codewords) == data_codewords(version, ec_level)
    assert all(0 <= codeword <= 255 for codeword in codewords)


def test_full_capacity_has_no_padding() -> None:
    # 17 bytes fill version 1-L up to 148 of 152 bits, so only the terminator follows
    codewords = build_data_codewords("a" * 17, MODE_BYTE, 1, "L")
    assert len(codewords) == 19
    assert codewords[-1] == (ord("a") & 0x0F) << 4


def test_select_encoding_picks_smallest_version() -> None:
    assert select_encoding("Hi", "L") == (MODE_BYTE, 1)
    assert select_encoding("a" * 17, "L") == (MODE_BYTE, 1)
    assert select_encoding("a" * 18, "L") == (MODE_BYTE, 2)
    assert select_encoding("1" * 17, "H") == (MODE_NUMERIC, 1)
    assert select_encoding("1" * 18, "H") == (MODE_NUMERIC, 2)


def test_numeric_text_needs_fewer_versions_than_bytes() -> None:
    digits = "1" * 40
    assert select_encoding(digits, "M") == (MODE_NUMERIC, 2)
    assert select_encoding(digits, "M", MODE_BYTE) == (MODE_BYTE, 3)


def test_select_encoding_rejects_invalid_level() -> None:
    with pytest.raises(InvalidECLevelError, match="Invalid EC level"):
        select_encoding("Test", "X")


def test_select_encoding_rejects_long_text() -> None:
    with pytest.raises(TextTooLongError, match="too long"):
        select_encoding("a" * 300, "H")


def test_select_encoding_rejects_empty_text() -> None:
    with pytest.raises(EmptyTextError):
        select_encoding("", "M")


def test_mode_hint_must_fit_text() -> None:
    with pytest.raises(EncodingModeError):
        select_encoding("abc", "M", MODE_NUMERIC)
    with pytest.raises(EncodingModeError):
        select_encoding("abc", "M", 0b1000)
    assert select_encoding("123", "M", MODE_ALPHANUMERIC) == (MODE_ALPHANUMERIC, 1)


def test_mode_hint_rejects_booleans() -> None:
    with pytest.raises(EncodingModeError):
        select_encoding("123", "M", True)
