"""Test decimal and hexadecimal byte sequence parsing."""

import pytest

from create_dummy_file.byteseq import parse_decimal_bytes, parse_hex_bytes


class TestParseHexBytes:
    """Test parse_hex_bytes."""

    def test_separated(self):
        assert parse_hex_bytes("ff,00,a1") == b"\xff\x00\xa1"

    def test_fixed_width(self):
        """Test every two digits form a byte when there are no separators."""
        assert parse_hex_bytes("ff00a1") == b"\xff\x00\xa1"

    def test_empty(self):
        """Test empty input gives no bytes rather than an error."""
        assert parse_hex_bytes("") == b""

    def test_only_separators(self):
        assert parse_hex_bytes(" ,.;-") == b""

    def test_invalid_letter(self):
        assert parse_hex_bytes("zz") is None

    def test_invalid_after_valid_bytes(self):
        assert parse_hex_bytes("ff,00,g1") is None

    def test_non_ascii(self):
        assert parse_hex_bytes("ffé") is None

    def test_case_insensitive(self):
        assert parse_hex_bytes("FF,Ab,cD") == b"\xff\xab\xcd"

    def test_single_digit_closed_by_separator(self):
        """Test a separator closes a byte before it has two digits."""
        assert parse_hex_bytes("f,f") == b"\x0f\x0f"
        assert parse_hex_bytes("1:2:3") == b"\x01\x02\x03"

    def test_trailing_partial_byte(self):
        assert parse_hex_bytes("abc") == b"\xab\x0c"
        assert parse_hex_bytes("f") == b"\x0f"

    @pytest.mark.parametrize("text", ["30 31 32", "30.31.32", "30-31-32", "[30][31][32]", "30\t31\n32"])
    def test_separator_styles(self, text):
        assert parse_hex_bytes(text) == b"012"


class TestParseDecimalBytes:
    """Test parse_decimal_bytes."""

    def test_separated(self):
        assert parse_decimal_bytes("255,0,128") == bytes([255, 0, 128])

    def test_overflow(self):
        assert parse_decimal_bytes("256") is None
        assert parse_decimal_bytes("999") is None
        assert parse_decimal_bytes("1,256") is None

    def test_trailing_partial_byte(self):
        assert parse_decimal_bytes("12") == bytes([12])
        assert parse_decimal_bytes("1234") == bytes([123, 4])

    def test_fixed_width(self):
        """Test every three digits form a byte when there are no separators."""
        assert parse_decimal_bytes("012034056") == bytes([12, 34, 56])

    def test_mixed_separators(self):
        assert parse_decimal_bytes("12 34.56/7") == bytes([12, 34, 56, 7])

    def test_empty(self):
        assert parse_decimal_bytes("") == b""
        assert parse_decimal_bytes(",,,") == b""

    def test_letters_rejected(self):
        """Test hex digits are not accepted as decimal."""
        assert parse_decimal_bytes("1a") is None
        assert parse_decimal_bytes("ff") is None

    def test_boundaries(self):
        assert parse_decimal_bytes("0") == b"\x00"
        assert parse_decimal_bytes("000255") == b"\x00\xff"
