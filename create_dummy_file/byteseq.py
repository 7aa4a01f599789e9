"""Parse byte sequences typed as decimal or hexadecimal digits.

Bytes may be separated by almost any ASCII punctuation or whitespace, so
"12,34,56", "12.34.56" and "12 34 56" are all the same three bytes. Without
separators a new byte starts every three decimal (or two hex) digits, so
"012034056" and "0c2238" also work.
"""

_BYTE_MAX = 0xFF
_DECIMAL_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"


def _is_separator(ch: str) -> bool:
    # ASCII punctuation, whitespace and control characters
    return ch.isascii() and not ch.isalnum()


def _parse_digits(text: str, digits: str, base: int, width: int) -> bytes | None:
    result = bytearray()
    value = 0
    count = 0
    for ch in text:
        if ch in digits:
            value = value * base + int(ch, base)
            count += 1
        elif _is_separator(ch):
            if count > 0:
                count = width
        else:
            return None

        if count >= width:
            if value > _BYTE_MAX:
                return None
            result.append(value)
            value = count = 0

    # Trailing partial byte, too short to overflow
    if count > 0:
        result.append(value)
    return bytes(result)


def parse_decimal_bytes(text: str) -> bytes | None:
    """Return the bytes in ``text`` (values 0 to 255), or None if malformed.

    Empty input, or input with only separators, gives ``b""``.
    """
    return _parse_digits(text, _DECIMAL_DIGITS, 10, 3)


def parse_hex_bytes(text: str) -> bytes | None:
    """Return the bytes in ``text`` (hex 00 to FF), or None if malformed."""
    return _parse_digits(text, _HEX_DIGITS, 16, 2)
