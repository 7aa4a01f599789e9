"""File size parsing: decimal digits with an optional binary-unit suffix."""

import re

from .errors import InvalidSizeError

# Largest size a signed 64-bit file offset can hold
MAX_FILE_SIZE = 2**63 - 1
_MAX_DIGITS = len(str(MAX_FILE_SIZE))

_SIZE_PATTERN = re.compile(
    r"\s*([0-9]+)\s*(|b|k|kb|kib|m|mb|mib|g|gb|gib|t|tb|tib|p|pb|pib|e|eb|eib)\s*",
    re.IGNORECASE,
)

# Keyed on the first letter of the suffix
_SCALES: dict[str, int] = {
    "": 1,
    "b": 1,
    "k": 1 << 10,
    "m": 1 << 20,
    "g": 1 << 30,
    "t": 1 << 40,
    "p": 1 << 50,
    "e": 1 << 60,
}


def parse_size(text: str) -> int:
    """Return the number of bytes described by ``text``.

    Accepted examples: "512", "32k", "32 KB", "1MiB", "4g". Suffixes use
    binary prefixes, so "1k" is 1024 bytes. Raises InvalidSizeError for bad
    syntax or a result larger than MAX_FILE_SIZE.
    """
    match = _SIZE_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidSizeError(text)

    # Leading zeros don't count; longer digit runs can't fit before int()
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise InvalidSizeError(text)
    number = int(digits)
    scale = _SCALES[match.group(2)[:1].lower()]

    # Check before multiplying so an oversized request never wraps
    if number > MAX_FILE_SIZE // scale:
        raise InvalidSizeError(text)
    return number * scale
