"""IEEE EUI-48 (MAC address) parsing."""

from enum import Enum
from typing import Optional

EUI48_TEXT_LEN = 17
EUI48_HEX_DIGITS = 12
EUI48_MAX = (1 << 48) - 1

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ParseErrorKind(Enum):
    INVALID_LENGTH = "invalid_length"
    EXPECTED_HYPHEN = "expected_hyphen"


class ParseError(Exception):
    """Raised when a MAC address string is not a valid EUI-48."""

    def __init__(self, kind: ParseErrorKind, position: Optional[int] = None) -> None:
        self.kind = kind
        self.position = position
        if kind is ParseErrorKind.EXPECTED_HYPHEN:
            message = f"expected a hyphen at position {position}"
        else:
            message = "invalid length"
        super().__init__(message)


def parse_eui48(text: str) -> int:
    """
    Parse a textual MAC address into a 48-bit integer.

    Both ``AA-BB-CC-DD-EE-FF`` and ``AA:BB:CC:DD:EE:FF`` are accepted; colons are
    rewritten to hyphens first, so mixed separators parse too.

    Args:
        text: MAC address, exactly 17 characters

    Returns:
        The address as an unsigned integer in [0, 2**48)

    Raises:
        ParseError: INVALID_LENGTH if the string is not 17 characters or does not
            hold exactly 12 hex digits, EXPECTED_HYPHEN (with the 0-indexed
            position) if a separator is missing
    """
    normalized = text.replace(":", "-")

    # lengths are in bytes; any non-ASCII character is a length error
    if not normalized.isascii() or len(normalized) != EUI48_TEXT_LEN:
        raise ParseError(ParseErrorKind.INVALID_LENGTH)

    digits = [c for c in normalized if c in _HEX_DIGITS]
    if len(digits) != EUI48_HEX_DIGITS:
        raise ParseError(ParseErrorKind.INVALID_LENGTH)

    # separators sit after every octet: 2, 5, 8, 11, 14
    for index in range(2, EUI48_TEXT_LEN, 3):
        if normalized[index] != "-":
            raise ParseError(ParseErrorKind.EXPECTED_HYPHEN, index)

    value = 0
    for c in digits:
        value = (value << 4) | int(c, 16)
    return value


def format_eui48(value: int, sep: str = "-") -> str:
    """Render a 48-bit integer as ``AA-BB-CC-DD-EE-FF``."""
    if not 0 <= value <= EUI48_MAX:
        raise ValueError(f"not a 48-bit value: {value!r}")
    return sep.join(f"{(value >> shift) & 0xFF:02X}" for shift in range(40, -8, -8))
