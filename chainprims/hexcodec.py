"""0x-prefixed hex encoding and decoding for byte strings and integers."""

from __future__ import annotations

__all__ = [
    "FromHexError",
    "InvalidHexError",
    "InvalidLengthError",
    "MissingPrefixError",
    "deserialize_between",
    "deserialize_exact",
    "from_hex",
    "serialize_raw",
    "serialize_uint",
    "to_hex",
]

_PREFIX = "0x"
_WHITESPACE = frozenset(b" \r\n\t")


class FromHexError(ValueError):
    """Decoding a hex string failed."""


class MissingPrefixError(FromHexError):
    """The `0x` prefix is missing."""

    def __init__(self) -> None:
        super().__init__("0x prefix is missing")


class InvalidHexError(FromHexError):
    """A non-hex character was found."""

    def __init__(self, character: str, index: int) -> None:
        self.character = character
        self.index = index
        super().__init__(f"invalid hex character: {character}, at {index}")


class InvalidLengthError(FromHexError):
    """The hex string does not have an acceptable length."""

    def __init__(self, length: int, expected: str) -> None:
        self.length = length
        self.expected = expected
        super().__init__(
            f"invalid length {length}, expected a 0x-prefixed hex string with {expected}"
        )


def _to_hex_raw(data: bytes, skip_leading_zero: bool) -> str:
    digits = data.hex()
    if skip_leading_zero and digits.startswith("0"):
        digits = digits[1:]
    return _PREFIX + digits


def serialize_raw(data: bytes) -> str:
    """Encode bytes as a 0x-prefixed hex string, two digits per byte."""
    data = bytes(data)
    if not data:
        return _PREFIX
    return _to_hex_raw(data, False)


def serialize_uint(data: bytes) -> str:
    """Encode big-endian integer bytes as hex with all leading zeros trimmed."""
    data = bytes(data).lstrip(b"\x00")
    if not data:
        return "0x0"
    return _to_hex_raw(data, True)


def to_hex(data: bytes, skip_leading_zero: bool) -> str:
    """Encode bytes as a 0x-prefixed hex string.

    With `skip_leading_zero` leading zeros are dropped and empty input gives
    ``0x0``; without it empty input gives ``0x``.
    """
    return serialize_uint(data) if skip_leading_zero else serialize_raw(data)


def _decode_into(raw: bytes, buffer: bytearray) -> int:
    """Decode the hex digits after the prefix into `buffer`; return bytes written."""
    modulus = (len(raw) - 2) % 2
    buf = 0
    pos = 0
    for index in range(2, len(raw)):
        byte = raw[index]
        if byte in _WHITESPACE:
            continue
        if 0x30 <= byte <= 0x39:
            nibble = byte - 0x30
        elif 0x61 <= byte <= 0x66:
            nibble = byte - 0x61 + 10
        elif 0x41 <= byte <= 0x46:
            nibble = byte - 0x41 + 10
        else:
            raise InvalidHexError(chr(byte), index)
        buf = ((buf << 4) & 0xFF) | nibble
        modulus += 1
        if modulus == 2:
            modulus = 0
            buffer[pos] = buf
            pos += 1
    return pos


def _encoded(text: str) -> bytes:
    if not text.startswith(_PREFIX):
        raise MissingPrefixError()
    return text.encode("utf-8")


def from_hex(text: str) -> bytes:
    """Decode a 0x-prefixed hex string; an odd digit count pads the first byte."""
    raw = _encoded(text)
    buffer = bytearray((len(raw) - 1) // 2)
    _decode_into(raw, buffer)
    return bytes(buffer)


def deserialize_exact(text: str, length: int) -> bytes:
    """Decode a hex string that must encode exactly `length` bytes."""
    raw = _encoded(text)
    if len(raw) != 2 * length + 2:
        raise InvalidLengthError(len(raw) - 2, f"length of {length * 2}")
    buffer = bytearray(length)
    _decode_into(raw, buffer)
    return bytes(buffer)


def deserialize_between(text: str, minimum: int, maximum: int) -> bytes:
    """Decode a hex string encoding more than `minimum` and at most `maximum` bytes."""
    raw = _encoded(text)
    if not (2 * minimum + 2 < len(raw) <= 2 * maximum + 2):
        raise InvalidLengthError(
            len(raw) - 2, f"length between ({minimum * 2}; {maximum * 2}]"
        )
    buffer = bytearray(maximum)
    written = _decode_into(raw, buffer)
    return bytes(buffer[:written])