"""Fixed-width unsigned integers (U128, U256, U512) and fixed-size hashes."""

from __future__ import annotations

import functools
import operator
import struct

from chainprims.hexcodec import (
    deserialize_between,
    deserialize_exact,
    serialize_raw,
    serialize_uint,
)

__all__ = [
    "ConversionError",
    "FixedHash",
    "H128",
    "H160",
    "H256",
    "H512",
    "U128",
    "U256",
    "U512",
    "UInt",
]

_U128_MASK = (1 << 128) - 1


class ConversionError(OverflowError):
    """A value does not fit in the target type."""

    def __init__(self, message: str = "overflow") -> None:
        super().__init__(message)


@functools.total_ordering
class UInt:
    """Base of the fixed-width unsigned integer types.

    Subclasses declare their width with ``class U256(UInt, bits=256)``.
    Values are immutable; arithmetic that leaves the range raises
    ``OverflowError`` while shifts discard the bits shifted out.
    """

    BITS = 0
    BYTES = 0
    MAX: "UInt"

    __slots__ = ("_value",)

    def __init_subclass__(cls, bits: int = 0, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if bits:
            cls.BITS = bits
            cls.BYTES = bits // 8
            cls.MAX = cls((1 << bits) - 1)

    def __init__(self, value=0) -> None:
        if not self.BITS:
            raise TypeError("UInt is abstract; use U128, U256 or U512")
        number = operator.index(value)
        if number < 0 or number >> self.BITS:
            raise ConversionError(f"{number} does not fit in {type(self).__name__}")
        self._value = number

    @classmethod
    def zero(cls) -> "UInt":
        return cls(0)

    @classmethod
    def one(cls) -> "UInt":
        return cls(1)

    @classmethod
    def from_big_endian(cls, data: bytes) -> "UInt":
        """Build from at most `BYTES` big-endian bytes."""
        data = bytes(data)
        if len(data) > cls.BYTES:
            raise ConversionError(f"{len(data)} bytes do not fit in {cls.__name__}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_little_endian(cls, data: bytes) -> "UInt":
        """Build from at most `BYTES` little-endian bytes."""
        data = bytes(data)
        if len(data) > cls.BYTES:
            raise ConversionError(f"{len(data)} bytes do not fit in {cls.__name__}")
        return cls(int.from_bytes(data, "little"))

    def to_big_endian(self) -> bytes:
        return self._value.to_bytes(self.BYTES, "big")

    def to_little_endian(self) -> bytes:
        return self._value.to_bytes(self.BYTES, "little")

    def to_hex(self) -> str:
        """0x-prefixed hex with leading zeros trimmed (``0x0`` for zero)."""
        return serialize_uint(self.to_big_endian())

    @classmethod
    def from_hex(cls, text: str) -> "UInt":
        """Parse the form produced by `to_hex`."""
        return cls.from_big_endian(deserialize_between(text, 0, cls.BYTES))

    def bits(self) -> int:
        """Number of significant bits."""
        return self._value.bit_length()

    def is_zero(self) -> bool:
        return self._value == 0

    def low_u64(self) -> int:
        return self._value & ((1 << 64) - 1)

    def low_u128(self) -> int:
        return self._value & _U128_MASK

    def _coerce(self, other) -> int | None:
        if isinstance(other, UInt):
            if type(other) is not type(self):
                return None
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def _checked(self, value: int, op: str) -> "UInt":
        if value < 0 or value >> self.BITS:
            raise OverflowError(f"arithmetic operation '{op}' overflows {type(self).__name__}")
        return type(self)(value)

    def __add__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(self._value + value, "add")

    __radd__ = __add__

    def __sub__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(self._value - value, "sub")

    def __rsub__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(value - self._value, "sub")

    def __mul__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(self._value * value, "mul")

    __rmul__ = __mul__

    def __floordiv__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("division by zero")
        return self._checked(self._value // value, "div")

    def __mod__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("division by zero")
        return self._checked(self._value % value, "rem")

    def _shift_amount(self, other) -> int | None:
        if isinstance(other, UInt):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            if other < 0:
                raise ValueError("negative shift count")
            return other
        return None

    def __lshift__(self, other):
        amount = self._shift_amount(other)
        if amount is None:
            return NotImplemented
        if amount >= self.BITS:
            return type(self)(0)
        return type(self)((self._value << amount) & self.MAX._value)

    def __rshift__(self, other):
        amount = self._shift_amount(other)
        if amount is None:
            return NotImplemented
        return type(self)(self._value >> amount)

    def __and__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(self._value & value, "and")

    __rand__ = __and__

    def __or__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(self._value | value, "or")

    __ror__ = __or__

    def __xor__(self, other):
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        return self._checked(self._value ^ value, "xor")

    __rxor__ = __xor__

    def __invert__(self):
        return type(self)(self.MAX._value ^ self._value)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class U128(UInt, bits=128):
    """128-bit unsigned integer."""

    __slots__ = ()


class U512(UInt, bits=512):
    """512-bit unsigned integer."""

    __slots__ = ()


class U256(UInt, bits=256):
    """256-bit unsigned integer."""

    __slots__ = ()

    @classmethod
    def from_f64_lossy(cls, value: float) -> "U256":
        """Saturating conversion from a float, truncating any fraction.

        NaN and values up to 0 give 0; values above the maximum give MAX.
        """
        value = float(value)
        if not value >= 1.0:
            return cls(0)
        bits = struct.unpack("<Q", struct.pack("<d", value))[0]
        exponent = ((bits >> 52) & 0x7FF) - 1023
        mantissa = (bits & 0x0F_FFFF_FFFF_FFFF) | 0x10_0000_0000_0000
        if exponent <= 52:
            return cls(mantissa >> (52 - exponent))
        if exponent >= 256:
            return cls.MAX
        return cls(mantissa) << (exponent - 52)

    def to_f64_lossy(self) -> float:
        """Lossy conversion to a float."""
        value = self._value
        if value >> 128 == 0:
            res, factor = value, 1.0
        elif value >> 192 == 0:
            res, factor = value >> 64, 2.0**64
        else:
            res, factor = value >> 128, 2.0**128
        return float(res & _U128_MASK) * factor

    def full_mul(self, other: "U256") -> U512:
        """Multiply into a 512-bit result; cannot overflow."""
        if not isinstance(other, U256):
            raise TypeError("full_mul needs a U256")
        return U512(self._value * other._value)


@functools.total_ordering
class FixedHash:
    """Base of the fixed-size hash types.

    Subclasses declare their size with ``class H256(FixedHash, length=32)``.
    """

    LENGTH = 0

    __slots__ = ("_data",)

    def __init_subclass__(cls, length: int = 0, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if length:
            cls.LENGTH = length

    def __init__(self, data: bytes) -> None:
        if not self.LENGTH:
            raise TypeError("FixedHash is abstract; use H128, H160, H256 or H512")
        data = bytes(data)
        if len(data) != self.LENGTH:
            raise ValueError(
                f"{type(self).__name__} needs {self.LENGTH} bytes, got {len(data)}"
            )
        self._data = data

    @classmethod
    def zero(cls) -> "FixedHash":
        return cls(bytes(cls.LENGTH))

    def is_zero(self) -> bool:
        return not any(self._data)

    def to_hex(self) -> str:
        """0x-prefixed hex with two digits per byte."""
        return serialize_raw(self._data)

    @classmethod
    def from_hex(cls, text: str) -> "FixedHash":
        """Parse a 0x-prefixed hex string of exactly `LENGTH` bytes."""
        return cls(deserialize_exact(text, cls.LENGTH))

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return self.LENGTH

    def __getitem__(self, index):
        return self._data[index]

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data < other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()})"


class H128(FixedHash, length=16):
    """Fixed-size hash of 16 bytes."""

    __slots__ = ()


class H512(FixedHash, length=64):
    """Fixed-size hash of 64 bytes."""

    __slots__ = ()


class H160(FixedHash, length=20):
    """Fixed-size hash of 20 bytes."""

    __slots__ = ()

    @classmethod
    def from_h256(cls, value: "H256") -> "H160":
        """Take the last 20 bytes of a 32-byte hash."""
        if not isinstance(value, H256):
            raise TypeError("from_h256 needs an H256")
        return cls(bytes(value)[H256.LENGTH - cls.LENGTH:])


class H256(FixedHash, length=32):
    """Fixed-size hash of 32 bytes."""

    __slots__ = ()

    @classmethod
    def from_h160(cls, value: H160) -> "H256":
        """Place a 20-byte hash in the last 20 bytes, zero-filling the front."""
        if not isinstance(value, H160):
            raise TypeError("from_h160 needs an H160")
        return cls(bytes(cls.LENGTH - H160.LENGTH) + bytes(value))