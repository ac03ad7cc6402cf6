"""Byte helpers: hex pretty-printing and writable byte references."""

from __future__ import annotations


class PrettySlice:
    """Wraps bytes so they print as hex; `repr` separates bytes with '·'."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def __str__(self) -> str:
        return self._data.hex()

    def __repr__(self) -> str:
        return "·".join(f"{byte:02x}" for byte in self._data)


def to_hex(data: bytes) -> str:
    """Express the bytes as a lowercase hex string."""
    return str(PrettySlice(data))


class BytesRef:
    """A writable reference to either a growable buffer or a fixed-size slice."""

    __slots__ = ("_buffer", "_flexible")

    def __init__(self, buffer, flexible: bool) -> None:
        self._buffer = buffer
        self._flexible = flexible

    @classmethod
    def flexible(cls, buffer: bytearray) -> "BytesRef":
        """Reference a bytearray that may grow or shrink on write."""
        if not isinstance(buffer, bytearray):
            raise TypeError("a flexible reference needs a bytearray")
        return cls(buffer, True)

    @classmethod
    def fixed(cls, buffer) -> "BytesRef":
        """Reference a writable buffer whose length never changes."""
        view = memoryview(buffer)
        if view.readonly:
            raise TypeError("a fixed reference needs a writable buffer")
        return cls(view.cast("B"), False)

    @property
    def is_flexible(self) -> bool:
        return self._flexible

    def write(self, offset: int, data: bytes) -> int:
        """Write `data` at `offset` and return the number of bytes written.

        A flexible buffer is cut or zero-extended to `offset` first, and the
        padding counts as written; a fixed buffer takes only what fits.
        """
        if offset < 0:
            raise ValueError("offset must not be negative")
        data = bytes(data)
        buffer = self._buffer
        if self._flexible:
            current = len(buffer)
            wrote = len(data) + (0 if current > offset else offset - current)
            if current > offset:
                del buffer[offset:]
            else:
                buffer.extend(bytes(offset - current))
            buffer.extend(data)
            return wrote
        if offset < len(buffer):
            count = min(len(buffer) - offset, len(data))
            buffer[offset:offset + count] = data[:count]
            return count
        return 0

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        result = self._buffer[index]
        return bytes(result) if isinstance(result, memoryview) else result

    def __setitem__(self, index, value) -> None:
        self._buffer[index] = value

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __repr__(self) -> str:
        kind = "flexible" if self._flexible else "fixed"
        return f"BytesRef.{kind}({bytes(self._buffer)!r})"