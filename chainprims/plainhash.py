"""A hasher that folds a 32-byte key into 8 bytes with XOR."""

from __future__ import annotations

_KEY_LENGTH = 32


class PlainHasher:
    """Hasher for 32-byte keys that are already uniformly distributed."""

    __slots__ = ("_prefix",)

    def __init__(self) -> None:
        self._prefix = 0

    def write(self, data: bytes) -> None:
        """XOR the four 8-byte lanes of a 32-byte key into the state."""
        data = bytes(data)
        if len(data) != _KEY_LENGTH:
            raise ValueError(f"PlainHasher takes {_KEY_LENGTH}-byte keys, got {len(data)}")
        prefix = self._prefix.to_bytes(8, "little")
        folded = bytes(
            p ^ a ^ b ^ c ^ d
            for p, a, b, c, d in zip(prefix, data[0:8], data[8:16], data[16:24], data[24:32])
        )
        self._prefix = int.from_bytes(folded, "little")

    def finish(self) -> int:
        """Return the 64-bit hash value."""
        return self._prefix

    def __repr__(self) -> str:
        return f"PlainHasher(prefix={self._prefix:#018x})"