"""One-shot and incremental SHA-256, SHA-512 and RIPEMD-160 digests."""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160


class Hasher:
    """Stateful digest computation; build one with a named constructor."""

    __slots__ = ("_algorithm", "_ctx")

    def __init__(self, algorithm: str, ctx) -> None:
        self._algorithm = algorithm
        self._ctx = ctx

    @classmethod
    def sha256(cls) -> "Hasher":
        return cls("sha256", hashlib.sha256())

    @classmethod
    def sha512(cls) -> "Hasher":
        return cls("sha512", hashlib.sha512())

    @classmethod
    def ripemd160(cls) -> "Hasher":
        return cls("ripemd160", RIPEMD160.new())

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def _context(self):
        if self._ctx is None:
            raise ValueError("hasher has already been finished")
        return self._ctx

    def update(self, data: bytes) -> None:
        """Feed more data into the digest."""
        self._context().update(bytes(data))

    def finish(self) -> bytes:
        """Return the digest; the hasher cannot be used afterwards."""
        result = self._context().digest()
        self._ctx = None
        return result

    def __repr__(self) -> str:
        state = "finished" if self._ctx is None else "open"
        return f"Hasher({self._algorithm}, {state})"


def _single_step(hasher: Hasher, data: bytes) -> bytes:
    hasher.update(data)
    return hasher.finish()


def sha256(data: bytes) -> bytes:
    """Single-step SHA-256 digest."""
    return _single_step(Hasher.sha256(), data)


def sha512(data: bytes) -> bytes:
    """Single-step SHA-512 digest."""
    return _single_step(Hasher.sha512(), data)


def ripemd160(data: bytes) -> bytes:
    """Single-step RIPEMD-160 digest."""
    return _single_step(Hasher.ripemd160(), data)