"""HMAC-SHA256 and HMAC-SHA512 signing and verification."""

from __future__ import annotations

import hmac

_SHA256 = "sha256"
_SHA512 = "sha512"


class _Key:
    """Key material bound to a hash; wiped from memory when dropped."""

    __slots__ = ("_algorithm", "_material")

    def __init__(self, algorithm: str, key: bytes) -> None:
        self._algorithm = algorithm
        self._material = bytearray(key)

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._algorithm == other._algorithm and hmac.compare_digest(
            bytes(self._material), bytes(other._material)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._algorithm})"

    def __del__(self) -> None:
        material = getattr(self, "_material", None)
        if material is not None:
            material[:] = bytes(len(material))


class SigKey(_Key):
    """HMAC signing key."""

    __slots__ = ()

    @classmethod
    def sha256(cls, key: bytes) -> "SigKey":
        return cls(_SHA256, key)

    @classmethod
    def sha512(cls, key: bytes) -> "SigKey":
        return cls(_SHA512, key)


class VerifyKey(_Key):
    """HMAC verification key."""

    __slots__ = ()

    @classmethod
    def sha256(cls, key: bytes) -> "VerifyKey":
        return cls(_SHA256, key)

    @classmethod
    def sha512(cls, key: bytes) -> "VerifyKey":
        return cls(_SHA512, key)


class Signer:
    """Stateful HMAC computation over data fed in pieces."""

    __slots__ = ("_mac",)

    def __init__(self, key: SigKey) -> None:
        if not isinstance(key, SigKey):
            raise TypeError("Signer needs a SigKey")
        self._mac = hmac.new(bytes(key._material), digestmod=key._algorithm)

    def update(self, data: bytes) -> None:
        if self._mac is None:
            raise ValueError("signer has already produced its signature")
        self._mac.update(bytes(data))

    def sign(self) -> bytes:
        """Return the signature; the signer cannot be used afterwards."""
        if self._mac is None:
            raise ValueError("signer has already produced its signature")
        result = self._mac.digest()
        self._mac = None
        return result


def sign(key: SigKey, data: bytes) -> bytes:
    """Compute the HMAC signature of `data`."""
    signer = Signer(key)
    signer.update(data)
    return signer.sign()


def verify(key: VerifyKey, data: bytes, signature: bytes) -> bool:
    """Check in constant time that `signature` is the HMAC of `data`."""
    if not isinstance(key, VerifyKey):
        raise TypeError("verify needs a VerifyKey")
    expected = hmac.new(bytes(key._material), bytes(data), digestmod=key._algorithm).digest()
    return hmac.compare_digest(expected, bytes(signature))