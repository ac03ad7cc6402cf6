"""Digests, HMAC, fixed-width integers, fixed-size hashes, hex codecs and byte helpers."""

__version__ = "0.1.0"

__all__ = [
    "bytesref",
    "digest",
    "hexcodec",
    "mac",
    "paths",
    "plainhash",
    "primitives",
]