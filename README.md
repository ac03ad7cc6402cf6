# chainprims

Building blocks for blockchain tooling:

- `chainprims.digest`: SHA-256, SHA-512 and RIPEMD-160 digests, computed in one
  step (`sha256`, `sha512`, `ripemd160`) or with a stateful `Hasher`
  (`Hasher.sha256()`, `update`, `finish`).
- `chainprims.mac`: HMAC-SHA256 and HMAC-SHA512 through `SigKey`, `VerifyKey`,
  `Signer`, `sign` and `verify`. Verification compares in constant time, and key
  material is zeroed when the key object is dropped.
- `chainprims.primitives`: the immutable fixed-width integers `U128`, `U256` and
  `U512` (checked arithmetic, wrapping shifts, big- and little-endian bytes, hex),
  `U256.from_f64_lossy`, `U256.to_f64_lossy` and `U256.full_mul`; and the
  fixed-size hashes `H128`, `H160`, `H256` and `H512`, with `H160.from_h256` and
  `H256.from_h160`. A value that does not fit raises `ConversionError`.
- `chainprims.hexcodec`: `0x`-prefixed hex encoding (`to_hex`, `serialize_raw`,
  `serialize_uint`) and decoding (`from_hex`, `deserialize_exact`,
  `deserialize_between`). Decoding errors are `FromHexError` subclasses:
  `MissingPrefixError`, `InvalidHexError` and `InvalidLengthError`.
- `chainprims.bytesref`: `BytesRef`, which writes into a growable `bytearray`
  (`BytesRef.flexible`) or a fixed-size writable buffer (`BytesRef.fixed`), and
  `PrettySlice` / `to_hex` for printing bytes as hex.
- `chainprims.plainhash`: `PlainHasher`, which folds a 32-byte key into a 64-bit
  value with XOR.
- `chainprims.paths`: per-platform configuration directories (`config_path`,
  `config_path_with`, `ethereum_default`, `ethereum_test`,
  `ethereum_with_default`, `ethereum_with_testnet`) and
  `restrict_permissions_owner`, which limits a file's mode to its owner on POSIX
  systems and does nothing elsewhere.

## Installation

```
pip install chainprims
```

## Examples

```python
from chainprims.digest import sha256
from chainprims.mac import SigKey, VerifyKey, sign, verify

digest = sha256(b"hello")

key = b"secret"
signature = sign(SigKey.sha256(key), b"message")
assert verify(VerifyKey.sha256(key), b"message", signature)
```

```python
from chainprims.primitives import U256, H160, H256

assert U256.from_f64_lossy(13.37) == U256(13)
assert U256(255).to_hex() == "0xff"
assert U256.from_hex("0xff") == U256(255)
assert H160.from_h256(H256.zero()) == H160.zero()
```

```python
from chainprims.hexcodec import to_hex, from_hex

assert to_hex(bytes([0, 1, 2]), True) == "0x102"
assert to_hex(bytes([0, 1, 2]), False) == "0x000102"
assert from_hex("0x0102") == bytes([1, 2])
```

```python
from chainprims.bytesref import BytesRef
from chainprims.plainhash import PlainHasher

buffer = bytearray(3)
assert BytesRef.flexible(buffer).write(1, b"\x01\x01\x01") == 3
assert buffer == bytearray([0, 1, 1, 1])

hasher = PlainHasher()
hasher.write(bytes([15]) + bytes([32] * 31))
assert hasher.finish() == 47
```

## What it does not do

The package has no symmetric encryption (no AES modes), no password-based key
derivation (no PBKDF2 or scrypt helpers), no Keccak-256, and no elliptic-curve
keys or signatures. It is a library only and installs no command.

## Running the tests

```
pip install -e ".[test]"
pytest
```