import pytest

from chainprims.mac import SigKey, Signer, VerifyKey, sign, verify


def test_simple_mac_and_verify():
    data = b"Some bytes"
    big_input = bytes([7]) * 2000
    key1 = bytes([3]) * 64
    key2 = bytes([4]) * 128

    sig_key1 = SigKey.sha256(key1)
    sig_key2 = SigKey.sha512(key2)
    signer1 = Signer(sig_key1)
    signer2 = Signer(sig_key2)

    signer1.update(data)
    chunks = len(big_input) // 33
    for i in range(chunks):
        signer2.update(big_input[i * 33:(i + 1) * 33])
    signer2.update(big_input[chunks * 33:])

    sig1 = signer1.sign()
    assert list(sig1) == [
        223, 208, 90, 69, 144, 95, 145, 180, 56, 155, 78, 40, 86, 238, 205, 81, 160, 245, 88, 145, 164, 67, 254,
        180, 202, 107, 93, 249, 64, 196, 86, 225,
    ]
    sig2 = signer2.sign()
    assert list(sig2) == [
        29, 63, 46, 122, 27, 5, 241, 38, 86, 197, 91, 79, 33, 107, 152, 195, 118, 221, 117, 119, 84, 114, 46, 65,
        243, 157, 105, 12, 147, 176, 190, 37, 210, 164, 152, 8, 58, 243, 59, 206, 80, 10, 230, 197, 255, 110, 191,
        180, 93, 22, 255, 0, 99, 79, 237, 229, 209, 199, 125, 83, 15, 179, 134, 89,
    ]
    assert sig1 == sign(sig_key1, data)
    assert sig2 == sign(sig_key2, big_input)
    assert verify(VerifyKey.sha256(key1), data, sig1)
    assert verify(VerifyKey.sha512(key2), big_input, sig2)


def _h(text):
    return bytes.fromhex("".join(text.split()))


IETF_VECTORS = [
    (
        _h("0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b"),
        _h("4869205468657265"),
        "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7",
        "87aa7cdea5ef619d4ff0b4241a1d6cb02379f4e2ce4ec2787ad0b30545e17cde"
        "daa833b7d6b8a702038b274eaea3f4e4be9d914eeb61f1702e696c203a126854",
    ),
    (
        _h("4a656665"),
        _h("7768617420646f2079612077616e7420666f72206e6f7468696e673f"),
        "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843",
        "164b7a7bfcf819e2e395fbe73b56e0a387bd64222e831fd610270cd7ea250554"
        "9758bf75c05a994a6d034f65f8f0e6fdcaeab1a34d4a6b4b636e070a38bce737",
    ),
    (
        bytes([0xAA]) * 20,
        bytes([0xDD]) * 50,
        "773ea91e36800e46854db8ebd09181a72959098b3ef8c122d9635514ced565fe",
        "fa73b0089d56a284efb0f0756c890be9b1b5dbdd8ee81a3655f83e33b2279d39"
        "bf3e848279a722c806b485a47e67c807b946a337bee8942674278859e13292fb",
    ),
    (
        _h("0102030405060708090a0b0c0d0e0f10111213141516171819"),
        bytes([0xCD]) * 50,
        "82558a389a443c0ea4cc819899f2083a85f0faa3e578f8077a2e3ff46729665b",
        "b0ba465637458c6990e5a8c5f61d4af7e576d97ff94b872de76f8050361ee3db"
        "a91ca5c11aa25eb4d679275cc5788063a5f19741120c4f2de2adebeb10a298dd",
    ),
    (
        bytes([0xAA]) * 131,
        b"Test Using Larger Than Block-Size Key - Hash Key First",
        "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54",
        "80b24263c7c1a3ebb71493c1dd7be8b49b46d1f41b4aeec1121b013783f8f352"
        "6b56d037e05f2598bd0fd2215d6a1e5295e64f73f63f0aec8b915a985d786598",
    ),
    (
        bytes([0xAA]) * 131,
        b"This is a test using a larger than block-size key and a larger than block-size data."
        b" The key needs to be hashed before being used by the HMAC algorithm.",
        "9b09ffa71b942fcb27635fbcd5b0e944bfdc63644f0713938a7f51535c3a35e2",
        "e37b6a775dc87dbaa4dfa9f96e5e3ffddebd71f8867289865df5a32d20cdc944"
        "b6022cac3c4982b10d5eeb55c3e4de15134676fb6de0446065c97440fa8c6a58",
    ),
]


@pytest.mark.parametrize("key, data, expected_256, expected_512", IETF_VECTORS)
def test_ietf_vectors(key, data, expected_256, expected_512):
    for sig_factory, verify_factory, expected in (
        (SigKey.sha256, VerifyKey.sha256, expected_256),
        (SigKey.sha512, VerifyKey.sha512, expected_512),
    ):
        sig_key = sig_factory(key)
        signer = Signer(sig_key)
        signer.update(data)
        signature = signer.sign()
        assert signature.hex() == expected
        assert signature == sign(sig_key, data)
        assert verify(verify_factory(key), data, signature)


def test_verify_rejects_tampered_input():
    key = bytes([3]) * 64
    signature = sign(SigKey.sha256(key), b"Some bytes")
    assert not verify(VerifyKey.sha256(key), b"Some bytez", signature)
    assert not verify(VerifyKey.sha256(key), b"Some bytes", signature[:-1])
    assert not verify(VerifyKey.sha512(key), b"Some bytes", signature)


def test_keys_are_not_interchangeable():
    key = bytes([1]) * 16
    with pytest.raises(TypeError):
        Signer(VerifyKey.sha256(key))
    with pytest.raises(TypeError):
        verify(SigKey.sha256(key), b"data", b"")


def test_signer_is_single_use():
    signer = Signer(SigKey.sha512(b"k"))
    signer.update(b"data")
    signer.sign()
    with pytest.raises(ValueError):
        signer.sign()
    with pytest.raises(ValueError):
        signer.update(b"more")


def test_key_equality():
    assert SigKey.sha256(b"k") == SigKey.sha256(b"k")
    assert SigKey.sha256(b"k") != SigKey.sha512(b"k")
    assert SigKey.sha256(b"k") != SigKey.sha256(b"j")