import pytest

base58 = pytest.importorskip("base58")

try:
    import libnacl  # noqa: F401
except (ImportError, OSError):  # libsodium missing
    pytest.skip("libsodium is not available", allow_module_level=True)

from z85_codec import ALPHABET, InvalidLength, z85_decode
from z85_codec.keys import (
    KEY_SIZE,
    Z85_KEY_SIZE,
    create_curve_keypair,
    create_server_keys,
    curve_public,
    decode_key,
    verkey_to_curve,
)


def test_curve_keypair():
    public, secret = create_curve_keypair()
    assert len(public) == len(secret) == Z85_KEY_SIZE
    assert set(public + secret) <= set(ALPHABET)
    assert curve_public(secret) == public
    assert curve_public(z85_decode(secret)) == public


def test_decode_key():
    public, _ = create_curve_keypair()
    raw = decode_key(public)
    assert len(raw) == KEY_SIZE
    assert decode_key(raw) == raw
    assert decode_key(bytearray(raw)) == raw
    assert decode_key(memoryview(raw)) == raw
    assert decode_key(public.encode("ascii")) == raw
    with pytest.raises(InvalidLength):
        decode_key(public[:-5])
    with pytest.raises(InvalidLength):
        decode_key(raw[:-1])


def test_server_keys():
    seed = bytes(range(32))
    (verkey, sigkey), (public, secret) = create_server_keys(seed)
    assert len(base58.b58decode(verkey)) == KEY_SIZE
    assert len(sigkey) == 64
    assert verkey_to_curve(verkey) == public
    assert curve_public(secret) == public
    assert create_server_keys(seed)[1] == (public, secret)


def test_verkey_length():
    with pytest.raises(InvalidLength):
        verkey_to_curve(base58.b58encode(bytes(16)).decode("ascii"))
