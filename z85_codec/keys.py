"""CurveZMQ keys as Z85 text, the format used by ZMTP metadata and zmq_curve_keypair."""

from typing import Tuple, Union

import base58

import libnacl as nacl

from .codec import z85_decode, z85_encode
from .error import InvalidLength

KEY_SIZE = 32
Z85_KEY_SIZE = 40


def decode_key(key: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if not isinstance(key, str):
        key = bytes(key)
        if len(key) == KEY_SIZE:
            return key
    if len(key) != Z85_KEY_SIZE:
        raise InvalidLength(
            f"key must be {Z85_KEY_SIZE} Z85 characters or {KEY_SIZE} bytes",
            len(key),
            Z85_KEY_SIZE,
        )
    return z85_decode(key)


def create_curve_keypair() -> Tuple[str, str]:
    pk, sk = nacl.crypto_box_keypair()
    return z85_encode(pk), z85_encode(sk)


def curve_public(secret: Union[str, bytes]) -> str:
    return z85_encode(nacl.crypto_scalarmult_base(decode_key(secret)))


def verkey_to_curve(verkey: str) -> str:
    verkey = base58.b58decode(verkey)
    if len(verkey) != KEY_SIZE:
        raise InvalidLength(
            f"verkey must decode to {KEY_SIZE} bytes", len(verkey), KEY_SIZE
        )
    return z85_encode(nacl.crypto_sign_ed25519_pk_to_curve25519(verkey))


def create_server_keys(
    seed: bytes = None,
) -> Tuple[Tuple[str, bytes], Tuple[str, str]]:
    if seed is None:
        verkey, sk = nacl.crypto_sign_keypair()
    else:
        verkey, sk = nacl.crypto_sign_seed_keypair(seed)
    curve_pk = nacl.crypto_sign_ed25519_pk_to_curve25519(verkey)
    curve_sk = nacl.crypto_sign_ed25519_sk_to_curve25519(sk)
    return (
        (base58.b58encode(verkey).decode("ascii"), sk),
        (z85_encode(curve_pk), z85_encode(curve_sk)),
    )
