from .alphabet import ALPHABET, MARK, PAD
from .codec import (
    Decoder,
    Encoder,
    Variant,
    get_decoder,
    get_encoder,
    z85_decode,
    z85_encode,
)
from .error import InvalidCharacter, InvalidLength, Z85Error

__all__ = [
    "ALPHABET",
    "MARK",
    "PAD",
    "Decoder",
    "Encoder",
    "Variant",
    "get_decoder",
    "get_encoder",
    "z85_decode",
    "z85_encode",
    "InvalidCharacter",
    "InvalidLength",
    "Z85Error",
]
