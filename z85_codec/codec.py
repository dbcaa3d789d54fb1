"""
Z85 encoding, as specified by ZeroMQ RFC 32: https://rfc.zeromq.org/spec/32/

Three variants are provided, differing only in how a source that is not a
whole number of blocks (4 bytes / 5 characters) is handled:

DEFAULT
    The trailing partial block is zero-extended and encoded, then the digits
    that only describe the zero padding are replaced with ``~`` marks. The
    decoder reads the marks back and returns exactly the encoded bytes.
STRICT
    Plain RFC 32. Sources of the wrong length are rejected.
PADDED
    Sources are padded (zero bytes when encoding, ``0`` characters when
    decoding) up to a whole number of blocks. The original length is lost.
"""

import struct

from enum import Enum
from typing import Union

from .alphabet import INVALID, MAP_DECODE, MAP_ENCODE, MARK, PAD, TOP
from .error import InvalidCharacter, InvalidLength

BytesLike = Union[bytes, bytearray, memoryview, str]
TextLike = Union[str, bytes, bytearray, memoryview]


class Variant(Enum):
    DEFAULT = "default"
    STRICT = "strict"
    PADDED = "padded"


def _encode_blocks(msg: bytes) -> bytearray:
    buf = bytearray(len(msg) * 5 // 4)
    idx = 4
    for (val,) in struct.iter_unpack(">L", msg):
        for _ in range(4):
            buf[idx] = MAP_ENCODE[val % 85]
            idx -= 1
            val //= 85
        buf[idx] = MAP_ENCODE[val]
        idx += 9
    return buf


def _decode_blocks(msg: str, offset: int = 0) -> bytearray:
    buf = bytearray(len(msg) * 4 // 5)
    copy_to = 0
    for start in range(0, len(msg), 5):
        window = msg[start : start + 5]
        val = 0
        for char in window:
            code = ord(char)
            digit = MAP_DECODE[code] if code < 128 else INVALID
            if digit == INVALID:
                raise InvalidCharacter(window, offset + start)
            val = val * 85 + digit
        copy_next = copy_to + 4
        # out of range blocks such as "#####" wrap, as in other Z85 codecs
        buf[copy_to:copy_next] = (val & 0xFFFFFFFF).to_bytes(4, "big")
        copy_to = copy_next
    return buf


class Encoder:
    """Encodes bytes into Z85 text using one of the :class:`Variant` policies."""

    __slots__ = ("_variant",)

    def __init__(self, variant: Variant):
        self._variant = variant

    @property
    def variant(self) -> Variant:
        return self._variant

    def encode(self, msg: BytesLike) -> str:
        if isinstance(msg, str):
            msg = msg.encode("utf-8")
        elif not isinstance(msg, bytes):
            # raw buffer contents, whatever the item format
            msg = bytes(msg)
        remainder = len(msg) % 4
        if remainder:
            if self._variant is Variant.STRICT:
                raise InvalidLength(
                    "source length must be a multiple of 4", len(msg), 4
                )
            msg += bytes(4 - remainder)
        buf = _encode_blocks(msg)
        if remainder and self._variant is Variant.DEFAULT:
            marks = 4 - remainder
            buf[-marks:] = MARK.encode("ascii") * marks
        return buf.decode("ascii")

    def __repr__(self) -> str:
        return f"<Encoder {self._variant.value}>"


class Decoder:
    """Decodes Z85 text into bytes using one of the :class:`Variant` policies."""

    __slots__ = ("_variant",)

    def __init__(self, variant: Variant):
        self._variant = variant

    @property
    def variant(self) -> Variant:
        return self._variant

    def decode(self, msg: TextLike) -> bytes:
        if not isinstance(msg, str):
            # one character per byte, so bytes >= 0x80 stay invalid
            msg = bytes(msg).decode("latin-1")
        remainder = len(msg) % 5
        if self._variant is Variant.STRICT:
            if remainder:
                raise InvalidLength(
                    "source length must be a multiple of 5", len(msg), 5
                )
            return bytes(_decode_blocks(msg))
        if self._variant is Variant.PADDED:
            if remainder:
                msg += PAD * (5 - remainder)
            return bytes(_decode_blocks(msg))
        if remainder:
            return self._decode_trailing_marks(msg, remainder)
        return self._decode_marked_block(msg)

    @staticmethod
    def _decode_marked_block(msg: str) -> bytes:
        marks = len(msg) - len(msg.rstrip(MARK))
        if not marks:
            return bytes(_decode_blocks(msg))
        start = len(msg) - 5
        if marks > 3:
            raise InvalidCharacter(msg[start:], start)
        try:
            buf = _decode_blocks(msg[:-marks] + TOP * marks)
        except InvalidCharacter as ex:
            if ex.position != start:
                raise
            raise InvalidCharacter(msg[start:], start) from None
        return bytes(buf[:-marks])

    @staticmethod
    def _decode_trailing_marks(msg: str, remainder: int) -> bytes:
        # whole blocks followed by one mark per byte of the final block
        blocks = len(msg) // 5
        if not blocks or remainder > 3 or msg[-remainder:] != MARK * remainder:
            raise InvalidLength(
                "source length must be a multiple of 5 or end with marks",
                len(msg),
                5,
            )
        buf = _decode_blocks(msg[:-remainder])
        return bytes(buf[: blocks * 4 - (4 - remainder)])

    def __repr__(self) -> str:
        return f"<Decoder {self._variant.value}>"


_ENCODERS = {variant: Encoder(variant) for variant in Variant}
_DECODERS = {variant: Decoder(variant) for variant in Variant}


def get_encoder(variant: Union[Variant, str] = Variant.DEFAULT) -> Encoder:
    return _ENCODERS[Variant(variant)]


def get_decoder(variant: Union[Variant, str] = Variant.DEFAULT) -> Decoder:
    return _DECODERS[Variant(variant)]


def z85_encode(msg: BytesLike, variant: Union[Variant, str] = Variant.STRICT) -> str:
    return get_encoder(variant).encode(msg)


def z85_decode(msg: TextLike, variant: Union[Variant, str] = Variant.STRICT) -> bytes:
    return get_decoder(variant).decode(msg)
