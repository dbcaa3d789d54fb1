ALPHABET = (
    "0123456789abcdefghijklmnopqrstuvwxyzABCDEFG"
    "HIJKLMNOPQRSTUVWXYZ.-:+=^!/*?&<>()[]{}@%$#"
)
MAP_ENCODE = ALPHABET.encode("ascii")

# marks the padding digits of a Default-encoded trailing block
MARK = "~"
# value 0, appended by the Padded decoder
PAD = ALPHABET[0]
# value 84, substituted for marks when decoding
TOP = ALPHABET[-1]

INVALID = 0xFF


def _build_index() -> bytes:
    index = bytearray([INVALID]) * 128
    for (idx, c) in enumerate(MAP_ENCODE):
        index[c] = idx
    return bytes(index)


MAP_DECODE = _build_index()
