import sys

from typing import Sequence

from .codec import Variant, get_decoder, get_encoder

USAGE = "usage: python -m z85_codec (encode|decode) [VARIANT] | keypair | verkey VERKEY"


def _variant(args: Sequence[str]) -> Variant:
    if not args:
        return Variant.DEFAULT
    try:
        return Variant(args[0].lower())
    except ValueError:
        choices = ", ".join(v.value for v in Variant)
        raise SystemExit(
            f"Unsupported variant {args[0]} (expected {choices})"
        ) from None


def _keys():
    try:
        from . import keys
    except (ImportError, OSError) as ex:  # libsodium is loaded at import
        raise SystemExit(f"Key actions need the keys extra and libsodium: {ex}")
    return keys


def main(argv: Sequence[str] = None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        raise SystemExit(f"Missing required arguments (action)\n{USAGE}")
    action, args = argv[0], argv[1:]
    try:
        if action == "encode":
            encoder = get_encoder(_variant(args))
            print(encoder.encode(sys.stdin.buffer.read()))
        elif action == "decode":
            decoder = get_decoder(_variant(args))
            sys.stdout.buffer.write(decoder.decode(sys.stdin.read().strip()))
            sys.stdout.buffer.flush()
        elif action == "keypair":
            public, secret = _keys().create_curve_keypair()
            print("public:", public)
            print("secret:", secret)
        elif action == "verkey":
            if not args:
                raise SystemExit("Missing required arguments (verkey)")
            print(_keys().verkey_to_curve(args[0]))
        else:
            raise SystemExit(f"Unsupported action {action}\n{USAGE}")
    except ValueError as ex:
        raise SystemExit(f"z85 {action}: {ex}")


if __name__ == "__main__":
    main()
