"""
Command-line access to the codec.

    python -m obscura encode-id 123456
    python -m obscura decode-id 3c1a9e07b4d2
    python -m obscura encrypt '{"a": 1}' --json --key secret
    python -m obscura decrypt <hex> --key secret

Exit status: 0 on success, 1 when the codec reports a failure, 2 on usage
errors.
"""

import argparse
import json
import logging
import sys

from obscura import basen, cipher, ids
from obscura.config import get_settings
from obscura.result import Failure

logger = logging.getLogger(__name__)

RADIXES = {
    36: basen.BASE_36_ALPHABET,
    62: basen.BASE_62_ALPHABET,
    92: basen.BASE_92_ALPHABET,
}


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="obscura",
        description="Obfuscate ids and encrypt typed values",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("encode-id", help="Encode a positive integer id")
    p.add_argument("id")
    p.add_argument("--random", action="store_true", help="Use a random salt")

    p = sub.add_parser("decode-id", help="Decode an id token")
    p.add_argument("token")

    p = sub.add_parser("encrypt", help="Encrypt a value")
    p.add_argument("value")
    p.add_argument("--key", default=None, help="Encryption key (default: OBSCURA_KEY)")
    p.add_argument("--json", action="store_true", help="Parse the value as JSON to keep its type")

    p = sub.add_parser("decrypt", help="Decrypt a hex-encoded value and print it as JSON")
    p.add_argument("data")
    p.add_argument("--key", default=None, help="Encryption key (default: OBSCURA_KEY)")

    for name in ("base-encode", "base-decode"):
        p = sub.add_parser(name, help=f"{name.split('-')[1].capitalize()} a number in base 36, 62 or 92")
        p.add_argument("text")
        p.add_argument("--radix", type=int, choices=sorted(RADIXES), default=36)

    return ap


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def _fail(message: str) -> int:
    logger.error(message)
    return 1


def _run(args) -> int:
    if args.cmd == "encode-id":
        token = ids.encode_id(args.id, randomized=args.random)
        if token is None:
            return _fail(f"not a positive integer: {args.id}")
        print(token)
        return 0

    if args.cmd == "decode-id":
        number = ids.decode_id(args.token)
        if number is None:
            return _fail("invalid token")
        print(number)
        return 0

    if args.cmd in ("encrypt", "decrypt"):
        key = get_settings().key if args.key is None else args.key
        if not key:
            logger.error("no key given; pass --key or set OBSCURA_KEY")
            return 2

        if args.cmd == "encrypt":
            try:
                value = json.loads(args.value) if args.json else args.value
            except json.JSONDecodeError as e:
                logger.error("value is not valid JSON: %s", e)
                return 2
            result = cipher.encrypt(value, key)
            if isinstance(result, Failure):
                return _fail(f"encrypt failed: {result.reason}")
            print(result)
            return 0

        result = cipher.decrypt(args.data, key)
        if isinstance(result, Failure):
            return _fail(f"decrypt failed: {result.reason}")
        print(json.dumps(result, ensure_ascii=False))
        return 0

    alphabet = RADIXES[args.radix]
    if args.cmd == "base-encode":
        encoded = basen.base_encode(args.text, alphabet)
        if not encoded:
            return _fail(f"not a positive integer: {args.text}")
        print(encoded)
        return 0

    number = basen.base_decode(args.text, alphabet)
    if number is None:
        return _fail(f"character outside the base {args.radix} alphabet")
    print(number)
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    try:
        _setup_logging(args.verbose)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger.debug("running %s", args.cmd)
    return _run(args)


if __name__ == "__main__":
    raise SystemExit(main())
