"""
Id Codec: opaque tokens for integer identifiers.

A token is a hex body passed through a salt-derived substitution, followed
by the 2-character salt itself:

    [filler][hex id][length tag] -> substituted body + salt

Ids up to 0xffffffff are padded with filler to a 10-character body, giving
12-character tokens. Larger ids need no filler and produce longer tokens.
"""

import hashlib
import secrets
import string

from obscura.alphabet import shuffled_alphabet

BODY_DIGITS = 8     # hex digits before the tag, filler included
TAG_OFFSET = 16     # keeps the length tag at two hex digits
SALT_MIN = 0x10     # random salts are always two hex digits
SALT_LENGTH = 2


def _coerce_id(value) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _parse_hex(text: str) -> int | None:
    if not text or any(ch not in string.hexdigits for ch in text):
        return None
    return int(text, 16)


def _random_salt() -> str:
    return format(SALT_MIN + secrets.randbelow(0x100 - SALT_MIN), "x")


def encode_id(id, randomized: bool = False) -> str | None:
    """
    Encode a positive integer into an opaque token.

    Args:
        id: The id. Integers and numeric strings are accepted.
        randomized: Use a random salt, so repeated calls give different
            tokens for the same id.

    Returns:
        The token, or None if the id is not a positive integer or has
        more hex digits than the one-byte length tag can record.
    """
    number = _coerce_id(id)
    if number is None or number <= 0:
        return None

    hex_id = format(number, "x")
    if len(hex_id) + TAG_OFFSET > 0xff:
        return None

    fingerprint = hashlib.sha256(str(number).encode("ascii")).hexdigest()
    salt = _random_salt() if randomized else fingerprint[-SALT_LENGTH:]
    alphabet = shuffled_alphabet(salt)

    filler = fingerprint[:BODY_DIGITS - len(hex_id)] if len(hex_id) < BODY_DIGITS else ""
    body = filler + hex_id + format(len(hex_id) + TAG_OFFSET, "x")

    return "".join(alphabet[ch] for ch in body) + salt


def decode_id(token: str) -> int | None:
    """
    Decode a token made by encode_id.

    Characters that are not part of the substitution map are kept as they
    are, so a token that was never issued can still decode to some id.

    Returns:
        The id, or None if the token cannot be decoded.
    """
    if not token or not isinstance(token, str):
        return None

    salt = token[-SALT_LENGTH:]
    body = token[:-SALT_LENGTH]
    if len(body) < 2:
        return None

    alphabet = shuffled_alphabet(salt, reverse=True)
    plain = "".join(alphabet.get(ch, ch) for ch in body)

    tag = _parse_hex(plain[-2:])
    if tag is None or tag < TAG_OFFSET:
        return None
    length = tag - TAG_OFFSET

    head = plain[:-2]
    return _parse_hex(head[max(len(head) - length, 0):])
