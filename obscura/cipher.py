"""
Typed Cipher: encrypted, self-describing envelopes for plain values.

A value is serialized to text, optionally compressed, wrapped in an
envelope that records its type and length, and encrypted with AES-256-CFB.

Envelope layout (before encryption):

    offset  size  field
    0       2     magic marker "A8"
    2       6     base-36 length of the serialized value, zero padded
    8       1     type tag, index into ValueType
    9       1     "1" if the payload is zlib compressed, else "0"
    10      *     payload

Encrypted output is IV (16 bytes) followed by the ciphertext.
"""

import json
import os
import zlib
from enum import IntEnum

from cryptography.hazmat.decrepit.ciphers.modes import CFB
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from obscura.basen import BASE_36_ALPHABET, base_decode, base_encode
from obscura.result import Failure

MAGIC = b"A8"
LENGTH_FIELD_SIZE = 6
HEADER_SIZE = len(MAGIC) + LENGTH_FIELD_SIZE + 2

IV_SIZE = 16
KEY_SIZE = 32       # 256 bits

# Shorter payloads rarely shrink once compressed
COMPRESS_THRESHOLD = 100
COMPRESS_LEVEL = 9


class ValueType(IntEnum):
    """Value kinds. The member value is the wire type tag; append only."""

    BOOLEAN = 0
    INTEGER = 1
    DOUBLE = 2
    STRING = 3
    ARRAY = 4
    OBJECT = 5
    NULL = 6


COMPRESSIBLE = frozenset({ValueType.STRING, ValueType.ARRAY, ValueType.OBJECT})


def value_type(value) -> ValueType | None:
    """Classify a value, or None if it cannot be encrypted."""
    if value is None:
        return ValueType.NULL
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, int):
        return ValueType.INTEGER
    if isinstance(value, float):
        return ValueType.DOUBLE
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY
    if isinstance(value, dict):
        return ValueType.OBJECT
    return None


def _serialize(value, kind: ValueType) -> str:
    if kind is ValueType.BOOLEAN:
        return "1" if value else "0"
    if kind is ValueType.INTEGER:
        return str(value)
    if kind is ValueType.DOUBLE:
        return repr(value)
    if kind in (ValueType.ARRAY, ValueType.OBJECT):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if kind is ValueType.NULL:
        return "0"
    return value


def _deserialize(text: str, kind: ValueType):
    if kind is ValueType.BOOLEAN:
        return text == "1"
    if kind is ValueType.INTEGER:
        return int(text)
    if kind is ValueType.DOUBLE:
        return float(text)
    if kind in (ValueType.ARRAY, ValueType.OBJECT):
        return json.loads(text)
    if kind is ValueType.NULL:
        return None
    return text


def _cipher_key(key: str | bytes) -> bytes:
    # OpenSSL convention: NUL padded or truncated to the key size
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    return raw[:KEY_SIZE].ljust(KEY_SIZE, b"\0")


def encrypt_string(plaintext: bytes, key: str | bytes) -> bytes | Failure:
    """Encrypt with AES-256-CFB under a fresh random IV. Returns IV + ciphertext."""
    if not plaintext:
        return Failure("nothing to encrypt")
    if not key:
        return Failure("empty key")

    iv = os.urandom(IV_SIZE)
    encryptor = Cipher(algorithms.AES(_cipher_key(key)), CFB(iv)).encryptor()
    return iv + encryptor.update(plaintext) + encryptor.finalize()


def decrypt_string(data: bytes, key: str | bytes) -> bytes | Failure:
    """Decrypt IV + ciphertext made by encrypt_string."""
    if not data:
        return Failure("nothing to decrypt")
    if not isinstance(data, (bytes, bytearray)):
        return Failure("raw input must be bytes")
    if not key:
        return Failure("empty key")
    if len(data) <= IV_SIZE:
        return Failure("ciphertext too short")

    iv, ciphertext = data[:IV_SIZE], data[IV_SIZE:]
    try:
        decryptor = Cipher(algorithms.AES(_cipher_key(key)), CFB(iv)).decryptor()
        return decryptor.update(ciphertext) + decryptor.finalize()
    except ValueError as e:
        return Failure(f"cipher error: {e}")


def encrypt(value, key: str | bytes, hex_encode: bool = True) -> str | bytes | Failure:
    """
    Encrypt a value together with its type.

    Args:
        value: bool, int, float, str, list/tuple, dict or None.
        key: The encryption key.
        hex_encode: Return lowercase hex text instead of raw bytes.

    Returns:
        The encrypted value, "" for an empty string, or a Failure.
    """
    kind = value_type(value)
    if kind is None:
        return Failure(f"unsupported value type: {type(value).__name__}")

    try:
        text = _serialize(value, kind)
    except (TypeError, ValueError) as e:
        return Failure(f"cannot serialize value: {e}")
    if kind is ValueType.STRING and not text:
        return ""

    try:
        payload = text.encode("utf-8")
    except UnicodeEncodeError as e:
        return Failure(f"cannot serialize value: {e}")

    length = len(payload)
    compressed = 0
    if kind in COMPRESSIBLE and length > COMPRESS_THRESHOLD:
        packed = zlib.compress(payload, COMPRESS_LEVEL)
        if len(packed) < length:
            payload = packed
            compressed = 1

    envelope = (
        MAGIC
        + base_encode(length, BASE_36_ALPHABET).rjust(LENGTH_FIELD_SIZE, "0").encode("ascii")
        + b"%d%d" % (kind, compressed)
        + payload
    )

    result = encrypt_string(envelope, key)
    if isinstance(result, Failure):
        return result
    return result.hex() if hex_encode else result


def decrypt(data: str | bytes, key: str | bytes, hex_encoded: bool = True):
    """
    Decrypt a value made by encrypt, restoring its type.

    Returns:
        The value, "" for empty input or a zero-length envelope, or a
        Failure. A wrong key usually shows up as a magic marker mismatch.
    """
    if not data:
        return ""

    if hex_encoded:
        try:
            data = bytes.fromhex(data.decode("ascii") if isinstance(data, bytes) else data)
        except (ValueError, UnicodeDecodeError):
            return Failure("invalid hex input")
    elif not isinstance(data, (bytes, bytearray)):
        return Failure("raw input must be bytes")

    envelope = decrypt_string(data, key)
    if isinstance(envelope, Failure):
        return envelope

    if envelope[:len(MAGIC)] != MAGIC:
        return Failure("magic marker mismatch")

    try:
        field = envelope[len(MAGIC):len(MAGIC) + LENGTH_FIELD_SIZE].decode("ascii")
    except UnicodeDecodeError:
        return Failure("corrupted length field")
    length = base_decode(field, BASE_36_ALPHABET)
    if length is None or len(field) != LENGTH_FIELD_SIZE:
        return Failure("corrupted length field")
    if length == 0:
        return ""

    tag = envelope[HEADER_SIZE - 2:HEADER_SIZE - 1]
    if not tag.isdigit() or int(tag) >= len(ValueType):
        return Failure("unknown type tag")
    kind = ValueType(int(tag))

    if envelope[HEADER_SIZE - 1:HEADER_SIZE] == b"1":
        try:
            payload = zlib.decompress(envelope[HEADER_SIZE:HEADER_SIZE + length])
        except zlib.error as e:
            return Failure(f"decompression failed: {e}")
    else:
        payload = envelope[HEADER_SIZE:HEADER_SIZE + length]

    try:
        return _deserialize(payload.decode("utf-8"), kind)
    except (UnicodeDecodeError, ValueError) as e:
        return Failure(f"corrupted payload: {e}")
