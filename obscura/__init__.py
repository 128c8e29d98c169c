"""
Obscura: opaque ids and typed encrypted envelopes.

Obscura provides four codecs:
1. Ids: positive integers <-> short opaque tokens
2. Cipher: typed values <-> AES-256-CFB encrypted envelopes
3. Base-N: integers <-> strings over a radix alphabet (36, 62, 92)
4. Binary: bytes <-> URL-safe base64 text

Failures are returned, never raised: None from the id, base-N and binary
codecs, a falsy Failure carrying a reason from the cipher.

Usage:
    from obscura import encode_id, decode_id, encrypt, decrypt
    token = encode_id(42)
    blob = encrypt({"user": 42}, "my-key")
    assert decrypt(blob, "my-key") == {"user": 42}
"""

from obscura.alphabet import shuffled_alphabet
from obscura.basen import (
    BASE_36_ALPHABET,
    BASE_62_ALPHABET,
    BASE_92_ALPHABET,
    base_decode,
    base_encode,
)
from obscura.binary import binary_to_text, decode_binary, encode_binary, text_to_binary
from obscura.cipher import ValueType, decrypt, decrypt_string, encrypt, encrypt_string
from obscura.codec import Codec
from obscura.ids import decode_id, encode_id
from obscura.result import Failure, is_failure

__version__ = "0.1.0"
__all__ = [
    "Codec",
    "Failure",
    "ValueType",
    "is_failure",
    "encode_id",
    "decode_id",
    "encrypt",
    "decrypt",
    "encrypt_string",
    "decrypt_string",
    "base_encode",
    "base_decode",
    "binary_to_text",
    "text_to_binary",
    "encode_binary",
    "decode_binary",
    "shuffled_alphabet",
    "BASE_36_ALPHABET",
    "BASE_62_ALPHABET",
    "BASE_92_ALPHABET",
]
