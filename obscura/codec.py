"""
Codec: one object for every operation, bound to an encryption key.

Usage:
    codec = Codec("my-key")
    token = codec.encode_id(42)
    blob = codec.encrypt({"user": 42})
"""

from obscura import basen, binary, cipher, ids
from obscura.config import get_settings


class Codec:
    """
    Stateless facade over the codec functions.

    Args:
        key: Encryption key. Defaults to OBSCURA_KEY.
        hex_output: Hex-encode encrypted output. Defaults to OBSCURA_HEX_OUTPUT.
    """

    __slots__ = ("_key", "_hex_output")

    def __init__(self, key: str | bytes | None = None, hex_output: bool | None = None):
        if key is None or hex_output is None:
            settings = get_settings()
            key = settings.key if key is None else key
            hex_output = settings.hex_output if hex_output is None else hex_output
        self._key = key
        self._hex_output = hex_output

    @property
    def hex_output(self) -> bool:
        return self._hex_output

    def encode_id(self, id, randomized: bool = False) -> str | None:
        return ids.encode_id(id, randomized)

    def decode_id(self, token: str) -> int | None:
        return ids.decode_id(token)

    def encrypt(self, value):
        """Encrypt a typed value with the bound key."""
        return cipher.encrypt(value, self._key, self._hex_output)

    def decrypt(self, data):
        """Decrypt a value made by encrypt with the same key."""
        return cipher.decrypt(data, self._key, self._hex_output)

    def encrypt_string(self, plaintext: bytes):
        return cipher.encrypt_string(plaintext, self._key)

    def decrypt_string(self, data: bytes):
        return cipher.decrypt_string(data, self._key)

    @staticmethod
    def base_encode(number, alphabet: str = basen.BASE_36_ALPHABET) -> str:
        return basen.base_encode(number, alphabet)

    @staticmethod
    def base_decode(encoded: str, alphabet: str = basen.BASE_36_ALPHABET) -> int | None:
        return basen.base_decode(encoded, alphabet)

    @staticmethod
    def binary_to_text(data: bytes) -> str:
        return binary.binary_to_text(data)

    @staticmethod
    def text_to_binary(text: str) -> bytes | None:
        return binary.text_to_binary(text)

    def __repr__(self) -> str:
        return f"Codec(key={'set' if self._key else 'unset'}, hex_output={self._hex_output})"
