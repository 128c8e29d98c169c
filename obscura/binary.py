"""URL-safe text form of binary data."""

import base64
import binascii
from urllib.parse import quote, unquote


def binary_to_text(data: bytes) -> str:
    """Base64 with "-" and "_" for "+" and "/", padding stripped."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def text_to_binary(text: str) -> bytes | None:
    """Reverse of binary_to_text. None if the text is not valid base64."""
    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError):
        return None


def encode_binary(data: bytes) -> str:
    """binary_to_text, percent-quoted for use inside a URL."""
    return quote(binary_to_text(data), safe="")


def decode_binary(text: str) -> bytes | None:
    """Reverse of encode_binary."""
    return text_to_binary(unquote(text))
