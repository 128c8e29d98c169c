"""
Arbitrary-radix integer encoding.

The radix is the length of the alphabet. Higher radixes give shorter
strings: base 62 beats base 36 above 1,679,616 and base 92 beats base 62
above 14,776,335.
"""

import string

# URL safe: digits and lowercase letters
BASE_36_ALPHABET = string.digits + string.ascii_lowercase

# URL safe: digits, lowercase and uppercase letters
BASE_62_ALPHABET = BASE_36_ALPHABET + string.ascii_uppercase

# Not URL safe. Printable ASCII in code point order, without space and the
# "|" and "," separators.
BASE_92_ALPHABET = "".join(
    chr(c) for c in range(0x21, 0x7f) if chr(c) not in "|,"
)


def _as_positive_int(number) -> int | None:
    if isinstance(number, bool):
        return None
    if isinstance(number, str):
        number = number.strip()
        if not number.isdigit():
            return None
        number = int(number)
    if not isinstance(number, int) or number < 1:
        return None
    return number


def base_encode(number, alphabet: str = BASE_36_ALPHABET) -> str:
    """
    Encode a positive integer, most significant digit first.

    Returns an empty string for anything that is not a positive integer
    (digit strings are accepted), or for an alphabet shorter than two
    characters.
    """
    value = _as_positive_int(number)
    if value is None or len(alphabet) < 2:
        return ""

    base = len(alphabet)
    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(alphabet[remainder])
    digits.reverse()
    return "".join(digits)


def base_decode(encoded: str, alphabet: str = BASE_36_ALPHABET) -> int | None:
    """Decode a string made by base_encode. None if a character is not in the alphabet."""
    base = len(alphabet)
    index = {char: i for i, char in enumerate(alphabet)}

    value = 0
    for char in encoded:
        if char not in index:
            return None
        value = value * base + index[char]
    return value
