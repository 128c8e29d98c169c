"""
Salt-derived permutations of the hexadecimal alphabet.

Tokens produced by the id codec depend on this exact shuffle order. Any
change to the loop below makes previously issued tokens decode to
different ids.
"""

HEX_ALPHABET = "0123456789abcdef"


def shuffled_alphabet(salt: str, reverse: bool = False) -> dict[str, str]:
    """
    Build a substitution map over the 16 hex characters.

    Args:
        salt: Non-empty seed for the permutation. Iterated by UTF-8 byte.
        reverse: Map shuffled -> original instead of original -> shuffled.

    Returns:
        A dict with exactly 16 entries forming a bijection.
    """
    seed = salt.encode("utf-8")
    if not seed:
        raise ValueError("salt must not be empty")

    alphabet = list(HEX_ALPHABET)
    position = 0
    total = 0

    for i in range(len(alphabet) - 1, 0, -1):
        position %= len(seed)
        byte = seed[position]
        total += byte
        j = (byte + position + total) % i
        alphabet[i], alphabet[j] = alphabet[j], alphabet[i]
        position += 1

    if reverse:
        return dict(zip(alphabet, HEX_ALPHABET))
    return dict(zip(HEX_ALPHABET, alphabet))
