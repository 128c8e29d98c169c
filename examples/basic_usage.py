"""
Obscura: Basic Usage Example

Demonstrates opaque ids, typed encryption and base-N encoding.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from obscura import BASE_62_ALPHABET, Codec, base_encode, binary_to_text, is_failure


def main():
    # Your key: the only way back to your values
    codec = Codec("my-secret-key-change-this")

    # ── Example 1: Opaque ids ──
    print("=" * 50)
    print("  Example 1: Ids")
    print("=" * 50)

    for user_id in (1, 42, 123456):
        token = codec.encode_id(user_id)
        print(f"{user_id:>8} -> {token} -> {codec.decode_id(token)}")

    # Randomized tokens differ on every call but decode to the same id
    print(f"randomized: {codec.encode_id(42, randomized=True)}, {codec.encode_id(42, randomized=True)}")

    # ── Example 2: Typed encryption ──
    print()
    print("=" * 50)
    print("  Example 2: Encryption")
    print("=" * 50)

    profile = {"name": "Alice", "roles": ["admin", "editor"], "active": True}
    blob = codec.encrypt(profile)
    print(f"Encrypted: {blob[:48]}...")

    restored = codec.decrypt(blob)
    print(f"Decrypted: {restored}")
    print(f"Round trip: {'PASS' if restored == profile else 'FAIL'}")

    wrong = Codec("not-the-key").decrypt(blob)
    if is_failure(wrong):
        print(f"Wrong key: {wrong.reason}")

    # ── Example 3: Short numbers and URL-safe bytes ──
    print()
    print("=" * 50)
    print("  Example 3: Base-N and binary text")
    print("=" * 50)

    print(f"base36(123456) = {base_encode(123456)}")
    print(f"base62(123456) = {base_encode(123456, BASE_62_ALPHABET)}")
    print(f"bytes 00 01 02 = {binary_to_text(bytes([0, 1, 2]))}")


if __name__ == "__main__":
    main()
