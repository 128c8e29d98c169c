"""
Failure results for codec operations.

Decryption and envelope parsing report problems by returning a Failure
instead of raising, so callers can branch on the result directly.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Failure:
    """A failed codec operation. Always falsy."""

    reason: str

    def __bool__(self) -> bool:
        return False


def is_failure(result) -> bool:
    """True if `result` is a Failure."""
    return isinstance(result, Failure)
