"""
Character sets used for password generation.
"""

from typing import Iterable, NamedTuple, Tuple

# Inclusive ASCII byte ranges per category
LETTER_RANGES = ((65, 90), (97, 122))
SYMBOL_RANGES = ((33, 47), (58, 64), (91, 96), (123, 126))
DIGIT_RANGES = ((48, 57),)


class CharacterSets(NamedTuple):
    """The three disjoint character categories of a password."""
    letters: Tuple[str, ...]
    symbols: Tuple[str, ...]
    digits: Tuple[str, ...]


def build_charset(ranges: Iterable[Tuple[int, int]]) -> Tuple[str, ...]:
    """
    Expand inclusive byte ranges into single-character strings.

    Ranges are expanded in the order given and concatenated.

    Args:
        ranges: Iterable of (start, end) byte values, both inclusive

    Returns:
        Tuple of characters
    """
    return tuple(chr(byte) for start, end in ranges for byte in range(start, end + 1))


def build_categories() -> CharacterSets:
    """Build letters, symbols and digits from the fixed range tables."""
    return CharacterSets(
        letters=build_charset(LETTER_RANGES),
        symbols=build_charset(SYMBOL_RANGES),
        digits=build_charset(DIGIT_RANGES),
    )
