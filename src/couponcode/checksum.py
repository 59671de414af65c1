"""
Per-part checkdigit.

Each part of a coupon code ends in a checkdigit derived from the part's
1-based position and its data symbols:

    acc = part_index
    for symbol in data: acc = acc * 19 + index_of(symbol)
    checkdigit = symbol_at(acc % 31)

The modulus is one less than the alphabet size, so the checkdigit never
takes the value Y. Both constants are frozen: changing either one would
invalidate every code issued so far.
"""

from typing import Iterable

from . import alphabet

MULTIPLIER = 19
MODULUS = alphabet.SIZE - 1


def check_digit(part_index: int, data_symbols: Iterable[str]) -> str:
    """
    Compute the checkdigit for one part.

    Args:
        part_index: 1-based position of the part within the code
        data_symbols: The part's symbols without the checkdigit

    Returns:
        A single alphabet symbol

    Raises:
        ValueError: If part_index is not positive
        InvalidSymbol: If a data symbol is not in the alphabet
    """
    if part_index < 1:
        raise ValueError("Part index must be positive")

    acc = part_index
    for symbol in data_symbols:
        acc = acc * MULTIPLIER + alphabet.index_of(symbol)

    return alphabet.symbol_at(acc % MODULUS)


def append_check_digit(part_index: int, data_symbols: str) -> str:
    """Return data_symbols followed by its checkdigit."""
    return data_symbols + check_digit(part_index, data_symbols)
