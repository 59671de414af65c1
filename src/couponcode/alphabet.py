"""
Coupon Alphabet

The 32 symbols used for coupon codes: the ten digits and the uppercase
letters without I, O, S and Z, which are too easily mistaken for 1, 0, 5
and 2. The order is fixed; checkdigits of previously issued codes depend
on each symbol's index.
"""

from typing import Dict, Tuple

from .errors import InvalidSymbol


SYMBOLS: Tuple[str, ...] = tuple("0123456789ABCDEFGHJKLMNPQRTUVWXY")
SIZE = len(SYMBOLS)

_INDEX: Dict[str, int] = {symbol: index for index, symbol in enumerate(SYMBOLS)}

assert SIZE == 32 and len(_INDEX) == SIZE


def index_of(symbol: str) -> int:
    """
    Look up the 0-based index of an alphabet symbol.

    Raises:
        InvalidSymbol: If the symbol is not part of the alphabet
    """
    try:
        return _INDEX[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbol(symbol) from None


def symbol_at(index: int) -> str:
    """
    Look up the symbol at a 0-based index.

    Raises:
        InvalidSymbol: If the index is outside 0..31
    """
    if not 0 <= index < SIZE:
        raise InvalidSymbol(index)
    return SYMBOLS[index]


def is_symbol(value: str) -> bool:
    return value in _INDEX
