"""
Text normalization for user-entered codes.

Folds case, maps the letters left out of the alphabet onto the digits they
resemble (O->0, I->1, S->5, Z->2) and optionally drops everything that is
not an uppercase letter or digit.
"""

import re
import string

AMBIGUOUS = str.maketrans({"O": "0", "I": "1", "S": "5", "Z": "2"})

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_NON_ALPHANUMERIC = re.compile(r"[^0-9A-Z]+")


def normalize_text(raw: str, to_upper: bool = False, strip: bool = False) -> str:
    """
    Normalize a raw string.

    Substitution runs after the optional uppercasing, so a lowercase "o" is
    only corrected when to_upper is set. Uppercasing covers ASCII letters
    only; anything else is left for strip to drop.

    Args:
        raw: Text as typed by a user
        to_upper: Uppercase ASCII letters before substituting
        strip: Remove every character outside [0-9A-Z]

    Returns:
        The normalized string
    """
    text = raw.translate(_ASCII_UPPER) if to_upper else raw
    text = text.translate(AMBIGUOUS)
    if strip:
        text = _NON_ALPHANUMERIC.sub("", text)
    return text


def canonicalize(raw: str) -> str:
    """Uppercase, substitute and strip in one go."""
    return normalize_text(raw, to_upper=True, strip=True)
