"""
Forbidden-word filter.

Generated parts that happen to spell an offensive 3-5 letter word are
skipped. The list is kept ROT13 encoded so the source does not carry the
words in plain text; it is decoded once at import and brought into
canonical form (uppercase, O->0, I->1, S->5, Z->2) so it compares directly
against generated parts.
"""

import codecs
from typing import FrozenSet, Iterable

from .normalizer import normalize_text

OBFUSCATED_BAD_WORDS = (
    "0TER", "AHEQ", "BTER", "C00C", "C0EA", "CBBC", "CBEA", "CEVPX", "CRAVF",
    "CUNG", "CVFF", "CVT", "DHRRE", "ENG", "FA0O", "FABO", "FCREZ", "FUNT",
    "FUVG", "FYHG", "FYNT", "G0FF", "GBFF", "GHEQ", "GJNG", "GVGF", "J0EZ",
    "JBEZ", "JNAT", "JNAX", "JGS", "LNX", "NCR", "NEFR", "NFF", "NVQF",
    "O00MR", "O00O", "O00OL", "O0M0", "OBBMR", "OBBO", "OBBOL", "OBMB",
    "OHGG", "OHZ", "ONYYF", "ORNFG", "OVGPU", "P0J", "P0PX", "PBJ", "PBPX",
    "PENC", "PERRC", "PHAG", "PY0JA", "PYBJA", "PYVG", "QRIVY", "QVPX",
    "SERNX", "SHPX", "SNEG", "SNPX", "SNG", "SNGF0", "SNGFB", "SRPX", "TU0FG",
    "TUBFG", "U0Z0", "UBZB", "URYY", "VQV0G", "VQVBG", "W0XR", "W0XRE",
    "W1MM", "WBXR", "WBXRE", "WREX", "WVFZ", "WVMM", "XA0O", "XABO", "YVNE",
    "ZHSS",
)  # fmt: skip


def decode_word(obfuscated: str) -> str:
    """Undo the ROT13 obfuscation and canonicalize the result."""
    return normalize_text(codecs.encode(obfuscated, "rot13"), to_upper=True)


class BadWordFilter:
    """Immutable membership test over a set of canonical forbidden words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(
            normalize_text(word, to_upper=True) for word in words
        )

    @classmethod
    def from_obfuscated(cls, words: Iterable[str]) -> "BadWordFilter":
        return cls(decode_word(word) for word in words)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words

    def is_forbidden(self, part: str) -> bool:
        """
        Check an assembled part (data symbols plus checkdigit).

        Args:
            part: Candidate part in canonical form

        Returns:
            True if the part is on the list
        """
        return part in self._words

    def __contains__(self, part) -> bool:
        return self.is_forbidden(part)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"BadWordFilter({len(self._words)} words)"


DEFAULT_FILTER = BadWordFilter.from_obfuscated(OBFUSCATED_BAD_WORDS)
DEFAULT_BAD_WORDS = DEFAULT_FILTER.words
