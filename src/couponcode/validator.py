"""
Validation and canonical formatting of user-entered codes.

Codes are not case sensitive and the letters left out of the alphabet are
read as the digits they resemble, so "abct-abc3", "ABCT ABC3" and
"promo-ABCT-ABC3" all refer to the same code. Both operations here accept
a single string or an iterable of strings and never raise on malformed
input.
"""

from typing import Iterable, List, Optional, Tuple, Union

from .checksum import check_digit
from .config import CouponConfig, resolve_config
from .errors import InvalidSymbol
from .normalizer import canonicalize

CodeInput = Union[str, Iterable[str]]


def chunk(text: str, size: int) -> List[str]:
    return [text[i : i + size] for i in range(0, len(text), size)]


class CodeValidator:
    """Checks checkdigits and rewrites codes into canonical form."""

    def __init__(self, config: Optional[CouponConfig] = None):
        self.config = resolve_config(config)

    def split_prefix(self, code: str) -> Tuple[Optional[str], str]:
        """
        Separate a leading prefix token from the code body.

        A code has parts - 1 separators of its own; any more means the first
        token is a prefix.

        Returns:
            (prefix token or None, remainder)
        """
        separator = self.config.separator
        if code.count(separator) > self.config.parts - 1:
            prefix, _, rest = code.partition(separator)
            return prefix, rest
        return None, code

    def is_valid(self, code: str) -> bool:
        """Validate a single code."""
        if not isinstance(code, str):
            return False

        _, body = self.split_prefix(code)
        body = canonicalize(body)

        if len(body) != self.config.code_length:
            return False

        try:
            for number, part in enumerate(chunk(body, self.config.part_length)):
                if check_digit(number + 1, part[:-1]) != part[-1]:
                    return False
        except InvalidSymbol:
            return False

        return True

    def validate(self, code: CodeInput) -> bool:
        """
        Validate a code or a collection of codes.

        Args:
            code: String, or iterable of strings, possibly unnormalized

        Returns:
            True if the code (or every code in the collection) is valid
        """
        if isinstance(code, str):
            return self.is_valid(code)
        try:
            codes = list(code)
        except TypeError:
            return False
        return all(self.is_valid(item) for item in codes)

    def normalize_one(self, code: str) -> str:
        """
        Rewrite a single code as canonical, separator-delimited groups.

        The checkdigits are not checked. A detected prefix token is kept
        (uppercased); an empty token falls back to the configured prefix.
        """
        if not isinstance(code, str):
            code = "" if code is None else str(code)

        prefix, body = self.split_prefix(code)
        separator = self.config.separator
        formatted = separator.join(chunk(canonicalize(body), self.config.part_length))

        if prefix is None:
            return formatted

        prefix = prefix or self.config.prefix
        if not prefix:
            return formatted
        return prefix.upper() + separator + formatted

    def normalize(self, code: CodeInput) -> Union[str, List[str]]:
        """Normalize a code, or each code of a collection (order preserved)."""
        if isinstance(code, str):
            return self.normalize_one(code)
        try:
            codes = list(code)
        except TypeError:
            return self.normalize_one(code)
        return [self.normalize_one(item) for item in codes]
