"""
couponcode - typo-resistant coupon codes

Generates and validates short codes such as ``1K7Q-N3GT``:

- 32-symbol alphabet without I, O, S and Z; those letters typed by a user
  are read as 1, 0, 5 and 2
- Every part ends in a checkdigit that depends on the part's position, so
  single-character typos and most adjacent transpositions are caught
- Generated parts that spell an offensive word are skipped
- Optional prefix, configurable separator, part count and part length

Example Usage:
    from couponcode import CouponCode, preview

    coupons = CouponCode({"prefix": "promo", "parts": 3})
    code = coupons.generate()                 # PROMO-XXXX-XXXX-XXXX
    coupons.validate(code)                    # True
    coupons.normalize("promo-1k7q-n3gt-abct") # PROMO-1K7Q-N3GT-ABCT

    preview({"separator": "-", "parts": 2, "part_length": 6})  # XXXXXX-XXXXXX

Note: the checkdigit is a typo check, not a signature. Anyone who knows the
algorithm can produce valid codes, so redemption must still be checked
against the issued list.
"""

import logging

from .alphabet import SIZE as ALPHABET_SIZE, SYMBOLS, index_of, symbol_at
from .badwords import DEFAULT_BAD_WORDS, DEFAULT_FILTER, BadWordFilter
from .checksum import append_check_digit, check_digit
from .config import CouponConfig
from .coupon import CouponCode, normalize_code, validate_code
from .errors import (
    CouponCodeError,
    InsecureRandomUnavailable,
    InvalidConfiguration,
    InvalidSymbol,
    OutOfEntropy,
)
from .export import export_rows, write_csv
from .generator import CodeGenerator, expand_entropy, secure_random_bytes
from .normalizer import canonicalize, normalize_text
from .preview import preview
from .validator import CodeValidator

__all__ = [
    # Facade
    "CouponCode",
    "CouponConfig",
    "normalize_code",
    "validate_code",
    "preview",
    # Components
    "CodeGenerator",
    "CodeValidator",
    "BadWordFilter",
    "DEFAULT_BAD_WORDS",
    "DEFAULT_FILTER",
    "expand_entropy",
    "secure_random_bytes",
    "check_digit",
    "append_check_digit",
    "normalize_text",
    "canonicalize",
    # Alphabet
    "ALPHABET_SIZE",
    "SYMBOLS",
    "index_of",
    "symbol_at",
    # Export
    "export_rows",
    "write_csv",
    # Errors
    "CouponCodeError",
    "OutOfEntropy",
    "InsecureRandomUnavailable",
    "InvalidConfiguration",
    "InvalidSymbol",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
