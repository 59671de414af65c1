"""
Coupon Code Generation

Algorithm Overview:
1. Draw 8 bytes from the OS secure random source (or take a caller seed)
2. Expand the entropy into a 40-symbol stream: SHA-1 hex digest, each hex
   character's code point ANDed with 31 and mapped through the alphabet
3. Walk the stream in windows of part_length - 1 symbols, one window every
   part_length symbols:
   - Append the checkdigit for the next unassigned part number
   - Skip the candidate if it spells a forbidden word
   - Otherwise accept it
4. Join the accepted parts with the separator and add the prefix

The stream is finite. A configuration that needs more windows than the
stream holds, or a run of forbidden candidates that exhausts it, raises
OutOfEntropy instead of drawing again; callers retry with a fresh draw.
"""

import hashlib
import logging
import secrets
from typing import List, Optional, Union

from . import alphabet
from .badwords import DEFAULT_FILTER, BadWordFilter
from .checksum import append_check_digit
from .config import CouponConfig, resolve_config
from .errors import InsecureRandomUnavailable, OutOfEntropy
from .log import log

DEFAULT_ENTROPY_BYTES = 8

_MASK = alphabet.SIZE - 1

_logger = logging.getLogger(__name__)

Seed = Union[bytes, bytearray, str]


def secure_random_bytes(num_bytes: int = DEFAULT_ENTROPY_BYTES) -> bytes:
    """
    Read bytes from the operating system's secure random source.

    Raises:
        InsecureRandomUnavailable: If the platform has no secure source
    """
    try:
        return secrets.token_bytes(num_bytes)
    except NotImplementedError as e:
        raise InsecureRandomUnavailable(
            "No source for generating a cryptographically secure seed found"
        ) from e


def expand_entropy(seed: Seed) -> str:
    """
    Expand seed bytes into the symbol stream consumed by the generator.

    Args:
        seed: Entropy bytes, or text which is UTF-8 encoded first

    Returns:
        40 alphabet symbols
    """
    if isinstance(seed, str):
        seed = seed.encode("utf-8")
    digest = hashlib.sha1(bytes(seed)).hexdigest()
    return "".join(alphabet.symbol_at(ord(char) & _MASK) for char in digest)


class CodeGenerator:
    """Builds checkdigit-protected codes from a secure entropy stream."""

    def __init__(
        self,
        config: Optional[CouponConfig] = None,
        bad_words: BadWordFilter = DEFAULT_FILTER,
    ):
        self.config = resolve_config(config)
        self.bad_words = bad_words

    def assemble_parts(self, stream: str) -> List[str]:
        """
        Cut accepted parts out of an expanded stream.

        Args:
            stream: Symbol stream from expand_entropy

        Returns:
            Exactly config.parts parts, each ending in its checkdigit

        Raises:
            OutOfEntropy: If the stream ends before enough parts are accepted
        """
        part_length = self.config.part_length
        data_length = self.config.data_length
        results = []
        attempt = 0

        while len(results) < self.config.parts:
            start = attempt * part_length
            window = stream[start : start + data_length]
            if len(window) != data_length:
                log(
                    _logger,
                    "warning",
                    "Ran out of entropy",
                    accepted=len(results),
                    needed=self.config.parts,
                    windows_tried=attempt,
                )
                raise OutOfEntropy(
                    f"Ran out of entropy after {len(results)} of "
                    f"{self.config.parts} parts"
                )
            attempt += 1

            part = append_check_digit(len(results) + 1, window)
            if self.bad_words.is_forbidden(part):
                log(
                    _logger,
                    "debug",
                    "Skipped forbidden part",
                    part_number=len(results) + 1,
                    window=attempt,
                )
                continue

            results.append(part)

        return results

    def format_code(self, parts: List[str]) -> str:
        code = self.config.separator.join(parts)
        if self.config.prefix:
            return self.config.prefix.upper() + self.config.separator + code
        return code

    def generate(self, seed: Optional[Seed] = None) -> str:
        """
        Generate one code, formatted "XXXX-XXXX" with the default layout.

        Args:
            seed: Optional plaintext to derive the code from instead of fresh
                random bytes, i.e. for testing. Empty seeds are ignored.

        Returns:
            Separator-joined code, prefixed when a prefix is configured

        Raises:
            OutOfEntropy: If the stream cannot supply enough parts
            InsecureRandomUnavailable: If no secure random source exists
        """
        entropy = seed if seed else secure_random_bytes(DEFAULT_ENTROPY_BYTES)
        parts = self.assemble_parts(expand_entropy(entropy))
        return self.format_code(parts)

    def generate_many(self, count: int = 1) -> List[str]:
        """Generate count codes, each from its own entropy draw."""
        if count < 0:
            raise ValueError("Count cannot be negative")
        return [self.generate() for _ in range(count)]
