"""
Coupon code configuration.

A CouponConfig is built once and never changes. Values can come from three
layers, highest priority first:

1. Explicit values passed by the caller
2. An external configuration source (a mapping, or an object such as a
   settings row with prefix/separator/parts/part_length attributes)
3. The built-in defaults below

A field that is missing or None in one layer falls through to the next.
"""

import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidConfiguration
from .log import log

DEFAULT_PREFIX = ""
DEFAULT_SEPARATOR = "-"
DEFAULT_PARTS = 2
DEFAULT_PART_LENGTH = 4

# Accepted spellings for each field in external sources
FIELD_ALIASES = {
    "prefix": ("prefix",),
    "separator": ("separator",),
    "parts": ("parts",),
    "part_length": ("part_length", "partLength"),
}

ENV_VARS = {
    "prefix": "COUPONCODE_PREFIX",
    "separator": "COUPONCODE_SEPARATOR",
    "parts": "COUPONCODE_PARTS",
    "part_length": "COUPONCODE_PART_LENGTH",
}

_logger = logging.getLogger(__name__)


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(
            f"{name} must be an integer, got {value!r}"
        ) from None


@dataclass(frozen=True)
class CouponConfig:
    """Immutable code layout: prefix, separator, number and length of parts."""

    prefix: str = DEFAULT_PREFIX
    separator: str = DEFAULT_SEPARATOR
    parts: int = DEFAULT_PARTS
    part_length: int = DEFAULT_PART_LENGTH

    def __post_init__(self):
        # Coerce numeric strings from env vars and settings rows
        object.__setattr__(self, "parts", _to_int("parts", self.parts))
        object.__setattr__(
            self, "part_length", _to_int("part_length", self.part_length)
        )
        object.__setattr__(self, "prefix", str(self.prefix))

        if self.parts < 1:
            raise InvalidConfiguration("parts must be positive")
        if self.part_length < 2:
            raise InvalidConfiguration(
                "part_length must be at least 2 (one data symbol plus the checkdigit)"
            )
        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise InvalidConfiguration(
                f"separator must be a single character, got {self.separator!r}"
            )
        if self.separator.isascii() and self.separator.isalnum():
            raise InvalidConfiguration(
                f"separator cannot be a letter or digit, got {self.separator!r}"
            )
        # Validation strips exactly one leading token as the prefix
        if self.separator in self.prefix:
            raise InvalidConfiguration(
                f"prefix {self.prefix!r} cannot contain the separator "
                f"{self.separator!r}"
            )

    @property
    def data_length(self) -> int:
        """Number of data symbols per part."""
        return self.part_length - 1

    @property
    def code_length(self) -> int:
        """Number of symbols in a code, without prefix and separators."""
        return self.parts * self.part_length

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_source(
        cls, source: Any = None, defaults: Any = None
    ) -> "CouponConfig":
        """
        Build a configuration from an explicit source layered over defaults.

        Args:
            source: Mapping or object with explicit values (highest priority)
            defaults: Mapping or object supplying fallback values, e.g. the
                stored coupon options

        Returns:
            Resolved CouponConfig
        """
        explicit = read_source(source)
        fallback = read_source(defaults)
        resolved = {**fallback, **explicit}
        log(
            _logger,
            "debug",
            "Resolved coupon configuration",
            explicit=sorted(explicit),
            from_defaults=sorted(set(fallback) - set(explicit)),
        )
        return cls(**resolved)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CouponConfig":
        """Build a configuration from COUPONCODE_* environment variables."""
        environ = os.environ if environ is None else environ
        values = {}
        for name, var in ENV_VARS.items():
            value = environ.get(var)
            if value not in (None, ""):
                values[name] = value
        return cls.from_source(values)


def read_source(source: Any) -> Dict[str, Any]:
    """
    Extract the recognised, non-None fields from a configuration source.

    Args:
        source: None, a CouponConfig, a mapping, or an object with attributes

    Returns:
        Dictionary keyed by CouponConfig field names
    """
    if source is None:
        return {}
    if isinstance(source, CouponConfig):
        return source.as_dict()

    values = {}
    for name, aliases in FIELD_ALIASES.items():
        for alias in aliases:
            if isinstance(source, Mapping):
                value = source.get(alias)
            else:
                value = getattr(source, alias, None)
            if value is not None:
                values[name] = value
                break
    return values


def resolve_config(config: Any = None, defaults: Any = None) -> CouponConfig:
    """Return config unchanged if it is already a CouponConfig without defaults."""
    if isinstance(config, CouponConfig) and defaults is None:
        return config
    return CouponConfig.from_source(config, defaults)
