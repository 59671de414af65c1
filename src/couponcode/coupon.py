"""
CouponCode facade.

Bundles generation, validation and normalization over one configuration:

    coupons = CouponCode({"prefix": "promo"})
    code = coupons.generate()          # e.g. PROMO-1K7Q-N3GT
    coupons.validate(code.lower())     # True
    coupons.normalize("promo-1k7q-n3gt") # PROMO-1K7Q-N3GT

normalize_code and validate_code are one-shot helpers that build a
default-configured instance and delegate to it.
"""

from typing import Any, Iterable, List, Optional, Union

from .badwords import DEFAULT_FILTER, BadWordFilter
from .config import CouponConfig, resolve_config
from .export import Row, export_rows
from .generator import CodeGenerator, Seed
from .preview import preview
from .validator import CodeInput, CodeValidator


class CouponCode:
    """Generates, validates and normalizes codes for a single layout."""

    def __init__(
        self,
        config: Any = None,
        *,
        defaults: Any = None,
        bad_words: BadWordFilter = DEFAULT_FILTER,
    ):
        """
        Args:
            config: CouponConfig, mapping or object with prefix, separator,
                parts and part_length. Missing fields fall back to defaults.
            defaults: External configuration source, e.g. stored options
            bad_words: Filter applied to generated parts
        """
        self.config: CouponConfig = resolve_config(config, defaults)
        self._generator = CodeGenerator(self.config, bad_words)
        self._validator = CodeValidator(self.config)

    def __repr__(self) -> str:
        return f"CouponCode({self.config!r})"

    @property
    def bad_words(self) -> BadWordFilter:
        return self._generator.bad_words

    def generate(self, seed: Optional[Seed] = None) -> str:
        return self._generator.generate(seed)

    def generate_many(self, count: int = 1) -> List[str]:
        return self._generator.generate_many(count)

    def validate(self, code: CodeInput) -> bool:
        return self._validator.validate(code)

    def normalize(self, code: CodeInput) -> Union[str, List[str]]:
        return self._validator.normalize(code)

    def preview(self) -> str:
        """Placeholder code for this instance's own layout."""
        return preview(self.config.as_dict())

    @staticmethod
    def export_rows(
        codes: Iterable,
        code_label: str,
        used_label: Optional[str] = None,
        yes_label: str = "Yes",
        no_label: str = "No",
    ) -> List[Row]:
        return export_rows(codes, code_label, used_label, yes_label, no_label)

    def generate_export_rows(
        self,
        count: int,
        code_label: str,
        used_label: Optional[str] = None,
        yes_label: str = "Yes",
        no_label: str = "No",
    ) -> List[Row]:
        """Generate count fresh codes and lay them out for export."""
        codes = self.generate_many(count)
        if used_label is not None:
            codes = [(code, False) for code in codes]
        return export_rows(codes, code_label, used_label, yes_label, no_label)


def normalize_code(code: CodeInput) -> Union[str, List[str]]:
    """Normalize with the default layout."""
    return CouponCode().normalize(code)


def validate_code(code: CodeInput) -> bool:
    """Validate with the default layout."""
    return CouponCode().validate(code)
