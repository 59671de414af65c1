"""
Coupon code exceptions.

All errors raised by the library derive from CouponCodeError so callers can
catch the whole family at once.
"""


class CouponCodeError(Exception):
    """Base class for coupon code errors."""


class OutOfEntropy(CouponCodeError):
    """The expanded symbol stream ran out before enough parts were assembled."""


class InsecureRandomUnavailable(CouponCodeError):
    """No cryptographically secure random source is available."""


class InvalidConfiguration(CouponCodeError, ValueError):
    """A configuration value is missing or out of range."""


class InvalidSymbol(CouponCodeError, ValueError):
    """A character or index outside the coupon alphabet was looked up."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Not a coupon alphabet symbol: {value!r}")
