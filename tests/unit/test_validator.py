"""Unit tests for validation and canonical formatting."""

import pytest

from couponcode import CouponCode, CouponConfig, normalize_code, validate_code
from couponcode.validator import CodeValidator, chunk

# ABC -> T as part 1, ABC -> 3 as part 2; 000 -> 8 as part 1, 000 -> G as part 2
VALID = "ABCT-ABC3"
VALID_ZEROS = "0008-000G"


@pytest.mark.parametrize(
    "code",
    [
        VALID,
        VALID_ZEROS,
        "abct-abc3",
        "ABCTABC3",
        " abct  abc3 ",
        "ABCT ABC3",
        "ooo8-ooog",
        "PROMO-ABCT-ABC3",
        "promo-abct-abc3",
        "1K5N-M5NT",
    ],
)
def test_valid_codes(coupons, code):
    assert coupons.validate(code)


@pytest.mark.parametrize(
    "code",
    [
        "BBCT-ABC3",  # single substitution in a data symbol
        "BACT-ABC3",  # adjacent transposition
        "ABCT-ABC4",  # wrong checkdigit
        "ABC3-ABCT",  # parts swapped
        "ABCT-ABC",  # too short
        "ABCT-ABC3X",  # too long
        "ABCT-ABC3-EXTRA",  # first token taken as prefix, rest too long
        "",
        "----",
    ],
)
def test_invalid_codes(coupons, code):
    assert not coupons.validate(code)


def test_documented_single_character_edit(coupons):
    assert coupons.validate("ABCT-ABC3")
    assert not coupons.validate("BBCT-ABC3")


def test_validate_never_raises_on_odd_input(coupons):
    assert coupons.validate(None) is False
    assert coupons.validate(12345) is False
    assert coupons.validate([VALID, None]) is False


def test_validate_collection(coupons):
    assert coupons.validate([VALID, VALID_ZEROS])
    assert coupons.validate((code for code in [VALID, "abct-abc3"]))
    assert not coupons.validate([VALID, "BBCT-ABC3", VALID_ZEROS])
    assert not coupons.validate(["BBCT-ABC3"])


def test_validate_empty_collection(coupons):
    assert coupons.validate([])


def test_validate_respects_layout():
    three_parts = CouponCode({"parts": 3})
    assert not three_parts.validate(VALID)
    assert CouponCode({"separator": "_"}).validate("ABCT_ABC3")


def test_split_prefix():
    validator = CodeValidator(CouponConfig())
    assert validator.split_prefix("ABCT-ABC3") == (None, "ABCT-ABC3")
    assert validator.split_prefix("shop-ABCT-ABC3") == ("shop", "ABCT-ABC3")
    assert validator.split_prefix("-ABCT-ABC3") == ("", "ABCT-ABC3")


def test_chunk():
    assert chunk("ABCDEFGHJ", 4) == ["ABCD", "EFGH", "J"]
    assert chunk("", 4) == []


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("abct-abc3", VALID),
        ("abctabc3", VALID),
        (" a b c t - a b c 3 ", VALID),
        ("ooo8 ooog", VALID_ZEROS),
        ("promo-abct-abc3", "PROMO-ABCT-ABC3"),
        ("oisz", "0152"),
        ("abctabc3x", "ABCT-ABC3-X"),
        ("", ""),
    ],
)
def test_normalize(coupons, raw, expected):
    assert coupons.normalize(raw) == expected


def test_normalize_does_not_check_digits(coupons):
    assert coupons.normalize("bbct-abc3") == "BBCT-ABC3"


def test_normalize_collection(coupons):
    assert coupons.normalize(["abct-abc3", "ooo8ooog"]) == [VALID, VALID_ZEROS]
    assert coupons.normalize([]) == []


def test_empty_prefix_token_falls_back_to_configured_prefix():
    assert CouponCode({"prefix": "shop"}).normalize("-abct-abc3") == "SHOP-ABCT-ABC3"
    assert CouponCode().normalize("-abct-abc3") == VALID


def test_normalize_keeps_given_prefix_over_configured_one():
    coupons = CouponCode({"prefix": "shop"})
    assert coupons.normalize("promo-abct-abc3") == "PROMO-ABCT-ABC3"


def test_normalize_without_prefix_token_adds_none():
    assert CouponCode({"prefix": "shop"}).normalize("abct-abc3") == VALID


def test_normalize_lowercase_generated_code_round_trips():
    for config in ({}, {"prefix": "promo"}, {"parts": 3, "part_length": 5}):
        coupons = CouponCode(config)
        for code in coupons.generate_many(50):
            assert coupons.normalize(code.lower()) == code


def test_static_helpers():
    assert normalize_code("abct abc3") == VALID
    assert normalize_code(["abct abc3"]) == [VALID]
    assert validate_code("abct abc3")
    assert not validate_code("bbct abc3")
