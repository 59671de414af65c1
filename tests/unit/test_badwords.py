"""Unit tests for the forbidden-word filter."""

import pytest

from couponcode.badwords import (
    DEFAULT_BAD_WORDS,
    DEFAULT_FILTER,
    OBFUSCATED_BAD_WORDS,
    BadWordFilter,
    decode_word,
)


def test_decode_word_undoes_rot13():
    assert decode_word("NCR") == "APE"
    assert decode_word("CUNG") == "PHAT"


def test_decode_word_canonicalizes_ambiguous_letters():
    assert decode_word("FUNT") == "5HAG"
    assert decode_word("0TER") == "0GRE"


def test_default_words_are_decoded_once():
    assert DEFAULT_FILTER.words is DEFAULT_BAD_WORDS
    assert isinstance(DEFAULT_BAD_WORDS, frozenset)
    assert 0 < len(DEFAULT_FILTER) <= len(OBFUSCATED_BAD_WORDS)


def test_default_words_are_short_and_canonical():
    for word in DEFAULT_BAD_WORDS:
        assert 3 <= len(word) <= 5
        assert word == word.upper()
        assert not set(word) & set("IOSZ")


def test_default_filter_membership():
    assert DEFAULT_FILTER.is_forbidden("APE")
    assert "0GRE" in DEFAULT_FILTER
    assert not DEFAULT_FILTER.is_forbidden("ABCT")


def test_custom_filter_normalizes_its_words():
    bad_words = BadWordFilter(["abct", "ooo8"])
    assert bad_words.is_forbidden("ABCT")
    assert bad_words.is_forbidden("0008")
    assert len(bad_words) == 2


def test_from_obfuscated():
    bad_words = BadWordFilter.from_obfuscated(["NOPG"])
    assert bad_words.words == frozenset({"ABCT"})


def test_filter_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_FILTER.extra = 1
    with pytest.raises(AttributeError):
        DEFAULT_FILTER.words.add("ABCT")


def test_empty_filter_rejects_nothing(no_bad_words):
    assert not no_bad_words.is_forbidden("APE")
    assert len(no_bad_words) == 0
