"""Unit tests for free-text to tsquery normalization."""

import pytest

from pinboard.application.services.query_normalizer import normalize, tokenize


def test_normalize_builds_prefix_and_query() -> None:
    """Punctuation is dropped and each word gets a prefix marker, AND-joined."""
    assert normalize("John & Jane!") == "john:* & jane:*"


def test_normalize_lowercases_and_collapses_whitespace() -> None:
    assert normalize("  Senior    DEVELOPER\t") == "senior:* & developer:*"


@pytest.mark.parametrize("raw", ["", "   ", None, "!!!", "a b c"])
def test_normalize_returns_empty_when_nothing_searchable(raw) -> None:
    """No word of two or more characters means no text predicate."""
    assert normalize(raw) == ""


def test_normalize_drops_single_character_words() -> None:
    assert normalize("a developer x") == "developer:*"


def test_normalize_is_idempotent() -> None:
    """Normalizing an already normalized query gives the same query."""
    once = normalize("Tech Corp: design-studio")
    assert normalize(once) == once


def test_normalize_splits_on_underscore() -> None:
    assert normalize("dev_ops") == "dev:* & ops:*"


def test_tokenize_keeps_digits_and_unicode_letters() -> None:
    assert tokenize("Café 2024") == ["café", "2024"]
