"""Unit tests for core/utils/slug.py"""

import pytest

from mdxlive.core.utils.slug import capitalize, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("API Reference", "api-reference"),
    ("  Multiple   Spaces  ", "multiple-spaces"),
    ("my_file_name", "my-file-name"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-ch-rs"),
    ("", ""),
])
def test_slugify_basic(text, expected):
    """slugify converts text to lowercase hyphenated slug."""
    assert slugify(text) == expected


@pytest.mark.parametrize("text", ["Hello World", "  x -- y  ", "already-slugified", "Ünïcode Tïtle"])
def test_slugify_idempotent(text):
    """Slugifying an already-slugified string returns it unchanged."""
    once = slugify(text)
    assert slugify(once) == once


def test_slugify_strips_leading_trailing_hyphens():
    """slugify strips leading/trailing hyphens from result."""
    assert slugify("!leading!") == "leading"


@pytest.mark.parametrize("text,expected", [
    ("forms", "Forms"),
    ("getting started", "Getting started"),
    ("", ""),
])
def test_capitalize(text, expected):
    """capitalize uppercases only the first character."""
    assert capitalize(text) == expected
