"""Unit tests for core/utils/slug.py"""

import pytest

from codderlly.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("Managing state in Flutter with setState", "managing-state-in-flutter-with-setstate"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("Swift: optionals?!", "swift-optionals"),
    ("Café crème", "cafe-creme"),
    ("", ""),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slugify_non_latin_only_is_empty():
    assert slugify("日本語") == ""
