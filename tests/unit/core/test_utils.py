"""Unit tests for core/utils.py"""

import pytest

from rstlite.core.utils import sha256, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("My_File  Name", "my-file-name"),
    ("--Already--slugged--", "already-slugged"),
    ("???", "document"),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_sha256_length():
    assert len(sha256("abc")) == 64
    assert sha256("abc") == sha256("abc")
