"""
String Helper Tests
"""

import pytest

from extkit.utils.strings import (
    capitalize_first,
    is_email,
    is_phone_number,
    mask,
    remove_special_chars,
    remove_whitespaces,
    to_title_case,
    total_chars,
    word_count,
)


def test_capitalize_first():
    assert capitalize_first("hello world") == "Hello world"
    assert capitalize_first("élan") == "Élan"
    assert capitalize_first("") == ""
    assert capitalize_first(None) == ""


def test_to_title_case_keeps_spacing():
    """Test words are capitalized and runs of spaces survive."""
    assert to_title_case("the quick  brown fox") == "The Quick  Brown Fox"
    assert to_title_case(None) == ""


def test_remove_whitespaces():
    assert remove_whitespaces(" a b\tc\nd ") == "abcd"
    assert remove_whitespaces(None) == ""


def test_remove_special_chars():
    assert remove_special_chars("Hello, World! #2024") == "Hello World 2024"
    assert remove_special_chars("café") == "caf"


@pytest.mark.parametrize(
    "text, count",
    [
        ("one two three", 3),
        ("  spaced   out\twords \n", 3),
        ("", 0),
        ("   ", 0),
        (None, 0),
    ],
)
def test_word_count(text, count):
    assert word_count(text) == count


def test_total_chars():
    assert total_chars("hello") == 5
    assert total_chars(None) == 0


class TestMask:
    """Tests for mask."""

    def test_masks_whole_string_by_default(self):
        assert mask("secret") == "******"

    def test_masks_range(self):
        assert mask("4111111111111111", end=12) == "************1111"
        assert mask("john@example.com", start=1, end=4) == "j***@example.com"

    def test_custom_mask_char(self):
        assert mask("abcdef", 2, 4, char="#") == "ab##ef"

    def test_out_of_range_bounds_are_clamped(self):
        """Test bounds past either end never change the length."""
        assert mask("abc", start=-5, end=50) == "***"
        assert mask("abc", start=2, end=1) == "abc"

    def test_none(self):
        assert mask(None) == ""


@pytest.mark.parametrize(
    "text",
    ["jane.doe@example.com", "a+tag@sub.domain.org", "USER_1%x@host.io"],
)
def test_valid_emails(text):
    assert is_email(text)


@pytest.mark.parametrize(
    "text",
    ["", None, "plainaddress", "jane@localhost", "@example.com", "jane@example.c", "jane doe@example.com"],
)
def test_invalid_emails(text):
    assert not is_email(text)


@pytest.mark.parametrize(
    "text",
    ["+1 (555) 123-4567", "555.123.4567", "0123456", "+44 20 7946 0958"],
)
def test_valid_phone_numbers(text):
    assert is_phone_number(text)


@pytest.mark.parametrize(
    "text",
    ["", None, "12345", "555-CALL-NOW", "+" + "1" * 26, "123456789\n"],
)
def test_invalid_phone_numbers(text):
    assert not is_phone_number(text)
