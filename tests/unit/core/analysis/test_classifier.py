from __future__ import annotations

"""
Unit tests for the Character Classifier.

Verifies:
1. Control characters win over every other category.
2. Combining marks are detected by combining class anywhere in Unicode,
   not only in the Combining Diacritical Marks block.
3. Widths: narrow, wide, and None for control and zero-width characters.
4. Results are stable across repeated calls.
"""

import pytest

from charm.core.analysis.classifier import classify, describe, display_width
from charm.domain.char_models import DisplayType


@pytest.mark.parametrize("char", ["\x00", "\x07", "\t", "\n", "\x1b", "\x7f", "\x85", "\x9f"])
def test_control_characters(char):
    assert classify(char) is DisplayType.CONTROL
    assert display_width(char) is None


def test_bell():
    assert classify("\u0007") is DisplayType.CONTROL
    assert display_width("\u0007") is None


@pytest.mark.parametrize("char", [
    "\u0300",  # combining grave accent
    "\u0301",  # combining acute accent
    "\u05b0",  # hebrew point sheva
    "\u0951",  # devanagari stress sign udatta
    "\u1ab0",  # combining doubled circumflex accent
    "\u20d7",  # combining right arrow above
    "\u302a",  # ideographic level tone mark
])
def test_combining_marks_outside_the_diacritics_block(char):
    assert classify(char) is DisplayType.COMBINING


def test_combining_acute_has_no_width():
    assert classify("\u0301") is DisplayType.COMBINING
    assert display_width("\u0301") is None


@pytest.mark.parametrize("char", ["A", "z", "é", "€", "中", "\U0001f600", "Ͱ"])
def test_normal_characters(char):
    assert classify(char) is DisplayType.NORMAL


def test_narrow_and_wide_widths():
    assert display_width("A") == 1
    assert display_width("é") == 1
    assert display_width("中") == 2
    assert display_width("Ａ") == 2  # fullwidth latin capital A


def test_zero_width_space_is_normal_without_width():
    assert classify("\u200b") is DisplayType.NORMAL
    assert display_width("\u200b") is None


def test_classification_is_stable():
    samples = ["A", "\u0301", "\x07", "中", "\u200b"]
    first = [(classify(c), display_width(c)) for c in samples]

    for _ in range(5):
        assert [(classify(c), display_width(c)) for c in samples] == first


def test_describe_latin_letter():
    info = describe("A")

    assert info.codepoint == 0x41
    assert info.display_type is DisplayType.NORMAL
    assert info.width == 1
    assert info.name == "LATIN CAPITAL LETTER A"
    assert info.script == "Latn"
    assert info.script_name == "Latin"
    assert info.is_hazard is False


def test_describe_control_has_no_name():
    info = describe("\x07")

    assert info.display_type is DisplayType.CONTROL
    assert info.name is None
    assert info.is_hazard is True


def test_describe_han_character():
    info = describe("中")

    assert info.width == 2
    assert info.script == "Hani"
    assert info.name == "CJK UNIFIED IDEOGRAPH-4E2D"
