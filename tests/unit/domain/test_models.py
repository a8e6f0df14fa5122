from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. Raw buffer length constraints of decode outcomes.
2. Immutability of frozen dataclasses.
3. JSON view of inspected units and summary bookkeeping.
"""

import dataclasses

import pytest

from charm.domain.char_models import CharInfo, DisplayType, InvalidChar, ValidChar
from charm.domain.inspection_models import InspectedUnit, InspectionSummary


def test_valid_char_properties():
    outcome = ValidChar("€", b"\xe2\x82\xac")

    assert outcome.is_valid is True
    assert outcome.length == 3
    assert outcome.codepoint == 0x20AC


def test_invalid_char_properties():
    outcome = InvalidChar(b"\xe2\x82")

    assert outcome.is_valid is False
    assert outcome.length == 2


@pytest.mark.parametrize("raw", [b"", b"\x80" * 5])
def test_raw_length_must_be_one_to_four(raw):
    with pytest.raises(ValueError):
        InvalidChar(raw)


def test_valid_char_holds_a_single_character():
    with pytest.raises(ValueError):
        ValidChar("ab", b"ab")


@pytest.mark.parametrize("char, raw", [
    ("A", b"B"),
    ("é", b"\xe9"),
    ("€", b"\xe2\x82"),
    ("A", b"\xc1\x81"),  # overlong form of A
])
def test_valid_char_raw_must_encode_char(char, raw):
    with pytest.raises(ValueError):
        ValidChar(char, raw)


def test_outcomes_are_frozen():
    outcome = InvalidChar(b"\xff")
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.raw = b"\x00"  # type: ignore[misc]


def test_char_info_hazard_flag():
    normal = CharInfo(codepoint=0x41, display_type=DisplayType.NORMAL, width=1)
    wide = CharInfo(codepoint=0x4E2D, display_type=DisplayType.NORMAL, width=2)
    zero = CharInfo(codepoint=0x200B, display_type=DisplayType.NORMAL, width=None)
    combining = CharInfo(codepoint=0x301, display_type=DisplayType.COMBINING, width=None)

    assert normal.is_hazard is False
    assert wide.is_hazard is False
    assert zero.is_hazard is True
    assert combining.is_hazard is True


def test_inspected_unit_to_dict_valid():
    info = CharInfo(
        codepoint=0x41,
        display_type=DisplayType.NORMAL,
        width=1,
        name="LATIN CAPITAL LETTER A",
        script="Latn",
        script_name="Latin",
    )
    unit = InspectedUnit(position=1, offset=0, outcome=ValidChar("A", b"A"), info=info)

    assert unit.to_dict() == {
        "position": 1,
        "offset": 0,
        "valid": True,
        "bytes": "41",
        "length": 1,
        "char": "A",
        "codepoint": "U+0041",
        "type": "normal",
        "width": 1,
        "name": "LATIN CAPITAL LETTER A",
        "script": "Latn",
        "script_name": "Latin",
    }


def test_inspected_unit_to_dict_invalid():
    unit = InspectedUnit(position=7, offset=9, outcome=InvalidChar(b"\xe2\x82"))

    assert unit.to_dict() == {
        "position": 7,
        "offset": 9,
        "valid": False,
        "bytes": "e2 82",
        "length": 2,
    }


def test_summary_fail_records_error():
    summary = InspectionSummary()
    summary.fail("boom")

    assert summary.ok is False
    assert summary.error == "boom"
