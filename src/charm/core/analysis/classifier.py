from __future__ import annotations

"""
Character Classifier.

Derives display properties from Unicode character properties: whether a
character is a control code, a combining mark or an ordinary glyph, and how
many terminal columns it occupies. Everything here is a pure function of the
character.
"""

from typing import Optional

from charm.core.analysis import properties
from charm.domain.char_models import CharInfo, DisplayType


def classify(char: str) -> DisplayType:
    """
    Decide how ``char`` should be displayed.

    Control characters win over combining marks; a combining mark is any
    character with a nonzero canonical combining class.
    """
    if properties.is_control(char):
        return DisplayType.CONTROL
    if properties.combining_class(char) != 0:
        return DisplayType.COMBINING
    return DisplayType.NORMAL


def display_width(char: str) -> Optional[int]:
    """
    Columns ``char`` occupies in a monospace terminal.

    Returns:
        Optional[int]: 1 or 2, or None for control characters and characters
        that render with zero (or undefined) width.
    """
    if properties.is_control(char):
        return None
    width = properties.display_width(char)
    if width <= 0:
        return None
    return width


def describe(char: str) -> CharInfo:
    """Bundle every display property of ``char`` into a CharInfo."""
    return CharInfo(
        codepoint=ord(char),
        display_type=classify(char),
        width=display_width(char),
        name=properties.name_of(char),
        script=properties.script_of(char),
        script_name=properties.script_name_of(char),
    )
