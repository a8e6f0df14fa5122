from __future__ import annotations

"""
Unicode Property Lookups.

Thin read-only accessors over the property tables charm relies on:
the standard library's ``unicodedata`` (names, general category, canonical
combining class), ``wcwidth`` (terminal column width) and
``fontTools.unicodedata`` (script property). The tables are immutable for
the life of the process, so every function here is pure.
"""

import unicodedata
from typing import Optional

from fontTools import unicodedata as ft_unicodedata
from wcwidth import wcwidth

# ISO 15924 code fontTools reports for unassigned / unknown script
_UNKNOWN_SCRIPT = "Zzzz"


def combining_class(char: str) -> int:
    """Canonical combining class (0 for starters)."""
    return unicodedata.combining(char)


def is_control(char: str) -> bool:
    """True for general category Cc (C0, DEL and C1 controls)."""
    return unicodedata.category(char) == "Cc"


def display_width(char: str) -> int:
    """
    Raw terminal width from wcwidth.

    Returns -1 for non-printable control characters, 0 for zero-width
    characters, 2 for East Asian wide and fullwidth characters, else 1.
    """
    return wcwidth(char)


def script_of(char: str) -> Optional[str]:
    """ISO 15924 script code such as ``Latn``, or None when unknown."""
    code = ft_unicodedata.script(char)
    if code == _UNKNOWN_SCRIPT:
        return None
    return code


def script_name_of(char: str) -> Optional[str]:
    code = script_of(char)
    if code is None:
        return None
    return ft_unicodedata.script_name(code, default=None)


def name_of(char: str) -> Optional[str]:
    """Unicode name, or None (controls and unassigned code points have none)."""
    return unicodedata.name(char, None)
