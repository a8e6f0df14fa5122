from __future__ import annotations

"""
Character Domain Data Models.

The decode outcome union produced by the stream decoder, and the display
classification attached to valid characters by the classifier.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from charm.domain.constants import MAX_UNIT_LENGTH

# -----------------------------------------------------------------------------
# DECODE OUTCOMES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidChar:
    """
    A well-formed UTF-8 unit.

    Attributes:
        char: The decoded character (a one-character string).
        raw: The exact bytes that encoded it.
    """
    char: str
    raw: bytes

    def __post_init__(self) -> None:
        _check_raw(self.raw)
        if len(self.char) != 1:
            raise ValueError(f"Expected a single character, got {self.char!r}.")
        if self.char.encode("utf-8", "surrogatepass") != self.raw:
            raise ValueError(f"{self.raw!r} is not the UTF-8 encoding of {self.char!r}.")

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def length(self) -> int:
        return len(self.raw)

    @property
    def codepoint(self) -> int:
        return ord(self.char)


@dataclass(frozen=True)
class InvalidChar:
    """
    Bytes that did not form a legal UTF-8 unit.

    ``raw`` holds everything read for the unit: a lone bad lead byte, a
    truncated tail at end of stream, or a full-length unit that failed to
    decode (bad continuation byte, overlong form, encoded surrogate).
    """
    raw: bytes

    def __post_init__(self) -> None:
        _check_raw(self.raw)

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def length(self) -> int:
        return len(self.raw)


DecodeOutcome = Union[ValidChar, InvalidChar]


def _check_raw(raw: bytes) -> None:
    if not 1 <= len(raw) <= MAX_UNIT_LENGTH:
        raise ValueError(
            f"Raw unit must hold 1 to {MAX_UNIT_LENGTH} bytes, got {len(raw)}."
        )

# -----------------------------------------------------------------------------
# DISPLAY CLASSIFICATION
# -----------------------------------------------------------------------------

class DisplayType(str, Enum):
    """How a character should be shown."""

    # Nothing special.
    NORMAL = "normal"

    # Drawn on top of another glyph; needs a base to be visible.
    COMBINING = "combining"

    # No glyph; the code point number is shown instead.
    CONTROL = "control"


@dataclass(frozen=True)
class CharInfo:
    """
    Display properties of one character.

    Attributes:
        codepoint: Unicode scalar value.
        display_type: Normal, combining or control.
        width: Terminal columns (1 or 2), or None for control and
            zero-width characters.
        name: Unicode character name, if it has one.
        script: ISO 15924 script code, if assigned.
        script_name: Human-readable script name, if assigned.
    """
    codepoint: int
    display_type: DisplayType
    width: Optional[int]
    name: Optional[str] = None
    script: Optional[str] = None
    script_name: Optional[str] = None

    @property
    def is_hazard(self) -> bool:
        """True when the character does not render as an ordinary glyph."""
        return self.display_type is not DisplayType.NORMAL or self.width is None
