from __future__ import annotations

"""
Inspection Domain Data Models.

Units handed from the inspector to the interface layer, and the running
summary of a whole inspection.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from charm.domain.char_models import CharInfo, DecodeOutcome, DisplayType

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class InspectedUnit:
    """
    One decode outcome placed in the stream.

    Attributes:
        position: 1-based character count, or 0-based byte offset when the
            inspection counts bytes.
        offset: 0-based byte offset of the unit's first byte.
        outcome: The ValidChar or InvalidChar from the decoder.
        info: Display properties; None for invalid units.
    """
    position: int
    offset: int
    outcome: DecodeOutcome
    info: Optional[CharInfo] = None

    @property
    def is_valid(self) -> bool:
        return self.outcome.is_valid

    def to_dict(self) -> Dict[str, Any]:
        """Flat, JSON-ready view of the unit."""
        data: Dict[str, Any] = {
            "position": self.position,
            "offset": self.offset,
            "valid": self.is_valid,
            "bytes": self.outcome.raw.hex(" "),
            "length": self.outcome.length,
        }
        if self.info is not None:
            data.update({
                "char": self.outcome.char,  # type: ignore[union-attr]
                "codepoint": f"U+{self.info.codepoint:04X}",
                "type": self.info.display_type.value,
                "width": self.info.width,
                "name": self.info.name,
                "script": self.info.script,
                "script_name": self.info.script_name,
            })
        return data


@dataclass
class InspectionSummary:
    """
    Counters accumulated over one inspection.

    Attributes:
        ok: False when the inspection stopped on an I/O error.
        error: Description of that error.
        units: Number of outcomes seen.
        byte_count: Number of bytes reported inside outcomes.
        valid: Valid characters.
        invalid: Invalid units.
        control: Valid control characters.
        combining: Valid combining marks.
        wide: Valid characters two columns wide.
        zero_width: Valid normal characters without a width (U+200B etc).
    """
    ok: bool = True
    error: str = ""

    units: int = 0
    byte_count: int = 0
    valid: int = 0
    invalid: int = 0
    control: int = 0
    combining: int = 0
    wide: int = 0
    zero_width: int = 0

    def record(self, unit: InspectedUnit) -> None:
        self.units += 1
        self.byte_count += unit.outcome.length

        if unit.info is None:
            self.invalid += 1
            return

        self.valid += 1
        if unit.info.display_type is DisplayType.CONTROL:
            self.control += 1
        elif unit.info.display_type is DisplayType.COMBINING:
            self.combining += 1
        elif unit.info.width == 2:
            self.wide += 1
        elif unit.info.width is None:
            self.zero_width += 1

    def fail(self, error: str) -> None:
        self.ok = False
        self.error = error
