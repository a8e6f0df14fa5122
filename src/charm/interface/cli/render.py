from __future__ import annotations

"""
Terminal Rendering.

Turns InspectedUnit values into report lines, either human-readable with
optional ANSI colors or JSON Lines. All presentation state (colors, the
output stream) lives here; the decoder and classifier never see it.
"""

import json
import os
from dataclasses import asdict
from typing import Any, Dict, Optional, TextIO, Tuple

from charm.domain.char_models import DisplayType
from charm.domain.constants import COLOR_ALWAYS, COLOR_NEVER
from charm.domain.inspection_models import InspectedUnit, InspectionSummary

# -----------------------------------------------------------------------------
# ANSI STYLING
# -----------------------------------------------------------------------------

_SGR: Dict[str, str] = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "reset": "\x1b[0m",
}

# Columns reserved for the glyph cell, enough for "U+10FFFF"
GLYPH_COLUMNS = 8


def should_colorize(mode: str, stream: Any) -> bool:
    """
    Resolve the ``color`` setting against the output stream.

    ``auto`` colors only a TTY, and honours the NO_COLOR convention.
    """
    if mode == COLOR_ALWAYS:
        return True
    if mode == COLOR_NEVER:
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, color: Optional[str]) -> str:
    if not color:
        return text
    return f"{_SGR[color]}{text}{_SGR['reset']}"

# -----------------------------------------------------------------------------
# LINE FORMATTING
# -----------------------------------------------------------------------------

def format_glyph(unit: InspectedUnit) -> Tuple[str, int]:
    """
    Printable cell for a unit and the number of columns it takes.

    Control characters show their decimal code point, combining marks sit on
    a space so they have something to attach to, zero-width characters show
    their U+ notation, and everything else is quoted.
    """
    info = unit.info
    if info is None:
        return "invalid", 7

    char = chr(info.codepoint)
    if info.display_type is DisplayType.CONTROL:
        text = f"#{info.codepoint}"
        return text, len(text)
    if info.display_type is DisplayType.COMBINING:
        return f"' {char}'", 3
    if info.width is None:
        text = f"U+{info.codepoint:04X}"
        return text, len(text)
    return f"'{char}'", 2 + info.width


def unit_color(unit: InspectedUnit) -> Optional[str]:
    info = unit.info
    if info is None:
        return "red"
    if info.display_type is DisplayType.CONTROL:
        return "green"
    if info.display_type is DisplayType.COMBINING:
        return "magenta"
    if info.width == 2:
        return "cyan"
    return None


def format_unit(unit: InspectedUnit, config: Dict[str, Any], *, colorize: bool = False) -> str:
    """
    Build the report line of one unit.

    Layout: ``{position:>5}: {glyph} = {hex bytes}`` followed by the
    character name (``show_names``) and script (``show_scripts``).
    """
    glyph, columns = format_glyph(unit)
    padding = " " * max(GLYPH_COLUMNS - columns, 0)
    line = f"{unit.position:>5}: {glyph}{padding} = {unit.outcome.raw.hex(' ')}"

    info = unit.info
    if info is not None:
        if config.get("show_names"):
            line += f"  {info.name or '<unnamed>'}"
        if config.get("show_scripts"):
            line += f"  [{info.script_name or info.script or 'Unknown'}]"

    return _paint(line, unit_color(unit) if colorize else None)


def format_summary(summary: InspectionSummary) -> str:
    """Human-readable block of the summary counters."""
    labels = [
        ("units", "Units"),
        ("byte_count", "Bytes"),
        ("valid", "Valid characters"),
        ("invalid", "Invalid units"),
        ("control", "Control characters"),
        ("combining", "Combining marks"),
        ("wide", "Wide characters"),
        ("zero_width", "Zero-width characters"),
    ]
    values = asdict(summary)
    lines = [f"{label}: {values[key]}" for key, label in labels]
    if not summary.ok:
        lines.append(f"Stopped on read error: {summary.error}")
    return "\n".join(lines)

# -----------------------------------------------------------------------------
# RENDERER
# -----------------------------------------------------------------------------

class Renderer:
    """
    Unit sink writing the report to a text stream.

    Args:
        stream: Destination (stdout in the CLI).
        config: Validated configuration.
        json_output: Emit JSON Lines instead of human lines.
    """

    def __init__(self, stream: TextIO, config: Dict[str, Any], *, json_output: bool = False):
        self._stream = stream
        self._config = config
        self._json = json_output
        self._colorize = not json_output and should_colorize(config.get("color", ""), stream)

    def __call__(self, unit: InspectedUnit) -> None:
        if self._json:
            self._stream.write(json.dumps(unit.to_dict(), ensure_ascii=False) + "\n")
        else:
            self._stream.write(format_unit(unit, self._config, colorize=self._colorize) + "\n")

    def finish(self, summary: InspectionSummary) -> None:
        """Write the summary block when ``show_summary`` is on."""
        if self._config.get("show_summary"):
            if self._json:
                self._stream.write(json.dumps({"summary": asdict(summary)}, ensure_ascii=False) + "\n")
            else:
                self._stream.write("\n" + format_summary(summary) + "\n")
        self._stream.flush()
