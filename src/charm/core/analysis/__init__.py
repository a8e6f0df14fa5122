from __future__ import annotations

from .classifier import classify, describe, display_width

__all__ = [
    "classify",
    "describe",
    "display_width",
]
