from __future__ import annotations

from .inspector import inspect_stream, run_inspection
from .validator import validate_config

__all__ = [
    "inspect_stream",
    "run_inspection",
    "validate_config",
]
