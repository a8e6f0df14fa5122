from __future__ import annotations

from .decoder import Decoder, utf8_char_width
from .sources import ByteSource, as_byte_source

__all__ = [
    "ByteSource",
    "Decoder",
    "as_byte_source",
    "utf8_char_width",
]
