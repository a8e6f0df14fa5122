from __future__ import annotations

"""
Lenient UTF-8 Stream Decoder.

Unlike ``bytes.decode`` or a text-mode file, which reject the whole input on
the first malformed sequence, this decoder walks the stream one unit at a
time and reports each unit as either a ValidChar or an InvalidChar carrying
the offending bytes. The only failure it raises is an I/O error from the
underlying source.

Each step consumes exactly the bytes it reads. A bad lead byte consumes only
itself, so the following byte becomes the next lead and an error never
spreads past one unit.
"""

import logging
from typing import Any, Iterator

from charm.core.decoding.sources import ByteSource, as_byte_source
from charm.domain.char_models import DecodeOutcome, InvalidChar, ValidChar
from charm.domain.constants import MAX_UNIT_LENGTH

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# LEAD BYTE TABLE
# -----------------------------------------------------------------------------

def _build_lead_widths() -> bytes:
    """
    Expected unit length for every possible lead byte (RFC 3629).

    0 marks bytes that can never start a unit: continuation bytes
    (0x80-0xBF), the always-overlong 0xC0/0xC1, and 0xF5-0xFF which would
    encode past U+10FFFF.
    """
    table = bytearray(256)
    for b in range(0x00, 0x80):
        table[b] = 1
    for b in range(0xC2, 0xE0):
        table[b] = 2
    for b in range(0xE0, 0xF0):
        table[b] = 3
    for b in range(0xF0, 0xF5):
        table[b] = 4
    return bytes(table)


_LEAD_WIDTHS = _build_lead_widths()


def utf8_char_width(lead: int) -> int:
    """Return the encoded length announced by ``lead``, or 0 if it cannot lead."""
    return _LEAD_WIDTHS[lead]

# -----------------------------------------------------------------------------
# DECODER
# -----------------------------------------------------------------------------

class Decoder:
    """
    Iterator of DecodeOutcome values read from a byte source.

    Single pass and forward only. An ``OSError`` from the source propagates
    out of ``__next__``; the decoder keeps no state across steps, so pulling
    again after an error starts a fresh unit at whatever the source returns
    next. Whether to do so is the caller's decision.

    Once the source reports end of stream on a lead byte, the decoder stays
    exhausted.
    """

    def __init__(self, source: Any):
        self._source: ByteSource = as_byte_source(source)
        self._exhausted = False

    def __iter__(self) -> Iterator[DecodeOutcome]:
        return self

    def __next__(self) -> DecodeOutcome:
        if self._exhausted:
            raise StopIteration

        buf = bytearray(MAX_UNIT_LENGTH)
        view = memoryview(buf)

        # 1. Lead byte
        if self._read(view[:1]) == 0:
            self._exhausted = True
            raise StopIteration

        lead = buf[0]
        width = utf8_char_width(lead)
        if width == 0:
            return InvalidChar(bytes(buf[:1]))
        if width == 1:
            return ValidChar(chr(lead), bytes(buf[:1]))

        # 2. Tail bytes, tolerating short reads
        filled = 1
        while filled < width:
            n = self._read(view[filled:width])
            if n == 0:
                logger.debug(f"Stream ended inside a {width}-byte unit after {filled} byte(s).")
                return InvalidChar(bytes(buf[:filled]))
            filled += n

        # 3. Strict validation of the complete unit
        raw = bytes(buf[:width])
        try:
            char = raw.decode("utf-8")
        except UnicodeDecodeError:
            return InvalidChar(raw)
        return ValidChar(char, raw)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _read(self, view: memoryview) -> int:
        try:
            n = self._source.readinto(view)
        except OSError as e:
            logger.debug(f"Byte source read failed: {e}")
            raise
        if n is None:
            raise BlockingIOError("Byte source has no data available (non-blocking source).")
        return n
