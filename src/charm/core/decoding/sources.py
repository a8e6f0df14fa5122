from __future__ import annotations

"""
Byte Source adapters.

The decoder reads through the raw-I/O contract: ``readinto(buffer)`` fills
up to ``len(buffer)`` bytes and returns the count, with 0 meaning end of
stream. Short counts are legal. Files opened in binary mode, pipes,
sockets' ``makefile("rb")`` and ``io.BytesIO`` all satisfy it already; the
adapters here cover plain bytes and objects that only offer ``read(n)``.
"""

import io
from typing import Any, Optional, Protocol


class ByteSource(Protocol):
    """Anything the decoder can pull bytes from."""

    def readinto(self, buffer: Any) -> Optional[int]:
        ...


class ReadAdapter:
    """
    Expose ``readinto`` on top of an object that only has ``read(n)``.

    Short reads from the wrapped object are passed through unchanged.
    """

    def __init__(self, inner: Any):
        self._inner = inner

    def readinto(self, buffer: Any) -> Optional[int]:
        view = memoryview(buffer).cast("B")
        data = self._inner.read(len(view))
        if data is None:
            return None
        n = len(data)
        view[:n] = data
        return n


def as_byte_source(obj: Any) -> ByteSource:
    """
    Adapt ``obj`` to a ByteSource.

    Args:
        obj: ``bytes``/``bytearray``/``memoryview``, an object with
            ``readinto``, or an object with ``read(n)`` returning bytes.

    Returns:
        ByteSource: An object the decoder can consume.

    Raises:
        TypeError: ``obj`` offers no way to read bytes.
    """
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(obj))
    if hasattr(obj, "readinto"):
        return obj
    if hasattr(obj, "read"):
        return ReadAdapter(obj)
    raise TypeError(f"Cannot read bytes from {type(obj).__name__}.")
