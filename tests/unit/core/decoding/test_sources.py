from __future__ import annotations

"""
Unit tests for Byte Source adaptation.
"""

import io

import pytest

from charm.core.decoding.sources import ReadAdapter, as_byte_source


class ReadOnly:
    """Object exposing only read(n), returning at most two bytes per call."""

    def __init__(self, data):
        self._data = data

    def read(self, n):
        chunk, self._data = self._data[:min(n, 2)], self._data[min(n, 2):]
        return chunk


def test_bytes_become_bytes_io():
    source = as_byte_source(b"abc")
    buf = bytearray(3)

    assert isinstance(source, io.BytesIO)
    assert source.readinto(buf) == 3
    assert bytes(buf) == b"abc"


def test_bytearray_is_copied():
    data = bytearray(b"xy")
    source = as_byte_source(data)
    data[0] = ord("z")

    buf = bytearray(2)
    source.readinto(buf)
    assert bytes(buf) == b"xy"


def test_readinto_objects_pass_through():
    stream = io.BytesIO(b"abc")
    assert as_byte_source(stream) is stream


def test_read_only_objects_are_wrapped():
    source = as_byte_source(ReadOnly(b"abcde"))
    buf = bytearray(4)

    assert isinstance(source, ReadAdapter)
    # Short read from the wrapped object is passed through
    assert source.readinto(memoryview(buf)) == 2
    assert bytes(buf[:2]) == b"ab"


def test_read_adapter_end_of_stream():
    source = ReadAdapter(ReadOnly(b""))
    assert source.readinto(bytearray(1)) == 0


def test_read_adapter_propagates_none():
    class NoData:
        def read(self, n):
            return None

    assert ReadAdapter(NoData()).readinto(bytearray(1)) is None


def test_unreadable_object_is_rejected():
    with pytest.raises(TypeError):
        as_byte_source(42)
