from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Provides byte sources that misbehave in controlled ways (short reads,
   I/O failures) and a ready configuration dictionary.
"""

import os
import sys
from typing import Any, Dict, Iterable, List, Optional, Union

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Fake Byte Sources
# -----------------------------------------------------------------------------
class ScriptedSource:
    """
    Byte source replaying a script of reads.

    Each script entry is either a bytes chunk, delivered across as many
    ``readinto`` calls as the caller's buffers require but never merged with
    the next chunk (so chunk boundaries become short reads), or an exception
    instance raised by the read that reaches it. When the script runs out,
    every read returns 0.
    """

    def __init__(self, script: Iterable[Union[bytes, BaseException]]):
        self._script: List[Union[bytes, BaseException]] = list(script)
        self.reads = 0

    def readinto(self, buffer: Any) -> Optional[int]:
        self.reads += 1
        if not self._script:
            return 0

        head = self._script[0]
        if isinstance(head, BaseException):
            self._script.pop(0)
            raise head

        view = memoryview(buffer)
        n = min(len(view), len(head))
        view[:n] = head[:n]
        rest = head[n:]
        if rest:
            self._script[0] = rest
        else:
            self._script.pop(0)
        return n


@pytest.fixture
def scripted_source():
    """Factory building a ScriptedSource from a read script."""
    return ScriptedSource


@pytest.fixture
def trickle():
    """Factory building a source that delivers one byte per read."""
    def _make(data: bytes) -> ScriptedSource:
        return ScriptedSource([data[i:i + 1] for i in range(len(data))])
    return _make


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary.

    Mirrors the structure of 'charm.domain.config.get_default_config' with
    colors disabled so rendered lines stay plain.
    """
    return {
        "count_bytes": False,
        "show_names": False,
        "show_scripts": False,
        "color": "never",
        "show_summary": False,
    }
