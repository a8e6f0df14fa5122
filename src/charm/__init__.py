from __future__ import annotations

"""
charm: inspect the characters, and the broken bytes, of a UTF-8 stream.
"""

from charm.domain.constants import APP_VERSION

__version__ = APP_VERSION
