from __future__ import annotations

"""
Application error hierarchy.

Malformed UTF-8 is not an error anywhere in charm; it is reported as data.
These exceptions cover the conditions that stop an inspection before it
starts.
"""


class CharmError(Exception):
    """Base class for charm failures."""


class InputError(CharmError):
    """The input stream could not be acquired."""
