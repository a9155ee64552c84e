"""Custom exception hierarchy for fcp-harmony.

The theory engine never raises; these cover the op, query and file
surface around it.
"""

from __future__ import annotations


class FcpError(Exception):
    """Base exception for all fcp-harmony errors."""


class ValidationError(FcpError, ValueError):
    """Invalid user input (note name, chord symbol, index, tempo, etc.).

    Subclasses ValueError as well, so callers catching ``ValueError``
    around parsing also see it.
    """


class StateError(FcpError):
    """Operation not possible given the current progression."""


class SerializationError(FcpError):
    """Error during MIDI file import or export."""
