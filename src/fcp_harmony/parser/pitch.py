"""Note-name parser: ``C``, ``Eb``, ``F#``, ``B♭``, ``Cbb`` -> pitch class.

Octaves are not part of a harmony note name; a bare integer is read as a
pitch class (or MIDI number) and reduced mod 12.
"""

from __future__ import annotations

import re

from fcp_harmony.errors import ValidationError

# Semitone offsets for natural notes (C-based)
NOTE_OFFSETS: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

ACCIDENTAL_OFFSETS: dict[str, int] = {
    "": 0,
    "#": 1,
    "♯": 1,
    "b": -1,
    "♭": -1,
    "##": 2,
    "bb": -2,
}

# Letter, then an optional accidental; whatever follows is left to the caller
NOTE_RE = re.compile(r"^([A-Ga-g])(##|bb|#|b|♯|♭)?")

_INT_RE = re.compile(r"^-?\d+$")


def match_note_prefix(s: str) -> tuple[int, int] | None:
    """Match a note name at the start of *s*.

    Returns ``(pitch_class, consumed_chars)`` or None if *s* does not start
    with a note letter.
    """
    m = NOTE_RE.match(s)
    if not m:
        return None
    pc = (NOTE_OFFSETS[m.group(1).upper()] + ACCIDENTAL_OFFSETS[m.group(2) or ""]) % 12
    return pc, m.end()


def parse_note_name(s: str) -> int:
    """Parse a note name into a pitch class 0-11.

    Raises
    ------
    ValidationError
        If *s* is not a note name or an integer.
    """
    text = s.strip()
    if _INT_RE.match(text):
        return int(text) % 12

    matched = match_note_prefix(text)
    if matched is None or matched[1] != len(text):
        raise ValidationError(f"Cannot parse note name: {s!r}")
    return matched[0]
