"""Chord value type and chord arithmetic.

A chord is a root pitch class (0-11) plus a quality. Pitch classes, names
and size are all computed from those two values.
"""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import (
    CHORD_TEMPLATES,
    ChordQuality,
    get_intervals,
    note_name,
)


@dataclass(frozen=True)
class Chord:
    root: int  # pitch class 0-11
    quality: ChordQuality

    def __post_init__(self) -> None:
        object.__setattr__(self, "root", self.root % 12)


def chord(root: int, quality: ChordQuality) -> Chord:
    """Create a chord, normalizing the root to 0-11."""
    return Chord(root=root, quality=quality)


def chord_pitch_classes(c: Chord) -> list[int]:
    """Pitch classes of *c* in template order (root, 3rd, 5th, ...)."""
    return [(c.root + i) % 12 for i in get_intervals(c.quality)]


def chord_name(c: Chord) -> str:
    """Display name: ``"Cm7"``, ``"G7"``, ``"F#°"``."""
    return note_name(c.root) + CHORD_TEMPLATES[c.quality].symbol


def chord_full_name(c: Chord) -> str:
    """Full display name: ``"C Minor 7th"``."""
    return f"{note_name(c.root)} {CHORD_TEMPLATES[c.quality].name}"


def transpose_chord(c: Chord, semitones: int) -> Chord:
    return Chord(root=c.root + semitones, quality=c.quality)


def chords_equal(a: Chord, b: Chord) -> bool:
    return chord_key(a) == chord_key(b)


def chord_key(c: Chord) -> str:
    """Unique ``root-quality`` key used for set membership and dedup."""
    return f"{c.root}-{c.quality.value}"


def chord_size(c: Chord) -> int:
    return len(get_intervals(c.quality))
