"""Chord quality definitions, note names, and scale templates.

Everything in this module is static data built once at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Note names
# ---------------------------------------------------------------------------

NOTE_NAMES_SHARP: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
NOTE_NAMES_FLAT: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)

# Db, Eb, F, Gb, Ab, Bb are spelled with flats; everything else with sharps
FLAT_KEYS: frozenset[int] = frozenset({1, 3, 5, 6, 8, 10})

MIDDLE_C = 60


def note_name(pc: int, prefer_flat: bool | None = None) -> str:
    """Return the display name of a pitch class.

    When *prefer_flat* is None the spelling follows :data:`FLAT_KEYS`.
    """
    n = pc % 12
    if prefer_flat is None:
        prefer_flat = n in FLAT_KEYS
    return NOTE_NAMES_FLAT[n] if prefer_flat else NOTE_NAMES_SHARP[n]


# ---------------------------------------------------------------------------
# Chord qualities
# ---------------------------------------------------------------------------


class ChordQuality(str, Enum):
    MAJOR = "major"
    MINOR = "minor"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"
    DOM7 = "dom7"
    MAJ7 = "maj7"
    MIN7 = "min7"
    DIM7 = "dim7"
    HALF_DIM7 = "half_dim7"
    MIN_MAJ7 = "min_maj7"
    AUG7 = "aug7"
    SUS4 = "sus4"
    SUS2 = "sus2"
    DOM7SUS4 = "dom7sus4"
    SIXTH = "sixth"
    MIN6 = "min6"
    SIX_NINE = "six_nine"
    ADD9 = "add9"
    MIN_ADD9 = "min_add9"
    DOM9 = "dom9"
    MAJ9 = "maj9"
    MIN9 = "min9"
    DOM9SUS4 = "dom9sus4"
    DOM11 = "dom11"
    MIN11 = "min11"
    DOM13 = "dom13"
    MIN13 = "min13"
    MAJ13 = "maj13"
    ALT7 = "alt7"
    DOM7SHARP11 = "dom7sharp11"
    DOM7FLAT9 = "dom7flat9"
    DOM7SHARP9 = "dom7sharp9"
    DOM7FLAT13 = "dom7flat13"
    DOM7FLAT5 = "dom7flat5"
    DOM7SHARP5FLAT9 = "dom7sharp5flat9"
    DOM7SHARP5SHARP9 = "dom7sharp5sharp9"
    MIN7FLAT9 = "min7flat9"
    HALF_DIM7FLAT9 = "half_dim7flat9"


@dataclass(frozen=True)
class QualityTemplate:
    intervals: tuple[int, ...]  # semitones above the root, ascending, starts at 0
    symbol: str  # suffix after the root name: "m7", "°", "7♯9"
    name: str  # full name: "Minor 7th"


# Declaration order matters: chord identification tries qualities in this order.
CHORD_TEMPLATES: dict[ChordQuality, QualityTemplate] = {
    ChordQuality.MAJOR: QualityTemplate((0, 4, 7), "", "Major"),
    ChordQuality.MINOR: QualityTemplate((0, 3, 7), "m", "Minor"),
    ChordQuality.DIMINISHED: QualityTemplate((0, 3, 6), "°", "Diminished"),
    ChordQuality.AUGMENTED: QualityTemplate((0, 4, 8), "+", "Augmented"),
    ChordQuality.DOM7: QualityTemplate((0, 4, 7, 10), "7", "Dominant 7th"),
    ChordQuality.MAJ7: QualityTemplate((0, 4, 7, 11), "maj7", "Major 7th"),
    ChordQuality.MIN7: QualityTemplate((0, 3, 7, 10), "m7", "Minor 7th"),
    ChordQuality.DIM7: QualityTemplate((0, 3, 6, 9), "°7", "Diminished 7th"),
    ChordQuality.HALF_DIM7: QualityTemplate((0, 3, 6, 10), "ø7", "Half-diminished 7th"),
    ChordQuality.MIN_MAJ7: QualityTemplate((0, 3, 7, 11), "mM7", "Minor-major 7th"),
    ChordQuality.AUG7: QualityTemplate((0, 4, 8, 10), "+7", "Augmented 7th"),
    ChordQuality.SUS4: QualityTemplate((0, 5, 7), "sus4", "Suspended 4th"),
    ChordQuality.SUS2: QualityTemplate((0, 2, 7), "sus2", "Suspended 2nd"),
    ChordQuality.DOM7SUS4: QualityTemplate((0, 5, 7, 10), "7sus4", "Dominant 7th sus4"),
    ChordQuality.SIXTH: QualityTemplate((0, 4, 7, 9), "6", "Major 6th"),
    ChordQuality.MIN6: QualityTemplate((0, 3, 7, 9), "m6", "Minor 6th"),
    ChordQuality.SIX_NINE: QualityTemplate((0, 4, 7, 9, 14), "6/9", "Six-nine"),
    ChordQuality.ADD9: QualityTemplate((0, 4, 7, 14), "add9", "Added 9th"),
    ChordQuality.MIN_ADD9: QualityTemplate((0, 3, 7, 14), "m(add9)", "Minor added 9th"),
    ChordQuality.DOM9: QualityTemplate((0, 4, 7, 10, 14), "9", "Dominant 9th"),
    ChordQuality.MAJ9: QualityTemplate((0, 4, 7, 11, 14), "maj9", "Major 9th"),
    ChordQuality.MIN9: QualityTemplate((0, 3, 7, 10, 14), "m9", "Minor 9th"),
    ChordQuality.DOM9SUS4: QualityTemplate((0, 5, 7, 10, 14), "9sus4", "Dominant 9th sus4"),
    ChordQuality.DOM11: QualityTemplate((0, 4, 7, 10, 14, 17), "11", "Dominant 11th"),
    ChordQuality.MIN11: QualityTemplate((0, 3, 7, 10, 14, 17), "m11", "Minor 11th"),
    ChordQuality.DOM13: QualityTemplate((0, 4, 7, 10, 14, 21), "13", "Dominant 13th"),
    ChordQuality.MIN13: QualityTemplate((0, 3, 7, 10, 14, 21), "m13", "Minor 13th"),
    ChordQuality.MAJ13: QualityTemplate((0, 4, 7, 11, 14, 21), "maj13", "Major 13th"),
    ChordQuality.ALT7: QualityTemplate((0, 4, 10, 13, 15, 20), "7alt", "Altered dominant"),
    ChordQuality.DOM7SHARP11: QualityTemplate((0, 4, 7, 10, 18), "7♯11", "Dominant 7th ♯11"),
    ChordQuality.DOM7FLAT9: QualityTemplate((0, 4, 7, 10, 13), "7♭9", "Dominant 7th ♭9"),
    ChordQuality.DOM7SHARP9: QualityTemplate((0, 4, 7, 10, 15), "7♯9", "Dominant 7th ♯9"),
    ChordQuality.DOM7FLAT13: QualityTemplate((0, 4, 7, 10, 20), "7♭13", "Dominant 7th ♭13"),
    ChordQuality.DOM7FLAT5: QualityTemplate((0, 4, 6, 10), "7♭5", "Dominant 7th ♭5"),
    ChordQuality.DOM7SHARP5FLAT9: QualityTemplate((0, 4, 8, 10, 13), "7♯5♭9", "Dominant 7th ♯5♭9"),
    ChordQuality.DOM7SHARP5SHARP9: QualityTemplate((0, 4, 8, 10, 15), "7♯5♯9", "Dominant 7th ♯5♯9"),
    ChordQuality.MIN7FLAT9: QualityTemplate((0, 3, 7, 10, 13), "m7♭9", "Minor 7th ♭9"),
    ChordQuality.HALF_DIM7FLAT9: QualityTemplate((0, 3, 6, 10, 13), "ø7♭9", "Half-diminished 7th ♭9"),
}


def get_intervals(quality: ChordQuality) -> tuple[int, ...]:
    """Return the interval template for a chord quality."""
    return CHORD_TEMPLATES[quality].intervals


# ---------------------------------------------------------------------------
# Circle of fifths, scales, roman numerals
# ---------------------------------------------------------------------------

# C, G, D, A, E, B, F#, Db, Ab, Eb, Bb, F
CIRCLE_OF_FIFTHS_ORDER: tuple[int, ...] = (0, 7, 2, 9, 4, 11, 6, 1, 8, 3, 10, 5)


class ScaleType(str, Enum):
    MAJOR = "major"
    NATURAL_MINOR = "natural_minor"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"


SCALE_TEMPLATES: dict[ScaleType, tuple[int, ...]] = {
    ScaleType.MAJOR: (0, 2, 4, 5, 7, 9, 11),
    ScaleType.NATURAL_MINOR: (0, 2, 3, 5, 7, 8, 10),
    ScaleType.HARMONIC_MINOR: (0, 2, 3, 5, 7, 8, 11),
    ScaleType.MELODIC_MINOR: (0, 2, 3, 5, 7, 9, 11),
}


class TonalFunction(str, Enum):
    TONIC = "tonic"
    SUBDOMINANT = "subdominant"
    DOMINANT = "dominant"


ROMAN_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")
