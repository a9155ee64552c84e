"""Progression templates (scale degrees) and a library of well-known progressions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord

_Q = ChordQuality

# Degree sentinel for the flat supertonic (bII), one semitone above the key
FLAT_II = -1


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TemplateStep:
    degree: int  # 0-6 in the major scale, or FLAT_II
    quality: ChordQuality


@dataclass(frozen=True)
class ProgressionTemplate:
    name: str
    short_name: str
    description: str
    steps: tuple[TemplateStep, ...]


def _steps(*pairs: tuple[int, ChordQuality]) -> tuple[TemplateStep, ...]:
    return tuple(TemplateStep(d, q) for d, q in pairs)


TEMPLATES: tuple[ProgressionTemplate, ...] = (
    ProgressionTemplate(
        "I - IV - V - I", "I-IV-V-I", "Classic cadential progression",
        _steps((0, _Q.MAJOR), (3, _Q.MAJOR), (4, _Q.MAJOR), (0, _Q.MAJOR)),
    ),
    ProgressionTemplate(
        "ii - V - I", "ii-V-I", "Jazz standard resolution",
        _steps((1, _Q.MIN7), (4, _Q.DOM7), (0, _Q.MAJ7)),
    ),
    ProgressionTemplate(
        "I - vi - IV - V", "I-vi-IV-V", "50s doo-wop progression",
        _steps((0, _Q.MAJOR), (5, _Q.MINOR), (3, _Q.MAJOR), (4, _Q.MAJOR)),
    ),
    ProgressionTemplate(
        "I - V - vi - IV", "I-V-vi-IV", "Pop four-chord progression",
        _steps((0, _Q.MAJOR), (4, _Q.MAJOR), (5, _Q.MINOR), (3, _Q.MAJOR)),
    ),
    ProgressionTemplate(
        "iii - vi - ii - V - I", "iii-vi-ii-V-I", "Circle of fifths descent",
        _steps((2, _Q.MINOR), (5, _Q.MINOR), (1, _Q.MINOR), (4, _Q.MAJOR), (0, _Q.MAJOR)),
    ),
    ProgressionTemplate(
        "ii - bII7 - I", "ii-bII7-I", "Tritone substitution cadence",
        _steps((1, _Q.MIN7), (FLAT_II, _Q.DOM7), (0, _Q.MAJ7)),
    ),
)


# ---------------------------------------------------------------------------
# Library
# ---------------------------------------------------------------------------

class LibraryCategory(str, Enum):
    JAZZ = "jazz"
    POP = "pop"
    CLASSICAL = "classical"
    BLUES = "blues"


LIBRARY_CATEGORIES: tuple[LibraryCategory, ...] = tuple(LibraryCategory)


@dataclass(frozen=True)
class LibraryEntry:
    name: str
    category: LibraryCategory
    key: int  # pitch class the chords are written in
    chords: tuple[Chord, ...]
    description: str


def _chords(*pairs: tuple[int, ChordQuality]) -> tuple[Chord, ...]:
    return tuple(Chord(r, q) for r, q in pairs)


_JAZZ, _POP, _CLASSICAL, _BLUES = LibraryCategory

PROGRESSION_LIBRARY: tuple[LibraryEntry, ...] = (
    # Jazz
    LibraryEntry(
        "Autumn Leaves", _JAZZ, 7,
        _chords((0, _Q.MIN7), (5, _Q.DOM7), (10, _Q.MAJ7), (3, _Q.MAJ7),
                (9, _Q.HALF_DIM7), (2, _Q.DOM7), (7, _Q.MINOR)),
        "Jazz standard: ii-V-I in Bb, then ii-V-i in Gm",
    ),
    LibraryEntry(
        "Giant Steps", _JAZZ, 11,
        _chords((11, _Q.MAJ7), (2, _Q.DOM7), (7, _Q.MAJ7), (10, _Q.DOM7), (3, _Q.MAJ7)),
        "Coltrane changes around a cycle of major thirds",
    ),
    LibraryEntry(
        "Rhythm Changes (A)", _JAZZ, 10,
        _chords((10, _Q.MAJ7), (7, _Q.MIN7), (0, _Q.MIN7), (5, _Q.DOM7),
                (2, _Q.MIN7), (7, _Q.DOM7), (0, _Q.MIN7), (5, _Q.DOM7)),
        "I Got Rhythm A section, I-vi-ii-V turnarounds",
    ),
    LibraryEntry(
        "So What", _JAZZ, 2,
        _chords((2, _Q.MIN7), (3, _Q.MIN7), (2, _Q.MIN7)),
        "Modal jazz, D Dorian up to Eb Dorian and back",
    ),
    LibraryEntry(
        "ii-V-I Major", _JAZZ, 0,
        _chords((2, _Q.MIN7), (7, _Q.DOM7), (0, _Q.MAJ7)),
        "The most common jazz cadence",
    ),
    LibraryEntry(
        "ii-V-i Minor", _JAZZ, 0,
        _chords((2, _Q.HALF_DIM7), (7, _Q.DOM7), (0, _Q.MIN7)),
        "Minor key ii-V-i cadence",
    ),
    # Pop
    LibraryEntry(
        "I-V-vi-IV", _POP, 0,
        _chords((0, _Q.MAJOR), (7, _Q.MAJOR), (9, _Q.MINOR), (5, _Q.MAJOR)),
        "The most common pop progression",
    ),
    LibraryEntry(
        "vi-IV-I-V", _POP, 0,
        _chords((9, _Q.MINOR), (5, _Q.MAJOR), (0, _Q.MAJOR), (7, _Q.MAJOR)),
        "Pop rotation starting on vi",
    ),
    LibraryEntry(
        "I-vi-IV-V", _POP, 0,
        _chords((0, _Q.MAJOR), (9, _Q.MINOR), (5, _Q.MAJOR), (7, _Q.MAJOR)),
        "50s doo-wop progression",
    ),
    LibraryEntry(
        "I-IV-vi-V", _POP, 0,
        _chords((0, _Q.MAJOR), (5, _Q.MAJOR), (9, _Q.MINOR), (7, _Q.MAJOR)),
        "Common pop variant",
    ),
    # Classical
    LibraryEntry(
        "Pachelbel Canon", _CLASSICAL, 2,
        _chords((2, _Q.MAJOR), (9, _Q.MAJOR), (11, _Q.MINOR), (6, _Q.MINOR),
                (7, _Q.MAJOR), (2, _Q.MAJOR), (7, _Q.MAJOR), (9, _Q.MAJOR)),
        "I-V-vi-iii-IV-I-IV-V over a descending bass",
    ),
    LibraryEntry(
        "Circle of Fifths", _CLASSICAL, 0,
        _chords((0, _Q.MAJOR), (5, _Q.MAJOR), (11, _Q.DIMINISHED), (4, _Q.MINOR),
                (9, _Q.MINOR), (2, _Q.MINOR), (7, _Q.MAJOR), (0, _Q.MAJOR)),
        "Complete diatonic descent by fifths",
    ),
    LibraryEntry(
        "Romanesca", _CLASSICAL, 0,
        _chords((0, _Q.MAJOR), (7, _Q.MAJOR), (9, _Q.MINOR), (4, _Q.MINOR),
                (5, _Q.MAJOR), (0, _Q.MAJOR), (5, _Q.MAJOR), (7, _Q.MAJOR)),
        "Renaissance ground bass pattern",
    ),
    # Blues
    LibraryEntry(
        "12-Bar Blues", _BLUES, 0,
        _chords(*((r, _Q.DOM7) for r in (0, 0, 0, 0, 5, 5, 0, 0, 7, 5, 0, 7))),
        "Standard 12-bar blues form",
    ),
    LibraryEntry(
        "Jazz Blues", _BLUES, 5,
        _chords((5, _Q.DOM7), (10, _Q.DOM7), (5, _Q.DOM7), (0, _Q.MIN7),
                (10, _Q.DOM7), (10, _Q.DOM7), (5, _Q.DOM7), (9, _Q.MIN7),
                (2, _Q.DOM7), (7, _Q.MIN7), (0, _Q.DOM7), (5, _Q.DOM7)),
        "Blues with ii-V substitutions",
    ),
    LibraryEntry(
        "Minor Blues", _BLUES, 0,
        _chords((0, _Q.MIN7), (0, _Q.MIN7), (0, _Q.MIN7), (0, _Q.MIN7),
                (5, _Q.MIN7), (5, _Q.MIN7), (0, _Q.MIN7), (0, _Q.MIN7),
                (9, _Q.HALF_DIM7), (7, _Q.DOM7), (0, _Q.MIN7), (7, _Q.DOM7)),
        "Minor key blues with a ii-V turnaround",
    ),
)
