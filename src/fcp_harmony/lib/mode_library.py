"""Mode and scale templates: modes of major, melodic minor, harmonic minor,
plus symmetric, bebop, pentatonic and blues scales."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ModeFamily(str, Enum):
    MAJOR = "major"
    MELODIC_MINOR = "melodic_minor"
    HARMONIC_MINOR = "harmonic_minor"
    SYMMETRIC = "symmetric"
    OTHER = "other"


class ModeType(str, Enum):
    # Modes of major
    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"
    # Modes of melodic minor
    MELODIC_MINOR = "melodic_minor"
    DORIAN_FLAT2 = "dorian_flat2"
    LYDIAN_AUGMENTED = "lydian_augmented"
    LYDIAN_DOMINANT = "lydian_dominant"
    MIXOLYDIAN_FLAT6 = "mixolydian_flat6"
    LOCRIAN_NATURAL2 = "locrian_natural2"
    ALTERED = "altered"
    # Modes of harmonic minor
    HARMONIC_MINOR = "harmonic_minor"
    LOCRIAN_NATURAL6 = "locrian_natural6"
    IONIAN_SHARP5 = "ionian_sharp5"
    DORIAN_SHARP4 = "dorian_sharp4"
    PHRYGIAN_DOMINANT = "phrygian_dominant"
    LYDIAN_SHARP2 = "lydian_sharp2"
    ULTRA_LOCRIAN = "ultra_locrian"
    # Symmetric
    WHOLE_HALF_DIM = "whole_half_dim"
    HALF_WHOLE_DIM = "half_whole_dim"
    WHOLE_TONE = "whole_tone"
    AUGMENTED_SCALE = "augmented_scale"
    # Bebop
    BEBOP_DOMINANT = "bebop_dominant"
    BEBOP_MAJOR = "bebop_major"
    BEBOP_DORIAN = "bebop_dorian"
    # Pentatonic & blues
    PENTATONIC_MAJOR = "pentatonic_major"
    PENTATONIC_MINOR = "pentatonic_minor"
    BLUES = "blues"


@dataclass(frozen=True)
class ModeTemplate:
    intervals: tuple[int, ...]
    name: str
    parent: ModeFamily
    degree: int  # 1-based degree within parent, 0 for non-modal scales
    characteristic_tones: tuple[int, ...]  # intervals that give the mode its colour


_M = ModeFamily

MODE_TEMPLATES: dict[ModeType, ModeTemplate] = {
    ModeType.IONIAN: ModeTemplate((0, 2, 4, 5, 7, 9, 11), "Ionian (Major)", _M.MAJOR, 1, (11,)),
    ModeType.DORIAN: ModeTemplate((0, 2, 3, 5, 7, 9, 10), "Dorian", _M.MAJOR, 2, (9,)),
    ModeType.PHRYGIAN: ModeTemplate((0, 1, 3, 5, 7, 8, 10), "Phrygian", _M.MAJOR, 3, (1,)),
    ModeType.LYDIAN: ModeTemplate((0, 2, 4, 6, 7, 9, 11), "Lydian", _M.MAJOR, 4, (6,)),
    ModeType.MIXOLYDIAN: ModeTemplate((0, 2, 4, 5, 7, 9, 10), "Mixolydian", _M.MAJOR, 5, (10,)),
    ModeType.AEOLIAN: ModeTemplate((0, 2, 3, 5, 7, 8, 10), "Aeolian (Natural Minor)", _M.MAJOR, 6, (3, 8)),
    ModeType.LOCRIAN: ModeTemplate((0, 1, 3, 5, 6, 8, 10), "Locrian", _M.MAJOR, 7, (1, 6)),

    ModeType.MELODIC_MINOR: ModeTemplate((0, 2, 3, 5, 7, 9, 11), "Melodic Minor", _M.MELODIC_MINOR, 1, (3, 11)),
    ModeType.DORIAN_FLAT2: ModeTemplate((0, 1, 3, 5, 7, 9, 10), "Dorian ♭2", _M.MELODIC_MINOR, 2, (1, 9)),
    ModeType.LYDIAN_AUGMENTED: ModeTemplate((0, 2, 4, 6, 8, 9, 11), "Lydian Augmented", _M.MELODIC_MINOR, 3, (6, 8)),
    ModeType.LYDIAN_DOMINANT: ModeTemplate((0, 2, 4, 6, 7, 9, 10), "Lydian Dominant", _M.MELODIC_MINOR, 4, (6, 10)),
    ModeType.MIXOLYDIAN_FLAT6: ModeTemplate((0, 2, 4, 5, 7, 8, 10), "Mixolydian ♭6", _M.MELODIC_MINOR, 5, (8, 10)),
    ModeType.LOCRIAN_NATURAL2: ModeTemplate((0, 2, 3, 5, 6, 8, 10), "Locrian ♮2", _M.MELODIC_MINOR, 6, (2, 6)),
    ModeType.ALTERED: ModeTemplate((0, 1, 3, 4, 6, 8, 10), "Altered (Super Locrian)", _M.MELODIC_MINOR, 7, (1, 3, 6, 8)),

    ModeType.HARMONIC_MINOR: ModeTemplate((0, 2, 3, 5, 7, 8, 11), "Harmonic Minor", _M.HARMONIC_MINOR, 1, (3, 11)),
    ModeType.LOCRIAN_NATURAL6: ModeTemplate((0, 1, 3, 5, 6, 9, 10), "Locrian ♮6", _M.HARMONIC_MINOR, 2, (1, 6, 9)),
    ModeType.IONIAN_SHARP5: ModeTemplate((0, 2, 4, 5, 8, 9, 11), "Ionian ♯5", _M.HARMONIC_MINOR, 3, (8, 11)),
    ModeType.DORIAN_SHARP4: ModeTemplate((0, 2, 3, 6, 7, 9, 10), "Dorian ♯4", _M.HARMONIC_MINOR, 4, (6, 9)),
    ModeType.PHRYGIAN_DOMINANT: ModeTemplate((0, 1, 4, 5, 7, 8, 10), "Phrygian Dominant", _M.HARMONIC_MINOR, 5, (1, 4)),
    ModeType.LYDIAN_SHARP2: ModeTemplate((0, 3, 4, 6, 7, 9, 11), "Lydian ♯2", _M.HARMONIC_MINOR, 6, (3, 6)),
    ModeType.ULTRA_LOCRIAN: ModeTemplate((0, 1, 3, 4, 6, 8, 9), "Ultra Locrian", _M.HARMONIC_MINOR, 7, (1, 4, 6, 9)),

    ModeType.WHOLE_HALF_DIM: ModeTemplate((0, 2, 3, 5, 6, 8, 9, 11), "Whole-Half Diminished", _M.SYMMETRIC, 0, (2, 3)),
    ModeType.HALF_WHOLE_DIM: ModeTemplate((0, 1, 3, 4, 6, 7, 9, 10), "Half-Whole Diminished", _M.SYMMETRIC, 0, (1, 4)),
    ModeType.WHOLE_TONE: ModeTemplate((0, 2, 4, 6, 8, 10), "Whole Tone", _M.SYMMETRIC, 0, (2, 6, 8)),
    ModeType.AUGMENTED_SCALE: ModeTemplate((0, 3, 4, 7, 8, 11), "Augmented", _M.SYMMETRIC, 0, (3, 4, 8)),

    ModeType.BEBOP_DOMINANT: ModeTemplate((0, 2, 4, 5, 7, 9, 10, 11), "Bebop Dominant", _M.OTHER, 0, (10, 11)),
    ModeType.BEBOP_MAJOR: ModeTemplate((0, 2, 4, 5, 7, 8, 9, 11), "Bebop Major", _M.OTHER, 0, (8, 9)),
    ModeType.BEBOP_DORIAN: ModeTemplate((0, 2, 3, 4, 5, 7, 9, 10), "Bebop Dorian", _M.OTHER, 0, (3, 4)),

    ModeType.PENTATONIC_MAJOR: ModeTemplate((0, 2, 4, 7, 9), "Pentatonic Major", _M.OTHER, 0, (2, 9)),
    ModeType.PENTATONIC_MINOR: ModeTemplate((0, 3, 5, 7, 10), "Pentatonic Minor", _M.OTHER, 0, (3, 10)),
    ModeType.BLUES: ModeTemplate((0, 3, 5, 6, 7, 10), "Blues", _M.OTHER, 0, (3, 6, 10)),
}
