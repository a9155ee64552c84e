"""Scale pitch classes and diatonic chord generation."""

from __future__ import annotations

from fcp_harmony.lib.chord_library import (
    SCALE_TEMPLATES,
    ChordQuality,
    ScaleType,
    TonalFunction,
)
from fcp_harmony.theory.chords import Chord

_Q = ChordQuality
_S = ScaleType

# Triad quality on each scale degree
DIATONIC_QUALITIES: dict[ScaleType, tuple[ChordQuality, ...]] = {
    _S.MAJOR: (_Q.MAJOR, _Q.MINOR, _Q.MINOR, _Q.MAJOR, _Q.MAJOR, _Q.MINOR, _Q.DIMINISHED),
    _S.NATURAL_MINOR: (_Q.MINOR, _Q.DIMINISHED, _Q.MAJOR, _Q.MINOR, _Q.MINOR, _Q.MAJOR, _Q.MAJOR),
    _S.HARMONIC_MINOR: (_Q.MINOR, _Q.DIMINISHED, _Q.AUGMENTED, _Q.MINOR, _Q.MAJOR, _Q.MAJOR, _Q.DIMINISHED),
    _S.MELODIC_MINOR: (_Q.MINOR, _Q.MINOR, _Q.AUGMENTED, _Q.MAJOR, _Q.MAJOR, _Q.DIMINISHED, _Q.DIMINISHED),
}

DIATONIC_7TH_QUALITIES: dict[ScaleType, tuple[ChordQuality, ...]] = {
    _S.MAJOR: (_Q.MAJ7, _Q.MIN7, _Q.MIN7, _Q.MAJ7, _Q.DOM7, _Q.MIN7, _Q.HALF_DIM7),
    _S.NATURAL_MINOR: (_Q.MIN7, _Q.HALF_DIM7, _Q.MAJ7, _Q.MIN7, _Q.MIN7, _Q.MAJ7, _Q.DOM7),
    _S.HARMONIC_MINOR: (_Q.MIN_MAJ7, _Q.HALF_DIM7, _Q.AUG7, _Q.MIN7, _Q.DOM7, _Q.MAJ7, _Q.DIM7),
    _S.MELODIC_MINOR: (_Q.MIN_MAJ7, _Q.MIN7, _Q.AUG7, _Q.DOM7, _Q.DOM7, _Q.HALF_DIM7, _Q.HALF_DIM7),
}

DIATONIC_9TH_QUALITIES: dict[ScaleType, tuple[ChordQuality, ...]] = {
    _S.MAJOR: (_Q.MAJ9, _Q.MIN9, _Q.MIN7FLAT9, _Q.MAJ9, _Q.DOM9, _Q.MIN9, _Q.HALF_DIM7FLAT9),
    _S.NATURAL_MINOR: (_Q.MIN9, _Q.HALF_DIM7FLAT9, _Q.MAJ9, _Q.MIN9, _Q.MIN7FLAT9, _Q.MAJ9, _Q.DOM9),
    _S.HARMONIC_MINOR: (_Q.MIN_MAJ7, _Q.HALF_DIM7FLAT9, _Q.AUG7, _Q.MIN9, _Q.DOM7FLAT9, _Q.MAJ9, _Q.DIM7),
    _S.MELODIC_MINOR: (_Q.MIN_MAJ7, _Q.MIN9, _Q.AUG7, _Q.DOM9, _Q.DOM9, _Q.HALF_DIM7FLAT9, _Q.HALF_DIM7FLAT9),
}

DIATONIC_13TH_QUALITIES: dict[ScaleType, tuple[ChordQuality, ...]] = {
    _S.MAJOR: (_Q.MAJ13, _Q.MIN13, _Q.MIN7FLAT9, _Q.MAJ13, _Q.DOM13, _Q.MIN13, _Q.HALF_DIM7FLAT9),
    _S.NATURAL_MINOR: (_Q.MIN13, _Q.HALF_DIM7FLAT9, _Q.MAJ13, _Q.MIN13, _Q.MIN7FLAT9, _Q.MAJ13, _Q.DOM13),
    _S.HARMONIC_MINOR: (_Q.MIN_MAJ7, _Q.HALF_DIM7FLAT9, _Q.AUG7, _Q.MIN13, _Q.DOM13, _Q.MAJ13, _Q.DIM7),
    _S.MELODIC_MINOR: (_Q.MIN_MAJ7, _Q.MIN13, _Q.AUG7, _Q.DOM13, _Q.DOM13, _Q.HALF_DIM7FLAT9, _Q.HALF_DIM7FLAT9),
}

# I, iii, vi = tonic; ii, IV = subdominant; V, vii° = dominant
DEGREE_FUNCTIONS: tuple[TonalFunction, ...] = (
    TonalFunction.TONIC,
    TonalFunction.SUBDOMINANT,
    TonalFunction.TONIC,
    TonalFunction.SUBDOMINANT,
    TonalFunction.DOMINANT,
    TonalFunction.TONIC,
    TonalFunction.DOMINANT,
)


def scale_pitch_classes(root: int, scale_type: ScaleType) -> list[int]:
    return [(root + i) % 12 for i in SCALE_TEMPLATES[scale_type]]


def _build(root: int, scale_type: ScaleType, table: dict[ScaleType, tuple[ChordQuality, ...]]) -> list[Chord]:
    pcs = scale_pitch_classes(root, scale_type)
    return [Chord(root=pc, quality=q) for pc, q in zip(pcs, table[scale_type])]


def diatonic_triads(root: int, scale_type: ScaleType) -> list[Chord]:
    return _build(root, scale_type, DIATONIC_QUALITIES)


def diatonic_7ths(root: int, scale_type: ScaleType) -> list[Chord]:
    return _build(root, scale_type, DIATONIC_7TH_QUALITIES)


def diatonic_9ths(root: int, scale_type: ScaleType) -> list[Chord]:
    return _build(root, scale_type, DIATONIC_9TH_QUALITIES)


def diatonic_13ths(root: int, scale_type: ScaleType) -> list[Chord]:
    return _build(root, scale_type, DIATONIC_13TH_QUALITIES)


def tonal_function(degree: int) -> TonalFunction:
    """Tonal function of a 0-based degree of a major key."""
    return DEGREE_FUNCTIONS[degree]


def find_scale_degree(chord_root: int, scale_root: int, scale_type: ScaleType) -> int | None:
    """Return the 0-based degree of *chord_root* in the scale.

    Returns None when the pitch class is not in the scale; callers treat
    that as "non-diatonic", not as an error.
    """
    pcs = scale_pitch_classes(scale_root, scale_type)
    pc = chord_root % 12
    if pc not in pcs:
        return None
    return pcs.index(pc)
