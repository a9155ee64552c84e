"""Chord-scale theory: which scales fit a chord, avoid notes and tensions."""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality, get_intervals
from fcp_harmony.lib.mode_library import MODE_TEMPLATES, ModeType
from fcp_harmony.theory.modes import mode_pitch_classes


@dataclass(frozen=True)
class ChordScaleMapping:
    primary_scale: ModeType
    avoid_notes: tuple[int, ...]  # intervals above the chord root
    alternates: tuple[ModeType, ...]


def _m(primary: ModeType, avoid: tuple[int, ...], *alternates: ModeType) -> ChordScaleMapping:
    return ChordScaleMapping(primary_scale=primary, avoid_notes=avoid, alternates=alternates)


_Q = ChordQuality
_T = ModeType

DEFAULT_MAPPING = _m(_T.IONIAN, ())

# Chord quality -> scale choice with no key context
STATIC_MAPPINGS: dict[ChordQuality, ChordScaleMapping] = {
    # Major family
    _Q.MAJOR: _m(_T.IONIAN, (5,), _T.LYDIAN, _T.PENTATONIC_MAJOR),
    _Q.MAJ7: _m(_T.IONIAN, (5,), _T.LYDIAN, _T.BEBOP_MAJOR),
    _Q.MAJ9: _m(_T.IONIAN, (5,), _T.LYDIAN),
    _Q.MAJ13: _m(_T.LYDIAN, (), _T.IONIAN),
    _Q.SIXTH: _m(_T.IONIAN, (5,), _T.LYDIAN, _T.PENTATONIC_MAJOR),
    _Q.SIX_NINE: _m(_T.IONIAN, (5,), _T.LYDIAN),
    _Q.ADD9: _m(_T.IONIAN, (5,), _T.LYDIAN),
    # Minor family
    _Q.MINOR: _m(_T.DORIAN, (), _T.AEOLIAN, _T.PENTATONIC_MINOR),
    _Q.MIN7: _m(_T.DORIAN, (), _T.AEOLIAN, _T.PHRYGIAN, _T.BEBOP_DORIAN),
    _Q.MIN9: _m(_T.DORIAN, (), _T.AEOLIAN),
    _Q.MIN11: _m(_T.DORIAN, (), _T.AEOLIAN),
    _Q.MIN13: _m(_T.DORIAN, (), _T.AEOLIAN),
    _Q.MIN6: _m(_T.DORIAN, (), _T.MELODIC_MINOR),
    _Q.MIN_ADD9: _m(_T.DORIAN, (), _T.AEOLIAN),
    _Q.MIN_MAJ7: _m(_T.MELODIC_MINOR, (), _T.HARMONIC_MINOR),
    # Dominant family
    _Q.DOM7: _m(_T.MIXOLYDIAN, (5,), _T.BEBOP_DOMINANT, _T.LYDIAN_DOMINANT, _T.BLUES),
    _Q.DOM9: _m(_T.MIXOLYDIAN, (5,), _T.BEBOP_DOMINANT, _T.LYDIAN_DOMINANT),
    _Q.DOM11: _m(_T.MIXOLYDIAN, (), _T.BEBOP_DOMINANT),
    _Q.DOM13: _m(_T.MIXOLYDIAN, (), _T.LYDIAN_DOMINANT, _T.BEBOP_DOMINANT),
    _Q.DOM7SUS4: _m(_T.MIXOLYDIAN, (4,), _T.PENTATONIC_MINOR),
    _Q.DOM9SUS4: _m(_T.MIXOLYDIAN, (4,)),
    # Altered dominants
    _Q.ALT7: _m(_T.ALTERED, (), _T.WHOLE_TONE, _T.HALF_WHOLE_DIM),
    _Q.DOM7FLAT9: _m(_T.HALF_WHOLE_DIM, (), _T.PHRYGIAN_DOMINANT, _T.ALTERED),
    _Q.DOM7SHARP9: _m(_T.ALTERED, (), _T.HALF_WHOLE_DIM, _T.BLUES),
    _Q.DOM7SHARP11: _m(_T.LYDIAN_DOMINANT, (), _T.WHOLE_TONE),
    _Q.DOM7FLAT13: _m(_T.MIXOLYDIAN_FLAT6, (), _T.ALTERED),
    _Q.DOM7FLAT5: _m(_T.LYDIAN_DOMINANT, (), _T.WHOLE_TONE, _T.ALTERED),
    _Q.DOM7SHARP5FLAT9: _m(_T.ALTERED, (), _T.WHOLE_TONE),
    _Q.DOM7SHARP5SHARP9: _m(_T.ALTERED, (), _T.WHOLE_TONE),
    # Diminished family
    _Q.DIMINISHED: _m(_T.WHOLE_HALF_DIM, (), _T.LOCRIAN),
    _Q.DIM7: _m(_T.WHOLE_HALF_DIM, ()),
    _Q.HALF_DIM7: _m(_T.LOCRIAN, (1,), _T.LOCRIAN_NATURAL2),
    _Q.HALF_DIM7FLAT9: _m(_T.LOCRIAN, ()),
    # Augmented family
    _Q.AUGMENTED: _m(_T.WHOLE_TONE, (), _T.LYDIAN_AUGMENTED),
    _Q.AUG7: _m(_T.WHOLE_TONE, (), _T.LYDIAN_AUGMENTED),
    # Suspended
    _Q.SUS4: _m(_T.MIXOLYDIAN, (4,), _T.DORIAN),
    _Q.SUS2: _m(_T.MIXOLYDIAN, (), _T.DORIAN),
    # Diatonic extensions
    _Q.MIN7FLAT9: _m(_T.PHRYGIAN, (), _T.AEOLIAN),
}

# (quality, 0-based degree in a major key) -> scale choice in that context
DEGREE_OVERRIDES: dict[tuple[ChordQuality, int], ChordScaleMapping] = {
    (_Q.MIN7, 1): _m(_T.DORIAN, (), _T.AEOLIAN, _T.BEBOP_DORIAN),
    (_Q.MIN7, 2): _m(_T.PHRYGIAN, (1,), _T.DORIAN),
    (_Q.MIN7, 5): _m(_T.AEOLIAN, (8,), _T.DORIAN, _T.PENTATONIC_MINOR),
    (_Q.MINOR, 1): _m(_T.DORIAN, (), _T.AEOLIAN),
    (_Q.MINOR, 2): _m(_T.PHRYGIAN, (1,), _T.DORIAN),
    (_Q.MINOR, 5): _m(_T.AEOLIAN, (), _T.DORIAN, _T.PENTATONIC_MINOR),
    (_Q.MIN9, 1): _m(_T.DORIAN, (), _T.AEOLIAN),
    (_Q.MIN9, 5): _m(_T.AEOLIAN, (), _T.DORIAN),
    (_Q.MAJOR, 0): _m(_T.IONIAN, (5,), _T.LYDIAN, _T.PENTATONIC_MAJOR),
    (_Q.MAJOR, 3): _m(_T.LYDIAN, (), _T.IONIAN),
    (_Q.MAJ7, 0): _m(_T.IONIAN, (5,), _T.LYDIAN, _T.BEBOP_MAJOR),
    (_Q.MAJ7, 3): _m(_T.LYDIAN, (), _T.IONIAN),
    (_Q.DOM7, 4): _m(_T.MIXOLYDIAN, (5,), _T.BEBOP_DOMINANT, _T.BLUES),
    (_Q.HALF_DIM7, 6): _m(_T.LOCRIAN, (1,), _T.LOCRIAN_NATURAL2),
}

TENSION_NAMES: dict[int, str] = {
    1: "♭9", 2: "9", 3: "♯9",
    5: "11", 6: "♯11",
    8: "♭13", 9: "13",
}


def get_scales_for_chord(quality: ChordQuality) -> ChordScaleMapping:
    """Scale choice for *quality* with no key context (ionian if unmapped)."""
    return STATIC_MAPPINGS.get(quality, DEFAULT_MAPPING)


def get_scales_for_chord_in_context(quality: ChordQuality, key_root: int, degree: int) -> ChordScaleMapping:
    """Scale choice for a chord sitting on *degree* (0-based) of a major key.

    A min7 on ii gets dorian, on iii phrygian, on vi aeolian. Pairs without
    an override fall back to :func:`get_scales_for_chord`.
    """
    override = DEGREE_OVERRIDES.get((quality, degree))
    if override is not None:
        return override
    return get_scales_for_chord(quality)


def compute_avoid_notes(chord_root: int, quality: ChordQuality, mode: ModeType) -> list[int]:
    """Scale tones a half step above a chord tone that are not chord tones.

    Returned as absolute pitch classes in discovery order.
    """
    chord_pcs = [i % 12 for i in get_intervals(quality)]
    scale_pcs = [i % 12 for i in MODE_TEMPLATES[mode].intervals]
    avoids: list[int] = []
    for ct in chord_pcs:
        for st in scale_pcs:
            if (st - ct) % 12 != 1 or st in chord_pcs:
                continue
            pc = (chord_root + st) % 12
            if pc not in avoids:
                avoids.append(pc)
    return avoids


def get_tension_labels(chord_root: int, mode: ModeType) -> dict[int, str]:
    """Map each scale pitch class that is a tension to its label (9, ♯11, ...)."""
    labels: dict[int, str] = {}
    for pc in mode_pitch_classes(chord_root, mode):
        label = TENSION_NAMES.get((pc - chord_root) % 12)
        if label:
            labels[pc] = label
    return labels
