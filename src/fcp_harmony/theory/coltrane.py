"""Coltrane changes: three tonal centers a major third apart, linked by V7s.

The pattern of Giant Steps. B, G and Eb divide the octave into equal
thirds, and each is approached from its own dominant.
"""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord

_Q = ChordQuality

_TONIC_QUALITIES = frozenset({_Q.MAJOR, _Q.MAJ7})
_DOMINANT_QUALITIES = frozenset({_Q.DOM7, _Q.DOM9})


@dataclass(frozen=True)
class ColtraneAnalysis:
    detected: bool
    tonal_centers: tuple[int, ...]
    confidence: float  # 0-1


_NOT_DETECTED = ColtraneAnalysis(detected=False, tonal_centers=(), confidence=0.0)


def get_coltrane_triangle(tonic: int) -> tuple[int, int, int]:
    return (tonic % 12, (tonic + 4) % 12, (tonic + 8) % 12)


def generate_coltrane_substitution(tonic: int) -> list[Chord]:
    """Imaj7, then V7 and maj7 for each of the other two centers, back home.

    For B: Bmaj7 Bb7 Ebmaj7 D7 Gmaj7 Gb7 Bmaj7.
    """
    c1, c2, c3 = get_coltrane_triangle(tonic)
    return [
        Chord(c1, _Q.MAJ7),
        Chord(c2 + 7, _Q.DOM7),
        Chord(c2, _Q.MAJ7),
        Chord(c3 + 7, _Q.DOM7),
        Chord(c3, _Q.MAJ7),
        Chord(c1 + 7, _Q.DOM7),
        Chord(c1, _Q.MAJ7),
    ]


def expand_ii_v_coltrane(tonic: int) -> list[Chord]:
    """Replace a ii-V-I to *tonic* with a cycle through all three centers.

    The opening ii-V lands on the second center instead of the tonic.
    """
    c1, c2, c3 = get_coltrane_triangle(tonic)
    return [
        Chord(c2 + 5, _Q.MIN7),
        Chord(c2 + 7, _Q.DOM7),
        Chord(c2, _Q.MAJ7),
        Chord(c3 + 7, _Q.DOM7),
        Chord(c3, _Q.MAJ7),
        Chord(c1 + 7, _Q.DOM7),
        Chord(c1, _Q.MAJ7),
    ]


def analyze_coltrane_progression(chords: list[Chord]) -> ColtraneAnalysis:
    """Look for major-third related tonic chords and the V7s that lead to them.

    Every pair of major or maj7 roots a major third apart contributes both
    roots and the missing third center. With three or more centers the
    confidence is the share of centers whose dominant (dom7 or dom9)
    appears anywhere in *chords*, plus 0.3, capped at 1. Detection needs a
    confidence above 0.5.
    """
    if len(chords) < 3:
        return _NOT_DETECTED

    major_roots = [c.root for c in chords if c.quality in _TONIC_QUALITIES]
    if len(major_roots) < 2:
        return _NOT_DETECTED

    # dict as an ordered set
    centers: dict[int, None] = {}
    for i, a in enumerate(major_roots):
        for b in major_roots[i + 1:]:
            dist = (b - a) % 12
            if dist in (4, 8):
                centers.setdefault(a)
                centers.setdefault(b)
                centers.setdefault((a + (8 if dist == 4 else 4)) % 12)

    if len(centers) < 3:
        return _NOT_DETECTED

    dominant_roots = {c.root for c in chords if c.quality in _DOMINANT_QUALITIES}
    v7_count = sum(1 for center in centers if (center + 7) % 12 in dominant_roots)
    confidence = min(1.0, v7_count / len(centers) + 0.3)
    return ColtraneAnalysis(
        detected=confidence > 0.5,
        tonal_centers=tuple(centers),
        confidence=confidence,
    )
