"""Pairwise chord relationships: shared tones, fifths distance, dominant and
tritone-substitute tests, neo-Riemannian transforms, voice-leading cost."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import permutations

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord, chord_pitch_classes


class NeoRiemannian(str, Enum):
    P = "P"  # parallel: C <-> Cm
    L = "L"  # leading-tone exchange: C <-> Em
    R = "R"  # relative: C <-> Am


def shared_notes(a: Chord, b: Chord) -> list[int]:
    """Pitch classes of *b* that also sound in *a*, in *b*'s order."""
    pcs_a = set(chord_pitch_classes(a))
    return [pc for pc in chord_pitch_classes(b) if pc in pcs_a]


def shared_note_count(a: Chord, b: Chord) -> int:
    return len(shared_notes(a, b))


def fifths_distance(root_a: int, root_b: int) -> int:
    """Minimum number of steps between two roots around the circle of fifths."""
    diff = (root_b - root_a) % 12
    steps = (diff * 7) % 12  # 7 is its own inverse mod 12
    return min(steps, 12 - steps)


def _intervals_from_root(c: Chord) -> list[int]:
    return [(pc - c.root) % 12 for pc in chord_pitch_classes(c)]


def is_dominant_of(a: Chord, b: Chord) -> bool:
    """True if *a* -> *b* is a V -> I motion.

    *a*'s root sits a fifth above *b*'s and *a* contains a major third.
    """
    if (a.root - b.root) % 12 != 7:
        return False
    return 4 in _intervals_from_root(a)


def _has_dominant_tritone(c: Chord) -> bool:
    intervals = _intervals_from_root(c)
    return 4 in intervals and 10 in intervals


def is_tritone_substitution(a: Chord, b: Chord) -> bool:
    if (a.root - b.root) % 12 != 6:
        return False
    return _has_dominant_tritone(a) and _has_dominant_tritone(b)


_NR_MAJOR = {NeoRiemannian.P: (0, ChordQuality.MINOR), NeoRiemannian.L: (4, ChordQuality.MINOR),
             NeoRiemannian.R: (9, ChordQuality.MINOR)}
_NR_MINOR = {NeoRiemannian.P: (0, ChordQuality.MAJOR), NeoRiemannian.L: (8, ChordQuality.MAJOR),
             NeoRiemannian.R: (3, ChordQuality.MAJOR)}


def apply_neo_riemannian(c: Chord, transform: NeoRiemannian) -> Chord | None:
    """Apply P, L or R to a major or minor triad; None for other qualities."""
    if c.quality == ChordQuality.MAJOR:
        table = _NR_MAJOR
    elif c.quality == ChordQuality.MINOR:
        table = _NR_MINOR
    else:
        return None
    shift, quality = table[transform]
    return Chord(root=c.root + shift, quality=quality)


def find_neo_riemannian_transform(a: Chord, b: Chord) -> NeoRiemannian | None:
    for t in NeoRiemannian:
        if apply_neo_riemannian(a, t) == b:
            return t
    return None


def _pc_distance(a: int, b: int) -> int:
    d = (b - a) % 12
    return min(d, 12 - d)


def voice_leading_distance(a: Chord, b: Chord) -> int:
    """Minimum total semitone movement mapping the smaller chord onto the larger.

    Brute force over assignments; chords have at most a handful of tones.
    """
    pcs_a = chord_pitch_classes(a)
    pcs_b = chord_pitch_classes(b)
    shorter, longer = (pcs_a, pcs_b) if len(pcs_a) <= len(pcs_b) else (pcs_b, pcs_a)
    if not shorter:
        return 0
    return min(
        sum(_pc_distance(f, t) for f, t in zip(shorter, perm))
        for perm in permutations(longer, len(shorter))
    )


@dataclass(frozen=True)
class ChordRelationship:
    shared_notes: list[int]
    shared_note_count: int
    fifths_distance: int
    is_dominant: bool  # a is dominant of b
    is_reverse_dominant: bool  # b is dominant of a
    is_tritone_substitution: bool
    neo_riemannian_transform: NeoRiemannian | None
    voice_leading_distance: int


def analyze_relationship(a: Chord, b: Chord) -> ChordRelationship:
    shared = shared_notes(a, b)
    return ChordRelationship(
        shared_notes=shared,
        shared_note_count=len(shared),
        fifths_distance=fifths_distance(a.root, b.root),
        is_dominant=is_dominant_of(a, b),
        is_reverse_dominant=is_dominant_of(b, a),
        is_tritone_substitution=is_tritone_substitution(a, b),
        neo_riemannian_transform=find_neo_riemannian_transform(a, b),
        voice_leading_distance=voice_leading_distance(a, b),
    )


@dataclass(frozen=True)
class PyramidLevel:
    shared_count: int
    chords: tuple[Chord, ...]


def build_proximity_pyramid(
    reference: Chord,
    qualities: tuple[ChordQuality, ...] = (ChordQuality.MAJOR, ChordQuality.MINOR),
) -> list[PyramidLevel]:
    """Group every chord of *qualities* on all 12 roots by notes shared with *reference*.

    Levels run from most shared notes to fewest. Within a level chords keep
    quality order, then root order. The reference itself is left out.
    """
    levels: dict[int, list[Chord]] = {}
    for quality in qualities:
        for root in range(12):
            candidate = Chord(root, quality)
            if candidate == reference:
                continue
            levels.setdefault(shared_note_count(reference, candidate), []).append(candidate)
    return [PyramidLevel(count, tuple(levels[count])) for count in sorted(levels, reverse=True)]
