"""Negative harmony: reflect chords around the axis between a key's root
and its fifth.

The axis sits at ``key_root + 3.5`` semitones, halfway between the minor
and major third. Reflection is ``2 * axis - pc``; since ``2 * axis`` is an
integer, reflecting twice returns the original pitch class, so the mapping
is an involution and a bijection on the twelve pitch classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord, chord_pitch_classes
from fcp_harmony.theory.identify import identify_chord_from_pitch_classes

AXIS_OFFSET = 3.5


@dataclass(frozen=True)
class NegativeChord:
    root: int
    quality: ChordQuality
    pitch_classes: tuple[int, ...]  # reflected tones, in the source chord's order

    @property
    def chord(self) -> Chord:
        return Chord(root=self.root, quality=self.quality)


def get_negative_mapping(key_root: int) -> dict[int, int]:
    """Map every pitch class to its mirror image in the key of *key_root*."""
    axis = key_root + AXIS_OFFSET
    return {pc: int(round(2 * axis - pc)) % 12 for pc in range(12)}


def negate_pitch_class(pc: int, key_root: int) -> int:
    return get_negative_mapping(key_root)[pc % 12]


def compute_negative(c: Chord, key_root: int) -> NegativeChord:
    mapping = get_negative_mapping(key_root)
    reflected = tuple(mapping[pc] for pc in chord_pitch_classes(c))
    identified = identify_chord_from_pitch_classes(reflected)
    return NegativeChord(root=identified.root, quality=identified.quality, pitch_classes=reflected)


def compute_negative_progression(progression: Sequence[Chord], key_root: int) -> list[NegativeChord]:
    return [compute_negative(c, key_root) for c in progression]
