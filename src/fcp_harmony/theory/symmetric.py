"""Symmetric structures: diminished 7th groups, augmented triad reachability,
tritone substitution pairs.

There are only 3 distinct dim7 chords and 4 distinct augmented triads:

    Group 0: {C, Eb, Gb, A}   Group 1: {Db, E, G, Bb}   Group 2: {D, F, Ab, B}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fcp_harmony.lib.chord_library import ChordQuality, note_name
from fcp_harmony.theory.chords import Chord, chord_pitch_classes


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class ReachableTriad:
    triad: Chord
    moved_note: int  # pitch class that was moved
    direction: Direction
    description: str  # e.g. "G# ↓ G"


@dataclass(frozen=True)
class AugmentedReachability:
    aug_chord: Chord
    reachable_triads: list[ReachableTriad]


@dataclass(frozen=True)
class TritoneSubPair:
    dom7: Chord
    tritone_sub_dom7: Chord
    shared_tritone: tuple[int, int]  # 3rd of dom7 (= 7th of the sub), 7th of dom7
    common_resolution: Chord


def get_diminished_7th_groups() -> list[list[Chord]]:
    return [
        [Chord(root=g + i * 3, quality=ChordQuality.DIM7) for i in range(4)]
        for g in range(3)
    ]


def get_diminished_resolutions(dim7: Chord) -> list[Chord]:
    """Major triads a half step above each tone of *dim7* (always four)."""
    return [Chord(root=pc + 1, quality=ChordQuality.MAJOR) for pc in chord_pitch_classes(dim7)]


def identify_triad(pcs: list[int]) -> Chord | None:
    """Name three pitch classes as a major or minor triad, trying each as root."""
    normalized = [pc % 12 for pc in pcs]
    for root in normalized:
        pattern = sorted((pc - root) % 12 for pc in normalized)
        if pattern == [0, 4, 7]:
            return Chord(root=root, quality=ChordQuality.MAJOR)
        if pattern == [0, 3, 7]:
            return Chord(root=root, quality=ChordQuality.MINOR)
    return None


def get_augmented_reachability(aug_root: int) -> AugmentedReachability:
    """Triads reachable from an augmented triad by moving one tone a half step.

    Each of the three tones moves down and up, giving six triads.
    """
    aug_chord = Chord(root=aug_root, quality=ChordQuality.AUGMENTED)
    notes = chord_pitch_classes(aug_chord)
    reachable: list[ReachableTriad] = []

    for note in notes:
        for direction, step, arrow in ((Direction.DOWN, -1, "↓"), (Direction.UP, 1, "↑")):
            moved = (note + step) % 12
            triad = identify_triad([moved if n == note else n for n in notes])
            if triad is not None:
                reachable.append(
                    ReachableTriad(
                        triad=triad,
                        moved_note=note,
                        direction=direction,
                        description=f"{note_name(note)} {arrow} {note_name(moved)}",
                    )
                )

    return AugmentedReachability(aug_chord=aug_chord, reachable_triads=reachable)


def get_tritone_sub_pairs() -> list[TritoneSubPair]:
    """The six dom7 / tritone-substitute pairs (roots 0-5 and their partners).

    Both chords of a pair resolve, by convention, to the major triad a fifth
    below the first chord (G7 and Db7 both go to C).
    """
    pairs: list[TritoneSubPair] = []
    for root in range(6):
        pairs.append(
            TritoneSubPair(
                dom7=Chord(root=root, quality=ChordQuality.DOM7),
                tritone_sub_dom7=Chord(root=root + 6, quality=ChordQuality.DOM7),
                shared_tritone=((root + 4) % 12, (root + 10) % 12),
                common_resolution=Chord(root=root + 5, quality=ChordQuality.MAJOR),
            )
        )
    return pairs


def get_tritone_substitute(c: Chord) -> Chord:
    """The chord a tritone away with the same quality."""
    return Chord(root=c.root + 6, quality=c.quality)


def get_unique_augmented_triads() -> list[Chord]:
    return [Chord(root=r, quality=ChordQuality.AUGMENTED) for r in range(4)]
