"""Modulation analysis: pivot chords and routes between two major keys.

Three pivot mechanisms, smoothest first:

1. Common chords: diatonic in both keys, reinterpreted
2. Diminished 7th pivots: a dim7 resolves by half step to four majors
3. Augmented pivots: an augmented triad reaches six triads by half step
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fcp_harmony.lib.chord_library import note_name
from fcp_harmony.theory.chords import Chord, chord_key, chord_name
from fcp_harmony.theory.harmony import DiatonicChordInfo, get_diatonic_chords
from fcp_harmony.theory.symmetric import (
    get_augmented_reachability,
    get_diminished_7th_groups,
    get_diminished_resolutions,
    get_unique_augmented_triads,
)


class PivotType(str, Enum):
    COMMON = "common"
    DIMINISHED = "diminished"
    AUGMENTED = "augmented"


# Smoothness tier of each pivot type; lower is smoother.
PIVOT_DISTANCE: dict[PivotType, int] = {
    PivotType.COMMON: 0,
    PivotType.DIMINISHED: 1,
    PivotType.AUGMENTED: 2,
}

# Fifths needed to travel a given number of semitones (index = semitones)
FIFTHS_POSITION: tuple[int, ...] = (0, 5, 10, 3, 8, 1, 6, 11, 4, 9, 2, 7)


@dataclass(frozen=True)
class CommonChord:
    chord: Chord
    source_info: DiatonicChordInfo
    target_info: DiatonicChordInfo
    description: str  # "Am: vi in C → ii in G"


@dataclass(frozen=True)
class DiminishedPivot:
    dim7_chord: Chord
    resolves_to: Chord
    target_degree: DiatonicChordInfo
    description: str


@dataclass(frozen=True)
class AugmentedPivot:
    aug_chord: Chord
    reaches_chord: Chord
    moved_note: str  # "G# ↓ G"
    target_degree: DiatonicChordInfo
    description: str


@dataclass(frozen=True)
class ModulationRoute:
    type: PivotType
    pivot_chord: Chord
    target_chord: Chord
    source_roman: str | None  # only common-chord pivots have one
    target_roman: str
    description: str
    distance: int


def _diatonic_map(key_root: int) -> dict[str, DiatonicChordInfo]:
    return {d.key: d for d in get_diatonic_chords(key_root)}


def find_common_chords(source_root: int, target_root: int) -> list[CommonChord]:
    target_map = _diatonic_map(target_root)
    results: list[CommonChord] = []
    for src in get_diatonic_chords(source_root):
        tgt = target_map.get(src.key)
        if tgt is None:
            continue
        results.append(
            CommonChord(
                chord=src.chord,
                source_info=src,
                target_info=tgt,
                description=(
                    f"{chord_name(src.chord)}: {src.roman} in {note_name(source_root)}"
                    f" → {tgt.roman} in {note_name(target_root)}"
                ),
            )
        )
    return results


def find_diminished_pivots(target_root: int) -> list[DiminishedPivot]:
    """Dim7 chords whose half-step resolutions land in the target key.

    Each group is represented by its first chord; all four members share the
    same pitch classes.
    """
    target_map = _diatonic_map(target_root)
    results: list[DiminishedPivot] = []
    for group in get_diminished_7th_groups():
        dim7 = group[0]
        for resolved in get_diminished_resolutions(dim7):
            info = target_map.get(chord_key(resolved))
            if info is None:
                continue
            results.append(
                DiminishedPivot(
                    dim7_chord=dim7,
                    resolves_to=resolved,
                    target_degree=info,
                    description=(
                        f"{chord_name(dim7)} → {chord_name(resolved)}"
                        f" ({info.roman} in {note_name(target_root)})"
                    ),
                )
            )
    return results


def find_augmented_pivots(target_root: int) -> list[AugmentedPivot]:
    target_map = _diatonic_map(target_root)
    results: list[AugmentedPivot] = []
    for aug in get_unique_augmented_triads():
        reach = get_augmented_reachability(aug.root)
        for r in reach.reachable_triads:
            info = target_map.get(chord_key(r.triad))
            if info is None:
                continue
            results.append(
                AugmentedPivot(
                    aug_chord=reach.aug_chord,
                    reaches_chord=r.triad,
                    moved_note=r.description,
                    target_degree=info,
                    description=(
                        f"{chord_name(reach.aug_chord)} ({r.description}) → {chord_name(r.triad)}"
                        f" ({info.roman} in {note_name(target_root)})"
                    ),
                )
            )
    return results


def get_modulation_routes(source_root: int, target_root: int) -> list[ModulationRoute]:
    """All routes from one key to another, smoothest tier first.

    Same-key input has no routes. Within a tier, discovery order is kept.
    """
    if source_root % 12 == target_root % 12:
        return []

    routes: list[ModulationRoute] = []
    for c in find_common_chords(source_root, target_root):
        routes.append(
            ModulationRoute(
                type=PivotType.COMMON,
                pivot_chord=c.chord,
                target_chord=c.chord,
                source_roman=c.source_info.roman,
                target_roman=c.target_info.roman,
                description=c.description,
                distance=PIVOT_DISTANCE[PivotType.COMMON],
            )
        )
    for d in find_diminished_pivots(target_root):
        routes.append(
            ModulationRoute(
                type=PivotType.DIMINISHED,
                pivot_chord=d.dim7_chord,
                target_chord=d.resolves_to,
                source_roman=None,
                target_roman=d.target_degree.roman,
                description=d.description,
                distance=PIVOT_DISTANCE[PivotType.DIMINISHED],
            )
        )
    for a in find_augmented_pivots(target_root):
        routes.append(
            ModulationRoute(
                type=PivotType.AUGMENTED,
                pivot_chord=a.aug_chord,
                target_chord=a.reaches_chord,
                source_roman=None,
                target_roman=a.target_degree.roman,
                description=a.description,
                distance=PIVOT_DISTANCE[PivotType.AUGMENTED],
            )
        )

    routes.sort(key=lambda r: r.distance)
    return routes


def key_distance(a: int, b: int) -> int:
    """Distance between two major keys around the circle of fifths (0-6)."""
    d = FIFTHS_POSITION[(b - a) % 12]
    return min(d, 12 - d)
