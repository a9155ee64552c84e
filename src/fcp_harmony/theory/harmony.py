"""Diatonic harmony of a major key and the functional "next moves" graph.

Classical tendencies (simplified):

- I can go anywhere
- ii -> V, vii°, I
- iii -> vi, IV, ii
- IV -> V, I, ii, vii°
- V -> I, vi
- vi -> ii, IV, V
- vii° -> I, iii
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fcp_harmony.lib.chord_library import ScaleType, TonalFunction
from fcp_harmony.theory.chords import Chord, chord_key
from fcp_harmony.theory.relationships import is_dominant_of, shared_note_count
from fcp_harmony.theory.scales import DEGREE_FUNCTIONS, diatonic_triads

ROMAN_MAJOR: tuple[str, ...] = ("I", "ii", "iii", "IV", "V", "vi", "vii°")


class MoveStrength(str, Enum):
    STRONG = "strong"
    COMMON = "common"
    CREATIVE = "creative"


@dataclass(frozen=True)
class DiatonicChordInfo:
    chord: Chord
    degree: int  # 0-6
    roman: str
    function: TonalFunction
    key: str  # chord_key, for lookups


@dataclass(frozen=True)
class NextMove:
    chord: Chord
    info: DiatonicChordInfo
    strength: MoveStrength
    reason: str


def get_diatonic_chords(root: int) -> list[DiatonicChordInfo]:
    """The seven diatonic triads of the major key on *root*."""
    return [
        DiatonicChordInfo(
            chord=c,
            degree=i,
            roman=ROMAN_MAJOR[i],
            function=DEGREE_FUNCTIONS[i],
            key=chord_key(c),
        )
        for i, c in enumerate(diatonic_triads(root, ScaleType.MAJOR))
    ]


def get_diatonic_info(c: Chord, key_root: int) -> DiatonicChordInfo | None:
    k = chord_key(c)
    for info in get_diatonic_chords(key_root):
        if info.key == k:
            return info
    return None


def is_diatonic(c: Chord, key_root: int) -> bool:
    return get_diatonic_info(c, key_root) is not None


# ---------------------------------------------------------------------------
# Next-move graph
# ---------------------------------------------------------------------------

_S = MoveStrength

# degree -> [(target degree, strength, reason)]
NEXT_MOVE_MAP: dict[int, tuple[tuple[int, MoveStrength, str], ...]] = {
    0: (
        (3, _S.STRONG, "I → IV (to subdominant)"),
        (4, _S.STRONG, "I → V (to dominant)"),
        (5, _S.COMMON, "I → vi (deceptive/relative)"),
        (1, _S.COMMON, "I → ii (to subdominant)"),
        (2, _S.CREATIVE, "I → iii (mediant)"),
    ),
    1: (
        (4, _S.STRONG, "ii → V (pre-dominant to dominant)"),
        (6, _S.COMMON, "ii → vii° (to dominant)"),
        (0, _S.COMMON, "ii → I (to tonic)"),
        (3, _S.CREATIVE, "ii → IV (subdominant swap)"),
    ),
    2: (
        (5, _S.STRONG, "iii → vi (tonic to tonic)"),
        (3, _S.COMMON, "iii → IV (to subdominant)"),
        (1, _S.COMMON, "iii → ii (to subdominant)"),
        (4, _S.CREATIVE, "iii → V (skip to dominant)"),
    ),
    3: (
        (4, _S.STRONG, "IV → V (subdominant to dominant)"),
        (0, _S.STRONG, "IV → I (plagal cadence)"),
        (1, _S.COMMON, "IV → ii (subdominant swap)"),
        (6, _S.COMMON, "IV → vii° (to dominant)"),
        (5, _S.CREATIVE, "IV → vi (subdominant to tonic)"),
    ),
    4: (
        (0, _S.STRONG, "V → I (authentic cadence)"),
        (5, _S.COMMON, "V → vi (deceptive cadence)"),
        (3, _S.CREATIVE, "V → IV (retrogression)"),
    ),
    5: (
        (1, _S.STRONG, "vi → ii (tonic to subdominant)"),
        (3, _S.STRONG, "vi → IV (tonic to subdominant)"),
        (4, _S.COMMON, "vi → V (to dominant)"),
        (2, _S.CREATIVE, "vi → iii (tonic to tonic)"),
        (0, _S.CREATIVE, "vi → I (back to tonic)"),
    ),
    6: (
        (0, _S.STRONG, "vii° → I (dominant to tonic)"),
        (2, _S.COMMON, "vii° → iii (to tonic)"),
        (5, _S.CREATIVE, "vii° → vi (deceptive)"),
    ),
}


def get_next_moves(c: Chord, key_root: int) -> list[NextMove]:
    """Suggested continuations from *c* in the major key on *key_root*.

    Diatonic chords follow :data:`NEXT_MOVE_MAP`. A chromatic chord resolves
    by dominant motion or by sharing at least two tones with a diatonic
    chord; failing both, the first three diatonic chords are offered so the
    result is never empty.
    """
    diatonic = get_diatonic_chords(key_root)
    info = get_diatonic_info(c, key_root)

    if info is None:
        moves: list[NextMove] = []
        for d in diatonic:
            if is_dominant_of(c, d.chord):
                moves.append(NextMove(d.chord, d, _S.STRONG, f"Dominant resolution → {d.roman}"))
                continue
            shared = shared_note_count(c, d.chord)
            if shared >= 2:
                moves.append(NextMove(d.chord, d, _S.COMMON, f"{shared} shared notes → {d.roman}"))
        if moves:
            return moves
        return [NextMove(d.chord, d, _S.CREATIVE, f"Return to key → {d.roman}") for d in diatonic[:3]]

    return [
        NextMove(diatonic[degree].chord, diatonic[degree], strength, reason)
        for degree, strength, reason in NEXT_MOVE_MAP[info.degree]
    ]


# ---------------------------------------------------------------------------
# Function colours
# ---------------------------------------------------------------------------

FUNCTION_COLORS: dict[TonalFunction, str] = {
    TonalFunction.TONIC: "#22c55e",
    TonalFunction.SUBDOMINANT: "#3b82f6",
    TonalFunction.DOMINANT: "#ef4444",
}

FUNCTION_BG_COLORS: dict[TonalFunction, str] = {
    TonalFunction.TONIC: "rgba(34,197,94,0.15)",
    TonalFunction.SUBDOMINANT: "rgba(59,130,246,0.15)",
    TonalFunction.DOMINANT: "rgba(239,68,68,0.15)",
}


def function_color(fn: TonalFunction) -> str:
    return FUNCTION_COLORS[fn]


def function_bg_color(fn: TonalFunction) -> str:
    return FUNCTION_BG_COLORS[fn]
