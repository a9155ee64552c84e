"""Bridge chords: passing chords to insert between two chords.

Three kinds are offered, all aimed at the second chord:

- the tritone substitute of its V7, which often walks the bass down by
  semitones;
- a diminished 7th a semitone below or above its root;
- its V7.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord, chord_name


class BridgeType(str, Enum):
    TRITONE_SUB = "tritone-sub"
    PASSING_DIM = "passing-dim"
    SECONDARY_DOM = "secondary-dom"


class BassDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class BridgeChord:
    chord: Chord
    type: BridgeType
    reason: str
    creates_chromatic_bass: bool  # from -> bridge -> to moves the bass by semitones


@dataclass(frozen=True)
class ChromaticBassSpan:
    start: int  # inclusive chord indices
    end: int
    direction: BassDirection


@dataclass(frozen=True)
class BridgeSuggestion:
    position: int  # the bridge goes between chords[position] and chords[position + 1]
    bridge: BridgeChord


def suggest_bridge_chords(from_chord: Chord, to_chord: Chord) -> list[BridgeChord]:
    """Candidates for a chord between *from_chord* and *to_chord*.

    A candidate whose root equals either neighbour's root is left out.
    """
    results: list[BridgeChord] = []
    from_bass = from_chord.root
    to_bass = to_chord.root
    to_name = chord_name(to_chord)

    v7 = Chord(to_bass + 7, ChordQuality.DOM7)
    sub = Chord(v7.root + 6, ChordQuality.DOM7)
    if sub.root not in (from_bass, to_bass):
        down = (from_bass - sub.root) % 12
        up = (sub.root - to_bass) % 12
        results.append(BridgeChord(
            chord=sub,
            type=BridgeType.TRITONE_SUB,
            reason=f"{chord_name(sub)} (tritone sub of {chord_name(v7)}, resolves to {to_name})",
            creates_chromatic_bass=(down == 1 and up == 1) or (down == 11 and up == 11),
        ))

    dim_below = Chord(to_bass - 1, ChordQuality.DIM7)
    if dim_below.root not in (from_bass, to_bass):
        results.append(BridgeChord(
            chord=dim_below,
            type=BridgeType.PASSING_DIM,
            reason=f"{chord_name(dim_below)} (chromatic passing, resolves up to {to_name})",
            creates_chromatic_bass=(from_bass - dim_below.root) % 12 == 1,
        ))

    dim_above = Chord(to_bass + 1, ChordQuality.DIM7)
    if dim_above.root not in (from_bass, to_bass, dim_below.root):
        results.append(BridgeChord(
            chord=dim_above,
            type=BridgeType.PASSING_DIM,
            reason=f"{chord_name(dim_above)} (chromatic passing, resolves down to {to_name})",
            creates_chromatic_bass=(dim_above.root - from_bass) % 12 == 1,
        ))

    if v7.root not in (from_bass, to_bass):
        results.append(BridgeChord(
            chord=v7,
            type=BridgeType.SECONDARY_DOM,
            reason=f"{chord_name(v7)} (V7 of {to_name})",
            creates_chromatic_bass=False,
        ))

    return results


def _step_direction(a: int, b: int) -> BassDirection | None:
    interval = (b - a) % 12
    if interval == 1:
        return BassDirection.ASCENDING
    if interval == 11:
        return BassDirection.DESCENDING
    return None


def find_chromatic_bass_lines(chords: list[Chord]) -> list[ChromaticBassSpan]:
    """Runs of three or more chords whose roots step by semitone one way."""
    spans: list[ChromaticBassSpan] = []
    start = 0
    direction: BassDirection | None = None

    for i in range(1, len(chords)):
        step = _step_direction(chords[i - 1].root, chords[i].root)
        if step is not None and step == direction:
            continue
        if direction is not None and i - 1 - start >= 2:
            spans.append(ChromaticBassSpan(start=start, end=i - 1, direction=direction))
        start = i - 1
        direction = step

    if direction is not None and len(chords) - 1 - start >= 2:
        spans.append(ChromaticBassSpan(start=start, end=len(chords) - 1, direction=direction))
    return spans


def _best_bridge(bridges: list[BridgeChord]) -> BridgeChord | None:
    preferences = (
        lambda b: b.creates_chromatic_bass and b.type == BridgeType.TRITONE_SUB,
        lambda b: b.creates_chromatic_bass,
        lambda b: b.type == BridgeType.TRITONE_SUB,
        lambda b: b.type == BridgeType.SECONDARY_DOM,
    )
    for wanted in preferences:
        for b in bridges:
            if wanted(b):
                return b
    return bridges[0] if bridges else None


def suggest_bridges_for_progression(chords: list[Chord]) -> list[BridgeSuggestion]:
    """The preferred bridge for each adjacent pair that has one.

    Chromatic-bass tritone subs come first, then any chromatic-bass bridge,
    then tritone subs, then secondary dominants.
    """
    suggestions: list[BridgeSuggestion] = []
    for i in range(len(chords) - 1):
        best = _best_bridge(suggest_bridge_chords(chords[i], chords[i + 1]))
        if best is not None:
            suggestions.append(BridgeSuggestion(position=i, bridge=best))
    return suggestions
