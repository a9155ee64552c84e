"""Voice leading: move each voice of a chord to the nearest tone of the next.

A voicing is a list of MIDI note numbers, lowest first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import permutations

from fcp_harmony.lib.chord_library import MIDDLE_C
from fcp_harmony.theory.chords import Chord, chord_pitch_classes

# Added voices land within this window around middle C
_EXTRA_LOW = MIDDLE_C - 6
_EXTRA_HIGH = MIDDLE_C + 18

# Piano export styles: led from chord to chord, or each chord from its root
SMOOTH = "smooth"
CLOSE = "close"
VOICINGS: tuple[str, ...] = (SMOOTH, CLOSE)


class Smoothness(str, Enum):
    SMOOTH = "smooth"
    MODERATE = "moderate"
    ANGULAR = "angular"


@dataclass(frozen=True)
class Transition:
    from_index: int
    to_index: int
    movement: int  # semitones summed over voices


@dataclass(frozen=True)
class VoiceLeadingQuality:
    total_movement: int
    transitions: tuple[Transition, ...]
    average_movement: float


def initial_voicing(c: Chord, base_octave: int = 4) -> list[int]:
    """Close voicing of *c* within the octave starting at C of *base_octave* (C4 = 48)."""
    base = base_octave * 12
    return sorted(base + pc for pc in chord_pitch_classes(c))


def nearest_realization(reference: int, target_pc: int) -> int:
    """The note of pitch class *target_pc* closest to *reference*; a tritone goes up."""
    diff = (target_pc - reference) % 12
    if diff == 0:
        return reference
    if diff <= 6:
        return reference + diff
    return reference - (12 - diff)


def _optimal_assignment(prev: list[int], target_pcs: list[int]) -> list[int]:
    n = min(len(prev), len(target_pcs))
    best_cost: int | None = None
    best: list[int] = []
    for perm in permutations(target_pcs[:n]):
        voicing = [nearest_realization(note, pc) for note, pc in zip(prev, perm)]
        cost = sum(abs(v - note) for v, note in zip(voicing, prev))
        if best_cost is None or cost < best_cost:
            best_cost, best = cost, voicing
    return sorted(best)


def _extra_voice(pc: int) -> int:
    note = MIDDLE_C + pc
    while note < _EXTRA_LOW:
        note += 12
    while note > _EXTRA_HIGH:
        note -= 12
    return note


def smooth_voice_leading(prev: list[int], next_chord: Chord) -> list[int]:
    """Voice *next_chord* so that the voices of *prev* move as little as possible.

    With equal sizes every voice is matched to one chord tone, trying each
    assignment. A larger *prev* loses its top voices; a smaller one keeps
    all its voices on the first chord tones and gains new voices near
    middle C for the rest. An empty *prev* gets :func:`initial_voicing`.
    """
    target_pcs = chord_pitch_classes(next_chord)
    if not prev:
        return initial_voicing(next_chord)
    if len(prev) >= len(target_pcs):
        return _optimal_assignment(prev[:len(target_pcs)], target_pcs)

    assigned = _optimal_assignment(prev, target_pcs[:len(prev)])
    used = {n % 12 for n in assigned}
    extras = [_extra_voice(pc) for pc in target_pcs if pc not in used]
    return sorted(assigned + extras)


def voice_progression(chords: list[Chord], base_octave: int = 5) -> list[list[int]]:
    """Voicings for *chords*, the first in close position, the rest led smoothly."""
    voicings: list[list[int]] = []
    for c in chords:
        prev = voicings[-1] if voicings else []
        voicings.append(smooth_voice_leading(prev, c) if prev else initial_voicing(c, base_octave))
    return voicings


def analyze_voice_leading(voicings: list[list[int]]) -> VoiceLeadingQuality:
    """Semitones moved between consecutive voicings, voice by voice from the bottom.

    Only as many voices as the smaller voicing has are compared.
    """
    transitions = []
    for i, (curr, nxt) in enumerate(zip(voicings, voicings[1:])):
        movement = sum(abs(b - a) for a, b in zip(curr, nxt))
        transitions.append(Transition(from_index=i, to_index=i + 1, movement=movement))
    total = sum(t.movement for t in transitions)
    return VoiceLeadingQuality(
        total_movement=total,
        transitions=tuple(transitions),
        average_movement=total / len(transitions) if transitions else 0.0,
    )


def smoothness_rating(average_movement: float) -> Smoothness:
    if average_movement <= 4:
        return Smoothness.SMOOTH
    if average_movement <= 8:
        return Smoothness.MODERATE
    return Smoothness.ANGULAR
