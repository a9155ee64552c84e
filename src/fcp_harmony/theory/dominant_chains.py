"""Dominant chains and ii-V-I patterns.

A dominant chain is a run of dom7 chords falling by fifths, each one the V7
of the next: G7 C7 F7 Bb7 ...
"""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord
from fcp_harmony.theory.harmony import ROMAN_MAJOR, get_diatonic_chords

# ii, iii, IV, V, vi
SECONDARY_TARGET_DEGREES: tuple[int, ...] = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class IIVI:
    ii: Chord
    v: Chord
    i: Chord
    label: str  # "Primary ii-V-I" or "ii-V-I of IV"

    @property
    def chords(self) -> tuple[Chord, Chord, Chord]:
        return (self.ii, self.v, self.i)


def build_dominant_chain(start_root: int, length: int) -> list[Chord]:
    """*length* dom7 chords starting on *start_root*, each a fourth above the last."""
    return [Chord(root=start_root + 5 * i, quality=ChordQuality.DOM7) for i in range(max(length, 0))]


def find_ii_v_is(key_root: int) -> list[IIVI]:
    """The home-key ii-V-I followed by one aimed at each of ii, iii, IV, V and vi.

    In C major the ii-V-I of IV is Gm7 C7 F.
    """
    diatonic = get_diatonic_chords(key_root)
    results = [
        IIVI(
            ii=Chord(diatonic[1].chord.root, ChordQuality.MIN7),
            v=Chord(diatonic[4].chord.root, ChordQuality.DOM7),
            i=diatonic[0].chord,
            label="Primary ii-V-I",
        )
    ]
    for degree in SECONDARY_TARGET_DEGREES:
        target = diatonic[degree].chord
        results.append(
            IIVI(
                ii=Chord(target.root + 2, ChordQuality.MIN7),
                v=Chord(target.root + 7, ChordQuality.DOM7),
                i=target,
                label=f"ii-V-I of {ROMAN_MAJOR[degree]}",
            )
        )
    return results
