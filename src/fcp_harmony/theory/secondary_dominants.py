"""Secondary dominants: V7 of each diatonic chord other than I and vii°.

In C major: V7/ii = A7, V7/iii = B7, V7/IV = C7, V7/V = D7, V7/vi = E7.
"""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord
from fcp_harmony.theory.harmony import ROMAN_MAJOR, get_diatonic_chords

TARGET_DEGREES: tuple[int, ...] = (1, 2, 3, 4, 5)


@dataclass(frozen=True)
class SecondaryDominant:
    dom7: Chord
    target: Chord
    target_degree: int  # 0-6
    label: str  # "V7/ii"


def get_secondary_dominants(key_root: int) -> list[SecondaryDominant]:
    diatonic = get_diatonic_chords(key_root)
    results: list[SecondaryDominant] = []
    for degree in TARGET_DEGREES:
        target = diatonic[degree].chord
        results.append(
            SecondaryDominant(
                dom7=Chord(root=target.root + 7, quality=ChordQuality.DOM7),
                target=target,
                target_degree=degree,
                label=f"V7/{ROMAN_MAJOR[degree]}",
            )
        )
    return results


def is_secondary_dominant(c: Chord, key_root: int) -> SecondaryDominant | None:
    """Return the matching secondary dominant, or None (dom7 chords only)."""
    if c.quality != ChordQuality.DOM7:
        return None
    for sd in get_secondary_dominants(key_root):
        if sd.dom7.root == c.root:
            return sd
    return None
