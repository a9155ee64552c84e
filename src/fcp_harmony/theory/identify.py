"""General-purpose chord identification from an arbitrary pitch-class set."""

from __future__ import annotations

from collections.abc import Iterable

from fcp_harmony.lib.chord_library import CHORD_TEMPLATES, ChordQuality
from fcp_harmony.theory.chords import Chord


def identify_chord_from_pitch_classes(pcs: Iterable[int]) -> Chord:
    """Name a set of pitch classes as a chord.

    Every input pitch class is tried as the root (ascending) against every
    quality (declaration order). An exact match returns at once. Otherwise
    the best partial match wins, scored as
    ``matched - 0.5 * |template size - input size|``; ties keep the
    earlier candidate. Never fails: empty or degenerate input still yields
    a best guess, defaulting to a major chord on the lowest pitch class.
    """
    pc_set = {pc % 12 for pc in pcs}
    ordered = sorted(pc_set)

    best_root = ordered[0] if ordered else 0
    best_quality = ChordQuality.MAJOR
    best_score = -1.0

    for root in ordered:
        for quality, template in CHORD_TEMPLATES.items():
            template_pcs = {(root + i) % 12 for i in template.intervals}
            matches = len(pc_set & template_pcs)
            size = len(template.intervals)

            if matches == size and size == len(pc_set):
                return Chord(root=root, quality=quality)

            score = matches - abs(size - len(pc_set)) * 0.5
            if score > best_score:
                best_root, best_quality, best_score = root, quality, score

    return Chord(root=best_root, quality=best_quality)
