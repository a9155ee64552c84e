"""Guitar chord voicings: transposed shape templates plus a generic fallback."""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality, get_intervals
from fcp_harmony.lib.guitar_library import (
    MAX_FRET,
    MUTED,
    SCAN_FRETS,
    SHAPE_TEMPLATES,
    STANDARD_TUNING,
    Tuning,
)


@dataclass(frozen=True)
class GuitarChordShape:
    frets: tuple[int, ...]  # per string, low to high; MUTED for unplayed
    base_fret: int  # 0 = open position
    label: str


def midi_note(string_index: int, fret: int, tuning: Tuning = STANDARD_TUNING) -> int:
    return tuning[string_index] + fret


def pitch_class(string_index: int, fret: int, tuning: Tuning = STANDARD_TUNING) -> int:
    return midi_note(string_index, fret, tuning) % 12


def _base_fret(frets: tuple[int, ...], fallback: int) -> int:
    lowest = min((f for f in frets if f > 0), default=fallback)
    return lowest if lowest > 3 else 0


def get_guitar_shapes(root: int, quality: ChordQuality, tuning: Tuning = STANDARD_TUNING) -> list[GuitarChordShape]:
    """Playable shapes for the chord on *root*.

    Each template for *quality* is shifted so its root string sounds *root*;
    shapes that would reach above :data:`MAX_FRET` are dropped. Qualities
    without templates, and tunings whose string count differs from the
    templates, go through :func:`generate_from_intervals`.
    """
    templates = [
        t for t in SHAPE_TEMPLATES
        if t.quality == quality and len(t.frets) == len(tuning)
    ]
    if not templates:
        return generate_from_intervals(root, quality, tuning)

    shapes: list[GuitarChordShape] = []
    for template in templates:
        offset = (root - tuning[template.root_string]) % 12
        frets = tuple(MUTED if f == MUTED else f + offset for f in template.frets)
        highest = max(f for f in frets if f != MUTED)
        if highest > MAX_FRET:
            continue
        shapes.append(GuitarChordShape(frets=frets, base_fret=_base_fret(frets, highest), label=template.label))
    return shapes


def generate_from_intervals(root: int, quality: ChordQuality, tuning: Tuning = STANDARD_TUNING) -> list[GuitarChordShape]:
    """Lowest chord-tone fret (0 to :data:`SCAN_FRETS`) on every string.

    Strings with no chord tone in range are muted. Fewer than three
    sounding strings yields no shape.
    """
    targets = {(root + i) % 12 for i in get_intervals(quality)}
    frets: list[int] = []
    for open_note in tuning:
        found = next((f for f in range(SCAN_FRETS + 1) if (open_note + f) % 12 in targets), MUTED)
        frets.append(found)

    played = [f for f in frets if f != MUTED]
    if len(played) < 3:
        return []
    shape = tuple(frets)
    return [GuitarChordShape(frets=shape, base_fret=_base_fret(shape, 0), label="Auto")]


def shape_midi_notes(shape: GuitarChordShape, tuning: Tuning = STANDARD_TUNING) -> list[int]:
    return [midi_note(s, f, tuning) for s, f in enumerate(shape.frets) if f != MUTED]


def shape_pitch_classes(shape: GuitarChordShape, tuning: Tuning = STANDARD_TUNING) -> list[int]:
    return [n % 12 for n in shape_midi_notes(shape, tuning)]
