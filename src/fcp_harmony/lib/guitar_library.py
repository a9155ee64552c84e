"""Guitar tunings and chord shape templates."""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality

Tuning = tuple[int, ...]

# Open-string MIDI notes, low string first
STANDARD_TUNING: Tuning = (40, 45, 50, 55, 59, 64)  # E2 A2 D3 G3 B3 E4

TUNINGS: dict[str, Tuning] = {
    "standard": STANDARD_TUNING,
    "drop-d": (38, 45, 50, 55, 59, 64),
    "open-g": (38, 43, 50, 55, 59, 62),
    "open-d": (38, 45, 50, 54, 57, 62),
    "dadgad": (38, 45, 50, 55, 57, 62),
}

MUTED = -1
MAX_FRET = 15  # shapes reaching higher are discarded; the stock templates top out at 15
SCAN_FRETS = 7  # highest fret tried by the fallback shape generator


@dataclass(frozen=True)
class ShapeTemplate:
    quality: ChordQuality
    frets: tuple[int, ...]  # written with the root on ``root_string`` at fret 0
    root_string: int  # 0 = lowest string
    label: str


_Q = ChordQuality

SHAPE_TEMPLATES: tuple[ShapeTemplate, ...] = (
    ShapeTemplate(_Q.MAJOR, (0, 2, 2, 1, 0, 0), 0, "E form"),
    ShapeTemplate(_Q.MAJOR, (MUTED, 0, 2, 2, 2, 0), 1, "A form"),
    ShapeTemplate(_Q.MINOR, (0, 2, 2, 0, 0, 0), 0, "Em form"),
    ShapeTemplate(_Q.MINOR, (MUTED, 0, 2, 2, 1, 0), 1, "Am form"),
    ShapeTemplate(_Q.DOM7, (0, 2, 0, 1, 0, 0), 0, "E7 form"),
    ShapeTemplate(_Q.DOM7, (MUTED, 0, 2, 0, 2, 0), 1, "A7 form"),
    ShapeTemplate(_Q.MAJ7, (0, 2, 1, 1, 0, 0), 0, "Emaj7 form"),
    ShapeTemplate(_Q.MAJ7, (MUTED, 0, 2, 1, 2, 0), 1, "Amaj7 form"),
    ShapeTemplate(_Q.MIN7, (0, 2, 0, 0, 0, 0), 0, "Em7 form"),
    ShapeTemplate(_Q.MIN7, (MUTED, 0, 2, 0, 1, 0), 1, "Am7 form"),
    ShapeTemplate(_Q.DIMINISHED, (MUTED, MUTED, 0, 1, 3, 1), 2, "Dim"),
    ShapeTemplate(_Q.DIMINISHED, (MUTED, 0, 1, 2, 1, MUTED), 1, "Dim (A string)"),
    ShapeTemplate(_Q.AUGMENTED, (MUTED, MUTED, 0, 3, 3, 2), 2, "Aug"),
    ShapeTemplate(_Q.AUGMENTED, (MUTED, 0, 3, 2, 2, 1), 1, "Aug (A string)"),
    ShapeTemplate(_Q.DIM7, (MUTED, MUTED, 0, 1, 0, 1), 2, "Dim7"),
    ShapeTemplate(_Q.DIM7, (MUTED, 0, 1, 2, 1, 2), 1, "Dim7 (A string)"),
    ShapeTemplate(_Q.HALF_DIM7, (MUTED, MUTED, 0, 1, 1, 1), 2, "m7b5"),
    ShapeTemplate(_Q.HALF_DIM7, (MUTED, 0, 1, 0, 1, MUTED), 1, "m7b5 (A string)"),
    ShapeTemplate(_Q.SUS4, (0, 2, 2, 2, 0, 0), 0, "Sus4"),
    ShapeTemplate(_Q.SUS4, (MUTED, 0, 2, 2, 3, 0), 1, "Sus4 (A string)"),
    ShapeTemplate(_Q.SUS2, (0, 2, 4, 4, 0, 0), 0, "Sus2"),
    ShapeTemplate(_Q.SUS2, (MUTED, 0, 2, 2, 0, 0), 1, "Sus2 (A string)"),
)
