"""Upper structure triads: triads voiced over a dominant 7th's root, 3rd and
7th to imply extensions and alterations."""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import CHORD_TEMPLATES, ChordQuality, note_name


@dataclass(frozen=True)
class UpperStructureDefinition:
    root_interval: int  # semitones from the dom7 root to the triad root
    quality: ChordQuality  # MAJOR or MINOR
    extensions: tuple[str, ...]
    label: str
    tension_level: int  # 1-4


@dataclass(frozen=True)
class UpperStructureTriad:
    root_interval: int
    quality: ChordQuality
    notes: tuple[int, ...]  # triad pitch classes
    bass_notes: tuple[int, ...]  # dom7 root, major 3rd, minor 7th
    extensions: tuple[str, ...]
    label: str
    tension_level: int


_MAJ, _MIN = ChordQuality.MAJOR, ChordQuality.MINOR

UST_DEFINITIONS: tuple[UpperStructureDefinition, ...] = (
    UpperStructureDefinition(2, _MAJ, ("9", "♯11", "13"), "UST II", 2),
    UpperStructureDefinition(3, _MIN, ("♯9", "♯11", "13"), "UST ♭iii", 3),
    UpperStructureDefinition(3, _MAJ, ("♯9", "5", "♭7"), "UST ♭III", 3),
    UpperStructureDefinition(6, _MAJ, ("♯11", "13", "♭9(oct)"), "UST ♯IV", 3),
    UpperStructureDefinition(8, _MAJ, ("♭13", "♭9(oct)", "3"), "UST ♭VI", 4),
    UpperStructureDefinition(10, _MAJ, ("♭7", "9", "♯11"), "UST ♭VII", 2),
    UpperStructureDefinition(9, _MAJ, ("13", "♭9(oct)", "♯9"), "UST VI", 3),
)


def get_upper_structure_triads(dom7_root: int) -> list[UpperStructureTriad]:
    root = dom7_root % 12
    bass_notes = (root, (root + 4) % 12, (root + 10) % 12)
    triads: list[UpperStructureTriad] = []
    for d in UST_DEFINITIONS:
        ust_root = root + d.root_interval
        notes = tuple((ust_root + i) % 12 for i in CHORD_TEMPLATES[d.quality].intervals)
        triads.append(
            UpperStructureTriad(
                root_interval=d.root_interval,
                quality=d.quality,
                notes=notes,
                bass_notes=bass_notes,
                extensions=d.extensions,
                label=d.label,
                tension_level=d.tension_level,
            )
        )
    return triads


def format_ust(ust: UpperStructureTriad, dom7_root: int) -> str:
    """``"Dm / C7"`` style display string."""
    ust_root = (dom7_root + ust.root_interval) % 12
    suffix = "m" if ust.quality == _MIN else ""
    return f"{note_name(ust_root)}{suffix} / {note_name(dom7_root)}7"
