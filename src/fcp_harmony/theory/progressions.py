"""Realize progression templates and library entries in a concrete key."""

from __future__ import annotations

from fcp_harmony.lib.chord_library import SCALE_TEMPLATES, ScaleType
from fcp_harmony.lib.progression_library import (
    FLAT_II,
    PROGRESSION_LIBRARY,
    TEMPLATES,
    LibraryCategory,
    LibraryEntry,
    ProgressionTemplate,
)
from fcp_harmony.theory.chords import Chord, transpose_chord

_MAJOR = SCALE_TEMPLATES[ScaleType.MAJOR]


def transpose_template(template: ProgressionTemplate, key_root: int) -> list[Chord]:
    chords: list[Chord] = []
    for step in template.steps:
        offset = 1 if step.degree == FLAT_II else _MAJOR[step.degree]
        chords.append(Chord(key_root + offset, step.quality))
    return chords


def transpose_library_entry(entry: LibraryEntry, target_key: int) -> list[Chord]:
    """The entry's chords moved from its own key to *target_key*."""
    offset = (target_key - entry.key) % 12
    return [transpose_chord(c, offset) for c in entry.chords]


def get_library_by_category(category: LibraryCategory | str) -> list[LibraryEntry]:
    return [e for e in PROGRESSION_LIBRARY if e.category == category]


def find_template(name: str) -> ProgressionTemplate | None:
    """Look a template up by short name (``ii-V-I``) or display name, ignoring case."""
    wanted = name.strip().lower()
    for t in TEMPLATES:
        if wanted in (t.short_name.lower(), t.name.lower()):
            return t
    return None


def find_library_entry(name: str) -> LibraryEntry | None:
    wanted = name.strip().lower()
    for e in PROGRESSION_LIBRARY:
        if e.name.lower() == wanted:
            return e
    return None
