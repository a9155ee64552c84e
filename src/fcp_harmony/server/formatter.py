"""Compact response formatting for harmony FCP tool outputs."""

from __future__ import annotations

from collections.abc import Sequence

from fcp_harmony.lib.chord_library import ScaleType, note_name
from fcp_harmony.lib.mode_library import MODE_TEMPLATES, ModeType
from fcp_harmony.model.progression import Progression
from fcp_harmony.theory.chords import Chord, chord_key, chord_name
from fcp_harmony.theory.harmony import ROMAN_MAJOR, get_diatonic_info
from fcp_harmony.theory.modal_interchange import get_all_borrowed_chords
from fcp_harmony.theory.scales import DEGREE_FUNCTIONS, diatonic_7ths
from fcp_harmony.theory.secondary_dominants import is_secondary_dominant


def format_result(
    success: bool,
    message: str,
    suggestion: str | None = None,
) -> str:
    """Format a mutation result line.

    Success: ``+ message``
    Error:   ``! message`` with optional ``  try: suggestion``
    """
    if success:
        return f"+ {message}"
    line = f"! {message}"
    if suggestion:
        line += f"\n  try: {suggestion}"
    return line


def format_notes(pcs: Sequence[int]) -> str:
    return " ".join(note_name(pc) for pc in pcs)


def format_chords(chords: Sequence[Chord]) -> str:
    return " ".join(chord_name(c) for c in chords)


def mode_name(mode: ModeType) -> str:
    return MODE_TEMPLATES[mode].name


def describe_in_key(c: Chord, key_root: int) -> str:
    """Roman numeral and role of *c* in the major key on *key_root*.

    Diatonic triads and 7ths get their numeral and function; otherwise the
    chord is tried as a secondary dominant, then as a borrowed chord.
    """
    info = get_diatonic_info(c, key_root)
    if info is not None:
        return f"{info.roman} {info.function.value}"

    for degree, seventh in enumerate(diatonic_7ths(key_root, ScaleType.MAJOR)):
        if chord_key(seventh) == chord_key(c):
            return f"{ROMAN_MAJOR[degree]}7 {DEGREE_FUNCTIONS[degree].value}"

    sd = is_secondary_dominant(c, key_root)
    if sd is not None:
        return f"{sd.label} secondary dominant"

    k = chord_key(c)
    for borrowed in get_all_borrowed_chords(key_root):
        if chord_key(borrowed.chord) == k:
            return f"{borrowed.roman} borrowed from {borrowed.source_mode_name}"

    return "chromatic"


def format_map(progression: Progression) -> str:
    """Progression overview: header plus one line per chord."""
    header = (
        f"{progression.title!r} key:{progression.key_name} major "
        f"tempo:{progression.tempo:g} tuning:{progression.tuning}"
    )
    if not progression.chords:
        return f"{header}\n  (no chords)"

    lines = [header]
    for idx, entry in enumerate(progression.chords, 1):
        name = chord_name(entry.chord)
        lines.append(
            f"  {idx}. {name:8s} {entry.beats:g} beats  {describe_in_key(entry.chord, progression.key_root)}"
        )
    lines.append(f"  total: {len(progression.chords)} chords, {progression.total_beats:g} beats")
    return "\n".join(lines)
