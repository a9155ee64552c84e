"""Op handlers: chord list editing, session context, whole-progression rewrites."""

from __future__ import annotations

import copy
import math

from fcp_harmony.lib.chord_library import note_name
from fcp_harmony.lib.guitar_library import TUNINGS
from fcp_harmony.lib.progression_library import TEMPLATES
from fcp_harmony.model.event_log import (
    ChordAdded,
    ChordRemoved,
    ChordReplaced,
    ChordsInserted,
    KeyChanged,
    ProgressionRewritten,
    TempoChanged,
    TitleChanged,
    TuningChanged,
)
from fcp_harmony.parser.ops import ParsedOp
from fcp_harmony.server.formatter import format_chords, format_result
from fcp_harmony.server.resolvers import (
    OpContext,
    resolve_beats,
    resolve_chord,
    resolve_index,
    resolve_key,
)
from fcp_harmony.theory.altered_dominants import is_dominant_family
from fcp_harmony.theory.bridge_chords import suggest_bridges_for_progression
from fcp_harmony.theory.chords import Chord, chord_name, transpose_chord
from fcp_harmony.theory.negative_harmony import compute_negative_progression
from fcp_harmony.theory.progressions import (
    find_library_entry,
    find_template,
    transpose_library_entry,
    transpose_template,
)
from fcp_harmony.theory.symmetric import get_tritone_substitute


# ---------------------------------------------------------------------------
# Chord list
# ---------------------------------------------------------------------------

def op_chord(op: ParsedOp, ctx: OpContext) -> str:
    c = resolve_chord(op.target)
    if isinstance(c, str):
        return c

    beats = resolve_beats(op.params)
    if isinstance(beats, str):
        return beats

    prog = ctx.progression
    position: int | None = None
    at_str = op.params.get("at")
    if at_str is not None:
        try:
            at = int(at_str)
        except ValueError:
            return format_result(False, f"Invalid position: {at_str!r}", "chord G7 at:2")
        if not 1 <= at <= len(prog.chords) + 1:
            return format_result(False, f"Position {at} is outside 1-{len(prog.chords) + 1}")
        position = at - 1

    entry = prog.add_chord(c, beats, position)
    index = prog.chords.index(entry)
    ctx.event_log.append(ChordAdded(position=index, entry=copy.copy(entry)))
    return format_result(True, f"Chord {chord_name(c)} ({beats:g} beats) at {index + 1}")


def op_remove(op: ParsedOp, ctx: OpContext) -> str:
    position = resolve_index(op.target, ctx.progression, "remove")
    if isinstance(position, str):
        return position

    entry = ctx.progression.remove_chord(position)
    ctx.event_log.append(ChordRemoved(position=position, entry=entry))
    return format_result(True, f"Removed {chord_name(entry.chord)} from {position + 1}")


def op_replace(op: ParsedOp, ctx: OpContext) -> str:
    position = resolve_index(op.target, ctx.progression, "replace")
    if isinstance(position, str):
        return position

    c = resolve_chord(op.params.get("chord"), "replace 2 Dm7")
    if isinstance(c, str):
        return c

    old = ctx.progression.replace_chord(position, c)
    ctx.event_log.append(ChordReplaced(position=position, old_chord=old, new_chord=c))
    return format_result(True, f"Replaced {chord_name(old)} with {chord_name(c)} at {position + 1}")


def op_tritone_sub(op: ParsedOp, ctx: OpContext) -> str:
    position = resolve_index(op.target, ctx.progression, "tritone-sub")
    if isinstance(position, str):
        return position

    old = ctx.progression.chords[position].chord
    if not is_dominant_family(old.quality):
        return format_result(
            False,
            f"{chord_name(old)} at {position + 1} is not a dominant chord",
            "tritone-sub on a 7th chord such as G7",
        )
    sub = get_tritone_substitute(old)
    ctx.progression.replace_chord(position, sub)
    ctx.event_log.append(ChordReplaced(position=position, old_chord=old, new_chord=sub))
    return format_result(True, f"Tritone sub {chord_name(old)} -> {chord_name(sub)} at {position + 1}")


def op_bridge(op: ParsedOp, ctx: OpContext) -> str:
    prog = ctx.progression
    position = resolve_index(op.target, prog, "bridge")
    if isinstance(position, str):
        return position
    if position == len(prog.chords) - 1:
        return format_result(False, f"No chord after {position + 1} to bridge to", "bridge 1")

    beats = resolve_beats(op.params)
    if isinstance(beats, str):
        return beats

    before, after = prog.chords[position].chord, prog.chords[position + 1].chord
    suggestions = suggest_bridges_for_progression([before, after])
    if not suggestions:
        return format_result(False, f"No bridge chord between {chord_name(before)} and {chord_name(after)}")

    bridge = suggestions[0].bridge
    entry = prog.add_chord(bridge.chord, beats, position + 1)
    ctx.event_log.append(ChordAdded(position=position + 1, entry=copy.copy(entry)))
    return format_result(True, f"Bridge {bridge.reason} at {position + 2}")


# ---------------------------------------------------------------------------
# Seeding from templates and the library
# ---------------------------------------------------------------------------

def _append_chords(ctx: OpContext, chords: list[Chord], beats: float) -> int:
    """Append *chords* as one undoable step; returns the 0-based start."""
    prog = ctx.progression
    start = len(prog.chords)
    entries = [copy.copy(prog.add_chord(c, beats)) for c in chords]
    ctx.event_log.append(ChordsInserted(position=start, entries=entries))
    return start


def op_template(op: ParsedOp, ctx: OpContext) -> str:
    template = find_template(op.target or "")
    if template is None:
        names = ", ".join(t.short_name for t in TEMPLATES)
        return format_result(False, f"Unknown template: {op.target!r}", f"template ii-V-I  ({names})")

    key = resolve_key(op.params.get("key"), ctx.progression.key_root)
    if isinstance(key, str):
        return key
    beats = resolve_beats(op.params)
    if isinstance(beats, str):
        return beats

    chords = transpose_template(template, key)
    start = _append_chords(ctx, chords, beats)
    return format_result(True, f"{template.short_name} in {note_name(key)}: {format_chords(chords)} at {start + 1}")


def op_library(op: ParsedOp, ctx: OpContext) -> str:
    entry = find_library_entry(op.target or "")
    if entry is None:
        return format_result(False, f"No library progression named {op.target!r}", 'library "Autumn Leaves"')

    key = resolve_key(op.params.get("key"), ctx.progression.key_root)
    if isinstance(key, str):
        return key
    beats = resolve_beats(op.params)
    if isinstance(beats, str):
        return beats

    chords = transpose_library_entry(entry, key)
    start = _append_chords(ctx, chords, beats)
    return format_result(True, f"{entry.name} in {note_name(key)}: {format_chords(chords)} at {start + 1}")


# ---------------------------------------------------------------------------
# Whole-progression rewrites
# ---------------------------------------------------------------------------

def op_transpose(op: ParsedOp, ctx: OpContext) -> str:
    semitones_str = op.target
    if not semitones_str:
        return format_result(False, "Missing semitone count", "transpose 5")
    try:
        semitones = int(semitones_str)
    except ValueError:
        return format_result(False, f"Invalid semitone value: {semitones_str!r}")

    prog = ctx.progression
    old_chords = prog.chord_values()
    new_chords = [transpose_chord(c, semitones) for c in old_chords]
    old_key = prog.key_root
    new_key = (old_key + semitones) % 12

    prog.set_chords(new_chords)
    prog.key_root = new_key
    ctx.event_log.append(ProgressionRewritten(
        old_chords=old_chords, new_chords=new_chords, old_key=old_key, new_key=new_key,
    ))
    direction = "up" if semitones >= 0 else "down"
    return format_result(
        True,
        f"Transposed {len(new_chords)} chord(s) {direction} {abs(semitones)} semitones, key {note_name(new_key)}",
    )


def op_negate(op: ParsedOp, ctx: OpContext) -> str:
    prog = ctx.progression
    if not prog.chords:
        return format_result(False, "Progression is empty", "chord C")

    old_chords = prog.chord_values()
    new_chords = [n.chord for n in compute_negative_progression(old_chords, prog.key_root)]
    prog.set_chords(new_chords)
    ctx.event_log.append(ProgressionRewritten(
        old_chords=old_chords, new_chords=new_chords, old_key=prog.key_root, new_key=prog.key_root,
    ))
    return format_result(True, f"Negated around {prog.key_name}: {format_chords(new_chords)}")


# ---------------------------------------------------------------------------
# Session context
# ---------------------------------------------------------------------------

def op_key(op: ParsedOp, ctx: OpContext) -> str:
    key = resolve_key(op.target)
    if isinstance(key, str):
        return key

    old = ctx.progression.key_root
    ctx.progression.key_root = key
    ctx.event_log.append(KeyChanged(old_key=old, new_key=key))
    return format_result(True, f"Key {note_name(key)} major")


def op_tempo(op: ParsedOp, ctx: OpContext) -> str:
    bpm_str = op.target
    if not bpm_str:
        return format_result(False, "Missing BPM value", "tempo 120")
    try:
        bpm = float(bpm_str)
    except ValueError:
        return format_result(False, f"Invalid BPM: {bpm_str!r}")
    if not math.isfinite(bpm) or bpm <= 0:
        return format_result(False, f"BPM must be a positive number, got {bpm_str}")

    old = ctx.progression.tempo
    ctx.progression.tempo = bpm
    ctx.event_log.append(TempoChanged(old_bpm=old, new_bpm=bpm))
    return format_result(True, f"Tempo {bpm:g} BPM")


def op_title(op: ParsedOp, ctx: OpContext) -> str:
    title = op.target
    if not title:
        return format_result(False, "Missing title", 'title "Autumn Leaves"')

    old = ctx.progression.title
    ctx.progression.title = title
    ctx.event_log.append(TitleChanged(old_title=old, new_title=title))
    return format_result(True, f"Title set to '{title}'")


def op_tuning(op: ParsedOp, ctx: OpContext) -> str:
    name = (op.target or "").lower()
    if name not in TUNINGS:
        return format_result(False, f"Unknown tuning: {op.target!r}", ", ".join(TUNINGS))

    old = ctx.progression.tuning
    ctx.progression.tuning = name
    ctx.event_log.append(TuningChanged(old_tuning=old, new_tuning=name))
    return format_result(True, f"Tuning {name}")


HANDLERS = {
    "chord": op_chord,
    "remove": op_remove,
    "replace": op_replace,
    "tritone-sub": op_tritone_sub,
    "bridge": op_bridge,
    "template": op_template,
    "library": op_library,
    "transpose": op_transpose,
    "negate": op_negate,
    "key": op_key,
    "tempo": op_tempo,
    "title": op_title,
    "tuning": op_tuning,
}
