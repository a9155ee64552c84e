"""Shared argument resolvers for op and query handlers.

Each resolver returns the resolved value or an error string already
formatted with :func:`format_result`; callers check with ``isinstance``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from fcp_core import EventLog

from fcp_harmony.errors import ValidationError
from fcp_harmony.model.progression import DEFAULT_BEATS, Progression
from fcp_harmony.parser.chord import parse_chord_symbol
from fcp_harmony.parser.pitch import parse_note_name
from fcp_harmony.server.formatter import format_result
from fcp_harmony.theory.chords import Chord


@dataclass
class OpContext:
    """Shared state passed to every op handler."""
    progression: Progression
    event_log: EventLog


def resolve_index(index_str: str | None, progression: Progression, verb: str) -> int | str:
    """Turn a 1-based chord index into a 0-based position."""
    if not index_str:
        return format_result(False, "Missing chord index", f"{verb} 1")
    try:
        index = int(index_str)
    except ValueError:
        return format_result(False, f"Invalid index: {index_str!r}")
    if not progression.chords:
        return format_result(False, "Progression is empty", "chord C")
    if not 1 <= index <= len(progression.chords):
        return format_result(False, f"Index {index} is outside 1-{len(progression.chords)}")
    return index - 1


def resolve_chord(symbol: str | None, example: str = "chord Dm7") -> Chord | str:
    if not symbol:
        return format_result(False, "Missing chord symbol", example)
    try:
        return parse_chord_symbol(symbol)
    except ValidationError as e:
        return format_result(False, f"Invalid chord: {e}")


def resolve_beats(params: dict[str, str]) -> float | str:
    beats_str = params.get("beats")
    if beats_str is None:
        return DEFAULT_BEATS
    try:
        beats = float(beats_str)
    except ValueError:
        return format_result(False, f"Invalid beats: {beats_str!r}", "beats:2")
    if not math.isfinite(beats) or beats <= 0:
        return format_result(False, f"Beats must be a positive number, got {beats_str}")
    return beats


def resolve_key(key_str: str | None, default: int | None = None) -> int | str:
    """Resolve a key name to its tonic pitch class; *default* when omitted."""
    if not key_str:
        if default is not None:
            return default
        return format_result(False, "Missing key", "key G")
    try:
        return parse_note_name(key_str)
    except ValidationError as e:
        return format_result(False, f"Invalid key: {e}")


def resolve_chord_or_index(arg: str | None, progression: Progression, verb: str) -> Chord | str:
    """A chord symbol, or a 1-based index into the progression."""
    if not arg:
        return format_result(False, "Missing chord symbol or index", f"{verb} G7  or  {verb} 2")
    if arg.lstrip("-").isdigit():
        position = resolve_index(arg, progression, verb)
        if isinstance(position, str):
            return position
        return progression.chords[position].chord
    return resolve_chord(arg, f"{verb} G7")
