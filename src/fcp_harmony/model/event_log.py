"""Progression events for undo/redo.

Events form a tagged union via a ``type`` string discriminant on each
dataclass. Each event carries both the old and new state so the server can
reverse and replay it without consulting anything else. The log itself is
``fcp_core.EventLog``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fcp_harmony.model.progression import ProgressionChord
from fcp_harmony.theory.chords import Chord


# ---------------------------------------------------------------------------
# Event types (tagged union via ``type`` discriminant)
# ---------------------------------------------------------------------------

@dataclass
class ChordAdded:
    type: str = field(default="chord_added", init=False)
    position: int = 0
    entry: ProgressionChord | None = None


@dataclass
class ChordRemoved:
    type: str = field(default="chord_removed", init=False)
    position: int = 0
    entry: ProgressionChord | None = None


@dataclass
class ChordsInserted:
    """A run of chords added together (template, library)."""
    type: str = field(default="chords_inserted", init=False)
    position: int = 0
    entries: list[ProgressionChord] = field(default_factory=list)


@dataclass
class ChordReplaced:
    type: str = field(default="chord_replaced", init=False)
    position: int = 0
    old_chord: Chord | None = None
    new_chord: Chord | None = None


@dataclass
class ProgressionRewritten:
    """Every chord changed at once (transpose, negate)."""
    type: str = field(default="progression_rewritten", init=False)
    old_chords: list[Chord] = field(default_factory=list)
    new_chords: list[Chord] = field(default_factory=list)
    old_key: int = 0
    new_key: int = 0


@dataclass
class KeyChanged:
    type: str = field(default="key_changed", init=False)
    old_key: int = 0
    new_key: int = 0


@dataclass
class TempoChanged:
    type: str = field(default="tempo_changed", init=False)
    old_bpm: float = 120.0
    new_bpm: float = 120.0


@dataclass
class TitleChanged:
    type: str = field(default="title_changed", init=False)
    old_title: str = ""
    new_title: str = ""


@dataclass
class TuningChanged:
    type: str = field(default="tuning_changed", init=False)
    old_tuning: str = "standard"
    new_tuning: str = "standard"


# Convenience alias
Event = (
    ChordAdded
    | ChordRemoved
    | ChordsInserted
    | ChordReplaced
    | ProgressionRewritten
    | KeyChanged
    | TempoChanged
    | TitleChanged
    | TuningChanged
)
