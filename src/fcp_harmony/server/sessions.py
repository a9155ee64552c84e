"""Undo/redo support: apply a progression event backwards or forwards."""

from __future__ import annotations

import copy

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
from fcp_harmony.model.progression import Progression


def reverse_event(ev: object, prog: Progression) -> None:
    """Reverse a single event on the model."""
    if isinstance(ev, ChordAdded):
        if 0 <= ev.position < len(prog.chords):
            prog.chords.pop(ev.position)
    elif isinstance(ev, ChordRemoved):
        if ev.entry is not None:
            prog.insert_entry(ev.position, copy.copy(ev.entry))
    elif isinstance(ev, ChordsInserted):
        del prog.chords[ev.position:ev.position + len(ev.entries)]
    elif isinstance(ev, ChordReplaced):
        if ev.old_chord is not None and 0 <= ev.position < len(prog.chords):
            prog.chords[ev.position].chord = ev.old_chord
    elif isinstance(ev, ProgressionRewritten):
        prog.set_chords(list(ev.old_chords))
        prog.key_root = ev.old_key
    elif isinstance(ev, KeyChanged):
        prog.key_root = ev.old_key
    elif isinstance(ev, TempoChanged):
        prog.tempo = ev.old_bpm
    elif isinstance(ev, TitleChanged):
        prog.title = ev.old_title
    elif isinstance(ev, TuningChanged):
        prog.tuning = ev.old_tuning


def replay_event(ev: object, prog: Progression) -> None:
    """Replay a single event forward on the model."""
    if isinstance(ev, ChordAdded):
        if ev.entry is not None:
            prog.insert_entry(ev.position, copy.copy(ev.entry))
    elif isinstance(ev, ChordRemoved):
        if 0 <= ev.position < len(prog.chords):
            prog.chords.pop(ev.position)
    elif isinstance(ev, ChordsInserted):
        for offset, entry in enumerate(ev.entries):
            prog.insert_entry(ev.position + offset, copy.copy(entry))
    elif isinstance(ev, ChordReplaced):
        if ev.new_chord is not None and 0 <= ev.position < len(prog.chords):
            prog.chords[ev.position].chord = ev.new_chord
    elif isinstance(ev, ProgressionRewritten):
        prog.set_chords(list(ev.new_chords))
        prog.key_root = ev.new_key
    elif isinstance(ev, KeyChanged):
        prog.key_root = ev.new_key
    elif isinstance(ev, TempoChanged):
        prog.tempo = ev.new_bpm
    elif isinstance(ev, TitleChanged):
        prog.title = ev.new_title
    elif isinstance(ev, TuningChanged):
        prog.tuning = ev.new_tuning
