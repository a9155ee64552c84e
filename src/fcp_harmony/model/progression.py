"""Semantic model for a chord progression in a major key.

A progression is an ordered list of chords, each held for a number of
beats, plus the session context the theory queries read: key, tempo and
guitar tuning.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field

from fcp_harmony.errors import StateError, ValidationError
from fcp_harmony.lib.chord_library import note_name
from fcp_harmony.lib.guitar_library import TUNINGS, Tuning
from fcp_harmony.theory.chords import Chord, chord_name

DEFAULT_BEATS = 4.0
DEFAULT_TEMPO = 120.0
DEFAULT_TUNING = "standard"


def _id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class ProgressionChord:
    id: str
    chord: Chord
    beats: float = DEFAULT_BEATS


@dataclass
class Progression:
    id: str
    title: str
    key_root: int = 0  # major key tonic, pitch class
    tempo: float = DEFAULT_TEMPO
    tuning: str = DEFAULT_TUNING
    chords: list[ProgressionChord] = field(default_factory=list)
    file_path: str | None = None

    # --- Factory ---

    @classmethod
    def create(
        cls,
        title: str = "Untitled",
        key_root: int = 0,
        tempo: float = DEFAULT_TEMPO,
        tuning: str = DEFAULT_TUNING,
    ) -> Progression:
        if not math.isfinite(tempo) or tempo <= 0:
            raise ValidationError(f"Tempo must be a positive number, got {tempo}")
        if tuning not in TUNINGS:
            raise ValidationError(f"Unknown tuning: {tuning!r}")
        return cls(id=_id(), title=title, key_root=key_root % 12, tempo=tempo, tuning=tuning)

    # --- Properties ---

    @property
    def key_name(self) -> str:
        return note_name(self.key_root)

    @property
    def tuning_notes(self) -> Tuning:
        return TUNINGS[self.tuning]

    @property
    def total_beats(self) -> float:
        return sum(e.beats for e in self.chords)

    def chord_values(self) -> list[Chord]:
        return [e.chord for e in self.chords]

    # --- Chord CRUD (0-based positions) ---

    def add_chord(self, c: Chord, beats: float = DEFAULT_BEATS, position: int | None = None) -> ProgressionChord:
        """Insert *c* at *position* (append when None)."""
        if not math.isfinite(beats) or beats <= 0:
            raise ValidationError(f"Beats must be a positive number, got {beats}")
        if position is None:
            position = len(self.chords)
        if not 0 <= position <= len(self.chords):
            raise StateError(f"Position {position + 1} is outside 1-{len(self.chords) + 1}")
        entry = ProgressionChord(id=_id(), chord=c, beats=beats)
        self.chords.insert(position, entry)
        return entry

    def insert_entry(self, position: int, entry: ProgressionChord) -> None:
        """Put back a previously removed entry, keeping its id."""
        self.chords.insert(min(position, len(self.chords)), entry)

    def remove_chord(self, position: int) -> ProgressionChord:
        self._check_position(position)
        return self.chords.pop(position)

    def replace_chord(self, position: int, c: Chord) -> Chord:
        """Swap the chord at *position*, keeping its beats; return the old chord."""
        self._check_position(position)
        old = self.chords[position].chord
        self.chords[position].chord = c
        return old

    def set_chords(self, chords: list[Chord]) -> None:
        """Rewrite every chord in place; the list must match in length."""
        if len(chords) != len(self.chords):
            raise StateError(f"Expected {len(self.chords)} chords, got {len(chords)}")
        for entry, c in zip(self.chords, chords):
            entry.chord = c

    def get_chord_at(self, index: int) -> ProgressionChord | None:
        """Entry at 1-based *index*, or None when out of range."""
        if 1 <= index <= len(self.chords):
            return self.chords[index - 1]
        return None

    def _check_position(self, position: int) -> None:
        if not self.chords:
            raise StateError("Progression is empty")
        if not 0 <= position < len(self.chords):
            raise StateError(f"Index {position + 1} is outside 1-{len(self.chords)}")

    # --- Digest ---

    def get_digest(self) -> str:
        """Compact state fingerprint appended to every mutation response."""
        n = len(self.chords)
        beats = self.total_beats
        beats_str = f"{beats:g}"
        return f"[{n}ch key:{self.key_name} tempo:{self.tempo:g} beats:{beats_str} {self.tuning}]"

    def symbols(self) -> str:
        return " ".join(chord_name(e.chord) for e in self.chords) if self.chords else "(empty)"
