"""Tests for the progression model and its event types."""

from __future__ import annotations

import pytest

from fcp_harmony.errors import StateError, ValidationError
from fcp_harmony.lib.chord_library import ChordQuality
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
from fcp_harmony.model.progression import Progression, ProgressionChord
from fcp_harmony.theory.chords import Chord

Q = ChordQuality


def _c_am_f_g7() -> Progression:
    prog = Progression.create(title="Pop")
    for c in (Chord(0, Q.MAJOR), Chord(9, Q.MINOR), Chord(5, Q.MAJOR), Chord(7, Q.DOM7)):
        prog.add_chord(c)
    return prog


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

class TestCreate:
    def test_defaults(self):
        prog = Progression.create()
        assert prog.title == "Untitled"
        assert prog.key_root == 0
        assert prog.tempo == 120.0
        assert prog.tuning == "standard"
        assert prog.chords == []
        assert prog.file_path is None

    def test_ids_unique(self):
        assert Progression.create().id != Progression.create().id

    def test_key_wraps(self):
        assert Progression.create(key_root=14).key_root == 2

    def test_invalid_tempo(self):
        with pytest.raises(ValidationError):
            Progression.create(tempo=0)

    @pytest.mark.parametrize("tempo", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_tempo(self, tempo):
        with pytest.raises(ValidationError):
            Progression.create(tempo=tempo)

    def test_invalid_tuning(self):
        with pytest.raises(ValidationError):
            Progression.create(tuning="nope")

    def test_key_name_uses_flats(self):
        assert Progression.create(key_root=10).key_name == "Bb"
        assert Progression.create(key_root=7).key_name == "G"

    def test_tuning_notes(self):
        assert Progression.create(tuning="drop-d").tuning_notes[0] == 38


# ---------------------------------------------------------------------------
# Chord CRUD
# ---------------------------------------------------------------------------

class TestChords:
    def test_add_appends(self):
        prog = _c_am_f_g7()
        assert [e.chord.root for e in prog.chords] == [0, 9, 5, 7]
        assert prog.total_beats == 16

    def test_add_at_position(self):
        prog = _c_am_f_g7()
        entry = prog.add_chord(Chord(2, Q.MIN7), beats=2, position=1)
        assert prog.chords[1] is entry
        assert entry.beats == 2
        assert len(prog.chords) == 5

    def test_add_invalid_beats(self):
        with pytest.raises(ValidationError):
            Progression.create().add_chord(Chord(0, Q.MAJOR), beats=0)

    @pytest.mark.parametrize("beats", [float("nan"), float("inf")])
    def test_add_non_finite_beats(self, beats):
        prog = Progression.create()
        with pytest.raises(ValidationError):
            prog.add_chord(Chord(0, Q.MAJOR), beats=beats)
        assert prog.chords == []

    def test_add_invalid_position(self):
        prog = _c_am_f_g7()
        with pytest.raises(StateError):
            prog.add_chord(Chord(0, Q.MAJOR), position=6)

    def test_remove(self):
        prog = _c_am_f_g7()
        entry = prog.remove_chord(1)
        assert entry.chord == Chord(9, Q.MINOR)
        assert len(prog.chords) == 3

    def test_remove_empty(self):
        with pytest.raises(StateError):
            Progression.create().remove_chord(0)

    def test_replace_keeps_beats(self):
        prog = _c_am_f_g7()
        prog.chords[3].beats = 2
        old = prog.replace_chord(3, Chord(1, Q.DOM7))
        assert old == Chord(7, Q.DOM7)
        assert prog.chords[3].chord == Chord(1, Q.DOM7)
        assert prog.chords[3].beats == 2

    def test_replace_out_of_range(self):
        with pytest.raises(StateError):
            _c_am_f_g7().replace_chord(4, Chord(0, Q.MAJOR))

    def test_set_chords(self):
        prog = _c_am_f_g7()
        ids = [e.id for e in prog.chords]
        new = [Chord(2, Q.MAJOR)] * 4
        prog.set_chords(new)
        assert prog.chord_values() == new
        assert [e.id for e in prog.chords] == ids

    def test_set_chords_length_mismatch(self):
        with pytest.raises(StateError):
            _c_am_f_g7().set_chords([Chord(0, Q.MAJOR)])

    def test_get_chord_at_is_one_based(self):
        prog = _c_am_f_g7()
        entry = prog.get_chord_at(1)
        assert entry is not None
        assert entry.chord == Chord(0, Q.MAJOR)
        assert prog.get_chord_at(0) is None
        assert prog.get_chord_at(5) is None

    def test_insert_entry_clamps(self):
        prog = _c_am_f_g7()
        entry = ProgressionChord(id="x1", chord=Chord(4, Q.MINOR), beats=4)
        prog.insert_entry(99, entry)
        assert prog.chords[-1] is entry


# ---------------------------------------------------------------------------
# Digest
# ---------------------------------------------------------------------------

class TestDigest:
    def test_empty(self):
        assert Progression.create().get_digest() == "[0ch key:C tempo:120 beats:0 standard]"

    def test_with_chords(self):
        prog = _c_am_f_g7()
        prog.chords[0].beats = 2.5
        assert prog.get_digest() == "[4ch key:C tempo:120 beats:14.5 standard]"

    def test_symbols(self):
        assert _c_am_f_g7().symbols() == "C Am F G7"
        assert Progression.create().symbols() == "(empty)"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class TestEvents:
    def test_type_discriminants(self):
        assert ChordAdded().type == "chord_added"
        assert ChordRemoved().type == "chord_removed"
        assert ChordReplaced().type == "chord_replaced"
        assert ProgressionRewritten().type == "progression_rewritten"
        assert KeyChanged().type == "key_changed"
        assert TempoChanged().type == "tempo_changed"
        assert TitleChanged().type == "title_changed"
        assert TuningChanged().type == "tuning_changed"
        assert ChordsInserted().type == "chords_inserted"

    def test_type_not_an_init_arg(self):
        with pytest.raises(TypeError):
            KeyChanged(type="other")  # type: ignore[call-arg]

    def test_rewritten_lists_independent(self):
        a = ProgressionRewritten()
        b = ProgressionRewritten()
        a.old_chords.append(Chord(0, Q.MAJOR))
        assert b.old_chords == []
