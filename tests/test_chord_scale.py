"""Tests for chord-scale theory."""

from __future__ import annotations

import pytest

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.lib.mode_library import ModeType
from fcp_harmony.theory.chord_scale import (
    DEFAULT_MAPPING,
    STATIC_MAPPINGS,
    compute_avoid_notes,
    get_scales_for_chord,
    get_scales_for_chord_in_context,
    get_tension_labels,
)
from fcp_harmony.theory.chords import Chord, chord_pitch_classes

Q = ChordQuality
T = ModeType


class TestMappings:
    def test_every_quality_mapped(self):
        for q in ChordQuality:
            assert q in STATIC_MAPPINGS, q

    def test_default_mapping_is_ionian(self):
        assert DEFAULT_MAPPING.primary_scale == T.IONIAN
        assert DEFAULT_MAPPING.avoid_notes == ()

    def test_static(self):
        assert get_scales_for_chord(Q.DOM7).primary_scale == T.MIXOLYDIAN
        assert get_scales_for_chord(Q.ALT7).primary_scale == T.ALTERED
        assert get_scales_for_chord(Q.HALF_DIM7).primary_scale == T.LOCRIAN
        assert get_scales_for_chord(Q.MIN7).primary_scale == T.DORIAN

    @pytest.mark.parametrize(
        "degree, expected",
        [(1, T.DORIAN), (2, T.PHRYGIAN), (5, T.AEOLIAN)],
    )
    def test_min7_by_degree(self, degree, expected):
        assert get_scales_for_chord_in_context(Q.MIN7, 0, degree).primary_scale == expected

    def test_subdominant_major_is_lydian(self):
        assert get_scales_for_chord_in_context(Q.MAJ7, 0, 3).primary_scale == T.LYDIAN
        assert get_scales_for_chord_in_context(Q.MAJ7, 0, 0).primary_scale == T.IONIAN

    def test_non_diatonic_falls_back_to_static(self):
        assert get_scales_for_chord_in_context(Q.MIN7, 0, -1) == get_scales_for_chord(Q.MIN7)
        assert get_scales_for_chord_in_context(Q.DOM7FLAT9, 0, 4) == get_scales_for_chord(Q.DOM7FLAT9)


class TestAvoidNotes:
    def test_maj7_ionian_avoids_fourth(self):
        assert compute_avoid_notes(0, Q.MAJ7, T.IONIAN) == [5]

    def test_dorian_has_none(self):
        assert compute_avoid_notes(2, Q.MIN7, T.DORIAN) == []

    def test_phrygian_avoids_b9_and_b13(self):
        assert compute_avoid_notes(4, Q.MIN7, T.PHRYGIAN) == [5, 0]

    def test_mixolydian_avoids_fourth(self):
        assert compute_avoid_notes(7, Q.DOM7, T.MIXOLYDIAN) == [0]

    def test_avoid_notes_are_never_chord_tones(self):
        for q, mapping in STATIC_MAPPINGS.items():
            tones = set(chord_pitch_classes(Chord(3, q)))
            for pc in compute_avoid_notes(3, q, mapping.primary_scale):
                assert pc not in tones


class TestTensions:
    def test_ionian(self):
        assert get_tension_labels(0, T.IONIAN) == {2: "9", 5: "11", 9: "13"}

    def test_altered(self):
        assert get_tension_labels(7, T.ALTERED) == {8: "♭9", 10: "♯9", 1: "♯11", 3: "♭13"}

    def test_lydian_sharp_eleven(self):
        labels = get_tension_labels(5, T.LYDIAN)
        assert labels[11] == "♯11"
