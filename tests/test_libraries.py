"""Tests for reference data libraries."""

from __future__ import annotations

import pytest

from fcp_harmony.lib.chord_library import (
    CHORD_TEMPLATES,
    CIRCLE_OF_FIFTHS_ORDER,
    SCALE_TEMPLATES,
    ChordQuality,
    get_intervals,
    note_name,
)
from fcp_harmony.lib.guitar_library import (
    MUTED,
    SHAPE_TEMPLATES,
    STANDARD_TUNING,
    TUNINGS,
)
from fcp_harmony.lib.mode_library import MODE_TEMPLATES, ModeFamily, ModeType


# ---------------------------------------------------------------------------
# Note names
# ---------------------------------------------------------------------------


class TestNoteNames:
    def test_flat_keys_use_flats(self):
        assert note_name(1) == "Db"
        assert note_name(3) == "Eb"
        assert note_name(6) == "Gb"
        assert note_name(10) == "Bb"

    def test_other_keys_use_sharps(self):
        assert note_name(0) == "C"
        assert note_name(7) == "G"
        assert note_name(11) == "B"

    def test_explicit_preference(self):
        assert note_name(1, prefer_flat=False) == "C#"
        assert note_name(8, prefer_flat=True) == "Ab"

    def test_wraps_mod_12(self):
        assert note_name(14) == "D"
        assert note_name(-1) == "B"


# ---------------------------------------------------------------------------
# Chord templates
# ---------------------------------------------------------------------------


class TestChordTemplates:
    def test_every_quality_has_a_template(self):
        assert len(ChordQuality) >= 30
        for q in ChordQuality:
            assert q in CHORD_TEMPLATES, f"{q} missing"

    @pytest.mark.parametrize("quality", list(ChordQuality))
    def test_templates_ascend_from_zero(self, quality):
        intervals = get_intervals(quality)
        assert intervals[0] == 0
        assert list(intervals) == sorted(set(intervals))
        assert intervals[-1] <= 21

    def test_intervals_distinct_mod_12(self):
        """Extended intervals never fold onto a chord tone already present."""
        for q, t in CHORD_TEMPLATES.items():
            pcs = [i % 12 for i in t.intervals]
            assert len(pcs) == len(set(pcs)), q

    def test_symbols_unique(self):
        symbols = [t.symbol for t in CHORD_TEMPLATES.values()]
        assert len(symbols) == len(set(symbols))

    def test_core_triads(self):
        assert get_intervals(ChordQuality.MAJOR) == (0, 4, 7)
        assert get_intervals(ChordQuality.MINOR) == (0, 3, 7)
        assert get_intervals(ChordQuality.DIMINISHED) == (0, 3, 6)
        assert get_intervals(ChordQuality.AUGMENTED) == (0, 4, 8)


# ---------------------------------------------------------------------------
# Scales, modes, circle of fifths
# ---------------------------------------------------------------------------


class TestScaleAndModeTables:
    def test_circle_of_fifths_covers_all_keys(self):
        assert sorted(CIRCLE_OF_FIFTHS_ORDER) == list(range(12))
        for a, b in zip(CIRCLE_OF_FIFTHS_ORDER, CIRCLE_OF_FIFTHS_ORDER[1:]):
            assert (b - a) % 12 == 7

    def test_scales_have_seven_tones(self):
        for intervals in SCALE_TEMPLATES.values():
            assert len(intervals) == 7
            assert intervals[0] == 0

    def test_mode_count(self):
        assert len(ModeType) == 31
        assert set(MODE_TEMPLATES) == set(ModeType)

    def test_modal_degrees(self):
        for mode, t in MODE_TEMPLATES.items():
            if t.parent in (ModeFamily.SYMMETRIC, ModeFamily.OTHER):
                assert t.degree == 0, mode
            else:
                assert 1 <= t.degree <= 7, mode
                assert len(t.intervals) == 7, mode

    def test_characteristic_tones_are_in_the_mode(self):
        for mode, t in MODE_TEMPLATES.items():
            for tone in t.characteristic_tones:
                assert tone in t.intervals, mode


# ---------------------------------------------------------------------------
# Guitar
# ---------------------------------------------------------------------------


class TestGuitarTables:
    def test_standard_tuning(self):
        assert STANDARD_TUNING == (40, 45, 50, 55, 59, 64)
        assert TUNINGS["standard"] == STANDARD_TUNING

    def test_all_tunings_six_strings(self):
        for name, tuning in TUNINGS.items():
            assert len(tuning) == 6, name

    def test_templates_root_on_root_string(self):
        for t in SHAPE_TEMPLATES:
            assert len(t.frets) == 6
            assert t.frets[t.root_string] == 0, t.label
            assert all(f == MUTED or f >= 0 for f in t.frets)

    def test_two_forms_per_quality(self):
        by_quality: dict[ChordQuality, int] = {}
        for t in SHAPE_TEMPLATES:
            by_quality[t.quality] = by_quality.get(t.quality, 0) + 1
        assert all(n == 2 for n in by_quality.values())
        assert len(by_quality) == 11
