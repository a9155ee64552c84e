"""Tests for modulation analysis: common chords, pivots, routes, key distance."""

from __future__ import annotations

import pytest

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord, chord_name
from fcp_harmony.theory.harmony import is_diatonic
from fcp_harmony.theory.modulation import (
    PIVOT_DISTANCE,
    PivotType,
    find_augmented_pivots,
    find_common_chords,
    find_diminished_pivots,
    get_modulation_routes,
    key_distance,
)

Q = ChordQuality


# ---------------------------------------------------------------------------
# Common chords
# ---------------------------------------------------------------------------


class TestCommonChords:
    def test_same_key_shares_all_seven(self):
        assert len(find_common_chords(0, 0)) == 7

    def test_c_to_g(self):
        common = find_common_chords(0, 7)
        assert [chord_name(c.chord) for c in common] == ["C", "Em", "G", "Am"]

    def test_description(self):
        am = [c for c in find_common_chords(0, 7) if c.chord == Chord(9, Q.MINOR)][0]
        assert am.description == "Am: vi in C → ii in G"
        assert am.source_info.roman == "vi"
        assert am.target_info.roman == "ii"

    def test_tritone_keys_share_nothing(self):
        assert find_common_chords(0, 6) == []

    def test_symmetric_count(self):
        for a in range(12):
            for b in range(12):
                assert len(find_common_chords(a, b)) == len(find_common_chords(b, a))


# ---------------------------------------------------------------------------
# Symmetric pivots
# ---------------------------------------------------------------------------


class TestPivots:
    def test_diminished_pivots_land_on_primary_triads(self):
        for key in range(12):
            pivots = find_diminished_pivots(key)
            assert len(pivots) == 3
            assert {p.target_degree.roman for p in pivots} == {"I", "IV", "V"}

    def test_diminished_pivots_into_c(self):
        resolved = {chord_name(p.resolves_to) for p in find_diminished_pivots(0)}
        assert resolved == {"C", "F", "G"}
        for p in find_diminished_pivots(0):
            assert p.dim7_chord.quality == Q.DIM7

    def test_augmented_pivots_into_c(self):
        pivots = find_augmented_pivots(0)
        assert {chord_name(p.reaches_chord) for p in pivots} == {"C", "Dm", "Em", "F", "G", "Am"}
        for p in pivots:
            assert p.aug_chord.quality == Q.AUGMENTED
            assert is_diatonic(p.reaches_chord, 0)

    def test_augmented_pivot_names_moved_note(self):
        pivot = find_augmented_pivots(0)[0]
        assert "↓" in pivot.moved_note or "↑" in pivot.moved_note


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


class TestRoutes:
    def test_same_key_has_no_routes(self):
        for k in range(12):
            assert get_modulation_routes(k, k) == []
        assert get_modulation_routes(0, 12) == []

    def test_c_to_g(self):
        routes = get_modulation_routes(0, 7)
        assert len(routes) == 4 + 3 + 6
        assert routes[0].type == PivotType.COMMON
        assert routes[-1].type == PivotType.AUGMENTED

    def test_sorted_by_distance(self):
        for target in range(1, 12):
            distances = [r.distance for r in get_modulation_routes(0, target)]
            assert distances == sorted(distances)

    def test_only_common_routes_have_source_roman(self):
        for r in get_modulation_routes(2, 9):
            if r.type == PivotType.COMMON:
                assert r.source_roman is not None
                assert r.pivot_chord == r.target_chord
            else:
                assert r.source_roman is None

    def test_distant_key_still_reachable(self):
        routes = get_modulation_routes(0, 6)
        assert routes
        assert all(r.type != PivotType.COMMON for r in routes)

    def test_pivot_distances(self):
        assert PIVOT_DISTANCE[PivotType.COMMON] < PIVOT_DISTANCE[PivotType.DIMINISHED]
        assert PIVOT_DISTANCE[PivotType.DIMINISHED] < PIVOT_DISTANCE[PivotType.AUGMENTED]


# ---------------------------------------------------------------------------
# Key distance
# ---------------------------------------------------------------------------


class TestKeyDistance:
    @pytest.mark.parametrize(
        "a, b, expected",
        [(0, 0, 0), (0, 7, 1), (0, 5, 1), (0, 2, 2), (0, 9, 3), (0, 4, 4), (0, 6, 6), (7, 2, 1)],
    )
    def test_known_distances(self, a, b, expected):
        assert key_distance(a, b) == expected

    def test_symmetric_and_bounded(self):
        for a in range(12):
            for b in range(12):
                d = key_distance(a, b)
                assert d == key_distance(b, a)
                assert 0 <= d <= 6
