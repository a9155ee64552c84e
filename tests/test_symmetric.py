"""Tests for symmetric structures: diminished groups, augmented
reachability and tritone substitution pairs."""

from __future__ import annotations

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord, chord_key, chord_pitch_classes
from fcp_harmony.theory.symmetric import (
    Direction,
    get_augmented_reachability,
    get_diminished_7th_groups,
    get_diminished_resolutions,
    get_tritone_sub_pairs,
    get_tritone_substitute,
    get_unique_augmented_triads,
    identify_triad,
)

Q = ChordQuality


class TestDiminished:
    def test_three_groups_of_four(self):
        groups = get_diminished_7th_groups()
        assert len(groups) == 3
        assert all(len(g) == 4 for g in groups)

    def test_group_members_share_tones(self):
        for group in get_diminished_7th_groups():
            sets = {frozenset(chord_pitch_classes(c)) for c in group}
            assert len(sets) == 1

    def test_groups_partition_pitch_classes(self):
        seen: list[int] = []
        for group in get_diminished_7th_groups():
            seen.extend(chord_pitch_classes(group[0]))
        assert sorted(seen) == list(range(12))

    def test_resolutions(self):
        res = get_diminished_resolutions(Chord(0, Q.DIM7))
        assert res == [Chord(r, Q.MAJOR) for r in (1, 4, 7, 10)]


class TestAugmented:
    def test_four_unique_triads_cover_all_tones(self):
        triads = get_unique_augmented_triads()
        assert len(triads) == 4
        tones = sorted(pc for t in triads for pc in chord_pitch_classes(t))
        assert tones == list(range(12))

    def test_c_augmented_reaches_six(self):
        reach = get_augmented_reachability(0)
        assert reach.aug_chord == Chord(0, Q.AUGMENTED)
        assert {chord_key(r.triad) for r in reach.reachable_triads} == {
            chord_key(Chord(4, Q.MAJOR)),
            chord_key(Chord(1, Q.MINOR)),
            chord_key(Chord(8, Q.MAJOR)),
            chord_key(Chord(5, Q.MINOR)),
            chord_key(Chord(0, Q.MAJOR)),
            chord_key(Chord(9, Q.MINOR)),
        }

    def test_every_root_reaches_six_both_directions(self):
        for root in range(12):
            triads = get_augmented_reachability(root).reachable_triads
            assert len(triads) == 6
            assert sum(1 for t in triads if t.direction == Direction.UP) == 3
            assert sum(1 for t in triads if t.direction == Direction.DOWN) == 3

    def test_description(self):
        first = get_augmented_reachability(0).reachable_triads[0]
        assert first.moved_note == 0
        assert first.direction == Direction.DOWN
        assert first.description == "C ↓ B"

    def test_identify_triad(self):
        assert identify_triad([4, 7, 0]) == Chord(0, Q.MAJOR)
        assert identify_triad([1, 4, 8]) == Chord(1, Q.MINOR)
        assert identify_triad([0, 4, 8]) is None


class TestTritone:
    def test_six_pairs(self):
        pairs = get_tritone_sub_pairs()
        assert len(pairs) == 6
        for p in pairs:
            assert (p.tritone_sub_dom7.root - p.dom7.root) % 12 == 6

    def test_shared_tritone_in_both_chords(self):
        for p in get_tritone_sub_pairs():
            assert set(p.shared_tritone) <= set(chord_pitch_classes(p.dom7))
            assert set(p.shared_tritone) <= set(chord_pitch_classes(p.tritone_sub_dom7))

    def test_common_resolution(self):
        pair = get_tritone_sub_pairs()[1]  # Db7 / G7
        assert pair.common_resolution == Chord(6, Q.MAJOR)
        assert get_tritone_sub_pairs()[0].common_resolution == Chord(5, Q.MAJOR)

    def test_substitute(self):
        assert get_tritone_substitute(Chord(7, Q.DOM7)) == Chord(1, Q.DOM7)
        assert get_tritone_substitute(Chord(1, Q.DOM7)) == Chord(7, Q.DOM7)
