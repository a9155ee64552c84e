"""Tests for the server layer: formatting, resolvers, queries and the reference card."""

from __future__ import annotations

import pytest

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.model.progression import Progression
from fcp_harmony.server.formatter import describe_in_key, format_chords, format_notes, format_result
from fcp_harmony.server.queries import dispatch_query
from fcp_harmony.server.reference_card import REFERENCE_CARD
from fcp_harmony.server.resolvers import (
    resolve_beats,
    resolve_chord,
    resolve_chord_or_index,
    resolve_index,
    resolve_key,
)
from fcp_harmony.server.verb_registry import VERBS
from fcp_harmony.theory.chords import Chord

Q = ChordQuality


# ---------------------------------------------------------------------------
# Formatter
# ---------------------------------------------------------------------------

class TestFormatResult:
    def test_success(self):
        assert format_result(True, "Chord G7") == "+ Chord G7"

    def test_error_with_suggestion(self):
        assert format_result(False, "Bad", "chord C") == "! Bad\n  try: chord C"

    def test_error_without_suggestion(self):
        assert format_result(False, "Bad") == "! Bad"

    def test_notes_and_chords(self):
        assert format_notes([0, 3, 6]) == "C Eb Gb"
        assert format_chords([Chord(0, Q.MAJOR), Chord(7, Q.DOM7)]) == "C G7"


class TestDescribeInKey:
    @pytest.mark.parametrize(
        "c, expected",
        [
            (Chord(0, Q.MAJOR), "I tonic"),
            (Chord(9, Q.MINOR), "vi tonic"),
            (Chord(7, Q.DOM7), "V7 dominant"),
            (Chord(2, Q.DOM7), "V7/V secondary dominant"),
            (Chord(10, Q.MAJOR), "♭VII borrowed from Aeolian (Natural Minor)"),
            (Chord(6, Q.MAJ7), "chromatic"),
        ],
    )
    def test_roles_in_c(self, c, expected):
        assert describe_in_key(c, 0) == expected


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------

class TestResolvers:
    def test_index(self, progression_with_chords: Progression):
        assert resolve_index("1", progression_with_chords, "remove") == 0
        assert resolve_index("4", progression_with_chords, "remove") == 3

    @pytest.mark.parametrize("text", [None, "", "x", "0", "5"])
    def test_index_errors(self, progression_with_chords: Progression, text):
        result = resolve_index(text, progression_with_chords, "remove")
        assert isinstance(result, str)
        assert result.startswith("!")

    def test_index_on_empty(self, progression: Progression):
        result = resolve_index("1", progression, "remove")
        assert isinstance(result, str)
        assert "empty" in result

    def test_chord(self):
        assert resolve_chord("Bb7") == Chord(10, Q.DOM7)
        assert isinstance(resolve_chord("Bzz"), str)
        assert isinstance(resolve_chord(None), str)

    def test_beats(self):
        assert resolve_beats({}) == 4.0
        assert resolve_beats({"beats": "1.5"}) == 1.5
        assert isinstance(resolve_beats({"beats": "-1"}), str)

    @pytest.mark.parametrize("text", ["nan", "inf", "-inf", "NaN"])
    def test_beats_non_finite(self, text):
        result = resolve_beats({"beats": text})
        assert isinstance(result, str)
        assert result.startswith("!")

    def test_key_default(self):
        assert resolve_key(None, 5) == 5
        assert resolve_key("A") == 9
        assert isinstance(resolve_key(None), str)

    def test_chord_or_index(self, progression_with_chords: Progression):
        assert resolve_chord_or_index("2", progression_with_chords, "next") == Chord(9, Q.MINOR)
        assert resolve_chord_or_index("Dm7", progression_with_chords, "next") == Chord(2, Q.MIN7)
        assert isinstance(resolve_chord_or_index("9", progression_with_chords, "next"), str)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class TestKeyQueries:
    def test_diatonic(self, progression: Progression):
        result = dispatch_query("diatonic", progression)
        assert "Dm7" in result
        assert "vii°" in result

    def test_diatonic_other_key(self, progression: Progression):
        assert "Bm7" in dispatch_query("diatonic D", progression)

    def test_borrowed(self, progression: Progression):
        result = dispatch_query("borrowed", progression)
        assert "Bb" in result
        assert "Aeolian" in result

    def test_secondary(self, progression: Progression):
        result = dispatch_query("secondary", progression)
        assert "V7/V" in result
        assert "D7" in result

    def test_modulate(self, progression: Progression):
        result = dispatch_query("modulate G", progression)
        assert result.startswith("Modulation C -> G")
        assert "[common]" in result

    def test_modulate_same_key(self, progression: Progression):
        assert dispatch_query("modulate C", progression) == "Already in C major."

    def test_modulate_missing(self, progression: Progression):
        assert dispatch_query("modulate", progression).startswith("!")

    def test_distance(self, progression: Progression):
        assert "6 step" in dispatch_query("distance F#", progression)
        assert "1 step" in dispatch_query("distance G", progression)


class TestChordQueries:
    def test_next_defaults_to_last_chord(self, progression_with_chords: Progression):
        result = dispatch_query("next", progression_with_chords)
        assert result.startswith("Next from G7 in C major:")

    def test_next_on_empty_uses_tonic(self, progression: Progression):
        assert dispatch_query("next", progression).startswith("Next from C in C major:")

    def test_negative_single(self, progression: Progression):
        assert dispatch_query("negative G7", progression).startswith("G7 -> Dø7")

    def test_negative_progression(self, progression_with_chords: Progression):
        result = dispatch_query("negative", progression_with_chords)
        assert "Cm Eb Gm Dø7" in result

    def test_negative_empty(self, progression: Progression):
        assert dispatch_query("negative", progression).startswith("!")

    def test_scales_dorian(self, progression: Progression):
        assert dispatch_query("scales Dm7", progression).startswith("Dm7: D Dorian")

    def test_scales_phrygian(self, progression: Progression):
        result = dispatch_query("scales Em7", progression)
        assert result.startswith("Em7: E Phrygian")
        assert "avoid: F C" in result

    def test_scales_by_index(self, progression_with_chords: Progression):
        assert dispatch_query("scales 4", progression_with_chords).startswith("G7: G Mixolydian")

    def test_shapes(self, progression: Progression):
        result = dispatch_query("shapes C", progression)
        assert "E form" in result
        assert "A form" in result
        assert "x 3 5 5 5 3" in result

    def test_identify(self, progression: Progression):
        assert dispatch_query("identify C E G Bb", progression) == "C7 (C Dominant 7th)"

    def test_identify_bad_note(self, progression: Progression):
        assert dispatch_query("identify C H", progression).startswith("!")

    def test_ust(self, progression: Progression):
        result = dispatch_query("ust G", progression)
        assert "A / G7" in result
        assert result.count("UST") == 7

    def test_symmetric(self, progression: Progression):
        assert "Db7 / G7" in dispatch_query("symmetric tritone", progression)
        assert dispatch_query("symmetric dim", progression).count("°7") == 12
        assert "Augmented triads:" in dispatch_query("symmetric aug", progression)
        assert dispatch_query("symmetric foo", progression).startswith("!")

    def test_relate_dominant(self, progression: Progression):
        assert "G7 is dominant of C" in dispatch_query("relate G7 C", progression)

    def test_relate_relative(self, progression: Progression):
        assert "neo-Riemannian: R" in dispatch_query("relate C Am", progression)

    def test_relate_needs_two(self, progression: Progression):
        assert dispatch_query("relate C", progression).startswith("!")

    def test_altered(self, progression: Progression):
        result = dispatch_query("altered G7", progression)
        assert result.startswith("G7:")
        assert "resolutions:" in result
        assert "variants:" in result

    def test_altered_non_dominant(self, progression: Progression):
        assert dispatch_query("altered Cmaj7", progression).startswith("!")

    def test_unknown(self, progression: Progression):
        assert dispatch_query("bogus", progression).startswith("! Unknown query")


class TestProgressionBuildingQueries:
    def test_proximity(self, progression_with_chords: Progression):
        result = dispatch_query("proximity C", progression_with_chords)
        assert result.startswith("Proximity to C:")
        assert "  2 shared: Cm Em Am" in result
        assert dispatch_query("proximity 2", progression_with_chords).startswith("Proximity to Am:")
        assert dispatch_query("proximity", progression_with_chords).startswith("!")

    def test_iivi(self, progression: Progression):
        result = dispatch_query("iivi", progression)
        assert result.startswith("ii-V-Is in C major:")
        assert "Dm7 G7 C" in result
        assert "ii-V-I of IV" in result
        assert "Gm7 C7 F" in result

    def test_iivi_other_key(self, progression: Progression):
        assert "Am7 D7 G" in dispatch_query("iivi G", progression)

    def test_chain(self, progression: Progression):
        assert dispatch_query("chain G", progression) == "Dominant chain from G7: G7 C7 F7 Bb7"
        assert dispatch_query("chain E 2", progression).endswith("E7 A7")

    @pytest.mark.parametrize("q", ["chain", "chain G x", "chain G 0", "chain G 13", "chain H"])
    def test_chain_errors(self, progression: Progression, q):
        assert dispatch_query(q, progression).startswith("!")

    def test_coltrane_for_key(self, progression: Progression):
        result = dispatch_query("coltrane B", progression)
        assert result.startswith("Coltrane centers from B: B Eb G")
        assert "cycle: Bmaj7 Bb7 Ebmaj7 D7 Gmaj7 Gb7 Bmaj7" in result
        assert "progression:" not in result

    def test_coltrane_analyzes_progression(self, progression_with_chords: Progression):
        assert "no major-third cycle" in dispatch_query("coltrane", progression_with_chords)

    def test_bridges_between_two(self, progression: Progression):
        result = dispatch_query("bridges Dm7 Cmaj7", progression)
        assert result.startswith("Bridges Dm7 -> Cmaj7:")
        assert "Db7 (tritone sub of G7, resolves to Cmaj7) [chromatic bass]" in result

    def test_bridges_for_progression(self, progression_with_chords: Progression):
        result = dispatch_query("bridges", progression_with_chords)
        assert "1-2 C -> Am: Bb7 (tritone-sub)" in result
        assert "3-4 F -> G7: Ab7 (tritone-sub)" in result

    def test_bridges_report_chromatic_bass(self, progression: Progression):
        for root in (0, 1, 2):
            progression.add_chord(Chord(root, Q.MAJOR))
        assert "chromatic bass ascending 1-3" in dispatch_query("bridges", progression)

    def test_bridges_errors(self, progression: Progression):
        assert dispatch_query("bridges C", progression).startswith("!")
        assert dispatch_query("bridges", progression).startswith("!")

    def test_voicing(self, progression_with_chords: Progression):
        result = dispatch_query("voicing", progression_with_chords)
        assert result.startswith("Voice leading: 11 semitones, avg 3.7 (smooth)")
        assert "60 64 67" in result
        assert "59 62 65 67  moved 8" in result

    def test_voicing_empty(self, progression: Progression):
        assert dispatch_query("voicing", progression).startswith("!")

    def test_templates(self, progression: Progression):
        result = dispatch_query("templates", progression)
        assert result.startswith("Templates in C major:")
        assert "Dm7 Db7 Cmaj7" in result
        assert "G C D G" in dispatch_query("templates G", progression)

    def test_library(self, progression: Progression):
        assert dispatch_query("library", progression).startswith("Library (16):")
        jazz = dispatch_query("library jazz", progression)
        assert jazz.startswith("Library (6):")
        assert "Giant Steps" in jazz
        assert "12-Bar Blues" not in jazz

    def test_library_unknown_category(self, progression: Progression):
        assert dispatch_query("library polka", progression).startswith("! Unknown category")


# ---------------------------------------------------------------------------
# Reference card
# ---------------------------------------------------------------------------

class TestReferenceCard:
    def test_every_verb_listed(self):
        for spec in VERBS:
            assert spec.syntax in REFERENCE_CARD

    def test_sections(self):
        for heading in ("## Mutation Operations", "## Chord Symbols", "## Queries", "## Session Params"):
            assert heading in REFERENCE_CARD

    def test_every_query_listed(self):
        for name in ("proximity", "iivi", "chain", "coltrane", "bridges", "voicing", "templates", "library"):
            assert f"  {name}" in REFERENCE_CARD
