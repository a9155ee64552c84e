"""Comprehensive tests for the fcp_harmony.parser package."""

from __future__ import annotations

import pytest

from fcp_harmony.errors import ValidationError
from fcp_harmony.lib.chord_library import CHORD_TEMPLATES, ChordQuality
from fcp_harmony.parser.chord import parse_chord_symbol
from fcp_harmony.parser.ops import ParsedOp, ParseError, parse_op
from fcp_harmony.parser.pitch import match_note_prefix, parse_note_name
from fcp_harmony.parser.tokenizer import is_key_value, parse_key_value, tokenize
from fcp_harmony.theory.chords import Chord

Q = ChordQuality


# =========================================================================
# Tokenizer
# =========================================================================

class TestTokenize:
    def test_simple_tokens(self):
        assert tokenize("chord G7 beats:2") == ["chord", "G7", "beats:2"]

    def test_double_quoted_string(self):
        assert tokenize('title "Blue in Green" key:Bb') == ["title", "Blue in Green", "key:Bb"]

    def test_single_quoted_string(self):
        assert tokenize("title 'So What'") == ["title", "So What"]

    def test_sharp_is_not_a_comment(self):
        assert tokenize("chord F#m7 at:2") == ["chord", "F#m7", "at:2"]

    def test_empty_string(self):
        assert tokenize("") == []

    def test_whitespace_only(self):
        assert tokenize("   ") == []


class TestIsKeyValue:
    def test_key_value(self):
        assert is_key_value("beats:2") is True
        assert is_key_value("at:3") is True

    def test_plain_token(self):
        assert is_key_value("Dm7") is False

    def test_empty_key(self):
        assert is_key_value(":x") is False

    def test_key_with_space(self):
        assert is_key_value("Song: Part 2") is False


class TestParseKeyValue:
    def test_basic(self):
        assert parse_key_value("beats:2") == ("beats", "2")

    def test_key_lowercased(self):
        assert parse_key_value("Beats:2") == ("beats", "2")

    def test_split_on_first_colon(self):
        assert parse_key_value("a:b:c") == ("a", "b:c")


# =========================================================================
# Note names
# =========================================================================

class TestParseNoteName:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("C", 0),
            ("Eb", 3),
            ("F#", 6),
            ("B♭", 10),
            ("C♯", 1),
            ("Cbb", 10),
            ("E#", 5),
            ("B#", 0),
            ("Fb", 4),
            ("G##", 9),
            ("c", 0),
            (" A ", 9),
        ],
    )
    def test_names(self, text, expected):
        assert parse_note_name(text) == expected

    def test_integers_reduce_mod_12(self):
        assert parse_note_name("13") == 1
        assert parse_note_name("60") == 0
        assert parse_note_name("-1") == 11

    @pytest.mark.parametrize("text", ["H", "C4", "", "Ebb#", "x"])
    def test_invalid(self, text):
        with pytest.raises(ValidationError):
            parse_note_name(text)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_note_name("H")


class TestMatchNotePrefix:
    def test_prefix_consumed(self):
        assert match_note_prefix("F#m7") == (6, 2)
        assert match_note_prefix("Bbmaj7") == (10, 2)
        assert match_note_prefix("G7") == (7, 1)

    def test_no_prefix(self):
        assert match_note_prefix("x") is None
        assert match_note_prefix("") is None


# =========================================================================
# Chord symbols
# =========================================================================

class TestParseChordSymbol:
    @pytest.mark.parametrize(
        "symbol, expected",
        [
            ("C", Chord(0, Q.MAJOR)),
            ("Am", Chord(9, Q.MINOR)),
            ("F#m7b5", Chord(6, Q.HALF_DIM7)),
            ("Cm7b5", Chord(0, Q.HALF_DIM7)),
            ("Bbmaj7", Chord(10, Q.MAJ7)),
            ("G7#9", Chord(7, Q.DOM7SHARP9)),
            ("G7♯9", Chord(7, Q.DOM7SHARP9)),
            ("Db7♭9", Chord(1, Q.DOM7FLAT9)),
            ("Cdim", Chord(0, Q.DIMINISHED)),
            ("C°7", Chord(0, Q.DIM7)),
            ("Caug", Chord(0, Q.AUGMENTED)),
            ("Csus", Chord(0, Q.SUS4)),
            ("C6/9", Chord(0, Q.SIX_NINE)),
            ("Cm(add9)", Chord(0, Q.MIN_ADD9)),
            ("E7alt", Chord(4, Q.ALT7)),
            ("Ealt", Chord(4, Q.ALT7)),
            ("CΔ7", Chord(0, Q.MAJ7)),
            ("C-7", Chord(0, Q.MIN7)),
        ],
    )
    def test_symbols(self, symbol, expected):
        assert parse_chord_symbol(symbol) == expected

    def test_every_display_symbol_parses_back(self):
        for quality, template in CHORD_TEMPLATES.items():
            assert parse_chord_symbol("C" + template.symbol) == Chord(0, quality), template.symbol

    @pytest.mark.parametrize("symbol", ["Cxyz", "Hm", "", "m7", "C7b99"])
    def test_invalid(self, symbol):
        with pytest.raises(ValidationError):
            parse_chord_symbol(symbol)


# =========================================================================
# Op parser
# =========================================================================

class TestParseOp:
    def test_chord_with_params(self):
        op = parse_op("chord Dm7 beats:2 at:3")
        assert isinstance(op, ParsedOp)
        assert op.verb == "chord"
        assert op.target == "Dm7"
        assert op.params == {"beats": "2", "at": "3"}

    def test_chord_with_sharp(self):
        op = parse_op("chord F#m7b5")
        assert isinstance(op, ParsedOp)
        assert op.target == "F#m7b5"

    def test_replace(self):
        op = parse_op("replace 2 G7")
        assert isinstance(op, ParsedOp)
        assert op.target == "2"
        assert op.params["chord"] == "G7"

    def test_replace_chord_param(self):
        op = parse_op("replace 2 chord:G7")
        assert isinstance(op, ParsedOp)
        assert op.params["chord"] == "G7"

    def test_title_keeps_colons(self):
        op = parse_op("title My Song: Part 2")
        assert isinstance(op, ParsedOp)
        assert op.target == "My Song: Part 2"

    def test_title_quoted(self):
        op = parse_op('title "Autumn Leaves"')
        assert isinstance(op, ParsedOp)
        assert op.target == "Autumn Leaves"

    def test_library_name_joined(self):
        op = parse_op("library giant steps key:B")
        assert isinstance(op, ParsedOp)
        assert op.target == "giant steps"
        assert op.params == {"key": "B"}

    def test_template_without_name(self):
        op = parse_op("template beats:2")
        assert isinstance(op, ParsedOp)
        assert op.target is None

    def test_bridge_index(self):
        op = parse_op("bridge 2 beats:1")
        assert isinstance(op, ParsedOp)
        assert op.target == "2"
        assert op.params == {"beats": "1"}

    def test_negate_bare(self):
        op = parse_op("negate")
        assert isinstance(op, ParsedOp)
        assert op.target is None

    def test_negate_rejects_args(self):
        assert isinstance(parse_op("negate 3"), ParseError)

    def test_transpose_negative(self):
        op = parse_op("transpose -3")
        assert isinstance(op, ParsedOp)
        assert op.target == "-3"

    def test_verb_lowercased(self):
        op = parse_op("CHORD C")
        assert isinstance(op, ParsedOp)
        assert op.verb == "chord"

    def test_empty(self):
        result = parse_op("")
        assert isinstance(result, ParseError)
        assert "Empty" in result.error

    def test_unterminated_quote(self):
        assert isinstance(parse_op('chord "unterminated'), ParseError)

    def test_unknown_verb_best_effort(self):
        op = parse_op("frobnicate a b")
        assert isinstance(op, ParsedOp)
        assert op.verb == "frobnicate"
        assert op.targets == ["a", "b"]

    def test_raw_preserved(self):
        op = parse_op("  key G  ")
        assert isinstance(op, ParsedOp)
        assert op.raw == "key G"
