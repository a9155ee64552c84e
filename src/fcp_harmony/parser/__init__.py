"""Parser package: note names, chord symbols and op strings."""

from fcp_harmony.parser.chord import parse_chord_symbol
from fcp_harmony.parser.ops import ParsedOp, ParseError, parse_op
from fcp_harmony.parser.pitch import parse_note_name
from fcp_harmony.parser.tokenizer import is_key_value, parse_key_value, tokenize

__all__ = [
    "parse_chord_symbol",
    "parse_note_name",
    "parse_op",
    "tokenize",
    "is_key_value",
    "parse_key_value",
    "ParsedOp",
    "ParseError",
]
