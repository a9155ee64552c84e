"""Chord-symbol parser: ``"F#m7b5"`` -> ``Chord(6, HALF_DIM7)``.

The root is a note name; the rest of the symbol must be one of the
display suffixes from :data:`CHORD_TEMPLATES` or a common spelling of it.
ASCII ``#`` and ``b`` in the suffix are read as ``♯`` and ``♭``, so
``C7#9`` and ``C7♯9`` are the same chord.
"""

from __future__ import annotations

from fcp_harmony.errors import ValidationError
from fcp_harmony.lib.chord_library import CHORD_TEMPLATES, ChordQuality
from fcp_harmony.parser.pitch import match_note_prefix
from fcp_harmony.theory.chords import Chord

_Q = ChordQuality

# Alternative spellings, written after accidental normalization
_ALIASES: dict[str, ChordQuality] = {
    "M": _Q.MAJOR,
    "maj": _Q.MAJOR,
    "min": _Q.MINOR,
    "-": _Q.MINOR,
    "dim": _Q.DIMINISHED,
    "o": _Q.DIMINISHED,
    "aug": _Q.AUGMENTED,
    "dom7": _Q.DOM7,
    "M7": _Q.MAJ7,
    "Δ": _Q.MAJ7,
    "Δ7": _Q.MAJ7,
    "min7": _Q.MIN7,
    "-7": _Q.MIN7,
    "dim7": _Q.DIM7,
    "o7": _Q.DIM7,
    "ø": _Q.HALF_DIM7,
    "m7♭5": _Q.HALF_DIM7,
    "min7♭5": _Q.HALF_DIM7,
    "mmaj7": _Q.MIN_MAJ7,
    "m(maj7)": _Q.MIN_MAJ7,
    "minmaj7": _Q.MIN_MAJ7,
    "aug7": _Q.AUG7,
    "7♯5": _Q.AUG7,
    "sus": _Q.SUS4,
    "7sus": _Q.DOM7SUS4,
    "min6": _Q.MIN6,
    "69": _Q.SIX_NINE,
    "madd9": _Q.MIN_ADD9,
    "M9": _Q.MAJ9,
    "min9": _Q.MIN9,
    "9sus": _Q.DOM9SUS4,
    "min11": _Q.MIN11,
    "min13": _Q.MIN13,
    "M13": _Q.MAJ13,
    "alt": _Q.ALT7,
    "7+5♭9": _Q.DOM7SHARP5FLAT9,
    "7+5♯9": _Q.DOM7SHARP5SHARP9,
    "m7♭5♭9": _Q.HALF_DIM7FLAT9,
}

SUFFIX_TO_QUALITY: dict[str, ChordQuality] = {
    **{t.symbol: q for q, t in CHORD_TEMPLATES.items()},
    **_ALIASES,
}


def _normalize_suffix(suffix: str) -> str:
    return suffix.strip().replace("#", "♯").replace("b", "♭")


def parse_chord_symbol(s: str) -> Chord:
    """Parse a chord symbol into a :class:`Chord`.

    Raises
    ------
    ValidationError
        If the root is not a note name or the suffix is not a known quality.
    """
    text = s.strip()
    matched = match_note_prefix(text)
    if matched is None:
        raise ValidationError(f"Cannot parse chord root in {s!r}")
    root, consumed = matched

    suffix = _normalize_suffix(text[consumed:])
    quality = SUFFIX_TO_QUALITY.get(suffix)
    if quality is None:
        raise ValidationError(f"Unknown chord quality {text[consumed:]!r} in {s!r}")
    return Chord(root=root, quality=quality)
