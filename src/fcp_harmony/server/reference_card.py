"""Harmony FCP reference card sections.

The static sections are what the server passes to fcp-core as extra
sections (see ``_EXTRA_SECTIONS`` in :mod:`fcp_harmony.main`); fcp-core
renders the verb list itself. :data:`REFERENCE_CARD` assembles the same
material into one string for documentation and tests, and the server does
not serve it.
"""

from __future__ import annotations

from fcp_core import VerbRegistry

from fcp_harmony.server.verb_registry import VERBS


_registry = VerbRegistry()
_registry.register_many(VERBS)


NOTE_SECTION = """\
## Note Names
  C, F#, Bb, E♭, Cbb   Letter + optional accidental (no octave)
  0-11                 Raw pitch class"""

CHORD_SECTION = """\
## Chord Symbols
  C, Cm, C°, C+        Triads (also Cmin, Cdim, Caug)
  C7, Cmaj7, Cm7, C°7, Cø7 (Cm7b5), CmM7, C+7
  Csus4, Csus2, C7sus4, C6, Cm6, C6/9, Cadd9, Cm(add9)
  C9, Cmaj9, Cm9, C11, Cm11, C13, Cm13, Cmaj13
  C7alt, C7b9, C7#9, C7#11, C7b13, C7b5, C7#5b9, C7#5#9
  ASCII # and b work wherever ♯ and ♭ appear"""

QUERY_SECTION = """\
## Queries
  map                  Progression with roman numerals
  diatonic [KEY]       Diatonic triads and 7ths
  next [INDEX|SYMBOL]  Suggested next chords
  borrowed [KEY]       Modal interchange chords
  secondary [KEY]      Secondary dominants
  modulate KEY         Pivot routes to another key
  distance KEY         Circle-of-fifths distance
  negative [INDEX|SYMBOL]  Negative harmony
  scales INDEX|SYMBOL  Chord-scale choice, tensions, avoid notes
  shapes INDEX|SYMBOL  Guitar shapes in the current tuning
  identify NOTE...     Name a set of notes
  ust ROOT             Upper structure triads over ROOT7
  symmetric dim|aug|tritone  Symmetric structures
  relate A B           How two chords relate
  proximity INDEX|SYMBOL  Major and minor triads grouped by shared notes
  altered SYMBOL       Altered dominant info and resolutions
  iivi [KEY]           Primary and secondary ii-V-Is
  chain ROOT [N]       Dominant chain falling by fifths (default 4)
  coltrane [KEY]       Major-third cycle changes; analyzes the progression
  bridges [A B]        Passing chords between two chords, or for each pair
  voicing              Smooth voicings and voice-leading movement
  templates [KEY]      Degree templates realized in a key
  library [CATEGORY]   Well-known progressions (jazz, pop, classical, blues)"""

SESSION_SECTION = """\
## Session Params
  key:NOTE  tempo:BPM  tuning:NAME  guitar:true  voicing:smooth|close"""

CONVENTIONS_SECTION = """\
## Conventions
  - Chord indices are 1-based
  - Keys are major; minor material maps to its relative major
  - Each op records one undoable event"""


def _build_reference_card() -> str:
    """Build the reference card from the verb registry and static sections."""
    lines: list[str] = ["# Harmony FCP Reference Card", "", "## Mutation Operations"]

    categories = {
        "progression": "Progression",
        "transform": "Transforms",
        "meta": "Key, Tempo & Tuning",
    }
    for cat_key, cat_title in categories.items():
        cat_verbs = [v for v in _registry.verbs if v.category == cat_key]
        if not cat_verbs:
            continue
        lines.append("")
        lines.append(f"### {cat_title}")
        for v in cat_verbs:
            lines.append(f"  {v.syntax:40s} {v.description}")

    lines.append("")
    lines.append(NOTE_SECTION)
    lines.append(CHORD_SECTION)
    lines.append(QUERY_SECTION)
    lines.append(SESSION_SECTION)
    lines.append(CONVENTIONS_SECTION)
    return "\n".join(lines)


REFERENCE_CARD = _build_reference_card()
