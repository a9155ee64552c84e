"""Structured verb registry, the single source of truth for all op verbs.

Uses ``VerbSpec`` from fcp_core. Verb definitions are specific to the
harmony domain.
"""

from __future__ import annotations

from fcp_core import VerbSpec


VERBS: list[VerbSpec] = [
    # Progression editing
    VerbSpec(
        verb="chord",
        syntax="chord SYMBOL [beats:N] [at:INDEX]",
        category="progression",
        params=["beats", "at"],
        description="Add a chord (appended unless at: is given).",
    ),
    VerbSpec(
        verb="remove",
        syntax="remove INDEX",
        category="progression",
        description="Remove the chord at a 1-based index.",
    ),
    VerbSpec(
        verb="replace",
        syntax="replace INDEX SYMBOL",
        category="progression",
        description="Swap the chord at an index, keeping its length.",
    ),
    VerbSpec(
        verb="tritone-sub",
        syntax="tritone-sub INDEX",
        category="progression",
        description="Replace a dominant chord with its tritone substitute.",
    ),
    VerbSpec(
        verb="bridge",
        syntax="bridge INDEX [beats:N]",
        category="progression",
        params=["beats"],
        description="Insert the best passing chord between INDEX and the next chord.",
    ),
    VerbSpec(
        verb="template",
        syntax="template NAME [key:NOTE] [beats:N]",
        category="progression",
        params=["key", "beats"],
        description="Append a degree template (ii-V-I, I-V-vi-IV, ...) in the key.",
    ),
    VerbSpec(
        verb="library",
        syntax="library NAME [key:NOTE] [beats:N]",
        category="progression",
        params=["key", "beats"],
        description="Append a well-known progression, transposed to the key.",
    ),
    # Whole-progression transforms
    VerbSpec(
        verb="transpose",
        syntax="transpose SEMITONES",
        category="transform",
        description="Move every chord and the key by N semitones.",
    ),
    VerbSpec(
        verb="negate",
        syntax="negate",
        category="transform",
        description="Reflect every chord through the key's negative-harmony axis.",
    ),
    # Context
    VerbSpec(
        verb="key",
        syntax="key NOTE",
        category="meta",
        description="Set the major key used for analysis.",
    ),
    VerbSpec(
        verb="tempo",
        syntax="tempo BPM",
        category="meta",
        description="Set the tempo.",
    ),
    VerbSpec(
        verb="title",
        syntax="title TEXT",
        category="meta",
        description="Set the progression title.",
    ),
    VerbSpec(
        verb="tuning",
        syntax="tuning standard|drop-d|open-g|open-d|dadgad",
        category="meta",
        description="Set the guitar tuning used for shapes and export.",
    ),
]
