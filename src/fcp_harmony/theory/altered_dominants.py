"""Altered dominant catalog and resolution suggestions."""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality
from fcp_harmony.theory.chords import Chord, chord_pitch_classes
from fcp_harmony.theory.harmony import MoveStrength


@dataclass(frozen=True)
class AlteredDominantInfo:
    quality: ChordQuality
    alterations: tuple[str, ...]
    associated_scale: str
    tension_level: int  # 1-4


@dataclass(frozen=True)
class Resolution:
    chord: Chord
    strength: MoveStrength
    label: str


@dataclass(frozen=True)
class AlterationSuggestion:
    quality: ChordQuality
    label: str
    half_step_resolutions: int


_Q = ChordQuality

ALTERED_DOMINANT_CATALOG: dict[ChordQuality, AlteredDominantInfo] = {
    info.quality: info
    for info in (
        AlteredDominantInfo(_Q.DOM7, (), "Mixolydian", 1),
        AlteredDominantInfo(_Q.DOM9, ("9",), "Mixolydian", 1),
        AlteredDominantInfo(_Q.DOM13, ("9", "13"), "Mixolydian", 1),
        AlteredDominantInfo(_Q.DOM7SUS4, ("sus4",), "Mixolydian", 1),
        AlteredDominantInfo(_Q.DOM7SHARP11, ("♯11",), "Lydian Dominant", 2),
        AlteredDominantInfo(_Q.DOM7FLAT9, ("♭9",), "Half-Whole Diminished", 3),
        AlteredDominantInfo(_Q.DOM7SHARP9, ("♯9",), "Altered", 3),
        AlteredDominantInfo(_Q.DOM7FLAT13, ("♭13",), "Mixolydian ♭6", 2),
        AlteredDominantInfo(_Q.DOM7FLAT5, ("♭5",), "Lydian Dominant / Whole Tone", 2),
        AlteredDominantInfo(_Q.ALT7, ("♭5/♯5", "♭9/♯9"), "Altered", 4),
        AlteredDominantInfo(_Q.DOM7SHARP5FLAT9, ("♯5", "♭9"), "Altered", 4),
        AlteredDominantInfo(_Q.DOM7SHARP5SHARP9, ("♯5", "♯9"), "Altered", 4),
    )
}

ALTERED_QUALITIES: tuple[ChordQuality, ...] = (
    _Q.DOM7FLAT9, _Q.DOM7SHARP9, _Q.DOM7SHARP11, _Q.DOM7FLAT13,
    _Q.DOM7FLAT5, _Q.DOM7SHARP5FLAT9, _Q.DOM7SHARP5SHARP9, _Q.ALT7,
)


def is_dominant_family(quality: ChordQuality) -> bool:
    return quality in ALTERED_DOMINANT_CATALOG


def get_altered_dominant_info(quality: ChordQuality) -> AlteredDominantInfo | None:
    return ALTERED_DOMINANT_CATALOG.get(quality)


def suggest_resolutions(c: Chord) -> list[Resolution]:
    """Standard, minor, tritone-sub and deceptive targets for a dominant chord.

    Non-dominant chords get an empty list.
    """
    if not is_dominant_family(c.quality):
        return []
    standard_root = (c.root + 5) % 12  # down a fifth
    return [
        Resolution(Chord(standard_root, _Q.MAJOR), MoveStrength.STRONG, "Standard (→ I)"),
        Resolution(Chord(standard_root, _Q.MINOR), MoveStrength.COMMON, "To minor I"),
        Resolution(Chord(c.root - 1, _Q.MAJOR), MoveStrength.COMMON, "Tritone sub target"),
        Resolution(Chord(standard_root + 9, _Q.MINOR), MoveStrength.CREATIVE, "Deceptive (→ vi)"),
    ]


def suggest_alterations(dominant_root: int, target: Chord) -> list[AlterationSuggestion]:
    """Altered qualities on *dominant_root* with at least two tones a half
    step from a tone of *target*."""
    target_pcs = set(chord_pitch_classes(target))
    suggestions: list[AlterationSuggestion] = []
    for quality in ALTERED_QUALITIES:
        pcs = chord_pitch_classes(Chord(dominant_root, quality))
        count = sum(
            1 for pc in pcs
            if (pc + 1) % 12 in target_pcs or (pc - 1) % 12 in target_pcs
        )
        if count >= 2:
            suggestions.append(
                AlterationSuggestion(
                    quality=quality,
                    label=", ".join(ALTERED_DOMINANT_CATALOG[quality].alterations),
                    half_step_resolutions=count,
                )
            )
    return suggestions


def get_altered_variants(root: int) -> list[tuple[Chord, AlteredDominantInfo]]:
    """Every dominant-family chord on *root* except the plain dom7, by tension."""
    variants = [
        (Chord(root, quality), info)
        for quality, info in ALTERED_DOMINANT_CATALOG.items()
        if quality != _Q.DOM7
    ]
    return sorted(variants, key=lambda v: v[1].tension_level)
