"""Modal interchange: chords borrowed from parallel modes that are not
already diatonic in the home major key."""

from __future__ import annotations

from dataclasses import dataclass

from fcp_harmony.lib.chord_library import ChordQuality, TonalFunction
from fcp_harmony.lib.mode_library import MODE_TEMPLATES, ModeType
from fcp_harmony.theory.chords import Chord, chord_key


@dataclass(frozen=True)
class BorrowedChord:
    chord: Chord
    source_mode: ModeType
    source_mode_name: str
    roman: str
    tonal_function: TonalFunction
    description: str


_Q = ChordQuality
_MAJ, _MIN, _DIM, _AUG = _Q.MAJOR, _Q.MINOR, _Q.DIMINISHED, _Q.AUGMENTED

MODE_TRIAD_QUALITIES: dict[ModeType, tuple[ChordQuality, ...]] = {
    ModeType.IONIAN: (_MAJ, _MIN, _MIN, _MAJ, _MAJ, _MIN, _DIM),
    ModeType.DORIAN: (_MIN, _MIN, _MAJ, _MAJ, _MIN, _DIM, _MAJ),
    ModeType.PHRYGIAN: (_MIN, _MAJ, _MAJ, _MIN, _DIM, _MAJ, _MIN),
    ModeType.LYDIAN: (_MAJ, _MAJ, _MIN, _DIM, _MAJ, _MIN, _MIN),
    ModeType.MIXOLYDIAN: (_MAJ, _MIN, _DIM, _MAJ, _MIN, _MIN, _MAJ),
    ModeType.AEOLIAN: (_MIN, _DIM, _MAJ, _MIN, _MIN, _MAJ, _MAJ),
    ModeType.LOCRIAN: (_DIM, _MAJ, _MIN, _MIN, _MAJ, _MAJ, _MIN),
    ModeType.HARMONIC_MINOR: (_MIN, _DIM, _AUG, _MIN, _MAJ, _MAJ, _DIM),
    ModeType.MELODIC_MINOR: (_MIN, _MIN, _AUG, _MAJ, _MAJ, _DIM, _DIM),
}

# Scan order for get_all_borrowed_chords; earlier modes win duplicates.
BORROW_SOURCE_ORDER: tuple[ModeType, ...] = (
    ModeType.AEOLIAN,
    ModeType.DORIAN,
    ModeType.PHRYGIAN,
    ModeType.LYDIAN,
    ModeType.MIXOLYDIAN,
    ModeType.HARMONIC_MINOR,
    ModeType.MELODIC_MINOR,
)

# Semitones above the key root -> roman numeral base
FLAT_ROMAN: dict[int, str] = {
    0: "I", 1: "♭II", 2: "II", 3: "♭III", 4: "III", 5: "IV", 6: "♯IV",
    7: "V", 8: "♭VI", 9: "VI", 10: "♭VII", 11: "VII",
}

_SUBDOMINANT_OFFSETS = frozenset({3, 5, 8, 10})
_DOMINANT_OFFSETS = frozenset({1, 6})


def borrowed_chord_function(semitones: int) -> TonalFunction:
    if semitones in _SUBDOMINANT_OFFSETS:
        return TonalFunction.SUBDOMINANT
    if semitones in _DOMINANT_OFFSETS:
        return TonalFunction.DOMINANT
    return TonalFunction.TONIC


def roman_for_offset(semitones: int, quality: ChordQuality) -> str:
    """Numeral for a borrowed triad *semitones* above the key root.

    On the tonic only the case is marked: a minor or diminished tonic is
    ``i``, anything else ``I``.
    """
    if semitones % 12 == 0:
        return "i" if quality in (_MIN, _DIM) else "I"
    base = FLAT_ROMAN[semitones % 12]
    if quality == _MIN:
        return base.lower()
    if quality == _DIM:
        return base.lower() + "°"
    if quality == _AUG:
        return base + "+"
    return base


def get_modal_interchange_chords(key_root: int, mode: ModeType) -> list[BorrowedChord]:
    """Triads of the parallel *mode* that the home major key lacks.

    Modes without a triad-quality pattern borrow nothing.
    """
    qualities = MODE_TRIAD_QUALITIES.get(mode)
    if qualities is None:
        return []

    home_intervals = MODE_TEMPLATES[ModeType.IONIAN].intervals
    home_qualities = MODE_TRIAD_QUALITIES[ModeType.IONIAN]
    home_keys = {
        chord_key(Chord(root=key_root + i, quality=q))
        for i, q in zip(home_intervals, home_qualities)
    }

    template = MODE_TEMPLATES[mode]
    borrowed: list[BorrowedChord] = []
    for interval, quality in zip(template.intervals, qualities):
        c = Chord(root=key_root + interval, quality=quality)
        if chord_key(c) in home_keys:
            continue
        semitones = (c.root - key_root) % 12
        roman = roman_for_offset(semitones, quality)
        borrowed.append(
            BorrowedChord(
                chord=c,
                source_mode=mode,
                source_mode_name=template.name,
                roman=roman,
                tonal_function=borrowed_chord_function(semitones),
                description=f"{roman} from {template.name}",
            )
        )
    return borrowed


def get_all_borrowed_chords(key_root: int) -> list[BorrowedChord]:
    """Borrowed chords from all common parallel modes, deduplicated.

    The first mode in :data:`BORROW_SOURCE_ORDER` to produce a chord keeps
    it; the result is ordered by root distance above the key.
    """
    seen: dict[str, BorrowedChord] = {}
    for mode in BORROW_SOURCE_ORDER:
        for bc in get_modal_interchange_chords(key_root, mode):
            seen.setdefault(chord_key(bc.chord), bc)
    return sorted(seen.values(), key=lambda bc: (bc.chord.root - key_root) % 12)
