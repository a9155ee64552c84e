"""Deserialize a .mid file into a Progression via PrettyMIDI.

Usage::

    from fcp_harmony.serialization.deserialize import deserialize, pretty_midi_to_progression

    progression = deserialize("/path/to/file.mid")
    progression = pretty_midi_to_progression(pm)
"""

from __future__ import annotations

import logging
import os
import uuid

import pretty_midi

from fcp_harmony.errors import SerializationError, ValidationError
from fcp_harmony.model.progression import DEFAULT_TEMPO, Progression, ProgressionChord
from fcp_harmony.parser.chord import parse_chord_symbol
from fcp_harmony.theory.chords import Chord, chord_pitch_classes
from fcp_harmony.theory.identify import identify_chord_from_pitch_classes

logger = logging.getLogger(__name__)

# Notes starting within this many seconds of each other form one chord
ONSET_TOLERANCE = 0.01
MIN_BEATS = 0.25


def _id() -> str:
    return uuid.uuid4().hex[:8]


def _key_root(key_number: int) -> int:
    """Major tonic for a pretty_midi key number (minor keys -> relative major)."""
    if key_number < 12:
        return key_number
    return (key_number - 12 + 3) % 12


def _group_onsets(notes: list[pretty_midi.Note]) -> list[list[pretty_midi.Note]]:
    groups: list[list[pretty_midi.Note]] = []
    for note in sorted(notes, key=lambda n: (n.start, n.pitch)):
        if groups and note.start - groups[-1][0].start <= ONSET_TOLERANCE:
            groups[-1].append(note)
        else:
            groups.append([note])
    return groups


def _name_chord(pcs: set[int], label: str | None) -> Chord:
    """Prefer the chord written in the text event when its tones match."""
    if label is not None:
        try:
            labelled = parse_chord_symbol(label)
        except ValidationError:
            logger.debug("text event %r is not a chord symbol", label)
        else:
            if set(chord_pitch_classes(labelled)) == pcs:
                return labelled
    return identify_chord_from_pitch_classes(pcs)


def _beats(seconds: float, seconds_per_beat: float) -> float:
    return max(MIN_BEATS, round(seconds / seconds_per_beat * 4) / 4)


def pretty_midi_to_progression(pm: pretty_midi.PrettyMIDI, title: str = "Imported") -> Progression:
    """Convert a :class:`pretty_midi.PrettyMIDI` object to a :class:`Progression`.

    Chords are read from the first pitched instrument. Each group of notes
    sharing an onset becomes one chord, held until the next onset (the last
    one until its longest note ends).
    """
    pitched = [inst for inst in pm.instruments if not inst.is_drum and inst.notes]
    if not pitched:
        raise SerializationError("MIDI file contains no pitched notes")
    if len(pitched) > 1:
        logger.debug("reading chords from %r, ignoring %d other instruments", pitched[0].name, len(pitched) - 1)

    _, tempi = pm.get_tempo_changes()
    tempo = float(tempi[0]) if len(tempi) else DEFAULT_TEMPO
    seconds_per_beat = 60.0 / tempo

    key_root = _key_root(pm.key_signature_changes[0].key_number) if pm.key_signature_changes else 0

    labels = {round(te.time, 2): te.text for te in pm.text_events}

    progression = Progression(id=_id(), title=title, key_root=key_root, tempo=tempo)
    groups = _group_onsets(pitched[0].notes)
    for i, group in enumerate(groups):
        onset = group[0].start
        if i + 1 < len(groups):
            length = groups[i + 1][0].start - onset
        else:
            length = max(n.end for n in group) - onset
        pcs = {n.pitch % 12 for n in group}
        c = _name_chord(pcs, labels.get(round(onset, 2)))
        progression.chords.append(ProgressionChord(id=_id(), chord=c, beats=_beats(length, seconds_per_beat)))

    return progression


def deserialize(path: str) -> Progression:
    """Load a ``.mid`` file and return a :class:`Progression`."""
    try:
        pm = pretty_midi.PrettyMIDI(path)
    except (OSError, ValueError, EOFError) as exc:
        raise SerializationError(f"Cannot read {path!r}: {exc}") from exc
    title = os.path.splitext(os.path.basename(path))[0] or "Imported"
    progression = pretty_midi_to_progression(pm, title=title)
    progression.file_path = path
    logger.debug("read %d chords from %s", len(progression.chords), path)
    return progression
