"""Serialize a Progression to PrettyMIDI and write to a .mid file.

Usage::

    from fcp_harmony.serialization.serialize import serialize, progression_to_pretty_midi

    serialize(progression, "/path/to/output.mid")
    pm = progression_to_pretty_midi(progression)
"""

from __future__ import annotations

import logging

import pretty_midi
from pretty_midi.containers import Text

from fcp_harmony.errors import SerializationError
from fcp_harmony.lib.chord_library import MIDDLE_C, get_intervals
from fcp_harmony.model.progression import Progression
from fcp_harmony.theory.chords import chord_name
from fcp_harmony.theory.guitar import get_guitar_shapes, shape_midi_notes
from fcp_harmony.theory.voice_leading import CLOSE, SMOOTH, VOICINGS, voice_progression

logger = logging.getLogger(__name__)

PIANO_PROGRAM = 0  # Acoustic Grand Piano
GUITAR_PROGRAM = 25  # Acoustic Guitar (steel)
VELOCITY = 80


def _piano_voicings(progression: Progression, voicing: str) -> list[list[int]]:
    chords = progression.chord_values()
    if voicing == CLOSE:
        return [[MIDDLE_C + c.root + i for i in get_intervals(c.quality)] for c in chords]
    return voice_progression(chords)


def progression_to_pretty_midi(
    progression: Progression, guitar: bool = False, voicing: str = SMOOTH,
) -> pretty_midi.PrettyMIDI:
    """Convert a :class:`Progression` to a :class:`pretty_midi.PrettyMIDI` object.

    With the default *voicing* ``"smooth"`` the piano starts in close
    position at middle C and moves each voice to the nearest tone of the
    next chord. ``"close"`` voices every chord from its root in the
    middle-C octave using the raw template intervals, so extensions land
    above the octave. With *guitar*, a second instrument plays the first
    available guitar shape in the progression's tuning; chords with no
    shape are skipped.
    """
    if voicing not in VOICINGS:
        raise SerializationError(f"Unknown voicing {voicing!r}, expected one of {', '.join(VOICINGS)}")

    pm = pretty_midi.PrettyMIDI(initial_tempo=progression.tempo)
    seconds_per_beat = 60.0 / progression.tempo

    pm.key_signature_changes.append(pretty_midi.KeySignature(progression.key_root, 0.0))

    piano = pretty_midi.Instrument(program=PIANO_PROGRAM, name="Piano")
    guitar_inst = pretty_midi.Instrument(program=GUITAR_PROGRAM, name="Guitar") if guitar else None

    start = 0.0
    for entry, pitches in zip(progression.chords, _piano_voicings(progression, voicing)):
        end = start + entry.beats * seconds_per_beat
        c = entry.chord

        for pitch in pitches:
            piano.notes.append(pretty_midi.Note(velocity=VELOCITY, pitch=pitch, start=start, end=end))

        if guitar_inst is not None:
            shapes = get_guitar_shapes(c.root, c.quality, progression.tuning_notes)
            if shapes:
                for pitch in shape_midi_notes(shapes[0], progression.tuning_notes):
                    guitar_inst.notes.append(
                        pretty_midi.Note(velocity=VELOCITY, pitch=pitch, start=start, end=end)
                    )
            else:
                logger.debug("no guitar shape for %s, guitar part rests", chord_name(c))

        pm.text_events.append(Text(chord_name(c), start))
        start = end

    pm.instruments.append(piano)
    if guitar_inst is not None:
        pm.instruments.append(guitar_inst)
    return pm


def serialize(progression: Progression, path: str, guitar: bool = False, voicing: str = SMOOTH) -> None:
    """Serialize a :class:`Progression` to a ``.mid`` file at *path*."""
    pm = progression_to_pretty_midi(progression, guitar=guitar, voicing=voicing)
    try:
        pm.write(path)
    except OSError as exc:
        raise SerializationError(f"Cannot write {path!r}: {exc}") from exc
    logger.debug("wrote %d chords to %s", len(progression.chords), path)
