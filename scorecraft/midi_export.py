"""Export a playable to a Standard MIDI File.

The file is type 1: a first track holding the tempo, then one track per
line. One unit (a sixteenth) is 120 ticks at 480 ticks per quarter note::

	import scorecraft.midi_export

	scorecraft.midi_export.write_midi(piece, "song.mid", tempo_bpm=300)

Pitched notes go to the nearest MIDI note number. Drum notes always go to
the General MIDI percussion channel; everything else in a track shares one
channel with a program chosen from the track's first non-drum timbre.
"""

import logging
import math
import typing

import mido

import scorecraft.constants.gm
import scorecraft.line
import scorecraft.note
import scorecraft.piece
import scorecraft.render
import scorecraft.timbre


logger = logging.getLogger(__name__)


TICKS_PER_BEAT = 480
TICKS_PER_UNIT = TICKS_PER_BEAT // 4

MAX_TEMPO = 0xFFFFFF

MELODIC_CHANNELS: typing.List[int] = [channel for channel in range(16) if channel != scorecraft.constants.gm.DRUM_CHANNEL]


def midi_note (frequency: float) -> int:

	"""
	Nearest MIDI note number for ``frequency`` (A4 = 440 Hz = 69), clamped to 0-127.
	"""

	return max(0, min(127, round(69 + 12 * math.log2(frequency / 440.0))))


def midi_velocity (volume: float) -> int:

	return max(1, min(127, round(100 * volume)))


def _tracks (playable: scorecraft.render.Playable) -> typing.List[scorecraft.line.Line]:

	if isinstance(playable, scorecraft.piece.Piece):
		return list(playable.tracks)

	if isinstance(playable, scorecraft.line.Line):
		return [playable]

	if isinstance(playable, scorecraft.note.Note):
		return [playable.to_line()]

	raise TypeError(f"Cannot export {type(playable).__name__} to MIDI")


def _track_program (line: scorecraft.line.Line) -> typing.Optional[int]:

	for note in line.main:
		if isinstance(note.kind, scorecraft.note.Pitched) and not note.kind.timbre.is_drums:
			return scorecraft.constants.gm.PROGRAMS[note.kind.timbre.kind]

	return None


def _line_to_track (line: scorecraft.line.Line, channel: int, name: str) -> mido.MidiTrack:

	"""Convert one line to a MIDI track with delta times.

	Events at the same tick are ordered note-offs first so that repeated
	notes on the same key retrigger cleanly. Zero-length notes are left out.
	"""

	track = mido.MidiTrack()
	track.append(mido.MetaMessage("track_name", name=name, time=0))

	program = _track_program(line)

	if program is not None:
		track.append(mido.Message("program_change", channel=channel, program=program, time=0))

	events: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for onset, note in line.onsets():

		if not isinstance(note.kind, scorecraft.note.Pitched) or note.duration == 0:
			continue

		timbre = note.kind.timbre

		if timbre.is_drums:
			note_channel = scorecraft.constants.gm.DRUM_CHANNEL
			number = scorecraft.constants.gm.DRUM_NOTES[scorecraft.timbre.drum_kind(note.kind.pitch.frequency)]
		else:
			note_channel = channel
			number = midi_note(note.kind.pitch.frequency)

		start = onset * TICKS_PER_UNIT
		end = (onset + note.duration) * TICKS_PER_UNIT

		events.append((start, 1, mido.Message("note_on", channel=note_channel, note=number, velocity=midi_velocity(note.kind.volume))))
		events.append((end, 0, mido.Message("note_off", channel=note_channel, note=number, velocity=0)))

	events.sort(key=lambda event: (event[0], event[1]))

	last_tick = 0

	for tick, _, message in events:
		track.append(message.copy(time=tick - last_tick))
		last_tick = tick

	return track


def to_midi_file (playable: scorecraft.render.Playable, tempo_bpm: int) -> mido.MidiFile:

	"""
	Build the ``mido.MidiFile`` for ``playable`` without writing it.
	"""

	tempo = min(scorecraft.render.beat_duration_ms(tempo_bpm) * 4 * 1000, MAX_TEMPO)

	mid = mido.MidiFile(type=1, ticks_per_beat=TICKS_PER_BEAT)

	conductor = mido.MidiTrack()
	conductor.append(mido.MetaMessage("set_tempo", tempo=tempo, time=0))
	conductor.append(mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0))
	mid.tracks.append(conductor)

	for index, line in enumerate(_tracks(playable)):
		channel = MELODIC_CHANNELS[index % len(MELODIC_CHANNELS)]
		mid.tracks.append(_line_to_track(line, channel, f"Track {index + 1}"))

	return mid


def write_midi (playable: scorecraft.render.Playable, path: str, tempo_bpm: int = 300) -> None:

	"""Write ``playable`` to ``path`` as a type 1 MIDI file.

	Raises:
		OSError: If ``path`` cannot be written.
	"""

	mid = to_midi_file(playable, tempo_bpm)

	logger.info(f"Saving MIDI ({len(mid.tracks) - 1} tracks) to {path}...")
	mid.save(str(path))
	logger.info(f"Saved {path}")
