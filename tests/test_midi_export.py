import pathlib

import mido
import pytest

import scorecraft.durations as dur
import scorecraft.midi_export
import scorecraft.note
import scorecraft.piece
import scorecraft.pitch
import scorecraft.timbre

C4 = scorecraft.pitch.C4
A4 = scorecraft.pitch.A4


def _notes (track: mido.MidiTrack) -> list:

	return [msg for msg in track if msg.type in ("note_on", "note_off")]


def test_midi_note () -> None:

	"""Frequencies round to the nearest key, clamped to the MIDI range."""

	assert scorecraft.midi_export.midi_note(440.0) == 69
	assert scorecraft.midi_export.midi_note(C4.frequency) == 60
	assert scorecraft.midi_export.midi_note(C4.semitone(0.4).frequency) == 60
	assert scorecraft.midi_export.midi_note(1.0) == 0
	assert scorecraft.midi_export.midi_note(50000.0) == 127


def test_midi_velocity () -> None:

	"""Volume 1.0 is velocity 100; silence still triggers at velocity 1."""

	assert scorecraft.midi_export.midi_velocity(1.0) == 100
	assert scorecraft.midi_export.midi_velocity(0.5) == 50
	assert scorecraft.midi_export.midi_velocity(0.0) == 1
	assert scorecraft.midi_export.midi_velocity(3.0) == 127


def test_conductor_track () -> None:

	"""The first track carries tempo and a 4/4 time signature."""

	mid = scorecraft.midi_export.to_midi_file(dur.quarter(C4), 300)

	assert mid.type == 1
	assert mid.ticks_per_beat == 480

	tempo = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"][0]
	signature = [msg for msg in mid.tracks[0] if msg.type == "time_signature"][0]

	assert tempo.tempo == 800000
	assert (signature.numerator, signature.denominator) == (4, 4)


def test_slow_tempo_is_clamped () -> None:

	"""Tempos too slow for a MIDI tempo event are clamped."""

	mid = scorecraft.midi_export.to_midi_file(dur.quarter(C4), 1)
	tempo = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"][0]

	assert tempo.tempo == 0xFFFFFF


def test_note_timing () -> None:

	"""A quarter note lasts 480 ticks and rests shift later notes."""

	line = scorecraft.timbre.piano(dur.quarter(C4) + dur.eighth(scorecraft.note.REST) + dur.eighth(A4))
	track = scorecraft.midi_export.to_midi_file(line, 300).tracks[1]

	programs = [msg for msg in track if msg.type == "program_change"]
	notes = _notes(track)

	assert programs[0].program == 0
	assert [(msg.type, msg.note, msg.time) for msg in notes] == [
		("note_on", 60, 0),
		("note_off", 60, 480),
		("note_on", 69, 240),
		("note_off", 69, 240),
	]
	assert notes[0].velocity == 100


def test_repeated_notes_release_first () -> None:

	"""Back-to-back notes on one key send the note-off before the next note-on."""

	track = scorecraft.midi_export.to_midi_file(dur.quarter(C4) + dur.quarter(C4), 300).tracks[1]

	assert [msg.type for msg in _notes(track)] == ["note_on", "note_off", "note_on", "note_off"]


def test_drums_use_percussion_channel () -> None:

	"""Drums go to channel 9 with General MIDI percussion keys."""

	hits = scorecraft.timbre.drums(dur.quarter(C4) + dur.quarter(C4.octave(-1)))
	track = scorecraft.midi_export.to_midi_file(hits, 300).tracks[1]

	notes = [msg for msg in _notes(track) if msg.type == "note_on"]

	assert [(msg.channel, msg.note) for msg in notes] == [(9, 38), (9, 36)]
	assert not any(msg.type == "program_change" for msg in track)


def test_one_track_per_line () -> None:

	"""Each line gets its own track and channel, skipping the drum channel."""

	piece = scorecraft.piece.Piece.of(*[scorecraft.timbre.bass(dur.quarter(C4)) for _ in range(11)])
	mid = scorecraft.midi_export.to_midi_file(piece, 300)

	assert len(mid.tracks) == 12

	channels = [_notes(track)[0].channel for track in mid.tracks[1:]]

	assert channels == [0, 1, 2, 3, 4, 5, 6, 7, 8, 10, 11]
	assert [msg for msg in mid.tracks[1] if msg.type == "track_name"][0].name == "Track 1"


def test_unsupported_playable () -> None:

	"""Only notes, lines and pieces can be exported."""

	with pytest.raises(TypeError):
		scorecraft.midi_export.to_midi_file("C4", 300)


def test_write_midi_round_trips (tmp_path: pathlib.Path) -> None:

	"""The written file loads back with mido."""

	path = tmp_path / "song.mid"
	piece = scorecraft.piece.Piece.of(dur.half(C4), scorecraft.timbre.drums(dur.quarter(C4)))

	scorecraft.midi_export.write_midi(piece, str(path))

	mid = mido.MidiFile(str(path))

	assert len(mid.tracks) == 3
	assert mid.length == pytest.approx(1.6)


def test_zero_length_notes_are_skipped () -> None:

	"""A zero-length note sends nothing, so later notes keep their on/off order."""

	line = scorecraft.note.Note(0, scorecraft.note.Pitched(C4)) + dur.quarter(A4)
	track = scorecraft.midi_export.to_midi_file(line, 300).tracks[1]

	assert [(msg.type, msg.note, msg.time) for msg in _notes(track)] == [
		("note_on", 69, 0),
		("note_off", 69, 480),
	]
