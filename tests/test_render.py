import logging
import pathlib
import typing
import wave

import numpy
import pytest

import scorecraft.durations as dur
import scorecraft.note
import scorecraft.piece
import scorecraft.pitch
import scorecraft.render
import scorecraft.timbre

C4 = scorecraft.pitch.C4
E4 = C4.semitone(4)

Piece = scorecraft.piece.Piece


def _custom (path: str, pitch: scorecraft.pitch.Pitch = C4) -> scorecraft.note.Note:

	return scorecraft.timbre.with_timbre(dur.quarter(pitch), scorecraft.timbre.Timbre.custom_unpitched(path))


@pytest.mark.parametrize("tempo, expected", [
	(300, 200),
	(150, 400),
	(7, 8571),
	(0, 60000),
	(-5, 60000),
])
def test_beat_duration_ms (tempo: int, expected: int) -> None:

	"""Units per minute to milliseconds per unit, rounded down."""

	assert scorecraft.render.beat_duration_ms(tempo) == expected


@pytest.mark.parametrize("source, sources, outputs, expected", [
	(0, 1, 3, 0),
	(0, 2, 3, 0),
	(1, 2, 3, 2),
	(1, 2, 2, 1),
	(1, 3, 2, 1),
	(2, 3, 2, 1),
])
def test_output_channel (source: int, sources: int, outputs: int, expected: int) -> None:

	"""Source channels spread proportionally over the output channels."""

	assert scorecraft.render.output_channel(source, sources, outputs) == expected


def test_config_validation () -> None:

	"""Bad gains, rates and normalisation modes are rejected up front."""

	with pytest.raises(ValueError):
		scorecraft.render.FileOutputConfig(output_gain=-0.1)

	with pytest.raises(ValueError):
		scorecraft.render.FileOutputConfig(sample_rate=0)

	with pytest.raises(ValueError):
		scorecraft.render.FileOutputConfig(normalization="loudest")


def test_rests_only_render_silence () -> None:

	"""A piece of rests is all zeros, at the full length, with one channel."""

	piece = dur.quarter(scorecraft.note.REST).to_piece()
	buffer = scorecraft.render.FilePlayer(300).render(piece)

	assert buffer.shape == (1, 35280)
	assert numpy.all(buffer == 0.0)


def test_empty_piece_renders_no_frames () -> None:

	"""The empty piece has no samples."""

	assert scorecraft.render.FilePlayer().render(Piece()).shape == (1, 0)


def test_two_voices_normalised_to_gain () -> None:

	"""Mixing two notes peaks exactly at the output gain."""

	piece = Piece.of(dur.quarter(C4), dur.quarter(E4))
	config = scorecraft.render.FileOutputConfig(output_gain=0.8)

	buffer = scorecraft.render.FilePlayer(300, config).render(piece)

	assert buffer.shape == (1, 35280)
	assert numpy.max(numpy.abs(buffer)) == pytest.approx(0.8)


def test_tempo_changes_length () -> None:

	"""Halving the tempo doubles the rendered length."""

	piece = dur.quarter(C4).to_piece()
	config = scorecraft.render.FileOutputConfig(sample_rate=8000)

	fast = scorecraft.render.FilePlayer(300, config).render(piece)
	slow = scorecraft.render.FilePlayer(150, config).render(piece)

	assert slow.shape[1] == 2 * fast.shape[1] == 12800


def test_notes_are_placed_at_onsets () -> None:

	"""Nothing sounds before a note's onset."""

	line = dur.quarter(scorecraft.note.REST) + dur.quarter(C4)
	config = scorecraft.render.FileOutputConfig(sample_rate=8000)

	buffer = scorecraft.render.FilePlayer(300, config).render(line)

	assert numpy.all(buffer[:, :6400] == 0.0)
	assert numpy.max(numpy.abs(buffer[:, 6400:])) > 0.0


def test_render_to_wav (tmp_path: pathlib.Path) -> None:

	"""The WAV file is 16-bit PCM at the configured rate."""

	path = tmp_path / "out.wav"
	piece = Piece.of(dur.quarter(C4), scorecraft.timbre.drums(dur.quarter(C4)))

	scorecraft.render.FilePlayer(300).render_to_wav(piece, str(path))

	with wave.open(str(path), "rb") as f:
		assert f.getnchannels() == 1
		assert f.getsampwidth() == 2
		assert f.getframerate() == 44100
		assert f.getnframes() == 35280
		pcm = numpy.frombuffer(f.readframes(f.getnframes()), dtype=numpy.int16)

	assert numpy.max(numpy.abs(pcm)) == 32767


def test_stereo_sample_per_channel (write_wav: typing.Callable[..., str]) -> None:

	"""Per-channel normalisation brings each channel to the gain."""

	path = write_wav("stereo.wav", numpy.tile([0.5, 0.25], (6400, 1)), 8000)
	config = scorecraft.render.FileOutputConfig(sample_rate=8000)

	buffer = scorecraft.render.FilePlayer(300, config).render(_custom(path))

	assert buffer.shape == (2, 6400)
	assert numpy.allclose(buffer[0], 1.0)
	assert numpy.allclose(buffer[1], 1.0)


def test_stereo_sample_global (write_wav: typing.Callable[..., str]) -> None:

	"""Global normalisation keeps the balance between channels."""

	path = write_wav("stereo.wav", numpy.tile([0.5, 0.25], (6400, 1)), 8000)
	config = scorecraft.render.FileOutputConfig(sample_rate=8000, normalization="global")

	buffer = scorecraft.render.FilePlayer(300, config).render(_custom(path))

	assert numpy.allclose(buffer[0], 1.0)
	assert numpy.allclose(buffer[1], 0.5)


def test_mono_notes_spread_over_channels (write_wav: typing.Callable[..., str]) -> None:

	"""A mono note in a stereo mix is split evenly between the channels."""

	path = write_wav("stereo.wav", numpy.tile([0.5, 0.5], (6400, 1)), 8000)
	piece = Piece.of(_custom(path), dur.quarter(C4))
	config = scorecraft.render.FileOutputConfig(sample_rate=8000, normalization="global")

	buffer = scorecraft.render.FilePlayer(300, config).render(piece)

	assert buffer.shape == (2, 6400)
	assert numpy.allclose(buffer[0], buffer[1])


def test_sample_rate_conversion (write_wav: typing.Callable[..., str]) -> None:

	"""Samples at another rate are resampled to the note's length."""

	path = write_wav("slow.wav", numpy.tile([0.5, 0.25], (3200, 1)), 4000)
	config = scorecraft.render.FileOutputConfig(sample_rate=8000, normalization="global")

	buffer = scorecraft.render.FilePlayer(300, config).render(_custom(path))

	assert buffer.shape == (2, 6400)
	assert numpy.allclose(buffer[1], 0.5)


def test_missing_sample_renders_silence (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A render with a missing sample still completes, with a warning."""

	note = _custom(str(tmp_path / "missing.wav"))

	with caplog.at_level(logging.WARNING):
		buffer = scorecraft.render.FilePlayer(300, scorecraft.render.FileOutputConfig(sample_rate=8000)).render(note)

	assert buffer.shape == (1, 6400)
	assert numpy.all(buffer == 0.0)
	assert "missing.wav" in caplog.text
