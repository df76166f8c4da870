import pytest

import scorecraft.strings

TUNING = scorecraft.strings.GUITAR_TUNING


def test_standard_tuning_names () -> None:

	"""Open strings of standard tuning, highest first."""

	assert [p.name() for p in TUNING.pitches] == ["E4", "B3", "G3", "D3", "A2", "E2"]


def test_pitch_at () -> None:

	"""Each fret is one semitone."""

	assert TUNING.pitch_at(0, 5).name() == "A4"
	assert TUNING.pitch_at(5, 12).name() == "E3"


def test_chord_from_frets () -> None:

	"""A G major shape gives G, B and D tones."""

	chord = TUNING.chord_from_frets([3, 0, 0, 0, 2, 3])

	assert [p.name() for p in chord] == ["G4", "B3", "G3", "D3", "B2", "G2"]


def test_muted_strings_are_skipped () -> None:

	"""Muted strings give None in pitches and are left out of the chord."""

	frets = [None, 1, 0, 2, 3, None]

	assert TUNING.pitches_at_frets(frets)[0] is None
	assert len(TUNING.chord_from_frets(frets)) == 4


def test_fret_count_mismatch () -> None:

	"""A fret list must have one entry per string."""

	with pytest.raises(ValueError):
		TUNING.chord_from_frets([0, 1, 2])


def test_four_string_frets () -> None:

	"""Four-string shapes mute the two lowest strings."""

	frets = scorecraft.strings.four_string_frets([0, 1, 0, 2])

	assert frets == [0, 1, 0, 2, None, None]
	assert [p.name() for p in TUNING.chord_from_frets(frets)] == ["E4", "C4", "G3", "E3"]

	with pytest.raises(ValueError):
		scorecraft.strings.four_string_frets([0, 1])


def test_retuning () -> None:

	"""octave() and semitone() retune every string."""

	assert [p.name() for p in TUNING.semitone(-2).pitches] == ["D4", "A3", "F3", "C3", "G2", "D2"]
	assert TUNING.octave(-1).pitches[0].name() == "E3"
