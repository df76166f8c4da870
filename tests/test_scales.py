import pytest

import scorecraft.pitch
import scorecraft.scales

C4 = scorecraft.pitch.C4
A4 = scorecraft.pitch.A4


def test_major_degrees () -> None:

	"""Degrees 1-8 of C major walk up to the next C."""

	scale = scorecraft.scales.major_scale(C4)

	assert [p.name() for p in scale.degrees(range(1, 9))] == ["C4", "D4", "E4", "F4", "G4", "A4", "B4", "C5"]


def test_degree_zero_is_root () -> None:

	"""Degree 0 gives the root, like degree 1."""

	scale = scorecraft.scales.major_scale(C4)

	assert scale.degree(0) == scale.degree(1)


def test_negative_degrees_go_down () -> None:

	"""Negative degrees step down through the previous octave."""

	scale = scorecraft.scales.major_scale(C4)

	assert [p.name() for p in scale.degrees([-1, -2, -7])] == ["B3", "A3", "C3"]


def test_high_degrees_wrap_octaves () -> None:

	"""Degree 15 is two octaves above the root."""

	scale = scorecraft.scales.minor_scale(A4)

	assert scale.degree(15).frequency == pytest.approx(1760.0)


@pytest.mark.parametrize("builder, names", [
	(scorecraft.scales.minor_scale, ["A4", "B4", "C5", "D5", "E5", "F5", "G5"]),
	(scorecraft.scales.aeolian_scale, ["A4", "B4", "C5", "D5", "E5", "F5", "G5"]),
	(scorecraft.scales.dorian_scale, ["A4", "B4", "C5", "D5", "E5", "F#5", "G5"]),
	(scorecraft.scales.phrygian_scale, ["A4", "A#4", "C5", "D5", "E5", "F5", "G5"]),
	(scorecraft.scales.lydian_scale, ["A4", "B4", "C#5", "D#5", "E5", "F#5", "G#5"]),
	(scorecraft.scales.mixolydian_scale, ["A4", "B4", "C#5", "D5", "E5", "F#5", "G5"]),
	(scorecraft.scales.locrian_scale, ["A4", "A#4", "C5", "D5", "D#5", "F5", "G5"]),
	(scorecraft.scales.ionian_scale, ["A4", "B4", "C#5", "D5", "E5", "F#5", "G#5"]),
])
def test_modes (builder: object, names: list) -> None:

	"""Each mode has its own step pattern."""

	scale = builder(A4)

	assert [p.name() for p in scale.degrees(range(1, 8))] == names


def test_unknown_scale_name () -> None:

	"""Asking for an unknown scale raises a ValueError."""

	with pytest.raises(ValueError):
		scorecraft.scales.Scale.named("bebop", C4)


def test_pattern_must_have_seven_steps () -> None:

	"""Patterns must have exactly seven intervals."""

	with pytest.raises(ValueError):
		scorecraft.scales.Scale(C4, (2, 2, 2, 2, 2, 2))
