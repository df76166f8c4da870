"""Fretted string instrument helpers.

A ``StringTuning`` lists the open-string pitches, highest string first.
Frets are given per string, with ``None`` for a muted string::

    import scorecraft.strings

    tuning = scorecraft.strings.GUITAR_TUNING
    g_major = tuning.chord_from_frets([3, 0, 0, 0, 2, 3])   # G, B, G, D, B, G
"""

import dataclasses
import typing

import scorecraft.chord
import scorecraft.pitch


Frets = typing.Sequence[typing.Optional[int]]


GUITAR_HIGH_E = scorecraft.pitch.Pitch(329.6)
GUITAR_B = scorecraft.pitch.Pitch(246.9)
GUITAR_G = scorecraft.pitch.Pitch(196.0)
GUITAR_D = scorecraft.pitch.Pitch(146.8)
GUITAR_A = scorecraft.pitch.Pitch(110.0)
GUITAR_LOW_E = scorecraft.pitch.Pitch(82.41)


@dataclasses.dataclass(frozen=True)
class StringTuning:

	"""
	Open-string pitches, one per string, highest string first.
	"""

	pitches: typing.Tuple[scorecraft.pitch.Pitch, ...]


	def __post_init__ (self) -> None:

		object.__setattr__(self, "pitches", tuple(self.pitches))

		if not self.pitches:
			raise ValueError("A tuning needs at least one string")


	@property
	def string_count (self) -> int:

		return len(self.pitches)


	def pitch_at (self, string: int, fret: int) -> scorecraft.pitch.Pitch:

		"""
		Pitch of ``string`` (0 = highest) stopped at ``fret``. Raises ``IndexError`` for an unknown string.
		"""

		return self.pitches[string].semitone(fret)


	def pitches_at_frets (self, frets: Frets) -> typing.List[typing.Optional[scorecraft.pitch.Pitch]]:

		"""Resolve a fret list to pitches, keeping ``None`` for muted strings.

		Raises:
			ValueError: If ``frets`` does not have one entry per string.
		"""

		if len(frets) != self.string_count:
			raise ValueError(f"Expected {self.string_count} frets, got {len(frets)}")

		return [None if fret is None else self.pitch_at(string, fret) for string, fret in enumerate(frets)]


	def chord_from_frets (self, frets: Frets) -> scorecraft.chord.Chord:

		"""
		The chord sounded by ``frets``, muted strings left out.
		"""

		return scorecraft.chord.Chord(tuple(pitch for pitch in self.pitches_at_frets(frets) if pitch is not None))


	def octave (self, change: int) -> "StringTuning":

		return StringTuning(tuple(pitch.octave(change) for pitch in self.pitches))


	def semitone (self, change: float) -> "StringTuning":

		"""
		Retune every string, e.g. ``semitone(-1)`` for a half-step-down guitar or a capo with a positive value.
		"""

		return StringTuning(tuple(pitch.semitone(change) for pitch in self.pitches))


GUITAR_TUNING = StringTuning((GUITAR_HIGH_E, GUITAR_B, GUITAR_G, GUITAR_D, GUITAR_A, GUITAR_LOW_E))


def four_string_frets (frets: typing.Sequence[int]) -> typing.List[typing.Optional[int]]:

	"""Guitar frets for the four highest strings, with the two lowest muted.

	Example:
		```python
		GUITAR_TUNING.chord_from_frets(four_string_frets([0, 1, 0, 2]))   # C major, no bass strings
		```
	"""

	if len(frets) != 4:
		raise ValueError(f"Expected 4 frets, got {len(frets)}")

	return list(frets) + [None, None]
