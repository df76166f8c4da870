"""Pitch value type and 12-tone equal temperament helpers.

A ``Pitch`` is a frequency in Hz. Transposition is multiplicative, so every
operation returns a new ``Pitch`` and the original is never touched::

    import scorecraft.pitch

    c4 = scorecraft.pitch.C4
    c5 = c4.octave(1)          # 523.252 Hz
    e4 = c4.semitone(4)        # ~329.63 Hz
    c4.name()                  # "C4"
"""

from __future__ import annotations

import dataclasses
import math
import typing


NOTE_NAMES: typing.List[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

A4_FREQUENCY = 440.0
C4_FREQUENCY = 261.626


@dataclasses.dataclass(frozen=True)
class Pitch:

	"""
	A positive frequency in Hz.
	"""

	frequency: float


	def __post_init__ (self) -> None:

		if not math.isfinite(self.frequency) or self.frequency <= 0:
			raise ValueError(f"Pitch frequency must be positive and finite, got {self.frequency!r}")


	def octave (self, change: int) -> Pitch:

		"""
		Return this pitch moved by ``change`` octaves (a factor of ``2 ** change``).
		"""

		return Pitch(self.frequency * 2.0 ** change)


	def semitone (self, change: float) -> Pitch:

		"""
		Return this pitch moved by ``change`` equal-tempered semitones.
		"""

		return Pitch(self.frequency * 2.0 ** (change / 12.0))


	def semitones (self, changes: typing.Iterable[float]) -> typing.List[Pitch]:

		"""Return one transposed pitch per semitone offset.

		Example:
			```python
			c4, e4, g4 = C4.semitones([0, 4, 7])
			```
		"""

		return [self.semitone(change) for change in changes]


	def semitones_from (self, other: Pitch) -> float:

		"""
		Return the (fractional) number of semitones from ``other`` up to this pitch.
		"""

		return 12.0 * math.log2(self.frequency / other.frequency)


	def name (self, a4: float = A4_FREQUENCY) -> str:

		"""Return the nearest note name with octave number, e.g. ``"C4"`` or ``"A#5"``.

		Parameters:
			a4: Reference frequency for A4. C4 is derived from it (three
				semitones up, one octave down).
		"""

		c4 = a4 * 2.0 ** (3 / 12.0) / 2.0
		offset = round(12.0 * math.log2(self.frequency / c4))

		return f"{NOTE_NAMES[offset % 12]}{4 + offset // 12}"


	def pitch_class_name (self, a4: float = A4_FREQUENCY) -> str:

		"""
		Return the note name without its octave number.
		"""

		return self.name(a4).rstrip("-0123456789")


	def __float__ (self) -> float:

		return self.frequency


	def __str__ (self) -> str:

		return f"{self.name()}: {self.frequency:.2f}Hz"


A4 = Pitch(A4_FREQUENCY)
C4 = Pitch(C4_FREQUENCY)
