"""Timbres select the synthesis strategy used for a pitched note.

Built-in timbres are module constants (``SINE``, ``BASS``, ``PIANO``,
``ELECTRIC_GUITAR``, ``DRUMS``). Custom timbres point at an audio file::

    import scorecraft.timbre

    vox = scorecraft.timbre.Timbre.custom_pitched("samples/ah.wav")

The helper functions (``piano()``, ``drums()`` ...) re-voice anything that
has a ``with_timbre`` method: note kinds, notes, lines and pieces.

Drums are played by pitch range. The kit is classified against C4:

- above F#5 → crash
- above F#4 → hi-hat
- below F#3 → kick
- otherwise → snare
"""

from __future__ import annotations

import dataclasses
import typing

import scorecraft.pitch


SINE_KIND = "sine"
BASS_KIND = "bass"
PIANO_KIND = "piano"
ELECTRIC_GUITAR_KIND = "electric_guitar"
DRUMS_KIND = "drums"
CUSTOM_UNPITCHED_KIND = "custom_unpitched"
CUSTOM_PITCHED_KIND = "custom_pitched"

BUILTIN_KINDS: typing.Tuple[str, ...] = (SINE_KIND, BASS_KIND, PIANO_KIND, ELECTRIC_GUITAR_KIND, DRUMS_KIND)
CUSTOM_KINDS: typing.Tuple[str, ...] = (CUSTOM_UNPITCHED_KIND, CUSTOM_PITCHED_KIND)

CRASH = "crash"
HI_HAT = "hi-hat"
SNARE = "snare"
KICK = "kick"

# Top to bottom, the order the score display uses.
DRUM_KINDS: typing.Tuple[str, ...] = (CRASH, HI_HAT, SNARE, KICK)


T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Timbre:

	"""
	A synthesis strategy tag, plus a file path for the custom kinds.
	"""

	kind: str
	source: typing.Optional[str] = None


	def __post_init__ (self) -> None:

		if self.kind in BUILTIN_KINDS:
			if self.source is not None:
				raise ValueError(f"Timbre {self.kind!r} does not take a source file")
		elif self.kind in CUSTOM_KINDS:
			if not self.source:
				raise ValueError(f"Timbre {self.kind!r} requires a source file")
		else:
			raise ValueError(f"Unknown timbre kind: {self.kind!r}")


	@classmethod
	def custom_unpitched (cls, path: str) -> Timbre:

		"""
		A sample played at its recorded pitch and speed.
		"""

		return cls(CUSTOM_UNPITCHED_KIND, str(path))


	@classmethod
	def custom_pitched (cls, path: str) -> Timbre:

		"""
		A sample recorded at C4 and re-pitched by playback speed.
		"""

		return cls(CUSTOM_PITCHED_KIND, str(path))


	@property
	def is_drums (self) -> bool:

		return self.kind == DRUMS_KIND


SINE = Timbre(SINE_KIND)
BASS = Timbre(BASS_KIND)
PIANO = Timbre(PIANO_KIND)
ELECTRIC_GUITAR = Timbre(ELECTRIC_GUITAR_KIND)
DRUMS = Timbre(DRUMS_KIND)


def drum_kind (frequency: float) -> str:

	"""Classify a frequency into one of the four kit pieces.

	Example:
		```python
		drum_kind(scorecraft.pitch.C4.octave(-1).frequency)  # "kick"
		drum_kind(scorecraft.pitch.C4.frequency)             # "snare"
		```
	"""

	c4 = scorecraft.pitch.C4

	if frequency > c4.octave(1).semitone(6).frequency:
		return CRASH

	if frequency > c4.semitone(6).frequency:
		return HI_HAT

	if frequency < c4.semitone(-6).frequency:
		return KICK

	return SNARE


def with_timbre (target: T, timbre: Timbre) -> T:

	"""
	Return ``target`` re-voiced with ``timbre``. Rests are left alone.
	"""

	return target.with_timbre(timbre)  # type: ignore[attr-defined]


def sine (target: T) -> T:

	return with_timbre(target, SINE)


def bass (target: T) -> T:

	return with_timbre(target, BASS)


def piano (target: T) -> T:

	return with_timbre(target, PIANO)


def electric_guitar (target: T) -> T:

	return with_timbre(target, ELECTRIC_GUITAR)


def drums (target: T) -> T:

	return with_timbre(target, DRUMS)
