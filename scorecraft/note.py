"""Notes: the atomic timed events everything else is built from.

A ``Note`` is a duration in abstract units (1 = a sixteenth note) plus a
kind, which is either ``REST`` or a ``Pitched`` payload carrying the pitch,
timbre and volume.

Adding notes gives a ``Line``; multiplying two notes stacks them into a
two-track ``Piece``::

    import scorecraft.durations as dur
    import scorecraft.pitch

    line = dur.quarter(scorecraft.pitch.C4) + dur.quarter(scorecraft.note.REST)
    riff = dur.eighth(scorecraft.pitch.C4) * 4
"""

from __future__ import annotations

import dataclasses
import typing

import scorecraft.line
import scorecraft.piece
import scorecraft.pitch
import scorecraft.timbre


MAX_NOTE_DURATION = 0xFFFF


class InvalidDuration (ValueError):

	"""
	Raised when duration arithmetic leaves the range of a note length.
	"""


def check_duration (duration: int) -> int:

	"""Validate a single note duration and return it.

	Raises:
		InvalidDuration: If ``duration`` is not an integer in
			``0..MAX_NOTE_DURATION``.
	"""

	if isinstance(duration, bool) or not isinstance(duration, int):
		raise InvalidDuration(f"Note duration must be an integer, got {duration!r}")

	if duration < 0:
		raise InvalidDuration(f"Note duration cannot be negative, got {duration}")

	if duration > MAX_NOTE_DURATION:
		raise InvalidDuration(f"Note duration {duration} exceeds the maximum of {MAX_NOTE_DURATION}")

	return duration


@dataclasses.dataclass(frozen=True)
class Rest:

	"""
	Silence. Timbre and volume changes have no effect on it.
	"""


	def with_timbre (self, timbre: scorecraft.timbre.Timbre) -> Rest:

		return self


	def with_volume (self, volume: float) -> Rest:

		return self


	def with_length (self, duration: int) -> Note:

		return Note(duration, self)


	def __str__ (self) -> str:

		return "Rest"


REST = Rest()


@dataclasses.dataclass(frozen=True)
class Pitched:

	"""
	A sounding payload: pitch, timbre and volume (1.0 is nominal, may exceed 1.0).
	"""

	pitch: scorecraft.pitch.Pitch
	timbre: scorecraft.timbre.Timbre = scorecraft.timbre.SINE
	volume: float = 1.0


	def with_timbre (self, timbre: scorecraft.timbre.Timbre) -> Pitched:

		return dataclasses.replace(self, timbre=timbre)


	def with_volume (self, volume: float) -> Pitched:

		return dataclasses.replace(self, volume=volume)


	def with_length (self, duration: int) -> Note:

		return Note(duration, self)


	def __str__ (self) -> str:

		return f"{self.pitch.name()} {self.timbre.kind} x{self.volume:g}"


NoteKind = typing.Union[Rest, Pitched]


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A duration paired with a rest or a pitched payload.
	"""

	duration: int
	kind: NoteKind = REST


	def __post_init__ (self) -> None:

		check_duration(self.duration)


	@property
	def is_rest (self) -> bool:

		return isinstance(self.kind, Rest)


	def length (self) -> int:

		return self.duration


	def notes_starting_at (self, instant: int) -> typing.List[Note]:

		"""
		A single note starts at instant 0 and nowhere else.
		"""

		return [self] if instant == 0 else []


	def with_duration (self, duration: int) -> Note:

		return Note(duration, self.kind)


	def with_length (self, duration: int) -> Note:

		return self.with_duration(duration)


	def with_timbre (self, timbre: scorecraft.timbre.Timbre) -> Note:

		return Note(self.duration, self.kind.with_timbre(timbre))


	def volume (self, volume: float) -> Note:

		"""Return a copy with its volume set to ``volume``.

		This sets the volume, it does not scale it. Rests come back unchanged.

		Example:
			```python
			loud = note.volume(0.5).volume(2.0)   # volume is 2.0, not 1.0
			```
		"""

		return Note(self.duration, self.kind.with_volume(volume))


	def to_line (self) -> scorecraft.line.Line:

		return scorecraft.line.Line((self,))


	def to_piece (self) -> scorecraft.piece.Piece:

		return scorecraft.piece.Piece((self.to_line(),))


	def __add__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, (Note, scorecraft.line.Line)):
			return self.to_line() + other

		return NotImplemented


	def __mul__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, int) and not isinstance(other, bool):
			if other < 0:
				raise ValueError("Repeat count cannot be negative")
			return scorecraft.line.Line((self,) * other)

		if isinstance(other, Note):
			return self.to_line().stack(other.to_line())

		if isinstance(other, scorecraft.line.Line):
			return self.to_line().stack(other)

		return NotImplemented


	def __rmul__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, int) and not isinstance(other, bool):
			return self.__mul__(other)

		return NotImplemented


	def __str__ (self) -> str:

		return f"{self.duration}x {self.kind}"
