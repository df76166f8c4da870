"""Lines: notes played one after another.

A ``Line`` holds its ``main`` notes plus an optional ``pickup``. The pickup
only sounds when the line is concatenated onto a predecessor: it overwrites
the tail of the previous line, so the main notes still land on the beat.
``hold_pickup`` ties the last note before the join through the first main
note.

Operators::

    a + b        # concat: b's pickup is spliced onto the end of a
    a * 3        # repeat: a + a + a, each join using a's own pickup
    a * b        # stack into a two-track Piece
    -a           # turn the main notes into a pickup
    ~a           # hold the pickup into the first main note

A line's length never includes its pickup.
"""

from __future__ import annotations

import dataclasses
import typing

import scorecraft.note
import scorecraft.piece
import scorecraft.timbre


@dataclasses.dataclass(frozen=True)
class Line:

	"""
	An immutable sequence of notes with an optional pickup.
	"""

	main: typing.Tuple[scorecraft.note.Note, ...] = ()
	pickup: typing.Tuple[scorecraft.note.Note, ...] = ()
	hold_pickup: bool = False


	def __post_init__ (self) -> None:

		# Accept any iterable but always store tuples.
		object.__setattr__(self, "main", tuple(self.main))
		object.__setattr__(self, "pickup", tuple(self.pickup))


	@classmethod
	def of (cls, *notes: scorecraft.note.Note) -> Line:

		return cls(notes)


	# ------------------------------------------------------------------
	# Queries
	# ------------------------------------------------------------------

	def length (self) -> int:

		"""
		Total duration of the main notes. The pickup is not counted.
		"""

		return sum(note.duration for note in self.main)


	def pickup_length (self) -> int:

		return sum(note.duration for note in self.pickup)


	def onsets (self) -> typing.Iterator[typing.Tuple[int, scorecraft.note.Note]]:

		"""
		Yield ``(onset, note)`` for every main note, in order.
		"""

		time = 0

		for note in self.main:
			yield time, note
			time += note.duration


	def notes_starting_at (self, instant: int) -> typing.List[scorecraft.note.Note]:

		"""
		Return the main notes whose onset is exactly ``instant``.
		"""

		return [note for onset, note in self.onsets() if onset == instant]


	def notes_during (self, instant: int) -> typing.List[scorecraft.note.Note]:

		"""
		Return the main notes sounding at ``instant`` (onset <= instant < onset + duration).
		"""

		return [note for onset, note in self.onsets() if onset <= instant < onset + note.duration]


	# ------------------------------------------------------------------
	# Transformations
	# ------------------------------------------------------------------

	def volume (self, volume: float) -> Line:

		"""
		Set the volume of every pitched note, pickup included.
		"""

		return Line(
			main = tuple(note.volume(volume) for note in self.main),
			pickup = tuple(note.volume(volume) for note in self.pickup),
			hold_pickup = self.hold_pickup
		)


	def with_timbre (self, timbre: scorecraft.timbre.Timbre) -> Line:

		return Line(
			main = tuple(note.with_timbre(timbre) for note in self.main),
			pickup = tuple(note.with_timbre(timbre) for note in self.pickup),
			hold_pickup = self.hold_pickup
		)


	def as_pickup (self) -> Line:

		"""
		Move the main notes into the pickup and clear the main sequence.
		"""

		return Line(main=(), pickup=self.main, hold_pickup=self.hold_pickup)


	def hold_into (self) -> Line:

		"""
		Mark the pickup to be held into the first main note.
		"""

		return dataclasses.replace(self, hold_pickup=True)


	def extend (self, extend_by: int) -> Line:

		"""
		Append a rest of ``extend_by`` units.
		"""

		if extend_by == 0:
			return self

		return self.concat(Line((scorecraft.note.Note(extend_by, scorecraft.note.REST),)))


	# ------------------------------------------------------------------
	# Algebra
	# ------------------------------------------------------------------

	def concat (self, other: Line) -> Line:

		"""Splice ``other`` onto the end of this line.

		``other``'s pickup replaces the same amount of time at the end of this
		line. Trailing notes that fit inside the pickup are dropped; a note
		straddling the boundary is shortened. When ``other.hold_pickup`` is
		set, the last note before ``other``'s main notes absorbs the duration
		of the first main note, which is then dropped.

		The result keeps this line's own pickup and hold flag.

		Example:
			```python
			verse = quarter(C4) + quarter(D4)
			answer = Line(main=(quarter(E4),), pickup=(eighth(G4),))
			verse + answer   # C4 (4), D4 (2), G4 (2), E4 (4)
			```
		"""

		notes = list(self.main)
		pickup_length = other.pickup_length()
		time_removed = 0

		while notes and time_removed < pickup_length:

			last = notes[-1]

			if pickup_length >= time_removed + last.duration:
				time_removed += last.duration
				notes.pop()
			else:
				notes[-1] = last.with_duration(last.duration - (pickup_length - time_removed))
				break

		notes.extend(other.pickup)

		following = list(other.main)

		if other.hold_pickup and notes and following:
			tied = notes[-1]
			notes[-1] = tied.with_duration(tied.duration + following[0].duration)
			following.pop(0)

		return Line(
			main = tuple(notes) + tuple(following),
			pickup = self.pickup,
			hold_pickup = self.hold_pickup
		)


	def repeat (self, times: int) -> Line:

		"""Concatenate this line onto itself ``times`` times.

		Each join applies this line's pickup again, so a line with a pickup
		splices itself rhythmically on every repetition. ``times == 0`` gives
		the empty line.
		"""

		if times < 0:
			raise ValueError("Repeat count cannot be negative")

		if times == 0:
			return Line()

		result = self

		for _ in range(times - 1):
			result = result.concat(self)

		return result


	def stack (self, other: Line) -> scorecraft.piece.Piece:

		"""
		Play ``other`` at the same time as this line. No length reconciliation.
		"""

		return scorecraft.piece.Piece((self, other))


	def to_piece (self) -> scorecraft.piece.Piece:

		return scorecraft.piece.Piece((self,))


	# ------------------------------------------------------------------
	# Operators
	# ------------------------------------------------------------------

	def __add__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, Line):
			return self.concat(other)

		if isinstance(other, scorecraft.note.Note):
			return self.concat(other.to_line())

		if isinstance(other, scorecraft.piece.Piece):
			return self.to_piece().add(other)

		return NotImplemented


	def __mul__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, int) and not isinstance(other, bool):
			return self.repeat(other)

		if isinstance(other, Line):
			return self.stack(other)

		if isinstance(other, scorecraft.note.Note):
			return self.stack(other.to_line())

		return NotImplemented


	def __rmul__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, int) and not isinstance(other, bool):
			return self.repeat(other)

		return NotImplemented


	def __neg__ (self) -> Line:

		return self.as_pickup()


	def __invert__ (self) -> Line:

		return self.hold_into()


	def __str__ (self) -> str:

		text = f"Line[{len(self.main)} notes"

		if self.pickup:
			text += f", {len(self.pickup)} pickup"

		return text + "]"
