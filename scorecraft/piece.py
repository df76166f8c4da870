"""Pieces: several lines played at the same time.

Operators::

    p + q        # add: q starts when p ends, track by track
    p * q        # layer two pieces (no length reconciliation)
    p * line     # layer a line, padding everything to a common length
    p * 4        # repeat

``Piece.add`` keeps every track time-aligned even when the two pieces have
different track counts: tracks missing on one side are filled with rests.
"""

from __future__ import annotations

import dataclasses
import itertools
import typing

import scorecraft.display
import scorecraft.line
import scorecraft.note
import scorecraft.timbre


@dataclasses.dataclass(frozen=True)
class Piece:

	"""
	An immutable collection of tracks (lines) that play simultaneously.
	"""

	tracks: typing.Tuple[scorecraft.line.Line, ...] = ()


	def __post_init__ (self) -> None:

		object.__setattr__(self, "tracks", tuple(self.tracks))


	@classmethod
	def of (cls, *parts: typing.Union[scorecraft.line.Line, scorecraft.note.Note]) -> Piece:

		"""
		Build a piece from lines or single notes, one track each.
		"""

		return cls(tuple(_as_line(part) for part in parts))


	# ------------------------------------------------------------------
	# Queries
	# ------------------------------------------------------------------

	def length (self) -> int:

		"""
		Length of the longest track, or 0 for the empty piece.
		"""

		return max((track.length() for track in self.tracks), default=0)


	def notes_starting_at (self, instant: int) -> typing.List[scorecraft.note.Note]:

		"""
		All notes, across every track, whose onset is exactly ``instant``.
		"""

		return [note for track in self.tracks for note in track.notes_starting_at(instant)]


	def notes_during (self, instant: int) -> typing.List[scorecraft.note.Note]:

		"""
		All notes, across every track, sounding at ``instant``.
		"""

		return [note for track in self.tracks for note in track.notes_during(instant)]


	# ------------------------------------------------------------------
	# Transformations
	# ------------------------------------------------------------------

	def volume (self, volume: float) -> Piece:

		return Piece(tuple(track.volume(volume) for track in self.tracks))


	def with_timbre (self, timbre: scorecraft.timbre.Timbre) -> Piece:

		return Piece(tuple(track.with_timbre(timbre) for track in self.tracks))


	# ------------------------------------------------------------------
	# Algebra
	# ------------------------------------------------------------------

	def add (self, other: Piece) -> Piece:

		"""Play ``other`` after this piece, pairing tracks by position.

		Paired tracks are first padded to their own piece's length and then
		concatenated, so ``other``'s pickups splice onto this piece's tracks.
		A track only in this piece is padded with ``other.length()`` of rest;
		a track only in ``other`` is padded to ``other.length()`` and gets
		``self.length()`` of rest in front.
		"""

		self_length = self.length()
		other_length = other.length()
		tracks: typing.List[scorecraft.line.Line] = []

		for first, second in itertools.zip_longest(self.tracks, other.tracks):

			if first is not None and second is not None:
				first = first.extend(self_length - first.length())
				second = second.extend(other_length - second.length())
				tracks.append(first.concat(second))

			elif first is not None:
				tracks.append(first.extend(other_length))

			else:
				second = second.extend(other_length - second.length())
				tracks.append(scorecraft.line.Line().extend(self_length).concat(second))

		return Piece(tuple(tracks))


	def layer (self, other: typing.Union[Piece, scorecraft.line.Line, scorecraft.note.Note], pad: bool = False) -> Piece:

		"""Play ``other`` on top of this piece as additional tracks.

		Layering a line (or note) pads every track, old and new, with trailing
		rests up to the longer of the two lengths. Layering a piece simply
		appends its tracks and leaves lengths alone unless ``pad`` is set.
		"""

		if isinstance(other, Piece):

			if not pad:
				return Piece(self.tracks + other.tracks)

			new_length = max(self.length(), other.length())
			return Piece(tuple(track.extend(new_length - track.length()) for track in self.tracks + other.tracks))

		line = _as_line(other)
		new_length = max(self.length(), line.length())

		return Piece(tuple(track.extend(new_length - track.length()) for track in self.tracks + (line,)))


	def repeat (self, times: int) -> Piece:

		"""
		Play this piece ``times`` times in a row. Zero gives the empty piece.
		"""

		if times < 0:
			raise ValueError("Repeat count cannot be negative")

		if times == 0:
			return Piece()

		result = self

		for _ in range(times - 1):
			result = result.add(self)

		return result


	# ------------------------------------------------------------------
	# Operators
	# ------------------------------------------------------------------

	def __add__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, Piece):
			return self.add(other)

		if isinstance(other, (scorecraft.line.Line, scorecraft.note.Note)):
			return self.add(Piece((_as_line(other),)))

		return NotImplemented


	def __mul__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, int) and not isinstance(other, bool):
			return self.repeat(other)

		if isinstance(other, (Piece, scorecraft.line.Line, scorecraft.note.Note)):
			return self.layer(other)

		return NotImplemented


	def __rmul__ (self, other: typing.Any) -> typing.Any:

		if isinstance(other, int) and not isinstance(other, bool):
			return self.repeat(other)

		return NotImplemented


	def __str__ (self) -> str:

		return scorecraft.display.render_score(self)


def _as_line (part: typing.Union[scorecraft.line.Line, scorecraft.note.Note]) -> scorecraft.line.Line:

	if isinstance(part, scorecraft.note.Note):
		return part.to_line()

	return part
