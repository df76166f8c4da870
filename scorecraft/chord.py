"""Chords as ordered collections of pitches.

A ``Chord`` keeps its pitches in insertion order and allows duplicates. Shapes
are usually written as semitone offsets from C4 and then transposed onto a
target pitch so that the lowest chord tone lands on it::

    import scorecraft.chord
    import scorecraft.pitch

    major = scorecraft.chord.Chord.shape_from_semitone_offsets([4, 7])
    a_major = major.transpose_to(scorecraft.pitch.A4)   # A4, C#5, E5

``with_chord_shape()`` applies a shape to a pitch, a note or a whole line.
"""

from __future__ import annotations

import dataclasses
import functools
import typing

import scorecraft.line
import scorecraft.note
import scorecraft.piece
import scorecraft.pitch

if typing.TYPE_CHECKING:
	import scorecraft.scales


Striker = typing.Callable[["scorecraft.pitch.Pitch"], "scorecraft.line.Line"]


CHORD_SHAPES: typing.Dict[str, typing.List[int]] = {
	"major": [4, 7],
	"minor": [3, 7],
	"diminished": [3, 6],
	"augmented": [4, 8],
	"dominant_7th": [4, 7, 10],
	"major_7th": [4, 7, 11],
	"minor_7th": [3, 7, 10],
	"sus2": [2, 7],
	"sus4": [5, 7],
	"power": [7],
}


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	An ordered tuple of pitches.
	"""

	pitches: typing.Tuple[scorecraft.pitch.Pitch, ...] = ()


	def __post_init__ (self) -> None:

		object.__setattr__(self, "pitches", tuple(self.pitches))


	@classmethod
	def from_degrees (cls, scale: scorecraft.scales.Scale, degrees: typing.Iterable[int]) -> Chord:

		"""
		Build a chord from scale degrees, e.g. ``[1, 3, 5]`` for a triad.
		"""

		return cls(tuple(scale.degrees(degrees)))


	@classmethod
	def shape_from_semitone_offsets (cls, semitones: typing.Iterable[int]) -> Chord:

		"""Build a chord shape anchored on C4.

		C4 is always included, so only the offsets above it are given.

		Example:
			```python
			Chord.shape_from_semitone_offsets([4, 7])   # C4, E4, G4
			```
		"""

		c4 = scorecraft.pitch.C4

		return cls((c4,) + tuple(c4.semitone(offset) for offset in semitones))


	@classmethod
	def shape (cls, name: str) -> Chord:

		"""
		Look up a named shape from ``CHORD_SHAPES``.
		"""

		if name not in CHORD_SHAPES:
			raise ValueError(f"Unknown chord shape: {name!r}")

		return cls.shape_from_semitone_offsets(CHORD_SHAPES[name])


	def transpose_to (self, target: scorecraft.pitch.Pitch) -> Chord:

		"""
		Scale every pitch so that the lowest pitch becomes ``target``. An empty chord is returned unchanged.
		"""

		if not self.pitches:
			return self

		ratio = target.frequency / min(pitch.frequency for pitch in self.pitches)

		return Chord(tuple(scorecraft.pitch.Pitch(pitch.frequency * ratio) for pitch in self.pitches))


	def octave (self, change: int) -> Chord:

		return Chord(tuple(pitch.octave(change) for pitch in self.pitches))


	def semitone (self, change: float) -> Chord:

		return Chord(tuple(pitch.semitone(change) for pitch in self.pitches))


	def strike (self, striker: Striker) -> scorecraft.piece.Piece:

		"""Turn each chord tone into a track using ``striker``.

		A striker is any callable from a pitch to a line, for example
		``lambda p: piano(quarter(p) + quarter(p))``.
		"""

		return scorecraft.piece.Piece(tuple(striker(pitch) for pitch in self.pitches))


	def with_length (self, duration: int) -> scorecraft.piece.Piece:

		"""
		One single-note sine track per chord tone, all ``duration`` long.
		"""

		return scorecraft.piece.Piece(tuple(
			scorecraft.note.Note(duration, scorecraft.note.Pitched(pitch)).to_line()
			for pitch in self.pitches
		))


	def __len__ (self) -> int:

		return len(self.pitches)


	def __iter__ (self) -> typing.Iterator[scorecraft.pitch.Pitch]:

		return iter(self.pitches)


@typing.overload
def with_chord_shape (target: scorecraft.pitch.Pitch, shape: Chord) -> Chord: ...

@typing.overload
def with_chord_shape (target: typing.Union[scorecraft.note.Note, scorecraft.line.Line], shape: Chord) -> scorecraft.piece.Piece: ...

def with_chord_shape (target: typing.Any, shape: Chord) -> typing.Any:

	"""Apply a chord shape to a pitch, note or line.

	- A pitch gives the transposed ``Chord``.
	- A pitched note gives a ``Piece`` with one track per chord tone, each
	  keeping the note's duration, timbre and volume. A rest gives a
	  one-track piece holding that rest.
	- A line gives the per-note pieces joined one after another.

	Example:
		```python
		minor = Chord.shape("minor")
		with_chord_shape(piano(half(A4)), minor)   # three piano tracks: A4, C5, E5
		```
	"""

	if isinstance(target, scorecraft.pitch.Pitch):
		return shape.transpose_to(target)

	if isinstance(target, scorecraft.note.Note):

		if isinstance(target.kind, scorecraft.note.Rest):
			return scorecraft.piece.Piece((target.to_line(),))

		chord = shape.transpose_to(target.kind.pitch)

		return scorecraft.piece.Piece(tuple(
			scorecraft.note.Note(target.duration, dataclasses.replace(target.kind, pitch=pitch)).to_line()
			for pitch in chord.pitches
		))

	if isinstance(target, scorecraft.line.Line):
		pieces = [with_chord_shape(note, shape) for note in target.main]
		return functools.reduce(scorecraft.piece.Piece.add, pieces, scorecraft.piece.Piece())

	raise TypeError(f"Cannot apply a chord shape to {type(target).__name__}")
