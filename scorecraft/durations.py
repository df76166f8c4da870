"""Note length helpers.

Durations are integer units where 1 unit is a sixteenth note::

    SIXTEENTH = 1   EIGHTH = 2   QUARTER = 4
    HALF = 8        WHOLE = 16   DOUBLE_WHOLE = 32

The length functions turn pitches, note kinds, notes and chords into timed
material::

    import scorecraft.durations as dur

    dur.quarter(C4)                 # Pitch -> sine Note, 4 units
    dur.eighth(REST)                # Rest  -> Note, 2 units
    dur.half(Chord([C4, E4]))       # Chord -> Piece, one track per tone
    dur.dotted(dur.quarter)(C4)     # 6 units
    dur.tie(dur.half, dur.eighth)(C4)   # 10 units

Shorter subdivisions are not supported; raise the tempo instead.
"""

import typing

import scorecraft.chord
import scorecraft.note
import scorecraft.piece
import scorecraft.pitch


SIXTEENTH = 1
EIGHTH = 2
QUARTER = 4
HALF = 8
WHOLE = 16
DOUBLE_WHOLE = 32


LengthFunction = typing.Callable[[typing.Any], typing.Any]


def with_length (target: typing.Any, duration: int) -> typing.Any:

	"""Give ``target`` a duration.

	Parameters:
		target: A ``Pitch`` (becomes a sine note at volume 1.0), a note kind,
			a ``Note`` (re-timed) or a ``Chord`` (becomes a ``Piece``).
		duration: Length in units.

	Raises:
		InvalidDuration: If ``duration`` is not a valid note length.
		TypeError: If ``target`` cannot be given a length.
	"""

	if isinstance(target, scorecraft.pitch.Pitch):
		return scorecraft.note.Note(duration, scorecraft.note.Pitched(target))

	if isinstance(target, (scorecraft.note.Note, scorecraft.note.Rest, scorecraft.note.Pitched, scorecraft.chord.Chord)):
		return target.with_length(duration)

	raise TypeError(f"Cannot give a length to {type(target).__name__}")


def length_of (timed: typing.Any) -> int:

	"""
	Return the length of a note or piece produced by a length function.
	"""

	if isinstance(timed, scorecraft.note.Note):
		return timed.duration

	if isinstance(timed, scorecraft.piece.Piece):
		return timed.length()

	raise TypeError(f"Cannot measure the length of {type(timed).__name__}")


def sixteenth (target: typing.Any) -> typing.Any:

	return with_length(target, SIXTEENTH)


def eighth (target: typing.Any) -> typing.Any:

	return with_length(target, EIGHTH)


def quarter (target: typing.Any) -> typing.Any:

	return with_length(target, QUARTER)


def half (target: typing.Any) -> typing.Any:

	return with_length(target, HALF)


def whole (target: typing.Any) -> typing.Any:

	return with_length(target, WHOLE)


def double_whole (target: typing.Any) -> typing.Any:

	return with_length(target, DOUBLE_WHOLE)


def dotted (length_fn: LengthFunction) -> LengthFunction:

	"""Return a length function one and a half times as long as ``length_fn``.

	Example:
		```python
		dotted(quarter)(C4).duration   # 6
		dotted(half)(REST).duration    # 12
		```
	"""

	def apply (target: typing.Any) -> typing.Any:

		base = length_of(length_fn(target))
		return with_length(target, base + base // 2)

	return apply


def tie (first_fn: LengthFunction, second_fn: LengthFunction) -> LengthFunction:

	"""Return a length function lasting as long as both arguments together.

	Example:
		```python
		tie(quarter, eighth)(A4).duration     # 6
		tie(tie(half, half), whole)(REST)     # 32 units of rest
		```
	"""

	def apply (target: typing.Any) -> typing.Any:

		return with_length(target, length_of(first_fn(target)) + length_of(second_fn(target)))

	return apply
