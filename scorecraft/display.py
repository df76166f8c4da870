"""Fixed-width text score for a piece.

The score is split into groups of 64 units (four bars of sixteenths). Each
group is a box 75 columns wide: a piano roll with one row per semitone around
the sounding pitched notes, then a four-row drum grid. It looks like::

	══════════════════════════════════════════════════════════════════════════╗
	 F4 ║█║░░░░░░░░░░░░░░░░|░░░░░░░░░░░░░░░░|░░░░░░░░░░░░░░░░|░░░░░░░░░░░░░░░░║
	!E4 ║█║■≡≡≡░░░░░░░░░░░░|░░░░░░░░░░░░░░░░|░░░░░░░░░░░░░░░░|░░░░░░░░░░░░░░░░║
	 D#4║ ║                |                |                |                ║
	...
	══════════════════════════════════════════════════════════════════════════╣
	crash ║                |                |                |                ║
	hi-hat║■ ■ ■ ■ ■ ■ ■ ■ |...
	══════════════════════════════════════════════════════════════════════════╝

``■`` marks an onset, ``≡`` a sustained note, ``|`` every 16 units. Rows for
the open strings of a standard guitar are flagged with ``!``.
"""

from __future__ import annotations

import math
import typing

import scorecraft.note
import scorecraft.pitch
import scorecraft.timbre

if typing.TYPE_CHECKING:
	import scorecraft.piece


GROUP_LENGTH = 64
BAR_LENGTH = 16
BOX_WIDTH = 74

ONSET = "■"
SUSTAIN = "≡"
WHITE_KEY_BLANK = "░"
BLACK_KEY_BLANK = " "

_BLACK_KEYS = [False, True, False, True, False, False, True, False, True, False, True, False]

# Semitones from C4 of E4, B3, G3, D3, A2 and E2.
_OPEN_STRING_SEMITONES = (4, -1, -5, -10, -15, -20)

# Half a semitone either side of a row still counts as that row.
_ROW_TOLERANCE = 2.0 ** (1.0 / 24.0) - 1.0


def _semitones_from_c4 (frequency: float) -> int:

	return round(12.0 * math.log2(frequency / scorecraft.pitch.C4_FREQUENCY))


def _pitched (note: scorecraft.note.Note) -> typing.Optional[scorecraft.note.Pitched]:

	if isinstance(note.kind, scorecraft.note.Pitched):
		return note.kind

	return None


def _cell (starting: typing.List[scorecraft.note.Note], sounding: typing.List[scorecraft.note.Note], matches: typing.Callable[[scorecraft.note.Note], bool], blank: str) -> str:

	if any(matches(note) for note in starting):
		return ONSET

	if any(matches(note) for note in sounding):
		return SUSTAIN

	return blank


def _row (label: str, start: int, piece: scorecraft.piece.Piece, matches: typing.Callable[[scorecraft.note.Note], bool], blank: str) -> str:

	"""
	One row of the grid: ``label`` followed by 64 cells with a barline every 16.
	"""

	cells = [label]

	for offset in range(GROUP_LENGTH):

		if offset > 0 and offset % BAR_LENGTH == 0:
			cells.append("|")

		instant = start + offset
		cells.append(_cell(piece.notes_starting_at(instant), piece.notes_during(instant), matches, blank))

	return "".join(cells) + "║"


def _semitone_range (piece: scorecraft.piece.Piece, start: int) -> typing.Optional[typing.Tuple[int, int]]:

	"""
	Lowest and highest semitone (relative to C4) of the non-drum notes sounding in a group.
	"""

	semitones = [
		_semitones_from_c4(kind.pitch.frequency)
		for instant in range(start, start + GROUP_LENGTH)
		for note in piece.notes_during(instant)
		for kind in [_pitched(note)]
		if kind is not None and not kind.timbre.is_drums
	]

	if not semitones:
		return None

	return min(semitones), max(semitones)


def _pitch_rows (piece: scorecraft.piece.Piece, start: int) -> typing.List[str]:

	span = _semitone_range(piece, start)

	if span is None:
		return []

	lowest, highest = span
	rows = []

	for semitone in range(highest + 2, lowest - 3, -1):

		row_pitch = scorecraft.pitch.C4.semitone(semitone)
		black_key = _BLACK_KEYS[semitone % 12]

		def matches (note: scorecraft.note.Note, row_pitch: scorecraft.pitch.Pitch = row_pitch) -> bool:
			kind = _pitched(note)
			return (
				kind is not None
				and not kind.timbre.is_drums
				and abs(kind.pitch.frequency / row_pitch.frequency - 1.0) < _ROW_TOLERANCE
			)

		flag = "!" if semitone in _OPEN_STRING_SEMITONES else " "
		label = f"{flag}{row_pitch.name():<3}" + ("║ ║" if black_key else "║█║")

		rows.append(_row(label, start, piece, matches, BLACK_KEY_BLANK if black_key else WHITE_KEY_BLANK))

	return rows


def _drum_rows (piece: scorecraft.piece.Piece, start: int) -> typing.List[str]:

	rows = []

	for drum in scorecraft.timbre.DRUM_KINDS:

		def matches (note: scorecraft.note.Note, drum: str = drum) -> bool:
			kind = _pitched(note)
			return kind is not None and kind.timbre.is_drums and scorecraft.timbre.drum_kind(kind.pitch.frequency) == drum

		rows.append(_row(f"{drum:<6}║", start, piece, matches, " "))

	return rows


def render_score (piece: scorecraft.piece.Piece) -> str:

	"""Render ``piece`` as a text score.

	Parameters:
		piece: Any piece. The empty piece renders as an empty string.

	Returns:
		One box per 64-unit group, groups separated by a blank line.
	"""

	groups = []

	for start in range(0, piece.length(), GROUP_LENGTH):

		lines = ["═" * BOX_WIDTH + "╗"]
		lines.extend(_pitch_rows(piece, start))
		lines.append("═" * BOX_WIDTH + "╣")
		lines.extend(_drum_rows(piece, start))
		lines.append("═" * BOX_WIDTH + "╝")

		groups.append("\n".join(lines) + "\n")

	return "\n".join(groups)
