import scorecraft.display
import scorecraft.durations as dur
import scorecraft.line
import scorecraft.note
import scorecraft.piece
import scorecraft.pitch
import scorecraft.timbre

C4 = scorecraft.pitch.C4
Piece = scorecraft.piece.Piece


def test_empty_piece_renders_nothing () -> None:

	"""A piece with no length has no groups."""

	assert scorecraft.display.render_score(Piece()) == ""


def test_single_note_box () -> None:

	"""One quarter C4 gives rows from D4 down to A#3 plus the drum grid."""

	score = scorecraft.display.render_score(dur.quarter(C4).to_piece())
	lines = score.splitlines()

	assert score.endswith("\n")
	assert len(lines) == 12
	assert all(len(line) == 75 for line in lines)

	assert lines[0] == "═" * 74 + "╗"
	assert lines[6] == "═" * 74 + "╣"
	assert lines[-1] == "═" * 74 + "╝"

	labels = [line[:7] for line in lines[1:6]]
	assert labels == [" D4 ║█║", " C#4║ ║", " C4 ║█║", "!B3 ║█║", " A#3║ ║"]


def test_onset_and_sustain_cells () -> None:

	"""The note's row shows an onset followed by sustain, then blanks."""

	lines = scorecraft.display.render_score(dur.quarter(C4).to_piece()).splitlines()

	c4_row = lines[3]

	assert c4_row.startswith(" C4 ║█║■≡≡≡░")
	assert c4_row.count("|") == 3
	assert lines[2][7:11] == "    "


def test_open_string_rows_are_flagged () -> None:

	"""Rows for guitar open strings start with ``!``."""

	lines = scorecraft.display.render_score(dur.quarter(C4.semitone(4)).to_piece()).splitlines()

	assert any(line.startswith("!E4 ║█║■") for line in lines)


def test_drums_only () -> None:

	"""A drums-only piece has no pitch rows, only the drum grid."""

	piece = scorecraft.timbre.drums(dur.quarter(C4)).to_piece()
	lines = scorecraft.display.render_score(piece).splitlines()

	assert len(lines) == 7
	assert [line[:7] for line in lines[2:6]] == ["crash ║", "hi-hat║", "snare ║", "kick  ║"]
	assert lines[4].startswith("snare ║■≡≡≡ ")


def test_long_piece_splits_into_groups () -> None:

	"""A piece one unit longer than a group gets a second box."""

	line = dur.whole(C4).to_line().repeat(4) + dur.sixteenth(C4)
	score = scorecraft.display.render_score(line.to_piece())

	assert score.count("╗") == 2
	assert score.count("╝") == 2
	assert "\n\n" in score


def test_notes_in_group_only () -> None:

	"""The pitch range of a group only looks at notes sounding in that group."""

	line = dur.whole(C4).to_line().repeat(4) + dur.quarter(C4.octave(1))
	groups = scorecraft.display.render_score(line.to_piece()).split("\n\n")

	assert " C4 ║█║■" in groups[0]
	assert " C5 ║█║■" in groups[1]
	assert " C4 " not in groups[1]
