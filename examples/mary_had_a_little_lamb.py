import logging

import scorecraft.constants.pitches as notes
import scorecraft.durations as dur
import scorecraft.midi_export
import scorecraft.note
import scorecraft.render
import scorecraft.timbre

logging.basicConfig(level=logging.INFO)

REST = scorecraft.note.REST


def song ():

	"""Melody on piano over a bass line and a simple back beat."""

	opening = dur.quarter(notes.E4) + dur.quarter(notes.D4) + dur.quarter(notes.C4) + dur.quarter(notes.D4)
	same = dur.quarter(notes.E4) * 3 + dur.quarter(REST)

	melody = (
		opening
		+ same
		+ dur.quarter(notes.D4) * 3 + dur.quarter(REST)
		+ dur.quarter(notes.E4) + dur.quarter(notes.G4) + dur.quarter(notes.G4) + dur.quarter(REST)
		+ opening
		+ dur.quarter(notes.E4) * 4
		+ dur.quarter(notes.D4) * 2 + dur.quarter(notes.E4) + dur.quarter(notes.D4)
		+ dur.whole(notes.C4)
	)

	bass = scorecraft.timbre.bass(
		(dur.half(notes.C3) + dur.half(notes.G2)) * 3
		+ dur.half(notes.C3) + dur.half(notes.C3)
		+ (dur.half(notes.C3) + dur.half(notes.G2)) * 3
		+ dur.whole(notes.C3)
	)

	# Kick on one and three, snare on two and four.
	beat = scorecraft.timbre.drums(dur.quarter(notes.C3) + dur.quarter(notes.C4)) * 16

	return scorecraft.timbre.piano(melody) * bass * beat


if __name__ == "__main__":

	piece = song()

	print(piece)

	scorecraft.render.FilePlayer(300).render_to_wav(piece, "mary_had_a_little_lamb.wav")
	scorecraft.midi_export.write_midi(piece, "mary_had_a_little_lamb.mid", tempo_bpm=300)
