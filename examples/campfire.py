import logging

import scorecraft.chord
import scorecraft.constants.pitches as notes
import scorecraft.durations as dur
import scorecraft.line
import scorecraft.note
import scorecraft.render
import scorecraft.scales
import scorecraft.strings
import scorecraft.timbre

logging.basicConfig(level=logging.INFO)

GUITAR = scorecraft.strings.GUITAR_TUNING
SCALE = scorecraft.scales.major_scale(notes.G3)

# Open chord shapes, high E string first.
G_MAJOR = GUITAR.chord_from_frets([3, 0, 0, 0, 2, 3])
C_MAJOR = GUITAR.chord_from_frets([0, 1, 0, 2, 3, None])
D_MAJOR = GUITAR.chord_from_frets(scorecraft.strings.four_string_frets([2, 3, 2, 0]))
E_MINOR = GUITAR.chord_from_frets([0, 0, 0, 2, 2, 0])


def strum (pitch):

	"""One strum of a chord tone: a dotted quarter then an eighth."""

	return scorecraft.timbre.electric_guitar(dur.dotted(dur.quarter)(pitch) + dur.eighth(pitch)) * 2


def song ():

	"""Strummed progression under a melody that starts on a pickup."""

	rhythm = G_MAJOR.strike(strum) + E_MINOR.strike(strum) + C_MAJOR.strike(strum) + D_MAJOR.strike(strum)

	pickup = -(dur.eighth(SCALE.degree(5)) + dur.eighth(SCALE.degree(6)))
	phrase = scorecraft.line.Line.of(*[dur.quarter(pitch) for pitch in SCALE.degrees([8, 7, 8, 10, 8, 7, 5, 3])])
	# The pickup lands in the last beat of the opening bar's rest.
	melody = scorecraft.timbre.sine(dur.whole(scorecraft.note.REST) + (pickup + phrase) + dur.half(SCALE.degree(1)) * 2).volume(0.7)

	shaped = scorecraft.chord.with_chord_shape(
		dur.whole(notes.G2) + dur.whole(notes.E2) + dur.whole(notes.C3) + dur.whole(notes.D3),
		scorecraft.chord.Chord.shape("major")
	)

	return rhythm.layer(scorecraft.timbre.bass(shaped), pad=True) * melody


if __name__ == "__main__":

	piece = song()

	print(piece)

	scorecraft.render.FilePlayer(480).render_to_wav(piece, "campfire.wav")
