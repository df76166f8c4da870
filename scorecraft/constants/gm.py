"""General MIDI Level 1 numbers used when exporting to a MIDI file.

Drums are written on channel 10 (0-indexed channel 9) using the GM
percussion key map. Every other timbre is given a GM program number::

    import scorecraft.constants.gm

    scorecraft.constants.gm.DRUM_NOTES["kick"]        # 36
    scorecraft.constants.gm.PROGRAMS["bass"]          # 33 (Electric Bass, finger)
"""

import typing

import scorecraft.timbre


DRUM_CHANNEL = 9


# ─── Percussion key map ──────────────────────────────────────────────

KICK_1 = 36
SNARE_1 = 38
HI_HAT_CLOSED = 42
CRASH_1 = 49

DRUM_NOTES: typing.Dict[str, int] = {
	scorecraft.timbre.KICK: KICK_1,
	scorecraft.timbre.SNARE: SNARE_1,
	scorecraft.timbre.HI_HAT: HI_HAT_CLOSED,
	scorecraft.timbre.CRASH: CRASH_1,
}


# ─── Programs (0-indexed) ────────────────────────────────────────────

ACOUSTIC_GRAND_PIANO = 0
ELECTRIC_GUITAR_CLEAN = 27
ELECTRIC_BASS_FINGER = 33
OCARINA = 79

PROGRAMS: typing.Dict[str, int] = {
	scorecraft.timbre.SINE_KIND: OCARINA,
	scorecraft.timbre.BASS_KIND: ELECTRIC_BASS_FINGER,
	scorecraft.timbre.PIANO_KIND: ACOUSTIC_GRAND_PIANO,
	scorecraft.timbre.ELECTRIC_GUITAR_KIND: ELECTRIC_GUITAR_CLEAN,
	scorecraft.timbre.CUSTOM_UNPITCHED_KIND: ACOUSTIC_GRAND_PIANO,
	scorecraft.timbre.CUSTOM_PITCHED_KIND: ACOUSTIC_GRAND_PIANO,
}
