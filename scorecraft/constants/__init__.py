"""Constants for scorecraft.

- ``scorecraft.constants.pitches`` - Named 12-TET pitches C0–B8 relative to C4 = 261.626 Hz
- ``scorecraft.constants.gm`` - General MIDI drum notes and programs used by MIDI export

Note lengths live in ``scorecraft.durations`` next to the helpers that use them.
"""
