"""
Scorecraft - compose music as Python values and render it to audio.

Music is built from immutable values. A ``Note`` is a length plus a rest
or a pitched sound. Notes join into a ``Line`` (one after another) and
lines stack into a ``Piece`` (at the same time). Everything composes with
ordinary operators, so a phrase reads like a sum::

    import scorecraft.constants.pitches as notes
    from scorecraft import Piece, REST, piano, quarter, half

    phrase = quarter(notes.E4) + quarter(notes.D4) + half(notes.C4)
    song = piano(phrase * 2)

What it does:

- **Line algebra with pickups.** A pickup (anacrusis) is spliced onto the
  end of whatever comes before it, so phrases that start before the beat
  still line up. ``-line`` turns notes into a pickup and ``~line`` ties
  the pickup into the first beat.
- **Time-aligned pieces.** ``p + q`` joins two pieces track by track and
  pads missing tracks with rests, so every part stays in sync.
- **Chords, scales and frets.** Chord shapes from semitone offsets or
  scale degrees, the seven diatonic modes, and guitar fret diagrams.
- **Built-in voices.** Sine, bass, piano and electric guitar are
  synthesised additively. Drums come from a synthesised kit or your own
  samples, and custom pitched or unpitched samples are decoded with
  ``soundfile``.
- **Offline rendering.** Multi-channel mixing with per-channel or global
  peak normalisation, written as a 16-bit WAV file.
- **MIDI export.** Any piece can be saved as a Standard MIDI File.
- **Live playback.** Play straight to the sound card through
  ``sounddevice``.
- **Text score.** ``print(piece)`` draws a piano roll and drum grid.
- **Interactive shell.** ``python -m scorecraft module:song --interactive``
  opens a menu for auditioning, changing tempo and rendering.

Rendering example:

    ```python
    import scorecraft

    player = scorecraft.FilePlayer(300, scorecraft.FileOutputConfig(output_gain=0.9))
    player.render_to_wav(song, "song.wav")
    ```

Package-level exports: the model types (``Pitch``, ``Note``, ``Line``,
``Piece``, ``Chord``, ``Timbre``, ``REST``), the length and timbre helpers,
``Scale``, ``FilePlayer``, ``FileOutputConfig``, ``LivePlayer`` and
``write_midi``.
"""

import scorecraft.chord
import scorecraft.durations
import scorecraft.line
import scorecraft.midi_export
import scorecraft.note
import scorecraft.piece
import scorecraft.pitch
import scorecraft.playback
import scorecraft.render
import scorecraft.scales
import scorecraft.timbre


Pitch = scorecraft.pitch.Pitch
A4 = scorecraft.pitch.A4
C4 = scorecraft.pitch.C4

Note = scorecraft.note.Note
REST = scorecraft.note.REST
InvalidDuration = scorecraft.note.InvalidDuration

Line = scorecraft.line.Line
Piece = scorecraft.piece.Piece

Chord = scorecraft.chord.Chord
with_chord_shape = scorecraft.chord.with_chord_shape

Timbre = scorecraft.timbre.Timbre
sine = scorecraft.timbre.sine
bass = scorecraft.timbre.bass
piano = scorecraft.timbre.piano
electric_guitar = scorecraft.timbre.electric_guitar
drums = scorecraft.timbre.drums

sixteenth = scorecraft.durations.sixteenth
eighth = scorecraft.durations.eighth
quarter = scorecraft.durations.quarter
half = scorecraft.durations.half
whole = scorecraft.durations.whole
double_whole = scorecraft.durations.double_whole
dotted = scorecraft.durations.dotted
tie = scorecraft.durations.tie

Scale = scorecraft.scales.Scale

FilePlayer = scorecraft.render.FilePlayer
FileOutputConfig = scorecraft.render.FileOutputConfig
LivePlayer = scorecraft.playback.LivePlayer
write_midi = scorecraft.midi_export.write_midi
