"""Named pitch constants.

Every note from C0 to B8, derived from ``scorecraft.pitch.C4`` by equal-tempered
semitone steps. Notes are named ``<Pitch><Octave>`` for naturals and
``<Pitch>S<Octave>`` for sharps::

    import scorecraft.constants.pitches as notes
    import scorecraft.durations as dur

    melody = dur.quarter(notes.E4) + dur.quarter(notes.D4) + dur.half(notes.C4)

Flats are enharmonic equivalents (Db4 == CS4).
"""

import scorecraft.pitch


_C4 = scorecraft.pitch.C4

# ── Octave 0 ──
C0  = _C4.semitone(-48)
CS0 = _C4.semitone(-47)
D0  = _C4.semitone(-46)
DS0 = _C4.semitone(-45)
E0  = _C4.semitone(-44)
F0  = _C4.semitone(-43)
FS0 = _C4.semitone(-42)
G0  = _C4.semitone(-41)
GS0 = _C4.semitone(-40)
A0  = _C4.semitone(-39)
AS0 = _C4.semitone(-38)
B0  = _C4.semitone(-37)

# ── Octave 1 ──
C1  = _C4.semitone(-36)
CS1 = _C4.semitone(-35)
D1  = _C4.semitone(-34)
DS1 = _C4.semitone(-33)
E1  = _C4.semitone(-32)
F1  = _C4.semitone(-31)
FS1 = _C4.semitone(-30)
G1  = _C4.semitone(-29)
GS1 = _C4.semitone(-28)
A1  = _C4.semitone(-27)
AS1 = _C4.semitone(-26)
B1  = _C4.semitone(-25)

# ── Octave 2 ──
C2  = _C4.semitone(-24)
CS2 = _C4.semitone(-23)
D2  = _C4.semitone(-22)
DS2 = _C4.semitone(-21)
E2  = _C4.semitone(-20)
F2  = _C4.semitone(-19)
FS2 = _C4.semitone(-18)
G2  = _C4.semitone(-17)
GS2 = _C4.semitone(-16)
A2  = _C4.semitone(-15)
AS2 = _C4.semitone(-14)
B2  = _C4.semitone(-13)

# ── Octave 3 ──
C3  = _C4.semitone(-12)
CS3 = _C4.semitone(-11)
D3  = _C4.semitone(-10)
DS3 = _C4.semitone(-9)
E3  = _C4.semitone(-8)
F3  = _C4.semitone(-7)
FS3 = _C4.semitone(-6)
G3  = _C4.semitone(-5)
GS3 = _C4.semitone(-4)
A3  = _C4.semitone(-3)
AS3 = _C4.semitone(-2)
B3  = _C4.semitone(-1)

# ── Octave 4 ──
C4  = _C4
CS4 = _C4.semitone(1)
D4  = _C4.semitone(2)
DS4 = _C4.semitone(3)
E4  = _C4.semitone(4)
F4  = _C4.semitone(5)
FS4 = _C4.semitone(6)
G4  = _C4.semitone(7)
GS4 = _C4.semitone(8)
A4  = _C4.semitone(9)
AS4 = _C4.semitone(10)
B4  = _C4.semitone(11)

# ── Octave 5 ──
C5  = _C4.semitone(12)
CS5 = _C4.semitone(13)
D5  = _C4.semitone(14)
DS5 = _C4.semitone(15)
E5  = _C4.semitone(16)
F5  = _C4.semitone(17)
FS5 = _C4.semitone(18)
G5  = _C4.semitone(19)
GS5 = _C4.semitone(20)
A5  = _C4.semitone(21)
AS5 = _C4.semitone(22)
B5  = _C4.semitone(23)

# ── Octave 6 ──
C6  = _C4.semitone(24)
CS6 = _C4.semitone(25)
D6  = _C4.semitone(26)
DS6 = _C4.semitone(27)
E6  = _C4.semitone(28)
F6  = _C4.semitone(29)
FS6 = _C4.semitone(30)
G6  = _C4.semitone(31)
GS6 = _C4.semitone(32)
A6  = _C4.semitone(33)
AS6 = _C4.semitone(34)
B6  = _C4.semitone(35)

# ── Octave 7 ──
C7  = _C4.semitone(36)
CS7 = _C4.semitone(37)
D7  = _C4.semitone(38)
DS7 = _C4.semitone(39)
E7  = _C4.semitone(40)
F7  = _C4.semitone(41)
FS7 = _C4.semitone(42)
G7  = _C4.semitone(43)
GS7 = _C4.semitone(44)
A7  = _C4.semitone(45)
AS7 = _C4.semitone(46)
B7  = _C4.semitone(47)

# ── Octave 8 ──
C8  = _C4.semitone(48)
CS8 = _C4.semitone(49)
D8  = _C4.semitone(50)
DS8 = _C4.semitone(51)
E8  = _C4.semitone(52)
F8  = _C4.semitone(53)
FS8 = _C4.semitone(54)
G8  = _C4.semitone(55)
GS8 = _C4.semitone(56)
A8  = _C4.semitone(57)
AS8 = _C4.semitone(58)
B8  = _C4.semitone(59)
