"""Diatonic scales and modes as degree lookups.

A ``Scale`` is a root pitch plus a seven-step pattern of semitone intervals.
Degree 1 is the root; higher degrees walk up the pattern and wrap into the
next octave. Degree 0 is the root as well and negative degrees walk down::

    import scorecraft.pitch
    import scorecraft.scales

    c_major = scorecraft.scales.major_scale(scorecraft.pitch.C4)
    c_major.degree(3)     # E4
    c_major.degree(8)     # C5
    c_major.degree(-1)    # B3
"""

import dataclasses
import typing

import scorecraft.pitch


SCALE_PATTERNS: typing.Dict[str, typing.Tuple[int, ...]] = {
	"lydian": (2, 2, 2, 1, 2, 2, 1),
	"major": (2, 2, 1, 2, 2, 2, 1),
	"mixolydian": (2, 2, 1, 2, 2, 1, 2),
	"dorian": (2, 1, 2, 2, 2, 1, 2),
	"minor": (2, 1, 2, 2, 1, 2, 2),
	"phrygian": (1, 2, 2, 2, 1, 2, 2),
	"locrian": (1, 2, 2, 1, 2, 2, 2),
}

SCALE_PATTERNS["ionian"] = SCALE_PATTERNS["major"]
SCALE_PATTERNS["aeolian"] = SCALE_PATTERNS["minor"]


@dataclasses.dataclass(frozen=True)
class Scale:

	"""A root pitch and a seven-interval step pattern.

	Parameters:
		root: The pitch of degree 1.
		pattern: Semitone steps between consecutive degrees. The steps should
			add up to an octave (12) for the wrap-around to line up.
	"""

	root: scorecraft.pitch.Pitch
	pattern: typing.Tuple[int, ...] = SCALE_PATTERNS["major"]


	def __post_init__ (self) -> None:

		object.__setattr__(self, "pattern", tuple(self.pattern))

		if len(self.pattern) != 7:
			raise ValueError(f"A scale pattern needs 7 steps, got {len(self.pattern)}")


	@classmethod
	def named (cls, name: str, root: scorecraft.pitch.Pitch) -> "Scale":

		"""
		Build a scale from one of the names in ``SCALE_PATTERNS``.
		"""

		if name not in SCALE_PATTERNS:
			raise ValueError(f"Unknown scale: {name!r}. Available: {', '.join(sorted(SCALE_PATTERNS))}")

		return cls(root, SCALE_PATTERNS[name])


	def degree (self, degree: int) -> scorecraft.pitch.Pitch:

		"""Return the pitch of a scale degree.

		Degrees are 1-based going up. ``0`` also gives the root, ``-1`` is
		the step below it and so on, crossing octaves as needed.
		"""

		adjusted = degree - 1 if degree > 0 else degree
		octave = adjusted // 7
		steps = sum(self.pattern[:adjusted % 7])

		return self.root.octave(octave).semitone(steps)


	def degrees (self, degrees: typing.Iterable[int]) -> typing.List[scorecraft.pitch.Pitch]:

		return [self.degree(degree) for degree in degrees]


def major_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("major", root)

def minor_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("minor", root)

def ionian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("ionian", root)

def aeolian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("aeolian", root)

def dorian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("dorian", root)

def phrygian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("phrygian", root)

def lydian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("lydian", root)

def mixolydian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("mixolydian", root)

def locrian_scale (root: scorecraft.pitch.Pitch) -> Scale:
	return Scale.named("locrian", root)
