"""Signal helpers shared by the voices and the renderer.

All signals are numpy float arrays. Envelopes are 1-D and multiply a mono
signal sample by sample; ``resample()`` accepts mono or ``(frames, channels)``
arrays.
"""

import numpy


def db_to_amplitude (db: float) -> float:

	"""
	Convert a gain in decibels to a linear amplitude ratio.
	"""

	return 10.0 ** (db / 20.0)


def ms_to_frames (duration_ms: int, sample_rate: int) -> int:

	"""
	Number of whole frames in ``duration_ms`` at ``sample_rate``, rounded down.
	"""

	return sample_rate * duration_ms // 1000


def sine (frequency: float, frames: int, sample_rate: int) -> numpy.ndarray:

	t = numpy.arange(frames, dtype=numpy.float64) / sample_rate
	return numpy.sin(2.0 * numpy.pi * frequency * t)


def fade_envelope (frames: int, fade_in: int, fade_out: int) -> numpy.ndarray:

	"""Linear fade-in and fade-out over a signal of ``frames`` samples.

	Fades longer than the signal are clipped to it. When the two fades
	overlap, the quieter of the two wins at every sample.
	"""

	env = numpy.ones(frames, dtype=numpy.float64)

	fade_in = min(max(fade_in, 0), frames)
	fade_out = min(max(fade_out, 0), frames)

	if fade_in > 0:
		env[:fade_in] = numpy.minimum(env[:fade_in], numpy.linspace(0.0, 1.0, fade_in, endpoint=False))

	if fade_out > 0:
		env[frames - fade_out:] = numpy.minimum(env[frames - fade_out:], numpy.linspace(1.0, 0.0, fade_out))

	return env


def linear_decay (frames: int) -> numpy.ndarray:

	"""
	A ramp from 1.0 down to 0.0 across the whole signal.
	"""

	return numpy.linspace(1.0, 0.0, frames, endpoint=False) if frames > 0 else numpy.zeros(0)


def fit_length (signal: numpy.ndarray, frames: int) -> numpy.ndarray:

	"""
	Truncate or zero-pad ``signal`` along its first axis to exactly ``frames``.
	"""

	if signal.shape[0] >= frames:
		return signal[:frames]

	padding = [(0, frames - signal.shape[0])] + [(0, 0)] * (signal.ndim - 1)

	return numpy.pad(signal, padding)


def cubic_interp (y0: numpy.ndarray, y1: numpy.ndarray, y2: numpy.ndarray, y3: numpy.ndarray, t: numpy.ndarray) -> numpy.ndarray:

	"""4-point cubic interpolation between ``y1`` and ``y2``.

	``t`` runs from 0 (at ``y1``) to 1. Works element-wise on arrays.
	"""

	a0 = y3 - y2 - y0 + y1
	a1 = y0 - y1 - a0
	a2 = y2 - y0
	a3 = y1

	return a0 * t * t * t + a1 * t * t + a2 * t + a3


def resample (signal: numpy.ndarray, num_samples: int) -> numpy.ndarray:

	"""Stretch or squeeze ``signal`` to exactly ``num_samples`` frames.

	Output sample ``i`` reads the input at position
	``i * (len - 1) / (num_samples - 1)``, interpolating from the four
	surrounding input samples (indices clamped at both ends), so the first
	and last samples line up with the input's.

	Parameters:
		signal: A mono ``(frames,)`` or multi-channel ``(frames, channels)`` array.
		num_samples: Output length in frames.
	"""

	signal = numpy.asarray(signal, dtype=numpy.float64)
	input_len = signal.shape[0]
	out_shape = (num_samples,) + signal.shape[1:]

	if num_samples <= 0:
		return numpy.zeros((0,) + signal.shape[1:])

	if input_len == 0:
		return numpy.zeros(out_shape)

	if num_samples == 1 or input_len == 1:
		return numpy.broadcast_to(signal[:1], out_shape).copy()

	position = numpy.arange(num_samples, dtype=numpy.float64) * (input_len - 1) / (num_samples - 1)
	index = numpy.floor(position).astype(numpy.int64)
	frac = position - index

	last = input_len - 1

	y0 = signal[numpy.clip(index - 1, 0, last)]
	y1 = signal[numpy.clip(index, 0, last)]
	y2 = signal[numpy.clip(index + 1, 0, last)]
	y3 = signal[numpy.clip(index + 2, 0, last)]

	if signal.ndim > 1:
		frac = frac.reshape((-1,) + (1,) * (signal.ndim - 1))

	return cubic_interp(y0, y1, y2, y3, frac)
