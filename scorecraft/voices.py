"""Per-timbre signal generators.

``synthesize()`` turns one pitched note into a ``Signal``: a
``(frames, channels)`` float array plus the sample rate it was produced at.
Built-in timbres are additive (a fundamental plus a fixed table of integer
partials) and always come back mono at the requested rate. Custom samples
come back at their file's native rate and channel count; the renderer
resamples and maps channels.

Drums are played from a ``DrumKit``. By default the kit synthesises its four
one-shots (kick, snare, hi-hat, crash); point it at a directory to use
recorded samples instead::

	kit = scorecraft.voices.DrumKit("samples/drums")   # kick.wav, snare.wav, ...

A missing or unreadable sample never stops a render. It is logged and
replaced by silence of the same length.
"""

import dataclasses
import logging
import os
import typing

import numpy
import soundfile

import scorecraft.dsp
import scorecraft.pitch
import scorecraft.timbre


logger = logging.getLogger(__name__)


# Decoded samples keyed by path. ``None`` marks a file that failed to load.
SampleCache = typing.Dict[str, typing.Optional[typing.Tuple[numpy.ndarray, int]]]

SAMPLE_EXTENSIONS: typing.Tuple[str, ...] = (".wav", ".flac", ".ogg", ".mp3")

MIN_FADE_MS = 5

DRUM_GAINS: typing.Dict[str, float] = {
	scorecraft.timbre.CRASH: 2.5,
	scorecraft.timbre.HI_HAT: 2.5,
	scorecraft.timbre.SNARE: 5.0,
	scorecraft.timbre.KICK: 2.5,
}


@dataclasses.dataclass
class Signal:

	"""
	Audio for one note: ``samples`` is ``(frames, channels)``, at ``sample_rate`` Hz.
	"""

	samples: numpy.ndarray
	sample_rate: int

	@property
	def channels (self) -> int:
		return self.samples.shape[1]

	@property
	def frames (self) -> int:
		return self.samples.shape[0]


def silence (duration_ms: int, sample_rate: int) -> Signal:

	return Signal(numpy.zeros((scorecraft.dsp.ms_to_frames(duration_ms, sample_rate), 1)), sample_rate)


# ------------------------------------------------------------------
# Additive voices
# ------------------------------------------------------------------

@dataclasses.dataclass(frozen=True)
class AdditiveVoice:

	"""A fixed partial table and its envelope.

	Parameters:
		partials: Amplitude of harmonic ``n + 1`` at index ``n``.
		reference: Frequency compensation reference in Hz. The voice is scaled
			by ``clip(reference / frequency, 0, 1)``.
		gain: Extra linear gain applied after compensation.
		fade_in_ms: Linear fade-in length.
		fade_out_ms: Linear fade-out length.
		decay: Ramp the whole note from full level down to silence.
	"""

	partials: typing.Tuple[float, ...]
	reference: float
	gain: float = 1.0
	fade_in_ms: int = MIN_FADE_MS
	fade_out_ms: int = MIN_FADE_MS
	decay: bool = False


	def render (self, duration_ms: int, frequency: float, sample_rate: int) -> numpy.ndarray:

		"""
		Mono samples, exactly ``sample_rate * duration_ms // 1000`` long.
		"""

		frames = scorecraft.dsp.ms_to_frames(duration_ms, sample_rate)
		nyquist = sample_rate / 2.0
		samples = numpy.zeros(frames)

		for harmonic, amplitude in enumerate(self.partials, start=1):

			partial_frequency = frequency * harmonic

			if partial_frequency >= nyquist:
				continue

			samples += amplitude * scorecraft.dsp.sine(partial_frequency, frames, sample_rate)

		samples *= self.gain * float(numpy.clip(self.reference / frequency, 0.0, 1.0))

		samples *= scorecraft.dsp.fade_envelope(
			frames,
			scorecraft.dsp.ms_to_frames(max(self.fade_in_ms, MIN_FADE_MS), sample_rate),
			scorecraft.dsp.ms_to_frames(max(self.fade_out_ms, MIN_FADE_MS), sample_rate)
		)

		if self.decay:
			samples *= scorecraft.dsp.linear_decay(frames)

		return samples


ADDITIVE_VOICES: typing.Dict[str, AdditiveVoice] = {
	scorecraft.timbre.SINE_KIND: AdditiveVoice(
		partials = (1.0,),
		reference = 132.0,
		fade_in_ms = 40,
		fade_out_ms = 40,
	),
	scorecraft.timbre.BASS_KIND: AdditiveVoice(
		partials = (1.0, 1 / 10, 2.0, 1 / 5, 1.0, 1.0, 1 / 3, 1 / 10),
		reference = 132.0,
		gain = 12.0,
		decay = True,
	),
	scorecraft.timbre.PIANO_KIND: AdditiveVoice(
		partials = (1.0, 1 / 4, 1 / 6, 1 / 10, 1 / 12, 1 / 12, 1 / 36, 1 / 72),
		reference = 528.0,
		decay = True,
	),
	scorecraft.timbre.ELECTRIC_GUITAR_KIND: AdditiveVoice(
		partials = tuple(scorecraft.dsp.db_to_amplitude(db) for db in (0, 0, 8, 3, -7, -12, -8, -10)),
		reference = 132.0,
		decay = True,
	),
}


# ------------------------------------------------------------------
# Samples
# ------------------------------------------------------------------

def load_sample (path: str, cache: typing.Optional[SampleCache] = None) -> typing.Optional[typing.Tuple[numpy.ndarray, int]]:

	"""Decode an audio file to a ``(frames, channels)`` float array and its rate.

	Returns ``None`` (after logging a warning) if the file is missing or cannot
	be decoded. Results, failures included, are stored in ``cache`` when given.
	"""

	if cache is not None and path in cache:
		return cache[path]

	try:
		data, sample_rate = soundfile.read(path, dtype="float64", always_2d=True)
		loaded: typing.Optional[typing.Tuple[numpy.ndarray, int]] = (data, int(sample_rate))

	except (OSError, RuntimeError) as exc:
		logger.warning(f"Could not load audio file {path!r}, using silence: {exc}")
		loaded = None

	if cache is not None:
		cache[path] = loaded

	return loaded


def custom_unpitched (path: str, duration_ms: int, sample_rate: int, cache: typing.Optional[SampleCache] = None) -> Signal:

	"""
	The sample at its native rate, truncated or zero-padded to ``duration_ms``.
	"""

	loaded = load_sample(path, cache)

	if loaded is None:
		return silence(duration_ms, sample_rate)

	data, native_rate = loaded

	return Signal(scorecraft.dsp.fit_length(data, scorecraft.dsp.ms_to_frames(duration_ms, native_rate)), native_rate)


def custom_pitched (path: str, duration_ms: int, frequency: float, sample_rate: int, cache: typing.Optional[SampleCache] = None) -> Signal:

	"""Re-pitch a sample recorded at C4 by changing its playback speed.

	``duration_ms * frequency / C4`` worth of the recording is squeezed (or
	stretched) into ``duration_ms``, so higher notes use more of the file.
	"""

	loaded = load_sample(path, cache)

	if loaded is None:
		return silence(duration_ms, sample_rate)

	data, native_rate = loaded
	ratio = frequency / scorecraft.pitch.C4_FREQUENCY

	source_frames = scorecraft.dsp.ms_to_frames(int(duration_ms * ratio), native_rate)
	target_frames = scorecraft.dsp.ms_to_frames(duration_ms, native_rate)

	excerpt = scorecraft.dsp.fit_length(data, source_frames)

	return Signal(scorecraft.dsp.resample(excerpt, target_frames), native_rate)


# ------------------------------------------------------------------
# Drums
# ------------------------------------------------------------------

def _synth_kick (frames: int, sample_rate: int, rng: numpy.random.Generator) -> numpy.ndarray:

	t = numpy.arange(frames) / sample_rate
	sweep = 50.0 + 100.0 * numpy.exp(-t * 30.0)
	phase = 2.0 * numpy.pi * numpy.cumsum(sweep) / sample_rate

	return numpy.sin(phase) * numpy.exp(-t * 8.0)


def _synth_snare (frames: int, sample_rate: int, rng: numpy.random.Generator) -> numpy.ndarray:

	t = numpy.arange(frames) / sample_rate
	body = 0.5 * numpy.sin(2.0 * numpy.pi * 185.0 * t) * numpy.exp(-t * 20.0)
	noise = 0.5 * rng.uniform(-1.0, 1.0, frames) * numpy.exp(-t * 15.0)

	return body + noise


def _synth_hi_hat (frames: int, sample_rate: int, rng: numpy.random.Generator) -> numpy.ndarray:

	t = numpy.arange(frames) / sample_rate
	noise = rng.uniform(-1.0, 1.0, frames + 1)

	# First difference keeps the top end.
	return 0.5 * numpy.diff(noise) * numpy.exp(-t * 40.0)


def _synth_crash (frames: int, sample_rate: int, rng: numpy.random.Generator) -> numpy.ndarray:

	t = numpy.arange(frames) / sample_rate
	noise = rng.uniform(-1.0, 1.0, frames + 1)

	return 0.5 * numpy.diff(noise) * numpy.exp(-t * 2.5)


_DRUM_SYNTHS: typing.Dict[str, typing.Callable[[int, int, numpy.random.Generator], numpy.ndarray]] = {
	scorecraft.timbre.KICK: _synth_kick,
	scorecraft.timbre.SNARE: _synth_snare,
	scorecraft.timbre.HI_HAT: _synth_hi_hat,
	scorecraft.timbre.CRASH: _synth_crash,
}

_DRUM_SEEDS: typing.Dict[str, int] = {kind: seed for seed, kind in enumerate(scorecraft.timbre.DRUM_KINDS, start=1)}


class DrumKit:

	"""Maps each kit piece to a one-shot sample.

	With no ``sample_dir`` the kit synthesises its sounds. The noise is
	seeded per kit piece, so the same note always renders to the same
	samples. With a ``sample_dir`` the kit looks for ``<kind><ext>`` (for
	example ``hi-hat.wav``) using the first extension in
	``SAMPLE_EXTENSIONS`` that exists.
	"""

	def __init__ (self, sample_dir: typing.Optional[str] = None) -> None:

		self.sample_dir = sample_dir
		self._cache: SampleCache = {}


	def sample_path (self, kind: str) -> typing.Optional[str]:

		"""
		File used for ``kind``, or ``None`` for a synthesised kit.
		"""

		if self.sample_dir is None:
			return None

		for extension in SAMPLE_EXTENSIONS:
			path = os.path.join(self.sample_dir, kind + extension)
			if os.path.exists(path):
				return path

		return os.path.join(self.sample_dir, kind + SAMPLE_EXTENSIONS[0])


	def signal (self, kind: str, duration_ms: int, sample_rate: int) -> Signal:

		"""
		One hit of ``kind`` lasting exactly ``duration_ms``, before the drum gain.
		"""

		if kind not in _DRUM_SYNTHS:
			raise ValueError(f"Unknown drum: {kind!r}")

		path = self.sample_path(kind)

		if path is not None:
			return custom_unpitched(path, duration_ms, sample_rate, self._cache)

		frames = scorecraft.dsp.ms_to_frames(duration_ms, sample_rate)
		rng = numpy.random.default_rng(_DRUM_SEEDS[kind])

		return Signal(_DRUM_SYNTHS[kind](frames, sample_rate, rng)[:, numpy.newaxis], sample_rate)


DEFAULT_DRUM_KIT = DrumKit()


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------

def synthesize (
	duration_ms: int,
	frequency: float,
	timbre: scorecraft.timbre.Timbre,
	volume: float,
	sample_rate: int,
	drum_kit: typing.Optional[DrumKit] = None,
	cache: typing.Optional[SampleCache] = None
) -> Signal:

	"""Produce the signal for one pitched note.

	Parameters:
		duration_ms: Note length in milliseconds.
		frequency: Pitch in Hz.
		timbre: Which voice to use.
		volume: Linear gain applied to the finished signal.
		sample_rate: Rate for synthesised voices (and for the silence that
			replaces a missing sample).
		drum_kit: Kit used for ``drums``. Defaults to the synthesised kit.
		cache: Decoded-sample cache shared across calls, e.g. for one render.

	Example:
		```python
		signal = synthesize(500, 440.0, scorecraft.timbre.PIANO, 1.0, 44100)
		signal.samples.shape   # (22050, 1)
		```
	"""

	kind = timbre.kind

	if kind in ADDITIVE_VOICES:
		samples = ADDITIVE_VOICES[kind].render(duration_ms, frequency, sample_rate)
		signal = Signal(samples[:, numpy.newaxis], sample_rate)

	elif kind == scorecraft.timbre.DRUMS_KIND:
		drum = scorecraft.timbre.drum_kind(frequency)
		signal = (drum_kit or DEFAULT_DRUM_KIT).signal(drum, duration_ms, sample_rate)
		signal = Signal(signal.samples * DRUM_GAINS[drum], signal.sample_rate)

	elif kind == scorecraft.timbre.CUSTOM_UNPITCHED_KIND:
		signal = custom_unpitched(timbre.source, duration_ms, sample_rate, cache)

	elif kind == scorecraft.timbre.CUSTOM_PITCHED_KIND:
		signal = custom_pitched(timbre.source, duration_ms, frequency, sample_rate, cache)

	else:
		raise ValueError(f"Unknown timbre kind: {kind!r}")

	return Signal(signal.samples * volume, signal.sample_rate)
