"""Offline rendering: mix a playable into PCM samples and write a WAV file.

Anything with ``length()`` and ``notes_starting_at(instant)`` can be
rendered: a ``Note``, a ``Line`` or a ``Piece``. Tempo is given in units
(sixteenths) per minute, so 300 BPM is 200 ms per unit::

	import scorecraft.render

	player = scorecraft.render.FilePlayer(300, scorecraft.render.FileOutputConfig(output_gain=0.8))
	player.render_to_wav(piece, "song.wav")

Rendering makes two passes over the notes. The first synthesises every
pitched note to learn the widest channel count among the voices; the second
mixes the signals into buffers of that many channels. Each channel is then
normalised to its peak and scaled by the output gain.
"""

import dataclasses
import logging
import typing
import wave

import numpy

import scorecraft.dsp
import scorecraft.note
import scorecraft.voices


logger = logging.getLogger(__name__)


MAX_BEAT_DURATION_MS = 60000

NORMALIZATION_MODES: typing.Tuple[str, ...] = ("per_channel", "global")


class Playable (typing.Protocol):

	"""
	Anything the renderer and players accept.
	"""

	def length (self) -> int: ...

	def notes_starting_at (self, instant: int) -> typing.List[scorecraft.note.Note]: ...


def beat_duration_ms (tempo_bpm: int) -> int:

	"""Milliseconds per unit at ``tempo_bpm`` units per minute.

	Integer division, so tempos that do not divide 60000 run slightly fast.
	A tempo of zero or less saturates to ``MAX_BEAT_DURATION_MS``.
	"""

	if tempo_bpm <= 0:
		return MAX_BEAT_DURATION_MS

	return 60000 // tempo_bpm


def output_channel (source_channel: int, source_channels: int, output_channels: int) -> int:

	"""Map a source channel proportionally onto the output channels.

	Rounds half up, so stereo into three channels uses channels 0 and 2.
	"""

	if source_channels <= 1:
		return 0

	return int(numpy.floor(source_channel * (output_channels - 1) / (source_channels - 1) + 0.5))


@dataclasses.dataclass
class FileOutputConfig:

	"""Settings for offline rendering.

	Parameters:
		output_gain: Peak level after normalisation (1.0 is full scale).
		sample_rate: Output rate in Hz.
		normalization: ``"per_channel"`` scales each channel to its own peak;
			``"global"`` uses the loudest channel's peak for all of them.
		drum_kit: Kit used for drum notes. ``None`` uses the synthesised kit.
	"""

	output_gain: float = 1.0
	sample_rate: int = 44100
	normalization: str = "per_channel"
	drum_kit: typing.Optional[scorecraft.voices.DrumKit] = None


	def __post_init__ (self) -> None:

		if self.output_gain < 0:
			raise ValueError(f"Output gain cannot be negative, got {self.output_gain}")

		if self.sample_rate <= 0:
			raise ValueError(f"Sample rate must be positive, got {self.sample_rate}")

		if self.normalization not in NORMALIZATION_MODES:
			raise ValueError(f"Unknown normalization {self.normalization!r}, expected one of {NORMALIZATION_MODES}")


class FilePlayer:

	"""
	Renders playables at a fixed tempo with a ``FileOutputConfig``.
	"""

	def __init__ (self, tempo_bpm: int = 300, config: typing.Optional[FileOutputConfig] = None) -> None:

		self.tempo_bpm = tempo_bpm
		self.config = config or FileOutputConfig()


	def beat_duration_ms (self) -> int:

		return beat_duration_ms(self.tempo_bpm)


	def _note_signals (self, playable: Playable) -> typing.List[typing.Tuple[int, int, scorecraft.voices.Signal]]:

		"""
		Synthesise every pitched note as ``(onset_ms, duration_ms, signal)``.
		"""

		beat_ms = self.beat_duration_ms()
		cache: scorecraft.voices.SampleCache = {}
		signals = []

		for instant in range(playable.length()):

			for note in playable.notes_starting_at(instant):

				if not isinstance(note.kind, scorecraft.note.Pitched):
					continue

				duration_ms = note.duration * beat_ms

				signal = scorecraft.voices.synthesize(
					duration_ms,
					note.kind.pitch.frequency,
					note.kind.timbre,
					note.kind.volume,
					self.config.sample_rate,
					drum_kit = self.config.drum_kit,
					cache = cache
				)

				signals.append((instant * beat_ms, duration_ms, signal))

		return signals


	def render (self, playable: Playable) -> numpy.ndarray:

		"""Mix ``playable`` into a ``(channels, samples)`` float array.

		The array holds ``sample_rate * length * beat_ms // 1000`` samples per
		channel. A playable with only rests renders as silence (normalisation
		skips silent channels) and always has at least one channel.
		"""

		sample_rate = self.config.sample_rate
		total_ms = playable.length() * self.beat_duration_ms()
		total_frames = scorecraft.dsp.ms_to_frames(total_ms, sample_rate)

		signals = self._note_signals(playable)
		channels = max([signal.channels for _, _, signal in signals] + [1])

		logger.debug(f"Mixing {len(signals)} notes into {channels} channel(s), {total_frames} frames")

		buffer = numpy.zeros((channels, total_frames))

		for onset_ms, duration_ms, signal in signals:

			note_frames = scorecraft.dsp.ms_to_frames(duration_ms, sample_rate)
			samples = signal.samples

			if signal.sample_rate != sample_rate:
				samples = scorecraft.dsp.resample(samples, note_frames)

			start = scorecraft.dsp.ms_to_frames(onset_ms, sample_rate)
			end = min(start + samples.shape[0], total_frames)

			if end <= start:
				continue

			span = samples[:end - start]

			if signal.channels == 1:
				buffer[:, start:end] += span[:, 0] / channels
			else:
				for source in range(signal.channels):
					buffer[output_channel(source, signal.channels, channels), start:end] += span[:, source]

		return self._normalize(buffer)


	def _normalize (self, buffer: numpy.ndarray) -> numpy.ndarray:

		gain = self.config.output_gain

		if buffer.shape[1] == 0:
			return buffer

		if self.config.normalization == "global":
			peak = numpy.max(numpy.abs(buffer))
			return buffer / peak * gain if peak > 0 else buffer

		for channel in range(buffer.shape[0]):
			peak = numpy.max(numpy.abs(buffer[channel]))
			if peak > 0:
				buffer[channel] = buffer[channel] / peak * gain

		return buffer


	def render_to_wav (self, playable: Playable, path: str) -> None:

		"""Render ``playable`` and write it as a 16-bit PCM WAV file.

		Raises:
			OSError: If ``path`` cannot be opened for writing.
		"""

		buffer = self.render(playable)
		pcm = numpy.clip(buffer * 32767.0, -32768.0, 32767.0).astype(numpy.int16)

		with wave.open(str(path), "wb") as f:
			f.setnchannels(buffer.shape[0])
			f.setsampwidth(2)
			f.setframerate(self.config.sample_rate)
			f.writeframes(numpy.ascontiguousarray(pcm.T).tobytes())

		logger.info(f"Wrote {buffer.shape[1]} frames x {buffer.shape[0]} channel(s) to {path}")
