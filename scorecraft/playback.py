"""Live playback through an audio output device.

``LivePlayer.play()`` returns immediately with a ``PlaybackHandle``. A
conductor thread walks the playable one unit at a time and starts a thread
for every pitched note that begins on that unit. Each note thread
synthesises its own signal and writes it to its own ``sounddevice`` output
stream, so overlapping notes mix in the device driver::

	import scorecraft.playback

	player = scorecraft.playback.LivePlayer(300)
	player.play(piece).join()

``sounddevice`` is imported on first use, so the rest of the package works
on machines without PortAudio.
"""

import logging
import threading
import time
import types
import typing

import numpy

import scorecraft.dsp
import scorecraft.note
import scorecraft.render
import scorecraft.voices


logger = logging.getLogger(__name__)


# Live output through the device is much hotter than a normalised render.
LIVE_ATTENUATION = 1 / 64


class PlaybackError (RuntimeError):

	"""
	Raised by ``PlaybackHandle.join()`` when one or more notes failed to play.
	"""


def _sounddevice () -> types.ModuleType:

	import sounddevice

	return sounddevice


def output_devices () -> typing.List[typing.Tuple[int, str]]:

	"""
	``(index, name)`` for every device that has output channels.
	"""

	devices = _sounddevice().query_devices()

	return [(index, device["name"]) for index, device in enumerate(devices) if device["max_output_channels"] > 0]


def select_output_device (device_name: typing.Optional[str] = None) -> typing.Optional[int]:

	"""Resolve an output device to its index.

	If ``device_name`` is given it must match (or be a case-insensitive
	substring of) exactly one output device. With no name, a single output
	device is used automatically and several prompt for a choice on the
	console.

	Returns:
		The device index, or ``None`` to use the system default when there
		are no output devices to choose from.

	Raises:
		ValueError: If ``device_name`` matches no device, or more than one.
	"""

	outputs = output_devices()
	logger.info(f"Available audio outputs: {[name for _, name in outputs]}")

	if device_name is not None:

		exact = [index for index, name in outputs if name == device_name]

		if exact:
			return exact[0]

		matches = [index for index, name in outputs if device_name.lower() in name.lower()]

		if len(matches) != 1:
			raise ValueError(
				f"Audio output device '{device_name}' "
				f"{'not found' if not matches else 'is ambiguous'}. "
				f"Available devices: {[name for _, name in outputs]}"
			)

		return matches[0]

	if not outputs:
		logger.warning("No audio output devices found, using the system default.")
		return None

	if len(outputs) == 1:
		index, name = outputs[0]
		logger.info(f"One audio output found - using '{name}'")
		return index

	print("\nAvailable audio output devices:\n")
	for position, (_, name) in enumerate(outputs, 1):
		print(f"  {position}. {name}")
	print()

	while True:
		try:
			choice = int(input(f"Select a device (1-{len(outputs)}): "))
			if 1 <= choice <= len(outputs):
				break
		except ValueError:
			pass
		print(f"Enter a number between 1 and {len(outputs)}.")

	index, name = outputs[choice - 1]
	logger.info(f"Using audio output: {name}")

	print("\nTip: To skip this prompt, set the device in your config file:\n")
	print(f"  audio_device: \"{name}\"\n")

	return index


class PlaybackHandle:

	"""
	Tracks one ``play()`` call. There is no way to stop playback early.
	"""

	def __init__ (self) -> None:

		self.errors: typing.List[BaseException] = []
		self._lock = threading.Lock()
		self._thread: typing.Optional[threading.Thread] = None


	def _record_failure (self, exc: BaseException) -> None:

		with self._lock:
			self.errors.append(exc)


	def is_alive (self) -> bool:

		return self._thread is not None and self._thread.is_alive()


	def join (self, timeout: typing.Optional[float] = None) -> None:

		"""Wait for playback to finish.

		Raises:
			PlaybackError: If any note failed. The first failure is chained
				as the cause.
		"""

		if self._thread is not None:
			self._thread.join(timeout)

		if self.errors:
			raise PlaybackError(f"{len(self.errors)} note(s) failed to play") from self.errors[0]


class LivePlayer:

	"""Plays playables on an audio device in real time.

	Parameters:
		tempo_bpm: Units (sixteenths) per minute.
		device: ``sounddevice`` device index or name. ``None`` uses the
			system default output.
		sample_rate: Stream rate in Hz.
		drum_kit: Kit used for drum notes.

	Raises:
		ValueError: If no device matches ``device``.
		sounddevice.PortAudioError: If the device cannot play at
			``sample_rate``. Both are checked here, before anything is
			scheduled.
	"""

	def __init__ (
		self,
		tempo_bpm: int = 300,
		device: typing.Optional[typing.Union[int, str]] = None,
		sample_rate: int = 44100,
		drum_kit: typing.Optional[scorecraft.voices.DrumKit] = None
	) -> None:

		self.tempo_bpm = tempo_bpm
		self.device = device
		self.sample_rate = sample_rate
		self.drum_kit = drum_kit

		_sounddevice().check_output_settings(device=device, samplerate=sample_rate)


	def beat_duration_ms (self) -> int:

		return scorecraft.render.beat_duration_ms(self.tempo_bpm)


	def play (self, playable: scorecraft.render.Playable) -> PlaybackHandle:

		"""
		Start playing ``playable`` in the background and return its handle.
		"""

		handle = PlaybackHandle()
		handle._thread = threading.Thread(target=self._conduct, args=(playable, handle), name="scorecraft-conductor", daemon=True)
		handle._thread.start()

		return handle


	def _conduct (self, playable: scorecraft.render.Playable, handle: PlaybackHandle) -> None:

		beat_seconds = self.beat_duration_ms() / 1000.0
		note_threads: typing.List[threading.Thread] = []

		try:
			for instant in range(playable.length()):

				for note in playable.notes_starting_at(instant):

					if not isinstance(note.kind, scorecraft.note.Pitched):
						continue

					thread = threading.Thread(target=self._play_note, args=(note, handle), daemon=True)
					thread.start()
					note_threads.append(thread)

				time.sleep(beat_seconds)

		except Exception as exc:
			logger.error(f"Playback stopped early: {exc}")
			handle._record_failure(exc)

		for thread in note_threads:
			thread.join()

		logger.debug(f"Playback finished: {len(note_threads)} notes, {len(handle.errors)} failed")


	def _play_note (self, note: scorecraft.note.Note, handle: PlaybackHandle) -> None:

		kind = note.kind
		duration_ms = note.duration * self.beat_duration_ms()

		try:
			signal = scorecraft.voices.synthesize(
				duration_ms,
				kind.pitch.frequency,
				kind.timbre,
				kind.volume * LIVE_ATTENUATION,
				self.sample_rate,
				drum_kit = self.drum_kit
			)

			samples = signal.samples

			if signal.sample_rate != self.sample_rate:
				samples = scorecraft.dsp.resample(samples, scorecraft.dsp.ms_to_frames(duration_ms, self.sample_rate))

			sd = _sounddevice()

			with sd.OutputStream(samplerate=self.sample_rate, channels=samples.shape[1], device=self.device, dtype="float32") as stream:
				stream.write(numpy.ascontiguousarray(samples, dtype=numpy.float32))

		except Exception as exc:
			logger.error(f"Failed to play {note}: {exc}")
			handle._record_failure(exc)
