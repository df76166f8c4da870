import threading
import typing

import numpy
import pytest
import soundfile

import scorecraft.playback


class FakeOutputStream:

	"""Minimal sounddevice output stream stub that records what is written."""

	def __init__ (self, device_module: "FakeSoundDevice", samplerate: int, channels: int, device: typing.Any = None, dtype: str = "float32", **kwargs: typing.Any) -> None:

		"""Store the stream settings for later inspection."""

		self.device_module = device_module
		self.samplerate = samplerate
		self.channels = channels
		self.device = device
		self.dtype = dtype
		self.written: typing.List[numpy.ndarray] = []


	def __enter__ (self) -> "FakeOutputStream":

		"""Register the stream with its fake module."""

		with self.device_module.lock:
			self.device_module.streams.append(self)

		return self


	def __exit__ (self, *exc_info: typing.Any) -> None:

		"""No-op close for the fake stream."""

		return None


	def write (self, data: numpy.ndarray) -> None:

		"""Record the block, or fail if the fake device is set to fail."""

		if self.device_module.fail_writes:
			raise RuntimeError("Fake device unplugged")

		self.written.append(numpy.array(data, copy=True))


class FakeSoundDevice:

	"""Stands in for the sounddevice module in tests."""

	def __init__ (self) -> None:

		"""Start with one output device and one input-only device."""

		self.devices: typing.List[typing.Dict[str, typing.Any]] = [
			{"name": "Dummy Output", "max_output_channels": 2},
			{"name": "Dummy Microphone", "max_output_channels": 0},
		]
		self.streams: typing.List[FakeOutputStream] = []
		self.fail_writes = False
		self.lock = threading.Lock()


	def query_devices (self) -> typing.List[typing.Dict[str, typing.Any]]:

		"""Return the fake device list."""

		return list(self.devices)


	def check_output_settings (self, device: typing.Any = None, samplerate: typing.Optional[int] = None, **kwargs: typing.Any) -> None:

		"""Reject devices that are not in the fake list or cannot output."""

		if device is None:
			return None

		outputs = [(index, info["name"]) for index, info in enumerate(self.devices) if info["max_output_channels"] > 0]

		if any(device == index or device == name for index, name in outputs):
			return None

		raise ValueError(f"No output device matching {device!r}")


	def OutputStream (self, **kwargs: typing.Any) -> FakeOutputStream:

		"""Create a recording stream."""

		return FakeOutputStream(self, **kwargs)


@pytest.fixture
def fake_sounddevice (monkeypatch: pytest.MonkeyPatch) -> FakeSoundDevice:

	"""Route scorecraft.playback to a fake audio device."""

	fake = FakeSoundDevice()
	monkeypatch.setattr(scorecraft.playback, "_sounddevice", lambda: fake)

	return fake


@pytest.fixture
def write_wav (tmp_path: typing.Any) -> typing.Callable[..., str]:

	"""Return a helper that writes a float array to a WAV file under tmp_path."""

	def write (name: str, data: numpy.ndarray, sample_rate: int) -> str:

		path = str(tmp_path / name)
		soundfile.write(path, data, sample_rate)
		return path

	return write
