"""Settings loaded from a YAML file.

Every key is optional; anything missing keeps its default::

	# config.yaml
	tempo_bpm: 300
	output_gain: 0.8
	sample_rate: 48000
	normalization: global
	output_path: out/song.wav
	midi_path: out/song.mid
	drum_sample_dir: samples/drums
	audio_device: "MacBook Pro Speakers"
"""

import dataclasses
import logging
import os
import typing

import yaml

import scorecraft.render
import scorecraft.voices


logger = logging.getLogger(__name__)


MIN_TEMPO_BPM = 10
MAX_TEMPO_BPM = 1000
MIN_SAMPLE_RATE = 8000
MAX_SAMPLE_RATE = 192000


@dataclasses.dataclass
class Config:

	"""
	Tempo, output and device settings shared by the command line and the interactive shell.
	"""

	tempo_bpm: int = 300
	output_gain: float = 1.0
	sample_rate: int = 44100
	normalization: str = "per_channel"
	output_path: str = "output.wav"
	midi_path: typing.Optional[str] = None
	drum_sample_dir: typing.Optional[str] = None
	audio_device: typing.Optional[str] = None


	def __post_init__ (self) -> None:

		validate_tempo(self.tempo_bpm)
		validate_gain(self.output_gain)
		validate_sample_rate(self.sample_rate)

		if self.normalization not in scorecraft.render.NORMALIZATION_MODES:
			raise ValueError(f"normalization must be one of {scorecraft.render.NORMALIZATION_MODES}, got {self.normalization!r}")


	def drum_kit (self) -> scorecraft.voices.DrumKit:

		return scorecraft.voices.DrumKit(self.drum_sample_dir)


	def file_output (self) -> scorecraft.render.FileOutputConfig:

		return scorecraft.render.FileOutputConfig(
			output_gain = self.output_gain,
			sample_rate = self.sample_rate,
			normalization = self.normalization,
			drum_kit = self.drum_kit()
		)


	def file_player (self) -> scorecraft.render.FilePlayer:

		return scorecraft.render.FilePlayer(self.tempo_bpm, self.file_output())


def validate_tempo (tempo_bpm: int) -> int:

	if isinstance(tempo_bpm, bool) or not isinstance(tempo_bpm, int) or not MIN_TEMPO_BPM <= tempo_bpm <= MAX_TEMPO_BPM:
		raise ValueError(f"tempo_bpm must be an integer from {MIN_TEMPO_BPM} to {MAX_TEMPO_BPM}, got {tempo_bpm!r}")

	return tempo_bpm


def validate_gain (output_gain: float) -> float:

	if isinstance(output_gain, bool) or not isinstance(output_gain, (int, float)) or output_gain < 0:
		raise ValueError(f"output_gain must be a number of at least 0, got {output_gain!r}")

	return output_gain


def validate_sample_rate (sample_rate: int) -> int:

	if isinstance(sample_rate, bool) or not isinstance(sample_rate, int) or not MIN_SAMPLE_RATE <= sample_rate <= MAX_SAMPLE_RATE:
		raise ValueError(f"sample_rate must be an integer from {MIN_SAMPLE_RATE} to {MAX_SAMPLE_RATE}, got {sample_rate!r}")

	return sample_rate


def validate_output_path (path: str) -> str:

	"""
	The file itself may not exist yet, but its directory must.
	"""

	parent = os.path.dirname(os.path.abspath(path))

	if not os.path.isdir(parent):
		raise ValueError(f"Directory {parent} does not exist")

	return path


def load_config (config_path: str = "config.yaml") -> Config:

	"""Load settings from a YAML file.

	A missing file is not an error: a warning is logged and the defaults
	are returned. An empty file also gives the defaults.

	Raises:
		ValueError: If the file is not a mapping, has unknown keys, or holds
			an invalid value.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Config()

	with open(config_path, "r") as f:
		data = yaml.safe_load(f)

	if data is None:
		return Config()

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	known = {field.name for field in dataclasses.fields(Config)}
	unknown = sorted(set(data) - known)

	if unknown:
		raise ValueError(f"Unknown config keys in {config_path}: {', '.join(map(str, unknown))}")

	logger.info(f"Loaded config from {config_path}")

	return Config(**data)
