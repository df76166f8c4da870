import logging
import pathlib

import pytest

import scorecraft.config
import scorecraft.render


def test_missing_file_gives_defaults (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file warns and falls back to the defaults."""

	with caplog.at_level(logging.WARNING, logger="scorecraft.config"):
		config = scorecraft.config.load_config(str(tmp_path / "config.yaml"))

	assert config == scorecraft.config.Config()
	assert "not found" in caplog.text


def test_empty_file_gives_defaults (tmp_path: pathlib.Path) -> None:

	"""An empty file is the same as no settings."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert scorecraft.config.load_config(str(path)) == scorecraft.config.Config()


def test_loads_values (tmp_path: pathlib.Path) -> None:

	"""Keys in the file override the defaults; the rest are kept."""

	path = tmp_path / "config.yaml"
	path.write_text(
		"tempo_bpm: 240\n"
		"output_gain: 0.5\n"
		"normalization: global\n"
		"drum_sample_dir: samples/drums\n"
	)

	config = scorecraft.config.load_config(str(path))

	assert config.tempo_bpm == 240
	assert config.output_gain == 0.5
	assert config.normalization == "global"
	assert config.sample_rate == 44100
	assert config.drum_sample_dir == "samples/drums"


def test_unknown_keys_are_rejected (tmp_path: pathlib.Path) -> None:

	"""Misspelt keys are errors rather than silently ignored."""

	path = tmp_path / "config.yaml"
	path.write_text("tempo: 200\n")

	with pytest.raises(ValueError, match="tempo"):
		scorecraft.config.load_config(str(path))


def test_non_mapping_is_rejected (tmp_path: pathlib.Path) -> None:

	"""The top level must be a mapping."""

	path = tmp_path / "config.yaml"
	path.write_text("- 1\n- 2\n")

	with pytest.raises(ValueError):
		scorecraft.config.load_config(str(path))


@pytest.mark.parametrize("values", [
	{"tempo_bpm": 5},
	{"tempo_bpm": 2000},
	{"tempo_bpm": 120.5},
	{"tempo_bpm": True},
	{"output_gain": -1},
	{"output_gain": "loud"},
	{"sample_rate": 4000},
	{"sample_rate": 500000},
	{"normalization": "peak"},
])
def test_invalid_values (values: dict) -> None:

	"""Out-of-range and mistyped values raise ValueError."""

	with pytest.raises(ValueError):
		scorecraft.config.Config(**values)


def test_file_player_uses_settings () -> None:

	"""The player built from a config carries its tempo and output settings."""

	config = scorecraft.config.Config(tempo_bpm=150, output_gain=0.25, sample_rate=22050, normalization="global")
	player = config.file_player()

	assert isinstance(player, scorecraft.render.FilePlayer)
	assert player.beat_duration_ms() == 400
	assert player.config.output_gain == 0.25
	assert player.config.sample_rate == 22050
	assert player.config.normalization == "global"
	assert player.config.drum_kit.sample_dir is None


def test_validate_output_path (tmp_path: pathlib.Path) -> None:

	"""The output file may be new, but its directory must exist."""

	assert scorecraft.config.validate_output_path(str(tmp_path / "new.wav")) == str(tmp_path / "new.wav")

	with pytest.raises(ValueError):
		scorecraft.config.validate_output_path(str(tmp_path / "nowhere" / "new.wav"))
