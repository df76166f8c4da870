import argparse
import importlib
import logging
import sys
import typing

import scorecraft.config
import scorecraft.interactive
import scorecraft.midi_export
import scorecraft.piece
import scorecraft.playback


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_target (target: str) -> typing.Any:

	"""Import ``module:callable`` and return what the callable builds.

	Raises:
		ValueError: If ``target`` is not in ``module:callable`` form.
	"""

	module_name, sep, attribute = target.partition(":")

	if not sep or not module_name or not attribute:
		raise ValueError(f"Target must look like 'module:callable', got {target!r}")

	module = importlib.import_module(module_name)
	factory = getattr(module, attribute)

	return factory() if callable(factory) else factory


def as_piece (playable: typing.Any) -> scorecraft.piece.Piece:

	if isinstance(playable, scorecraft.piece.Piece):
		return playable

	return scorecraft.piece.Piece.of(playable)


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="scorecraft", description="Render, export or play a scorecraft piece.")
	parser.add_argument("target", help="module:callable returning a Note, Line or Piece")
	parser.add_argument("--config", default="config.yaml", help="YAML settings file (default: config.yaml)")

	output = parser.add_mutually_exclusive_group()
	output.add_argument("--wav", metavar="PATH", help="render to a WAV file (default: output_path from the config)")
	output.add_argument("--midi", metavar="PATH", help="export a MIDI file")
	output.add_argument("--play", action="store_true", help="play on the audio device")
	output.add_argument("--interactive", action="store_true", help="open the interactive shell")
	output.add_argument("--score", action="store_true", help="print the text score")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the scorecraft command line.
	"""

	args = build_parser().parse_args(argv)

	config = scorecraft.config.load_config(args.config)
	piece = as_piece(load_target(args.target))

	logger.info(f"Loaded {args.target}: {len(piece.tracks)} track(s), {piece.length()} units")

	if args.interactive:
		scorecraft.interactive.InteractiveShell(piece, config).start()

	elif args.score:
		print(piece)

	elif args.play:
		device = scorecraft.playback.select_output_device(config.audio_device) if config.audio_device else None
		player = scorecraft.playback.LivePlayer(config.tempo_bpm, device=device, sample_rate=config.sample_rate, drum_kit=config.drum_kit())
		player.play(piece).join()

	elif args.midi:
		scorecraft.midi_export.write_midi(piece, args.midi, config.tempo_bpm)

	else:
		config.file_player().render_to_wav(piece, args.wav or config.output_path)

		if config.midi_path:
			scorecraft.midi_export.write_midi(piece, config.midi_path, config.tempo_bpm)

	return 0


if __name__ == "__main__":
	sys.exit(main())
