"""Numbered-menu shell for auditioning and rendering a piece.

Start it with a piece and (optionally) a ``Config`` for the starting
settings::

	scorecraft.interactive.InteractiveShell(piece).start()

The shell first asks for a mode. Write mode renders WAV files and lets you
change tempo, gain, sample rate and output path. Play mode performs the
piece on the audio device and can print the score while it plays. Each menu
accepts the option number, or the start of its name or description; an
empty answer picks the default where there is one. Settings are validated
as they are entered, so an invalid value just asks again.

Changes made in the shell only last for the session. They are not written
back to the config file.
"""

import dataclasses
import logging
import os
import typing

import scorecraft.config
import scorecraft.piece
import scorecraft.playback


logger = logging.getLogger(__name__)


T = typing.TypeVar("T")


@dataclasses.dataclass
class Option (typing.Generic[T]):

	name: str
	description: str
	value: T


def choose (title: str, options: typing.List[Option[T]], default: typing.Optional[int] = None) -> T:

	"""Print a numbered menu and return the chosen option's value.

	Input matches an option by number, or case-insensitively by a prefix of
	its name or description. The first matching option wins.

	Raises:
		EOFError: If stdin closes.
	"""

	print(f"{title}:")

	for index, option in enumerate(options, 1):
		print(f"    {index}. {option.name} ({option.description})")

	if default is not None:
		print(f"Default: {options[default].name}")

	while True:

		answer = input().strip().lower()

		if not answer:
			if default is not None:
				return options[default].value
			print("Input cannot be empty, please try again.")
			continue

		for index, option in enumerate(options, 1):
			if answer == str(index) or option.name.lower().startswith(answer) or option.description.lower().startswith(answer):
				return option.value

		print("Invalid selection, please try again.")


def ask_value (prompt: str, parse: typing.Callable[[str], T], validate: typing.Callable[[T], T]) -> T:

	"""
	Ask until ``parse`` and ``validate`` both accept the answer.
	"""

	print(f"{prompt}:")

	while True:

		answer = input().strip()

		try:
			return validate(parse(answer))
		except ValueError as exc:
			print(f"Invalid input: {exc}. Please try again.")


def ask_tempo () -> int:

	return ask_value(
		f"Enter tempo in BPM (Between {scorecraft.config.MIN_TEMPO_BPM} and {scorecraft.config.MAX_TEMPO_BPM})",
		int,
		scorecraft.config.validate_tempo
	)


def ask_gain () -> float:

	return ask_value("Enter output gain (0.0 or more)", float, scorecraft.config.validate_gain)


def ask_sample_rate () -> int:

	return ask_value(
		f"Enter sample rate (Between {scorecraft.config.MIN_SAMPLE_RATE} and {scorecraft.config.MAX_SAMPLE_RATE})",
		int,
		scorecraft.config.validate_sample_rate
	)


def _absolute_path (answer: str) -> str:

	if not answer or not os.path.basename(answer):
		raise ValueError("please enter a file name")

	return os.path.abspath(answer)


def ask_path () -> str:

	return ask_value("Enter output file path", _absolute_path, scorecraft.config.validate_output_path)


class InteractiveShell:

	"""
	Menu loop over stdin for one piece.
	"""

	# Menu results.
	EXIT = "exit"
	SWITCH = "switch"

	def __init__ (self, piece: scorecraft.piece.Piece, config: typing.Optional[scorecraft.config.Config] = None) -> None:

		self.piece = piece
		self.config = dataclasses.replace(config) if config is not None else scorecraft.config.Config()
		self.show_score = False


	def start (self) -> None:

		"""
		Run until the user exits or stdin closes.
		"""

		try:
			while True:
				mode = choose("Select an option", [
					Option("Play", "Play music live", self.live_mode),
					Option("Write", "Render music to a WAV file", self.file_mode),
				])

				if mode() == self.EXIT:
					break

		except EOFError:
			print()

		print("Exiting interactive mode.")


	def file_mode (self) -> str:

		while True:

			config = self.config

			action = choose("File Mode Options", [
				Option("Write", "Write the piece to a file", "write"),
				Option("Change Tempo", f"Current: {config.tempo_bpm} BPM", "tempo"),
				Option("Change Output Gain", f"Current: {config.output_gain}", "gain"),
				Option("Change Sample Rate", f"Current: {config.sample_rate} Hz", "rate"),
				Option("Change Output Path", f"Current: {config.output_path}", "path"),
				Option("Exit", "Leave interactive mode", self.EXIT),
				Option("Switch Mode", "Return to mode selection", self.SWITCH),
			], default=0)

			if action in (self.EXIT, self.SWITCH):
				return action

			if action == "write":
				print(f"Rendering piece to {config.output_path}.")
				config.file_player().render_to_wav(self.piece, config.output_path)
				print(f"Rendering complete. Saved to {config.output_path}.")

			elif action == "tempo":
				config.tempo_bpm = ask_tempo()

			elif action == "gain":
				config.output_gain = ask_gain()

			elif action == "rate":
				config.sample_rate = ask_sample_rate()

			elif action == "path":
				config.output_path = ask_path()


	def live_mode (self) -> str:

		try:
			device = self.config.audio_device
			player = scorecraft.playback.LivePlayer(
				self.config.tempo_bpm,
				device = scorecraft.playback.select_output_device(device) if device else None,
				sample_rate = self.config.sample_rate,
				drum_kit = self.config.drum_kit()
			)
		except Exception as exc:
			logger.error(f"Could not open audio output: {exc}")
			print("Failed to open the audio output. Please ensure your audio output is configured correctly.")
			return self.SWITCH

		while True:

			action = choose("Live Mode Options", [
				Option("Play", "Perform the current piece", "play"),
				Option("Change Tempo", f"Current: {player.tempo_bpm} BPM", "tempo"),
				Option("Hide Score" if self.show_score else "Show Score", "Toggle score display", "score"),
				Option("Exit", "Leave interactive mode", self.EXIT),
				Option("Switch Mode", "Return to mode selection", self.SWITCH),
			], default=0)

			if action in (self.EXIT, self.SWITCH):
				return action

			if action == "play":
				if self.show_score:
					print("Playing piece with score display:")
					print(self.piece)
				else:
					print("Playing piece without score display.")
				player.play(self.piece).join()

			elif action == "tempo":
				player.tempo_bpm = ask_tempo()
				self.config.tempo_bpm = player.tempo_bpm
				print(f"Tempo changed to {player.tempo_bpm} BPM.")

			elif action == "score":
				self.show_score = not self.show_score
