import logging
import sys

import djenerative.config
import djenerative.pattern
import djenerative.riff


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def describe (pattern: djenerative.pattern.Pattern) -> str:

	"""
	Summarise a single-voice pattern as note numbers and durations.
	"""

	return " ".join(
		f"rest/{event.duration}" if event.pitch is None else f"{event.pitch}@{event.velocity}/{event.duration}"
		for event in pattern.events
	)


def main () -> None:

	"""
	Generate a riff from a YAML config and log each note group.
	"""

	config_path = sys.argv[1] if len(sys.argv) > 1 else 'config.yaml'

	logger.info("Djenerative starting...")

	settings = djenerative.config.load_settings(config_path)
	generator = settings.create_generator()

	logger.info(f"Scale {settings.scale.name}, root {settings.root.name}, seed {settings.seed}")

	riff = djenerative.riff.Riff.generate(
		generator,
		length = settings.length,
		request_weights = settings.requests,
		harmony = settings.harmony,
	)

	for i, group in enumerate(riff.groups):
		voices = ", ".join(f"{name}: {describe(pattern)}" for name, pattern in group.voices().items() if pattern is not None)
		logger.info(f"{i:3d} | {voices}")


if __name__ == "__main__":
	main()
