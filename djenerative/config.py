"""YAML configuration for the riff generator.

Example ``config.yaml``::

    scale: phrygian
    root: E2
    seed: 42
    length: 32
    harmony: false
    lead_octaves: [1, 2]
    rhythm_degrees: [60, 10, 5, 5, 10, 5, 5]
    lead_degrees: [20, 10, 15, 10, 20, 10, 15]
    timing:
      eighth: 30
      sixteenth: 50
    requests:
      rhythm_mute: 50
      gap: 20
      lead: 10

Every key is optional.
"""

import dataclasses
import logging
import os
import typing

import yaml

import djenerative.constants.durations
import djenerative.generator
import djenerative.probability
import djenerative.riff
import djenerative.scales


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class GeneratorSettings:

	"""
	Everything needed to build a generator and a riff.
	"""

	scale: djenerative.scales.Scale = dataclasses.field(default_factory=lambda: djenerative.scales.get_scale("phrygian"))
	root: djenerative.scales.RootNote = dataclasses.field(default_factory=lambda: djenerative.scales.parse_root_note("E2"))
	rhythm_degrees: djenerative.probability.DegreeWeights = djenerative.probability.DEFAULT_RHYTHM_DEGREES
	lead_degrees: djenerative.probability.DegreeWeights = djenerative.probability.DEFAULT_LEAD_DEGREES
	timing: djenerative.probability.DurationWeights = djenerative.probability.DEFAULT_TIMING
	lead_octaves: djenerative.probability.OctaveRange = djenerative.probability.DEFAULT_LEAD_OCTAVES
	requests: typing.Dict[str, float] = dataclasses.field(default_factory=lambda: dict(djenerative.riff.DEFAULT_REQUEST_WEIGHTS))
	seed: typing.Optional[int] = None
	length: int = 32
	harmony: bool = False

	@classmethod
	def from_dict (cls, data: typing.Optional[typing.Dict[str, typing.Any]]) -> "GeneratorSettings":

		"""
		Build settings from a parsed configuration mapping, keeping defaults for missing keys.
		"""

		settings = cls()

		if not data:
			return settings

		if "scale" in data:
			settings.scale = djenerative.scales.get_scale(str(data["scale"]))

		if "root" in data:
			settings.root = djenerative.scales.parse_root_note(str(data["root"]))

		if "rhythm_degrees" in data:
			settings.rhythm_degrees = djenerative.probability.DegreeWeights(weights=tuple(data["rhythm_degrees"]))

		if "lead_degrees" in data:
			settings.lead_degrees = djenerative.probability.DegreeWeights(weights=tuple(data["lead_degrees"]))

		if "timing" in data:
			timing = dict(data["timing"])
			unknown = set(timing) - set(djenerative.constants.durations.DURATION_NAMES)
			if unknown:
				raise ValueError(f"Unknown durations in timing: {sorted(unknown)}")
			settings.timing = djenerative.probability.DurationWeights(**timing)

		if "lead_octaves" in data:
			bounds = list(data["lead_octaves"])
			if len(bounds) != 2:
				raise ValueError(f"lead_octaves needs [min, max], got {bounds}")
			settings.lead_octaves = djenerative.probability.OctaveRange(int(bounds[0]), int(bounds[1]))

		if "requests" in data:
			requests = {str(k): float(v) for k, v in dict(data["requests"]).items()}
			unknown = set(requests) - set(djenerative.generator.NOTE_REQUESTS)
			if unknown:
				raise ValueError(f"Unknown note requests: {sorted(unknown)}")
			settings.requests = requests

		if "seed" in data:
			settings.seed = None if data["seed"] is None else int(data["seed"])

		if "length" in data:
			settings.length = int(data["length"])

		if "harmony" in data:
			settings.harmony = bool(data["harmony"])

		return settings


	def create_generator (self) -> djenerative.generator.PatternGenerator:

		"""
		Create a generator from these settings.
		"""

		return djenerative.generator.PatternGenerator(
			scale = self.scale,
			root = self.root,
			rhythm_degrees = self.rhythm_degrees,
			lead_degrees = self.lead_degrees,
			timing = self.timing,
			lead_octaves = self.lead_octaves,
			seed = self.seed,
		)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def load_settings (config_path: str = 'config.yaml') -> GeneratorSettings:

	"""
	Load a YAML config file and build generator settings from it.
	"""

	return GeneratorSettings.from_dict(load_config(config_path))
