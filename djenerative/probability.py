"""Weight tables and ranges that bias the generator's random choices.

Weights are relative - they don't need to sum to anything in particular. A
weight of 0 removes that option entirely. Negative weights are rejected when a
table is built as a configuration mistake; the resolvers themselves would skip
any weight <= 0 the same way they skip zeros.
"""

import dataclasses
import typing

import djenerative.constants.durations
import djenerative.scales


def _check_weights (weights: typing.Sequence[float], count: int, label: str) -> typing.Tuple[float, ...]:

	"""Validate a weight sequence and return it as a tuple of floats."""

	if len(weights) != count:
		raise ValueError(f"{label} needs exactly {count} weights, got {len(weights)}")

	values = tuple(float(w) for w in weights)

	for value in values:
		if value < 0:
			raise ValueError(f"{label} weights must be non-negative, got {value}")

	return values


@dataclasses.dataclass(frozen=True)
class DegreeWeights:

	"""
	One weight per scale degree (1-7), stored zero-indexed.
	"""

	weights: typing.Tuple[float, ...]

	def __post_init__ (self) -> None:
		object.__setattr__(self, "weights", _check_weights(self.weights, djenerative.scales.DEGREE_COUNT, "DegreeWeights"))

	@classmethod
	def only (cls, degree: int, weight: float = 100) -> "DegreeWeights":

		"""Weights that always select a single zero-indexed degree."""

		weights = [0.0] * djenerative.scales.DEGREE_COUNT
		weights[degree] = weight
		return cls(weights=tuple(weights))


@dataclasses.dataclass(frozen=True)
class DurationWeights:

	"""
	One weight per supported duration, whole note first.
	"""

	whole: float = 0
	half: float = 0
	quarter: float = 0
	eighth: float = 0
	sixteenth: float = 0
	thirty_second: float = 0
	sixty_fourth: float = 0

	def __post_init__ (self) -> None:

		for name in djenerative.constants.durations.DURATION_NAMES:
			if getattr(self, name) < 0:
				raise ValueError(f"DurationWeights.{name} must be non-negative, got {getattr(self, name)}")

	def items (self) -> typing.List[typing.Tuple[float, float]]:

		"""Return ``(duration_in_beats, weight)`` pairs, longest duration first."""

		return [
			(duration, float(getattr(self, name)))
			for name, duration in djenerative.constants.durations.DURATION_NAMES.items()
		]


@dataclasses.dataclass(frozen=True)
class OctaveRange:

	"""Inclusive octave offsets from the root, bounding lead-voice register.

	Bounds given in the wrong order are swapped rather than rejected, so
	``OctaveRange(5, 2) == OctaveRange(2, 5)``.
	"""

	min_offset: int = 0
	max_offset: int = 0

	def __post_init__ (self) -> None:

		if self.min_offset > self.max_offset:
			low, high = self.max_offset, self.min_offset
			object.__setattr__(self, "min_offset", low)
			object.__setattr__(self, "max_offset", high)


# Rhythm chugs stay close to the root and fifth.
DEFAULT_RHYTHM_DEGREES = DegreeWeights(weights=(60, 10, 5, 5, 10, 5, 5))

# Leads spread across the whole scale.
DEFAULT_LEAD_DEGREES = DegreeWeights(weights=(20, 10, 15, 10, 20, 10, 15))

DEFAULT_TIMING = DurationWeights(quarter=5, eighth=30, sixteenth=50, thirty_second=15)

DEFAULT_LEAD_OCTAVES = OctaveRange(min_offset=1, max_offset=2)
