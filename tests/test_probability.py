import pytest

import djenerative.probability


class TestOctaveRange:

	def test_ordered_bounds_kept (self) -> None:
		"""Ordered bounds are stored as given."""
		octaves = djenerative.probability.OctaveRange(2, 5)

		assert (octaves.min_offset, octaves.max_offset) == (2, 5)

	def test_reversed_bounds_swapped (self) -> None:
		"""Reversed bounds are swapped rather than rejected."""
		assert djenerative.probability.OctaveRange(5, 2) == djenerative.probability.OctaveRange(2, 5)

	def test_negative_offsets (self) -> None:
		"""Offsets below the root octave are allowed."""
		octaves = djenerative.probability.OctaveRange(0, -1)

		assert (octaves.min_offset, octaves.max_offset) == (-1, 0)


class TestDegreeWeights:

	def test_wrong_length_raises (self) -> None:
		"""Exactly seven weights are required."""
		with pytest.raises(ValueError):
			djenerative.probability.DegreeWeights(weights=(1, 2, 3))

	def test_negative_weight_raises (self) -> None:
		"""Weights must be non-negative."""
		with pytest.raises(ValueError):
			djenerative.probability.DegreeWeights(weights=(1, 0, 0, -1, 0, 0, 0))

	def test_only (self) -> None:
		"""only() weights a single degree."""
		weights = djenerative.probability.DegreeWeights.only(3, weight=5)

		assert weights.weights == (0.0, 0.0, 0.0, 5.0, 0.0, 0.0, 0.0)


def test_duration_weights_negative_raises () -> None:

	"""Duration weights must be non-negative."""

	with pytest.raises(ValueError):
		djenerative.probability.DurationWeights(eighth=-2)
