import random

import pytest

import djenerative.generator
import djenerative.probability
import djenerative.scales


@pytest.fixture
def major () -> djenerative.scales.Scale:

	"""C major intervals: [0, 2, 4, 5, 7, 9, 11]."""

	return djenerative.scales.get_scale("major")


@pytest.fixture
def c4 () -> djenerative.scales.RootNote:

	"""Middle C (MIDI 60) as the root note."""

	return djenerative.scales.parse_root_note("C4")


@pytest.fixture
def rng () -> random.Random:

	"""A seeded random source for repeatable draws."""

	return random.Random(42)


@pytest.fixture
def make_generator (major: djenerative.scales.Scale, c4: djenerative.scales.RootNote):

	"""Factory for generators over C major rooted at C4, with quarter notes only."""

	def _make (**kwargs) -> djenerative.generator.PatternGenerator:

		kwargs.setdefault("scale", major)
		kwargs.setdefault("root", c4)
		kwargs.setdefault("timing", djenerative.probability.DurationWeights(quarter=1))
		kwargs.setdefault("seed", 1)

		return djenerative.generator.PatternGenerator(**kwargs)

	return _make
