import random

import djenerative.constants.durations as dur
import djenerative.probability
import djenerative.timing


def test_all_zero_weights_fall_back_to_whole () -> None:

	"""A table with no positive weight always yields a whole note."""

	rng = random.Random(0)
	weights = djenerative.probability.DurationWeights()

	for _ in range(50):
		assert djenerative.timing.random_duration(weights, rng) == dur.WHOLE


def test_single_duration_always_chosen () -> None:

	"""Only the positively weighted duration is ever returned."""

	rng = random.Random(1)
	weights = djenerative.probability.DurationWeights(sixty_fourth=3)

	for _ in range(50):
		assert djenerative.timing.random_duration(weights, rng) == dur.SIXTYFOURTH


def test_only_weighted_durations_returned () -> None:

	"""Zero-weight durations never appear."""

	rng = random.Random(2)
	weights = djenerative.probability.DurationWeights(eighth=1, sixteenth=1)

	results = {djenerative.timing.random_duration(weights, rng) for _ in range(200)}

	assert results == {dur.EIGHTH, dur.SIXTEENTH}


def test_duration_order_matches_names () -> None:

	"""items() lists durations whole note first."""

	weights = djenerative.probability.DurationWeights(whole=1, sixty_fourth=7)

	assert weights.items() == [
		(4.0, 1.0),
		(2.0, 0.0),
		(1.0, 0.0),
		(0.5, 0.0),
		(0.25, 0.0),
		(0.125, 0.0),
		(0.0625, 7.0),
	]
