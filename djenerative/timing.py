import logging
import random
import typing

import djenerative.constants.durations
import djenerative.probability
import djenerative.weighted_choice


logger = logging.getLogger(__name__)


def random_duration (weights: djenerative.probability.DurationWeights, rng: random.Random) -> float:

	"""Draw one note duration (in beats) from a duration weight table.

	Durations with a weight <= 0 are never chosen. If no weight is positive the
	result is a whole note, so a duration is always defined.
	"""

	executor: djenerative.weighted_choice.WeightedChoiceExecutor[float] = djenerative.weighted_choice.WeightedChoiceExecutor(rng)

	for duration, weight in weights.items():
		executor.add(duration, weight)

	if not executor:
		logger.debug("No positive duration weights - falling back to a whole note")
		return djenerative.constants.durations.WHOLE

	return typing.cast(float, executor.choose())
