import logging
import random
import typing

import djenerative.probability
import djenerative.scales
import djenerative.weighted_choice


logger = logging.getLogger(__name__)


def resolve_degree (weights: djenerative.probability.DegreeWeights, rng: random.Random) -> typing.Optional[int]:

	"""
	Draw a zero-indexed scale degree, or ``None`` when every weight is <= 0.
	"""

	executor: djenerative.weighted_choice.WeightedChoiceExecutor[int] = djenerative.weighted_choice.WeightedChoiceExecutor(rng)

	for degree, weight in enumerate(weights.weights):
		executor.add(degree, weight)

	return executor.choose()


def resolve_interval (
	weights: djenerative.probability.DegreeWeights,
	scale: djenerative.scales.Scale,
	rng: random.Random
) -> int:

	"""Draw a scale degree and return its interval above the root, in half-steps.

	If no degree has a positive weight the result is the zero interval (the root).
	"""

	degree = resolve_degree(weights, rng)

	if degree is None:
		logger.debug("No positive degree weights - falling back to the root")
		return 0

	return scale[degree]
