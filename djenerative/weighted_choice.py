"""Weighted random selection over a finite set of labelled outcomes.

Selection always uses a single uniform draw over ``[0, total_weight)``
followed by a cumulative scan of the options in the order they were added,
so a seeded ``random.Random`` gives repeatable results.
"""

import random
import typing


T = typing.TypeVar("T")


def weighted_index (weights: typing.Sequence[float], rng: random.Random) -> typing.Optional[int]:

	"""Pick an index into ``weights`` with probability proportional to its weight.

	Non-positive weights are never chosen. Returns ``None`` when no weight is
	positive, leaving the caller to supply a fallback.

	Example:
		```python
		weighted_index([0, 3, 1], random.Random(1))  # → 1 or 2, never 0
		```
	"""

	total = sum(w for w in weights if w > 0)

	if total <= 0:
		return None

	threshold = rng.random() * total
	cumulative = 0.0
	last_positive = None

	for index, weight in enumerate(weights):

		if weight <= 0:
			continue

		cumulative += weight
		last_positive = index

		if threshold < cumulative:
			return index

	# Float rounding can leave the threshold a hair above the final sum.
	return last_positive


class WeightedChoiceExecutor (typing.Generic[T]):

	"""
	An ordered set of ``(action, weight)`` options, one of which is selected per draw.
	"""

	def __init__ (self, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Create an empty executor drawing from ``rng`` (or the shared module stream).
		"""

		self.rng: random.Random = rng if rng is not None else typing.cast(random.Random, random)
		self._options: typing.List[typing.Tuple[T, float]] = []


	def add (self, action: T, weight: float) -> None:

		"""
		Add an option. Options with weight <= 0 can never be selected, so they are not stored.
		"""

		if weight <= 0:
			return

		self._options.append((action, float(weight)))


	def __len__ (self) -> int:
		return len(self._options)


	@property
	def total_weight (self) -> float:
		return sum(weight for _, weight in self._options)


	def choose (self, default: typing.Optional[T] = None) -> typing.Optional[T]:

		"""
		Select one option and return it without invoking it, or ``default`` if there are none.
		"""

		index = weighted_index([weight for _, weight in self._options], self.rng)

		if index is None:
			return default

		return self._options[index][0]


	def execute (self) -> typing.Any:

		"""Select one option and invoke it, returning the action's result.

		Options must be callables. With no options nothing is invoked and
		``None`` is returned.
		"""

		action = self.choose()

		if action is None:
			return None

		return typing.cast(typing.Callable[[], typing.Any], action)()
