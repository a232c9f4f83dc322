import random

import djenerative.weighted_choice


# --- weighted_index ---


def test_weighted_index_single_positive () -> None:

	"""Only the positive weight can ever be chosen."""

	rng = random.Random(0)

	for _ in range(200):
		assert djenerative.weighted_choice.weighted_index([0, 0, 5, 0], rng) == 2


def test_weighted_index_never_picks_non_positive () -> None:

	"""Zero and negative weights are never selected."""

	rng = random.Random(7)
	weights = [0, 3, -2, 1, 0, 0.5, -1]

	for _ in range(1000):
		assert weights[djenerative.weighted_choice.weighted_index(weights, rng)] > 0


def test_weighted_index_all_zero_returns_none () -> None:

	"""With nothing positive there is no selection."""

	assert djenerative.weighted_choice.weighted_index([0, 0, 0], random.Random(0)) is None
	assert djenerative.weighted_choice.weighted_index([], random.Random(0)) is None


def test_weighted_index_respects_weights () -> None:

	"""Over many trials, heavy-weighted options should appear more often."""

	rng = random.Random(42)
	counts = [0, 0]

	for _ in range(1000):
		counts[djenerative.weighted_choice.weighted_index([9, 1], rng)] += 1

	assert counts[0] > 800
	assert counts[1] > 0


def test_weighted_index_uses_one_draw () -> None:

	"""Each selection consumes exactly one value from the random stream."""

	rng = random.Random(3)
	reference = random.Random(3)

	djenerative.weighted_choice.weighted_index([1, 2, 3], rng)
	reference.random()

	assert rng.random() == reference.random()


def test_weighted_index_cumulative_scan () -> None:

	"""The draw is mapped onto cumulative weights in order."""

	class FixedRandom (random.Random):

		def __init__ (self, value: float) -> None:
			super().__init__()
			self.value = value

		def random (self) -> float:
			return self.value

	# Total 4: [0, 1) → 0, [1, 3) → 1, [3, 4) → 2
	assert djenerative.weighted_choice.weighted_index([1, 2, 1], FixedRandom(0.0)) == 0
	assert djenerative.weighted_choice.weighted_index([1, 2, 1], FixedRandom(0.25)) == 1
	assert djenerative.weighted_choice.weighted_index([1, 2, 1], FixedRandom(0.7)) == 1
	assert djenerative.weighted_choice.weighted_index([1, 2, 1], FixedRandom(0.75)) == 2


# --- WeightedChoiceExecutor ---


def test_executor_skips_non_positive_weights () -> None:

	"""Options with weight <= 0 are not stored."""

	executor = djenerative.weighted_choice.WeightedChoiceExecutor(random.Random(0))
	executor.add("a", 0)
	executor.add("b", -1)
	executor.add("c", 2)

	assert len(executor) == 1
	assert executor.total_weight == 2.0
	assert executor.choose() == "c"


def test_executor_empty_returns_default () -> None:

	"""An empty executor returns the caller's fallback."""

	executor = djenerative.weighted_choice.WeightedChoiceExecutor(random.Random(0))

	assert executor.choose() is None
	assert executor.choose(default="fallback") == "fallback"


def test_executor_execute_invokes_action () -> None:

	"""execute() calls the chosen action and returns its result."""

	calls = []

	executor = djenerative.weighted_choice.WeightedChoiceExecutor(random.Random(0))
	executor.add(lambda: calls.append("never"), 0)
	executor.add(lambda: calls.append("chosen") or 5, 1)

	assert executor.execute() == 5
	assert calls == ["chosen"]


def test_executor_execute_empty_does_nothing () -> None:

	"""With no options nothing is invoked."""

	executor = djenerative.weighted_choice.WeightedChoiceExecutor(random.Random(0))

	assert executor.execute() is None


def test_executor_deterministic () -> None:

	"""Same seed should produce the same sequence of choices."""

	def draws (seed: int) -> list:
		executor = djenerative.weighted_choice.WeightedChoiceExecutor(random.Random(seed))
		for label, weight in [("a", 0.3), ("b", 0.5), ("c", 0.2)]:
			executor.add(label, weight)
		return [executor.choose() for _ in range(20)]

	assert draws(99) == draws(99)


def test_executor_default_uses_random_module () -> None:

	"""Without an rng the executor draws from the shared random stream."""

	executor = djenerative.weighted_choice.WeightedChoiceExecutor()

	assert executor.rng is random
