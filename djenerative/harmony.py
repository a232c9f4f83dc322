"""Derive a harmony voice from the primary voice's cached interval.

Harmony always moves a diatonic third (two scale degrees) above the current
degree, wrapping within the seven degrees. Whenever the step wraps past the
top of the scale the octave rises by one, so the harmony stays above the
primary voice without leaving the scale.
"""

import logging
import typing

import djenerative.scales
import djenerative.state


logger = logging.getLogger(__name__)


HARMONY_STEP = 2


def degree_of (interval: typing.Optional[int], scale: djenerative.scales.Scale) -> int:

	"""Return the first degree whose interval matches, or 0 if none does.

	A missing interval (nothing drawn yet) also maps to degree 0.
	"""

	for degree, scale_interval in enumerate(scale.intervals):
		if scale_interval == interval:
			return degree

	return 0


def step_harmony (
	state: djenerative.state.EngineState,
	scale: djenerative.scales.Scale
) -> djenerative.state.EngineState:

	"""Return the state one diatonic third above ``state``.

	This is pure: the input state is not modified.

	Example:
		```python
		major = djenerative.scales.get_scale("major")
		state = EngineState(octave=4, interval=major[6])
		step_harmony(state, major)  # → EngineState(octave=5, interval=2)
		```
	"""

	# TODO: the modulus follows len(scale), which is pinned to seven degrees by Scale; revisit the step size if variable-length scales are allowed.
	degree = degree_of(state.interval, scale)
	next_degree = (degree + HARMONY_STEP) % len(scale)

	octave = state.octave

	if next_degree < degree:
		octave += 1

	logger.debug(f"Harmony step: degree {degree} -> {next_degree}, octave {state.octave} -> {octave}")

	return djenerative.state.EngineState(octave=octave, interval=scale[next_degree])
