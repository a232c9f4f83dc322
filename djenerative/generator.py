"""Note-group generation for algorithmically composed riffs.

A :class:`PatternGenerator` turns a *request* (gap, open or muted rhythm,
lead, or natural harmonic) into a :class:`NoteGroup` - four single-voice
patterns (two guitars, bass, drums) that share one randomly drawn duration.

The generator remembers the octave and interval of the last guitar note it
drew (its :class:`~djenerative.state.EngineState`). The bass voice reads that
memory, so a rhythm request followed by its bass note keeps both instruments
on the same degree, and harmony voices are stepped from it rather than drawn
afresh. Call the generator in musical order - one request per step of the
riff - for coherent results.

A generator instance is not thread-safe. Use one instance per independent
stream of requests.

Example:
	```python
	import djenerative.generator
	import djenerative.scales

	gen = djenerative.generator.PatternGenerator(
		scale = djenerative.scales.get_scale("phrygian"),
		root = djenerative.scales.parse_root_note("E2"),
		seed = 7,
	)

	group = gen.generate_note_group(djenerative.generator.RHYTHM_MUTE)
	group = gen.generate_note_group(djenerative.generator.LEAD, harmony=True)
	```
"""

import dataclasses
import logging
import random
import typing

import djenerative.constants.drums
import djenerative.constants.velocity
import djenerative.degrees
import djenerative.harmony
import djenerative.pattern
import djenerative.probability
import djenerative.scales
import djenerative.state
import djenerative.timing


logger = logging.getLogger(__name__)


GAP = "gap"
RHYTHM_OPEN = "rhythm_open"
RHYTHM_MUTE = "rhythm_mute"
LEAD = "lead"
HARMONIC = "harmonic"

NOTE_REQUESTS: typing.Tuple[str, ...] = (GAP, RHYTHM_OPEN, RHYTHM_MUTE, LEAD, HARMONIC)

# Natural harmonics ring two octaves above the root.
HARMONIC_OCTAVE_OFFSET = 2


@dataclasses.dataclass
class NoteGroup:

	"""
	Four parallel single-voice patterns produced by one generation step.
	"""

	guitar_1: typing.Optional[djenerative.pattern.Pattern] = None
	guitar_2: typing.Optional[djenerative.pattern.Pattern] = None
	bass: typing.Optional[djenerative.pattern.Pattern] = None
	drums: typing.Optional[djenerative.pattern.Pattern] = None

	def voices (self) -> typing.Dict[str, typing.Optional[djenerative.pattern.Pattern]]:

		"""Return the voices keyed by name, in track order."""

		return {
			"guitar_1": self.guitar_1,
			"guitar_2": self.guitar_2,
			"bass": self.bass,
			"drums": self.drums,
		}


class PatternGenerator:

	"""Builds note groups from weighted scale-degree and duration tables."""

	def __init__ (
		self,
		scale: djenerative.scales.Scale,
		root: djenerative.scales.RootNote,
		rhythm_degrees: djenerative.probability.DegreeWeights = djenerative.probability.DEFAULT_RHYTHM_DEGREES,
		lead_degrees: djenerative.probability.DegreeWeights = djenerative.probability.DEFAULT_LEAD_DEGREES,
		timing: djenerative.probability.DurationWeights = djenerative.probability.DEFAULT_TIMING,
		lead_octaves: djenerative.probability.OctaveRange = djenerative.probability.DEFAULT_LEAD_OCTAVES,
		rng: typing.Optional[random.Random] = None,
		seed: typing.Optional[int] = None,
		state: typing.Optional[djenerative.state.EngineState] = None,
	) -> None:

		"""Create a generator.

		Parameters:
			scale: The seven intervals every guitar and bass note is drawn from.
			root: Pitch class and reference octave shared by all voices.
			rhythm_degrees: Degree weights for rhythm notes.
			lead_degrees: Degree weights for lead and harmonic notes.
			timing: Duration weights, one draw per note group.
			lead_octaves: Octave offsets from the root for lead notes. Reversed
			    bounds are swapped.
			rng: Random source. Takes precedence over ``seed``.
			seed: Seed for a private random source. With neither ``rng`` nor
			    ``seed`` the process-wide ``random`` stream is used.
			state: Starting octave/interval memory (defaults to empty).
		"""

		self.scale = scale
		self.root = root
		self.rhythm_degrees = rhythm_degrees
		self.lead_degrees = lead_degrees
		self.timing = timing
		self.lead_octaves = lead_octaves

		if rng is not None:
			self.rng = rng
		elif seed is not None:
			self.rng = random.Random(seed)
		else:
			# The random module itself shares the process-wide stream.
			self.rng = typing.cast(random.Random, random)

		self.state = state if state is not None else djenerative.state.EngineState()


	def generate_note_group (self, request: str, harmony: bool = False) -> NoteGroup:

		"""Generate the four voices for one request.

		Parameters:
			request: One of ``GAP``, ``RHYTHM_OPEN``, ``RHYTHM_MUTE``, ``LEAD``, ``HARMONIC``.
			harmony: For rhythm requests, step the guitars a third above the
			    last note instead of drawing a new degree. For lead and
			    harmonic requests, guitar 2 plays a third above guitar 1.

		Raises:
			ValueError: If ``request`` is not a known request kind.
		"""

		if request not in NOTE_REQUESTS:
			raise ValueError(f"Unknown note request: {request!r}. Expected one of {NOTE_REQUESTS}")

		duration = self.random_duration()

		if request == GAP:
			rest = self.gap(duration)
			group = NoteGroup(guitar_1=rest, guitar_2=rest, bass=rest, drums=rest)

		elif request in (RHYTHM_OPEN, RHYTHM_MUTE):
			velocity = djenerative.constants.velocity.OPEN if request == RHYTHM_OPEN else djenerative.constants.velocity.MUTE
			guitar = self.rhythm(velocity, duration, harmony)
			group = NoteGroup(guitar_1=guitar, guitar_2=guitar, bass=self.bass(duration), drums=self.drums(duration))

		else:
			voice = self.lead if request == LEAD else self.harmonic

			guitar_1 = voice(duration)
			guitar_2 = voice(duration, True) if harmony else guitar_1

			rest = self.gap(duration)
			group = NoteGroup(guitar_1=guitar_1, guitar_2=guitar_2, bass=rest, drums=rest)

		logger.debug(f"{request} (harmony={harmony}): {duration} beats, octave {self.state.octave}, interval {self.state.interval}")

		return group


	def random_duration (self) -> float:

		"""
		Draw the duration (in beats) shared by every voice of the next note group.
		"""

		return djenerative.timing.random_duration(self.timing, self.rng)


	def rhythm (self, velocity: int, duration: float, harmony: bool = False) -> djenerative.pattern.Pattern:

		"""
		Play a rhythm note at the root octave, from a fresh degree or a harmony step.
		"""

		if harmony:
			self._step_harmony()
		else:
			self.state.octave = self.root.octave
			self.state.interval = djenerative.degrees.resolve_interval(self.rhythm_degrees, self.scale, self.rng)

		return self._build_cached(duration, velocity)


	def lead (self, duration: float, harmony: bool = False) -> djenerative.pattern.Pattern:

		"""
		Play a lead note in a random octave within the lead range.
		"""

		if harmony:
			self._step_harmony()
		else:
			offset = self.rng.randint(self.lead_octaves.min_offset, self.lead_octaves.max_offset)
			self.state.octave = self.root.octave + offset
			self.state.interval = djenerative.degrees.resolve_interval(self.lead_degrees, self.scale, self.rng)

		return self._build_cached(duration, djenerative.constants.velocity.OPEN)


	def harmonic (self, duration: float, harmony: bool = False) -> djenerative.pattern.Pattern:

		"""
		Play a natural harmonic two octaves above the root.
		"""

		if harmony:
			self._step_harmony()
		else:
			self.state.octave = self.root.octave + HARMONIC_OCTAVE_OFFSET
			self.state.interval = djenerative.degrees.resolve_interval(self.lead_degrees, self.scale, self.rng)

		return self._build_cached(duration, djenerative.constants.velocity.HARMONIC)


	def bass (self, duration: float) -> djenerative.pattern.Pattern:

		"""Follow the last guitar note one octave down. Never changes the cached state.

		Before any guitar note has been drawn there is nothing to follow, so the
		bass rests.
		"""

		root = djenerative.scales.RootNote(pitch_class=self.root.pitch_class, octave=self.state.octave - 1)

		return djenerative.pattern.build_pattern(root, duration, self.state.interval, djenerative.constants.velocity.FULL)


	@staticmethod
	def drums (duration: float) -> djenerative.pattern.Pattern:

		"""
		A single kick drum hit.
		"""

		pattern = djenerative.pattern.Pattern()
		pattern.add_note(djenerative.constants.drums.KICK_1, duration, djenerative.constants.velocity.FULL)

		return pattern


	@staticmethod
	def gap (duration: float) -> djenerative.pattern.Pattern:
		return djenerative.pattern.build_rest(duration)


	def _step_harmony (self) -> None:

		"""Replace the cached state with the harmony a third above it."""

		self.state = djenerative.harmony.step_harmony(self.state, self.scale)


	def _build_cached (self, duration: float, velocity: int) -> djenerative.pattern.Pattern:

		"""Build one note from the cached octave and interval."""

		root = djenerative.scales.RootNote(pitch_class=self.root.pitch_class, octave=self.state.octave)

		return djenerative.pattern.build_pattern(root, duration, self.state.interval, velocity)
