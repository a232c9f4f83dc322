import dataclasses
import typing

import mido

import djenerative.constants.pulses
import djenerative.constants.velocity
import djenerative.scales


MIN_PITCH = 0
MAX_PITCH = 127


@dataclasses.dataclass(frozen=True)
class Event:

	"""
	One note or rest. ``pitch`` is ``None`` for a rest.
	"""

	pitch: typing.Optional[int]
	duration: float
	velocity: int = 0

	@property
	def is_rest (self) -> bool:
		return self.pitch is None


class Pattern:

	"""
	A single-voice sequence of notes and rests, laid end to end.
	"""

	def __init__ (self, events: typing.Optional[typing.Iterable[Event]] = None) -> None:

		"""
		Initialize a pattern, optionally from existing events.
		"""

		self.events: typing.List[Event] = list(events) if events is not None else []


	@property
	def length (self) -> float:

		"""
		Total length of the pattern in beats.
		"""

		return sum(event.duration for event in self.events)


	@property
	def is_rest (self) -> bool:

		"""
		True when the pattern contains no sounding notes.
		"""

		return all(event.is_rest for event in self.events)


	def add_note (self, pitch: int, duration: float, velocity: int) -> None:

		"""
		Append a note of the given MIDI pitch, duration in beats, and velocity.
		"""

		if not MIN_PITCH <= pitch <= MAX_PITCH:
			raise ValueError(f"MIDI pitch must be {MIN_PITCH}-{MAX_PITCH}, got {pitch}")

		if duration <= 0:
			raise ValueError("Note duration must be positive")

		if not djenerative.constants.velocity.MIN_VELOCITY <= velocity <= djenerative.constants.velocity.MAX_VELOCITY:
			raise ValueError(f"Velocity must be 0-127, got {velocity}")

		self.events.append(Event(pitch=pitch, duration=duration, velocity=velocity))


	def step_forward (self, duration: float) -> None:

		"""
		Advance the timeline by ``duration`` beats without sounding anything.
		"""

		if duration <= 0:
			raise ValueError("Rest duration must be positive")

		self.events.append(Event(pitch=None, duration=duration))


	def extend (self, other: "Pattern") -> None:

		"""
		Append every event from another pattern after this one.
		"""

		self.events.extend(other.events)


	def to_messages (self, channel: int = 0, ticks_per_beat: int = djenerative.constants.pulses.TICKS_PER_BEAT) -> typing.List[mido.Message]:

		"""Convert the pattern to ``note_on``/``note_off`` messages with delta times in ticks.

		Rests produce no messages; their length is carried into the delta time
		of the next ``note_on``.
		"""

		if ticks_per_beat <= 0:
			raise ValueError("Ticks per beat must be positive")

		messages: typing.List[mido.Message] = []
		pending_ticks = 0

		for event in self.events:

			ticks = int(round(event.duration * ticks_per_beat))

			if event.pitch is None:
				pending_ticks += ticks
				continue

			messages.append(mido.Message('note_on', channel=channel, note=event.pitch, velocity=event.velocity, time=pending_ticks))
			messages.append(mido.Message('note_off', channel=channel, note=event.pitch, velocity=0, time=ticks))
			pending_ticks = 0

		return messages


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Pattern):
			return NotImplemented

		return self.events == other.events


	def __repr__ (self) -> str:
		return f"Pattern({self.events!r})"


def make_note (pitch_class: int, octave: int) -> int:

	"""Return the MIDI note number for a pitch class at an octave (C4 = 60).

	Example:
		```python
		make_note(4, 2)  # E2 → 40
		```
	"""

	return (octave + 1) * 12 + pitch_class


def fold_pitch (pitch: int) -> int:

	"""Shift a pitch by whole octaves until it lies within MIDI 0-127, keeping its pitch class.

	Example:
		```python
		fold_pitch(129)  # → 117
		fold_pitch(-12)  # → 0
		```
	"""

	while pitch > MAX_PITCH:
		pitch -= 12

	while pitch < MIN_PITCH:
		pitch += 12

	return pitch


def build_pattern (
	root: djenerative.scales.RootNote,
	duration: float,
	interval: typing.Optional[int],
	velocity: int
) -> Pattern:

	"""Build a one-note pattern ``interval`` half-steps above ``root``.

	A missing interval builds a rest of the same duration instead. Notes that
	would fall outside the MIDI range are moved back into it by whole octaves.
	"""

	if interval is None:
		return build_rest(duration)

	pattern = Pattern()
	pattern.add_note(fold_pitch(make_note(root.pitch_class, root.octave) + interval), duration, velocity)

	return pattern


def build_rest (duration: float) -> Pattern:

	"""
	Build a pattern that only advances the timeline by ``duration`` beats.
	"""

	pattern = Pattern()
	pattern.step_forward(duration)

	return pattern
