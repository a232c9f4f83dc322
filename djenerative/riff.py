"""Assemble successive note groups into four continuous voice tracks.

Each note group is appended to the end of its voice's track, so the shared
timeline advances by the group's duration on every voice at once. The result
can be turned into ``mido.MidiTrack`` objects for a caller to play, record or
save.
"""

import logging
import random
import typing

import mido

import djenerative.constants.drums
import djenerative.constants.pulses
import djenerative.generator
import djenerative.pattern
import djenerative.weighted_choice


logger = logging.getLogger(__name__)


VOICE_CHANNELS: typing.Dict[str, int] = {
	"guitar_1": 0,
	"guitar_2": 1,
	"bass": 2,
	"drums": djenerative.constants.drums.DRUM_CHANNEL,
}

# Request kinds that get a harmony guitar when a riff is generated with harmony.
HARMONY_REQUESTS: typing.Tuple[str, ...] = (djenerative.generator.LEAD, djenerative.generator.HARMONIC)

DEFAULT_REQUEST_WEIGHTS: typing.Dict[str, float] = {
	djenerative.generator.RHYTHM_MUTE: 50,
	djenerative.generator.RHYTHM_OPEN: 15,
	djenerative.generator.GAP: 20,
	djenerative.generator.LEAD: 10,
	djenerative.generator.HARMONIC: 5,
}


class Riff:

	"""
	Four voice tracks built from a sequence of note groups.
	"""

	def __init__ (self) -> None:

		self.tracks: typing.Dict[str, djenerative.pattern.Pattern] = {
			name: djenerative.pattern.Pattern() for name in VOICE_CHANNELS
		}
		self.groups: typing.List[djenerative.generator.NoteGroup] = []


	@property
	def length (self) -> float:

		"""
		Length of the riff in beats (the longest track).
		"""

		return max(track.length for track in self.tracks.values())


	def add (self, group: djenerative.generator.NoteGroup) -> None:

		"""Append a note group to every voice track.

		A voice missing from the group is padded with a rest as long as the
		group's longest voice, keeping all tracks aligned.
		"""

		voices = group.voices()
		present = [pattern for pattern in voices.values() if pattern is not None]

		if not present:
			raise ValueError("Note group has no voices")

		duration = max(pattern.length for pattern in present)

		for name, pattern in voices.items():
			self.tracks[name].extend(pattern if pattern is not None else djenerative.pattern.build_rest(duration))

		self.groups.append(group)


	@classmethod
	def generate (
		cls,
		generator: djenerative.generator.PatternGenerator,
		length: int,
		request_weights: typing.Optional[typing.Dict[str, float]] = None,
		harmony: bool = False,
		rng: typing.Optional[random.Random] = None
	) -> "Riff":

		"""Build a riff of ``length`` note groups.

		Each step picks a request kind from ``request_weights`` and asks the
		generator for the matching note group. With ``harmony`` set, lead and
		harmonic groups get a second guitar a third above the first; rhythm
		groups are always drawn afresh. The request draw uses ``rng``, or the
		generator's own random source when none is given.
		"""

		if length < 0:
			raise ValueError("Riff length cannot be negative")

		if request_weights is None:
			request_weights = DEFAULT_REQUEST_WEIGHTS

		for request in request_weights:
			if request not in djenerative.generator.NOTE_REQUESTS:
				raise ValueError(f"Unknown note request: {request!r}. Expected one of {djenerative.generator.NOTE_REQUESTS}")

		executor: djenerative.weighted_choice.WeightedChoiceExecutor[str] = djenerative.weighted_choice.WeightedChoiceExecutor(rng or generator.rng)

		for request, weight in request_weights.items():
			executor.add(request, weight)

		riff = cls()

		for _ in range(length):
			request = executor.choose(default=djenerative.generator.GAP)
			assert request is not None
			riff.add(generator.generate_note_group(request, harmony and request in HARMONY_REQUESTS))

		logger.info(f"Generated riff: {length} note groups, {riff.length} beats")

		return riff


	def to_tracks (self, ticks_per_beat: int = djenerative.constants.pulses.TICKS_PER_BEAT) -> typing.List[mido.MidiTrack]:

		"""Convert each voice to a named ``mido.MidiTrack`` on its own channel.

		Trailing rests are carried by the ``end_of_track`` delta so every track
		ends on the same tick.
		"""

		tracks: typing.List[mido.MidiTrack] = []

		for name, pattern in self.tracks.items():
			track = mido.MidiTrack()
			track.append(mido.MetaMessage('track_name', name=name, time=0))
			messages = pattern.to_messages(channel=VOICE_CHANNELS[name], ticks_per_beat=ticks_per_beat)
			track.extend(messages)

			total_ticks = int(round(pattern.length * ticks_per_beat))
			used_ticks = sum(message.time for message in messages)
			track.append(mido.MetaMessage('end_of_track', time=max(0, total_ticks - used_ticks)))

			tracks.append(track)

		return tracks
