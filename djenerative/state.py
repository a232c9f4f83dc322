import dataclasses
import typing


@dataclasses.dataclass
class EngineState:

	"""
	The generator's memory of the last selected octave and interval.

	Rhythm, lead and harmonic voices overwrite it; bass reads it so the bass line
	follows whatever the guitars played most recently. ``interval`` is ``None``
	until the first note is drawn.
	"""

	octave: int = 0
	interval: typing.Optional[int] = None

	def copy (self) -> "EngineState":
		return dataclasses.replace(self)
