"""Seven-degree scale tables and root-note parsing.

Scales are stored as half-step offsets from the root, one per degree. The
generator never validates scale theory; it trusts whatever seven intervals it
is given, so custom scales can be registered with :func:`register_scale`.

Module-level helpers:
- `key_name_to_pc(name)`: Validate a note name and return its pitch class (0-11).
- `parse_root_note(text)`: Parse a note name with octave (e.g. ``"E2"``) into a `RootNote`.
- `get_scale(name)`: Look up a named scale and return a `Scale`.
"""

import dataclasses
import re
import typing


DEGREE_COUNT = 7


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]


SCALE_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"double_harmonic": [0, 1, 4, 5, 7, 8, 11],
	"dorian": [0, 2, 3, 5, 7, 9, 10],
	"enigmatic": [0, 1, 4, 6, 8, 10, 11],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"hungarian_minor": [0, 2, 3, 6, 7, 8, 11],
	"locrian": [0, 1, 3, 5, 6, 8, 10],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"major": [0, 2, 4, 5, 7, 9, 11],
	"melodic_minor": [0, 2, 3, 5, 7, 9, 11],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"natural_minor": [0, 2, 3, 5, 7, 8, 10],
	"neapolitan_major": [0, 1, 3, 5, 7, 9, 11],
	"phrygian": [0, 1, 3, 5, 7, 8, 10],
	"phrygian_dominant": [0, 1, 4, 5, 7, 8, 10],
	"superlocrian": [0, 1, 3, 4, 6, 8, 10],
}

SCALE_ALIASES: typing.Dict[str, str] = {
	"ionian": "major",
	"aeolian": "natural_minor",
	"minor": "natural_minor",
}


_ROOT_NOTE_PATTERN = re.compile(r"^([A-G][#b]?)(-?\d+)$")


@dataclasses.dataclass(frozen=True)
class Scale:

	"""
	Seven half-step intervals, one per scale degree.
	"""

	intervals: typing.Tuple[int, ...]
	name: str = "custom"

	def __post_init__ (self) -> None:

		if len(self.intervals) != DEGREE_COUNT:
			raise ValueError(f"A scale needs exactly {DEGREE_COUNT} intervals, got {len(self.intervals)}")

		object.__setattr__(self, "intervals", tuple(int(i) for i in self.intervals))

	def __len__ (self) -> int:
		return len(self.intervals)

	def __getitem__ (self, degree: int) -> int:
		return self.intervals[degree]


@dataclasses.dataclass(frozen=True)
class RootNote:

	"""
	The pitch class and reference octave shared by every voice.
	"""

	pitch_class: int
	octave: int

	def __post_init__ (self) -> None:

		if not 0 <= self.pitch_class <= 11:
			raise ValueError(f"Pitch class must be 0-11, got {self.pitch_class}")

	@property
	def name (self) -> str:
		return f"{PC_TO_NOTE_NAME[self.pitch_class]}{self.octave}"


def key_name_to_pc (key_name: str) -> int:

	"""Validate a note name and return its pitch class (0-11).

	Parameters:
		key_name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Raises:
		ValueError: If the note name is not recognised.

	Example:
		```python
		key_name_to_pc("E")   # → 4
		key_name_to_pc("Bb")  # → 10
		```
	"""

	if key_name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {key_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[key_name]


def parse_root_note (text: str) -> RootNote:

	"""Parse a note name with octave, e.g. ``"E2"`` or ``"F#1"``, into a `RootNote`.

	Octaves follow the C4 = 60 (Middle C) convention.
	"""

	match = _ROOT_NOTE_PATTERN.match(text.strip())

	if match is None:
		raise ValueError(f"Cannot parse root note {text!r}. Expected e.g. 'E2', 'F#1', 'Bb0'.")

	return RootNote(pitch_class=key_name_to_pc(match.group(1)), octave=int(match.group(2)))


def get_scale (name: str) -> Scale:

	"""
	Return a named scale from the registry.
	"""

	name = SCALE_ALIASES.get(name, name)

	if name not in SCALE_DEFINITIONS:
		raise ValueError(f"Unknown scale: {name!r}. Available: {sorted(SCALE_DEFINITIONS)}")

	return Scale(intervals=tuple(SCALE_DEFINITIONS[name]), name=name)


def register_scale (name: str, intervals: typing.List[int]) -> None:

	"""Register a custom seven-degree scale for use with :func:`get_scale`.

	Example:
		```python
		djenerative.scales.register_scale("prometheus_7", [0, 2, 4, 6, 8, 9, 10])
		```
	"""

	if len(intervals) != DEGREE_COUNT:
		raise ValueError(f"A scale needs exactly {DEGREE_COUNT} intervals, got {len(intervals)}")

	SCALE_DEFINITIONS[name] = list(intervals)
