import pytest

import djenerative.scales


def test_get_scale_major () -> None:

	"""The major scale has the expected intervals."""

	scale = djenerative.scales.get_scale("major")

	assert scale.intervals == (0, 2, 4, 5, 7, 9, 11)
	assert len(scale) == 7
	assert scale[4] == 7


def test_scale_aliases () -> None:

	"""'minor' and 'aeolian' are aliases for natural minor, 'ionian' for major."""

	assert djenerative.scales.get_scale("minor") == djenerative.scales.get_scale("natural_minor")
	assert djenerative.scales.get_scale("aeolian") == djenerative.scales.get_scale("natural_minor")
	assert djenerative.scales.get_scale("ionian") == djenerative.scales.get_scale("major")


def test_all_definitions_have_seven_degrees () -> None:

	"""Every built-in scale is usable by the generator."""

	for name in djenerative.scales.SCALE_DEFINITIONS:
		assert len(djenerative.scales.get_scale(name)) == 7


def test_unknown_scale_raises () -> None:

	"""Unknown scale names raise ValueError."""

	with pytest.raises(ValueError):
		djenerative.scales.get_scale("blues_scale")


def test_scale_wrong_length_raises () -> None:

	"""A scale must have exactly seven intervals."""

	with pytest.raises(ValueError):
		djenerative.scales.Scale(intervals=(0, 2, 4, 7, 9))


def test_register_scale () -> None:

	"""Registered scales can be looked up by name."""

	djenerative.scales.register_scale("test_prometheus", [0, 2, 4, 6, 8, 9, 10])

	try:
		assert djenerative.scales.get_scale("test_prometheus").intervals == (0, 2, 4, 6, 8, 9, 10)
	finally:
		del djenerative.scales.SCALE_DEFINITIONS["test_prometheus"]

	with pytest.raises(ValueError):
		djenerative.scales.register_scale("too_short", [0, 7])


@pytest.mark.parametrize("text,pitch_class,octave", [
	("C4", 0, 4),
	("E2", 4, 2),
	("F#1", 6, 1),
	("Bb0", 10, 0),
	("B-1", 11, -1),
])
def test_parse_root_note (text: str, pitch_class: int, octave: int) -> None:

	"""Note names with octaves parse to pitch class and octave."""

	root = djenerative.scales.parse_root_note(text)

	assert (root.pitch_class, root.octave) == (pitch_class, octave)


@pytest.mark.parametrize("text", ["H2", "E", "e2", "C##4", ""])
def test_parse_root_note_invalid (text: str) -> None:

	"""Malformed note names raise ValueError."""

	with pytest.raises(ValueError):
		djenerative.scales.parse_root_note(text)


def test_root_note_name () -> None:

	"""Root notes render back to their name."""

	assert djenerative.scales.RootNote(pitch_class=6, octave=1).name == "F#1"
