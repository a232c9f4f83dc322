import logging

import djenerative
import djenerative.generator
import djenerative.probability

logging.basicConfig(level=logging.INFO)

# Chugging riff in E phrygian: mostly muted 16ths on the root, with the
# occasional open note a fifth up, then a harmonised lead fill.

generator = djenerative.PatternGenerator(
	scale = djenerative.get_scale("phrygian"),
	root = djenerative.parse_root_note("E2"),
	rhythm_degrees = djenerative.probability.DegreeWeights(weights=(80, 10, 0, 0, 10, 0, 0)),
	timing = djenerative.probability.DurationWeights(eighth=20, sixteenth=70, thirty_second=10),
	seed = 2024,
)

riff = djenerative.Riff()

for bar in range(4):

	for _ in range(12):
		riff.add(generator.generate_note_group(djenerative.generator.RHYTHM_MUTE))

	riff.add(generator.generate_note_group(djenerative.generator.RHYTHM_OPEN))
	riff.add(generator.generate_note_group(djenerative.generator.GAP))

	if bar % 2 == 1:
		for _ in range(4):
			riff.add(generator.generate_note_group(djenerative.generator.LEAD, harmony=True))

for track in riff.to_tracks():
	notes = sum(1 for message in track if message.type == 'note_on')
	logging.info(f"{track.name}: {notes} notes")

logging.info(f"Riff length: {riff.length} beats")
