"""General MIDI drum notes used by the drum voice.

Standard MIDI percussion assignments for channel 10 (0-indexed channel 9).
"""

DRUM_CHANNEL = 9

KICK_1 = 36     # C2, "Bass Drum 1"
