"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). Each guitar playing style maps
to one fixed velocity so a sampler can switch articulation on it.
"""

MUTE = 60           # Palm-muted rhythm chugs
OPEN = 100          # Open rhythm and lead notes
HARMONIC = 120      # Natural harmonics (louder, distinct layer)
FULL = 127          # Bass and drums

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127
