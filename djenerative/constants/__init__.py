"""Constants for Djenerative.

This package contains four sets of constants:

- ``djenerative.constants.durations`` - Beat-based note durations (quarter = 1.0)
- ``djenerative.constants.velocity`` - MIDI velocities for each playing style
- ``djenerative.constants.drums`` - General MIDI drum notes used by the drum voice
- ``djenerative.constants.pulses`` - Tick resolution used when converting patterns to MIDI messages
"""
