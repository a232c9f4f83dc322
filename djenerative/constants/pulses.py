"""Tick resolution for MIDI message conversion.

Patterns are built in beats. When a pattern is turned into ``mido`` messages,
beat durations are converted into ticks at this resolution. 960 ticks per
quarter note keeps every supported duration integral (a sixty-fourth note is
60 ticks).
"""

TICKS_PER_BEAT = 960
