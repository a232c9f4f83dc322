"""
Djenerative - weighted-random riff generation for two guitars, bass and drums.

Each call to :meth:`PatternGenerator.generate_note_group` produces one
*note group*: four parallel single-voice patterns sharing one randomly drawn
duration. Durations, scale degrees and lead octaves are drawn from weight
tables, and the generator remembers the last guitar note so the bass follows
the guitars and harmony lines can be derived a diatonic third above them.

Building blocks, leaves first:

- ``weighted_choice`` - one uniform draw plus a cumulative scan over weighted options.
- ``timing`` - duration weight table → note duration in beats (whole note fallback).
- ``degrees`` - degree weight table → interval above the root (root fallback).
- ``harmony`` - cached interval → the interval/octave a third above it.
- ``generator`` - the stateful orchestrator producing ``NoteGroup`` objects.
- ``riff`` - assembles note groups into four ``mido`` tracks.

Minimal example:

    ```python
    import djenerative

    gen = djenerative.PatternGenerator(
        scale=djenerative.get_scale("phrygian"),
        root=djenerative.parse_root_note("E2"),
        seed=42,
    )

    riff = djenerative.Riff.generate(gen, length=16)
    tracks = riff.to_tracks()
    ```

Package-level exports: ``PatternGenerator``, ``NoteGroup``, ``Riff``,
``get_scale``, ``parse_root_note``.
"""

import djenerative.generator
import djenerative.riff
import djenerative.scales


NoteGroup = djenerative.generator.NoteGroup
PatternGenerator = djenerative.generator.PatternGenerator
Riff = djenerative.riff.Riff
get_scale = djenerative.scales.get_scale
parse_root_note = djenerative.scales.parse_root_note
