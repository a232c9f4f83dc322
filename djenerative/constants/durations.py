"""Beat-based duration constants for note groups.

All values are in **beats**, where 1.0 = one quarter note. These are the seven
durations the timing resolver can choose between, from a whole note down to
a sixty-fourth::

    import djenerative.constants.durations as dur

    dur.WHOLE          # 4.0 beats
    dur.SIXTYFOURTH    # 0.0625 beats
"""

import typing


WHOLE = 4.0
HALF = 2.0
QUARTER = 1.0
EIGHTH = 0.5
SIXTEENTH = 0.25
THIRTYSECOND = 0.125
SIXTYFOURTH = 0.0625


# Configuration names for each duration, longest first.
DURATION_NAMES: typing.Dict[str, float] = {
	"whole": WHOLE,
	"half": HALF,
	"quarter": QUARTER,
	"eighth": EIGHTH,
	"sixteenth": SIXTEENTH,
	"thirty_second": THIRTYSECOND,
	"sixty_fourth": SIXTYFOURTH,
}
