"""Half-up rounding helpers.

Python's round() uses banker's rounding (round(2.5) == 2). Detector
thresholds and the aggregate score are tuned against half-up rounding,
so every score in the package goes through these helpers instead.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    >>> round_half_up(2.5)
    3
    >>> round_half_up(-2.5)
    -2
    """
    return int(math.floor(value + 0.5))


def round_to(value: float, decimals: int = 1) -> float:
    """Round to a fixed number of decimals, ties toward positive infinity.

    The scaled value is nudged by a tiny epsilon first so that binary
    representation error (e.g. 4.35 * 10 == 43.49999...) does not flip a tie.

    >>> round_to(4.35)
    4.4
    >>> round_to(-1.25)
    -1.2
    """
    factor = 10 ** decimals
    scaled = value * factor
    return math.floor(scaled + 0.5 + 1e-9) / factor
