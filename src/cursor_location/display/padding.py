"""Status-bar width padding driven by a host-supplied text measurement."""

from __future__ import annotations

import math
from typing import Callable

Measure = Callable[[str], float]


def padded_width(display: str, measure: Measure, step: int) -> int:
    """Round the measured width up to a multiple of ``step``.

    An exact fit is bumped by a third of a step so neighbouring status items
    do not touch the text.
    """

    if step <= 0:
        raise ValueError("step must be positive")
    width = math.floor(measure(display))
    padded = math.ceil(width / step) * step
    if padded == width:
        padded += math.ceil(step / 3)
    return padded
