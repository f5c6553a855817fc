from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 toward positive infinity; ``round()`` would pick the even neighbour."""
    return math.floor(value + 0.5)
