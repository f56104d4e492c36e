# =============================================================================
# core/random_numbers.py  -  Random Number Tool Logic
# =============================================================================
#
# The server ships a trivial non-weather tool alongside the weather ones.
# It is handy for checking that an MCP client can reach the server at all,
# since it needs no API key and no network.
# =============================================================================

import random
from typing import Optional


def random_number(minimum: int = 0, maximum: int = 100, rng: Optional[random.Random] = None) -> int:
    """Return a random integer in ``[minimum, maximum)``.

    ``minimum`` is returned when the bounds are equal.

    Raises:
        ValueError: if ``minimum`` is greater than ``maximum``.
    """
    if minimum > maximum:
        raise ValueError(f"min ({minimum}) must not be greater than max ({maximum}).")
    if minimum == maximum:
        return minimum
    return (rng or random).randrange(minimum, maximum)
