from __future__ import annotations

import random
from typing import Optional

from bin_packer.models import ProblemInstance


def random_instance(
    n: int,
    capacity: int,
    low: int = 1,
    high: Optional[int] = None,
    seed: Optional[int] = None,
    name: Optional[str] = None,
) -> ProblemInstance:
    """Instance of n item sizes drawn uniformly from [low, high] (high defaults to capacity)."""
    high = capacity if high is None else high
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 1 <= low <= high <= capacity:
        raise ValueError(f"need 1 <= low <= high <= capacity, got low={low} high={high} capacity={capacity}")

    rng = random.Random(seed)
    items = [rng.randint(low, high) for _ in range(n)]
    return ProblemInstance(
        items=items,
        capacity=capacity,
        min_item_size=low if items else None,
        name=name or f"random_n{n}_K{capacity}",
    )
