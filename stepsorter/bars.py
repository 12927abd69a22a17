import numpy as np


def bar_count(width: int, padding: int, bar_width: int) -> int:
    """How many bars of bar_width fit into width after padding."""
    return max(0, (width - padding) // bar_width)


def generate_bars(count: int, low: int, high: int, seed=None) -> list:
    """
    Draw count integers uniformly from [low, high).

    Returned as a plain list so the engine can swap elements in place.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if high <= low:
        raise ValueError(f"empty value range [{low}, {high})")
    rng = np.random.default_rng(seed)
    return rng.integers(low, high, size=count).tolist()
