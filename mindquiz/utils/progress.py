"""
Statistics over stored quiz percentages, used by the score history screen.
"""

from __future__ import annotations

import statistics
from typing import Dict, List, Sequence, Tuple


def score_histogram(scores: Sequence[int], band_width: int = 10) -> List[Tuple[str, int]]:
    """
    Count percentages per band, lowest band first.

    Every band is listed, empty ones with a count of 0. Scores outside 0-100
    land in the nearest end band and the top band includes 100.

    Args:
        scores: Stored percentages
        band_width: Width of a band; must divide 100

    Returns:
        List of (label, count), e.g. [("0-9", 0), ..., ("90-100", 2)]

    Raises:
        ValueError: If band_width does not divide 100
    """
    if band_width <= 0 or 100 % band_width:
        raise ValueError(f"band_width must divide 100, got {band_width}")

    counts = [0] * (100 // band_width)
    for score in scores:
        band = min(max(int(score), 0) // band_width, len(counts) - 1)
        counts[band] += 1

    bands = []
    for i, count in enumerate(counts):
        low = i * band_width
        high = 100 if i == len(counts) - 1 else low + band_width - 1
        bands.append((f"{low}-{high}", count))
    return bands


def score_summary(scores: Sequence[int]) -> Dict[str, float]:
    """Mean, median, min, max, population std_dev (rounded to 2 places) and count."""
    if not scores:
        return {"mean": 0.0, "median": 0.0, "min": 0.0, "max": 0.0, "std_dev": 0.0, "count": 0}

    return {
        "mean": round(statistics.fmean(scores), 2),
        "median": round(statistics.median(scores), 2),
        "min": min(scores),
        "max": max(scores),
        "std_dev": round(statistics.pstdev(scores), 2),
        "count": len(scores),
    }
