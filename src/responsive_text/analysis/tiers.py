"""
Salience-to-tier quantization.

Maps a continuous score onto one of ``levels`` equal-width tiers of the
global score range:

    step = (max - min) / levels
    tier = floor((score - min) / step)

Tier 0 holds the least salient tokens (revealed last, at the widest
viewport); tier ``levels - 1`` the most salient.

Known boundary behaviour: a score exactly equal to ``max`` quantizes to
``levels``, one past the last tier. That value is returned unchanged by
default so existing pages render identically. Pass ``clamp=True`` to fold
it into the top tier instead.
"""

import math

from responsive_text.models.entities import ScoreRange


TIER_CLASS_PREFIX = "lv"


def score_to_tier(
    score: float,
    score_range: ScoreRange,
    levels: int,
    clamp: bool = False,
) -> int:
    """
    Quantize a score into a tier index.

    Args:
        score: Salience score of the row
        score_range: Global (min, max) over all rows
        levels: Number of tiers
        clamp: Clamp the result into [0, levels - 1]

    Returns:
        Tier index. Without clamping this is levels when score == max.

    Raises:
        ValueError: If levels < 1 or the range has zero width
    """
    if levels < 1:
        raise ValueError(f"levels must be >= 1, got {levels}")
    step = score_range.span / levels
    if step <= 0:
        raise ValueError("Cannot quantize against a zero-width score range")

    tier = math.floor((score - score_range.min) / step)
    if clamp:
        tier = max(0, min(levels - 1, tier))
    return tier


def tier_class_name(tier: int) -> str:
    """CSS class identifying a tier, e.g. ``lv3``."""
    return f"{TIER_CLASS_PREFIX}{tier}"
