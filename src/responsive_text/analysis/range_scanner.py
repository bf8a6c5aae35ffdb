"""
Score range scanning.

First phase of the conversion pipeline: one pass over every row to find
the minimum and maximum salience score. A range narrower than the
configured sensitivity cannot be sliced into meaningfully distinct tiers
and aborts the run, as does a range that is not a finite number.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from responsive_text.config import MINIMUM_SENSITIVITY
from responsive_text.models.entities import Row, ScoreRange

logger = logging.getLogger(__name__)


class InsufficientRangeError(ValueError):
    """
    The scores read do not vary enough to be sliced into tiers.

    Attributes:
        score_range: The computed range, or None if there were no rows
        row_count: Number of rows scanned
        minimum_sensitivity: The threshold the range fell below
    """

    def __init__(
        self,
        score_range: Optional[ScoreRange],
        row_count: int,
        minimum_sensitivity: float,
    ):
        self.score_range = score_range
        self.row_count = row_count
        self.minimum_sensitivity = minimum_sensitivity
        if score_range is None:
            detail = "no rows were read"
        else:
            detail = (
                f"range {score_range.span:g} "
                f"({score_range.min:g}, {score_range.max:g})"
            )
        super().__init__(
            "The salience values read have insufficient range to slice up "
            f"meaningfully (< {minimum_sensitivity:g}): {detail}"
        )


class UnboundedRangeError(ValueError):
    """
    The score range is not a finite number, so no tier step exists.

    Raised when a score is infinite or NaN, or when two finite scores are
    so far apart that max - min overflows.

    Attributes:
        score_range: The computed range
        row_count: Number of rows scanned
    """

    def __init__(self, score_range: ScoreRange, row_count: int):
        self.score_range = score_range
        self.row_count = row_count
        super().__init__(
            "The salience values read do not span a finite range "
            f"({score_range.min:g}, {score_range.max:g}); "
            "rescale the scores before converting"
        )


@dataclass(frozen=True)
class ScanResult:
    """Outcome of the range pass."""

    score_range: ScoreRange
    row_count: int


def scan_score_range(
    rows: Iterable[Row],
    minimum_sensitivity: float = MINIMUM_SENSITIVITY,
) -> ScanResult:
    """
    Compute the (min, max) score over all rows in a single pass.

    Args:
        rows: Rows to scan (consumed exactly once)
        minimum_sensitivity: Smallest acceptable max - min

    Returns:
        ScanResult with the range and the number of rows scanned

    Raises:
        InsufficientRangeError: If max - min < minimum_sensitivity, or if
            there were no rows
        UnboundedRangeError: If max - min is infinite or NaN

    Example:
        >>> result = scan_score_range(iter_rows("alice.csv", "token", "llrank"))
        >>> print(result.score_range.min, result.score_range.max)
    """
    low: Optional[float] = None
    high: Optional[float] = None
    count = 0
    finite = True

    for row in rows:
        finite = finite and math.isfinite(row.score)
        if low is None or row.score < low:
            low = row.score
        if high is None or row.score > high:
            high = row.score
        count += 1

    if low is None or high is None:
        raise InsufficientRangeError(None, count, minimum_sensitivity)

    score_range = ScoreRange(min=low, max=high)
    logger.info(
        "Read %d rows; salience range %.2f (%.2f, %.2f)",
        count,
        score_range.span,
        score_range.min,
        score_range.max,
    )

    if not finite or not math.isfinite(score_range.span):
        raise UnboundedRangeError(score_range, count)

    if score_range.span < minimum_sensitivity:
        raise InsufficientRangeError(score_range, count, minimum_sensitivity)

    return ScanResult(score_range=score_range, row_count=count)
