"""
Analysis module for score range scanning and tier quantization.
"""

from responsive_text.analysis.range_scanner import (
    InsufficientRangeError,
    ScanResult,
    UnboundedRangeError,
    scan_score_range,
)
from responsive_text.analysis.tiers import score_to_tier, tier_class_name

__all__ = [
    "InsufficientRangeError",
    "ScanResult",
    "UnboundedRangeError",
    "scan_score_range",
    "score_to_tier",
    "tier_class_name",
]
