"""
Data models for the conversion pipeline.

Provides the immutable Row, ScoreRange and WidthSpan models shared by
the ingestion, analysis and rendering modules.
"""

from responsive_text.models.entities import Row, ScoreRange, WidthSpan

__all__ = ["Row", "ScoreRange", "WidthSpan"]
