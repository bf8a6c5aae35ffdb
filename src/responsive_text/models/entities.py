"""
Pydantic data models for rows, score ranges and width spans.

These are the run-scoped values passed between the pipeline phases.
All of them are frozen: a row is immutable once read, and the range and
span are computed once per run and read-only thereafter.
"""

from pydantic import BaseModel, ConfigDict, model_validator


class Row(BaseModel):
    """
    A single input record.

    ``ignore`` is True when the configured ignore column is empty or
    absent for this row. Ignored rows are rendered untagged, so they are
    visible at every width.
    """
    model_config = ConfigDict(frozen=True)

    content: str
    score: float
    ignore: bool = False


class ScoreRange(BaseModel):
    """Minimum and maximum score over all rows."""
    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def check_order(self) -> "ScoreRange":
        if self.max < self.min:
            raise ValueError(f"max ({self.max}) must be >= min ({self.min})")
        return self

    @property
    def span(self) -> float:
        return self.max - self.min


class WidthSpan(BaseModel):
    """
    Viewport width interval in CSS length units.

    ``min`` is the width showing almost nothing; ``max`` the width at
    which everything is shown.
    """
    model_config = ConfigDict(frozen=True)

    min: int
    max: int

    @model_validator(mode="after")
    def check_order(self) -> "WidthSpan":
        if self.min >= self.max:
            raise ValueError(f"min ({self.min}) must be < max ({self.max})")
        return self

    @property
    def span(self) -> int:
        return self.max - self.min
