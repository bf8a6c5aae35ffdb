"""
CSV row reader.

Streams rows from a headed CSV file as Row models. The file is opened
fresh on every call so the pipeline can make its two passes (range scan,
then render) without holding the rows in memory.

Score text is coerced leniently: the leading numeric prefix is used when
there is one, and anything else becomes 0.0. A bad score never raises.

Example:
    >>> from responsive_text.ingestion.csv_reader import iter_rows
    >>> for row in iter_rows("alice.csv", "token", "llrank", "vtoken"):
    ...     print(row.content, row.score, row.ignore)
"""

import csv
import logging
import math
import re
from pathlib import Path
from typing import Iterator, Optional, Union

from responsive_text.models.entities import Row

logger = logging.getLogger(__name__)


_NUMERIC_PREFIX = re.compile(
    r"\s*[+-]?(?:\d[\d_]*(?:\.\d[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d+)?"
)


class MissingColumnError(ValueError):
    """A configured column name is not present in the CSV header."""

    def __init__(self, column: str, available: list):
        self.column = column
        self.available = list(available)
        super().__init__(
            f"Column '{column}' not found in CSV header. "
            f"Available columns: {', '.join(self.available) or '<none>'}"
        )


def parse_score(text: Optional[str]) -> float:
    """
    Coerce score text to a float without raising.

    Args:
        text: Raw cell value (may be None for short rows)

    Returns:
        The value of the leading numeric prefix, or 0.0 if there is none

    Example:
        >>> parse_score("3.5kg")
        3.5
        >>> parse_score("n/a")
        0.0
    """
    if not text:
        return 0.0
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return 0.0
    try:
        value = float(match.group(0).strip().replace("_", ""))
    except ValueError:
        return 0.0
    # Literals like 1e999 overflow to inf
    if not math.isfinite(value):
        return 0.0
    return value


def iter_rows(
    csv_path: Union[str, Path],
    content_column: str,
    score_column: str,
    ignore_column: Optional[str] = None,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Iterator[Row]:
    """
    Yield one Row per data line of a headed CSV file.

    Args:
        csv_path: Path to the CSV file
        content_column: Header of the column holding the content to output
        score_column: Header of the numeric salience column
        ignore_column: Header of the ignore-flag column. When given, rows
            whose value in it is empty are marked ignorable. When None, no
            row is ever ignored.
        delimiter: Field delimiter
        encoding: File encoding

    Yields:
        Row models in file order

    Raises:
        OSError: If the file cannot be opened or read
        MissingColumnError: If a named column is not in the header
    """
    with open(csv_path, "r", encoding=encoding, newline="") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        fieldnames = reader.fieldnames or []

        for column in (content_column, score_column, ignore_column):
            if column is not None and column not in fieldnames:
                raise MissingColumnError(column, fieldnames)

        logger.debug(
            "Reading %s (tokens: %s, salience: %s, ignore: %s)",
            csv_path,
            content_column,
            score_column,
            ignore_column or "<not specified>",
        )

        for record in reader:
            if ignore_column is None:
                ignore = False
            else:
                ignore = not record.get(ignore_column)

            yield Row(
                content=record.get(content_column) or "",
                score=parse_score(record.get(score_column)),
                ignore=ignore,
            )
