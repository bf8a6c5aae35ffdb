"""
Two-phase CSV-to-HTML conversion pipeline.

Phase 1 reads the whole input once to find the score range. Phase 2
reads it again, rendering and writing one fragment per row. Nothing is
buffered between the phases: the only state carried across is the
score range, the tier count and the width span, all computed once and
read-only thereafter.

If the range is degenerate the run aborts after phase 1, before the
output file is opened.

Example:
    >>> from responsive_text.config import get_config
    >>> from responsive_text.pipeline import run_conversion
    >>> result = run_conversion("alice.csv", "token", "llrank",
    ...                         ignore_column="vtoken", config=get_config())
    >>> print(result.row_count, result.tier_counts)
"""

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from responsive_text.analysis.range_scanner import scan_score_range
from responsive_text.config import Config, get_config
from responsive_text.ingestion.csv_reader import iter_rows
from responsive_text.models.entities import Row, ScoreRange, WidthSpan
from responsive_text.rendering.css_rules import (
    generate_rules,
    render_stylesheet,
    widen_width_span,
)
from responsive_text.rendering.page import assemble_page, write_page
from responsive_text.rendering.row_renderer import format_fragment, normalize_content, row_tier

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
#  Data models
# ---------------------------------------------------------------------------

@dataclass
class ConversionResult:
    """
    Summary of a completed conversion.

    Attributes:
        input_path: CSV file read
        output_path: HTML file written
        row_count: Number of data rows
        score_range: Global (min, max) score
        requested_levels: Tier count asked for
        levels: Tier count actually used (requested + 1)
        width_span: Width span actually used (widened by one step)
        ignored_rows: Rows rendered untagged
        tier_counts: Number of tagged rows per tier index
    """

    input_path: str
    output_path: str
    row_count: int
    score_range: ScoreRange
    requested_levels: int
    levels: int
    width_span: WidthSpan
    ignored_rows: int = 0
    tier_counts: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "input_path": self.input_path,
            "output_path": self.output_path,
            "row_count": self.row_count,
            "score_range": {
                "min": self.score_range.min,
                "max": self.score_range.max,
                "span": self.score_range.span,
            },
            "requested_levels": self.requested_levels,
            "levels": self.levels,
            "width_span": {
                "min": self.width_span.min,
                "max": self.width_span.max,
            },
            "ignored_rows": self.ignored_rows,
            "tier_counts": {str(tier): n for tier, n in sorted(self.tier_counts.items())},
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
#  Pipeline
# ---------------------------------------------------------------------------

def _render_fragments(
    rows: Iterator[Row],
    score_range: ScoreRange,
    levels: int,
    config: Config,
    tally: Counter,
) -> Iterator[str]:
    """
    Render rows lazily, counting each row's tier into ``tally``.

    Ignored rows are counted under the key None.
    """
    for row in rows:
        tier = row_tier(row, score_range, levels, clamp=config.clamp_tiers)
        tally[tier] += 1
        yield format_fragment(
            normalize_content(row.content, config.escape_html, config.fix_newlines),
            tier,
        )


def run_conversion(
    csv_path: Union[str, Path],
    content_column: str,
    score_column: str,
    ignore_column: Optional[str] = None,
    config: Optional[Config] = None,
) -> ConversionResult:
    """
    Convert a scored CSV file into a responsive HTML page.

    Args:
        csv_path: Input CSV with a header row
        content_column: Header of the content column
        score_column: Header of the salience score column
        ignore_column: Header of the ignore-flag column (optional)
        config: Run configuration (default: get_config())

    Returns:
        ConversionResult describing the run

    Raises:
        OSError: If the input cannot be read or the output cannot be written
        MissingColumnError: If a named column is not in the header
        InsufficientRangeError: If the scores do not vary enough; no
            output file is written in that case
        UnboundedRangeError: If the score range is not finite; no output
            file is written in that case
    """
    if config is None:
        config = get_config()

    def read_rows() -> Iterator[Row]:
        return iter_rows(
            csv_path,
            content_column,
            score_column,
            ignore_column,
            delimiter=config.csv_delimiter,
            encoding=config.encoding,
        )

    # Phase 1: score range
    scan = scan_score_range(read_rows(), config.minimum_sensitivity)

    # Phase 2: rules and rendering
    levels, width_span = widen_width_span(
        config.levels,
        WidthSpan(min=config.min_width, max=config.max_width),
    )
    stylesheet = render_stylesheet(
        generate_rules(levels, width_span),
        unit=config.width_unit,
    )
    logger.info(
        "Using %d tiers over widths %d-%d%s",
        levels,
        width_span.min,
        width_span.max,
        config.width_unit,
    )

    tally: Counter = Counter()
    fragments = _render_fragments(read_rows(), scan.score_range, levels, config, tally)
    write_page(
        config.output_path,
        assemble_page(stylesheet, fragments, title=config.page_title),
        encoding=config.encoding,
    )

    ignored_rows = tally.pop(None, 0)
    result = ConversionResult(
        input_path=str(csv_path),
        output_path=str(config.output_path),
        row_count=scan.row_count,
        score_range=scan.score_range,
        requested_levels=config.levels,
        levels=levels,
        width_span=width_span,
        ignored_rows=ignored_rows,
        tier_counts=dict(tally),
    )

    if not config.clamp_tiers and result.tier_counts.get(levels):
        logger.info(
            "%d row(s) at the maximum score fell into tier %d, past the top tier",
            result.tier_counts[levels],
            levels,
        )

    return result
