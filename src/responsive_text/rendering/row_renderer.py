"""
Per-row HTML fragment rendering.

Each row becomes either a tier-tagged span, hidden until the viewport
reaches its tier's threshold, or, for ignorable rows, the bare content,
which is visible at every width.
"""

import html
from typing import Optional

from responsive_text.analysis.tiers import score_to_tier, tier_class_name
from responsive_text.models.entities import Row, ScoreRange


LINE_BREAK = "<br>"


def normalize_content(
    text: str,
    escape_html: bool = True,
    fix_newlines: bool = True,
) -> str:
    """
    Prepare cell text for inclusion in the page.

    Escaping runs before newline conversion so the inserted <br> markers
    are not themselves escaped. A single quote is written as ``&#39;``,
    the decimal form used by existing reference pages.

    Args:
        text: Raw cell content
        escape_html: Escape &, <, >, and quote characters
        fix_newlines: Replace newline characters with <br>

    Returns:
        Normalized content
    """
    if escape_html:
        text = html.escape(text).replace("&#x27;", "&#39;")
    if fix_newlines:
        text = text.replace("\n", LINE_BREAK)
    return text


def row_tier(
    row: Row,
    score_range: ScoreRange,
    levels: int,
    clamp: bool = False,
) -> Optional[int]:
    """Tier of a row, or None when the row is ignorable."""
    if row.ignore:
        return None
    return score_to_tier(row.score, score_range, levels, clamp=clamp)


def format_fragment(content: str, tier: Optional[int]) -> str:
    """Wrap normalized content in its tier's span; untagged when tier is None."""
    if tier is None:
        return content
    return f'<span class="{tier_class_name(tier)}">{content}</span>'


def render_row(
    row: Row,
    score_range: ScoreRange,
    levels: int,
    escape_html: bool = True,
    fix_newlines: bool = True,
    clamp: bool = False,
) -> str:
    """
    Render one row as an HTML fragment.

    Args:
        row: Input row
        score_range: Global score range from the range pass
        levels: Number of tiers (post-widening)
        escape_html: Escape markup-significant characters
        fix_newlines: Convert newlines to <br>
        clamp: Clamp the maximum score into the top tier

    Returns:
        ``<span class="lvN">content</span>``, or the bare content when the
        row is ignorable
    """
    return format_fragment(
        normalize_content(row.content, escape_html, fix_newlines),
        row_tier(row, score_range, levels, clamp=clamp),
    )
