"""
Rendering module for CSS rule generation, row fragments and page output.
"""

from responsive_text.rendering.css_rules import (
    MediaRule,
    RuleSet,
    generate_rules,
    render_stylesheet,
    widen_width_span,
)
from responsive_text.rendering.page import assemble_page, write_page
from responsive_text.rendering.row_renderer import (
    format_fragment,
    normalize_content,
    render_row,
    row_tier,
)

__all__ = [
    "MediaRule",
    "RuleSet",
    "generate_rules",
    "render_stylesheet",
    "widen_width_span",
    "assemble_page",
    "write_page",
    "format_fragment",
    "normalize_content",
    "render_row",
    "row_tier",
]
