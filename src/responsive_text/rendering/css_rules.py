"""
Width-conditional CSS rule generation.

Builds the stylesheet that hides every tier by default and then, at each
of ``levels`` increasing min-width thresholds, reveals one more tier while
keeping the previously revealed ones visible. A browser applies every
media query whose threshold is <= the viewport width, so the number of
visible tiers never decreases as the viewport widens:

    .lv0{ display: none; }            baseline, one line per tier
    ...
    @media (min-width: 200px){        threshold 0 -> tier 0
    .lv0{ display: inline; }
    }
    @media (min-width: 260px){        threshold 1 -> tiers 0..1
    .lv0{ display: inline; }
    .lv1{ display: inline; }
    }

Widths are integers and every division here is an integer division, so
thresholds are whole length units.

Before generating rules the pipeline widens the span by one tier step
and adds one tier (see ``widen_width_span``), so the top tier is revealed
strictly before the nominal maximum width.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from responsive_text.analysis.tiers import tier_class_name
from responsive_text.models.entities import WidthSpan

logger = logging.getLogger(__name__)

STYLE_HEADER = '<style type="text/css">'
STYLE_FOOTER = "</style>"


@dataclass(frozen=True)
class MediaRule:
    """Tiers displayed once the viewport is at least ``min_width`` wide."""

    min_width: int
    visible_tiers: Tuple[int, ...]


@dataclass(frozen=True)
class RuleSet:
    """
    Complete show/hide rule set.

    Attributes:
        hidden_tiers: Tiers hidden by the baseline rule (all of them)
        rules: Threshold rules in increasing width order
    """

    hidden_tiers: Tuple[int, ...]
    rules: Tuple[MediaRule, ...]

    def visible_at(self, width: int) -> Tuple[int, ...]:
        """Union of the tiers revealed by every rule with min_width <= width."""
        visible = set()
        for rule in self.rules:
            if rule.min_width <= width:
                visible.update(rule.visible_tiers)
        return tuple(sorted(visible))


def widen_width_span(levels: int, width_span: WidthSpan) -> Tuple[int, WidthSpan]:
    """
    Widen the span by one tier step and add one tier.

    This gives the topmost tier a margin: it becomes visible before the
    nominal maximum width is reached. It is a fixed policy, applied once
    per run before rule generation and row rendering.

    Args:
        levels: Requested number of tiers
        width_span: Requested (min, max) width

    Returns:
        (levels + 1, widened span)
    """
    if levels < 1:
        raise ValueError(f"levels must be >= 1, got {levels}")
    widened = WidthSpan(
        min=width_span.min,
        max=width_span.max + width_span.span // levels,
    )
    return levels + 1, widened


def generate_rules(levels: int, width_span: WidthSpan) -> RuleSet:
    """
    Produce the baseline and threshold rules for ``levels`` tiers.

    Rule ``x`` (0 <= x < levels) fires at ``min + x * step`` and shows
    tiers 0..x, where ``step = (max - min) // levels``.

    Args:
        levels: Number of tiers (already widened by the caller)
        width_span: Width span (already widened by the caller)

    Returns:
        RuleSet with ``levels`` threshold rules
    """
    if levels < 1:
        raise ValueError(f"levels must be >= 1, got {levels}")

    step = width_span.span // levels
    if step == 0:
        logger.warning(
            "Width span %d-%d is narrower than %d tiers; all thresholds coincide",
            width_span.min,
            width_span.max,
            levels,
        )

    rules: List[MediaRule] = []
    for x in range(levels):
        rules.append(
            MediaRule(
                min_width=width_span.min + x * step,
                visible_tiers=tuple(range(x + 1)),
            )
        )

    return RuleSet(hidden_tiers=tuple(range(levels)), rules=tuple(rules))


def render_stylesheet(rule_set: RuleSet, unit: str = "px") -> str:
    """
    Render a rule set as a ``<style>`` element.

    Args:
        rule_set: Rules from generate_rules
        unit: CSS length unit for the media query widths

    Returns:
        The complete style element as a string
    """
    css = STYLE_HEADER

    # Disable everything to start with
    for tier in rule_set.hidden_tiers:
        css += f"\n.{tier_class_name(tier)}{{ display: none; }}"

    for rule in rule_set.rules:
        css += f"\n@media (min-width: {rule.min_width}{unit}){{"
        for tier in rule.visible_tiers:
            css += f"\n.{tier_class_name(tier)}{{ display: inline; }}"
        css += "\n}"

    return css + STYLE_FOOTER
