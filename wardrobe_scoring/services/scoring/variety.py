import logging
from typing import List, Optional, Sequence

from wardrobe_scoring.core.config import Settings, settings
from wardrobe_scoring.core.rounding import percentage
from wardrobe_scoring.core.tags import has_value, normalize_value, same_value, seasons_overlap
from wardrobe_scoring.schemas.wardrobe import ItemLike, WardrobeItemAttributes, as_item, as_items
from .types import VarietyModifier

logger = logging.getLogger("scoring.variety")

VARIETY_DIMENSIONS = ("style", "silhouette", "color")


def should_skip_variety_analysis(gap_type: Optional[str]) -> bool:
    """Variety only matters when the wardrobe is being expanded."""
    return gap_type != "expansion"


def build_cohort(
    candidate: WardrobeItemAttributes, existing_items: Sequence[WardrobeItemAttributes]
) -> List[WardrobeItemAttributes]:
    category = normalize_value(candidate.category)
    return [
        item for item in existing_items
        if normalize_value(item.category) == category and seasons_overlap(candidate.seasons, item.seasons)
    ]


def _style_percentage(candidate: WardrobeItemAttributes, cohort: Sequence[WardrobeItemAttributes]) -> int:
    if not has_value(candidate.style):
        return 0
    matches = sum(1 for item in cohort if same_value(item.style, candidate.style))
    return percentage(matches, len(cohort) + 1)


def calculate_variety_score_modifier(
    candidate: ItemLike,
    existing_items: Sequence[ItemLike],
    gap_type: Optional[str] = None,
    config: Optional[Settings] = None,
) -> VarietyModifier:
    if should_skip_variety_analysis(gap_type):
        return VarietyModifier(
            impact="SKIPPED",
            modifier=0,
            reasoning=f"Variety analysis skipped - {gap_type} gap doesn't benefit from variety scoring",
            skipped_reason=f'Gap type "{gap_type}" doesn\'t require variety analysis',
        )

    candidate = as_item(candidate)
    cohort = build_cohort(candidate, as_items(existing_items))

    boosts: List[str] = []
    for dim in VARIETY_DIMENSIONS:
        value = getattr(candidate, dim)
        if has_value(value) and not any(same_value(getattr(item, dim), value) for item in cohort):
            boosts.append(f"NEW_{dim.upper()}")

    n = len(boosts)
    style_pct = _style_percentage(candidate, cohort)
    style_dominates = style_pct > (config or settings).STYLE_DOMINANCE_THR
    warnings: List[str] = ["STYLE_DOMINANCE"] if style_dominates else []

    if n == 3:
        result = VarietyModifier("ENRICHES", 2, boosts, warnings, "MAJOR_VARIETY: Adds new style + silhouette + color")
    elif n == 2:
        added = " + ".join(b.lower() for b in boosts)
        result = VarietyModifier("ENRICHES", 1, boosts, warnings, f"GOOD_VARIETY: Adds {added}")
    elif n == 1:
        result = VarietyModifier("ENRICHES", 1, boosts, warnings, f"MINOR_VARIETY: Adds {boosts[0].lower()}")
    elif style_dominates:
        result = VarietyModifier(
            "MONOTONOUS", -1, boosts, warnings,
            f"STYLE_DOMINANCE: {style_pct}% of comparable items already share the {candidate.style} style",
        )
    else:
        result = VarietyModifier("NEUTRAL", 0, boosts, warnings, "NEUTRAL: No new variety dimensions")

    logger.info("variety candidate=%s cohort=%s boosts=%s style_pct=%s modifier=%s",
                candidate.display_name, len(cohort), ",".join(boosts) or "-", style_pct, result.modifier)
    return result


def _join_dimensions(dims: List[str]) -> str:
    if len(dims) == 1:
        return dims[0]
    return ", ".join(dims[:-1]) + " and " + dims[-1]


def format_variety_message(modifier: Optional[VarietyModifier]) -> str:
    if modifier is None or modifier.impact in ("NEUTRAL", "SKIPPED"):
        return ""
    if modifier.modifier < 0:
        return ", but this would limit your styling variety as you already have many similar pieces."
    if modifier.modifier == 0:
        return ""

    dims = [b.replace("NEW_", "").lower() for b in modifier.variety_boosts]
    if not dims:
        return ""
    if len(dims) == 1:
        return f" This piece would expand your styling options by adding a new {dims[0]}."
    if len(dims) == 2:
        return f" This piece would expand your styling options by adding new {_join_dimensions(dims)}."
    return f" This piece would expand your styling options with new {_join_dimensions(dims)}."
