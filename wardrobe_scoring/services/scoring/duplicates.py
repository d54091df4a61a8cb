import logging
from typing import List, Optional, Sequence

from wardrobe_scoring.core.config import Settings, settings
from wardrobe_scoring.core.rounding import percentage
from wardrobe_scoring.core.tags import has_value, normalize_value, same_value
from wardrobe_scoring.schemas.wardrobe import ItemLike, WardrobeItemAttributes, as_item, as_items
from .matchers import colors_match, silhouettes_match
from .similarity import calculate_similarity_score, same_kind
from .types import DuplicateAnalysis, SimilarityResult, VarietyImpactSummary

logger = logging.getLogger("scoring.duplicates")


def identify_duplicate_factors(candidate: WardrobeItemAttributes, existing: WardrobeItemAttributes) -> List[str]:
    factors: List[str] = []
    if colors_match(candidate.color, existing.color):
        factors.append(f"Same color ({candidate.color})")
    if silhouettes_match(candidate.silhouette, existing.silhouette, candidate.category, candidate.subcategory):
        factors.append(f"Same silhouette ({candidate.silhouette})")
    if same_value(candidate.style, existing.style):
        factors.append(f"Same style ({candidate.style})")
    if same_value(candidate.material, existing.material):
        factors.append(f"Same material ({candidate.material})")
    return factors


def find_critical_duplicates(
    candidate: ItemLike,
    existing_items: Sequence[ItemLike],
    threshold: Optional[int] = None,
) -> List[SimilarityResult]:
    """Existing items of the same category/subcategory scoring at or above the duplicate threshold."""
    candidate = as_item(candidate)
    threshold = settings.DUPLICATE_THRESHOLD if threshold is None else threshold
    matches: List[SimilarityResult] = []
    for item in as_items(existing_items):
        if not same_kind(candidate, item):
            continue
        score = calculate_similarity_score(candidate, item)
        if score >= threshold:
            matches.append(SimilarityResult(
                item=item,
                similarity_score=score,
                overlap_factors=identify_duplicate_factors(candidate, item),
            ))
    # sorted() is stable, equal scores keep input order
    return sorted(matches, key=lambda m: m.similarity_score, reverse=True)


def _severity(count: int) -> str:
    if count >= 3:
        return "EXCESSIVE"
    if count >= 2:
        return "HIGH"
    if count >= 1:
        return "MODERATE"
    return "NONE"


def color_dominance(
    candidate: WardrobeItemAttributes,
    existing_items: Sequence[WardrobeItemAttributes],
    config: Optional[Settings] = None,
) -> VarietyImpactSummary:
    """Share of the category the candidate's color would hold once added."""
    if not has_value(candidate.color):
        return VarietyImpactSummary(color_percentage=0, would_dominate=False, message="No color information available")

    category_items = [i for i in existing_items if normalize_value(i.category) == normalize_value(candidate.category)]
    color_count = sum(1 for i in category_items if same_value(i.color, candidate.color))
    pct = percentage(color_count + 1, len(category_items) + 1)
    would_dominate = pct >= (config or settings).COLOR_DOMINANCE_THR
    category = normalize_value(candidate.category) or "this category"
    if would_dominate:
        message = f"Adding this would make {candidate.color} {pct}% of your {category} items"
    else:
        message = f"{candidate.color} would be {pct}% of your {category} items"
    return VarietyImpactSummary(color_percentage=pct, would_dominate=would_dominate, message=message)


def analyze_duplicates_for_ai(
    candidate: ItemLike, existing_items: Sequence[ItemLike], config: Optional[Settings] = None
) -> DuplicateAnalysis:
    config = config or settings
    candidate = as_item(candidate)
    items = as_items(existing_items)
    duplicates = find_critical_duplicates(candidate, items, config.DUPLICATE_THRESHOLD)
    count = len(duplicates)
    impact = color_dominance(candidate, items, config)

    if count >= 2:
        recommendation = "SKIP"
    elif count == 1 and impact.would_dominate:
        recommendation = "CONSIDER"
    else:
        recommendation = "ANALYZE_FURTHER"

    analysis = DuplicateAnalysis(
        found=count > 0,
        count=count,
        items=[d.item.display_name for d in duplicates],
        severity=_severity(count),
        similarity_scores=[d.similarity_score for d in duplicates],
        overlap_factors=[d.overlap_factors for d in duplicates],
        variety_impact=impact,
        recommendation=recommendation,
    )
    logger.info("duplicates candidate=%s count=%s severity=%s recommendation=%s",
                candidate.display_name, count, analysis.severity, recommendation)
    return analysis
