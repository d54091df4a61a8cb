"""
Default narrative generator for coverage-based scores.

Builds a short, friendly sentence from the resolved gap type and the most
relevant coverage row. The scorer accepts any callable with the same
positional signature in its place.
"""
import logging
from typing import Any, List, Mapping, Optional, Sequence

from wardrobe_scoring.core.tags import ALL_SEASONS, normalize_value
from wardrobe_scoring.schemas.wardrobe import CoverageEntry

logger = logging.getLogger("scoring.reasons")

NO_COVERAGE_REASON = "No coverage data available for analysis."

# None means "use generic language": a one-piece could be a dress, jumpsuit or romper
CATEGORY_LABELS = {
    "one_piece": None,
    "one_pieces": None,
    "top": "tops",
    "bottom": "bottoms",
    "footwear": "shoes",
    "outerwear": "outerwear",
    "accessory": "accessories",
}
MASS_NOUNS = {"outerwear", "footwear", "sleepwear", "activewear", "underwear"}
NON_SEASONAL_ACCESSORIES = {"bag", "belt", "jewelry", "watch", "sunglasses"}
MAIN_SEASONS = {"summer", "winter", "spring/fall"}


def _form_value(form_data: Any, key: str) -> Optional[str]:
    if form_data is None:
        return None
    if isinstance(form_data, Mapping):
        return form_data.get(key)
    return getattr(form_data, key, None)


def format_seasons(seasons: Sequence[str]) -> str:
    unique = list(dict.fromkeys(seasons))
    if set(unique) == MAIN_SEASONS:
        return "all seasons"
    return " and ".join(unique)


def validate_scenario_names(names: Sequence[str], valid_scenarios: Optional[Sequence[str]]) -> List[str]:
    """Map names onto the user's own scenarios, dropping anything that doesn't match."""
    if not valid_scenarios or not names:
        return list(names or [])
    validated: List[str] = []
    for name in names:
        lowered = name.lower()
        match = next(
            (v for v in valid_scenarios if v.lower() == lowered or lowered in v.lower() or v.lower() in lowered),
            None,
        )
        if match is None:
            logger.debug("reasons dropped scenario=%r", name)
        elif match not in validated:
            validated.append(match)
    return validated


def _item_type(category: str, subcategory: Optional[str], coverage: Sequence[CoverageEntry]) -> Optional[str]:
    item_type = category.lower()
    if item_type == "accessory":
        if subcategory:
            item_type = subcategory.lower()
        elif coverage and coverage[0].subcategory_name:
            item_type = coverage[0].subcategory_name.lower()
    if item_type in CATEGORY_LABELS:
        return CATEGORY_LABELS[item_type]
    if not item_type.endswith("s") and item_type not in MASS_NOUNS:
        item_type += "s"
    return item_type


def _prioritized(coverage: Sequence[CoverageEntry], most_covered: bool = False) -> List[CoverageEntry]:
    """Sorted copy: biggest gap first, or best covered first for satisfied/oversaturated."""
    if most_covered:
        key = lambda c: (c.gap_count or 0, -(c.coverage_percent or 0))
    else:
        key = lambda c: (-(c.gap_count or 0), c.coverage_percent or 0)
    return sorted(coverage, key=key)


def _season_phrase(ordered: Sequence[CoverageEntry], non_seasonal: bool) -> Optional[str]:
    if non_seasonal:
        return None
    seasons = [c.season for c in ordered if c.season and c.season != ALL_SEASONS]
    if len(seasons) > 1:
        return format_seasons(seasons)
    top = ordered[0]
    if top.season and top.season != ALL_SEASONS:
        return top.season
    return None


def _is_specific_scenario(name: Optional[str]) -> bool:
    return bool(name) and normalize_value(name) != "all scenarios"


def generate_objective_final_reason(
    relevant_coverage: Sequence[CoverageEntry],
    gap_type: Optional[str],
    suitable_scenarios: Sequence[str],
    has_constraint_goals: bool,
    form_data: Any,
    user_goals: Sequence[str],
    valid_scenarios: Optional[Sequence[str]] = None,
) -> str:
    if not relevant_coverage:
        return NO_COVERAGE_REASON

    category = _form_value(form_data, "category") or ""
    subcategory = _form_value(form_data, "subcategory")
    item_type = _item_type(category, subcategory, relevant_coverage) if category else None
    generic = item_type is None or category.lower() == "one_piece"
    non_seasonal = normalize_value(subcategory) in NON_SEASONAL_ACCESSORIES

    ordered = _prioritized(relevant_coverage, most_covered=gap_type in ("satisfied", "oversaturated"))
    top = ordered[0]
    season = _season_phrase(ordered, non_seasonal)
    scenario_suffix = f" for {top.scenario_name}" if _is_specific_scenario(top.scenario_name) else ""

    if gap_type == "critical":
        if generic:
            reason = f"This could add versatility for {top.scenario_name}"
            if season:
                reason += f" in {season}"
            return reason + ", even if you already have separates that work."
        reason = f"You're missing essential {item_type} pieces"
        if season:
            reason += f" for {season}"
        return reason + scenario_suffix + ". This could be a great addition to fill that gap!"

    if gap_type == "improvement":
        if generic:
            reason = f"This could add a different styling option for {top.scenario_name}"
            if season:
                reason += f" in {season}"
            return reason + ", complementing your existing separates."
        reason = f"Your {item_type} collection could use some variety"
        if season:
            reason += f" for {season}"
        coverage_names = list(dict.fromkeys(
            c.scenario_name for c in ordered if _is_specific_scenario(c.scenario_name)
        ))
        if coverage_names and suitable_scenarios:
            names = [s for s in suitable_scenarios if _is_specific_scenario(s)]
        else:
            names = coverage_names
        names = validate_scenario_names(names, valid_scenarios)
        if names:
            reason += f", especially for {' and '.join(names)}"
        return reason + ". This would be a nice addition!"

    if gap_type == "expansion":
        logger.debug("reasons expansion scenario=%s season=%s gaps=%s coverage=%s",
                     top.scenario_name, top.season or "all seasons", top.gap_count, top.coverage_percent)
        if generic:
            reason = f"You have good coverage for {top.scenario_name}"
            if season:
                reason += f" in {season}"
        else:
            reason = f"You have good coverage in {item_type}"
            if season:
                reason += f" for {season}"
            reason += scenario_suffix
        if has_constraint_goals:
            return reason + ". Maybe skip unless it's really special?"
        return reason + ", so this would be nice-to-have rather than essential."

    if gap_type == "satisfied":
        reason = "You're well-stocked" if item_type is None else f"You're well-stocked with {item_type}"
        if season:
            reason += f" for {season}"
        reason += scenario_suffix
        if has_constraint_goals:
            return reason + ". This might be a pass."
        return reason + ". Only consider if it offers something truly unique."

    if gap_type == "oversaturated":
        if item_type is None:
            reason = "You already have plenty in this category"
        else:
            reason = f"You already have plenty of {item_type}"
        if season:
            reason += f" for {season}"
        return reason + scenario_suffix + "."

    return "Based on your current wardrobe, this would be a moderate priority."
