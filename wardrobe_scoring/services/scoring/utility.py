"""
Outfit-utility signals for the coverage scorer.

Cross-references coverage gaps against the outfits the candidate can take
part in and turns the result into the utility penalty and sentence.
"""
import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from wardrobe_scoring.core.config import Settings, settings
from wardrobe_scoring.core.tags import ALL_SEASONS, normalize_value
from wardrobe_scoring.schemas.wardrobe import (
    CoverageEntry,
    CoverageLike,
    OutfitCombination,
    OutfitUtilityData,
    as_coverage,
)

logger = logging.getLogger("scoring.utility")

GAP_TYPES_NEEDING_OUTFITS = ("critical", "improvement", "expansion")
NOT_APPLICABLE_CATEGORIES = {"accessory", "outerwear"}

NO_OUTFITS_SENTENCE = "Unfortunately, you don't have the right pieces in your wardrobe to style this item."
LIMITED_OUTFITS_SENTENCE = "However, you're missing several key pieces to style this for all occasions."

CombinationLike = Union[OutfitCombination, Mapping]


def _as_combinations(combos: Optional[Iterable[CombinationLike]]) -> List[OutfitCombination]:
    return [c if isinstance(c, OutfitCombination) else OutfitCombination.model_validate(c) for c in combos or []]


def _is_specific(entry: CoverageEntry) -> bool:
    season = normalize_value(entry.season)
    scenario = normalize_value(entry.scenario_name)
    if not season or not scenario:
        return False
    return season.replace(" ", "_") != ALL_SEASONS and scenario != "all scenarios"


def find_coverage_gaps_without_outfits(
    coverage: Sequence[CoverageLike],
    outfit_combinations: Optional[Iterable[CombinationLike]],
) -> List[CoverageEntry]:
    """Season- and scenario-specific gaps for which no outfit could be built."""
    combos = _as_combinations(outfit_combinations)
    gaps: List[CoverageEntry] = []
    for entry in as_coverage(coverage):
        if entry.gap_type not in GAP_TYPES_NEEDING_OUTFITS or not _is_specific(entry):
            continue
        found = sum(
            len(c.outfits) for c in combos
            if normalize_value(c.season) == normalize_value(entry.season)
            and normalize_value(c.scenario) == normalize_value(entry.scenario_name)
        )
        if found == 0:
            logger.debug("utility gap without outfits category=%s season=%s scenario=%s",
                         entry.category, entry.season, entry.scenario_name)
            gaps.append(entry.model_copy(update={
                "description": f"{entry.category} for {entry.season} for {entry.scenario_name}",
            }))
    return gaps


def build_outfit_utility(
    coverage: Sequence[CoverageLike],
    outfit_combinations: Optional[Iterable[CombinationLike]],
    category: Optional[str] = None,
) -> OutfitUtilityData:
    if normalize_value(category) in NOT_APPLICABLE_CATEGORIES:
        return OutfitUtilityData(total_outfits=-1, coverage_gaps_with_no_outfits=[])
    combos = _as_combinations(outfit_combinations)
    return OutfitUtilityData(
        total_outfits=sum(len(c.outfits) for c in combos),
        coverage_gaps_with_no_outfits=find_coverage_gaps_without_outfits(coverage, combos),
    )


def _limited_utility(outfit_data: OutfitUtilityData, config: Settings) -> bool:
    return (
        0 < outfit_data.total_outfits <= config.LIMITED_UTILITY_MAX_OUTFITS
        and len(outfit_data.coverage_gaps_with_no_outfits) >= config.LIMITED_UTILITY_MIN_GAPS
    )


def calculate_utility_penalty(outfit_data: Optional[OutfitUtilityData], config: Optional[Settings] = None) -> float:
    """Score deduction for an item that can't be styled into enough outfits."""
    config = config or settings
    if outfit_data is None or not outfit_data.applicable:
        return 0.0
    if outfit_data.total_outfits == 0:
        return config.NO_OUTFITS_PENALTY
    if _limited_utility(outfit_data, config):
        return config.LIMITED_UTILITY_PENALTY
    return 0.0


def utility_sentence(outfit_data: Optional[OutfitUtilityData], config: Optional[Settings] = None) -> str:
    config = config or settings
    if outfit_data is None or not outfit_data.applicable:
        return ""
    if outfit_data.total_outfits == 0:
        return NO_OUTFITS_SENTENCE
    if _limited_utility(outfit_data, config):
        return LIMITED_OUTFITS_SENTENCE
    return ""
