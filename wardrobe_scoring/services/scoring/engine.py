import logging
from typing import Any, Mapping, Optional, Sequence, Union

from wardrobe_scoring.core.config import Settings, settings as default_settings
from wardrobe_scoring.schemas.wardrobe import (
    CoverageLike,
    ItemLike,
    OutfitUtilityData,
    WardrobeItemAttributes,
    as_coverage,
    as_item,
)
from .coverage import (
    base_score,
    dedupe_coverage,
    filter_relevant_coverage,
    has_constraint_goals,
    resolve_gap_type,
)
from .reasons import NO_COVERAGE_REASON, generate_objective_final_reason
from .types import DuplicateAnalysis, DuplicateInfo, ReasonGenerator, ScoreResult, VarietyModifier
from .utility import calculate_utility_penalty, utility_sentence
from .variety import calculate_variety_score_modifier, format_variety_message

logger = logging.getLogger("scoring.engine")

DuplicateLike = Union[DuplicateAnalysis, Mapping[str, Any]]
OutfitDataLike = Union[OutfitUtilityData, Mapping[str, Any]]


def _duplicate_info(duplicate_analysis: Optional[DuplicateLike]) -> Optional[DuplicateInfo]:
    if duplicate_analysis is None:
        return None
    if isinstance(duplicate_analysis, Mapping):
        if not duplicate_analysis.get("found"):
            return None
        return DuplicateInfo(
            count=int(duplicate_analysis.get("count") or 0),
            severity=duplicate_analysis.get("severity") or "NONE",
            items=list(duplicate_analysis.get("items") or []),
        )
    if not duplicate_analysis.found:
        return None
    return DuplicateInfo(
        count=duplicate_analysis.count,
        severity=duplicate_analysis.severity,
        items=list(duplicate_analysis.items),
    )


def _as_outfit_data(outfit_data: Optional[OutfitDataLike]) -> Optional[OutfitUtilityData]:
    if outfit_data is None or isinstance(outfit_data, OutfitUtilityData):
        return outfit_data
    return OutfitUtilityData.model_validate(outfit_data)


def _as_candidate(form_data: Any) -> Optional[WardrobeItemAttributes]:
    if isinstance(form_data, (WardrobeItemAttributes, Mapping)):
        return as_item(form_data)
    return None


class ScenarioCoverageScorer:
    """
    Final suitability score (1.0-10.0) and justification for a candidate item.

    Signals are applied in a fixed order: duplicates override everything,
    then the gap type sets the base score, outfit utility can pull it down
    and variety can nudge expansion picks up or down.
    """

    def __init__(self, reason_generator: Optional[ReasonGenerator] = None, settings: Settings = default_settings):
        self.reason_generator = reason_generator or generate_objective_final_reason
        self.settings = settings

    def _clamp_score(self, value: float) -> float:
        return max(self.settings.SCORE_MIN, min(self.settings.SCORE_MAX, float(value)))

    def _duplicate_result(self, info: DuplicateInfo) -> ScoreResult:
        if info.count >= 2:
            score = 1.0
            listed = f" ({', '.join(info.items)})" if info.items else ""
            reason = (
                f"You already have {info.count} very similar items{listed}. "
                "Adding this would create excessive redundancy in your wardrobe."
            )
        else:
            score = 2.0
            name = f'"{info.items[0]}"' if info.items else "an existing piece"
            reason = f"You already have a very similar item: {name}. Consider if you really need another similar piece."
        logger.info("coverage duplicate override count=%s severity=%s score=%s", info.count, info.severity, score)
        return ScoreResult(
            score=self._clamp_score(score),
            reason=reason,
            relevant_coverage=[],
            gap_type="duplicate",
            duplicate_info=info,
        )

    def score(
        self,
        coverage: Optional[Sequence[CoverageLike]],
        suitable_scenarios: Optional[Sequence[str]],
        form_data: Any,
        user_goals: Optional[Sequence[str]],
        duplicate_analysis: Optional[DuplicateLike] = None,
        outfit_data: Optional[OutfitDataLike] = None,
        *,
        existing_items: Optional[Sequence[ItemLike]] = None,
    ) -> ScoreResult:
        info = _duplicate_info(duplicate_analysis)
        if info is not None:
            return self._duplicate_result(info)

        entries = as_coverage(coverage)
        if not entries:
            return ScoreResult(score=self.settings.SCORE_DEFAULT, reason=NO_COVERAGE_REASON, gap_type=None)

        suitable = [s for s in suitable_scenarios or [] if s]
        goals = list(user_goals or [])
        relevant = filter_relevant_coverage(dedupe_coverage(entries), suitable)
        gap_type = resolve_gap_type(relevant)
        constrained = has_constraint_goals(goals, self.settings.constraint_goal_list)
        score = base_score(gap_type, constrained, self.settings.SCORE_DEFAULT)
        logger.info("coverage gap_type=%s constrained=%s relevant=%s base=%s",
                    gap_type, constrained, len(relevant), score)

        utility = _as_outfit_data(outfit_data)
        penalty = calculate_utility_penalty(utility, self.settings)
        if penalty:
            score = max(self.settings.SCORE_MIN, score - penalty)
            logger.info("coverage utility penalty=%s total_outfits=%s gaps=%s",
                        penalty, utility.total_outfits, len(utility.coverage_gaps_with_no_outfits))

        variety: Optional[VarietyModifier] = None
        candidate = _as_candidate(form_data)
        if gap_type == "expansion" and existing_items is not None and candidate is not None:
            variety = calculate_variety_score_modifier(candidate, existing_items, gap_type, self.settings)
            score = self._clamp_score(score + variety.modifier)

        reason = self.reason_generator(relevant, gap_type, suitable, constrained, form_data, goals)
        sentence = utility_sentence(utility, self.settings)
        if sentence:
            reason = f"{reason} {sentence}" if reason else sentence
        if variety is not None:
            reason = (reason + format_variety_message(variety)).lstrip()

        return ScoreResult(
            score=self._clamp_score(score),
            reason=reason,
            relevant_coverage=relevant,
            gap_type=gap_type,
            variety_analysis=variety,
            utility_penalty=penalty,
        )


def analyze_scenario_coverage_for_score(
    coverage: Optional[Sequence[CoverageLike]],
    suitable_scenarios: Optional[Sequence[str]],
    form_data: Any,
    user_goals: Optional[Sequence[str]],
    duplicate_analysis: Optional[DuplicateLike] = None,
    outfit_data: Optional[OutfitDataLike] = None,
    *,
    existing_items: Optional[Sequence[ItemLike]] = None,
    reason_generator: Optional[ReasonGenerator] = None,
) -> ScoreResult:
    scorer = ScenarioCoverageScorer(reason_generator=reason_generator)
    return scorer.score(
        coverage,
        suitable_scenarios,
        form_data,
        user_goals,
        duplicate_analysis,
        outfit_data,
        existing_items=existing_items,
    )
