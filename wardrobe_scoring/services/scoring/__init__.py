from .engine import ScenarioCoverageScorer, analyze_scenario_coverage_for_score
from .similarity import calculate_similarity_score
from .duplicates import analyze_duplicates_for_ai, find_critical_duplicates, identify_duplicate_factors
from .variety import (
    calculate_variety_score_modifier,
    format_variety_message,
    should_skip_variety_analysis,
)
from .scenarios import extract_suitable_scenarios
from .reasons import generate_objective_final_reason
from .utility import build_outfit_utility, find_coverage_gaps_without_outfits
from .types import (
    DuplicateAnalysis,
    DuplicateInfo,
    ScoreResult,
    SimilarityResult,
    VarietyImpactSummary,
    VarietyModifier,
)

__all__ = [
    "ScenarioCoverageScorer",
    "analyze_scenario_coverage_for_score",
    "calculate_similarity_score",
    "analyze_duplicates_for_ai",
    "find_critical_duplicates",
    "identify_duplicate_factors",
    "calculate_variety_score_modifier",
    "format_variety_message",
    "should_skip_variety_analysis",
    "extract_suitable_scenarios",
    "generate_objective_final_reason",
    "build_outfit_utility",
    "find_coverage_gaps_without_outfits",
    "DuplicateAnalysis",
    "DuplicateInfo",
    "ScoreResult",
    "SimilarityResult",
    "VarietyImpactSummary",
    "VarietyModifier",
]
