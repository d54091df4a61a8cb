from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from wardrobe_scoring.schemas.wardrobe import CoverageEntry, WardrobeItemAttributes


@dataclass
class SimilarityResult:
    """An existing item compared against a candidate."""
    item: WardrobeItemAttributes
    similarity_score: int  # 0-100
    overlap_factors: List[str] = field(default_factory=list)


@dataclass
class VarietyImpactSummary:
    """Legacy color-dominance block attached to duplicate analysis."""
    color_percentage: int
    would_dominate: bool
    message: str


@dataclass
class DuplicateAnalysis:
    found: bool
    count: int
    items: List[str]
    severity: str  # NONE | MODERATE | HIGH | EXCESSIVE
    similarity_scores: List[int] = field(default_factory=list)
    overlap_factors: List[List[str]] = field(default_factory=list)
    variety_impact: Optional[VarietyImpactSummary] = None
    recommendation: str = "ANALYZE_FURTHER"  # SKIP | CONSIDER | ANALYZE_FURTHER


@dataclass
class VarietyModifier:
    impact: str  # ENRICHES | MONOTONOUS | NEUTRAL | SKIPPED
    modifier: int  # -1..2
    variety_boosts: List[str] = field(default_factory=list)
    monotony_warnings: List[str] = field(default_factory=list)
    reasoning: str = ""
    skipped_reason: Optional[str] = None


@dataclass
class DuplicateInfo:
    count: int
    severity: str
    items: List[str]


@dataclass
class ScoreResult:
    """Final suitability score for a candidate item."""
    score: float  # 1.0-10.0
    reason: str
    relevant_coverage: List[CoverageEntry] = field(default_factory=list)
    gap_type: Optional[str] = None
    duplicate_info: Optional[DuplicateInfo] = None
    variety_analysis: Optional[VarietyModifier] = None
    utility_penalty: float = 0.0


class ReasonGenerator(Protocol):
    def __call__(
        self,
        relevant_coverage: Sequence[CoverageEntry],
        gap_type: Optional[str],
        suitable_scenarios: Sequence[str],
        has_constraint_goals: bool,
        form_data: Optional[dict],
        user_goals: Sequence[str],
    ) -> str:
        ...
