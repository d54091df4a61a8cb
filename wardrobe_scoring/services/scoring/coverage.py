from typing import Dict, List, Optional, Sequence

from wardrobe_scoring.core.config import settings
from wardrobe_scoring.schemas.wardrobe import CoverageEntry

ALL_SCENARIOS = "all scenarios"

STANDARD_SCORES: Dict[str, float] = {
    "critical": 10,
    "improvement": 9,
    "expansion": 8,
    "satisfied": 6,
    "oversaturated": 3,
}

CONSTRAINED_SCORES: Dict[str, float] = {
    "critical": 10,
    "improvement": 9,
    "expansion": 6,
    "satisfied": 4,
    "oversaturated": 2,
}


def dedupe_coverage(coverage: Sequence[CoverageEntry]) -> List[CoverageEntry]:
    seen = set()
    out: List[CoverageEntry] = []
    for entry in coverage:
        if entry.dedup_key in seen:
            continue
        seen.add(entry.dedup_key)
        out.append(entry)
    return out


def scenario_matches(scenario_name: str, suitable: str) -> bool:
    a, b = scenario_name.lower(), suitable.lower()
    # an unnamed row is a substring of every scenario
    return a in b or b in a


def filter_relevant_coverage(
    coverage: Sequence[CoverageEntry], suitable_scenarios: Optional[Sequence[str]]
) -> List[CoverageEntry]:
    """Coverage rows for the suitable scenarios, always keeping "All scenarios" rows."""
    if not suitable_scenarios:
        return list(coverage)
    relevant = [
        entry for entry in coverage
        if ALL_SCENARIOS in entry.scenario_name.lower()
        or any(scenario_matches(entry.scenario_name, s) for s in suitable_scenarios if s)
    ]
    return relevant or list(coverage)


def resolve_gap_type(coverage: Sequence[CoverageEntry]) -> Optional[str]:
    # satisfied/oversaturated only win when seen first; later rows never demote to them
    best: Optional[str] = None
    for entry in coverage:
        gap = entry.gap_type
        if not gap:
            continue
        if (
            best is None
            or gap == "critical"
            or (gap == "improvement" and best != "critical")
            or (gap == "expansion" and best not in ("critical", "improvement"))
        ):
            best = gap
    return best


def has_constraint_goals(
    user_goals: Optional[Sequence[str]], constraint_goals: Optional[Sequence[str]] = None
) -> bool:
    goals = set(settings.constraint_goal_list if constraint_goals is None else constraint_goals)
    return any(g in goals for g in user_goals or [])


def base_score(gap_type: Optional[str], constrained: bool, default: Optional[float] = None) -> float:
    table = CONSTRAINED_SCORES if constrained else STANDARD_SCORES
    fallback = settings.SCORE_DEFAULT if default is None else default
    return float(table.get(gap_type or "", fallback))
