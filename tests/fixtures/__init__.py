from .scoring_fixtures import (
    black_tshirt_fixture,
    casual_tops_fixture,
    diverse_tops_fixture,
    coverage_fixture,
    seasonal_coverage_fixture,
    llm_response_fixture,
    ALL_FIXTURES,
)

__all__ = [
    "black_tshirt_fixture",
    "casual_tops_fixture",
    "diverse_tops_fixture",
    "coverage_fixture",
    "seasonal_coverage_fixture",
    "llm_response_fixture",
    "ALL_FIXTURES",
]
