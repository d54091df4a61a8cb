"""
Synthetic fixtures for recommendation scoring.
Use these to create consistent test scenarios.
"""
from typing import Any, Dict, List


def black_tshirt_fixture(**overrides: Any) -> Dict[str, Any]:
    """Basic black t-shirt, the most common duplicate case."""
    item = {
        "id": "tee-black",
        "name": "Black Tee",
        "category": "top",
        "subcategory": "t-shirt",
        "color": "Black",
        "style": "Casual",
    }
    item.update(overrides)
    return item


def casual_tops_fixture(count: int = 3, **overrides: Any) -> List[Dict[str, Any]]:
    """Cohort of identical casual tops."""
    items = []
    for i in range(count):
        item = {
            "name": f"Casual Top {i}",
            "category": "top",
            "subcategory": "t-shirt",
            "color": "Black",
            "silhouette": "Regular",
            "style": "Casual",
        }
        item.update(overrides)
        items.append(item)
    return items


def diverse_tops_fixture() -> List[Dict[str, Any]]:
    """Tops spread across styles, silhouettes and colors."""
    return [
        {"name": "White Shirt", "category": "top", "subcategory": "shirt", "color": "White", "silhouette": "Fitted", "style": "Elegant"},
        {"name": "Grey Hoodie", "category": "top", "subcategory": "hoodie", "color": "Grey", "silhouette": "Oversized", "style": "Casual"},
        {"name": "Red Blouse", "category": "top", "subcategory": "blouse", "color": "Red", "silhouette": "Regular", "style": "Romantic"},
        {"name": "Navy Polo", "category": "top", "subcategory": "polo", "color": "Navy", "silhouette": "Regular", "style": "Sporty"},
    ]


def coverage_fixture(gap_type: str = "expansion", **overrides: Any) -> Dict[str, Any]:
    """Single coverage row in the upstream camelCase shape."""
    entry = {
        "scenarioName": "All scenarios",
        "category": "top",
        "season": None,
        "gapType": gap_type,
        "coveragePercent": 70,
        "gapCount": 1,
    }
    entry.update(overrides)
    return entry


def seasonal_coverage_fixture() -> List[Dict[str, Any]]:
    """Office and weekend coverage across seasons, with a duplicate row."""
    return [
        coverage_fixture("expansion", scenarioName="Office Work", season="summer", gapCount=1, coveragePercent=60),
        coverage_fixture("improvement", scenarioName="Office Work", season="winter", gapCount=2, coveragePercent=40),
        coverage_fixture("improvement", scenarioName="Office Work", season="winter", gapCount=5, coveragePercent=10),
        coverage_fixture("satisfied", scenarioName="Weekend Outings", season="summer", gapCount=0, coveragePercent=100),
    ]


def llm_response_fixture() -> str:
    """Model response with a suitable-scenarios section."""
    return (
        "ANALYSIS: A versatile piece.\n\n"
        "SUITABLE SCENARIOS:\n"
        "1. Office Work\n"
        "2. Social Outings - inappropriate for formal events\n"
        "3. Weekend Errands (great with jeans)\n\n"
        "REASON: Fits most of the user's week.\n"
        "SCORE: 7\n"
    )


ALL_FIXTURES = {
    "black_tshirt": black_tshirt_fixture,
    "casual_tops": casual_tops_fixture,
    "diverse_tops": diverse_tops_fixture,
    "coverage": coverage_fixture,
    "seasonal_coverage": seasonal_coverage_fixture,
    "llm_response": llm_response_fixture,
}
