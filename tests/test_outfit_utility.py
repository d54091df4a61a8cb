from wardrobe_scoring.core.config import Settings
from wardrobe_scoring.schemas.wardrobe import OutfitUtilityData
from wardrobe_scoring.services.scoring import build_outfit_utility, find_coverage_gaps_without_outfits
from wardrobe_scoring.services.scoring.utility import calculate_utility_penalty, utility_sentence
from tests.fixtures import coverage_fixture


def _coverage():
    return [
        coverage_fixture("critical", scenarioName="Office Work", season="winter"),
        coverage_fixture("expansion", scenarioName="Office Work", season="summer"),
        coverage_fixture("improvement", scenarioName="Weekend", season="summer"),
        coverage_fixture("satisfied", scenarioName="Dinner", season="summer"),
        coverage_fixture("critical", scenarioName="All scenarios", season="summer"),
        coverage_fixture("critical", scenarioName="Gym", season="All seasons"),
    ]


def test_gaps_without_outfits():
    combos = [
        {"season": "Summer", "scenario": "office work", "outfits": [{"id": 1}]},
        {"season": "winter", "scenario": "Office Work", "outfits": []},
    ]
    gaps = find_coverage_gaps_without_outfits(_coverage(), combos)
    assert [(g.scenario_name, g.season) for g in gaps] == [("Office Work", "winter"), ("Weekend", "summer")]
    assert gaps[0].description == "top for winter for Office Work"


def test_build_outfit_utility_counts_outfits():
    combos = [
        {"season": "summer", "scenario": "Office Work", "outfits": [{"id": 1}, {"id": 2}]},
        {"season": "summer", "scenario": "Weekend", "outfits": [{"id": 3}]},
    ]
    data = build_outfit_utility(_coverage(), combos, "top")
    assert data.total_outfits == 3
    assert [g.scenario_name for g in data.coverage_gaps_with_no_outfits] == ["Office Work"]


def test_accessories_and_outerwear_not_applicable():
    for category in ("accessory", "Outerwear"):
        data = build_outfit_utility(_coverage(), [], category)
        assert data.total_outfits == -1
        assert not data.applicable
        assert calculate_utility_penalty(data) == 0
        assert utility_sentence(data) == ""


def test_penalties():
    gaps = [coverage_fixture(scenarioName=f"S{i}", season="summer") for i in range(2)]
    assert calculate_utility_penalty(None) == 0
    assert calculate_utility_penalty(OutfitUtilityData(total_outfits=0)) == 3
    assert calculate_utility_penalty(OutfitUtilityData(total_outfits=0, coverage_gaps_with_no_outfits=gaps)) == 3
    assert calculate_utility_penalty(OutfitUtilityData(total_outfits=2, coverage_gaps_with_no_outfits=gaps)) == 2
    assert calculate_utility_penalty(OutfitUtilityData(total_outfits=3, coverage_gaps_with_no_outfits=gaps)) == 0


def test_penalties_follow_settings():
    gaps = [coverage_fixture(scenarioName=f"S{i}", season="summer") for i in range(3)]
    config = Settings(NO_OUTFITS_PENALTY=1.0, LIMITED_UTILITY_MIN_GAPS=4)
    assert calculate_utility_penalty(OutfitUtilityData(total_outfits=0), config) == 1
    limited = OutfitUtilityData(total_outfits=2, coverage_gaps_with_no_outfits=gaps)
    assert calculate_utility_penalty(limited) == 2
    assert calculate_utility_penalty(limited, config) == 0
    assert utility_sentence(limited, config) == ""
