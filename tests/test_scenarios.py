from wardrobe_scoring.services.scoring import extract_suitable_scenarios
from tests.fixtures import llm_response_fixture


def test_numbered_list_drops_negative_lines():
    text = "SUITABLE SCENARIOS:\n1. Office Work\n2. Social Outings - inappropriate for formal events\n\nREASON: ..."
    assert extract_suitable_scenarios(text) == ["Office Work"]


def test_trailing_explanations_are_cut():
    assert extract_suitable_scenarios(llm_response_fixture()) == ["Office Work", "Weekend Errands"]


def test_missing_header_or_empty_block():
    assert extract_suitable_scenarios("REASON: nothing to see") == []
    assert extract_suitable_scenarios("SUITABLE SCENARIOS:\n\nREASON: none") == []
    assert extract_suitable_scenarios("") == []
    assert extract_suitable_scenarios(None) == []


def test_header_is_case_insensitive_and_markers_vary():
    text = "Suitable scenarios:\n- Date Night\n* Beach Days: sunny\n• Travel\n3) Gym\nFinal Recommendation: buy"
    assert extract_suitable_scenarios(text) == ["Date Night", "Beach Days", "Travel", "Gym"]


def test_equals_header_form():
    text = (
        "=== SUITABLE SCENARIOS ===\n"
        "1. Office Work\n"
        "2. Dinner Parties\n"
        "=== COMPATIBILITY ===\n"
        "1. Pairs with jeans\n"
    )
    assert extract_suitable_scenarios(text) == ["Office Work", "Dinner Parties"]


def test_short_and_long_names_dropped():
    long_name = "A very long explanatory sentence that is clearly not a scenario name at all"
    text = f"SUITABLE SCENARIOS:\n1. Go\n2. {long_name}\n3. Office Work\nSCORE: 6"
    assert extract_suitable_scenarios(text) == ["Office Work"]


def test_duplicates_kept_in_source_order():
    text = "SUITABLE SCENARIOS:\n1. Travel\n2. Office Work\n3. Travel\n"
    assert extract_suitable_scenarios(text) == ["Travel", "Office Work", "Travel"]


def test_negative_language_variants():
    text = (
        "SUITABLE SCENARIOS:\n"
        "1. Office Work\n"
        "2. Gym (avoid, too stiff)\n"
        "3. Hiking - poor fit\n"
        "4. Skip formal events\n"
        "5. Weddings - doesn't work\n"
        "6. Black Tie - not suitable\n"
        "7. Funerals (unsuitable)\n"
    )
    assert extract_suitable_scenarios(text) == ["Office Work"]


def test_valid_scenarios_map_to_user_names():
    text = "SUITABLE SCENARIOS:\n1. Office\n2. Office Work\n3. Brunch\n4. Weekend\nREASON: ok"
    valid = ["Office Work", "Weekend Outings"]
    assert extract_suitable_scenarios(text, valid) == ["Office Work", "Weekend Outings"]


def test_inline_section_headers_end_the_block():
    text = "SUITABLE SCENARIOS:\n1. Office Work\n2. Date Night REASON: pairs well"
    assert extract_suitable_scenarios(text) == ["Office Work", "Date Night"]
    assert extract_suitable_scenarios("SUITABLE SCENARIOS: Office Work. SCORE: 7") == ["Office Work"]


def test_leading_numbers_without_marker_are_kept():
    text = "SUITABLE SCENARIOS:\n1. 9 to 5 Office\n9 to 5 Office\nREASON: ok"
    assert extract_suitable_scenarios(text) == ["9 to 5 Office", "9 to 5 Office"]
