import logging
from typing import Callable, Dict

from wardrobe_scoring.core.rounding import round_half_up
from wardrobe_scoring.core.tags import has_value, normalize_value
from wardrobe_scoring.core.taxonomy import get_category_weights
from wardrobe_scoring.schemas.wardrobe import ItemLike, WardrobeItemAttributes, as_item
from .matchers import colors_match, pattern_matches, silhouettes_match, simple_match

logger = logging.getLogger("scoring.similarity")

Comparator = Callable[[WardrobeItemAttributes, WardrobeItemAttributes], bool]

COMPARATORS: Dict[str, Comparator] = {
    "color": lambda a, b: colors_match(a.color, b.color),
    "silhouette": lambda a, b: silhouettes_match(a.silhouette, b.silhouette, a.category, a.subcategory),
    "style": lambda a, b: simple_match(a.style, b.style),
    "material": lambda a, b: simple_match(a.material, b.material),
    "pattern": lambda a, b: pattern_matches(a.pattern, b.pattern),
    "neckline": lambda a, b: simple_match(a.neckline, b.neckline),
    "sleeves": lambda a, b: simple_match(a.sleeves, b.sleeves),
    "heel_height": lambda a, b: simple_match(a.heel_height, b.heel_height),
    "boot_height": lambda a, b: simple_match(a.boot_height, b.boot_height),
    "rise": lambda a, b: simple_match(a.rise, b.rise),
    "length": lambda a, b: simple_match(a.length, b.length),
}


def same_kind(a: WardrobeItemAttributes, b: WardrobeItemAttributes) -> bool:
    return (
        normalize_value(a.category) == normalize_value(b.category)
        and normalize_value(a.subcategory) == normalize_value(b.subcategory)
    )


def calculate_similarity_score(a: ItemLike, b: ItemLike) -> int:
    """
    Weighted attribute similarity between two items, 0-100.

    Items of a different category or subcategory score 0. Only attributes
    present on both items count towards the denominator, so sparse records
    are compared on what they share.
    """
    a, b = as_item(a), as_item(b)
    if not same_kind(a, b):
        return 0

    weights = get_category_weights(a.category, a.subcategory)
    applicable_max = 0
    matched = 0
    for attr, weight in weights.items():
        compare = COMPARATORS.get(attr)
        if compare is None:
            continue
        if not (has_value(getattr(a, attr)) and has_value(getattr(b, attr))):
            continue
        applicable_max += weight
        if compare(a, b):
            matched += weight

    if applicable_max == 0:
        return 0
    score = round_half_up(matched / applicable_max * 100)
    logger.debug("similarity %s vs %s matched=%s max=%s score=%s",
                 a.display_name, b.display_name, matched, applicable_max, score)
    return score
