"""
Attribute comparators used by similarity scoring.

All comparisons are case-insensitive. A missing value on either side never
matches.
"""
from typing import Dict, List, Optional

from wardrobe_scoring.core.tags import has_value, normalize_value
from wardrobe_scoring.core.taxonomy import color_families, silhouette_families

BASIC_TOP_SUBCATEGORIES = {"t-shirt", "tank top"}
BASIC_TOP_FITS = {"fitted", "regular"}
SOLID_PATTERNS = {"", "solid", "plain"}


def _same_family(v1: str, v2: str, families: Dict[str, List[str]]) -> bool:
    a, b = normalize_value(v1), normalize_value(v2)
    for members in families.values():
        lowered = {normalize_value(m) for m in members}
        if a in lowered and b in lowered:
            return True
    return False


def simple_match(v1: Optional[str], v2: Optional[str]) -> bool:
    if not has_value(v1) or not has_value(v2):
        return False
    return normalize_value(v1) == normalize_value(v2)


def colors_match(c1: Optional[str], c2: Optional[str]) -> bool:
    if not has_value(c1) or not has_value(c2):
        return False
    if normalize_value(c1) == normalize_value(c2):
        return True
    return _same_family(c1, c2, color_families())


def is_basic_top(category: Optional[str], subcategory: Optional[str]) -> bool:
    return normalize_value(category) == "top" and normalize_value(subcategory) in BASIC_TOP_SUBCATEGORIES


def silhouettes_match(
    s1: Optional[str],
    s2: Optional[str],
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
) -> bool:
    if not has_value(s1) or not has_value(s2):
        return False
    a, b = normalize_value(s1), normalize_value(s2)
    if a == b:
        return True
    # Fitted and Regular read the same on t-shirts and tanks
    if is_basic_top(category, subcategory) and a in BASIC_TOP_FITS and b in BASIC_TOP_FITS:
        return True
    return _same_family(s1, s2, silhouette_families())


def pattern_matches(p1: Optional[str], p2: Optional[str]) -> bool:
    if p1 is None or p2 is None:
        return False

    def _norm(p: str) -> str:
        v = normalize_value(p)
        return "solid" if v in SOLID_PATTERNS else v

    return _norm(p1) == _norm(p2)
