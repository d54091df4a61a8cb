import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from wardrobe_scoring.core.config import settings

TAXONOMY_PATH = Path(__file__).resolve().parent / "taxonomy.v1.json"

@lru_cache(maxsize=1)
def get_taxonomy() -> Dict[str, Any]:
    path = Path(settings.TAXONOMY_PATH) if settings.TAXONOMY_PATH else TAXONOMY_PATH
    with open(path, "r") as f:
        data = json.load(f)
    return data

def color_families() -> Dict[str, List[str]]:
    return get_taxonomy()["color_families"]

def silhouette_families() -> Dict[str, List[str]]:
    return get_taxonomy()["silhouette_families"]

def get_category_weights(category: Optional[str], subcategory: Optional[str]) -> Dict[str, int]:
    """Attribute weight table for a category/subcategory, falling back to the category and then global default."""
    weights = get_taxonomy()["category_weights"]
    cat = weights["categories"].get((category or "").strip().lower())
    if not cat:
        return dict(weights["default"])
    sub = cat.get("subcategories", {}).get((subcategory or "").strip().lower())
    return dict(sub or cat["default"])
