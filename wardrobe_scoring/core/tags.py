import re
import unicodedata
from typing import Iterable, Optional, Sequence

ALL_SEASONS = "all_seasons"
MISSING_VALUES = {"", "undefined", "unknown", "n/a", "none", "null"}

def normalize_value(s: Optional[str]) -> str:
    return (s or "").strip().lower()

def has_value(s: Optional[str]) -> bool:
    return normalize_value(s) not in MISSING_VALUES

def same_value(a: Optional[str], b: Optional[str]) -> bool:
    return has_value(a) and has_value(b) and normalize_value(a) == normalize_value(b)

def normalize_tag(s: str) -> str:
    s = unicodedata.normalize("NFKD", s or "").encode("ascii", "ignore").decode()
    s = s.strip().lower()
    s = re.sub(r"[^a-z0-9/]+", "_", s)
    s = re.sub(r"_{2,}", "_", s).strip("_")
    if not s:
        raise ValueError("empty_tag")
    return s

def normalize_many(xs: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for x in xs or []:
        if not has_value(x):
            continue
        try:
            t = normalize_tag(x)
        except ValueError:
            continue
        if t not in seen:
            seen.add(t)
            out.append(t)
    return out

def seasons_overlap(a: Sequence[str], b: Sequence[str]) -> bool:
    """True when either side lists no seasons, is all-season, or the two lists share one."""
    left, right = set(normalize_many(a)), set(normalize_many(b))
    if not left or not right:
        return True
    if ALL_SEASONS in left or ALL_SEASONS in right:
        return True
    return bool(left & right)
