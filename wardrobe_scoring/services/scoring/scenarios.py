"""
Suitable-scenario extraction from free-text model responses.

The parser is lenient: it looks for a ``SUITABLE SCENARIOS:`` (or
``=== SUITABLE SCENARIOS ===``) section, keeps one scenario per line and
returns an empty list rather than raising when nothing usable is found.
"""
import logging
import re
from typing import List, Optional, Sequence

from wardrobe_scoring.core.config import settings

logger = logging.getLogger("scoring.scenarios")

EQUALS_HEADER = re.compile(r"={3,}\s*SUITABLE SCENARIOS\s*={3,}", re.IGNORECASE)
COLON_HEADER = re.compile(r"SUITABLE SCENARIOS\s*:", re.IGNORECASE)
SECTION_END = re.compile(r"\b(?:REASON|FINAL RECOMMENDATION|SCORE)\s*:", re.IGNORECASE)
EQUALS_SECTION = re.compile(r"^\s*={3,}.*?={3,}", re.MULTILINE)
NEGATIVE_LANGUAGE = re.compile(
    r"not suitable|inappropriate|doesn't work|poor fit|avoid|skip|unsuitable", re.IGNORECASE
)
LIST_MARKER = re.compile(r"^(?:(?:\d+[.)]|[-*+•·▪–—])\s*)+")
EXPLANATION_SPLIT = re.compile(r"[(:\-]")
MIN_NAME_LEN = 3


def _scenario_block(text: str) -> Optional[str]:
    m = EQUALS_HEADER.search(text)
    enders = [SECTION_END]
    if m:
        enders.append(EQUALS_SECTION)
    else:
        m = COLON_HEADER.search(text)
    if not m:
        return None

    rest = text[m.end():]
    end = len(rest)
    for pattern in enders:
        found = pattern.search(rest)
        if found:
            end = min(end, found.start())
    return rest[:end]


def _clean_line(line: str) -> str:
    name = LIST_MARKER.sub("", line.strip())
    name = EXPLANATION_SPLIT.split(name, maxsplit=1)[0]
    return name.strip(" \t*_\"'.,;")


def _match_valid(name: str, valid_scenarios: Sequence[str]) -> Optional[str]:
    lowered = name.lower()
    for valid in valid_scenarios:
        v = valid.lower()
        if v == lowered or lowered in v or v in lowered:
            return valid
    return None


def extract_suitable_scenarios(text: Optional[str], valid_scenarios: Optional[Sequence[str]] = None) -> List[str]:
    """
    Scenario names listed as suitable in ``text``, in source order.

    Lines using negative language are dropped, list markers are stripped and
    trailing explanations after ``(``, ``:`` or ``-`` are cut off. When
    ``valid_scenarios`` is given, names are mapped onto the user's own
    scenario names and de-duplicated; unmatched names are dropped.
    """
    if not isinstance(text, str) or not text.strip():
        return []
    block = _scenario_block(text)
    if block is None or not block.strip():
        return []

    valid = [v for v in (valid_scenarios or []) if v]
    scenarios: List[str] = []
    for line in block.splitlines():
        line = line.strip()
        if not line or NEGATIVE_LANGUAGE.search(line):
            continue
        name = _clean_line(line)
        if len(name) < MIN_NAME_LEN or len(name) >= settings.SCENARIO_NAME_MAX_LEN:
            continue
        if not valid:
            scenarios.append(name)
            continue
        match = _match_valid(name, valid)
        if match is None:
            logger.debug("scenarios rejected=%r valid=%s", name, valid)
        elif match not in scenarios:
            scenarios.append(match)

    logger.debug("scenarios extracted=%s", scenarios)
    return scenarios
