"""Catalog-driven skill extraction over sliding-window phrases.

Each catalog term is normalized like free text and tested against the
1/2/3-word phrases of the input:

* terms of one character never match (``r``, and ``c++`` once normalized),
* terms of two or three characters (``go``, ``aws``, ``sql``) must equal a
  whole token, so "go" is not found inside "mango",
* longer terms match a phrase exactly, as a substring of a phrase
  ("kubernetes" in "kubernetes native"), or contain a phrase longer than
  three characters ("node" inside "node js").
"""

import logging
from collections.abc import Iterable

from services.skill_catalog import SkillCatalog, get_catalog
from services.text_normalizer import extract_phrases, normalize

logger = logging.getLogger(__name__)

MIN_SKILL_LENGTH = 2
SHORT_SKILL_MAX_LENGTH = 3


def matches_skill(normalized_skill: str, phrases: Iterable[str]) -> bool:
    """Check a normalized catalog term against a collection of phrases."""
    if len(normalized_skill) < MIN_SKILL_LENGTH:
        return False

    if len(normalized_skill) <= SHORT_SKILL_MAX_LENGTH:
        # Whole-word match only
        return any(normalized_skill in phrase.split(" ") for phrase in phrases)

    for phrase in phrases:
        if phrase == normalized_skill or normalized_skill in phrase:
            return True
        if len(phrase) > SHORT_SKILL_MAX_LENGTH and phrase in normalized_skill:
            return True
    return False


def extract_skills(text: str, catalog: SkillCatalog | None = None) -> list[str]:
    """Return catalog terms found in text, deduplicated, in catalog order."""
    if catalog is None:
        catalog = get_catalog()
    # Only membership matters downstream, so collapse duplicate windows
    phrases = set(extract_phrases(normalize(text)))
    if not phrases:
        return []

    found: list[str] = []
    seen: set[str] = set()
    for skill in catalog.terms:
        # Spellings that normalize alike ("Python", "python") count once,
        # reported under the first one in the catalog
        normalized_skill = normalize(skill)
        if normalized_skill in seen:
            continue
        seen.add(normalized_skill)
        if matches_skill(normalized_skill, phrases):
            logger.debug("Found skill %r in text", skill)
            found.append(skill)

    return found
