"""Group matched/missing skills under the catalog's display categories."""

from models.responses import SkillCategoryResult
from services.skill_catalog import SkillCatalog, get_catalog
from services.text_normalizer import normalize


def _belongs(skill: str, category_terms: list[str]) -> bool:
    # Substring containment in either direction; "go" also lands wherever a
    # category term contains "go" (e.g. "django").
    norm = normalize(skill)
    return any(norm in term or term in norm for term in category_terms)


def categorize_skills(
    matched_skills: list[str],
    missing_skills: list[str],
    catalog: SkillCatalog | None = None,
) -> list[SkillCategoryResult]:
    """Return per-category matched/missing lists, skipping empty categories."""
    if catalog is None:
        catalog = get_catalog()

    results: list[SkillCategoryResult] = []
    for category, skills in catalog.categories.items():
        terms = [normalize(s) for s in skills]
        matched = [s for s in matched_skills if _belongs(s, terms)]
        missing = [s for s in missing_skills if _belongs(s, terms)]
        if not matched and not missing:
            continue
        results.append(
            SkillCategoryResult(
                category=category,
                skills=list(skills),
                matched=matched,
                missing=missing,
            )
        )
    return results
