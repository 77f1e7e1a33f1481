"""Orchestrator: local skill match, category breakdown, optional AI commentary.

Pipeline:
1. Skill + keyword matching (pure, synchronous)
2. Category breakdown of matched/missing skills
3. Gemini narrative assessment (optional, falls back to local commentary)
"""

import logging

from config import settings
from models.responses import AnalysisResponse
from services import ai_assessment
from services.match_scorer import calculate_match
from services.skill_catalog import SkillCatalog, get_catalog
from services.skill_categorizer import categorize_skills

logger = logging.getLogger(__name__)


async def analyze(
    resume_text: str,
    job_description: str,
    include_assessment: bool = True,
    catalog: SkillCatalog | None = None,
) -> AnalysisResponse:
    """Run the full analysis for one resume / job description pair."""
    if catalog is None:
        catalog = get_catalog()

    # --- Layer 1: Skill coverage and keyword overlap ---
    match = calculate_match(
        resume_text, job_description, catalog=catalog, keyword_limit=settings.keyword_limit
    )

    # --- Layer 2: Category breakdown ---
    categories = categorize_skills(match.matched_skills, match.missing_skills, catalog=catalog)

    if not include_assessment:
        return AnalysisResponse(match=match, categories=categories)

    # --- Layer 3: Narrative assessment ---
    assessment, source = await ai_assessment.assess_match(resume_text, job_description, match)
    degraded = source == "mock"
    if degraded:
        logger.info("Analysis degraded to local assessment (score=%d)", match.percentage)

    return AnalysisResponse(
        match=match,
        categories=categories,
        assessment=assessment,
        assessment_source=source,
        degraded=degraded,
    )
