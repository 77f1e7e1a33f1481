"""Resume vs job description scoring.

The percentage is skill coverage: catalog skills found in both texts over
catalog skills found in the job description. Keyword overlap is a coarser,
catalog-independent signal reported alongside it for display only.
"""

import logging

from models.responses import MatchResult
from services.skill_catalog import SkillCatalog
from services.skill_matcher import extract_skills
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

NO_JOB_SKILLS_SUMMARY = "No skills found in job description"

# (lower bound, summary), checked top-down
SUMMARY_BANDS: tuple[tuple[int, str], ...] = (
    (80, "Excellent match! Your resume aligns very well with the job requirements."),
    (60, "Good match! Consider highlighting more relevant skills from the job description."),
    (40, "Fair match. Focus on developing or highlighting the missing skills."),
    (0, "Limited match. Consider gaining experience in the required skills."),
)

MIN_KEYWORD_LENGTH = 4
DEFAULT_KEYWORD_LIMIT = 10


def match_percentage(matched: int, total: int) -> int:
    """Return 100 * matched / total rounded half-up. Returns 0 if total is 0."""
    if total <= 0:
        return 0
    # Integer form of floor(100 * matched / total + 0.5)
    return (200 * matched + total) // (2 * total)


def summarize(percentage: int) -> str:
    """Pick the qualitative summary for a percentage."""
    for lower_bound, summary in SUMMARY_BANDS:
        if percentage >= lower_bound:
            return summary
    return SUMMARY_BANDS[-1][1]


def _unique(items, limit: int) -> list[str]:
    """Deduplicate preserving first appearance, capped at limit."""
    return list(dict.fromkeys(items))[:limit]


def keyword_overlap(
    resume_text: str, job_description: str, limit: int = DEFAULT_KEYWORD_LIMIT
) -> tuple[list[str], list[str]]:
    """Word-level overlap between the two texts.

    Job words shorter than four characters are ignored. Returns
    (matched_keywords, missing_keywords), each deduplicated in order of
    appearance and capped at ``limit``.
    """
    resume_words = normalize(resume_text).split()
    job_words = [w for w in normalize(job_description).split() if len(w) >= MIN_KEYWORD_LENGTH]

    resume_vocab = set(resume_words)
    job_vocab = set(job_words)

    matched = _unique((w for w in resume_words if w in job_vocab), limit)
    missing = _unique((w for w in job_words if w not in resume_vocab), limit)
    return matched, missing


def calculate_match(
    resume_text: str,
    job_description: str,
    catalog: SkillCatalog | None = None,
    keyword_limit: int = DEFAULT_KEYWORD_LIMIT,
) -> MatchResult:
    """Score a resume against a job description."""
    resume_skills = extract_skills(resume_text, catalog)
    job_skills = extract_skills(job_description, catalog)
    logger.debug("Resume skills: %s", resume_skills)
    logger.debug("Job skills: %s", job_skills)

    if not job_skills:
        return MatchResult(percentage=0, summary=NO_JOB_SKILLS_SUMMARY)

    job_set = set(job_skills)
    resume_set = set(resume_skills)
    matched_skills = [s for s in resume_skills if s in job_set]
    missing_skills = [s for s in job_skills if s not in resume_set]

    percentage = match_percentage(len(matched_skills), len(job_skills))
    logger.debug(
        "Skill coverage %d/%d -> %d%%", len(matched_skills), len(job_skills), percentage
    )

    matched_keywords, missing_keywords = keyword_overlap(
        resume_text, job_description, limit=keyword_limit
    )

    return MatchResult(
        percentage=percentage,
        matched_skills=matched_skills,
        missing_skills=missing_skills,
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
        summary=summarize(percentage),
    )
