"""Narrative assessment of a match from the external AI service.

The reply is either a structured assessment (the JSON object the prompt asks
for) or, when that cannot be read, the raw text wrapped as an unstructured
assessment. When Gemini is not configured or fails, a deterministic
assessment is derived from the local match instead.
"""

import json
import logging
import re

from pydantic import ValidationError

from models.responses import (
    Assessment,
    MatchResult,
    StructuredAssessment,
    UnstructuredAssessment,
)
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


def parse_assessment(text: str) -> Assessment:
    """Read the AI reply as a StructuredAssessment, else keep it unstructured."""
    match = _JSON_OBJECT.search(_strip_code_fences(text))
    if match is None:
        logger.warning("AI reply contained no JSON object, keeping raw text")
        return UnstructuredAssessment(raw_text=text)

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI reply as JSON: %s", e)
        return UnstructuredAssessment(raw_text=text)

    if not isinstance(data, dict):
        return UnstructuredAssessment(raw_text=text)
    data.pop("kind", None)

    try:
        return StructuredAssessment.model_validate(data)
    except ValidationError as e:
        logger.error("AI reply did not match the assessment schema: %s", e)
        return UnstructuredAssessment(raw_text=text)


def mock_assessment(match: MatchResult) -> StructuredAssessment:
    """Deterministic commentary built only from the local match."""
    percentage = match.percentage
    if percentage >= 80:
        fit = "This is an excellent fit with strong technical alignment."
    elif percentage >= 60:
        fit = "This is a good match with some areas for improvement."
    else:
        fit = "This candidate has potential but needs significant skill development."

    if match.matched_skills:
        strengths = [
            f"Strong foundation in {', '.join(match.matched_skills[:3])}",
            "Demonstrates technical competency in core areas",
            "Shows relevant experience in the technology stack",
        ]
    else:
        strengths = [
            "Candidate shows potential for growth",
            "Good foundational knowledge",
            "Willingness to learn new technologies",
        ]

    if match.missing_skills:
        improvements = [
            f"Need to develop skills in {', '.join(match.missing_skills[:3])}",
            "Should focus on gaining experience with required technologies",
            "Consider taking courses or building projects in missing skill areas",
        ]
        main_gap = match.missing_skills[0]
    else:
        improvements = [
            "Continue building expertise in current skills",
            "Stay updated with industry trends",
        ]
        main_gap = "advanced skills"

    return StructuredAssessment(
        overall_assessment=(
            f"Based on the analysis, this candidate shows a {percentage}% match "
            f"with the job requirements. {fit}"
        ),
        strengths=strengths,
        improvements=improvements,
        recommendations=[
            "Tailor resume to highlight relevant experience more prominently",
            "Add specific projects or achievements related to the job requirements",
            "Consider adding metrics and quantifiable results to experience descriptions",
            "Optimize resume keywords to match job description terminology",
        ],
        match_score=percentage,
        key_insights=(
            f"The main gap is in {main_gap}. Focus on building practical experience "
            "through projects or certifications."
        ),
        career_advice=(
            "Focus on building a portfolio that demonstrates practical application "
            "of the required skills."
        ),
    )


async def assess_match(
    resume_text: str, job_description: str, match: MatchResult
) -> tuple[Assessment, str]:
    """Return (assessment, source) where source is "gemini" or "mock"."""
    prompt = prompt_builder.build_assessment_prompt(resume_text, job_description, match)
    reply = await gemini_client.generate_text(prompt)
    if reply is None:
        logger.warning("Gemini assessment unavailable, using local assessment")
        return mock_assessment(match), "mock"
    return parse_assessment(reply), "gemini"
