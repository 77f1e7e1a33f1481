"""Prompt templates for Gemini API calls."""

from models.responses import MatchResult


def build_assessment_prompt(resume_text: str, job_description: str, match: MatchResult) -> str:
    """Narrative assessment calibrated on the local skill match."""
    matched = ", ".join(match.matched_skills) or "none"
    missing = ", ".join(match.missing_skills) or "none"

    return f"""Please analyze this resume against the job description and provide detailed insights.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

BASIC MATCH ANALYSIS:
- Match Percentage: {match.percentage}%
- Matched Skills: {matched}
- Missing Skills: {missing}

Focus on:
1. Technical skill alignment
2. Experience relevance
3. Career progression
4. Specific gaps and how to address them
5. Tailoring suggestions for this specific role

Provide actionable, specific advice rather than generic statements.

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "overallAssessment": "<comprehensive assessment of the candidate's fit for this role>",
  "strengths": [<key strengths relevant to this position>],
  "improvements": [<specific areas where the candidate should improve>],
  "recommendations": [<actionable recommendations to improve the application>],
  "matchScore": <integer 0-100 representing overall fit>,
  "keyInsights": "<most important insights about this match>",
  "careerAdvice": "<specific career advice for this candidate>"
}}"""
