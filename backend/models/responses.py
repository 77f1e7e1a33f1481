from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MatchResult(BaseModel):
    """Outcome of comparing a resume against a job description.

    Serialized with camelCase keys for the UI; snake_case is accepted on input.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    percentage: int = Field(0, ge=0, le=100)
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    summary: str = ""


class SkillCategoryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    skills: list[str] = []  # terms declared for the category
    matched: list[str] = []
    missing: list[str] = []


class StructuredAssessment(BaseModel):
    """Narrative commentary parsed from the AI service's JSON reply."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: Literal["structured"] = "structured"
    overall_assessment: str = Field(..., min_length=1)
    strengths: list[str] = []
    improvements: list[str] = []
    recommendations: list[str] = []
    match_score: int = Field(0, ge=0, le=100)
    key_insights: str = ""
    career_advice: str = ""


class UnstructuredAssessment(BaseModel):
    """AI reply that could not be read as the expected JSON object."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    kind: Literal["unstructured"] = "unstructured"
    raw_text: str


Assessment = Annotated[
    StructuredAssessment | UnstructuredAssessment, Field(discriminator="kind")
]


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    match: MatchResult
    categories: list[SkillCategoryResult] = []
    assessment: Assessment | None = None
    assessment_source: Literal["gemini", "mock", "none"] = "none"
    degraded: bool = False


class CategoryGroup(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    category: str
    matched: list[str] = []
    missing: list[str] = []


class MatchReport(BaseModel):
    """Downloadable summary document."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score: int = 0
    matched: list[str] = []
    missing: list[str] = []
    groups: list[CategoryGroup] = []
