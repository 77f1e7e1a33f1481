from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MatchRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=10000, description="Job description text")


class AnalyzeRequest(MatchRequest):
    include_assessment: bool = Field(True, description="Ask the AI service for narrative commentary")


class CategorizeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matched_skills: list[str] = []
    missing_skills: list[str] = []
