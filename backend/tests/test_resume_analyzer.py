import pytest

from models.responses import StructuredAssessment
from services import gemini_client
from services.report import build_report
from services.resume_analyzer import analyze

RESUME = "Python and Go developer, some Kubernetes."
JOB = "Python, Go, AWS and Kubernetes."


@pytest.fixture
def gemini_down(monkeypatch):
    async def no_reply(prompt):
        return None

    monkeypatch.setattr(gemini_client, "generate_text", no_reply)


@pytest.mark.asyncio
async def test_analyze_without_assessment(small_catalog):
    result = await analyze(RESUME, JOB, include_assessment=False, catalog=small_catalog)
    assert result.match.percentage == 75
    assert result.match.missing_skills == ["aws"]
    assert [c.category for c in result.categories] == ["Languages", "Cloud"]
    assert result.assessment is None
    assert result.assessment_source == "none"
    assert result.degraded is False


@pytest.mark.asyncio
async def test_analyze_degrades_to_local_assessment(small_catalog, gemini_down):
    result = await analyze(RESUME, JOB, catalog=small_catalog)
    assert result.assessment_source == "mock"
    assert result.degraded is True
    assert isinstance(result.assessment, StructuredAssessment)
    assert result.assessment.match_score == 75


@pytest.mark.asyncio
async def test_analyze_uses_process_catalog_by_default(gemini_down):
    result = await analyze("python", "python")
    assert result.match.percentage == 100
    assert result.categories[0].category == "Programming Languages"


@pytest.mark.asyncio
async def test_build_report(small_catalog):
    result = await analyze(RESUME, JOB, include_assessment=False, catalog=small_catalog)
    report = build_report(result.match, result.categories)
    assert report.score == 75
    assert report.matched == ["python", "go", "kubernetes"]
    assert report.missing == ["aws"]
    assert report.model_dump()["groups"] == [
        {"category": "Languages", "matched": ["python", "go"], "missing": []},
        {"category": "Cloud", "matched": ["kubernetes"], "missing": ["aws"]},
    ]
