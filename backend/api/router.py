from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_skill_catalog
from config import settings
from models.requests import AnalyzeRequest, CategorizeRequest, MatchRequest
from models.responses import AnalysisResponse, MatchReport, MatchResult, SkillCategoryResult
from services import report, resume_analyzer
from services.match_scorer import calculate_match
from services.skill_catalog import SkillCatalog
from services.skill_categorizer import categorize_skills

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(catalog: SkillCatalog = Depends(get_skill_catalog)):
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
        "catalog_size": len(catalog),
    }


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match(
    request: Request,
    body: MatchRequest,
    catalog: SkillCatalog = Depends(get_skill_catalog),
):
    return calculate_match(
        body.resume_text,
        body.job_description,
        catalog=catalog,
        keyword_limit=settings.keyword_limit,
    )


@router.post("/categorize", response_model=list[SkillCategoryResult])
@limiter.limit(settings.rate_limit)
async def categorize(
    request: Request,
    body: CategorizeRequest,
    catalog: SkillCatalog = Depends(get_skill_catalog),
):
    return categorize_skills(body.matched_skills, body.missing_skills, catalog=catalog)


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    body: AnalyzeRequest,
    catalog: SkillCatalog = Depends(get_skill_catalog),
):
    return await resume_analyzer.analyze(
        body.resume_text,
        body.job_description,
        include_assessment=body.include_assessment,
        catalog=catalog,
    )


@router.post("/export", response_model=MatchReport)
@limiter.limit(settings.rate_limit)
async def export(
    request: Request,
    body: MatchRequest,
    catalog: SkillCatalog = Depends(get_skill_catalog),
):
    if not body.resume_text.strip() or not body.job_description.strip():
        raise HTTPException(status_code=400, detail="Resume and job description are both required")

    result = calculate_match(
        body.resume_text,
        body.job_description,
        catalog=catalog,
        keyword_limit=settings.keyword_limit,
    )
    categories = categorize_skills(result.matched_skills, result.missing_skills, catalog=catalog)
    document = report.build_report(result, categories)
    return JSONResponse(
        content=document.model_dump(by_alias=True),
        headers={"Content-Disposition": f'attachment; filename="{report.REPORT_FILENAME}"'},
    )
