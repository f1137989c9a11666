from fastapi import APIRouter, Depends

from jobmatch.models.ai_models import HiringScore, SkillGapAnalysis
from jobmatch.models.candidate_models import (
    ApplicationRecord,
    ApplicationResult,
    AutoApplyRequest,
    CandidateProfile,
    JobPosting,
)
from jobmatch.services.auto_apply_service import AutoApplyService
from jobmatch.services.career_insights_service import CareerInsightsService
from jobmatch.services.recommendation_service import RecommendationService
from jobmatch.services.repositories import InMemoryApplicationRepository
from jobmatch.utils.dependencies import (
    get_application_repository,
    get_auto_apply_service,
    get_candidate,
    get_insights_service,
    get_job,
    get_recommendation_service,
)

router = APIRouter()


@router.post("/{candidate_id}/auto-apply", response_model=list[ApplicationResult])
async def auto_apply_endpoint(
    req: AutoApplyRequest,
    candidate: CandidateProfile = Depends(get_candidate),
    service: AutoApplyService = Depends(get_auto_apply_service),
):
    """Generate a cover letter and tailored resume per selected job and save the applications."""
    return await service.auto_apply(candidate, req.selected_jobs)


@router.get("/{candidate_id}/applications", response_model=list[ApplicationRecord])
async def list_applications(
    candidate: CandidateProfile = Depends(get_candidate),
    applications: InMemoryApplicationRepository = Depends(get_application_repository),
):
    """List the applications saved for a candidate."""
    return await applications.list_applications(candidate.id)


@router.get("/{candidate_id}/recommendations", response_model=list[JobPosting])
async def get_recommendations(
    candidate: CandidateProfile = Depends(get_candidate),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Up to five catalog postings ranked for the candidate."""
    return await service.get_recommendations(candidate)


@router.get("/{candidate_id}/jobs/{job_id}/skill-gap", response_model=SkillGapAnalysis)
async def skill_gap_endpoint(
    candidate: CandidateProfile = Depends(get_candidate),
    job: JobPosting = Depends(get_job),
    service: CareerInsightsService = Depends(get_insights_service),
):
    """Missing skills and recommended courses. Never fails on model errors."""
    return await service.analyze_skill_gap(candidate, job)


@router.get("/{candidate_id}/jobs/{job_id}/hiring-score", response_model=HiringScore)
async def hiring_score_endpoint(
    candidate: CandidateProfile = Depends(get_candidate),
    job: JobPosting = Depends(get_job),
    service: CareerInsightsService = Depends(get_insights_service),
):
    """Predicted hiring score. Falls back to a zero score on model errors."""
    return await service.calculate_hiring_score(candidate, job)
