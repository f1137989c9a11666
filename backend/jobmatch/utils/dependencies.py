"""
Dependency providers — process-scoped singletons for the FastAPI layer.

Each provider is memoized with lru_cache so the ResultCache, gateway and
in-memory repositories are built once per process. Tests swap them through
app.dependency_overrides. The job catalog and candidate profiles are read
from settings.seed_data_path when set; otherwise both repositories are empty.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from jobmatch.config import Settings, settings
from jobmatch.models.candidate_models import CandidateProfile, JobPosting
from jobmatch.services.auto_apply_service import AutoApplyService
from jobmatch.services.career_insights_service import CareerInsightsService
from jobmatch.services.cv_service import CvService
from jobmatch.services.document_service import DocumentTextExtractor
from jobmatch.services.interview_service import InterviewService
from jobmatch.services.llm_service import LLMGateway
from jobmatch.services.recommendation_service import RecommendationService
from jobmatch.services.repositories import (
    InMemoryApplicationRepository,
    InMemoryCandidateRepository,
    InMemoryJobRepository,
    SeedData,
    load_seed_data,
)
from jobmatch.services.result_cache import ResultCache


def get_settings() -> Settings:
    return settings


# ── Infrastructure ───────────────────────────────────────────────────────────


@lru_cache
def get_result_cache() -> ResultCache:
    return ResultCache(ttl_seconds=settings.cache_ttl_seconds)


@lru_cache
def get_gateway() -> LLMGateway:
    return LLMGateway.from_settings(settings)


@lru_cache
def get_extractor() -> DocumentTextExtractor:
    return DocumentTextExtractor.from_settings(settings)


@lru_cache
def get_seed_data() -> SeedData:
    return load_seed_data(settings.seed_data_path)


@lru_cache
def get_job_repository() -> InMemoryJobRepository:
    return InMemoryJobRepository(get_seed_data().jobs)


@lru_cache
def get_candidate_repository() -> InMemoryCandidateRepository:
    return InMemoryCandidateRepository(get_seed_data().candidates)


@lru_cache
def get_application_repository() -> InMemoryApplicationRepository:
    return InMemoryApplicationRepository()


# ── Services ─────────────────────────────────────────────────────────────────


def get_recommendation_service(
    gateway: LLMGateway = Depends(get_gateway),
    cache: ResultCache = Depends(get_result_cache),
    jobs: InMemoryJobRepository = Depends(get_job_repository),
) -> RecommendationService:
    return RecommendationService(gateway=gateway, cache=cache, job_repository=jobs)


def get_auto_apply_service(
    gateway: LLMGateway = Depends(get_gateway),
    extractor: DocumentTextExtractor = Depends(get_extractor),
    applications: InMemoryApplicationRepository = Depends(get_application_repository),
    app_settings: Settings = Depends(get_settings),
) -> AutoApplyService:
    return AutoApplyService(
        gateway=gateway,
        extractor=extractor,
        application_repository=applications,
        concurrency=app_settings.auto_apply_concurrency,
    )


def get_cv_service(gateway: LLMGateway = Depends(get_gateway)) -> CvService:
    return CvService(gateway=gateway)


def get_interview_service(
    gateway: LLMGateway = Depends(get_gateway),
    cache: ResultCache = Depends(get_result_cache),
) -> InterviewService:
    return InterviewService(gateway=gateway, cache=cache)


def get_insights_service(gateway: LLMGateway = Depends(get_gateway)) -> CareerInsightsService:
    return CareerInsightsService(gateway=gateway)


# ── Request-Scoped Lookups ───────────────────────────────────────────────────


async def get_candidate(
    candidate_id: str,
    candidates: InMemoryCandidateRepository = Depends(get_candidate_repository),
) -> CandidateProfile:
    """Resolve the path's candidate_id or 404."""
    candidate = await candidates.find_candidate_by_id(candidate_id)
    if not candidate:
        raise HTTPException(status_code=404, detail=f"Candidate '{candidate_id}' not found")
    return candidate


async def get_job(
    job_id: str,
    jobs: InMemoryJobRepository = Depends(get_job_repository),
) -> JobPosting:
    """Resolve the path's job_id against the catalog or 404."""
    job = await jobs.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail=f"Job '{job_id}' not found")
    return job
