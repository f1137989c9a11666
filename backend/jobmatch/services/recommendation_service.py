"""
Recommendation Service — rank the job catalog for a candidate via LLM.

Pipeline:
  1. Return the cached list for the candidate if present (keyed by candidate id only)
  2. Load the full catalog and build the matching prompt
  3. Parse the ranked list and resolve every entry against the catalog
  4. Cap at MAX_RECOMMENDATIONS and cache

The model's output is only used as a key into the catalog: postings are
always the catalog's own objects, never model-supplied metadata.
"""

from __future__ import annotations

import logging

from jobmatch.config import MAX_RECOMMENDATIONS
from jobmatch.errors import ValidationError
from jobmatch.models.ai_models import JobRecommendationResponse, RecommendedJob
from jobmatch.models.candidate_models import CandidateProfile, JobPosting
from jobmatch.prompts import job_matcher
from jobmatch.services.llm_service import LLMGateway
from jobmatch.services.repositories import JobRepository
from jobmatch.services.response_parser import complete_structured
from jobmatch.services.result_cache import ResultCache, make_cache_key
from jobmatch.utils.text_cleanup import join_or_na

logger = logging.getLogger(__name__)


class RecommendationService:
    def __init__(self, *, gateway: LLMGateway, cache: ResultCache, job_repository: JobRepository):
        self._gateway = gateway
        self._cache = cache
        self._jobs = job_repository

    async def get_recommendations(self, candidate: CandidateProfile) -> list[JobPosting]:
        """Return up to MAX_RECOMMENDATIONS catalog postings ranked for `candidate`."""
        if not candidate.id or not candidate.id.strip():
            raise ValidationError("Candidate ID cannot be empty")

        key = make_cache_key("recommendations", candidate.id)
        return await self._cache.get_or_compute(key, lambda: self._recommend(candidate))

    async def _recommend(self, candidate: CandidateProfile) -> list[JobPosting]:
        catalog = await self._jobs.get_all_jobs()
        if not catalog:
            logger.info(f"Empty job catalog, no recommendations for {candidate.id}")
            return []

        messages = [
            {"role": "system", "content": job_matcher.SYSTEM_PROMPT},
            {"role": "user", "content": build_matching_prompt(candidate, catalog)},
        ]

        logger.info(f"Ranking {len(catalog)} jobs for candidate {candidate.id}")

        parsed = await complete_structured(
            self._gateway,
            prompt_name="job_matcher",
            messages=messages,
            result_model=JobRecommendationResponse,
        )

        recommended = resolve_against_catalog(parsed, catalog)
        logger.info(f"Recommended {len(recommended)} jobs for candidate {candidate.id}")
        return recommended


# ── Helpers ──────────────────────────────────────────────────────────────────


def build_matching_prompt(candidate: CandidateProfile, catalog: list[JobPosting]) -> str:
    job_lines = "\n".join(
        job_matcher.JOB_LINE_TEMPLATE.format(
            id=job.id,
            title=job.title,
            company=job.company,
            skills=join_or_na(job.skills_required),
        )
        for job in catalog
    )
    return job_matcher.USER_PROMPT_TEMPLATE.format(
        full_name=candidate.full_name or "the candidate",
        skills=join_or_na(candidate.skills),
        experience=candidate.experience or "N/A",
        job_preferences=candidate.job_preferences or "N/A",
        job_lines=job_lines,
        limit=MAX_RECOMMENDATIONS,
    )


def resolve_against_catalog(
    parsed: JobRecommendationResponse,
    catalog: list[JobPosting],
) -> list[JobPosting]:
    """
    Map ranked model entries back to catalog postings, in rank order.

    An echoed id wins; otherwise the entry falls back to exact title match,
    which pulls in every posting sharing that title. Unknown entries are
    dropped and the result is capped at MAX_RECOMMENDATIONS.
    """
    by_id = {job.id: job for job in catalog}
    by_title: dict[str, list[JobPosting]] = {}
    for job in catalog:
        by_title.setdefault(job.title, []).append(job)

    resolved: list[JobPosting] = []
    seen: set[str] = set()

    for entry in parsed.jobs:
        if isinstance(entry, RecommendedJob):
            job_id, title = entry.id, entry.title
        else:
            job_id, title = None, entry

        if job_id and job_id in by_id:
            matches = [by_id[job_id]]
        else:
            matches = by_title.get(title, [])
            if not matches:
                logger.debug(f"Dropping recommendation not in catalog: id={job_id} title={title!r}")

        for job in matches:
            if job.id not in seen:
                seen.add(job.id)
                resolved.append(job)

    return resolved[:MAX_RECOMMENDATIONS]
