"""
Auto-Apply Service — apply a candidate to several jobs in one batch.

Per job:
  1. Generate a cover letter
  2. Generate a job-tailored resume
  3. Persist an ApplicationRecord (status Pending)
  4. Report the job as Applied

The resume is fetched and extracted once per batch. Each job is isolated:
a failure is recorded as a Failed result and the batch moves on. Output
order always matches input order, even with concurrency > 1.
"""

from __future__ import annotations

import asyncio
import logging

from jobmatch.errors import ValidationError
from jobmatch.models.candidate_models import (
    ApplicationOutcome,
    ApplicationRecord,
    ApplicationResult,
    ApplicationStatus,
    CandidateProfile,
    JobPosting,
)
from jobmatch.prompts import cover_letter, resume_tailor
from jobmatch.services.document_service import DocumentTextExtractor
from jobmatch.services.llm_service import LLMGateway
from jobmatch.services.repositories import ApplicationRepository
from jobmatch.utils.text_cleanup import join_or_na

logger = logging.getLogger(__name__)


class AutoApplyService:
    def __init__(
        self,
        *,
        gateway: LLMGateway,
        extractor: DocumentTextExtractor,
        application_repository: ApplicationRepository,
        concurrency: int = 1,
    ):
        self._gateway = gateway
        self._extractor = extractor
        self._applications = application_repository
        self._concurrency = max(1, concurrency)

    # ── Public API ───────────────────────────────────────────────────────

    async def auto_apply(
        self,
        candidate: CandidateProfile,
        jobs: list[JobPosting],
    ) -> list[ApplicationResult]:
        """
        Generate a cover letter and tailored resume per job and save one application each.

        Raises:
            ValidationError: no resume location or no jobs (before any network call).
            FetchError: the candidate's resume could not be fetched.
        """
        if not candidate.resume_url or not candidate.resume_url.strip():
            raise ValidationError("Please upload a resume before applying for jobs.")
        if not jobs:
            raise ValidationError("No jobs provided for auto-apply.")

        resume_text = await self._extractor.extract_text_from_url(candidate.resume_url)
        logger.info(
            f"Auto-apply for {candidate.id}: {len(jobs)} jobs, resume {len(resume_text)} chars, "
            f"concurrency={self._concurrency}"
        )

        if self._concurrency == 1:
            return [await self._apply_one(candidate, job, resume_text) for job in jobs]

        semaphore = asyncio.Semaphore(self._concurrency)

        async def _bounded(job: JobPosting) -> ApplicationResult:
            async with semaphore:
                return await self._apply_one(candidate, job, resume_text)

        return list(await asyncio.gather(*(_bounded(job) for job in jobs)))

    # ── Per-Job Pipeline ─────────────────────────────────────────────────

    async def _apply_one(
        self,
        candidate: CandidateProfile,
        job: JobPosting,
        resume_text: str,
    ) -> ApplicationResult:
        try:
            letter = await self._generate_cover_letter(candidate, job, resume_text)
            resume = await self._tailor_resume(candidate, job, resume_text)

            record = ApplicationRecord(
                candidate_id=candidate.id,
                job_id=job.id,
                resume_text=resume,
                cover_letter=letter,
                status=ApplicationStatus.PENDING,
            )
            await self._applications.save_application(record)
        except Exception as e:
            logger.warning(f"Auto-apply failed for {job.title} at {job.company} ({candidate.id}): {e}")
            return ApplicationResult(
                job_id=job.id,
                job_title=job.title,
                company=job.company,
                status=ApplicationOutcome.FAILED,
                error=str(e) or type(e).__name__,
            )

        logger.info(f"Auto-applied to {job.title} at {job.company} for {candidate.id}")
        return ApplicationResult(
            job_id=job.id,
            job_title=job.title,
            company=job.company,
            cover_letter=letter,
            resume=resume,
            status=ApplicationOutcome.APPLIED,
            application_id=record.id,
        )

    async def _generate_cover_letter(self, candidate: CandidateProfile, job: JobPosting, resume_text: str) -> str:
        prompt = cover_letter.USER_PROMPT_TEMPLATE.format(
            full_name=candidate.full_name or "the candidate",
            job_title=job.title,
            company=job.company,
            resume_text=resume_text or "N/A",
            job_description=job.description or "N/A",
        )
        request = self._gateway.build_request("cover_letter", [{"role": "user", "content": prompt}])
        return await self._gateway.generate_text(request)

    async def _tailor_resume(self, candidate: CandidateProfile, job: JobPosting, resume_text: str) -> str:
        prompt = resume_tailor.USER_PROMPT_TEMPLATE.format(
            full_name=candidate.full_name or "the candidate",
            job_title=job.title,
            company=job.company,
            skills_required=join_or_na(job.skills_required),
            resume_text=resume_text or "N/A",
        )
        request = self._gateway.build_request("resume_tailor", [{"role": "user", "content": prompt}])
        return await self._gateway.generate_text(request)
