"""
Career Insights Service — hiring score prediction and skill-gap analysis.

Both features are nice-to-have: a model or parse failure never breaks the
request, it degrades to a zero score / empty lists (PROMPT_CONFIG policy DEFAULT).
"""

from __future__ import annotations

import logging

from jobmatch.models.ai_models import HiringScore, SkillGapAnalysis
from jobmatch.models.candidate_models import CandidateProfile, JobPosting
from jobmatch.prompts import hiring_score, skill_gap
from jobmatch.services.llm_service import LLMGateway
from jobmatch.services.response_parser import complete_structured
from jobmatch.utils.text_cleanup import join_or_na

logger = logging.getLogger(__name__)

HIRING_SCORE_ERROR_REASON = "Error calculating hiring score"


def _default_hiring_score() -> HiringScore:
    return HiringScore(score=0, reason=HIRING_SCORE_ERROR_REASON, improvements=[])


class CareerInsightsService:
    def __init__(self, *, gateway: LLMGateway):
        self._gateway = gateway

    async def calculate_hiring_score(self, candidate: CandidateProfile, job: JobPosting) -> HiringScore:
        prompt = hiring_score.USER_PROMPT_TEMPLATE.format(
            full_name=candidate.full_name or "the candidate",
            job_title=job.title,
            company=job.company,
            skills=join_or_na(candidate.skills),
            experience=candidate.experience or "N/A",
            skills_required=join_or_na(job.skills_required),
        )
        result = await complete_structured(
            self._gateway,
            prompt_name="hiring_score",
            messages=[{"role": "user", "content": prompt}],
            result_model=HiringScore,
            default=_default_hiring_score,
        )
        logger.info(f"Hiring score for {candidate.id} on {job.id}: {result.score}")
        return result

    async def analyze_skill_gap(self, candidate: CandidateProfile, job: JobPosting) -> SkillGapAnalysis:
        prompt = skill_gap.USER_PROMPT_TEMPLATE.format(
            full_name=candidate.full_name or "the candidate",
            job_title=job.title,
            company=job.company,
            skills=join_or_na(candidate.skills),
            skills_required=join_or_na(job.skills_required),
        )
        return await complete_structured(
            self._gateway,
            prompt_name="skill_gap",
            messages=[{"role": "user", "content": prompt}],
            result_model=SkillGapAnalysis,
            default=SkillGapAnalysis,
        )
