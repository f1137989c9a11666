"""
Interview Service — AI-generated interview questions with sample answers.

Results are cached per (title, skills, count); keys are normalized so that
case and skill order do not split the cache.
"""

from __future__ import annotations

import logging

from jobmatch.config import MAX_INTERVIEW_QUESTIONS, MIN_INTERVIEW_QUESTIONS
from jobmatch.errors import ValidationError
from jobmatch.models.ai_models import InterviewQuestion, InterviewResponse
from jobmatch.prompts import interview_questions
from jobmatch.services.llm_service import LLMGateway
from jobmatch.services.response_parser import complete_structured
from jobmatch.services.result_cache import ResultCache, make_cache_key
from jobmatch.utils.text_cleanup import normalize_skills

logger = logging.getLogger(__name__)


class InterviewService:
    def __init__(self, *, gateway: LLMGateway, cache: ResultCache):
        self._gateway = gateway
        self._cache = cache

    async def generate_interview_questions(
        self,
        job_title: str,
        skills: list[str],
        question_count: int,
    ) -> list[InterviewQuestion]:
        if not job_title or not job_title.strip() or not normalize_skills(skills or []):
            raise ValidationError("Job title and skills cannot be empty.")
        if not MIN_INTERVIEW_QUESTIONS <= question_count <= MAX_INTERVIEW_QUESTIONS:
            raise ValidationError(
                f"Question count must be between {MIN_INTERVIEW_QUESTIONS} and {MAX_INTERVIEW_QUESTIONS}."
            )

        title = job_title.strip()
        key = make_cache_key("interview", title.lower(), normalize_skills(skills), question_count)

        async def _generate() -> list[InterviewQuestion]:
            messages = [
                {"role": "system", "content": interview_questions.SYSTEM_PROMPT},
                {"role": "user", "content": interview_questions.USER_PROMPT_TEMPLATE.format(
                    question_count=question_count,
                    job_title=title,
                    skills=", ".join(s.strip() for s in skills if s and s.strip()),
                )},
            ]
            logger.info(f"Generating {question_count} interview questions for '{title}'")
            parsed = await complete_structured(
                self._gateway,
                prompt_name="interview_questions",
                messages=messages,
                result_model=InterviewResponse,
            )
            return parsed.questions

        return await self._cache.get_or_compute(key, _generate)
