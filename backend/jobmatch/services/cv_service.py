"""
CV Service — structured extraction and optimization of candidate resumes.

Both features are core: model or parse failures propagate to the caller.
"""

from __future__ import annotations

import logging

from jobmatch.errors import ValidationError
from jobmatch.models.ai_models import CvOptimizationRequest, OptimizedCv, ParsedCvData
from jobmatch.prompts import cv_extractor, cv_optimizer
from jobmatch.services.document_service import extract_text_off_loop
from jobmatch.services.llm_service import LLMGateway
from jobmatch.services.response_parser import complete_structured

logger = logging.getLogger(__name__)


class CvService:
    def __init__(self, *, gateway: LLMGateway):
        self._gateway = gateway

    async def extract_cv_details(self, cv_text: str) -> ParsedCvData:
        """Parse raw resume text into ParsedCvData."""
        if not cv_text or not cv_text.strip():
            raise ValidationError("CV text cannot be empty")

        messages = [
            {"role": "system", "content": cv_extractor.SYSTEM_PROMPT},
            {"role": "user", "content": cv_extractor.USER_PROMPT_TEMPLATE.format(cv_text=cv_text.strip())},
        ]

        logger.info(f"Extracting CV details ({len(cv_text)} chars)")

        parsed = await complete_structured(
            self._gateway,
            prompt_name="cv_extractor",
            messages=messages,
            result_model=ParsedCvData,
        )
        logger.info(f"Extracted CV: name={parsed.name!r} skills={len(parsed.skills)}")
        return parsed

    async def extract_cv_details_from_document(
        self,
        *,
        file_bytes: bytes,
        file_name: str,
        content_type: str | None = None,
    ) -> ParsedCvData:
        """Extract text from an uploaded PDF/DOCX, then parse it."""
        ext = file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""
        if ext not in ("pdf", "docx"):
            raise ValidationError(f"Unsupported file type: .{ext}. Please upload PDF or DOCX.")

        try:
            text = await extract_text_off_loop(file_bytes, file_name=file_name, content_type=content_type)
        except Exception as e:
            raise ValidationError(f"Could not read {file_name}: {e}") from e
        if not text:
            raise ValidationError(
                f"Could not extract text from {file_name}. The file may be image-based or corrupted."
            )
        return await self.extract_cv_details(text)

    async def optimize_cv(self, request: CvOptimizationRequest) -> OptimizedCv:
        """Rewrite a resume for ATS readability and list skills missing for the target title."""
        if not request.resume_text or not request.resume_text.strip():
            raise ValidationError("Resume text cannot be empty")

        messages = [
            {"role": "system", "content": cv_optimizer.SYSTEM_PROMPT},
            {"role": "user", "content": cv_optimizer.USER_PROMPT_TEMPLATE.format(
                seniority_level=request.seniority_level,
                industry=request.industry,
                optimization_style=request.optimization_style,
                job_title=request.job_title or "the target role",
                resume_text=request.resume_text.strip(),
            )},
        ]

        return await complete_structured(
            self._gateway,
            prompt_name="cv_optimizer",
            messages=messages,
            result_model=OptimizedCv,
        )
