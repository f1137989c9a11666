from fastapi import APIRouter, Depends

from jobmatch.models.ai_models import InterviewQuestion, InterviewRequest
from jobmatch.services.interview_service import InterviewService
from jobmatch.utils.dependencies import get_interview_service

router = APIRouter()


@router.post("/generate", response_model=list[InterviewQuestion])
async def generate_interview_questions(
    req: InterviewRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Generate 1-15 interview questions with sample answers for a role."""
    return await service.generate_interview_questions(req.job_title, req.skills, req.question_count)
