from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from jobmatch.models.ai_models import CvOptimizationRequest, CvTextInput, OptimizedCv, ParsedCvData
from jobmatch.services.cv_service import CvService
from jobmatch.utils.dependencies import get_cv_service

router = APIRouter()

MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MB


@router.post("/extract", response_model=ParsedCvData)
async def extract_cv(req: CvTextInput, service: CvService = Depends(get_cv_service)):
    """Parse raw resume text into structured fields."""
    return await service.extract_cv_details(req.text)


@router.post("/upload", response_model=ParsedCvData)
async def upload_cv(
    file: UploadFile = File(...),
    service: CvService = Depends(get_cv_service),
):
    """Upload a resume file (PDF/DOCX), extract its text and parse it."""
    if not file.filename:
        raise HTTPException(status_code=400, detail="No file provided")

    file_bytes = await file.read()
    if len(file_bytes) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail="File too large (max 10 MB)")

    return await service.extract_cv_details_from_document(
        file_bytes=file_bytes,
        file_name=file.filename,
        content_type=file.content_type,
    )


@router.post("/optimize", response_model=OptimizedCv)
async def optimize_cv(req: CvOptimizationRequest, service: CvService = Depends(get_cv_service)):
    """ATS-optimize a resume and list skills missing for the target title."""
    return await service.optimize_cv(req)
