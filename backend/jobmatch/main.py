import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobmatch.config import settings
from jobmatch.errors import FetchError, GatewayError, ParseError, ValidationError
from jobmatch.api import (
    candidate_routes,
    cv_routes,
    interview_routes,
)

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Generative-AI candidate services: auto-apply, recommendations, CV parsing and interview prep",
)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Error Mapping ───────────────────────────────────────────────────────────


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    logger.error(f"Fetch failed on {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": f"Document fetch failed: {exc}"})


@app.exception_handler(GatewayError)
async def gateway_error_handler(request: Request, exc: GatewayError):
    logger.error(f"Model call failed on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=502,
        content={"detail": "Model call failed", "upstream_status": exc.status_code},
    )


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    logger.error(f"Unparseable model output on {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": "Model returned an unreadable response"})


# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(candidate_routes.router, prefix="/api/candidates", tags=["Candidates"])
app.include_router(cv_routes.router, prefix="/api/cv", tags=["CV"])
app.include_router(interview_routes.router, prefix="/api/interview-prep", tags=["Interview Prep"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
