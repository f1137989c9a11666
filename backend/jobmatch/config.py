from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "JobMatch AI"
    debug: bool = True

    # CORS
    frontend_url: str = "http://localhost:5173"

    # LLM endpoint (OpenAI-compatible chat completions)
    openai_api_key: Optional[str] = None
    llm_api_base: Optional[str] = None
    llm_model: str = "gpt-4-turbo"
    llm_timeout_seconds: float = 60.0
    llm_num_retries: int = 2

    # Resume document fetch
    document_fetch_timeout_seconds: float = 30.0
    document_fetch_retries: int = 2
    document_fetch_backoff_seconds: float = 0.5

    # Auto-apply batch (1 = strictly sequential)
    auto_apply_concurrency: int = 1

    # Result cache (None = keep entries for the process lifetime)
    cache_ttl_seconds: Optional[float] = None

    # JSON file with {"jobs": [...], "candidates": [...]} loaded into the in-memory repositories
    seed_data_path: Optional[str] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Parse Failure Policy ────────────────────────────────────────────────────


class OnParseFailure(str, Enum):
    """What a structured-output feature does when the call or the parse fails."""

    RAISE = "raise"
    DEFAULT = "default"


# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "cv_extractor": {"temperature": 0.3, "max_tokens": 500, "on_failure": OnParseFailure.RAISE},
    "cv_optimizer": {"temperature": 0.7, "max_tokens": 800, "on_failure": OnParseFailure.RAISE},
    "job_matcher": {"temperature": 0.7, "max_tokens": 300, "on_failure": OnParseFailure.RAISE},
    "interview_questions": {"temperature": 0.7, "max_tokens": 800, "on_failure": OnParseFailure.RAISE},
    "hiring_score": {"temperature": 0.5, "max_tokens": 500, "on_failure": OnParseFailure.DEFAULT},
    "skill_gap": {"temperature": 0.5, "max_tokens": 500, "on_failure": OnParseFailure.DEFAULT},
    "cover_letter": {"temperature": 0.7, "max_tokens": 600},
    "resume_tailor": {"temperature": 0.7, "max_tokens": 600},
}

# Upper bound on recommended postings returned to a candidate
MAX_RECOMMENDATIONS = 5

# Inclusive bounds for interview question generation
MIN_INTERVIEW_QUESTIONS = 1
MAX_INTERVIEW_QUESTIONS = 15
