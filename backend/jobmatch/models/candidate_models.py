from datetime import datetime, timezone
from enum import Enum
from typing import Optional
import uuid

from pydantic import BaseModel, Field


class ApplicationStatus(str, Enum):
    """Lifecycle status of a persisted application."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"


class ApplicationOutcome(str, Enum):
    """Per-job outcome of an auto-apply batch."""

    APPLIED = "Applied"
    FAILED = "Failed"


# ── Catalog / Profile (read-only to the pipeline) ──────────────────────────


class CandidateProfile(BaseModel):
    """A job seeker whose profile drives generation prompts."""

    id: str
    full_name: str = ""
    skills: list[str] = []
    experience: str = ""
    job_preferences: str = ""
    resume_url: str = ""  # URI or blob key; empty means no resume uploaded


class JobPosting(BaseModel):
    """A single posting in the job catalog."""

    id: str
    title: str
    company: str
    location: Optional[str] = None
    description: str = ""
    skills_required: list[str] = []


# ── Applications ────────────────────────────────────────────────────────────


class ApplicationRecord(BaseModel):
    """One persisted application, created once per (candidate, job) attempt."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    candidate_id: str
    job_id: str
    resume_text: str = ""
    cover_letter: str = ""
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ApplicationResult(BaseModel):
    """Summary of one auto-apply batch item."""

    job_id: str
    job_title: str
    company: str
    cover_letter: str = ""
    resume: str = ""
    status: ApplicationOutcome
    application_id: Optional[str] = None
    error: Optional[str] = None


# ── Request Models ──────────────────────────────────────────────────────────


class AutoApplyRequest(BaseModel):
    """Jobs a candidate selected for auto-apply."""

    selected_jobs: list[JobPosting] = []
