"""
Repository collaborators — catalog, candidate profiles and application records.

Persistence is owned elsewhere; the pipeline only depends on these call
contracts. The in-memory implementations are session-scoped (lost on restart)
and back the HTTP surface and tests. They start empty unless seeded from
a JSON file (settings.seed_data_path), so candidate routes 404 until then.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Protocol

from pydantic import BaseModel

from jobmatch.models.candidate_models import ApplicationRecord, CandidateProfile, JobPosting

logger = logging.getLogger(__name__)


# ── Contracts ────────────────────────────────────────────────────────────────


class JobRepository(Protocol):
    async def get_all_jobs(self) -> list[JobPosting]: ...


class CandidateRepository(Protocol):
    async def find_candidate_by_id(self, candidate_id: str) -> CandidateProfile | None: ...


class ApplicationRepository(Protocol):
    async def save_application(self, record: ApplicationRecord) -> None: ...

    async def list_applications(self, candidate_id: str) -> list[ApplicationRecord]: ...


# ── In-Memory Implementations ────────────────────────────────────────────────


class InMemoryJobRepository:
    def __init__(self, jobs: Iterable[JobPosting] = ()):
        self._jobs: dict[str, JobPosting] = {job.id: job for job in jobs}

    async def get_all_jobs(self) -> list[JobPosting]:
        return list(self._jobs.values())

    async def get_job(self, job_id: str) -> JobPosting | None:
        return self._jobs.get(job_id)

    def add(self, job: JobPosting) -> None:
        self._jobs[job.id] = job


class InMemoryCandidateRepository:
    def __init__(self, candidates: Iterable[CandidateProfile] = ()):
        self._candidates: dict[str, CandidateProfile] = {c.id: c for c in candidates}

    async def find_candidate_by_id(self, candidate_id: str) -> CandidateProfile | None:
        return self._candidates.get(candidate_id)

    def add(self, candidate: CandidateProfile) -> None:
        self._candidates[candidate.id] = candidate


class InMemoryApplicationRepository:
    def __init__(self):
        self._records: list[ApplicationRecord] = []
        self._lock = threading.Lock()

    async def save_application(self, record: ApplicationRecord) -> None:
        with self._lock:
            self._records.append(record)
        logger.info(f"Saved application {record.id} (candidate={record.candidate_id} job={record.job_id})")

    async def list_applications(self, candidate_id: str) -> list[ApplicationRecord]:
        with self._lock:
            return [r for r in self._records if r.candidate_id == candidate_id]


# ── Seed Data ────────────────────────────────────────────────────────────────


class SeedData(BaseModel):
    jobs: list[JobPosting] = []
    candidates: list[CandidateProfile] = []


def load_seed_data(path: str | Path | None) -> SeedData:
    """Read catalog and candidates from a JSON file. No path means empty repositories."""
    if not path:
        logger.warning("No seed data configured; job and candidate repositories start empty.")
        return SeedData()
    seed = SeedData.model_validate_json(Path(path).read_text(encoding="utf-8"))
    logger.info(f"Loaded {len(seed.jobs)} jobs and {len(seed.candidates)} candidates from {path}")
    return seed
