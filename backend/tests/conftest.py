"""
Shared fixtures: a small catalog, a candidate and in-memory collaborators.
"""

from __future__ import annotations

import pytest

from jobmatch.models.candidate_models import CandidateProfile, JobPosting
from jobmatch.services.repositories import InMemoryApplicationRepository, InMemoryJobRepository
from jobmatch.services.result_cache import ResultCache

from tests.fakes import FakeExtractor


@pytest.fixture
def candidate() -> CandidateProfile:
    return CandidateProfile(
        id="cand-1",
        full_name="Jane Doe",
        skills=["Python", "FastAPI", "SQL"],
        experience="5 years building APIs",
        job_preferences="Remote backend roles",
        resume_url="https://files.example.com/resumes/jane.pdf",
    )


@pytest.fixture
def catalog() -> list[JobPosting]:
    return [
        JobPosting(id="job-1", title="Backend Engineer", company="Acme", description="Build APIs",
                   skills_required=["Python", "FastAPI"]),
        JobPosting(id="job-2", title="Data Engineer", company="Globex", description="Pipelines",
                   skills_required=["Python", "Spark"]),
        JobPosting(id="job-3", title="Frontend Engineer", company="Initech", description="UI work",
                   skills_required=["React"]),
        JobPosting(id="job-4", title="Backend Engineer", company="Umbrella", description="Payments APIs",
                   skills_required=["Go"]),
        JobPosting(id="job-5", title="ML Engineer", company="Hooli", description="Models",
                   skills_required=["PyTorch"]),
        JobPosting(id="job-6", title="DevOps Engineer", company="Vandelay", description="Infra",
                   skills_required=["Kubernetes"]),
        JobPosting(id="job-7", title="QA Engineer", company="Stark", description="Testing",
                   skills_required=["pytest"]),
    ]


@pytest.fixture
def job_repository(catalog) -> InMemoryJobRepository:
    return InMemoryJobRepository(catalog)


@pytest.fixture
def application_repository() -> InMemoryApplicationRepository:
    return InMemoryApplicationRepository()


@pytest.fixture
def cache() -> ResultCache:
    return ResultCache()


@pytest.fixture
def extractor() -> FakeExtractor:
    return FakeExtractor()
