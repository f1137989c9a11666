import json

import pytest
from fastapi.testclient import TestClient

from jobmatch.main import app
from jobmatch.services.repositories import (
    InMemoryApplicationRepository,
    InMemoryCandidateRepository,
    InMemoryJobRepository,
)
from jobmatch.services.result_cache import ResultCache
from jobmatch.utils import dependencies

from tests.fakes import FakeExtractor, FakeGateway


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(gateway, candidate, catalog):
    overrides = {
        dependencies.get_gateway: lambda: gateway,
        dependencies.get_extractor: lambda: FakeExtractor(),
        dependencies.get_result_cache: lambda: ResultCache(),
        dependencies.get_job_repository: lambda: InMemoryJobRepository(catalog),
        dependencies.get_candidate_repository: lambda: InMemoryCandidateRepository([candidate]),
        dependencies.get_application_repository: lambda: InMemoryApplicationRepository(),
    }
    app.dependency_overrides.update(overrides)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_recommendations(client, gateway):
    gateway.responses = [json.dumps({"jobs": [{"id": "job-3", "title": "Frontend Engineer"}]})]

    resp = client.get("/api/candidates/cand-1/recommendations")

    assert resp.status_code == 200
    assert [j["id"] for j in resp.json()] == ["job-3"]


def test_unknown_candidate_is_404(client):
    assert client.get("/api/candidates/nobody/recommendations").status_code == 404


def test_auto_apply_with_no_jobs_is_400(client, gateway):
    resp = client.post("/api/candidates/cand-1/auto-apply", json={"selected_jobs": []})

    assert resp.status_code == 400
    assert "No jobs" in resp.json()["detail"]
    assert gateway.calls == 0


def test_auto_apply_reports_each_job(client, gateway, catalog):
    gateway.default = "generated"
    payload = {"selected_jobs": [catalog[0].model_dump(), catalog[1].model_dump()]}

    resp = client.post("/api/candidates/cand-1/auto-apply", json=payload)

    assert resp.status_code == 200
    assert [r["status"] for r in resp.json()] == ["Applied", "Applied"]


def test_interview_count_out_of_range_is_400(client):
    resp = client.post(
        "/api/interview-prep/generate",
        json={"jobTitle": "Dev", "skills": ["Python"], "questionCount": 16},
    )
    assert resp.status_code == 400


def test_cv_extract_parse_failure_is_502(client, gateway):
    gateway.responses = ["not json at all"]
    resp = client.post("/api/cv/extract", json={"text": "Jane Doe, Python"})
    assert resp.status_code == 502


def test_cv_extract_empty_is_400(client):
    assert client.post("/api/cv/extract", json={"text": ""}).status_code == 400


def test_hiring_score_never_fails(client, gateway):
    gateway.responses = ["garbage"]

    resp = client.get("/api/candidates/cand-1/jobs/job-1/hiring-score")

    assert resp.status_code == 200
    assert resp.json()["score"] == 0
    assert resp.json()["reason"] == "Error calculating hiring score"


def test_unknown_job_is_404(client):
    assert client.get("/api/candidates/cand-1/jobs/nope/skill-gap").status_code == 404
