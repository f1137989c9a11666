import json

import pytest

from jobmatch.services.repositories import InMemoryJobRepository, SeedData, load_seed_data
from jobmatch.utils import dependencies


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({
        "jobs": [{"id": "42", "title": "Data Engineer", "company": "Globex", "skills_required": ["Spark"]}],
        "candidates": [{"id": "cand-7", "full_name": "Sam Lee", "skills": ["SQL"]}],
    }))
    return path


@pytest.fixture
def fresh_providers():
    providers = (dependencies.get_seed_data, dependencies.get_job_repository, dependencies.get_candidate_repository)
    for provider in providers:
        provider.cache_clear()
    yield
    for provider in providers:
        provider.cache_clear()


def test_no_path_means_empty_repositories():
    assert load_seed_data(None) == SeedData()


def test_seed_file_is_loaded(seed_file):
    seed = load_seed_data(seed_file)

    assert [j.id for j in seed.jobs] == ["42"]
    assert seed.candidates[0].full_name == "Sam Lee"


def test_missing_seed_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_data(tmp_path / "absent.json")


async def test_providers_serve_seeded_data(monkeypatch, seed_file, fresh_providers):
    monkeypatch.setattr(dependencies.settings, "seed_data_path", str(seed_file))

    jobs = dependencies.get_job_repository()
    candidates = dependencies.get_candidate_repository()

    assert isinstance(jobs, InMemoryJobRepository)
    assert (await jobs.get_job("42")).company == "Globex"
    assert (await candidates.find_candidate_by_id("cand-7")).skills == ["SQL"]
