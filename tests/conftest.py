"""
Pytest configuration and shared fixtures.
"""

import os

# Keep test runs from writing dated log files into the checkout.
os.environ.setdefault("TALENTMATCH_FILE_LOG", "0")

import random
from typing import Callable, List

import pytest

from talentmatch.config import MatchSettings
from talentmatch.models import Candidate, Job


class SleepRecorder:
    """Stand-in for asyncio.sleep that records the requested waits."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("TALENTMATCH_MAX_RETRIES", "TALENTMATCH_BASE_DELAY_MS", "TALENTMATCH_SEED"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def quiet_settings() -> MatchSettings:
    """Default settings with the simulated network never failing."""
    settings = MatchSettings()
    settings.feed.network_failure_rate = 0.0
    return settings


@pytest.fixture
def forklift_job() -> Job:
    return Job(
        id="job-forklift",
        title="Forklift Operator",
        company="NorthStar Distribution",
        location="Minneapolis, MN",
        pay_rate="$22.50 / hr",
        posted_date="Today",
        type="Full-Time",
        description="Forklift work in a cold-storage warehouse.",
        requirements=["Forklift certification"],
        skills=["Forklift", "Safety"],
        years_experience=2,
    )


@pytest.fixture
def make_candidate() -> Callable[..., Candidate]:
    def _make(cid: str = "c1", skills=None, experience_years: int = 3,
              location: str = "Minneapolis, MN", name: str = "Ava Baker") -> Candidate:
        return Candidate(
            id=cid,
            name=name,
            title="Warehouse Associate",
            location=location,
            skills=list(skills) if skills is not None else ["Forklift"],
            experience_years=experience_years,
            profile_url="#",
            bio="",
        )

    return _make


@pytest.fixture
def candidate_pool(make_candidate) -> List[Candidate]:
    """Twelve candidates with clearly separated raw scores, deliberately shuffled."""
    specs = [
        ("c08", ["Forklift"], 0, "Austin, TX"),
        ("c01", ["Forklift", "Safety"], 5, "Minneapolis, MN"),
        ("c11", [], 0, "Duluth, MN"),
        ("c03", ["Forklift"], 5, "Minneapolis, MN"),
        ("c12", [], 0, "Austin, TX"),
        ("c05", [], 5, "Duluth, MN"),
        ("c02", ["Forklift", "Safety"], 1, "Minneapolis, MN"),
        ("c10", [], 1, "Austin, TX"),
        ("c04", ["Safety"], 1, "Duluth, MN"),
        ("c07", [], 5, "Austin, TX"),
        ("c06", ["Forklift"], 0, "Duluth, MN"),
        ("c09", [], 0, "Minneapolis, MN"),
    ]
    return [make_candidate(cid, skills, exp, loc) for cid, skills, exp, loc in specs]
