"""
Tests for model serialization.
"""

import json
import random

from talentmatch.matcher import expand
from talentmatch.models import Candidate, Job, JobMatchResult, MatchResult


class TestSerialization:
    def test_job_uses_storage_keys(self, forklift_job):
        data = forklift_job.to_dict()
        assert data["payRate"] == "$22.50 / hr"
        assert data["yearsExperience"] == 2
        assert data["isNew"] is False
        assert Job.from_dict(json.loads(json.dumps(data))) == forklift_job

    def test_candidate_optional_fields(self, make_candidate):
        candidate = make_candidate()
        data = candidate.to_dict()
        assert "email" not in data
        candidate.email = "ava@example.com"
        candidate.linkedin = "linkedin.com/in/ava"
        data = candidate.to_dict()
        assert data["linkedIn"] == "linkedin.com/in/ava"
        assert Candidate.from_dict(json.loads(json.dumps(data))) == candidate

    def test_match_result_round_trip(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(), 84, random.Random(0))
        data = json.loads(json.dumps(result.to_dict()))
        assert data["breakdown"]["hardSkills"] == result.breakdown.hard_skills
        assert data["analysis"]["missingSkills"] == ["Safety"]
        assert MatchResult.from_dict(data) == result

    def test_job_match_result_round_trip(self, forklift_job, make_candidate):
        base = expand(forklift_job, make_candidate(), 95, random.Random(0))
        result = JobMatchResult.from_match(base, forklift_job.id)
        data = json.loads(json.dumps(result.to_dict()))
        assert data["jobId"] == "job-forklift"
        assert JobMatchResult.from_dict(data) == result
