"""
Tests for the raw ordering score.
"""

import pytest

from talentmatch.config import LocationRules, RawWeights
from talentmatch.models import Job
from talentmatch.scorer import (
    RawScore,
    city_segment,
    experience_score,
    location_score,
    matched_job_skills,
    rank_by_raw,
    raw_score,
    skill_score,
    skills_match,
)


class TestSkillMatching:
    """Loose containment matching between skill strings."""

    def test_candidate_skill_contains_job_skill(self):
        assert skills_match("Forklift", "forklift certified")

    def test_job_skill_contains_candidate_skill(self):
        assert skills_match("Forklift Operation", "forklift")

    def test_unrelated_skills(self):
        assert not skills_match("Safety", "Forklift")

    def test_matched_keeps_job_casing_and_order(self):
        matched = matched_job_skills(["Safety", "Forklift", "SAP"], ["forklift certified", "sap"])
        assert matched == ["Forklift", "SAP"]

    def test_no_candidate_skills(self):
        assert matched_job_skills(["Forklift"], []) == []


class TestComponentScores:
    """Individual raw score dimensions."""

    def test_skill_score_partial(self, forklift_job, make_candidate):
        assert skill_score(forklift_job, make_candidate(skills=["forklift certified"])) == 50

    def test_skill_score_neutral_without_job_skills(self, forklift_job, make_candidate):
        forklift_job.skills = []
        assert skill_score(forklift_job, make_candidate(skills=[])) == 50

    def test_experience_meets_requirement(self, forklift_job, make_candidate):
        assert experience_score(forklift_job, make_candidate(experience_years=2)) == 100

    def test_experience_below_requirement(self, forklift_job, make_candidate):
        forklift_job.years_experience = 4
        assert experience_score(forklift_job, make_candidate(experience_years=1)) == 25

    def test_experience_zero_requirement(self, forklift_job, make_candidate):
        forklift_job.years_experience = 0
        assert experience_score(forklift_job, make_candidate(experience_years=0)) == 100

    def test_city_segment(self):
        assert city_segment("  St. Paul , MN") == "st. paul"
        assert city_segment("Remote") == "remote"

    @pytest.mark.parametrize(
        "job_loc,cand_loc,expected",
        [
            ("Minneapolis, MN", "minneapolis, mn", 100),
            ("Minneapolis, MN", "Duluth, MN", 60),
            ("Minneapolis, MN", "Austin, TX", 20),
            ("", "", 20),
            (", MN", "Duluth, MN", 60),
        ],
    )
    def test_location_tiers(self, job_loc, cand_loc, expected):
        assert location_score(job_loc, cand_loc) == expected

    def test_location_region_markers_configurable(self):
        rules = LocationRules(region_markers=["TX"])
        assert location_score("Dallas, TX", "Austin, TX", rules) == 60
        assert location_score("Duluth, MN", "Eagan, MN", rules) == 20


class TestRawScore:
    """Weighted combination and ordering."""

    def test_weighted_sum(self, forklift_job, make_candidate):
        candidate = make_candidate(skills=["forklift"], experience_years=2)
        result = raw_score(forklift_job, candidate)
        assert result == RawScore(id=candidate.id, raw=pytest.approx(75.0))

    def test_custom_weights(self, forklift_job, make_candidate):
        candidate = make_candidate(skills=["forklift"], experience_years=2)
        result = raw_score(forklift_job, candidate, weights=RawWeights(skills=1.0, experience=0.0, location=0.0))
        assert result.raw == pytest.approx(50.0)

    def test_subject_id_override(self, forklift_job, make_candidate):
        assert raw_score(forklift_job, make_candidate(), subject_id=forklift_job.id).id == "job-forklift"

    def test_zero_experience_job_without_skills(self, make_candidate):
        job = Job(id="j", title="Helper", company="Acme", location="Eagan, MN")
        result = raw_score(job, make_candidate(skills=[], experience_years=0, location="Eagan, MN"))
        assert result.raw == pytest.approx(25 + 30 + 20)

    def test_rank_by_raw_descending(self):
        items = ["a", "b", "c"]
        scores = [RawScore("a", 10), RawScore("b", 30), RawScore("c", 20)]
        assert [item for item, _ in rank_by_raw(items, scores)] == ["b", "c", "a"]

    def test_rank_by_raw_ties_keep_input_order(self):
        items = ["x", "y", "z", "w"]
        scores = [RawScore("x", 5), RawScore("y", 9), RawScore("z", 5), RawScore("w", 9)]
        assert [item for item, _ in rank_by_raw(items, scores)] == ["y", "w", "x", "z"]

    def test_rank_by_raw_length_mismatch(self):
        with pytest.raises(ValueError):
            rank_by_raw(["a"], [])
