"""
Tests for detailed match expansion.
"""

import random

import pytest

from talentmatch.matcher import CLOSING_QUESTION, band_for, expand, location_fit, split_skills


class TestSkillPartition:
    def test_forklift_scenario(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(skills=["forklift certified"]), 84, random.Random(0))
        assert result.analysis.matched_skills == ["Forklift"]
        assert result.analysis.missing_skills == ["Safety"]

    @pytest.mark.parametrize(
        "skills",
        [[], ["forklift"], ["safety", "forklift operation"], ["sap", "inventory"]],
    )
    def test_partition_is_complete_and_disjoint(self, forklift_job, make_candidate, skills):
        matched, missing = split_skills(forklift_job, make_candidate(skills=skills))
        assert sorted(matched + missing) == sorted(forklift_job.skills)
        assert not set(matched) & set(missing)

    def test_no_job_skills(self, forklift_job, make_candidate):
        forklift_job.skills = []
        assert split_skills(forklift_job, make_candidate()) == ([], [])


class TestBreakdown:
    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("target", [96, 84, 72, 60, 48, 41])
    def test_all_dimensions_in_range(self, forklift_job, make_candidate, seed, target):
        b = expand(forklift_job, make_candidate(), target, random.Random(seed)).breakdown
        assert all(0 <= v <= 100 for v in b.values())
        assert 40 <= b.soft_skills <= 95
        assert 20 <= b.certifications <= 95

    @pytest.mark.parametrize("seed", range(10))
    def test_empty_job_skills_do_not_divide_by_zero(self, forklift_job, make_candidate, seed):
        forklift_job.skills = []
        b = expand(forklift_job, make_candidate(), 70, random.Random(seed)).breakdown
        assert 0 <= b.hard_skills <= 7

    @pytest.mark.parametrize("seed", range(10))
    def test_low_target_overrides_hard_skills(self, forklift_job, make_candidate, seed):
        candidate = make_candidate(skills=["forklift", "safety"])
        b = expand(forklift_job, candidate, 45, random.Random(seed)).breakdown
        assert 0 <= b.hard_skills <= 14

    @pytest.mark.parametrize("seed", range(10))
    def test_experience_capped_near_ninety_for_high_targets(self, forklift_job, make_candidate, seed):
        b = expand(forklift_job, make_candidate(), 96, random.Random(seed)).breakdown
        assert 83 <= b.experience <= 97

    @pytest.mark.parametrize("seed", range(10))
    def test_experience_follows_moderate_target(self, forklift_job, make_candidate, seed):
        b = expand(forklift_job, make_candidate(), 70, random.Random(seed)).breakdown
        assert 63 <= b.experience <= 77

    def test_location_local(self, forklift_job, make_candidate):
        assert location_fit(forklift_job, make_candidate(location="Minneapolis, MN")) == 100

    def test_location_elsewhere(self, forklift_job, make_candidate):
        assert location_fit(forklift_job, make_candidate(location="Duluth, MN")) == 60

    @pytest.mark.parametrize("job_location", ["", "   ", ", MN"])
    def test_blank_job_city_is_not_local(self, forklift_job, make_candidate, job_location):
        forklift_job.location = job_location
        assert location_fit(forklift_job, make_candidate(location="Minneapolis, MN")) == 60

    def test_same_seed_same_result(self, forklift_job, make_candidate):
        candidate = make_candidate()
        assert expand(forklift_job, candidate, 78, random.Random(5)) == expand(
            forklift_job, candidate, 78, random.Random(5)
        )

    def test_score_passes_through_unchanged(self, forklift_job, make_candidate):
        assert expand(forklift_job, make_candidate(), 53, random.Random(1)).score == 53


class TestBands:
    @pytest.mark.parametrize(
        "score,tags",
        [
            (96, ["Top Match", "Expertise"]),
            (90, ["Top Match", "Expertise"]),
            (89, ["Strong Fit"]),
            (80, ["Strong Fit"]),
            (72, ["Qualified"]),
            (55, ["Experienced"]),
            (54, ["Emerging Talent"]),
            (41, ["Emerging Talent"]),
        ],
    )
    def test_band_tags(self, score, tags):
        assert list(band_for(score).strengths) == tags

    def test_top_band_mentions_name(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(name="Noah King"), 96, random.Random(0))
        assert "Noah King" in result.reasoning
        assert "top-tier" in result.reasoning

    def test_low_band_reasoning(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(), 41, random.Random(0))
        assert result.reasoning.startswith("Limited overlap")

    def test_local_tag_appended(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(location="Minneapolis, MN"), 84, random.Random(0))
        assert result.strengths == ["Strong Fit", "Local"]

    def test_strengths_capped_at_three(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(location="Minneapolis, MN"), 96, random.Random(0))
        assert result.strengths == ["Top Match", "Expertise", "Local"]

    def test_no_local_tag_elsewhere(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(location="Austin, TX"), 60, random.Random(0))
        assert result.strengths == ["Experienced"]

    def test_no_local_tag_without_job_city(self, forklift_job, make_candidate):
        forklift_job.location = ""
        result = expand(forklift_job, make_candidate(location="Minneapolis, MN"), 84, random.Random(0))
        assert result.breakdown.location == 60
        assert result.strengths == ["Strong Fit"]


class TestInterviewQuestions:
    def test_references_top_matched_skill(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(skills=["forklift"]), 84, random.Random(0))
        questions = result.analysis.interview_questions
        assert "Forklift" in questions[0]
        assert any("Safety" in q for q in questions)

    def test_fallback_without_matches(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(skills=[]), 96, random.Random(0))
        assert "operations" in result.analysis.interview_questions[0]

    def test_topped_up_when_nothing_missing(self, forklift_job, make_candidate):
        result = expand(forklift_job, make_candidate(skills=["forklift", "safety"]), 72, random.Random(0))
        questions = result.analysis.interview_questions
        assert len(questions) == 3
        assert questions[-1] == CLOSING_QUESTION

    @pytest.mark.parametrize("target", [96, 84, 72, 60, 41])
    def test_at_least_three_questions(self, forklift_job, make_candidate, target):
        result = expand(forklift_job, make_candidate(), target, random.Random(0))
        assert len(result.analysis.interview_questions) >= 3
