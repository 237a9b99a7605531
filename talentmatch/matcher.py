"""Expand a job/candidate pair and a target score into a full MatchResult."""
from __future__ import annotations

import random
from dataclasses import dataclass

from talentmatch.models import Candidate, Job, MatchResult, ScoringBreakdown, SkillAnalysis
from talentmatch.scorer import city_segment, matched_job_skills

MAX_STRENGTHS = 3
JITTER = 7
LOCAL_TAG = "Local"
CLOSING_QUESTION = "What motivates you to pursue a role at our organization specifically?"


@dataclass(frozen=True)
class Band:
    """Reasoning, tags and interview prompts for one score band."""

    min_score: int
    reasoning: str
    strengths: tuple[str, ...]
    skill_question: str
    skill_fallback: str
    follow_up: str


# Evaluated high to low; the first band whose min_score is met wins.
BANDS: tuple[Band, ...] = (
    Band(
        90,
        "Outstanding alignment! {name} is a top-tier fit with high skill overlap and ideal experience.",
        ("Top Match", "Expertise"),
        "How have you optimized {skill} in your previous roles?",
        "operations",
        "Describe a time you mentored others in a high-pressure environment.",
    ),
    Band(
        80,
        "Highly qualified candidate with strong core competency and solid industry background.",
        ("Strong Fit",),
        "Can you walk us through your experience with {skill}?",
        "standard procedures",
        "Which part of your current role would you most like to grow into a bigger responsibility?",
    ),
    Band(
        70,
        "Competitive candidate with significant relevant skills and experience. Worth reviewing.",
        ("Qualified",),
        "Tell us about a project where {skill} made the difference.",
        "day-to-day operations",
        "What skill are you actively working to improve right now?",
    ),
    Band(
        55,
        "Average match. Demonstrates basic requirements with room for specialized growth.",
        ("Experienced",),
        "How comfortable are you working with {skill} without supervision?",
        "core workplace procedures",
        "Where do you see yourself growing over the next two years?",
    ),
    Band(
        0,
        "Limited overlap. Candidate background does not align closely with this role's specific demands.",
        ("Emerging Talent",),
        "What experience do you have that relates to {skill}?",
        "this type of work",
        "What draws you toward this line of work, and how would you ramp up?",
    ),
)


def band_for(score: int) -> Band:
    for band in BANDS:
        if score >= band.min_score:
            return band
    return BANDS[-1]


def _clamp(value: float, low: int, high: int) -> int:
    return int(round(min(high, max(low, value))))


def _jitter(rng: random.Random) -> int:
    return rng.randint(-JITTER, JITTER)


def split_skills(job: Job, candidate: Candidate) -> tuple[list[str], list[str]]:
    """Partition job.skills into (matched, missing), preserving order."""
    matched = matched_job_skills(job.skills, candidate.skills)
    matched_set = set(matched)
    missing = [s for s in job.skills if s not in matched_set]
    return matched, missing


def location_fit(job: Job, candidate: Candidate) -> int:
    """100 when the job city sits inside the candidate city. A blank job city is never local."""
    job_city = city_segment(job.location)
    return 100 if job_city and job_city in city_segment(candidate.location) else 60


def build_breakdown(
    job: Job,
    target_score: int,
    matched_count: int,
    location: int,
    rng: random.Random,
) -> ScoringBreakdown:
    hard_skills = _clamp(matched_count / max(len(job.skills), 1) * 100 + _jitter(rng), 0, 100)
    experience = _clamp((90 if target_score > 80 else target_score) + _jitter(rng), 0, 100)
    if target_score < 50:
        # Keep the breakdown visually consistent with a poor overall fit.
        hard_skills = 0 if rng.random() > 0.5 else rng.randint(0, 14)
    soft_skills = _clamp(target_score + _jitter(rng), 40, 95)
    certifications = _clamp(target_score - 10 + _jitter(rng), 20, 95)
    return ScoringBreakdown(
        hard_skills=hard_skills,
        experience=experience,
        soft_skills=soft_skills,
        certifications=certifications,
        location=location,
    )


def interview_questions(band: Band, matched: list[str], missing: list[str]) -> list[str]:
    questions = [
        band.skill_question.format(skill=matched[0] if matched else band.skill_fallback),
        band.follow_up,
    ]
    if missing:
        questions.append(f"What is your approach to learning new tools like {missing[0]}?")
    while len(questions) < 3:
        questions.append(CLOSING_QUESTION)
    return questions


def expand(
    job: Job,
    candidate: Candidate,
    target_score: int,
    rng: random.Random | None = None,
) -> MatchResult:
    """Derive breakdown, reasoning, strengths and skill analysis for a pair.

    ``target_score`` is assigned upstream by the ranking ladder and is
    returned unchanged as the overall score; the breakdown is derived from it
    and from the skill overlap, not the other way round.
    """
    rng = rng or random.Random()
    matched, missing = split_skills(job, candidate)
    location = location_fit(job, candidate)
    breakdown = build_breakdown(job, target_score, len(matched), location, rng)

    band = band_for(target_score)
    strengths = list(band.strengths)
    if location == 100:
        strengths.append(LOCAL_TAG)

    return MatchResult(
        candidate_id=candidate.id,
        score=target_score,
        reasoning=band.reasoning.format(name=candidate.name),
        breakdown=breakdown,
        strengths=strengths[:MAX_STRENGTHS],
        analysis=SkillAnalysis(
            matched_skills=matched,
            missing_skills=missing,
            interview_questions=interview_questions(band, matched, missing),
        ),
    )
