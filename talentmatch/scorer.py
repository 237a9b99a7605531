"""Cheap heuristic raw score used only to order candidates and jobs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from talentmatch.config import LocationRules, RawWeights
from talentmatch.log import get_logger
from talentmatch.models import Candidate, Job

log = get_logger(__name__)

T = TypeVar("T")

# Neutral skill score for jobs that list no skills.
NO_SKILLS_SCORE = 50.0


@dataclass
class RawScore:
    id: str
    raw: float


def _normalize(s: str) -> str:
    return (s or "").lower().strip()


def city_segment(location: str) -> str:
    """Text before the first comma, lower-cased."""
    return _normalize((location or "").split(",")[0])


def skills_match(job_skill: str, candidate_skill: str) -> bool:
    """Loose containment: either lower-cased string contains the other."""
    j = _normalize(job_skill)
    c = _normalize(candidate_skill)
    return j in c or c in j


def matched_job_skills(job_skills: Sequence[str], candidate_skills: Sequence[str]) -> list[str]:
    """Job skills (original casing and order) matched by any candidate skill."""
    return [s for s in job_skills if any(skills_match(s, c) for c in candidate_skills)]


def skill_score(job: Job, candidate: Candidate) -> float:
    if not job.skills:
        return NO_SKILLS_SCORE
    matched = matched_job_skills(job.skills, candidate.skills)
    return len(matched) / len(job.skills) * 100


def experience_score(job: Job, candidate: Candidate) -> float:
    if candidate.experience_years >= job.years_experience:
        return 100.0
    return max(0.0, candidate.experience_years / max(job.years_experience, 1) * 100)


def location_score(job_location: str, candidate_location: str, rules: LocationRules | None = None) -> float:
    rules = rules or LocationRules()
    job_city = city_segment(job_location)
    if job_city and job_city == city_segment(candidate_location):
        return rules.exact_score
    for marker in rules.region_markers:
        if marker and marker in job_location and marker in candidate_location:
            return rules.region_score
    return rules.other_score


def raw_score(
    job: Job,
    candidate: Candidate,
    *,
    weights: RawWeights | None = None,
    rules: LocationRules | None = None,
    subject_id: str | None = None,
) -> RawScore:
    """Score one job/candidate pair.

    ``subject_id`` names whichever side is being ranked; it defaults to the
    candidate's id.
    """
    weights = weights or RawWeights()
    raw = (
        skill_score(job, candidate) * weights.skills
        + experience_score(job, candidate) * weights.experience
        + location_score(job.location, candidate.location, rules) * weights.location
    )
    return RawScore(id=subject_id if subject_id is not None else candidate.id, raw=raw)


def rank_by_raw(items: Sequence[T], scores: Sequence[RawScore]) -> list[tuple[T, RawScore]]:
    """Pair items with their scores and sort descending; ties keep input order."""
    if len(items) != len(scores):
        raise ValueError(f"got {len(items)} items but {len(scores)} scores")
    # sorted() is stable, so equal raw scores stay in input order.
    ranked = sorted(zip(items, scores), key=lambda pair: -pair[1].raw)
    if ranked:
        log.debug(
            "Ranked %d subjects (raw %.1f → %.1f)", len(ranked), ranked[0][1].raw, ranked[-1][1].raw,
        )
    return ranked
