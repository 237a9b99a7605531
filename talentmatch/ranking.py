"""
Bidirectional ranking.

Runs: raw score → stable sort → ladder targets → detailed expansion.
"""
from __future__ import annotations

import asyncio
import random
from typing import Sequence

from talentmatch.config import MatchSettings
from talentmatch.distribution import distribute
from talentmatch.log import get_logger
from talentmatch.matcher import expand
from talentmatch.models import Candidate, Job, JobMatchResult, MatchResult
from talentmatch.scorer import rank_by_raw, raw_score

log = get_logger(__name__)


async def _simulate_latency(latency_ms: float) -> None:
    if latency_ms > 0:
        await asyncio.sleep(latency_ms / 1000)


def rank_candidates(
    job: Job,
    candidates: Sequence[Candidate],
    *,
    settings: MatchSettings | None = None,
    rng: random.Random | None = None,
) -> list[MatchResult]:
    """Synchronous core of :func:`rank_candidates_with_ai`."""
    settings = settings or MatchSettings()
    rng = rng or random.Random(settings.seed)
    if not candidates:
        return []

    snapshot = list(candidates)
    scores = [raw_score(job, c, weights=settings.weights, rules=settings.location) for c in snapshot]
    ranked = rank_by_raw(snapshot, scores)
    targets = distribute(len(ranked), settings.candidate_ladder, jitter=settings.candidate_jitter, rng=rng)

    results = [expand(job, candidate, target, rng) for (candidate, _), target in zip(ranked, targets)]
    log.info(
        "Ranked %d candidates for %s (%s) → top %d, floor %d",
        len(results), job.id, job.title, results[0].score, results[-1].score,
    )
    return results


def rank_jobs(
    candidate: Candidate,
    jobs: Sequence[Job],
    *,
    settings: MatchSettings | None = None,
    rng: random.Random | None = None,
) -> list[JobMatchResult]:
    """Synchronous core of :func:`rank_jobs_for_candidate`."""
    settings = settings or MatchSettings()
    rng = rng or random.Random(settings.seed)
    if not jobs:
        return []

    snapshot = list(jobs)
    scores = [
        raw_score(j, candidate, weights=settings.weights, rules=settings.location, subject_id=j.id)
        for j in snapshot
    ]
    ranked = rank_by_raw(snapshot, scores)
    targets = distribute(len(ranked), settings.job_ladder)

    results = [
        JobMatchResult.from_match(expand(job, candidate, target, rng), job.id)
        for (job, _), target in zip(ranked, targets)
    ]
    log.info("Ranked %d jobs for %s → top %d", len(results), candidate.name, results[0].score)
    return results


async def rank_candidates_with_ai(
    job: Job,
    candidates: Sequence[Candidate],
    *,
    settings: MatchSettings | None = None,
    rng: random.Random | None = None,
    latency_ms: float = 0,
) -> list[MatchResult]:
    """Rank ``candidates`` for ``job``; scores are non-increasing in list order."""
    await _simulate_latency(latency_ms)
    return rank_candidates(job, candidates, settings=settings, rng=rng)


async def rank_jobs_for_candidate(
    candidate: Candidate,
    jobs: Sequence[Job],
    *,
    settings: MatchSettings | None = None,
    rng: random.Random | None = None,
    latency_ms: float = 0,
) -> list[JobMatchResult]:
    """Rank ``jobs`` for ``candidate``; each result carries its job id."""
    await _simulate_latency(latency_ms)
    return rank_jobs(candidate, jobs, settings=settings, rng=rng)
