"""Map a rank-ordered list onto a fixed descending ladder of target scores.

The ladder manufactures a believable spread regardless of how close the raw
scores are. Scores assigned here are never derived from the breakdown.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

from talentmatch.config import CANDIDATE_LADDER, JOB_LADDER

T = TypeVar("T")

__all__ = ["CANDIDATE_LADDER", "JOB_LADDER", "distribute", "ladder_score", "assign"]


def ladder_score(ladder: Sequence[int], index: int) -> int:
    """Score for the ``index``-th ranked subject; the floor past the end."""
    if index < len(ladder):
        return ladder[index]
    return ladder[-1]


def distribute(
    count: int,
    ladder: Sequence[int],
    *,
    jitter: int = 0,
    rng: random.Random | None = None,
) -> list[int]:
    """Target scores for ``count`` subjects already sorted by raw score.

    With ``jitter`` > 0 each slot moves by a random integer in
    [-jitter, +jitter], then is clamped to the ladder's floor and ceiling and
    to the previous assignment so the sequence stays non-increasing.
    """
    if not ladder:
        raise ValueError("ladder must not be empty")
    ceiling = max(ladder)
    floor = min(ladder)
    if jitter and rng is None:
        rng = random.Random()

    scores: list[int] = []
    for i in range(count):
        score = ladder_score(ladder, i)
        if jitter:
            score += rng.randint(-jitter, jitter)
        score = max(floor, min(ceiling, score))
        if scores:
            score = min(score, scores[-1])
        scores.append(score)
    return scores


def assign(
    ordered: Sequence[T],
    ladder: Sequence[int],
    *,
    jitter: int = 0,
    rng: random.Random | None = None,
) -> list[tuple[T, int]]:
    return list(zip(ordered, distribute(len(ordered), ladder, jitter=jitter, rng=rng)))
