"""In-memory job cache shared by the feed and the ranking callers."""
from __future__ import annotations

from typing import Iterable

from talentmatch.log import get_logger
from talentmatch.models import Job

log = get_logger(__name__)


class JobStore:
    """Owns the cached job list.

    Readers get copies, so a ranking call never sees the list change under
    it. Every method runs to completion without suspending, so callers on a
    single event loop need no lock around writes.
    """

    def __init__(self, jobs: Iterable[Job] = ()) -> None:
        self._jobs: list[Job] = list(jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def snapshot(self) -> list[Job]:
        return list(self._jobs)

    def get(self, job_id: str) -> Job | None:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    def replace(self, jobs: Iterable[Job]) -> list[Job]:
        self._jobs = list(jobs)
        log.debug("Job cache replaced → %d jobs", len(self._jobs))
        return self.snapshot()

    def prepend(self, jobs: Iterable[Job]) -> list[Job]:
        new = list(jobs)
        self._jobs = new + self._jobs
        log.debug("Prepended %d jobs → %d cached", len(new), len(self._jobs))
        return self.snapshot()

    def extend(self, jobs: Iterable[Job]) -> list[Job]:
        new = list(jobs)
        self._jobs = self._jobs + new
        log.debug("Appended %d jobs → %d cached", len(new), len(self._jobs))
        return self.snapshot()
