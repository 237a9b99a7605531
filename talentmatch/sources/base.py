from __future__ import annotations

from abc import ABC, abstractmethod

from talentmatch.models import Candidate, Job


class JobSourceBase(ABC):
    @abstractmethod
    def generate(self, prefix: str, count: int, *, is_new: bool = False) -> list[Job]:
        pass


class CandidateSourceBase(ABC):
    @abstractmethod
    def candidates_for(self, job: Job | None, job_id: str) -> list[Candidate]:
        pass
