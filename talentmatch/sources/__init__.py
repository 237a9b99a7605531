from .base import CandidateSourceBase, JobSourceBase
from .mock import MockCandidateSource, MockJobSource, parse_resume_stub

__all__ = [
    "JobSourceBase", "CandidateSourceBase",
    "MockJobSource", "MockCandidateSource", "parse_resume_stub",
]
