"""Data models for jobs, candidates and match results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Job:
    id: str
    title: str
    company: str
    location: str
    pay_rate: str = ""
    posted_date: str = ""
    type: str = "Full-Time"
    description: str = ""
    requirements: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    years_experience: int = 0
    is_new: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "payRate": self.pay_rate,
            "postedDate": self.posted_date,
            "type": self.type,
            "description": self.description,
            "requirements": list(self.requirements),
            "skills": list(self.skills),
            "yearsExperience": self.years_experience,
            "isNew": self.is_new,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Job:
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            company=data.get("company", ""),
            location=data.get("location", ""),
            pay_rate=data.get("payRate", ""),
            posted_date=data.get("postedDate", ""),
            type=data.get("type", "Full-Time"),
            description=data.get("description", ""),
            requirements=list(data.get("requirements", [])),
            skills=list(data.get("skills", [])),
            years_experience=int(data.get("yearsExperience", 0)),
            is_new=bool(data.get("isNew", False)),
        )


@dataclass
class Candidate:
    id: str
    name: str
    title: str
    location: str
    skills: list[str] = field(default_factory=list)
    experience_years: int = 0
    profile_url: str = "#"
    bio: str = ""
    current_employer: str | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "location": self.location,
            "skills": list(self.skills),
            "experienceYears": self.experience_years,
            "profileUrl": self.profile_url,
            "bio": self.bio,
        }
        # Optional contact fields are omitted rather than serialized as null.
        for key, value in (
            ("currentEmployer", self.current_employer),
            ("email", self.email),
            ("phone", self.phone),
            ("linkedIn", self.linkedin),
        ):
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Candidate:
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            title=data.get("title", ""),
            location=data.get("location", ""),
            skills=list(data.get("skills", [])),
            experience_years=int(data.get("experienceYears", 0)),
            profile_url=data.get("profileUrl", "#"),
            bio=data.get("bio", ""),
            current_employer=data.get("currentEmployer"),
            email=data.get("email"),
            phone=data.get("phone"),
            linkedin=data.get("linkedIn"),
        )


@dataclass
class ScoringBreakdown:
    """Per-dimension sub-scores, each an int in [0, 100]."""

    hard_skills: int
    experience: int
    soft_skills: int
    certifications: int
    location: int

    def to_dict(self) -> dict[str, int]:
        return {
            "hardSkills": self.hard_skills,
            "experience": self.experience,
            "softSkills": self.soft_skills,
            "certifications": self.certifications,
            "location": self.location,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScoringBreakdown:
        return cls(
            hard_skills=int(data["hardSkills"]),
            experience=int(data["experience"]),
            soft_skills=int(data["softSkills"]),
            certifications=int(data["certifications"]),
            location=int(data["location"]),
        )

    def values(self) -> list[int]:
        return [self.hard_skills, self.experience, self.soft_skills, self.certifications, self.location]


@dataclass
class SkillAnalysis:
    matched_skills: list[str]
    missing_skills: list[str]
    interview_questions: list[str]

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "matchedSkills": list(self.matched_skills),
            "missingSkills": list(self.missing_skills),
            "interviewQuestions": list(self.interview_questions),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SkillAnalysis:
        return cls(
            matched_skills=list(data.get("matchedSkills", [])),
            missing_skills=list(data.get("missingSkills", [])),
            interview_questions=list(data.get("interviewQuestions", [])),
        )


@dataclass
class MatchResult:
    candidate_id: str
    score: int
    reasoning: str
    breakdown: ScoringBreakdown
    strengths: list[str] = field(default_factory=list)
    analysis: SkillAnalysis | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "candidateId": self.candidate_id,
            "score": self.score,
            "reasoning": self.reasoning,
            "breakdown": self.breakdown.to_dict(),
            "strengths": list(self.strengths),
        }
        if self.analysis is not None:
            data["analysis"] = self.analysis.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatchResult:
        analysis = data.get("analysis")
        return cls(
            candidate_id=data["candidateId"],
            score=int(data["score"]),
            reasoning=data.get("reasoning", ""),
            breakdown=ScoringBreakdown.from_dict(data["breakdown"]),
            strengths=list(data.get("strengths", [])),
            analysis=SkillAnalysis.from_dict(analysis) if analysis else None,
        )


@dataclass
class JobMatchResult(MatchResult):
    job_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["jobId"] = self.job_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobMatchResult:
        base = MatchResult.from_dict(data)
        return cls(
            candidate_id=base.candidate_id,
            score=base.score,
            reasoning=base.reasoning,
            breakdown=base.breakdown,
            strengths=base.strengths,
            analysis=base.analysis,
            job_id=data["jobId"],
        )

    @classmethod
    def from_match(cls, result: MatchResult, job_id: str) -> JobMatchResult:
        return cls(
            candidate_id=result.candidate_id,
            score=result.score,
            reasoning=result.reasoning,
            breakdown=result.breakdown,
            strengths=list(result.strengths),
            analysis=result.analysis,
            job_id=job_id,
        )
