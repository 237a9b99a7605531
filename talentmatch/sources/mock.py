"""Mock job and candidate sources standing in for a live job board and ATS."""
from __future__ import annotations

import random
from pathlib import Path

from talentmatch.log import get_logger
from talentmatch.models import Candidate, Job
from talentmatch.sources.base import CandidateSourceBase, JobSourceBase

log = get_logger(__name__)

BASE_TITLES: list[str] = [
    "General Labor", "Warehouse Associate", "Forklift Operator", "Order Picker",
    "Assembly Line Worker", "Machine Operator", "CNC Machinist", "Production Lead",
    "Shipping & Receiving Clerk", "Quality Inspector", "Medical Assembler",
    "Administrative Assistant", "Customer Service Rep", "Maintenance Technician",
    "Human Resources Coordinator", "Recruiter", "Account Manager", "Data Entry Specialist",
]

MN_LOCATIONS: list[str] = [
    "Minneapolis, MN", "St. Paul, MN", "Bloomington, MN", "Brooklyn Park, MN",
    "Plymouth, MN", "Maple Grove, MN", "Woodbury, MN", "Eagan, MN",
    "Eden Prairie, MN", "Coon Rapids, MN", "Burnsville, MN", "Blaine, MN",
    "Rochester, MN", "Duluth, MN", "St. Cloud, MN", "Mankato, MN",
]

COMPANIES: list[str] = [
    "Global Logistics Corp", "Apex Manufacturing", "MedTech Solutions",
    "NorthStar Distribution", "Valley Food Processing", "Twin City Die Castings",
    "Midwest Plastics Group", "Logistics Pro International", "HealthFirst Medical",
    "Summit Support Services", "Target Distribution Center", "Modern Manufacturing",
    "Industrial Dynamics", "Greenway Solutions", "Precision Parts Inc.",
]

GENERIC_SKILLS: list[str] = [
    "Safety Standards", "Teamwork", "Professional Reliability", "Attention to Detail",
    "Workflow Communication", "Time Management",
]

CANDIDATE_SKILL_POOL: list[str] = [
    "Inventory Control", "SAP", "RF Scanning", "Safety Protocol", "Team Leadership",
    "Customer Support", "Data Entry", "Microsoft Office", "Project Management",
    "Forklift Certified", "Heavy Lifting", "OSHA Compliance", "Shipping/Receiving",
    "Lean Six Sigma", "Account Management", "Quality Control",
]

EXTRA_CANDIDATE_TITLES: list[str] = [
    "Retail Associate", "Barista", "Graphic Designer", "Project Coordinator",
]

FIRST_NAMES: list[str] = [
    "Michael", "Sarah", "David", "Jessica", "Robert", "Emily", "James", "Ashley",
    "William", "Jennifer", "Christopher", "Linda", "Matthew", "Amanda", "Joshua",
    "Elizabeth", "Andrew", "Melissa", "Ryan", "Karen", "Marcus", "Elena", "Julian",
    "Samira", "Xavier", "Yasmine", "Liam", "Olivia", "Noah", "Ava", "Lucas", "Mia",
]

LAST_NAMES: list[str] = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Walker", "Hall",
    "Young", "King", "Wright", "Baker", "Nelson", "Campbell", "Mitchell", "Carter",
]

# Tier name → how many candidates of that tier a job gets.
CANDIDATE_TIERS: tuple[tuple[str, int], ...] = (("top", 2), ("mid", 3), ("part", 3), ("rand", 6))


def static_jobs() -> list[Job]:
    """Two hand-written listings that always head the initial dataset."""
    return [
        Job(
            id="j101",
            title="General Labor / Warehouse",
            company="Logistics Pro International",
            location="Rogers, MN",
            pay_rate="$18.00 - $20.00 / hr",
            posted_date="2 days ago",
            type="Full-Time",
            description=(
                "Immediate openings for general labor in a high-volume warehouse environment. "
                "Primary duties involve material handling, inventory organization, and shipping preparation."
            ),
            requirements=[
                "Ability to lift standard industrial loads",
                "Required safety gear compliance",
                "Reliability and punctuality",
                "Capacity for full-shift standing work",
            ],
            skills=["Material Handling", "Warehouse Operations", "Safety Compliance"],
            years_experience=0,
        ),
        Job(
            id="j102",
            title="Forklift Operator",
            company="NorthStar Distribution",
            location="Fridley, MN",
            pay_rate="$22.50 / hr",
            posted_date="3 days ago",
            type="Temp-to-Hire",
            description=(
                "Skilled forklift operation required for specialized storage facility. "
                "Managing delicate inventory and maintaining precise placement records."
            ),
            requirements=[
                "Recent certified forklift experience",
                "Inventory tracking familiarity",
                "Valid identification and documentation",
            ],
            skills=["Forklift Operation", "Inventory Management", "RF Scanning"],
            years_experience=1,
        ),
    ]


class MockJobSource(JobSourceBase):
    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def _employment_type(self) -> str:
        if self.rng.random() > 0.8:
            return "Direct Hire"
        return "Temp-to-Hire" if self.rng.random() > 0.5 else "Full-Time"

    def random_job(self, job_id: str, *, is_new: bool = False) -> Job:
        rng = self.rng
        title = rng.choice(BASE_TITLES)
        location = rng.choice(MN_LOCATIONS)
        company = rng.choice(COMPANIES)
        pay_min = 17 + rng.randrange(18)
        pay_max = pay_min + 2 + rng.randrange(6)

        if is_new:
            posted = "Just Now"
        else:
            days_ago = rng.randrange(14)
            posted = "Today" if days_ago == 0 else f"{days_ago} days ago"

        pool = [title.split(" ")[0], *GENERIC_SKILLS]
        skills = rng.sample(pool, 3 + rng.randrange(3))

        return Job(
            id=job_id,
            title=title,
            company=company,
            location=location,
            pay_rate=f"${pay_min}.00 - ${pay_max}.00 / hr",
            posted_date=posted,
            type=self._employment_type(),
            description=(
                f"Professional opportunity for a {title} in the {location} area. "
                f"Joining the team at {company}, you will be responsible for standard operational "
                "procedures, maintaining safety records, and collaborating with cross-functional departments."
            ),
            requirements=[
                "High School Diploma or equivalent",
                "Reliable commute/transportation",
                "Commitment to workplace excellence",
                f"Relevant {title} experience preferred",
            ],
            skills=skills,
            years_experience=rng.randrange(8),
            is_new=is_new,
        )

    def generate(self, prefix: str, count: int, *, is_new: bool = False) -> list[Job]:
        log.debug("MockJobSource generating %d jobs (%s)", count, prefix)
        return [self.random_job(f"{prefix}-{i}", is_new=is_new) for i in range(count)]

    def initial_jobs(self, generated: int = 45) -> list[Job]:
        return static_jobs() + self.generate("init-gen", generated)


class MockCandidateSource(CandidateSourceBase):
    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def random_candidate(self, candidate_id: str, tier: str = "rand", job: Job | None = None) -> Candidate:
        rng = self.rng
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        title = rng.choice(BASE_TITLES + EXTRA_CANDIDATE_TITLES)
        location = rng.choice(MN_LOCATIONS)
        exp = rng.randrange(15)

        if tier == "top" and job is not None:
            title = job.title
            location = job.location
            exp = job.years_experience + 3
            skills = [*job.skills, *CANDIDATE_SKILL_POOL[:2]]
        elif tier == "mid" and job is not None:
            title = job.title
            exp = max(0, job.years_experience - 1)
            skills = [*job.skills[:1], *CANDIDATE_SKILL_POOL[2:5]]
        elif tier == "part" and job is not None:
            title = "General Professional"
            location = job.location
            exp = 2
            skills = [CANDIDATE_SKILL_POOL[10], CANDIDATE_SKILL_POOL[11]]
        else:
            skills = rng.sample(CANDIDATE_SKILL_POOL, 3)

        return Candidate(
            id=candidate_id,
            name=f"{first} {last}",
            title=title,
            location=location,
            skills=skills,
            experience_years=exp,
            profile_url="#",
            bio=(
                f"Professional with {exp} years of background. Primary skills include "
                f"{skills[0] if skills else 'general operations'}. "
                "Dedicated to operational excellence and teamwork."
            ),
            email=f"{first.lower()}.{last.lower()}@example.com",
            phone=f"612-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}",
            linkedin=f"linkedin.com/in/{first.lower()}-{last.lower()}",
        )

    def candidates_for(self, job: Job | None, job_id: str) -> list[Candidate]:
        """A shuffled pool with a few strong, mid and partial fits plus random fill."""
        pool: list[Candidate] = []
        for tier, count in CANDIDATE_TIERS:
            tier_job = None if tier == "rand" else job
            for i in range(count):
                pool.append(self.random_candidate(f"candidate-{job_id}-{tier}-{i}", tier, tier_job))
        self.rng.shuffle(pool)
        return pool


def parse_resume_stub(filename: str, candidate_id: str | None = None) -> Candidate:
    """Simulated resume parse: a fixed logistics profile named after the file."""
    stem = Path(filename).stem or "Candidate"
    return Candidate(
        id=candidate_id or f"mock-user-{stem.lower().replace(' ', '-')}",
        name=stem,
        title="Logistics Specialist",
        location="Minneapolis, MN",
        skills=["Forklift", "Inventory Control", "SAP", "Safety"],
        experience_years=4,
        profile_url="#",
        bio="Simulated parsed profile.",
    )
