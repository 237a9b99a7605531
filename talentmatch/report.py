"""Render ranked match results as markdown."""
from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from talentmatch.config import REPORTS_DIR
from talentmatch.log import get_logger
from talentmatch.models import Candidate, Job, JobMatchResult, MatchResult

log = get_logger(__name__)

TOP_N = 15


def _trim(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def _breakdown_cell(result: MatchResult) -> str:
    b = result.breakdown
    return f"H{b.hard_skills} E{b.experience} S{b.soft_skills} C{b.certifications} L{b.location}"


def _detail_lines(result: MatchResult) -> list[str]:
    lines = [f"- **Score:** {result.score} — {result.reasoning}"]
    if result.strengths:
        lines.append(f"- **Strengths:** {', '.join(result.strengths)}")
    if result.analysis is not None:
        a = result.analysis
        lines.append(f"- **Matched:** {', '.join(a.matched_skills) or '—'}")
        lines.append(f"- **Missing:** {', '.join(a.missing_skills) or '—'}")
        lines.append("- **Ask:**")
        lines.extend(f"  - {q}" for q in a.interview_questions)
    return lines


def build_match_report(job: Job, results: Sequence[MatchResult], candidates: Sequence[Candidate]) -> str:
    by_id = {c.id: c for c in candidates}
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [
        f"# Candidates for {job.title} @ {job.company} — {date}",
        "",
        f"**{len(results)}** candidates ranked | {job.location} | {job.pay_rate or 'pay not listed'}",
        "",
    ]
    top = list(results[:TOP_N])
    if not top:
        lines.append("_No candidates to rank._")
        return "\n".join(lines)

    lines.append("| # | Candidate | Title | Location | Score | Breakdown |")
    lines.append("|--:|-----------|-------|----------|------:|-----------|")
    for i, r in enumerate(top, 1):
        c = by_id.get(r.candidate_id)
        name = _trim(c.name, 24) if c else r.candidate_id
        title = _trim(c.title, 28) if c else ""
        loc = c.location.split(",")[0][:18] if c else ""
        lines.append(f"| {i} | {name} | {title} | {loc} | {r.score} | {_breakdown_cell(r)} |")
    lines.append("")

    lines.append("## Details")
    lines.append("")
    for r in top:
        c = by_id.get(r.candidate_id)
        lines.append(f"### {c.name if c else r.candidate_id}")
        lines.extend(_detail_lines(r))
        lines.append("")

    log.info("Built match report for %s: %d candidates", job.id, len(results))
    return "\n".join(lines)


def build_job_report(candidate: Candidate, results: Sequence[JobMatchResult], jobs: Sequence[Job]) -> str:
    by_id = {j.id: j for j in jobs}
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = [
        f"# Jobs for {candidate.name} — {date}",
        "",
        f"**{len(results)}** jobs ranked | {candidate.title} | {candidate.location}",
        "",
    ]
    top = list(results[:TOP_N])
    if not top:
        lines.append("_No jobs to rank._")
        return "\n".join(lines)

    lines.append("| # | Role | Company | Location | Pay | Score |")
    lines.append("|--:|------|---------|----------|-----|------:|")
    for i, r in enumerate(top, 1):
        j = by_id.get(r.job_id)
        if j is None:
            lines.append(f"| {i} | {r.job_id} | | | | {r.score} |")
            continue
        lines.append(
            f"| {i} | {_trim(j.title, 40)} | {_trim(j.company, 22)} | "
            f"{j.location.split(',')[0][:18]} | {j.pay_rate} | {r.score} |"
        )
    lines.append("")

    lines.append("## Details")
    lines.append("")
    for r in top:
        j = by_id.get(r.job_id)
        lines.append(f"### {j.title + ' @ ' + j.company if j else r.job_id}")
        lines.extend(_detail_lines(r))
        lines.append("")

    log.info("Built job report for %s: %d jobs", candidate.id, len(results))
    return "\n".join(lines)


def write_report(content: str, name: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-") or "report"
    path = reports_dir / f"{slug}_{date}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
