"""
Command-line front end.

Runs: load settings → build feed → (refresh) → rank → print / write report.
"""
from __future__ import annotations

import argparse
import asyncio
import json
import random
import sys
from pathlib import Path

from talentmatch import __version__
from talentmatch.config import ConfigError, load_settings
from talentmatch.feed import JobFeed
from talentmatch.log import get_logger
from talentmatch.ranking import rank_candidates_with_ai, rank_jobs_for_candidate
from talentmatch.report import build_job_report, build_match_report, write_report
from talentmatch.retry import ScrapeError
from talentmatch.sources.mock import parse_resume_stub

log = get_logger(__name__)

EXIT_FATAL = 2
EXIT_EXHAUSTED = 3


async def _refresh_or_report(feed: JobFeed) -> int:
    try:
        await feed.refresh()
    except ScrapeError as exc:
        if exc.is_fatal:
            print(f"Job feed is unusable ({exc.error_type.value}): {exc.message}", file=sys.stderr)
            return EXIT_FATAL
        print(f"Job feed unavailable after retries ({exc.error_type.value}): {exc.message}", file=sys.stderr)
        return EXIT_EXHAUSTED
    return 0


async def cmd_jobs(feed: JobFeed, args: argparse.Namespace) -> int:
    if args.refresh:
        code = await _refresh_or_report(feed)
        if code:
            return code
    jobs = await feed.get_jobs()
    for job in jobs[: args.limit]:
        flag = "*" if job.is_new else " "
        print(f"{flag} {job.id:<28} {job.title[:32]:<32} {job.location:<20} {job.pay_rate}")
    print(f"{len(jobs)} jobs cached")
    return 0


async def cmd_rank_candidates(feed: JobFeed, args: argparse.Namespace) -> int:
    job = await feed.get_job(args.job_id)
    if job is None:
        print(f"Unknown job id: {args.job_id}", file=sys.stderr)
        return 1
    candidates = await feed.candidates_for_job(job.id)
    results = await rank_candidates_with_ai(job, candidates, settings=feed.settings, rng=feed.rng)
    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return 0
    content = build_match_report(job, results, candidates)
    print(content)
    if args.report:
        write_report(content, f"candidates-{job.id}")
    return 0


async def cmd_rank_jobs(feed: JobFeed, args: argparse.Namespace) -> int:
    candidate = parse_resume_stub(args.resume)
    jobs = await feed.get_jobs()
    results = await rank_jobs_for_candidate(candidate, jobs, settings=feed.settings, rng=feed.rng)
    if args.json:
        print(json.dumps([r.to_dict() for r in results[: args.limit]], indent=2))
        return 0
    content = build_job_report(candidate, results[: args.limit], jobs)
    print(content)
    if args.report:
        write_report(content, f"jobs-{candidate.name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="talentmatch", description="Rank candidates for jobs and jobs for candidates")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--seed", type=int, default=None, help="Seed the random source for repeatable output")
    p.add_argument("--config", default=None, help="Path to a matching.yaml settings file")
    sub = p.add_subparsers(dest="command", required=True)

    pj = sub.add_parser("jobs", help="List cached jobs")
    pj.add_argument("--refresh", action="store_true", help="Pull fresh listings first")
    pj.add_argument("--limit", type=int, default=20)
    pj.set_defaults(func=cmd_jobs)

    pc = sub.add_parser("rank-candidates", help="Rank a candidate pool for one job")
    pc.add_argument("job_id")
    pc.add_argument("--json", action="store_true")
    pc.add_argument("--report", action="store_true", help="Also write the markdown report to reports/")
    pc.set_defaults(func=cmd_rank_candidates)

    pr = sub.add_parser("rank-jobs", help="Rank cached jobs for a resume")
    pr.add_argument("--resume", required=True, help="Resume file name (parsing is simulated)")
    pr.add_argument("--limit", type=int, default=15)
    pr.add_argument("--json", action="store_true")
    pr.add_argument("--report", action="store_true")
    pr.set_defaults(func=cmd_rank_jobs)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings(Path(args.config) if args.config else None)
    except ConfigError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 1
    if args.seed is not None:
        settings.seed = args.seed
    feed = JobFeed(settings=settings, rng=random.Random(settings.seed))
    return asyncio.run(args.func(feed, args))


if __name__ == "__main__":
    sys.exit(main())
