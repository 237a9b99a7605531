"""Job feed: simulated live refresh behind the retry layer, plus cache reads."""
from __future__ import annotations

import asyncio
import itertools
import random
import time

from talentmatch.config import MatchSettings
from talentmatch.log import get_logger
from talentmatch.models import Candidate, Job
from talentmatch.retry import ErrorType, ScrapeError, Sleep, fetch_with_retry
from talentmatch.sources.base import CandidateSourceBase, JobSourceBase
from talentmatch.sources.mock import MockCandidateSource, MockJobSource
from talentmatch.store import JobStore

log = get_logger(__name__)


class JobFeed:
    def __init__(
        self,
        store: JobStore | None = None,
        *,
        source: JobSourceBase | None = None,
        candidates: CandidateSourceBase | None = None,
        settings: MatchSettings | None = None,
        rng: random.Random | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.settings = settings or MatchSettings()
        self.rng = rng or random.Random(self.settings.seed)
        self.source = source or MockJobSource(self.rng)
        self.candidate_source = candidates or MockCandidateSource(self.rng)
        if store is None:
            initial = (
                self.source.initial_jobs(self.settings.feed.initial_generated)
                if isinstance(self.source, MockJobSource)
                else []
            )
            store = JobStore(initial)
        self.store = store
        self._sleep = sleep
        self._batches = itertools.count()

    def _batch_prefix(self, kind: str) -> str:
        return f"{kind}-{int(time.time() * 1000)}-{next(self._batches)}"

    async def _latency(self) -> None:
        if self.settings.feed.latency_ms > 0:
            await self._sleep(self.settings.feed.latency_ms / 1000)

    async def get_jobs(self) -> list[Job]:
        await self._latency()
        return self.store.snapshot()

    async def get_job(self, job_id: str) -> Job | None:
        return self.store.get(job_id)

    def update_cache(self, jobs: list[Job]) -> list[Job]:
        return self.store.replace(jobs)

    async def _scrape_once(self) -> list[Job]:
        if self.rng.random() < self.settings.feed.network_failure_rate:
            raise ScrapeError("Connection to data stream lost.", ErrorType.NETWORK_ERROR)
        try:
            scraped = self.source.generate(
                self._batch_prefix("scraped"), self.settings.feed.refresh_batch, is_new=True,
            )
            return self.store.prepend(scraped)
        except ScrapeError:
            raise
        except Exception as exc:
            raise ScrapeError(f"Failed to process job feed: {exc}", ErrorType.PARSING_ERROR) from exc

    async def refresh(self) -> list[Job]:
        """Pull a batch of fresh listings to the top of the cache.

        Raises the classified :class:`ScrapeError` once retries run out, or at
        once for a PARSING_ERROR.
        """
        retry = self.settings.retry
        jobs = await fetch_with_retry(
            self._scrape_once,
            retry.max_retries,
            retry.base_delay_ms,
            sleep=self._sleep,
            name="JobFeed.refresh",
        )
        log.info("Feed refreshed → %d jobs cached", len(jobs))
        return jobs

    async def load_more(self) -> list[Job]:
        batch = self.source.generate(self._batch_prefix("batch"), self.settings.feed.load_more_batch)
        jobs = self.store.extend(batch)
        await self._latency()
        return jobs

    async def candidates_for_job(self, job_id: str) -> list[Candidate]:
        job = self.store.get(job_id)
        if job is None:
            log.warning("Job %s not in cache; candidate pool will be random only", job_id)
        pool = self.candidate_source.candidates_for(job, job_id)
        await self._latency()
        return pool
