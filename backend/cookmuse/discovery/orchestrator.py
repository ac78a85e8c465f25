from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Iterable

from cookmuse.catalog import draw_gacha_ingredients
from cookmuse.config import Settings, settings
from cookmuse.discovery.cascade import FallbackCascade
from cookmuse.discovery.combinations import expand, quota_for
from cookmuse.discovery.context import DiscoveryResult, SearchMode, SearchRequest, TaskFailure
from cookmuse.discovery.query import compose
from cookmuse.discovery.ranking import merge
from cookmuse.errors import DiscoveryError, InvalidConfigurationError, NetworkError, SearchError
from cookmuse.platforms.base import CandidateVideo, SearchClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchJob:
    """One cascade execution: a composed query and its result quota."""

    query: str
    max_results: int


class DiscoveryOrchestrator:
    """Fans search cascades out concurrently and ranks the merged results.

    Every job is its own failure domain: a job whose final stage fails
    contributes nothing, but never cancels its siblings. Only a missing or
    rejected credential aborts the whole fan-out.
    """

    def __init__(self, client: SearchClient, config: Settings | None = None):
        self._client = client
        self._config = config or settings
        self._cascade = FallbackCascade(client, self._config)

    # ------------------------------------------------------------------
    # Invocation surface
    # ------------------------------------------------------------------
    async def search_by_selection(
        self, tags: Iterable[str], tools: Iterable[str] = (), language: str | None = None
    ) -> DiscoveryResult:
        request = SearchRequest.build(
            tags,
            tools,
            language=language or self._config.default_language,
            mode=SearchMode.SELECTION,
            desired_count=self._config.selection_result_limit,
        )
        return await self.discover(request)

    async def search_trending(
        self, tags: Iterable[str], language: str | None = None, max_results: int = 5
    ) -> DiscoveryResult:
        request = SearchRequest.build(
            tags,
            language=language or self._config.default_language,
            mode=SearchMode.TRENDING,
            desired_count=max_results,
        )
        return await self.discover(request)

    async def search_gacha(
        self,
        language: str | None = None,
        max_results: int = 5,
        rng: random.Random | None = None,
    ) -> DiscoveryResult:
        """Trending search over a random draw from the gacha pool."""
        ingredients = draw_gacha_ingredients(rng)
        logger.info("Gacha drew ingredients: %s", ", ".join(ingredients))
        return await self.search_trending(ingredients, language, max_results)

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------
    def plan(self, request: SearchRequest) -> list[SearchJob]:
        language = request.language
        if request.mode is SearchMode.TRENDING:
            return [SearchJob(compose(request.tags, (), language), request.desired_count)]

        combinations, _ = expand(request.tags)
        if not combinations:
            return [
                SearchJob(compose(request.tags, request.tools, language), request.desired_count)
            ]

        quota = quota_for(len(combinations), self._config)
        return [
            SearchJob(compose(combination.tags, request.tools, language), quota)
            for combination in combinations
        ]

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    async def discover(self, request: SearchRequest) -> DiscoveryResult:
        jobs = self.plan(request)
        logger.info(
            "Discovering %s videos: %d job(s), language=%s, limit=%d",
            request.mode.value,
            len(jobs),
            request.language,
            request.desired_count,
        )

        candidates, failures = await self._fan_out(jobs, request)
        videos = merge(candidates, request.metric, request.desired_count)

        logger.info(
            "Discovery finished: %d candidates -> %d videos (%d failed jobs)",
            len(candidates),
            len(videos),
            len(failures),
        )

        if not candidates and any(not f.transient for f in failures):
            hard_failure = next(f for f in failures if not f.transient)
            raise DiscoveryError(str(hard_failure.error), failures)

        return DiscoveryResult(
            videos=videos,
            queries=[job.query for job in jobs],
            failures=failures,
            ingredients=list(request.tags),
        )

    async def _fan_out(
        self, jobs: list[SearchJob], request: SearchRequest
    ) -> tuple[list[CandidateVideo], list[TaskFailure]]:
        collected: list[CandidateVideo] = []
        failures: list[TaskFailure] = []
        lock = asyncio.Lock()
        limit = self._config.max_concurrent_searches
        limiter = asyncio.Semaphore(limit) if limit > 0 else None

        async def run_job(job: SearchJob) -> None:
            try:
                if limiter is not None:
                    async with limiter:
                        result = await self._cascade.run(
                            job.query, request.language, request.mode, job.max_results
                        )
                else:
                    result = await self._cascade.run(
                        job.query, request.language, request.mode, job.max_results
                    )
            except InvalidConfigurationError:
                raise
            except SearchError as exc:
                logger.warning(
                    "Search for '%s' failed at final stage: %s: %s",
                    job.query,
                    type(exc).__name__,
                    exc,
                )
                async with lock:
                    failures.append(TaskFailure(job.query, exc))
                return
            except Exception as exc:
                logger.exception("Unexpected error searching '%s'", job.query)
                async with lock:
                    failures.append(TaskFailure(job.query, exc))
                return

            async with lock:
                collected.extend(result.videos)

        tasks = {
            asyncio.create_task(run_job(job), name=f"search:{job.query}"): job
            for job in jobs
        }
        deadline = self._config.search_deadline_seconds
        done, pending = await asyncio.wait(
            tasks,
            timeout=deadline if deadline > 0 else None,
            return_when=asyncio.FIRST_EXCEPTION,
        )

        fatal = None
        for task in done:
            if not task.cancelled() and task.exception() is not None:
                fatal = fatal or task.exception()

        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

        if fatal is not None:
            logger.error("Discovery aborted: %s", fatal)
            raise fatal

        for task in pending:
            job = tasks[task]
            logger.warning("Search for '%s' timed out after %.1fs", job.query, deadline)
            failures.append(
                TaskFailure(job.query, NetworkError(f"Search timed out after {deadline}s"))
            )

        return collected, failures
