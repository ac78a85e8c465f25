"""Fallback cascade: strict recent search first, relaxing until enough results.

Stage order is fixed::

    RECENT_STRICT -> RECENT_RELAXED -> UNBOUNDED

Selection mode skips the relaxed stage. A strict stage that returns no raw
hits at all jumps straight to UNBOUNDED, since the window was too narrow
rather than the filters too strict. UNBOUNDED always ends the cascade and
is the only stage whose failures propagate.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from cookmuse.config import Settings, settings
from cookmuse.discovery.context import SearchMode, metric_for
from cookmuse.discovery.ranking import rank
from cookmuse.errors import InvalidConfigurationError, SearchError
from cookmuse.platforms.base import CandidateVideo, SearchClient, SearchOrder

logger = logging.getLogger(__name__)

MAX_STAGES = 3


class FallbackStage(str, enum.Enum):
    RECENT_STRICT = "recent_strict"
    RECENT_RELAXED = "recent_relaxed"
    UNBOUNDED = "unbounded"

    @property
    def is_terminal(self) -> bool:
        return self is FallbackStage.UNBOUNDED


def next_stage(
    stage: FallbackStage, mode: SearchMode, *, raw_hits: int | None
) -> FallbackStage | None:
    """Stage to try after ``stage`` came up short.

    ``raw_hits`` is the number of search hits the stage returned, or None
    when the stage failed outright.
    """
    if stage is FallbackStage.UNBOUNDED:
        return None
    if stage is FallbackStage.RECENT_STRICT:
        if raw_hits == 0:
            return FallbackStage.UNBOUNDED
        if mode is SearchMode.TRENDING:
            return FallbackStage.RECENT_RELAXED
    return FallbackStage.UNBOUNDED


@dataclass(frozen=True)
class StagePolicy:
    stage: FallbackStage
    window_months: int | None
    raw_results: int
    order_by: SearchOrder
    quality_filters: bool = True


def stage_policy(
    stage: FallbackStage, mode: SearchMode, max_results: int, config: Settings | None = None
) -> StagePolicy:
    config = config or settings

    if mode is SearchMode.SELECTION:
        if stage is FallbackStage.RECENT_STRICT:
            return StagePolicy(
                stage, config.selection_window_months, max_results, SearchOrder.RELEVANCE
            )
        return StagePolicy(
            FallbackStage.UNBOUNDED,
            None,
            max(config.selection_unbounded_raw_results, max_results),
            SearchOrder.RELEVANCE,
        )

    headroom = max(max_results * 3, config.trending_min_raw_results)
    if stage is FallbackStage.RECENT_STRICT:
        return StagePolicy(stage, config.trending_window_months, headroom, SearchOrder.VIEW_COUNT)
    if stage is FallbackStage.RECENT_RELAXED:
        return StagePolicy(stage, None, max_results * 2, SearchOrder.VIEW_COUNT)
    return StagePolicy(stage, None, headroom, SearchOrder.VIEW_COUNT, quality_filters=False)


@dataclass
class StageOutcome:
    stage: FallbackStage
    raw_hits: int
    videos: list[CandidateVideo] = field(default_factory=list)


@dataclass
class CascadeResult:
    videos: list[CandidateVideo] = field(default_factory=list)
    stages: list[FallbackStage] = field(default_factory=list)

    @property
    def final_stage(self) -> FallbackStage | None:
        return self.stages[-1] if self.stages else None


class FallbackCascade:
    """Runs one query through the fallback stages."""

    def __init__(self, client: SearchClient, config: Settings | None = None):
        self._client = client
        self._config = config or settings

    async def run(
        self, query: str, language: str, mode: SearchMode, max_results: int
    ) -> CascadeResult:
        result = CascadeResult()
        stage: FallbackStage | None = FallbackStage.RECENT_STRICT

        while stage is not None and len(result.stages) < MAX_STAGES:
            result.stages.append(stage)
            policy = stage_policy(stage, mode, max_results, self._config)

            try:
                outcome = await self._run_stage(policy, query, language, mode, max_results)
            except InvalidConfigurationError:
                raise
            except SearchError as exc:
                if stage.is_terminal:
                    raise
                logger.warning(
                    "Stage %s failed for '%s' (%s: %s), falling back",
                    stage.value,
                    query,
                    type(exc).__name__,
                    exc,
                )
                stage = next_stage(stage, mode, raw_hits=None)
                continue

            result.videos = outcome.videos
            if stage.is_terminal or len(outcome.videos) >= max_results:
                break

            logger.info(
                "Stage %s insufficient for '%s' (%d raw hits, %d/%d videos), falling back",
                stage.value,
                query,
                outcome.raw_hits,
                len(outcome.videos),
                max_results,
            )
            stage = next_stage(stage, mode, raw_hits=outcome.raw_hits)

        logger.info(
            "Cascade for '%s' finished at %s with %d videos",
            query,
            result.final_stage.value if result.final_stage else "-",
            len(result.videos),
        )
        return result

    async def _run_stage(
        self,
        policy: StagePolicy,
        query: str,
        language: str,
        mode: SearchMode,
        max_results: int,
    ) -> StageOutcome:
        hits = await self._client.search(
            query,
            language,
            window_months=policy.window_months,
            max_results=policy.raw_results,
            order_by=policy.order_by,
            quality_filters=policy.quality_filters,
        )
        if not hits:
            return StageOutcome(policy.stage, 0)

        details = await self._client.fetch_details([hit.video_id for hit in hits])
        videos = rank(details, metric_for(mode), max_results)
        return StageOutcome(policy.stage, len(hits), videos)
