"""Discovery package: query composition, fan-out, fallback and ranking."""

from cookmuse.discovery.cascade import FallbackCascade, FallbackStage, next_stage
from cookmuse.discovery.combinations import Combination, expand, quota_for
from cookmuse.discovery.context import (
    DiscoveryResult,
    RankingMetric,
    SearchMode,
    SearchRequest,
    TaskFailure,
)
from cookmuse.discovery.orchestrator import DiscoveryOrchestrator
from cookmuse.discovery.query import compose
from cookmuse.discovery.ranking import merge

__all__ = [
    "Combination",
    "DiscoveryOrchestrator",
    "DiscoveryResult",
    "FallbackCascade",
    "FallbackStage",
    "RankingMetric",
    "SearchMode",
    "SearchRequest",
    "TaskFailure",
    "compose",
    "expand",
    "merge",
    "next_stage",
    "quota_for",
]
