"""Vegetable x meat combination expansion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from cookmuse.catalog import TagClass, classify, unique
from cookmuse.config import Settings, settings


@dataclass(frozen=True)
class Combination:
    vegetable: str
    meat: str
    residual: tuple[str, ...] = ()

    @property
    def tags(self) -> tuple[str, ...]:
        return (self.vegetable, self.meat, *self.residual)


def partition(tags: Iterable[str]) -> tuple[list[str], list[str], tuple[str, ...]]:
    """Split tags into (vegetables, meats, residual), keeping input order."""
    vegetables, meats, residual = [], [], []
    for tag in unique(tags):
        tag_class = classify(tag)
        if tag_class is TagClass.VEGETABLE:
            vegetables.append(tag)
        elif tag_class is TagClass.MEAT:
            meats.append(tag)
        else:
            residual.append(tag)
    return vegetables, meats, tuple(residual)


def expand(tags: Iterable[str]) -> tuple[list[Combination], tuple[str, ...]]:
    """Cross every vegetable with every meat.

    Returns no combinations unless both groups are non-empty; callers then
    fall back to a single query over all tags.
    """
    vegetables, meats, residual = partition(tags)
    if not vegetables or not meats:
        return [], residual
    combinations = [
        Combination(vegetable=vegetable, meat=meat, residual=residual)
        for vegetable in vegetables
        for meat in meats
    ]
    return combinations, residual


def quota_for(combination_count: int, config: Settings | None = None) -> int:
    """Max results each combination's search may contribute."""
    config = config or settings
    if combination_count < config.combination_quota_threshold:
        return config.small_combination_quota
    return config.large_combination_quota
