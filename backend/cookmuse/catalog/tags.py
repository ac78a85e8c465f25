"""Static ingredient / kitchenware tables and tag classification."""

from __future__ import annotations

import enum
import random
from typing import Iterable

VEGETABLE_TAGS: tuple[str, ...] = (
    "potato", "carrot", "tomato", "onion", "green_pepper",
    "eggplant", "spinach", "cucumber", "sweet_corn", "celery",
    "cauliflower", "broccoli", "bitter_melon", "pumpkin", "lotus_root",
    "mushrooms", "enoki_mushrooms", "shiitake_mushrooms", "oyster_mushrooms",
    "king_oyster_mushrooms",
)

MEAT_TAGS: tuple[str, ...] = (
    "sausage", "pork", "beef", "eggs", "fish", "shrimp",
    "chicken", "lamb", "duck", "goose", "offal", "tripe",
)

STAPLE_TAGS: tuple[str, ...] = (
    "pasta", "bread", "rice", "noodles", "rice_flour",
    "grains", "beans", "bean_products", "tubers", "nuts",
)

KITCHENWARE_TAGS: tuple[str, ...] = (
    "oven", "air_fryer", "microwave", "rice_cooker", "versatile_pot",
)

# Ingredients the gacha draw picks from
GACHA_POOL: tuple[str, ...] = (
    "potato", "carrot", "tomato", "onion", "chicken", "beef", "pork",
    "fish", "shrimp", "pasta", "rice", "noodles", "eggs", "mushrooms",
)
GACHA_MIN_DRAW = 2
GACHA_MAX_DRAW = 4

_VEGETABLES = frozenset(VEGETABLE_TAGS)
_MEATS = frozenset(MEAT_TAGS)


class TagClass(str, enum.Enum):
    VEGETABLE = "vegetable"
    MEAT = "meat"
    OTHER = "other"


def classify(tag: str) -> TagClass:
    if tag in _VEGETABLES:
        return TagClass.VEGETABLE
    if tag in _MEATS:
        return TagClass.MEAT
    return TagClass.OTHER


def unique(tags: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates and blanks, keeping first-seen order."""
    seen: dict[str, None] = {}
    for tag in tags:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


def draw_gacha_ingredients(rng: random.Random | None = None) -> list[str]:
    """Pick 2-4 distinct ingredients from the gacha pool."""
    rng = rng or random.Random()
    count = rng.randint(GACHA_MIN_DRAW, GACHA_MAX_DRAW)
    return rng.sample(GACHA_POOL, count)
