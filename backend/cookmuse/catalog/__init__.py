from cookmuse.catalog.localization import SUPPORTED_LANGUAGES, localize
from cookmuse.catalog.tags import (
    GACHA_POOL,
    KITCHENWARE_TAGS,
    MEAT_TAGS,
    STAPLE_TAGS,
    VEGETABLE_TAGS,
    TagClass,
    classify,
    draw_gacha_ingredients,
    unique,
)

__all__ = [
    "GACHA_POOL",
    "KITCHENWARE_TAGS",
    "MEAT_TAGS",
    "STAPLE_TAGS",
    "SUPPORTED_LANGUAGES",
    "VEGETABLE_TAGS",
    "TagClass",
    "classify",
    "draw_gacha_ingredients",
    "localize",
    "unique",
]
