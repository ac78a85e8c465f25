"""Tests for the static tag tables and localization."""

from __future__ import annotations

import random

from cookmuse.catalog import (
    GACHA_POOL,
    KITCHENWARE_TAGS,
    MEAT_TAGS,
    STAPLE_TAGS,
    VEGETABLE_TAGS,
    TagClass,
    classify,
    draw_gacha_ingredients,
    localize,
    unique,
)
from cookmuse.catalog.localization import SUPPORTED_LANGUAGES, TERMS


def test_vegetable_and_meat_tables_are_disjoint():
    assert not set(VEGETABLE_TAGS) & set(MEAT_TAGS)


def test_classify_partitions_tags():
    assert classify("potato") is TagClass.VEGETABLE
    assert classify("eggs") is TagClass.MEAT
    assert classify("rice") is TagClass.OTHER
    assert classify("oven") is TagClass.OTHER
    assert classify("dragonfruit") is TagClass.OTHER


def test_every_tag_has_an_english_term():
    for tag in (*VEGETABLE_TAGS, *MEAT_TAGS, *STAPLE_TAGS, *KITCHENWARE_TAGS):
        assert tag in TERMS["en"], tag


def test_supported_languages_cover_the_english_table():
    for language in SUPPORTED_LANGUAGES:
        assert set(TERMS[language]) == set(TERMS["en"]), language


def test_localize_uses_language_table():
    assert localize("potato", "zh-Hans") == "土豆"
    assert localize("air_fryer", "de") == "Heißluftfritteuse"


def test_localize_falls_back_to_english_then_raw_key():
    assert localize("green_pepper", "pt-BR") == "green pepper"
    assert localize("dragonfruit", "ja") == "dragonfruit"


def test_unique_keeps_first_seen_order():
    assert unique(["beef", " potato ", "beef", "", "carrot"]) == ("beef", "potato", "carrot")


def test_gacha_draw_picks_two_to_four_distinct_pool_ingredients():
    rng = random.Random(7)
    for _ in range(50):
        drawn = draw_gacha_ingredients(rng)
        assert 2 <= len(drawn) <= 4
        assert len(set(drawn)) == len(drawn)
        assert set(drawn) <= set(GACHA_POOL)


def test_gacha_draw_is_reproducible_with_seed():
    assert draw_gacha_ingredients(random.Random(42)) == draw_gacha_ingredients(random.Random(42))
