"""Search query composition."""

from __future__ import annotations

from typing import Iterable

from cookmuse.catalog import localize

COOKING_KEYWORDS: dict[str, str] = {
    "en": "recipe cooking tutorial how to cook",
    "zh-Hans": "食谱 烹饪 教程 怎么做 制作方法",
    "ja": "レシピ 料理 作り方 クッキング チュートリアル",
    "ko": "레시피 요리 만들기 쿠킹 튜토리얼",
    "de": "rezept kochen anleitung wie man kocht",
    "es": "receta cocinar tutorial cómo cocinar",
    "fr": "recette cuisine tutoriel comment cuisiner",
    "ru": "рецепт готовить урок как готовить",
}
DEFAULT_COOKING_KEYWORDS = "recipe cooking tutorial"


def cooking_keywords(language: str) -> str:
    return COOKING_KEYWORDS.get(language, DEFAULT_COOKING_KEYWORDS)


def compose(tags: Iterable[str], tools: Iterable[str], language: str) -> str:
    """Build a search string: ingredient terms, tool terms, cooking keywords."""
    parts = []
    ingredient_terms = [localize(tag, language) for tag in tags]
    if ingredient_terms:
        parts.append(" ".join(ingredient_terms))
    tool_terms = [localize(tool, language) for tool in tools]
    if tool_terms:
        parts.append(" ".join(tool_terms))
    parts.append(cooking_keywords(language))
    return " ".join(parts)
