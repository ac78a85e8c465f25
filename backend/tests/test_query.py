from cookmuse.discovery.query import DEFAULT_COOKING_KEYWORDS, compose, cooking_keywords


def test_compose_orders_ingredients_then_tools_then_keywords():
    query = compose(["potato", "chicken"], ["oven"], "en")
    assert query == "potato chicken oven recipe cooking tutorial how to cook"


def test_compose_localizes_terms():
    query = compose(["tomato", "eggs"], ["rice_cooker"], "zh-Hans")
    assert query == "番茄 鸡蛋 电饭煲 食谱 烹饪 教程 怎么做 制作方法"


def test_compose_without_tags_is_just_keywords():
    assert compose([], [], "fr") == "recette cuisine tutoriel comment cuisiner"


def test_unknown_language_uses_default_keywords_and_english_terms():
    assert cooking_keywords("it") == DEFAULT_COOKING_KEYWORDS
    assert compose(["sweet_corn"], [], "it") == "sweet corn recipe cooking tutorial"


def test_unknown_tag_uses_raw_key():
    assert compose(["dragonfruit"], [], "en").startswith("dragonfruit ")
