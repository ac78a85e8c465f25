"""Display terms for ingredient and kitchenware tags.

Lookup order is the requested language, then English, then the raw tag
key, so ``localize`` never fails.
"""

from __future__ import annotations

from types import MappingProxyType

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "zh-Hans", "ja", "ko", "de", "es", "fr", "ru")

_TERMS: dict[str, dict[str, str]] = {
    "en": {
        "potato": "potato", "carrot": "carrot", "tomato": "tomato", "onion": "onion",
        "green_pepper": "green pepper", "eggplant": "eggplant", "spinach": "spinach",
        "cucumber": "cucumber", "sweet_corn": "sweet corn", "celery": "celery",
        "cauliflower": "cauliflower", "broccoli": "broccoli", "bitter_melon": "bitter melon",
        "pumpkin": "pumpkin", "lotus_root": "lotus root", "mushrooms": "mushrooms",
        "enoki_mushrooms": "enoki mushrooms", "shiitake_mushrooms": "shiitake mushrooms",
        "oyster_mushrooms": "oyster mushrooms", "king_oyster_mushrooms": "king oyster mushrooms",
        "sausage": "sausage", "pork": "pork", "beef": "beef", "eggs": "eggs", "fish": "fish",
        "shrimp": "shrimp", "chicken": "chicken", "lamb": "lamb", "duck": "duck",
        "goose": "goose", "offal": "offal", "tripe": "tripe",
        "pasta": "pasta", "bread": "bread", "rice": "rice", "noodles": "noodles",
        "rice_flour": "rice flour", "grains": "grains", "beans": "beans",
        "bean_products": "tofu", "tubers": "tubers", "nuts": "nuts",
        "oven": "oven", "air_fryer": "air fryer", "microwave": "microwave",
        "rice_cooker": "rice cooker", "versatile_pot": "multi cooker",
    },
    "zh-Hans": {
        "potato": "土豆", "carrot": "胡萝卜", "tomato": "番茄", "onion": "洋葱",
        "green_pepper": "青椒", "eggplant": "茄子", "spinach": "菠菜", "cucumber": "黄瓜",
        "sweet_corn": "玉米", "celery": "芹菜", "cauliflower": "花菜", "broccoli": "西兰花",
        "bitter_melon": "苦瓜", "pumpkin": "南瓜", "lotus_root": "莲藕", "mushrooms": "蘑菇",
        "enoki_mushrooms": "金针菇", "shiitake_mushrooms": "香菇", "oyster_mushrooms": "平菇",
        "king_oyster_mushrooms": "杏鲍菇",
        "sausage": "香肠", "pork": "猪肉", "beef": "牛肉", "eggs": "鸡蛋", "fish": "鱼",
        "shrimp": "虾", "chicken": "鸡肉", "lamb": "羊肉", "duck": "鸭肉", "goose": "鹅肉",
        "offal": "内脏", "tripe": "牛肚",
        "pasta": "意面", "bread": "面包", "rice": "米饭", "noodles": "面条",
        "rice_flour": "米粉", "grains": "杂粮", "beans": "豆类", "bean_products": "豆制品",
        "tubers": "薯类", "nuts": "坚果",
        "oven": "烤箱", "air_fryer": "空气炸锅", "microwave": "微波炉",
        "rice_cooker": "电饭煲", "versatile_pot": "多功能锅",
    },
    "ja": {
        "potato": "じゃがいも", "carrot": "にんじん", "tomato": "トマト", "onion": "玉ねぎ",
        "green_pepper": "ピーマン", "eggplant": "なす", "spinach": "ほうれん草",
        "cucumber": "きゅうり", "sweet_corn": "とうもろこし", "celery": "セロリ",
        "cauliflower": "カリフラワー", "broccoli": "ブロッコリー", "bitter_melon": "ゴーヤ",
        "pumpkin": "かぼちゃ", "lotus_root": "れんこん", "mushrooms": "きのこ",
        "enoki_mushrooms": "えのき", "shiitake_mushrooms": "しいたけ",
        "oyster_mushrooms": "ひらたけ", "king_oyster_mushrooms": "エリンギ",
        "sausage": "ソーセージ", "pork": "豚肉", "beef": "牛肉", "eggs": "卵", "fish": "魚",
        "shrimp": "えび", "chicken": "鶏肉", "lamb": "ラム肉", "duck": "鴨肉",
        "goose": "ガチョウ", "offal": "ホルモン", "tripe": "ハチノス",
        "pasta": "パスタ", "bread": "パン", "rice": "ご飯", "noodles": "麺",
        "rice_flour": "米粉", "grains": "雑穀", "beans": "豆", "bean_products": "豆腐",
        "tubers": "芋", "nuts": "ナッツ",
        "oven": "オーブン", "air_fryer": "エアフライヤー", "microwave": "電子レンジ",
        "rice_cooker": "炊飯器", "versatile_pot": "電気圧力鍋",
    },
    "ko": {
        "potato": "감자", "carrot": "당근", "tomato": "토마토", "onion": "양파",
        "green_pepper": "피망", "eggplant": "가지", "spinach": "시금치", "cucumber": "오이",
        "sweet_corn": "옥수수", "celery": "셀러리", "cauliflower": "콜리플라워",
        "broccoli": "브로콜리", "bitter_melon": "여주", "pumpkin": "호박", "lotus_root": "연근",
        "mushrooms": "버섯", "enoki_mushrooms": "팽이버섯", "shiitake_mushrooms": "표고버섯",
        "oyster_mushrooms": "느타리버섯", "king_oyster_mushrooms": "새송이버섯",
        "sausage": "소시지", "pork": "돼지고기", "beef": "소고기", "eggs": "달걀", "fish": "생선",
        "shrimp": "새우", "chicken": "닭고기", "lamb": "양고기", "duck": "오리고기",
        "goose": "거위고기", "offal": "내장", "tripe": "양",
        "pasta": "파스타", "bread": "빵", "rice": "밥", "noodles": "면",
        "rice_flour": "쌀가루", "grains": "잡곡", "beans": "콩", "bean_products": "두부",
        "tubers": "고구마", "nuts": "견과류",
        "oven": "오븐", "air_fryer": "에어프라이어", "microwave": "전자레인지",
        "rice_cooker": "밥솥", "versatile_pot": "멀티쿠커",
    },
    "de": {
        "potato": "Kartoffel", "carrot": "Karotte", "tomato": "Tomate", "onion": "Zwiebel",
        "green_pepper": "Paprika", "eggplant": "Aubergine", "spinach": "Spinat",
        "cucumber": "Gurke", "sweet_corn": "Mais", "celery": "Sellerie",
        "cauliflower": "Blumenkohl", "broccoli": "Brokkoli", "bitter_melon": "Bittermelone",
        "pumpkin": "Kürbis", "lotus_root": "Lotuswurzel", "mushrooms": "Pilze",
        "enoki_mushrooms": "Enoki", "shiitake_mushrooms": "Shiitake",
        "oyster_mushrooms": "Austernpilze", "king_oyster_mushrooms": "Kräuterseitlinge",
        "sausage": "Wurst", "pork": "Schweinefleisch", "beef": "Rindfleisch", "eggs": "Eier",
        "fish": "Fisch", "shrimp": "Garnelen", "chicken": "Hähnchen", "lamb": "Lamm",
        "duck": "Ente", "goose": "Gans", "offal": "Innereien", "tripe": "Kutteln",
        "pasta": "Nudeln", "bread": "Brot", "rice": "Reis", "noodles": "Asia Nudeln",
        "rice_flour": "Reismehl", "grains": "Getreide", "beans": "Bohnen",
        "bean_products": "Tofu", "tubers": "Knollen", "nuts": "Nüsse",
        "oven": "Backofen", "air_fryer": "Heißluftfritteuse", "microwave": "Mikrowelle",
        "rice_cooker": "Reiskocher", "versatile_pot": "Multikocher",
    },
    "es": {
        "potato": "patata", "carrot": "zanahoria", "tomato": "tomate", "onion": "cebolla",
        "green_pepper": "pimiento verde", "eggplant": "berenjena", "spinach": "espinaca",
        "cucumber": "pepino", "sweet_corn": "maíz", "celery": "apio",
        "cauliflower": "coliflor", "broccoli": "brócoli", "bitter_melon": "melón amargo",
        "pumpkin": "calabaza", "lotus_root": "raíz de loto", "mushrooms": "champiñones",
        "enoki_mushrooms": "setas enoki", "shiitake_mushrooms": "shiitake",
        "oyster_mushrooms": "setas de ostra", "king_oyster_mushrooms": "seta de cardo",
        "sausage": "salchicha", "pork": "cerdo", "beef": "ternera", "eggs": "huevos",
        "fish": "pescado", "shrimp": "gambas", "chicken": "pollo", "lamb": "cordero",
        "duck": "pato", "goose": "ganso", "offal": "casquería", "tripe": "callos",
        "pasta": "pasta", "bread": "pan", "rice": "arroz", "noodles": "fideos",
        "rice_flour": "harina de arroz", "grains": "cereales", "beans": "judías",
        "bean_products": "tofu", "tubers": "tubérculos", "nuts": "frutos secos",
        "oven": "horno", "air_fryer": "freidora de aire", "microwave": "microondas",
        "rice_cooker": "arrocera", "versatile_pot": "olla multifunción",
    },
    "fr": {
        "potato": "pomme de terre", "carrot": "carotte", "tomato": "tomate", "onion": "oignon",
        "green_pepper": "poivron vert", "eggplant": "aubergine", "spinach": "épinards",
        "cucumber": "concombre", "sweet_corn": "maïs", "celery": "céleri",
        "cauliflower": "chou-fleur", "broccoli": "brocoli", "bitter_melon": "margose",
        "pumpkin": "potiron", "lotus_root": "racine de lotus", "mushrooms": "champignons",
        "enoki_mushrooms": "enoki", "shiitake_mushrooms": "shiitaké",
        "oyster_mushrooms": "pleurotes", "king_oyster_mushrooms": "pleurote du panicaut",
        "sausage": "saucisse", "pork": "porc", "beef": "bœuf", "eggs": "œufs",
        "fish": "poisson", "shrimp": "crevettes", "chicken": "poulet", "lamb": "agneau",
        "duck": "canard", "goose": "oie", "offal": "abats", "tripe": "tripes",
        "pasta": "pâtes", "bread": "pain", "rice": "riz", "noodles": "nouilles",
        "rice_flour": "farine de riz", "grains": "céréales", "beans": "haricots",
        "bean_products": "tofu", "tubers": "tubercules", "nuts": "noix",
        "oven": "four", "air_fryer": "friteuse à air", "microwave": "micro-ondes",
        "rice_cooker": "cuiseur à riz", "versatile_pot": "multicuiseur",
    },
    "ru": {
        "potato": "картофель", "carrot": "морковь", "tomato": "помидор", "onion": "лук",
        "green_pepper": "зелёный перец", "eggplant": "баклажан", "spinach": "шпинат",
        "cucumber": "огурец", "sweet_corn": "кукуруза", "celery": "сельдерей",
        "cauliflower": "цветная капуста", "broccoli": "брокколи",
        "bitter_melon": "горькая дыня", "pumpkin": "тыква", "lotus_root": "корень лотоса",
        "mushrooms": "грибы", "enoki_mushrooms": "эноки", "shiitake_mushrooms": "шиитаке",
        "oyster_mushrooms": "вешенки", "king_oyster_mushrooms": "королевская вешенка",
        "sausage": "колбаса", "pork": "свинина", "beef": "говядина", "eggs": "яйца",
        "fish": "рыба", "shrimp": "креветки", "chicken": "курица", "lamb": "баранина",
        "duck": "утка", "goose": "гусь", "offal": "субпродукты", "tripe": "рубец",
        "pasta": "паста", "bread": "хлеб", "rice": "рис", "noodles": "лапша",
        "rice_flour": "рисовая мука", "grains": "крупы", "beans": "фасоль",
        "bean_products": "тофу", "tubers": "клубни", "nuts": "орехи",
        "oven": "духовка", "air_fryer": "аэрогриль", "microwave": "микроволновка",
        "rice_cooker": "рисоварка", "versatile_pot": "мультиварка",
    },
}

# Read-only views; the tables never change after import.
TERMS = MappingProxyType({lang: MappingProxyType(table) for lang, table in _TERMS.items()})


def localize(tag: str, language: str) -> str:
    """Return the display term for ``tag`` in ``language``."""
    table = TERMS.get(language)
    if table is not None and tag in table:
        return table[tag]
    return TERMS[DEFAULT_LANGUAGE].get(tag, tag)
