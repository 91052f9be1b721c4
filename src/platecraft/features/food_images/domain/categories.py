# src/platecraft/features/food_images/domain/categories.py
"""
Dish category taxonomy and keyword classifier.

Categories are matched by plain substring lookup over the lower-cased dish
name. The first category in FOOD_CATEGORIES with any matching keyword wins,
so the declaration order below is part of the contract: moving a category
changes how overlapping names (e.g. "fried rice", "croissant") resolve.
Bump TAXONOMY_VERSION whenever the order or the keyword lists change.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

TAXONOMY_VERSION = "1"


class Category(str, Enum):
    # Beverages
    COFFEE = "coffee"
    TEA = "tea"
    SHAKES = "shakes"
    JUICES = "juices"
    ALCOHOLIC = "alcoholic"

    # Indian regional cuisines
    NORTH_INDIAN = "northIndian"
    SOUTH_INDIAN = "southIndian"
    BENGALI = "bengali"
    GUJARATI = "gujarati"
    PUNJABI = "punjabi"
    MAHARASHTRIAN = "maharashtrian"
    RAJASTHANI = "rajasthani"
    KERALA = "kerala"

    # International cuisines
    ITALIAN = "italian"
    CHINESE = "chinese"
    MEXICAN = "mexican"
    JAPANESE = "japanese"
    THAI = "thai"
    FRENCH = "french"
    GREEK = "greek"
    MEDITERRANEAN = "mediterranean"
    AMERICAN = "american"
    KOREAN = "korean"

    # Meal types
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    DESSERTS = "desserts"
    SNACKS = "snacks"

    # Cooking methods
    GRILLED = "grilled"
    FRIED = "fried"
    BAKED = "baked"
    STEAMED = "steamed"

    STREET_FOOD = "streetFood"

    GENERAL = "general"


FOOD_CATEGORIES: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (Category.COFFEE, ("coffee", "latte", "cappuccino", "espresso", "mocha", "americano", "macchiato",
                       "cortado", "flat white", "cold brew", "frappuccino")),
    (Category.TEA, ("tea", "chai", "matcha", "green tea", "black tea", "herbal tea", "oolong",
                    "earl grey", "chamomile")),
    (Category.SHAKES, ("shake", "smoothie", "milkshake", "protein shake", "fruit shake",
                       "chocolate shake", "vanilla shake")),
    (Category.JUICES, ("juice", "fresh lime", "orange juice", "apple juice", "grape juice",
                       "cranberry juice", "pomegranate juice", "green juice")),
    (Category.ALCOHOLIC, ("beer", "wine", "cocktail", "whiskey", "vodka", "rum", "gin", "margarita",
                          "mojito", "bloody mary")),

    (Category.NORTH_INDIAN, ("biryani", "butter chicken", "dal makhani", "naan", "tandoori", "paneer",
                             "roti", "chole", "rajma", "kadai", "malai kofta")),
    (Category.SOUTH_INDIAN, ("dosa", "idli", "sambhar", "rasam", "uttapam", "vada", "coconut rice",
                             "curd rice", "medu vada", "appam", "kootu")),
    (Category.BENGALI, ("fish curry", "machher jhol", "rasgulla", "sandesh", "mishti doi",
                        "kosha mangsho", "chingri malai curry")),
    (Category.GUJARATI, ("dhokla", "khandvi", "thepla", "undhiyu", "khaman", "fafda", "gujarati thali")),
    (Category.PUNJABI, ("makki di roti", "sarson da saag", "amritsari kulcha", "chole bhature",
                        "punjabi kadhi")),
    (Category.MAHARASHTRIAN, ("vada pav", "misal pav", "puran poli", "bhel puri", "pav bhaji", "modak",
                              "batata vada")),
    (Category.RAJASTHANI, ("dal baati churma", "laal maas", "gatte ki sabzi", "ker sangri",
                           "bajre ki roti")),
    (Category.KERALA, ("kerala fish curry", "appam with stew", "puttu", "fish moilee", "banana chips",
                       "payasam")),

    (Category.ITALIAN, ("pasta", "pizza", "risotto", "lasagna", "carbonara", "bolognese", "margherita",
                        "tiramisu", "gelato", "bruschetta")),
    (Category.CHINESE, ("fried rice", "chow mein", "kung pao", "sweet and sour", "dim sum", "peking duck",
                        "hot pot", "mapo tofu")),
    (Category.MEXICAN, ("taco", "burrito", "quesadilla", "enchilada", "guacamole", "nachos", "churros",
                        "fajita", "tamale")),
    (Category.JAPANESE, ("sushi", "ramen", "tempura", "miso soup", "yakitori", "teriyaki", "bento", "udon",
                         "sashimi")),
    (Category.THAI, ("pad thai", "tom yum", "green curry", "red curry", "som tam", "massaman curry",
                     "mango sticky rice")),
    (Category.FRENCH, ("croissant", "baguette", "ratatouille", "coq au vin", "bouillabaisse",
                       "crème brûlée", "macarons")),
    (Category.GREEK, ("greek salad", "moussaka", "souvlaki", "gyros", "tzatziki", "spanakopita",
                      "baklava")),
    (Category.MEDITERRANEAN, ("hummus", "falafel", "tabouleh", "baba ganoush", "dolma", "shawarma")),
    (Category.AMERICAN, ("burger", "hot dog", "barbecue", "mac and cheese", "buffalo wings", "cheesecake",
                         "apple pie")),
    (Category.KOREAN, ("kimchi", "bulgogi", "bibimbap", "korean bbq", "japchae", "tteokbokki")),

    (Category.BREAKFAST, ("pancake", "waffle", "french toast", "omelet", "cereal", "oatmeal", "bagel",
                          "muffin", "croissant")),
    (Category.LUNCH, ("sandwich", "wrap", "salad bowl", "soup and sandwich", "club sandwich", "panini")),
    (Category.DINNER, ("steak", "roast chicken", "salmon", "lamb chops", "pork tenderloin", "beef stew")),
    (Category.DESSERTS, ("cake", "ice cream", "pudding", "pie", "tart", "cookies", "brownies", "mousse",
                         "parfait")),
    (Category.SNACKS, ("chips", "popcorn", "nuts", "crackers", "pretzels", "fruit", "cheese and crackers")),

    (Category.GRILLED, ("grilled chicken", "bbq", "grilled vegetables", "grilled fish", "barbecue ribs")),
    (Category.FRIED, ("fried chicken", "french fries", "fried rice", "tempura", "fish and chips")),
    (Category.BAKED, ("baked potato", "baked chicken", "baked goods", "casserole", "roasted vegetables")),
    (Category.STEAMED, ("steamed dumplings", "steamed fish", "steamed vegetables", "steamed buns")),

    (Category.STREET_FOOD, ("street food", "food truck", "vendor food", "chaat", "gol gappa", "aloo tikki",
                            "corn on the cob")),
)

BEVERAGE_CATEGORIES = frozenset({
    Category.COFFEE,
    Category.TEA,
    Category.SHAKES,
    Category.JUICES,
    Category.ALCOHOLIC,
})


def _match(text: str) -> Optional[Category]:
    for category, keywords in FOOD_CATEGORIES:
        if any(k in text for k in keywords):
            return category
    return None


def classify(dish_name: Optional[str], description: Optional[str] = None) -> Category:
    """
    Map a dish name to its category.

    The dish name always takes precedence; the description is only consulted
    when the name matches nothing. Falls through to Category.GENERAL.
    """
    hit = _match((dish_name or "").lower())
    if hit is None and description:
        hit = _match(description.lower())
    return hit or Category.GENERAL


def is_beverage(category: Category) -> bool:
    return category in BEVERAGE_CATEGORIES
