import pytest

from platecraft.features.food_images.domain.categories import (
    BEVERAGE_CATEGORIES,
    FOOD_CATEGORIES,
    Category,
    classify,
    is_beverage,
)


@pytest.mark.parametrize("dish,expected", [
    ("Cappuccino", Category.COFFEE),
    ("Masala Chai", Category.TEA),
    ("Mango Smoothie", Category.SHAKES),
    ("Orange Juice", Category.JUICES),
    ("Mojito", Category.ALCOHOLIC),
    ("Chicken Biryani", Category.NORTH_INDIAN),
    ("Masala Dosa", Category.SOUTH_INDIAN),
    ("Rasgulla", Category.BENGALI),
    ("Dhokla", Category.GUJARATI),
    ("Sarson da Saag", Category.PUNJABI),
    ("Misal Pav", Category.MAHARASHTRIAN),
    ("Laal Maas", Category.RAJASTHANI),
    ("Puttu", Category.KERALA),
    ("Margherita Pizza", Category.ITALIAN),
    ("Kung Pao Chicken", Category.CHINESE),
    ("Beef Burrito", Category.MEXICAN),
    ("Pad Thai", Category.THAI),
    ("Ratatouille", Category.FRENCH),
    ("Moussaka", Category.GREEK),
    ("Cheeseburger", Category.AMERICAN),
    ("Bibimbap", Category.KOREAN),
    ("Blueberry Pancakes", Category.BREAKFAST),
    ("Club Sandwich", Category.LUNCH),
    ("Lamb Chops", Category.DINNER),
    ("Chocolate Brownies", Category.DESSERTS),
    ("Buttered Popcorn", Category.SNACKS),
    ("Grilled Chicken", Category.GRILLED),
    ("French Fries", Category.FRIED),
    ("Baked Potato", Category.BAKED),
    ("Aloo Tikki Chaat", Category.STREET_FOOD),
])
def test_single_category_match(dish, expected):
    assert classify(dish) is expected


def test_matching_is_case_insensitive():
    assert classify("CAPPUCCINO") is Category.COFFEE
    assert classify("chicken BIRYANI") is Category.NORTH_INDIAN


@pytest.mark.parametrize("dish,expected", [
    # biryani (northIndian) is declared before dosa (southIndian)
    ("Biryani with Masala Dosa", Category.NORTH_INDIAN),
    ("Masala Dosa with Biryani", Category.NORTH_INDIAN),
    # shared keywords resolve to the first declaring category
    ("Vegetable Fried Rice", Category.CHINESE),
    ("Butter Croissant", Category.FRENCH),
    ("Prawn Tempura", Category.JAPANESE),
    ("Falafel Wrap", Category.MEDITERRANEAN),
    ("Salmon Sushi", Category.JAPANESE),
])
def test_earlier_declared_category_wins(dish, expected):
    assert classify(dish) is expected


@pytest.mark.parametrize("dish", ["", "   ", "xyz123 unknown dish", "!!!", "\n\t", "🍽️", None])
def test_unmatched_names_fall_back_to_general(dish):
    assert classify(dish) is Category.GENERAL


def test_description_used_only_when_name_has_no_match():
    assert classify("Chef's Special", "a creamy risotto") is Category.ITALIAN
    assert classify("Cappuccino", "served with tiramisu") is Category.COFFEE
    assert classify("xyz123 unknown dish", "a test dish") is Category.GENERAL


def test_declaration_order_is_stable():
    assert [c.value for c, _ in FOOD_CATEGORIES] == [
        "coffee", "tea", "shakes", "juices", "alcoholic",
        "northIndian", "southIndian", "bengali", "gujarati", "punjabi",
        "maharashtrian", "rajasthani", "kerala",
        "italian", "chinese", "mexican", "japanese", "thai", "french",
        "greek", "mediterranean", "american", "korean",
        "breakfast", "lunch", "dinner", "desserts", "snacks",
        "grilled", "fried", "baked", "steamed",
        "streetFood",
    ]


def test_every_category_except_general_has_keywords():
    declared = {c for c, _ in FOOD_CATEGORIES}
    assert declared | {Category.GENERAL} == set(Category)
    assert all(keywords for _, keywords in FOOD_CATEGORIES)
    assert all(k == k.lower() for _, keywords in FOOD_CATEGORIES for k in keywords)


def test_beverage_categories():
    assert BEVERAGE_CATEGORIES == {
        Category.COFFEE, Category.TEA, Category.SHAKES, Category.JUICES, Category.ALCOHOLIC,
    }
    assert is_beverage(Category.COFFEE)
    assert not is_beverage(Category.GENERAL)
    assert not is_beverage(Category.DESSERTS)


@pytest.mark.parametrize("dish,expected", [
    # substring matching is not word-aware: "steak" and "steamed" contain "tea"
    ("Grilled Steak", Category.TEA),
    ("Steamed Fish", Category.TEA),
    ("Ginger Chicken", Category.ALCOHOLIC),
    # bengali "fish curry" is declared before kerala "kerala fish curry"
    ("Kerala Fish Curry", Category.BENGALI),
])
def test_known_substring_collisions(dish, expected):
    assert classify(dish) is expected
