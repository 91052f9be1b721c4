# src/platecraft/features/food_images/domain/prompts.py
"""
Food photography prompt composer.

compose() assembles the prompt sent to the image model in a fixed order:

  1. header naming the dish
  2. serving description (dish keyword, then category)
  3. caller description, verbatim
  4. cuisine styling (cuisine type -> category -> "traditional")
  5. plating styling (plating -> "elegant")
  6. photography boilerplate
  7. texture clause (beverage vs. solid food)
  8. background clause

Every lookup has a default, so the composer is total over its inputs and
never emits an empty fragment. The output is a single line of plain text;
JSON escaping is left to whoever serializes it.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .categories import Category, classify, is_beverage

DEFAULT_CUISINE_TYPE = "modern"
DEFAULT_PLATING = "elegant"
FALLBACK_CUISINE_KEY = "traditional"

HEADER_TEMPLATE = "Professional food photography of {dish_name}, "

GENERIC_SERVING = "beautifully presented with authentic ingredients and careful traditional preparation, "

# Checked in order against the lower-cased dish name before the category table.
# A hit is placed ahead of the category clause and replaces GENERIC_SERVING.
DISH_SERVING_OVERRIDES: Tuple[Tuple[str, str], ...] = (
    ("biryani", "aromatic basmati rice layered with tender marinated meat, garnished with fried onions, fresh mint leaves and saffron, "),
    ("curry", "rich and flavorful curry with tender pieces of meat or vegetables in aromatic spices and thick gravy, "),
    ("greek salad", "fresh Mediterranean salad with crisp lettuce, ripe tomatoes, cucumber, red onions, kalamata olives and feta cheese, drizzled with olive oil, "),
    ("prawns", "succulent prawns cooked to perfection with aromatic spices and herbs, "),
)

SERVING_DESCRIPTIONS: Dict[Category, str] = {
    Category.COFFEE: "in a beautiful ceramic cup with artistic latte art, warm steam rising, cozy café lighting, ",
    Category.TEA: "in a delicate porcelain teacup with saucer, loose tea leaves and a small teapot nearby, gentle steam, ",
    Category.SHAKES: "in a tall glass with whipped cream and fresh garnish, thick creamy consistency, a striped paper straw, ",
    Category.JUICES: "in a tall glass with fresh fruit slices on the rim, vibrant colors, refreshing presentation, ",
    Category.ALCOHOLIC: "in an appropriate glass with proper garnish, elegant bar setting, professional cocktail photography, ",
    Category.NORTH_INDIAN: "served in traditional copper or brass serving dishes, garnished with fresh cilantro and mint, ",
    Category.SOUTH_INDIAN: "served on banana leaf or traditional south Indian serving plates, accompanied by coconut chutney and sambar, ",
    Category.BENGALI: "served in a bell metal thala with steamed rice, mustard oil sheen, garnished with green chillies, ",
    Category.GUJARATI: "arranged on a steel thali with small katoris, sprinkled with mustard seeds, curry leaves and fresh coconut, ",
    Category.PUNJABI: "served in traditional copper or brass serving dishes with a dollop of white butter, garnished with fresh cilantro and mint, ",
    Category.MAHARASHTRIAN: "served on a steel plate with chopped onions, lemon wedges and spicy green chutney, ",
    Category.RAJASTHANI: "served on a brass thali with ghee drizzled generously, desert-inspired rustic accompaniments, ",
    Category.KERALA: "served on a fresh banana leaf with coconut-based accompaniments and curry leaves, ",
    Category.ITALIAN: "beautifully plated with fresh herbs, parmesan cheese, Italian table setting, ",
    Category.CHINESE: "in traditional Chinese serving bowls with chopsticks, elegant Asian presentation, ",
    Category.MEXICAN: "colorfully presented with fresh cilantro, lime wedges, vibrant Mexican styling, ",
    Category.JAPANESE: "minimalist Japanese presentation, clean lines, traditional Japanese dishware, ",
    Category.THAI: "served in a carved wooden bowl with Thai basil, lime wedges and sliced bird's eye chillies, ",
    Category.FRENCH: "delicately plated on fine white porcelain with a classic bistro table setting, ",
    Category.GREEK: "served on a rustic white plate with olives, crumbled feta and a drizzle of olive oil, ",
    Category.MEDITERRANEAN: "arranged on a rustic ceramic platter with warm pita, fresh herbs and lemon wedges, ",
    Category.AMERICAN: "served diner-style with generous portions on a classic plate, ",
    Category.KOREAN: "served in stone bowls with an array of colorful banchan side dishes and metal chopsticks, ",
    Category.BREAKFAST: "on a bright breakfast table with morning light, fresh berries and a drizzle of syrup, ",
    Category.LUNCH: "neatly cut and arranged on a wooden board with a light side salad, ",
    Category.DINNER: "plated as a hearty main course with seasonal sides and a rich jus, ",
    Category.DESSERTS: "beautifully plated dessert with artistic presentation, elegant garnish, fine dining styling, ",
    Category.SNACKS: "casually arranged in a small bowl, shareable snack presentation, ",
    Category.GRILLED: "fresh off the grill on a cast iron platter, smoky char, charred lemon on the side, ",
    Category.FRIED: "golden and crisp, served in a paper-lined basket with dipping sauce, ",
    Category.BAKED: "straight from the oven in a ceramic baking dish, golden bubbling top, ",
    Category.STEAMED: "served in a bamboo steamer basket with a light dipping sauce, ",
    Category.STREET_FOOD: "authentic street food presentation, casual serving, vibrant and appetizing, ",
}

# Keys are normalize_style_key() forms. Category tags appear here too so an
# unknown cuisine type can fall back to the dish's own category.
CUISINE_STYLES: Dict[str, str] = {
    "indian": "vibrant spices, colorful garnishes, traditional Indian serving style",
    "chinese": "elegant Asian presentation, bamboo elements, traditional Chinese aesthetics",
    "italian": "rustic Italian charm, fresh herbs, Mediterranean styling",
    "mexican": "colorful Mexican presentation, fresh cilantro and lime, vibrant styling",
    "american": "classic American diner style, generous portions, comfort food presentation",
    "french": "elegant French culinary art, sophisticated plating, fine dining presentation",
    "japanese": "minimalist Japanese aesthetics, clean presentation, traditional elements",
    "thai": "authentic Thai styling, fresh herbs, traditional Thai presentation",
    "mediterranean": "fresh Mediterranean ingredients, olive oil drizzle, coastal vibes",
    "greek": "sun-drenched Greek taverna styling, whitewashed and blue accents",
    "korean": "modern Korean styling, balanced colors, traditional banchan arrangement",
    "modern": "contemporary plating, artistic presentation, modern culinary techniques",
    "traditional": "traditional presentation, authentic garnishes, time-honored serving style",
    "northindian": "rich Mughlai styling, copper handi, vibrant spices and fresh herbs",
    "southindian": "temple-town South Indian styling, banana leaf, coconut and curry leaves",
    "bengali": "homely Bengali styling, mustard and panch phoron notes, bell metal tableware",
    "gujarati": "colorful Gujarati thali styling, sweet and savory balance",
    "punjabi": "hearty Punjabi dhaba styling, generous butter and robust spices",
    "maharashtrian": "Mumbai-style Maharashtrian presentation, bold spices and fresh toppings",
    "rajasthani": "royal Rajasthani styling, brass tableware and ghee-rich textures",
    "kerala": "coastal Kerala styling, coconut, curry leaves and banana leaf",
    "streetfood": "lively street-side styling, handheld servings, bold colors",
}

PLATING_STYLES: Dict[str, str] = {
    "elegant": "fine dining presentation, sophisticated plating, restaurant quality",
    "rustic": "rustic homestyle presentation, comfort food styling, cozy atmosphere",
    "modern": "modern artistic plating, contemporary styling, geometric arrangements",
    "traditional": "traditional cultural presentation, authentic serving style, heritage styling",
    "casual": "casual home-style presentation, comfortable and inviting, everyday dining",
    "street": "street-style serving in paper plates or leaf bowls, hands-on and unpretentious",
    "fine_dining": "Michelin-star tasting menu plating, precise tweezered garnish, negative space",
    "festive": "festive celebration spread, decorative accents, abundant and joyful arrangement",
}

PHOTOGRAPHY_BOILERPLATE = (
    "shot with a professional DSLR camera, studio lighting, soft shadows, high-resolution 4K quality, "
    "shallow depth of field with background blur, natural and realistic colors, professional composition, "
    "overhead or 45-degree angle, commercial food photography style"
)

BEVERAGE_TEXTURE = "crisp liquid surface, light reflecting off the glassware"
BEVERAGE_TEXTURES: Dict[Category, str] = {
    Category.COFFEE: "delicate steam curling above the cup, rich crema and velvety microfoam",
    Category.TEA: "wisps of steam rising, translucent amber liquid",
    Category.SHAKES: "thick creamy texture, condensation beading on the glass",
    Category.JUICES: "fresh condensation droplets, pulp and translucent vibrant liquid",
    Category.ALCOHOLIC: "crystal-clear ice, light refracting through the glass",
}

FOOD_TEXTURE = "detailed food textures, garnish details visible, mouth-watering presentation"
FOOD_TEXTURES: Dict[Category, str] = {
    Category.NORTH_INDIAN: "steam rising from hot food, rich gravy sheen",
    Category.PUNJABI: "steam rising from hot food, melting butter",
    Category.SOUTH_INDIAN: "crisp golden edges, soft fluffy interior",
    Category.CHINESE: "glossy sauce finish, wok-tossed sheen",
    Category.ITALIAN: "melted cheese pull, glistening olive oil",
    Category.JAPANESE: "pristine knife cuts, delicate translucent textures",
    Category.KOREAN: "glossy gochujang glaze, sizzling heat",
    Category.GRILLED: "perfect grill marks and char, juicy glistening surface",
    Category.FRIED: "golden crispy crust, crunchy texture",
    Category.BAKED: "golden-brown baked surface, flaky layers",
    Category.STEAMED: "soft steam rising, tender glossy skin",
    Category.DESSERTS: "silky smooth finish, delicate sugar work and crumbs",
    Category.STREET_FOOD: "steam rising from hot food, crisp and saucy textures",
}

BACKGROUND_NEUTRAL = "clean neutral background"
BACKGROUNDS: Dict[str, str] = {
    "beverage": "softly blurred café or bar background with warm bokeh",
    "street": "rustic street-side backdrop with weathered wood and warm market lights",
    "zen": "serene zen backdrop with dark slate, bamboo and natural wood",
    "luxury": "luxurious fine dining backdrop with white linen and polished silverware",
    "rustic": "rustic wooden table backdrop with linen napkins",
    "festive": "festive table backdrop with candles and decorations",
}

_BREAKS = re.compile(r"[\r\n\t\v\f\x85\u2028\u2029]+")


@dataclass(frozen=True)
class DishRequest:
    dish_name: str
    description: Optional[str] = None
    cuisine_type: str = DEFAULT_CUISINE_TYPE
    plating: str = DEFAULT_PLATING


def normalize_style_key(value: Optional[str]) -> str:
    if not value:
        return ""
    return "_".join(value.strip().lower().replace("-", " ").split())


def _one_line(text: str) -> str:
    return _BREAKS.sub(" ", text)


def resolve_cuisine_style(cuisine_type: Optional[str], category: Category) -> str:
    style = CUISINE_STYLES.get(normalize_style_key(cuisine_type))
    if style is None:
        style = CUISINE_STYLES.get(normalize_style_key(category.value))
    return style or CUISINE_STYLES[FALLBACK_CUISINE_KEY]


def resolve_plating_style(plating: Optional[str]) -> str:
    return PLATING_STYLES.get(normalize_style_key(plating)) or PLATING_STYLES[DEFAULT_PLATING]


def _serving_clause(dish_name: Optional[str], category: Category) -> str:
    lowered = (dish_name or "").lower()
    dish_clause = next((clause for keyword, clause in DISH_SERVING_OVERRIDES if keyword in lowered), "")
    category_clause = SERVING_DESCRIPTIONS.get(category)
    if category_clause is None:
        return dish_clause or GENERIC_SERVING
    return dish_clause + category_clause


def _texture_clause(category: Category) -> str:
    if is_beverage(category):
        return f"{BEVERAGE_TEXTURE}, {BEVERAGE_TEXTURES[category]}"
    extra = FOOD_TEXTURES.get(category)
    return f"{FOOD_TEXTURE}, {extra}" if extra else FOOD_TEXTURE


def _background_clause(category: Category, plating: Optional[str]) -> str:
    if is_beverage(category):
        return BACKGROUNDS["beverage"]
    if category is Category.STREET_FOOD:
        return BACKGROUNDS["street"]
    if category in (Category.JAPANESE, Category.KOREAN):
        return BACKGROUNDS["zen"]

    key = normalize_style_key(plating)
    if key not in PLATING_STYLES:
        key = DEFAULT_PLATING
    if key in ("elegant", "fine_dining"):
        return BACKGROUNDS["luxury"]
    if key == "street":
        return BACKGROUNDS["street"]
    if key in ("rustic", "festive"):
        return BACKGROUNDS[key]
    return BACKGROUND_NEUTRAL


def compose(request: DishRequest, category: Category) -> str:
    parts = [HEADER_TEMPLATE.format(dish_name=_one_line((request.dish_name or "").strip()))]
    parts.append(_serving_clause(request.dish_name, category))
    description = (request.description or "").strip()
    if description:
        parts.append(f"{_one_line(description)}, ")
    parts.append(f"{resolve_cuisine_style(request.cuisine_type, category)}, ")
    parts.append(f"{resolve_plating_style(request.plating)}. ")
    parts.append(f"{PHOTOGRAPHY_BOILERPLATE}, ")
    parts.append(f"{_texture_clause(category)}, ")
    parts.append(f"{_background_clause(category, request.plating)}.")
    return "".join(parts)


def build_food_prompt(
    dish_name: str,
    description: Optional[str] = None,
    cuisine_type: Optional[str] = None,
    plating: Optional[str] = None,
) -> str:
    """Classify the dish and compose its prompt in one step."""
    request = DishRequest(
        dish_name=dish_name,
        description=description,
        cuisine_type=cuisine_type or DEFAULT_CUISINE_TYPE,
        plating=plating or DEFAULT_PLATING,
    )
    return compose(request, classify(dish_name, description))
