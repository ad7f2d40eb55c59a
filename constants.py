import re
from typing import Dict, List, Pattern, Tuple

FRACTIONS: Dict[str, str] = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
}

# Years and months are matched but never counted
ISO_DURATION_RE: Pattern[str] = re.compile(
    r"^P(?:(\d+)Y)?(?:(\d+)M)?(?:(\d+)D)?T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+(?:\.\d+)?)S)?\Z",
    re.ASCII,
)

PROPERTY_ATTR = "itemprop"
RECIPE_CONTAINER_SELECTOR = "div.recipe-details"
PHOTO_CLASS = "recipe-photos"

RATING_RE: Pattern[str] = re.compile(r"[+-]?[0-9]+")

DEFAULT_PREP_TIME = "PT50S"
DEFAULT_COOK_TIME = "PT0S"
FAVOURITE_FLAG = "True"

NUTRITION_PROPERTIES: List[Tuple[str, str, str]] = [
    ("serving", "recipeNutServingSize", "Serving size"),
    ("calories", "recipeNutCalories", "Calories"),
    ("total_fat", "recipeNutTotalFat", "Total fat"),
    ("saturated_fat", "recipeNutSaturatedFat", "Saturated fat"),
    ("sodium", "recipeNutSodium", "Sodium"),
    ("total_carbohydrate", "recipeNutTotalCarbohydrate", "Total carbohydrate"),
    ("dietary_fiber", "recipeNutDietaryFiber", "Dietary fiber"),
    ("sugars", "recipeNutSugars", "Sugars"),
    ("protein", "recipeNutProtein", "Protein"),
]

DEFAULT_OUT_DIR = "./recipes"
