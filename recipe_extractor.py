import logging
from datetime import timedelta

from constants import (
    DEFAULT_COOK_TIME,
    DEFAULT_PREP_TIME,
    FAVOURITE_FLAG,
    NUTRITION_PROPERTIES,
    RATING_RE,
)
from recipe_models import Recipe, RecipeMetadata, RecipeNutrition
from recipe_node import RecipeNode
from recipe_parser import parse_iso_duration

logger = logging.getLogger(__name__)


def _duration_or_zero(prop_name: str, raw: str) -> timedelta:
    try:
        return parse_iso_duration(raw)
    except ValueError:
        logger.warning("Ignoring unparseable %s %r", prop_name, raw)
        return timedelta()


def _rating_or_zero(node: RecipeNode) -> int:
    raw = node.item_prop_content_or("recipeRating", "0")
    if not RATING_RE.fullmatch(raw):
        logger.warning("Ignoring unparseable recipeRating %r", raw)
        return 0
    return int(raw)


def extract_metadata(node: RecipeNode) -> RecipeMetadata:
    return RecipeMetadata(
        uuid=node.item_prop_content_or("recipeId", ""),
        favorited=node.item_prop_content_or("recipeIsFavourite", "False") == FAVOURITE_FLAG,
        rating=_rating_or_zero(node),
        source=node.item_prop_text("recipeSource"),
        category_list=node.item_prop_content_list("recipeCategory"),
        collection_list=node.item_prop_content_list("recipeCollection"),
        course_list=node.extract_courses(),
        recipe_yield=node.item_prop_text("recipeYield"),
        cook_time=_duration_or_zero("cookTime", node.item_prop_content_or("cookTime", DEFAULT_COOK_TIME)),
        # Only the prep time is trimmed before parsing
        prep_time=_duration_or_zero("prepTime", node.item_prop_content_or("prepTime", DEFAULT_PREP_TIME).strip()),
    )


def extract_nutrition(node: RecipeNode) -> RecipeNutrition:
    values = {
        field_name: node.item_prop_content_or(prop_name, "")
        for field_name, prop_name, _ in NUTRITION_PROPERTIES
    }
    return RecipeNutrition(**values)


def extract_recipe(node: RecipeNode) -> Recipe:
    """Build a Recipe from one container, defaulting whatever is missing."""
    return Recipe(
        title=node.item_prop_text("name"),
        metadata=extract_metadata(node),
        nutrition=extract_nutrition(node),
        photo_paths=node.extract_photos(),
        ingredient_lines=node.item_prop_children_text("recipeIngredients"),
        instruction_lines=node.item_prop_children_text("recipeDirections"),
        notes_lines=node.item_prop_children_text("recipeNotes"),
    )
