import logging
from datetime import timedelta

import pytest
from bs4 import BeautifulSoup

from recipe_extractor import extract_metadata, extract_nutrition, extract_recipe
from recipe_node import RecipeNode


def _node(inner: str) -> RecipeNode:
    soup = BeautifulSoup(f'<div class="recipe-details">{inner}</div>', "lxml")
    return RecipeNode(soup.select_one("div.recipe-details"))


def test_missing_prep_time_defaults_to_fifty_seconds():
    metadata = extract_metadata(_node(""))

    assert metadata.prep_time == timedelta(seconds=50)
    assert metadata.cook_time == timedelta(0)
    assert metadata.rating == 0
    assert metadata.uuid == ""
    assert metadata.category_list == []
    assert metadata.collection_list == []
    assert metadata.course_list == []


def test_favourite_flag_must_be_exact():
    assert extract_metadata(_node('<meta itemprop="recipeIsFavourite" content="True">')).favorited is True
    assert extract_metadata(_node('<meta itemprop="recipeIsFavourite" content="true">')).favorited is False
    assert extract_metadata(_node('<meta itemprop="recipeIsFavourite" content="TRUE">')).favorited is False


def test_bad_durations_and_rating_fall_back_quietly(caplog):
    node = _node(
        '<meta itemprop="prepTime" content="20 minutes">'
        '<meta itemprop="cookTime" content="P1D">'
        '<meta itemprop="recipeRating" content="five">'
    )
    with caplog.at_level(logging.WARNING, logger="recipe_extractor"):
        metadata = extract_metadata(node)

    assert metadata.prep_time == timedelta(0)
    assert metadata.cook_time == timedelta(0)
    assert metadata.rating == 0
    assert "prepTime" in caplog.text
    assert "recipeRating" in caplog.text


def test_metadata_reads_every_field():
    node = _node(
        '<meta itemprop="recipeId" content="abc-123">'
        '<meta itemprop="recipeRating" content="4">'
        '<span itemprop="recipeSource">Grandma</span>'
        '<meta itemprop="recipeCategory" content="Soup">'
        '<meta itemprop="recipeCollection" content="Winter">'
        '<span itemprop="recipeCourse">Dinner</span>'
        '<span itemprop="recipeYield">4 servings</span>'
        '<meta itemprop="prepTime" content=" PT15M ">'
        '<meta itemprop="cookTime" content="PT1H30M">'
    )
    metadata = extract_metadata(node)

    assert metadata.uuid == "abc-123"
    assert metadata.rating == 4
    assert metadata.source == "Grandma"
    assert metadata.category_list == ["Soup"]
    assert metadata.collection_list == ["Winter"]
    assert metadata.course_list == ["Dinner"]
    assert metadata.recipe_yield == "4 servings"
    assert metadata.prep_time == timedelta(minutes=15)
    assert metadata.cook_time == timedelta(hours=1, minutes=30)


def test_extract_nutrition_keeps_free_text():
    nutrition = extract_nutrition(_node(
        '<meta itemprop="recipeNutServingSize" content="1 bowl">'
        '<meta itemprop="recipeNutCalories" content="320 kcal">'
        '<meta itemprop="recipeNutProtein" content="about 12g">'
    ))

    assert nutrition.serving == "1 bowl"
    assert nutrition.calories == "320 kcal"
    assert nutrition.protein == "about 12g"
    assert nutrition.sodium == ""


def test_extract_recipe_assembles_lines_and_photos():
    recipe = extract_recipe(_node(
        '<h2 itemprop="name">Soup</h2>'
        '<meta itemprop="recipeId" content="abc-123">'
        '<img class="recipe-photos" src="images/soup.jpg">'
        '<div itemprop="recipeIngredients"><p>1 ½ cups broth</p><p> </p></div>'
        '<div itemprop="recipeDirections"><p>Heat.</p><p>Serve.</p></div>'
    ))

    assert recipe.title == "Soup"
    assert recipe.output_name == "abc-123.md"
    assert recipe.photo_paths == ["images/soup.jpg"]
    assert recipe.ingredient_lines == ["1 1/2 cups broth"]
    assert recipe.instruction_lines == ["Heat.", "Serve."]
    assert recipe.notes_lines == []


def test_empty_container_still_builds_a_recipe():
    recipe = extract_recipe(_node(""))

    assert recipe.title == ""
    assert recipe.output_name == ".md"
    assert recipe.ingredient_lines == []


def test_huge_duration_falls_back_to_default():
    metadata = extract_metadata(_node('<meta itemprop="cookTime" content="PT99999999999999H">'))

    assert metadata.cook_time == timedelta(0)


def test_only_prep_time_is_trimmed():
    metadata = extract_metadata(_node(
        '<meta itemprop="prepTime" content=" PT5M ">'
        '<meta itemprop="cookTime" content=" PT5M">'
    ))

    assert metadata.prep_time == timedelta(minutes=5)
    assert metadata.cook_time == timedelta(0)


@pytest.mark.parametrize("content", [" 4", "4 ", "4_0", "٤", "4.0", ""])
def test_rating_must_be_plain_ascii_integer(content):
    metadata = extract_metadata(_node(f'<meta itemprop="recipeRating" content="{content}">'))

    assert metadata.rating == 0


@pytest.mark.parametrize("content, expected", [("5", 5), ("+3", 3), ("-1", -1)])
def test_rating_accepts_signed_integers(content, expected):
    metadata = extract_metadata(_node(f'<meta itemprop="recipeRating" content="{content}">'))

    assert metadata.rating == expected
