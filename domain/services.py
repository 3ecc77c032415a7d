import json
import logging
from typing import Any

from domain.errors import NotFoundError, ParseError, ValidationError
from domain.llm_service import LLMService
from domain.mealdb import MealDBClient
from domain.models import Ingredient, Meal, Recipe, ingredients_from_meal


logger = logging.getLogger(__name__)


def parse_meals(text: str) -> list[Meal] | None:
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"TheMealDB response is not JSON: {text}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Unexpected TheMealDB response: {text}")
    meals = data.get("meals")
    if not meals:
        return None
    # Only the first meal is ever used.
    if not isinstance(meals, list) or not isinstance(meals[0], dict):
        raise ParseError(f"Unexpected meals in TheMealDB response: {text}")
    return meals


def apply_translations(ingredients: list[Ingredient], names: list[str]) -> None:
    """Overwrite ingredient names by position.

    Known limitation: the model may return more or fewer lines than were sent.
    Only the first min(len(ingredients), len(names)) entries are renamed, the
    rest keep their original names.
    """
    if len(names) != len(ingredients):
        logger.warning(
            "Sent %d ingredients for translation, got %d back",
            len(ingredients),
            len(names),
        )
    for ingredient, name in zip(ingredients, names):
        ingredient.name = name


async def find_meal(ingredient: str, *, mealdb: MealDBClient) -> Meal:
    meals = parse_meals(await mealdb.search_by_ingredient(ingredient))
    if meals is None:
        raise NotFoundError(f"No recipes found for '{ingredient}'.")

    try:
        meal_id = str(meals[0]["idMeal"])
    except (KeyError, TypeError) as e:
        raise ParseError(f"Search result without a meal id: {meals[0]}") from e

    meals = parse_meals(await mealdb.lookup(meal_id))
    if meals is None:
        raise NotFoundError(f"No recipe found with id {meal_id}.")
    return meals[0]


async def generate_recipe(
    ingredients: list[str],
    goal: str,
    *,
    mealdb: MealDBClient,
    llm: LLMService,
) -> Recipe:
    if not ingredients:
        raise ValidationError("Provide at least one ingredient.")

    ingredient = ingredients[0].strip().lower()
    ingredient_en = await llm.translate_to_english(ingredient)
    logger.info("Searching recipes for %r (%r)", ingredient_en, ingredient)

    meal = await find_meal(ingredient_en, mealdb=mealdb)
    logger.info("Found meal %s", meal.get("idMeal"))

    name_en = meal.get("strMeal") or ""
    instructions_en = meal.get("strInstructions") or ""
    recipe_ingredients = ingredients_from_meal(meal)

    name = await llm.translate_to_spanish(name_en)
    instructions = await llm.translate_to_spanish(instructions_en)

    translated = await llm.translate_list_to_spanish([i.name for i in recipe_ingredients])
    apply_translations(recipe_ingredients, translated)

    difficulty = await llm.classify_difficulty(instructions)
    recommendation = await llm.recommend(name, goal)
    substitutions = await llm.suggest_substitutions([i.name for i in recipe_ingredients])

    return Recipe(
        name=name,
        category=meal.get("strCategory"),
        area=meal.get("strArea"),
        instructions=instructions,
        image_url=meal.get("strMealThumb"),
        difficulty=difficulty,
        recommendation=recommendation,
        substitutions=substitutions,
        ingredients=recipe_ingredients,
    )
