import pydantic
import pytest

from domain.errors import ParseError
from domain.models import Ingredient, Recipe, RecipeRequest, ingredients_from_meal
from tests.fakes import meal_52772


def test_ingredients_from_meal_skips_blank_entries() -> None:
    meal = {
        "strIngredient1": "Chicken",
        "strMeasure1": "1 kg",
        "strIngredient2": "   ",
        "strMeasure2": "pinch",
        "strIngredient3": "Salt",
        "strMeasure3": "1 tsp",
        "strIngredient4": "",
        "strMeasure4": "",
        "strIngredient5": None,
        "strMeasure5": None,
        "strIngredient6": "Pepper",
        "strMeasure6": None,
    }

    got = ingredients_from_meal(meal)

    assert got == [
        Ingredient(name="Chicken", measure="1 kg"),
        Ingredient(name="Salt", measure="1 tsp"),
        Ingredient(name="Pepper", measure=""),
    ]


def test_ingredients_from_meal_needs_both_fields() -> None:
    meal = {"strIngredient1": "Salt", "strIngredient2": "Oil", "strMeasure2": "2 tbsp"}
    assert ingredients_from_meal(meal) == [Ingredient(name="Oil", measure="2 tbsp")]


def test_ingredients_from_meal_stops_at_twenty() -> None:
    meal = {}
    for i in range(1, 23):
        meal[f"strIngredient{i}"] = f"ingredient {i}"
        meal[f"strMeasure{i}"] = f"{i} g"

    got = ingredients_from_meal(meal)

    assert len(got) == 20
    assert got[-1].name == "ingredient 20"


def test_ingredients_from_full_meal() -> None:
    got = ingredients_from_meal(meal_52772())
    assert [i.name for i in got] == ["soy sauce", "water", "brown sugar", "chicken breasts"]


@pytest.mark.parametrize(
    "body",
    (
        {"ingredients": ["pollo"], "goal": "perder peso"},
        {"ingredientes": ["pollo"], "objetivo": "perder peso"},
    ),
)
def test_recipe_request_field_names(body: dict) -> None:
    request = RecipeRequest.model_validate(body)
    assert request.ingredients == ["pollo"]
    assert request.goal == "perder peso"


def test_recipe_request_defaults() -> None:
    request = RecipeRequest.model_validate({})
    assert request.ingredients == []
    assert request.goal == ""


def test_recipe_request_rejects_wrong_types() -> None:
    with pytest.raises(pydantic.ValidationError):
        RecipeRequest.model_validate({"ingredients": "pollo"})


def recipe() -> Recipe:
    return Recipe(
        name="Cazuela",
        category="Chicken",
        area="Japanese",
        instructions="Hornear.",
        image_url="https://example.com/cazuela.jpg",
        difficulty="Fácil",
        recommendation="Con arroz integral.",
        substitutions=["Tamari en lugar de salsa de soja"],
        ingredients=[Ingredient(name="agua", measure="1/2 cup")],
    )


def test_recipe_to_dict() -> None:
    assert recipe().to_dict() == {
        "name": "Cazuela",
        "category": "Chicken",
        "area": "Japanese",
        "instructions": "Hornear.",
        "imageUrl": "https://example.com/cazuela.jpg",
        "difficulty": "Fácil",
        "recommendation": "Con arroz integral.",
        "substitutions": ["Tamari en lugar de salsa de soja"],
        "ingredients": [{"name": "agua", "measure": "1/2 cup"}],
    }


def test_recipe_is_frozen() -> None:
    with pytest.raises(pydantic.ValidationError):
        recipe().name = "Otra"


@pytest.mark.parametrize(
    "meal",
    (
        {"strIngredient1": 5, "strMeasure1": "1 cup"},
        {"strIngredient1": ["Salt"], "strMeasure1": "1 tsp"},
        {"strIngredient1": "Salt", "strMeasure1": 1},
    ),
)
def test_ingredients_from_meal_rejects_unexpected_values(meal: dict) -> None:
    with pytest.raises(ParseError):
        ingredients_from_meal(meal)


def test_ingredients_from_meal_ignores_measure_of_blank_slot() -> None:
    meal = {
        "strIngredient1": "",
        "strMeasure1": 0,
        "strIngredient2": "Salt",
        "strMeasure2": "1 tsp",
    }
    assert ingredients_from_meal(meal) == [Ingredient(name="Salt", measure="1 tsp")]
