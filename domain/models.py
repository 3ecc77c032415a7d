from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.errors import ParseError


# TheMealDB lays ingredients out as strIngredient1..20 / strMeasure1..20.
MAX_INGREDIENTS = 20
INGREDIENT_FIELD = "strIngredient{}"
MEASURE_FIELD = "strMeasure{}"


type Meal = dict[str, Any]


class RecipeRequest(BaseModel):
    ingredients: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("ingredients", "ingredientes"),
    )
    goal: str = Field(
        default="",
        validation_alias=AliasChoices("goal", "objetivo"),
    )


class Ingredient(BaseModel):
    name: str
    measure: str = ""


class Recipe(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str
    category: str | None = None
    area: str | None = None
    instructions: str
    image_url: str | None = None
    difficulty: str
    recommendation: str
    substitutions: list[str]
    ingredients: list[Ingredient]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def ingredients_from_meal(meal: Meal) -> list[Ingredient]:
    """Collect the non-blank ingredient/measure pairs of a meal, in order."""
    ingredients: list[Ingredient] = []
    for i in range(1, MAX_INGREDIENTS + 1):
        ingredient_field = INGREDIENT_FIELD.format(i)
        measure_field = MEASURE_FIELD.format(i)
        if ingredient_field not in meal or measure_field not in meal:
            continue
        name = meal[ingredient_field]
        if name is not None and not isinstance(name, str):
            raise ParseError(f"Unexpected {ingredient_field} in meal: {name!r}")
        if not name or not name.strip():
            continue
        measure = meal[measure_field] or ""
        if not isinstance(measure, str):
            raise ParseError(f"Unexpected {measure_field} in meal: {measure!r}")
        ingredients.append(Ingredient(name=name, measure=measure))
    return ingredients
