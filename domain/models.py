from enum import Enum
import uuid

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Category(Enum):
    breakfast = "Breakfast"
    lunch = "Lunch"
    dinner = "Dinner"
    dessert = "Dessert"

    @property
    def label(self) -> str:
        return self.value


class Unit(Enum):
    oz = "Ounces"
    g = "Grams"
    cups = "Cups"
    tbs = "Tablespoons"
    tsp = "Teaspoons"
    none = "No units"

    @property
    def label(self) -> str:
        return UNIT_LABELS[self]

    @property
    def singular_name(self) -> str:
        return UNIT_SINGULAR_NAMES[self]


UNIT_LABELS: dict[Unit, str] = {unit: unit.value for unit in Unit}


UNIT_SINGULAR_NAMES: dict[Unit, str] = {
    unit: "" if unit is Unit.none else unit.value[:-1] for unit in Unit
}


class Record(BaseModel):
    """Immutable record. Edit by copying: `record.model_copy(update={...})`.

    Encoded with camelCase keys (`mainInformation`, `isOptional`), constructed
    with either spelling.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MainInformation(Record):
    name: str
    description: str
    author: str
    category: Category


class Ingredient(Record):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str
    quantity: float = Field(ge=0, allow_inf_nan=False)
    unit: Unit

    @property
    def description(self) -> str:
        return format_ingredient(self)

    def __str__(self) -> str:
        return format_ingredient(self)


class Direction(Record):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    description: str
    is_optional: bool


class Recipe(Record):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    main_information: MainInformation
    ingredients: tuple[Ingredient, ...]
    directions: tuple[Direction, ...]

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name={self.main_information.name})>"


def format_quantity(quantity: float) -> str:
    if quantity % 1 == 0:
        return f"{quantity:.0f}"
    return f"{quantity:.1f}"


def format_ingredient(ingredient: Ingredient) -> str:
    """Human readable ingredient, e.g. "2 Tablespoons Olive Oil".

    Unitless ingredients get a plain "s" whenever the quantity is not exactly
    one, so "0 Eggs" and "0.5 Eggs" are both pluralized.
    """
    quantity = format_quantity(ingredient.quantity)

    if ingredient.unit is Unit.none:
        name = ingredient.name if ingredient.quantity == 1 else f"{ingredient.name}s"
        return f"{quantity} {name}"

    if ingredient.quantity == 1:
        return f"1 {ingredient.unit.singular_name} {ingredient.name}"
    return f"{quantity} {ingredient.unit.label} {ingredient.name}"


def sample_recipe() -> Recipe:
    return Recipe(
        main_information=MainInformation(
            name="Classic Margherita Pizza",
            description="A simple yet delicious traditional Italian pizza",
            author="Chef Antonio",
            category=Category.dinner,
        ),
        ingredients=[
            Ingredient(name="Pizza Dough", quantity=1, unit=Unit.none),
            Ingredient(name="Tomato Sauce", quantity=0.5, unit=Unit.cups),
            Ingredient(name="Fresh Mozzarella", quantity=200, unit=Unit.g),
            Ingredient(name="Fresh Basil Leaves", quantity=8, unit=Unit.none),
            Ingredient(name="Olive Oil", quantity=2, unit=Unit.tbs),
        ],
        directions=[
            Direction(description="Preheat oven to 500°F (260°C)", is_optional=False),
            Direction(description="Roll out the pizza dough", is_optional=False),
            Direction(description="Spread tomato sauce evenly", is_optional=False),
            Direction(description="Add torn mozzarella pieces", is_optional=False),
            Direction(description="Bake for 12-15 minutes", is_optional=False),
            Direction(
                description="Add fresh basil leaves and drizzle with olive oil",
                is_optional=False,
            ),
        ],
    )
