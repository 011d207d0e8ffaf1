from collections.abc import Callable
import uuid

import pytest

from domain.models import (
    Category,
    Direction,
    Ingredient,
    MainInformation,
    Recipe,
    Unit,
)
from domain.repository import RecipeStore


class FakeKeyValues:
    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.writes = 0

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value


def _make_recipe(name: str, *, category: Category = Category.dinner) -> Recipe:
    return Recipe(
        main_information=MainInformation(
            name=name,
            description=f"All about {name}",
            author="Test Kitchen",
            category=category,
        ),
        ingredients=[
            Ingredient(name="Egg", quantity=2, unit=Unit.none),
            Ingredient(name="Milk", quantity=0.5, unit=Unit.cups),
        ],
        directions=[
            Direction(description="Whisk", is_optional=False),
            Direction(description="Season", is_optional=True),
        ],
    )


@pytest.fixture
def make_recipe() -> Callable[..., Recipe]:
    return _make_recipe


@pytest.fixture
def kv() -> FakeKeyValues:
    return FakeKeyValues()


@pytest.fixture
def store(kv: FakeKeyValues) -> RecipeStore:
    return RecipeStore(kv)


@pytest.fixture
def fixed_id() -> uuid.UUID:
    return uuid.UUID("6f1c1f0e-2c5d-4a0e-9d0e-3f1d2a9b7c11")
