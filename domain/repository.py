import asyncio
import logging
from typing import Protocol

from domain.codec import (
    RecipeDecodeError,
    RecipeEncodeError,
    decode_recipes,
    encode_recipes,
)
from domain.models import Recipe


logger = logging.getLogger(__name__)


RECIPES_KEY = "savedRecipes"


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class RecipeStore:
    """Owns the durable recipe collection, stored as one blob under one key.

    Every mutation reads the whole collection, changes it and writes the whole
    collection back, holding `lock` for the entire cycle.

    Bad data never reaches the caller: an undecodable blob reads as an empty
    collection and a collection that cannot be encoded is not written. Both are
    logged.
    """

    def __init__(self, kv: KeyValueStore, *, key: str = RECIPES_KEY) -> None:
        self.kv = kv
        self.key = key
        self.lock = asyncio.Lock()

    async def _read(self) -> list[Recipe]:
        blob = await self.kv.get(self.key)
        if blob is None:
            return []
        try:
            return decode_recipes(blob)
        except RecipeDecodeError as e:
            logger.warning("Could not decode %s, reading as empty: %s", self.key, e)
            return []

    async def _write(self, recipes: list[Recipe]) -> None:
        try:
            blob = encode_recipes(recipes)
        except RecipeEncodeError as e:
            logger.error("Could not encode %s, skipping write: %s", self.key, e)
            return
        await self.kv.set(self.key, blob)
        logger.info("Wrote %d recipes to %s", len(recipes), self.key)

    async def add(self, recipe: Recipe) -> None:
        async with self.lock:
            recipes = await self._read()
            recipes.append(recipe)
            await self._write(recipes)

    async def update(self, recipe: Recipe) -> None:
        async with self.lock:
            recipes = await self._read()
            for i, existing in enumerate(recipes):
                if existing.id == recipe.id:
                    recipes[i] = recipe
                    break
            else:
                logger.debug("No recipe with id %s, nothing to update", recipe.id)
                return
            await self._write(recipes)

    async def delete_at(self, index: int) -> None:
        async with self.lock:
            recipes = await self._read()
            if not 0 <= index < len(recipes):
                raise IndexError(f"No recipe at {index}, have {len(recipes)}")
            del recipes[index]
            await self._write(recipes)

    async def list(self) -> tuple[Recipe, ...]:
        async with self.lock:
            recipes = await self._read()
        return tuple(recipes)
