"""Encoding of the whole recipe collection into a single blob.

The blob is a JSON envelope carrying a version tag:

    {"version": 1, "recipes": [{"id": ..., "mainInformation": {...}, ...}]}

A bare JSON array of recipes (no envelope) is read as version 1.
"""
from collections.abc import Iterable

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from domain.models import Recipe


ARCHIVE_VERSION = 1


class RecipeStoreError(Exception):
    pass


class RecipeDecodeError(RecipeStoreError):
    pass


class RecipeEncodeError(RecipeStoreError):
    pass


class RecipeArchive(BaseModel):
    version: int = ARCHIVE_VERSION
    recipes: list[Recipe]


BLOB_ADAPTER: TypeAdapter[RecipeArchive | list[Recipe]] = TypeAdapter(
    RecipeArchive | list[Recipe]
)


def encode_recipes(recipes: Iterable[Recipe]) -> str:
    archive = RecipeArchive(recipes=list(recipes))
    try:
        return archive.model_dump_json(by_alias=True)
    except PydanticSerializationError as e:
        raise RecipeEncodeError(str(e)) from e


def decode_recipes(blob: str | bytes) -> list[Recipe]:
    # Malformed or too deeply nested JSON is a ValidationError too.
    try:
        data = BLOB_ADAPTER.validate_json(blob)
    except ValidationError as e:
        raise RecipeDecodeError(str(e)) from e

    if isinstance(data, list):
        return data

    if data.version != ARCHIVE_VERSION:
        raise RecipeDecodeError(f"Unsupported version: {data.version}")

    return data.recipes
