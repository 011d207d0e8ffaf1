from collections.abc import AsyncIterator
import contextlib
import logging

from databases import Database

import config
from domain.repository import RecipeStore


logger = logging.getLogger(__name__)


CREATE_KEY_VALUES_TABLE = """
CREATE TABLE IF NOT EXISTS KeyValues (key VARCHAR(256) PRIMARY KEY, value TEXT)
"""


GET_VALUE = "SELECT value FROM KeyValues WHERE key = :key"


SET_VALUE = """
INSERT INTO KeyValues(key, value) VALUES (:key, :value)
ON CONFLICT(key) DO UPDATE SET value = excluded.value
"""


DELETE_VALUE = "DELETE FROM KeyValues WHERE key = :key"


async def create_db(db: Database) -> None:
    await db.execute(  # pyright: ignore[reportUnknownMemberType]
        query=CREATE_KEY_VALUES_TABLE
    )


class KeyValueRepository:
    """Key-value pairs in a single table."""

    def __init__(self, db: Database) -> None:
        self.db = db

    async def get(self, key: str) -> str | None:
        result = await self.db.fetch_one(  # pyright: ignore[reportUnknownMemberType]
            GET_VALUE, values={"key": key}
        )
        if result is None:
            return None
        return result["value"]

    async def set(self, key: str, value: str) -> None:
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            SET_VALUE, values={"key": key, "value": value}
        )

    async def delete(self, key: str) -> None:
        await self.db.execute(  # pyright: ignore[reportUnknownMemberType]
            DELETE_VALUE, values={"key": key}
        )


@contextlib.asynccontextmanager
async def open_store(cfg: config.Config | None = None) -> AsyncIterator[RecipeStore]:
    """Connect, make sure the table exists, and hand out a `RecipeStore`.

    The connection is closed when the block exits.
    """
    cfg = config.Config() if cfg is None else cfg

    db = Database(cfg.db_url)
    await db.connect()
    try:
        await create_db(db)
        logger.info("Opened %s", cfg.db_url)
        yield RecipeStore(KeyValueRepository(db), key=cfg.recipes_key)
    finally:
        await db.disconnect()
