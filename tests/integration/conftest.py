import os
from contextlib import suppress
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from visualizer.config.settings import Settings
from visualizer.database.connection import close_pool, init_pool
from visualizer.database.document_repository import PostgresDocumentStore
from visualizer.documents.exceptions import DocumentNotFoundError


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "visualizer_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest_asyncio.fixture
async def postgres_store(test_settings: Settings) -> AsyncGenerator[PostgresDocumentStore, None]:
    try:
        await init_pool(test_settings)
    except Exception as e:
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    store = PostgresDocumentStore()
    await store.ensure_schema()
    try:
        yield store
    finally:
        await close_pool()


@pytest_asyncio.fixture
async def created_ids(postgres_store: PostgresDocumentStore) -> AsyncGenerator[list[str], None]:
    ids: list[str] = []
    yield ids
    for document_id in ids:
        with suppress(DocumentNotFoundError):
            await postgres_store.delete(document_id)
