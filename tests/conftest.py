"""Shared fixtures for the repository and database tests.

Every test gets its own in-memory SQLite database, so nothing leaks between
tests and no external database is needed.
"""

from __future__ import annotations

from typing import AsyncGenerator, Callable, List

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.database import DatabaseManager
from todo_app.features.todo_lists.domain.entities import TodoItemList
from todo_app.features.todo_lists.infrastructure.models import TodoItemListModel  # noqa: F401 registers the table
from todo_app.features.todo_lists.infrastructure.todo_item_list_repository_sql import (
    TodoItemListRepositorySql,
)

IN_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[DatabaseManager, None]:
    """Create a fresh in-memory database with all tables.

    Yields:
        A DatabaseManager bound to the new database.
    """
    manager = DatabaseManager(IN_MEMORY_URL, echo=False)
    await manager.create_tables()
    try:
        yield manager
    finally:
        await manager.drop_tables()
        await manager.close()


@pytest_asyncio.fixture
async def session(database: DatabaseManager) -> AsyncGenerator[AsyncSession, None]:
    async with database.get_session() as session:
        yield session


@pytest.fixture
def repository(session: AsyncSession) -> TodoItemListRepositorySql:
    return TodoItemListRepositorySql(session)


@pytest.fixture
def make_lists() -> Callable[..., List[TodoItemList]]:
    """Build unsaved todo lists named "List 1".."List n" for one owner."""

    def _make(count: int, user_id: str = "testUser") -> List[TodoItemList]:
        return [TodoItemList(name=f"List {i}", user_id=user_id) for i in range(1, count + 1)]

    return _make
