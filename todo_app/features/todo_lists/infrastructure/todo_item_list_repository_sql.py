"""SQLAlchemy implementation of the TodoItemListRepository interface."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_app.core.logger import get_logger
from todo_app.features.todo_lists.domain.entities import TodoItemList
from todo_app.features.todo_lists.domain.repository_interface import TodoItemListRepository
from todo_app.features.todo_lists.infrastructure.models import TodoItemListModel
from todo_app.shared.exceptions import RepositoryError, TodoItemListNotFoundError
from todo_app.shared.helpers import current_timestamp
from todo_app.shared.pagination import PagedResult, PaginationRequest, encode_cursor


logger = get_logger(__name__)

# --- Mappers to convert between domain entities and DB models ---

def _to_todo_item_list_entity(model: TodoItemListModel) -> TodoItemList:
    """Converts a TodoItemListModel (SQLAlchemy) to a TodoItemList (domain entity)."""
    return TodoItemList(
        id=model.id,
        name=model.name,
        user_id=model.user_id,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )

def _to_todo_item_list_model(entity: TodoItemList) -> TodoItemListModel:
    """Converts a TodoItemList (domain entity) to a TodoItemListModel (SQLAlchemy)."""
    return TodoItemListModel(
        id=entity.id,
        name=entity.name,
        user_id=entity.user_id,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )


class TodoItemListRepositorySql(TodoItemListRepository):
    """SQL repository for todo lists.

    The session is owned by the caller and this class only flushes. Committing or
    rolling back is left to the surrounding unit of work.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, list_id: int) -> Optional[TodoItemList]:
        """Finds a todo list by its ID."""
        try:
            model = await self.session.get(TodoItemListModel, list_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load todo list {list_id}: {e}")
            raise RepositoryError(f"Error loading todo list: {e}") from e
        return _to_todo_item_list_entity(model) if model else None

    async def get_all(self) -> List[TodoItemList]:
        """Lists every todo list."""
        stmt = select(TodoItemListModel).order_by(TodoItemListModel.id)
        models = await self._scalars(stmt, "listing todo lists")
        return [_to_todo_item_list_entity(model) for model in models]

    async def get_by_user_id(self, user_id: str) -> List[TodoItemList]:
        """Lists all todo lists for a specific user."""
        stmt = (
            select(TodoItemListModel)
            .where(TodoItemListModel.user_id == user_id)
            .order_by(TodoItemListModel.id)
        )
        models = await self._scalars(stmt, f"listing todo lists for user {user_id}")
        return [_to_todo_item_list_entity(model) for model in models]

    async def count(self) -> int:
        """Counts persisted todo lists."""
        stmt = select(func.count()).select_from(TodoItemListModel)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed to count todo lists: {e}")
            raise RepositoryError(f"Error counting todo lists: {e}") from e
        return result.scalar_one()

    async def add(self, todo_list: TodoItemList) -> TodoItemList:
        """Persists a new todo list and writes the generated ID back onto it."""
        todo_list.validate()
        try:
            model = _to_todo_item_list_model(todo_list)
            self.session.add(model)
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to add todo list '{todo_list.name}': {e}")
            raise RepositoryError(f"Error adding todo list: {e}") from e

        todo_list.id = model.id
        logger.info(f"Added todo list {model.id} for user {model.user_id}")
        return _to_todo_item_list_entity(model)

    async def update(self, todo_list: TodoItemList) -> TodoItemList:
        """Updates the name and owner of an existing todo list."""
        todo_list.validate()
        if todo_list.id is None:
            raise TodoItemListNotFoundError(todo_list.id)

        try:
            model = await self.session.get(TodoItemListModel, todo_list.id)
            if not model:
                raise TodoItemListNotFoundError(todo_list.id)

            # Update the modified fields
            model.name = todo_list.name
            model.user_id = todo_list.user_id
            model.updated_at = current_timestamp()

            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to update todo list {todo_list.id}: {e}")
            raise RepositoryError(f"Error updating todo list: {e}") from e

        todo_list.updated_at = model.updated_at
        logger.debug(f"Updated todo list {model.id}")
        return _to_todo_item_list_entity(model)

    async def delete(self, list_id: int) -> None:
        """Deletes a todo list by its ID. Missing IDs are ignored."""
        try:
            model = await self.session.get(TodoItemListModel, list_id)
            if model:
                await self.session.delete(model)
                await self.session.flush()
                logger.info(f"Deleted todo list {list_id}")
            else:
                logger.debug(f"Todo list {list_id} not found, nothing to delete")
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete todo list {list_id}: {e}")
            raise RepositoryError(f"Error deleting todo list: {e}") from e

    async def get_paged(self, user_id: str, request: PaginationRequest) -> PagedResult[TodoItemList]:
        """Seek-paginates a user's todo lists by ascending ID.

        One row beyond the page size is fetched to learn whether another page
        exists. A cursor naming an ID the user does not own (or one that was
        deleted) resumes after that ID's position.
        """
        after_id = request.after_id()

        stmt = select(TodoItemListModel).where(TodoItemListModel.user_id == user_id)
        if after_id is not None:
            stmt = stmt.where(TodoItemListModel.id > after_id)
        stmt = stmt.order_by(TodoItemListModel.id.asc()).limit(request.page_size + 1)

        models = await self._scalars(stmt, f"paging todo lists for user {user_id}")

        page = models[:request.page_size]
        next_cursor = None
        if len(models) > request.page_size:
            next_cursor = encode_cursor(page[-1].id)

        logger.debug(
            f"Fetched {len(page)} todo lists for user {user_id} "
            f"(after_id={after_id}, has_next_page={next_cursor is not None})"
        )
        return PagedResult(
            items=[_to_todo_item_list_entity(model) for model in page],
            next_cursor=next_cursor,
        )

    async def _scalars(self, stmt, action: str) -> List[TodoItemListModel]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Failed {action}: {e}")
            raise RepositoryError(f"Error {action}: {e}") from e
        return list(result.scalars().all())
