"""Repository interfaces for the todo lists feature."""

from abc import abstractmethod
from typing import List

from todo_app.features.todo_lists.domain.entities import TodoItemList
from todo_app.shared.interfaces import Repository
from todo_app.shared.pagination import PagedResult, PaginationRequest


class TodoItemListRepository(Repository[TodoItemList]):
    """Interface for todo list persistence."""

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[TodoItemList]:
        """List all todo lists owned by a user."""
        pass

    @abstractmethod
    async def get_paged(self, user_id: str, request: PaginationRequest) -> PagedResult[TodoItemList]:
        """
        Get one page of a user's todo lists, ordered by id.

        Args:
            user_id: Owner whose lists are paged
            request: Page size and the cursor returned by the previous page

        Returns:
            Page of lists plus the cursor for the next page, if any
        """
        pass
