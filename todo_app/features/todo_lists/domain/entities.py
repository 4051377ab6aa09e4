"""Domain entities for the todo lists feature."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from todo_app.shared.helpers import current_timestamp, is_blank


@dataclass
class TodoItemList:
    """A named to-do list owned by a single user."""

    name: str = ""
    user_id: str = ""
    id: Optional[int] = None  # Assigned by storage on insert
    created_at: datetime = field(default_factory=current_timestamp)
    updated_at: datetime = field(default_factory=current_timestamp)

    def rename(self, name: str) -> None:
        """Give the list a new name."""
        self.name = name
        self.updated_at = current_timestamp()

    def is_persisted(self) -> bool:
        """Check if storage has assigned an id."""
        return self.id is not None

    def validate(self) -> None:
        """Validate todo list data."""
        from todo_app.shared.exceptions import ValidationError

        if is_blank(self.name):
            raise ValidationError("name is required")
        if is_blank(self.user_id):
            raise ValidationError("user_id is required")
