"""Custom exceptions for the todo application."""

from typing import Any, Dict, Optional


class TodoAppException(Exception):
    """Base exception for all todo application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


# ==================== Domain Exceptions ====================

class DomainException(TodoAppException):
    """Base exception for domain layer errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    pass


class InvalidCursorError(ValidationError):
    """Raised when a pagination cursor cannot be decoded."""

    def __init__(self, cursor: str):
        super().__init__(f"Invalid pagination cursor: '{cursor}'", details={"cursor": cursor})


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any):
        message = f"{entity_type} with id '{entity_id}' not found"
        super().__init__(message, details={"entity_type": entity_type, "entity_id": entity_id})


class TodoItemListNotFoundError(EntityNotFoundError):
    """Raised when a todo list is not found."""

    def __init__(self, list_id: Any):
        super().__init__("TodoItemList", list_id)


# ==================== Infrastructure Exceptions ====================

class InfrastructureException(TodoAppException):
    """Base exception for infrastructure layer errors."""
    pass


class StorageError(InfrastructureException):
    """Base exception for storage-related errors."""
    pass


class RepositoryError(StorageError):
    """Raised when repository operations fail."""
    pass
