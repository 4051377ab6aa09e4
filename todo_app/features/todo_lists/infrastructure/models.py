"""SQLAlchemy models for todo lists feature."""

from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, String

from todo_app.core.database import Base


class TodoItemListModel(Base):
    """Todo item list table."""
    __tablename__ = "todo_item_lists"

    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted tail row again
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    user_id = Column(String, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self):
        return f"<TodoItemList(id={self.id}, name={self.name}, user_id={self.user_id})>"
