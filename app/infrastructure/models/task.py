"""SQLAlchemy model for owner tasks."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import local_now


class TaskModel(Base):
    """Database representation of a to-do item."""

    __tablename__ = "task"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    priority = Column(String(10), nullable=False, default="MEDIUM")
    status = Column(String(20), nullable=False, default="PENDING")
    contact_id = Column(
        Integer,
        ForeignKey("contact.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    project_id = Column(
        Integer,
        ForeignKey("project.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(
        DateTime, nullable=False, default=local_now
    )
    updated_at = Column(
        DateTime,
        nullable=False,
        default=local_now,
        onupdate=local_now,
    )
    deleted_at = Column(DateTime, nullable=True)

    contact = relationship("ContactModel", lazy="joined")
    project = relationship("ProjectModel", lazy="joined")


__all__ = ["TaskModel"]
