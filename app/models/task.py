"""Task model: one planned block of work on a given day."""
import enum

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base


class TaskStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    PARTIAL = "partial"
    SKIPPED = "skipped"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)
    planned_hours = Column(Numeric(5, 2, asdecimal=False), nullable=False)
    actual_hours = Column(Numeric(5, 2, asdecimal=False), nullable=False, default=0)
    status = Column(String(50), nullable=False, default=TaskStatus.PENDING.value)  # pending | completed | partial | skipped
    task_date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="tasks")
