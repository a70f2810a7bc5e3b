"""User model: the single seeded account."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=True)

    profile = relationship("UserProfile", back_populates="user", uselist=False, passive_deletes=True)
    tasks = relationship("Task", back_populates="user", passive_deletes=True)
    streaks = relationship("Streak", back_populates="user", passive_deletes=True)
