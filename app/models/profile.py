"""UserProfile model: onboarding answers, one row per user."""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, JSON, Numeric, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.db.session import Base


class UserProfile(Base):
    __tablename__ = "user_profile"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    # JSON lists instead of TEXT[] so SQLite and PostgreSQL share one schema
    studying_topics = Column(JSON, nullable=True)
    goals = Column(Text, nullable=True)
    focus_areas = Column(JSON, nullable=True)
    daily_hours_target = Column(Numeric(4, 2, asdecimal=False), nullable=True)
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="profile")
