from app.models.user import User
from app.models.profile import UserProfile
from app.models.task import Task, TaskStatus
from app.models.streak import Streak

__all__ = ["User", "UserProfile", "Task", "TaskStatus", "Streak"]
