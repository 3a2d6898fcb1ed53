from .user import User
from .goal import Goal, CompletedGoal

__all__ = ["User", "Goal", "CompletedGoal"]
