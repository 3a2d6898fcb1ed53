# goaltrack/services/goals.py
import math
from typing import Any, Dict, List, Optional

from flask import current_app

from .. import db
from ..errors import NotFoundError, ValidationError
from ..models.goal import Goal

REQUIRED_FIELDS = ("description", "points", "mulct", "deadline")


# ------------------------------
# Helpers
# ------------------------------
def is_int(v: Any) -> bool:
    # bool is an int subclass; a JSON true is not a point amount
    return isinstance(v, int) and not isinstance(v, bool)


def is_number(v: Any) -> bool:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return math.isfinite(v)


def validate_goal_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    missing = [f for f in REQUIRED_FIELDS if data.get(f) in (None, "")]
    if missing:
        raise ValidationError(f"{', '.join(missing)} required")

    if not isinstance(data["description"], str) or not isinstance(data["deadline"], str):
        raise ValidationError("description and deadline must be strings")

    for field in ("points", "mulct"):
        if not is_number(data[field]):
            raise ValidationError(f"{field} must be a number")

    repeatable = data.get("repeatable", False)
    if repeatable is None:
        repeatable = False
    if not isinstance(repeatable, bool):
        raise ValidationError("repeatable must be a boolean")

    execution_date = data.get("executionDate")
    if execution_date is not None and not is_int(execution_date):
        raise ValidationError("executionDate must be an integer (epoch milliseconds)")

    return {
        "description": data["description"],
        "points": data["points"],
        "mulct": data["mulct"],
        "deadline": data["deadline"],
        "repeatable": repeatable,
        "execution_date": execution_date,
    }


# ------------------------------
# Store operations
# ------------------------------
def create_goal(data: Dict[str, Any], owner_id: str) -> Goal:
    fields = validate_goal_fields(data)
    goal = Goal(user_id=str(owner_id), **fields)
    db.session.add(goal)
    db.session.commit()
    current_app.logger.info(f"[goals] created goal_id={goal.id} user_id={goal.user_id}")
    return goal


def list_goals(owner_id: str) -> List[Goal]:
    return Goal.query.filter_by(user_id=str(owner_id)).all()


def find_goal(goal_id: str, owner_id: Optional[str] = None) -> Goal:
    goal = db.session.get(Goal, str(goal_id))
    if not goal or (owner_id is not None and goal.user_id != str(owner_id)):
        raise NotFoundError("Goal not found")
    return goal


def delete_goal(goal_id: str, owner_id: Optional[str] = None) -> Goal:
    goal = find_goal(goal_id, owner_id)
    db.session.delete(goal)
    db.session.commit()
    current_app.logger.info(f"[goals] deleted goal_id={goal_id}")
    return goal
