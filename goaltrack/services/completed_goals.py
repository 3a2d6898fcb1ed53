# goaltrack/services/completed_goals.py
from typing import Any, Dict, List, Optional

from flask import current_app

from .. import db
from ..errors import NotFoundError
from ..models.goal import CompletedGoal


def create_completed_goal(fields: Dict[str, Any], commit: bool = True) -> CompletedGoal:
    """
    Persist a snapshot. With commit=False the row is only flushed so the
    caller can finish its own transaction around it.
    """
    completed = CompletedGoal(**fields)
    db.session.add(completed)
    if commit:
        db.session.commit()
    else:
        db.session.flush()
    return completed


def list_completed_goals(owner_id: str) -> List[CompletedGoal]:
    return CompletedGoal.query.filter_by(user_id=str(owner_id)).all()


def delete_completed_goal(completed_id: str, owner_id: Optional[str] = None) -> CompletedGoal:
    completed = db.session.get(CompletedGoal, str(completed_id))
    if not completed or (owner_id is not None and completed.user_id != str(owner_id)):
        raise NotFoundError("Completed goal not found")

    db.session.delete(completed)
    db.session.commit()
    return completed


def delete_all_completed_goals(owner_id: str) -> int:
    deleted = CompletedGoal.query.filter_by(user_id=str(owner_id)).delete(
        synchronize_session=False
    )
    db.session.commit()
    current_app.logger.info(
        f"[completed_goals] cleared {deleted} record(s) for user_id={owner_id}"
    )
    return int(deleted or 0)
