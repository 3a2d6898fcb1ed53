# goaltrack/services/lifecycle.py
import time
from typing import Optional

from flask import current_app

from .. import db
from ..errors import NotFoundError
from ..models.goal import CompletedGoal, Goal
from .completed_goals import create_completed_goal
from .goals import find_goal


def _now_ms() -> int:
    return int(time.time() * 1000)


def complete_goal(goal_id: str, owner_id: Optional[str] = None) -> CompletedGoal:
    """
    Archive a goal as a CompletedGoal snapshot and, unless it is repeatable,
    remove the source goal.

    Snapshot insert and source delete are committed together. The delete is
    conditional on the row still existing: if a concurrent request already
    completed (or deleted) a non-repeatable goal, nothing is archived and
    NotFoundError is raised.

    Points are not touched here; callers use increment/decrement-points.
    """
    goal = find_goal(goal_id, owner_id)

    fields = goal.snapshot_fields()
    fields["execution_date"] = _now_ms()
    repeatable = bool(goal.repeatable)

    try:
        completed = create_completed_goal(fields, commit=False)

        if not repeatable:
            removed = (
                Goal.query.filter_by(id=goal.id)
                .delete(synchronize_session=False)
            )
            if removed != 1:
                raise NotFoundError("Goal not found")

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    if repeatable:
        current_app.logger.info(
            f"[lifecycle] completed repeatable goal_id={goal_id} -> completed_id={completed.id}"
        )
    else:
        # the ORM copy of the deleted row is stale now
        db.session.expunge(goal)
        current_app.logger.info(
            f"[lifecycle] completed goal_id={goal_id} -> completed_id={completed.id}, source removed"
        )

    return completed
