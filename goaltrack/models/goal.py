# goaltrack/models/goal.py
from datetime import datetime
from .. import db
from .user import as_number, new_id


class GoalFieldsMixin:
    """Columns shared by active goals and their completed snapshots."""

    description = db.Column(db.String(500), nullable=False)
    points = db.Column(db.Float, nullable=False)
    mulct = db.Column(db.Float, nullable=False)
    deadline = db.Column(db.String(64), nullable=False)  # stored as given
    repeatable = db.Column(db.Boolean, nullable=False, default=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    def snapshot_fields(self):
        return {
            "description": self.description,
            "points": self.points,
            "mulct": self.mulct,
            "deadline": self.deadline,
            "repeatable": bool(self.repeatable),
            "user_id": self.user_id,
        }

    def to_dict(self):
        return {
            "id": self.id,
            "description": self.description,
            "points": as_number(self.points),
            "mulct": as_number(self.mulct),
            "deadline": self.deadline,
            "repeatable": bool(self.repeatable),
            "executionDate": self.execution_date,
            "userId": self.user_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }


class Goal(GoalFieldsMixin, db.Model):
    __tablename__ = "goals"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    # owner id only; not a foreign key, goals may outlive their user row
    user_id = db.Column(db.String(32), nullable=False, index=True)
    # epoch milliseconds; normally only set on completed snapshots
    execution_date = db.Column(db.BigInteger)


class CompletedGoal(GoalFieldsMixin, db.Model):
    __tablename__ = "completed_goals"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    # owner id only; not a foreign key, goals may outlive their user row
    user_id = db.Column(db.String(32), nullable=False, index=True)
    execution_date = db.Column(db.BigInteger, nullable=False)
