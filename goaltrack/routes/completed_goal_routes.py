# goaltrack/routes/completed_goal_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from ..auth import current_user_id
from ..services import completed_goals as completed_store

completed_goals_bp = Blueprint("completed_goals", __name__)


@completed_goals_bp.route("/completedGoals", methods=["GET"])
@jwt_required()
def list_completed():
    rows = completed_store.list_completed_goals(current_user_id())
    return jsonify([c.to_dict() for c in rows]), 200


@completed_goals_bp.route("/completedGoals/<completed_id>", methods=["DELETE"])
@jwt_required()
def delete_completed(completed_id):
    completed_store.delete_completed_goal(completed_id, owner_id=current_user_id())
    return jsonify({"message": "Completed goal deleted"}), 200


@completed_goals_bp.route("/completedGoals", methods=["DELETE"])
@jwt_required()
def delete_all_completed():
    deleted = completed_store.delete_all_completed_goals(current_user_id())
    return (
        jsonify(
            {
                "message": "All completed goals deleted successfully",
                "deleted": deleted,
            }
        ),
        200,
    )
