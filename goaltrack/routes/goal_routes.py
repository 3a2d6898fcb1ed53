# goaltrack/routes/goal_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from . import json_body
from ..auth import current_user_id, resolve_owner_id
from ..services import goals as goal_store
from ..services.lifecycle import complete_goal

goals_bp = Blueprint("goals", __name__)


# ------------------------------
# POST /api/goals
# ------------------------------
@goals_bp.route("/goals", methods=["POST"])
@jwt_required()
def create_goal():
    data = json_body()
    owner_id = resolve_owner_id(data)

    goal = goal_store.create_goal(data, owner_id)
    return jsonify(goal.to_dict()), 201


# ------------------------------
# GET /api/goals
# ------------------------------
@goals_bp.route("/goals", methods=["GET"])
@jwt_required()
def list_goals():
    rows = goal_store.list_goals(current_user_id())
    return jsonify([g.to_dict() for g in rows]), 200


# ------------------------------
# DELETE /api/goals/<id>
# ------------------------------
@goals_bp.route("/goals/<goal_id>", methods=["DELETE"])
@jwt_required()
def delete_goal(goal_id):
    goal_store.delete_goal(goal_id, owner_id=current_user_id())
    return jsonify({"message": "Goal deleted"}), 200


# ------------------------------
# POST /api/completeGoals/<id>
# ------------------------------
@goals_bp.route("/completeGoals/<goal_id>", methods=["POST"])
@jwt_required()
def complete(goal_id):
    completed = complete_goal(goal_id, owner_id=current_user_id())
    return (
        jsonify(
            {
                "message": "Goal completed and moved to completed goals",
                "completedGoal": completed.to_dict(),
            }
        ),
        200,
    )
