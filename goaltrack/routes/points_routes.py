# goaltrack/routes/points_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from . import json_body
from ..auth import resolve_owner_id
from ..errors import ValidationError
from ..services.credentials import adjust_points
from ..services.goals import is_number

points_bp = Blueprint("points", __name__)


@points_bp.route("/increment-points", methods=["POST"])
@jwt_required()
def increment_points():
    data = json_body()
    points = data.get("points")

    if not is_number(points):
        raise ValidationError("Invalid increment amount")

    user = adjust_points(resolve_owner_id(data), points)
    return (
        jsonify(
            {
                "message": f"Point counter incremented by {points}",
                "user": user.to_dict(),
            }
        ),
        200,
    )


@points_bp.route("/decrement-points", methods=["POST"])
@jwt_required()
def decrement_points():
    data = json_body()
    mulct = data.get("mulct")

    if not is_number(mulct):
        raise ValidationError("Invalid decrement amount")

    user = adjust_points(resolve_owner_id(data), -mulct)
    return (
        jsonify(
            {
                "message": f"Point counter decremented by {mulct}",
                "user": user.to_dict(),
            }
        ),
        200,
    )
