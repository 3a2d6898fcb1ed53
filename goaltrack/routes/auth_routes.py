# goaltrack/routes/auth_routes.py

from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from . import json_body
from ..auth import current_user_id
from ..services import credentials

auth_bp = Blueprint("auth", __name__)


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()

    user, token = credentials.register_user(
        data.get("name"), data.get("email"), data.get("password")
    )
    return jsonify({"token": token, "user": user.to_dict()}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    """
    Accepts { "email": "...", "password": "..." }.
    Unknown email and wrong password give the same 400 response.
    """
    data = json_body()

    user, token = credentials.authenticate(data.get("email"), data.get("password"))
    return jsonify({"token": token, "user": user.to_dict()}), 200


@auth_bp.route("/user", methods=["GET"])
@jwt_required()
def me():
    user = credentials.find_user(current_user_id())
    return jsonify(user.to_dict()), 200
