# goaltrack/auth.py
from flask import jsonify
from flask_jwt_extended import get_jwt_identity

from .errors import ForbiddenError


def init_auth(app, jwt):
    """
    Wire the JWT manager to the app. The signing key comes from the app
    config handed to create_app (JWT_SECRET_KEY), never from module state.

      - no token                    -> 401
      - bad signature / malformed   -> 403
      - expired                     -> 403
    """
    jwt.init_app(app)

    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return (
            jsonify(
                {
                    "message": "Missing or invalid auth token",
                    "error": reason,
                }
            ),
            401,
        )

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return (
            jsonify(
                {
                    "message": "Invalid auth token",
                    "error": reason,
                }
            ),
            403,
        )

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 403


def current_user_id() -> str:
    return str(get_jwt_identity())


def resolve_owner_id(data: dict) -> str:
    """
    The acting user is always the token subject. A client-supplied userId is
    tolerated only when it names the same user.
    """
    user_id = current_user_id()
    claimed = data.get("userId")
    if claimed is not None and str(claimed) != user_id:
        raise ForbiddenError("userId does not match the authenticated user")
    return user_id
