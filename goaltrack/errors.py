# goaltrack/errors.py
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"message": self.message}


class ValidationError(ApiError):
    status_code = 400
    message = "Invalid request"


class ConflictError(ApiError):
    # duplicate unique key, reported as a bad request
    status_code = 400
    message = "Already exists"


class AuthenticationError(ApiError):
    status_code = 401
    message = "Missing auth token"


class ForbiddenError(AuthenticationError):
    status_code = 403
    message = "Forbidden"


class NotFoundError(ApiError):
    status_code = 404
    message = "Not found"


class InternalError(ApiError):
    pass


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        if err.status_code >= 500:
            current_app.logger.error(f"[error] {type(err).__name__}: {err.message}")
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return jsonify({"message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        current_app.logger.exception(f"Unhandled error: {err}")
        internal = InternalError()
        return jsonify(internal.to_dict()), internal.status_code
