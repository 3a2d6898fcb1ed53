from flask import request

from ..errors import ValidationError


def json_body() -> dict:
    """Request JSON as a dict. A missing body counts as {}."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    return data
