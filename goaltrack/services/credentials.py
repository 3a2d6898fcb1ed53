# goaltrack/services/credentials.py
"""
User accounts: registration, login, lookup and the per-user point counter.
"""

from typing import Tuple

from flask import current_app
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError
from werkzeug.security import check_password_hash, generate_password_hash

from .. import db
from ..errors import ConflictError, NotFoundError, ValidationError
from ..models.user import User

INVALID_CREDENTIALS = "Invalid email or password"

# Compared against when the email is unknown so both failure paths pay for a hash check.
_DUMMY_HASH = generate_password_hash("goaltrack-dummy-password")


def _require_strings(**fields) -> None:
    for key, value in fields.items():
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{key} must be a string")


def _normalize_email(email) -> str:
    return (email or "").strip().lower()


def issue_token(user: User) -> str:
    return create_access_token(identity=str(user.id))


def register_user(name, email, password) -> Tuple[User, str]:
    _require_strings(name=name, email=email, password=password)

    name = (name or "").strip()
    email = _normalize_email(email)
    password = password or ""  # do NOT strip passwords

    if not name or not email or not password:
        raise ValidationError("name, email and password are required")

    min_len = current_app.config.get("PASSWORD_MIN_LENGTH", 1)
    if len(password) < min_len:
        raise ValidationError(f"password must be at least {min_len} characters")

    if User.query.filter_by(email=email).first():
        raise ConflictError("User already exists")

    user = User(name=name, email=email, point_counter=0)
    user.set_password(password)

    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # lost a race against a concurrent registration with the same email
        db.session.rollback()
        raise ConflictError("User already exists")

    current_app.logger.info(f"[auth/register] created user_id={user.id}")
    return user, issue_token(user)


def authenticate(email, password) -> Tuple[User, str]:
    _require_strings(email=email, password=password)

    email = _normalize_email(email)
    password = password or ""

    if not email or not password:
        raise ValidationError("email and password are required")

    user = User.query.filter_by(email=email).first()

    if not user:
        check_password_hash(_DUMMY_HASH, password)
        current_app.logger.info("[auth/login] user not found")
        raise ValidationError(INVALID_CREDENTIALS)

    if not user.check_password(password):
        current_app.logger.info(f"[auth/login] bad password for user_id={user.id}")
        raise ValidationError(INVALID_CREDENTIALS)

    return user, issue_token(user)


def find_user(user_id) -> User:
    user = db.session.get(User, str(user_id))
    if not user:
        raise NotFoundError("User not found")
    return user


def adjust_points(user_id, delta: float) -> User:
    """
    Apply point_counter += delta in a single UPDATE so concurrent adjustments
    don't overwrite each other. Negative totals are allowed.
    """
    updated = (
        User.query.filter_by(id=str(user_id))
        .update(
            {User.point_counter: User.point_counter + delta},
            synchronize_session=False,
        )
    )
    if not updated:
        db.session.rollback()
        raise NotFoundError("User not found")

    db.session.commit()

    user = db.session.get(User, str(user_id))
    db.session.refresh(user)
    current_app.logger.info(
        f"[points] user_id={user.id} delta={delta} total={user.point_counter}"
    )
    return user
