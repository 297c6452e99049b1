from typing import Any, Dict
from flask import current_app
from sqlalchemy.exc import IntegrityError
from sitebuilder.extensions import db
from sitebuilder.models.user import User, ROLE_USER
from sitebuilder.domain.exceptions import ValidationError, field_error
from sitebuilder.utils.transaction import transactional
from sitebuilder.utils.validation import validate_body

MIN_PASSWORD_LENGTH = 6


def register_user(
    *,
    data: Dict[str, Any],
    role: str = ROLE_USER,
) -> User:
    """
    Create a user account.

    Edge cases handled:
    - Missing name, email or password
    - Malformed email, short password
    - Duplicate email (pre-check and unique constraint)
    """
    validate_body(data, required={
        "name": "Name is required",
        "email": "Please include a valid email",
        "password": f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters",
    })

    email = str(data["email"]).strip().lower()
    password = str(data["password"])

    errors = []
    if "@" not in email:
        errors.append(field_error("email", "Please include a valid email"))
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(field_error(
            "password",
            f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters"
        ))
    if errors:
        raise ValidationError("Validation failed", errors=errors)

    if User.query.filter_by(email=email).first():
        raise ValidationError("User already exists", errors=[field_error("email", "User already exists")])

    user = User()
    user.name = str(data["name"]).strip()
    user.email = email
    user.role = role
    user.set_password(password)

    try:
        with transactional():
            db.session.add(user)
    except IntegrityError as exc:
        raise ValidationError("User already exists", errors=[field_error("email", "User already exists")]) from exc

    current_app.logger.info("Registered user %s (%s)", user.id, user.role)
    return user
