from flask import jsonify
from flask_jwt_extended import create_access_token, current_user, jwt_required
from sitebuilder.application.accounts.register_user import register_user
from sitebuilder.domain.exceptions import ValidationError
from sitebuilder.models.user import User
from sitebuilder.normalizers.user import normalize_user
from sitebuilder.utils.validation import request_body, validate_body
from . import api_bp


def _issue_token(user):
    return create_access_token(identity=user, additional_claims={"role": user.role})


@api_bp.route("/auth/register", methods=["POST"])
def register():
    data = request_body()
    user = register_user(data=data)

    return jsonify({"token": _issue_token(user)}), 201


@api_bp.route("/auth/login", methods=["POST"])
def login():
    data = request_body()
    validate_body(data, required={
        "email": "Please include a valid email",
        "password": "Password is required",
    })

    user = User.query.filter_by(email=str(data["email"]).strip().lower()).first()

    if not user or not user.check_password(str(data["password"])):
        raise ValidationError("Invalid credentials")

    if not user.is_active:
        return jsonify({"message": "User account disabled"}), 403

    return jsonify({"token": _issue_token(user)}), 200


@api_bp.route("/auth/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify(normalize_user(current_user)), 200
