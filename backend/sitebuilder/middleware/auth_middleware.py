from flask import jsonify
from sitebuilder.extensions import db, jwt
from sitebuilder.models.user import User


def auth_middleware(app):
    """Resolve `x-auth-token` credentials to a User and shape JWT failures."""

    @jwt.user_identity_loader
    def user_identity(user):
        return user.id if isinstance(user, User) else str(user)

    @jwt.user_lookup_loader
    def load_user(_jwt_header, jwt_data):
        user = db.session.get(User, jwt_data["sub"])
        if user is None or not user.is_active:
            return None
        return user

    @jwt.user_lookup_error_loader
    def user_lookup_failed(_jwt_header, _jwt_data):
        return jsonify({"message": "Token is not valid"}), 401

    @jwt.unauthorized_loader
    def missing_token(_reason):
        return jsonify({"message": "No token, authorization denied"}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        app.logger.debug("Rejected token: %s", reason)
        return jsonify({"message": "Token is not valid"}), 401

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_data):
        return jsonify({"message": "Token is not valid"}), 401
