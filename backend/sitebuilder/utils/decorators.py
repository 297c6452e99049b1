from functools import wraps
from flask_jwt_extended import current_user
from sitebuilder.domain.exceptions import AuthorizationError
from sitebuilder.models.website import Website


def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_user.is_admin:
            raise AuthorizationError("Access denied. Admin role required.")

        return fn(*args, **kwargs)
    return wrapper


def owner_or_admin(fn):
    """
    Allow the owner of the `site_id` website, or any admin.

    Admins pass straight through so a missing website still surfaces as 404
    from the handler.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if current_user.is_admin:
            return fn(*args, **kwargs)

        owned = Website.query.filter_by(
            id=kwargs.get("site_id"),
            owner_id=current_user.id
        ).first()

        if not owned:
            raise AuthorizationError("Access denied. You do not own this website.")

        return fn(*args, **kwargs)
    return wrapper
