from typing import Any, Dict, List, Optional


class SiteBuilderError(Exception):
    """Base class for errors reported to API clients."""

    status_code = 500

    def __init__(self, message: str, *, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(SiteBuilderError):
    status_code = 400


class NotFoundError(SiteBuilderError):
    status_code = 404


class AuthorizationError(SiteBuilderError):
    status_code = 403


class ConflictError(SiteBuilderError):
    status_code = 409


def field_error(param: str, msg: str, location: str = "body") -> Dict[str, str]:
    return {"msg": msg, "param": param, "location": location}
