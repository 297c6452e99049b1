from flask import request, abort
from datetime import timezone
from dateutil.parser import parse
from sitebuilder.domain.exceptions import ConflictError


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity, field="saved_at"):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.
    Raises ConflictError if the entity has been saved since.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ValueError, OverflowError):
        abort(400, description="Invalid If-Unmodified-Since header")

    server_value = getattr(entity, field)
    if server_value is None:
        return

    if normalize_ts(server_value) > client_ts:
        raise ConflictError("Conflict detected. Resource has been modified.")
