from datetime import timezone


def iso(ts):
    """Serialize a stored timestamp as ISO 8601; naive values are UTC."""
    if ts is None:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.isoformat()
