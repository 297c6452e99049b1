from contextlib import contextmanager
from flask import current_app
from sitebuilder.extensions import db


@contextmanager
def transactional():
    """
    Unit of work around db.session.

    Commits when the block exits cleanly. Any error rolls back every write
    made inside the block and is re-raised to the caller.
    """
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        current_app.logger.warning("Transaction rolled back (%s)", type(exc).__name__)
        raise
