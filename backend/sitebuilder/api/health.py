from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sitebuilder.extensions import db
from . import api_bp


@api_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        current_app.logger.exception("Health check could not reach the database")
        return jsonify({
            "status": "degraded",
            "service": "sitebuilder",
            "database": "unavailable",
        }), 503

    return jsonify({
        "status": "ok",
        "service": "sitebuilder",
        "database": "ok",
    })
