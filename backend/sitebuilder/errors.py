from flask import jsonify
from werkzeug.exceptions import HTTPException
from sitebuilder.domain.exceptions import SiteBuilderError


def register_error_handlers(app):
    @app.errorhandler(SiteBuilderError)
    def handle_site_builder_error(error):
        body = {"message": error.message}
        if error.errors:
            body["errors"] = error.errors

        response = jsonify(body)
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({"message": error.description})
        response.status_code = error.code or 500
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        # Details stay in the server log only
        app.logger.exception("Unhandled error: %s", error)
        response = jsonify({"message": "Server error"})
        response.status_code = 500
        return response
