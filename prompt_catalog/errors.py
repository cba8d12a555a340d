from __future__ import annotations

from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from prompt_catalog.extensions import db


class APIError(Exception):
    """Error surfaced to API clients as ``{"message": ...}`` with a status code."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"message": self.message}


class NotFoundError(APIError):
    status_code = 404


def register_error_handlers(app):
    """Render every failure under the app as a JSON body."""

    @app.errorhandler(APIError)
    def handle_api_error(exc: APIError):
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        return jsonify({"message": exc.description or exc.name}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        current_app.logger.exception("Unhandled error: %s", exc)
        try:
            db.session.rollback()
        except Exception:
            current_app.logger.debug("session rollback failed", exc_info=True)
        return jsonify({"message": "Internal server error"}), 500
