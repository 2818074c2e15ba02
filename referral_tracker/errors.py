"""Domain errors and their translation into the JSON response envelope."""
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge


class ServiceError(Exception):
    status_code = 500
    message = "Something went wrong!"

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"success": False, "message": self.message}


class ValidationError(ServiceError):
    status_code = 400
    message = "Invalid input"

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or {}

    def to_dict(self):
        body = super().to_dict()
        if self.errors:
            body["errors"] = self.errors
        return body


class ConflictError(ServiceError):
    status_code = 400
    message = "Candidate with this email already exists"


class NotFoundError(ServiceError):
    status_code = 404
    message = "Candidate not found"


class StorageError(ServiceError):
    status_code = 500
    message = "File storage failed"


def register_error_handlers(app):
    @app.errorhandler(ServiceError)
    def handle_service_error(e):
        if e.status_code >= 500:
            current_app.logger.error("%s: %s", type(e).__name__, e.message, exc_info=e)
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e):
        return jsonify({"success": False, "message": "Uploaded file is too large"}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code == 404:
            message = "Route not found"
        else:
            message = e.description or e.name
        return jsonify({"success": False, "message": message}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        current_app.logger.error("Unhandled error: %s", e, exc_info=e)
        body = {"success": False, "message": "Something went wrong!"}
        if current_app.debug:
            body["error"] = str(e)
        return jsonify(body), 500
