"""Bearer-token principal resolution on top of Flask-Login.

Tokens are signed with the app SECRET_KEY; issuing them to people is an
ops concern (see scripts/create_user.py), not part of the API.
"""
from flask import current_app, jsonify
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from .extensions import db, login_manager

TOKEN_SALT = "auth-token"


def _serializer():
    return URLSafeTimedSerializer(current_app.config["SECRET_KEY"], salt=TOKEN_SALT)


def issue_token(user) -> str:
    return _serializer().dumps({"uid": user.id})


def load_token(token: str):
    from .models.user import User
    max_age = current_app.config.get("AUTH_TOKEN_MAX_AGE")
    try:
        payload = _serializer().loads(token, max_age=max_age)
    except SignatureExpired:
        current_app.logger.info("Rejected expired auth token")
        return None
    except BadSignature:
        return None
    uid = payload.get("uid") if isinstance(payload, dict) else None
    if uid is None:
        return None
    return db.session.get(User, uid)


def init_auth(app):
    login_manager.init_app(app)

    @login_manager.request_loader
    def load_user_from_request(request):
        header = request.headers.get("Authorization", "")
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return load_token(token.strip())

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({"success": False, "message": "Authentication required"}), 401
