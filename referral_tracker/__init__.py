import os

from flask import Flask
from flask_migrate import Migrate
from .extensions import db, rq
from .auth import init_auth
from .errors import register_error_handlers

migrate = Migrate()


def create_app(overrides=None):
    """Application factory.

    ``overrides`` is applied on top of ``config.Config`` (tests use it to
    point at a throwaway database and storage dir).
    """
    app = Flask(__name__)
    app.config.from_object('config.Config')
    if overrides:
        app.config.update(overrides)

    db.init_app(app)
    migrate.init_app(app, db, directory='alembic')
    init_auth(app)
    rq.init_app(app)
    register_error_handlers(app)

    from .blueprints.candidates import bp as candidates_bp
    app.register_blueprint(candidates_bp, url_prefix="/api/candidates")

    from .api.health import bp as health_bp
    app.register_blueprint(health_bp)

    # alembic/env.py sets SKIP_CREATE_ALL so migrations own the schema there
    if app.config.get('AUTO_CREATE_TABLES') and not os.getenv('SKIP_CREATE_ALL'):
        with app.app_context():
            from . import models  # noqa: F401
            db.create_all()

    app.logger.info('Referral tracker started (storage=%s, queue=%s)',
                    app.config.get('STORAGE_BACKEND'), 'rq' if rq.queue else 'inline')
    return app
