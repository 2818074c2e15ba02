import io
import os
import sys

import pytest
from werkzeug.datastructures import FileStorage

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from referral_tracker import create_app
from referral_tracker.auth import issue_token
from referral_tracker.extensions import db
from referral_tracker.models.user import User
from referral_tracker.utils.validators import CandidateInput

PDF_BYTES = b"%PDF-1.4\n1 0 obj<<>>endobj\ntrailer<<>>\n%%EOF\n"


@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}",
        "REDIS_URL": None,
        "STORAGE_BACKEND": "local",
        "LOCAL_STORAGE_DIR": str(tmp_path / "uploads"),
        "AUTO_CREATE_TABLES": True,
    })
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def referrer(app):
    user = User(name="Alice Referrer", email="alice@example.com")
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def auth_headers(referrer):
    return {"Authorization": f"Bearer {issue_token(referrer)}"}


@pytest.fixture
def resume_dir(app):
    return os.path.join(app.config["LOCAL_STORAGE_DIR"], "resumes")


def make_input(**overrides):
    data = dict(
        name="Jane Doe",
        email="jane@example.com",
        phone="+15551234567",
        job_title="Engineer",
        notes=None,
    )
    data.update(overrides)
    return CandidateInput(**data)


def make_pdf(filename="cv.pdf", content=PDF_BYTES, content_type="application/pdf"):
    return FileStorage(stream=io.BytesIO(content), filename=filename, content_type=content_type)
