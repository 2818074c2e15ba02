from datetime import datetime
from ..extensions import db


def _utcnow():
    return datetime.utcnow()


class TimestampMixin:
    # client-side defaults keep sub-second precision on SQLite
    created_at = db.Column(db.DateTime, default=_utcnow, server_default=db.func.now(), nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=_utcnow, server_default=db.func.now(), onupdate=_utcnow, nullable=False)
