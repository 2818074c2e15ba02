from ..extensions import db
from flask_login import UserMixin
from .base import TimestampMixin

class User(db.Model, UserMixin, TimestampMixin):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)

    def to_ref(self):
        """Referrer identity as embedded in candidate responses."""
        return {"id": self.id, "name": self.name, "email": self.email}

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
