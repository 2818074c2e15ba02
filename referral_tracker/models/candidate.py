import enum
from ..extensions import db
from .base import TimestampMixin


class CandidateStatus(str, enum.Enum):
    PENDING = "Pending"
    REVIEWED = "Reviewed"
    HIRED = "Hired"
    REJECTED = "Rejected"


CANDIDATE_STATUSES = [s.value for s in CandidateStatus]

NAME_MAX_LENGTH = 100
JOB_TITLE_MAX_LENGTH = 100
NOTES_MAX_LENGTH = 500


class Candidate(db.Model, TimestampMixin):
    __tablename__ = "candidates"

    id = db.Column(db.Integer, primary_key=True)
    # text columns hold the HTML-escaped form, which can outgrow the input limits
    name = db.Column(db.String(600), nullable=False)
    email = db.Column(db.String(254), unique=True, index=True, nullable=False)
    phone = db.Column(db.String(40), nullable=False)
    job_title = db.Column(db.String(600), nullable=False)
    status = db.Column(
        db.String(20),
        nullable=False,
        default=CandidateStatus.PENDING.value,
        server_default=CandidateStatus.PENDING.value,
        index=True,
    )
    resume_url = db.Column(db.String(512))
    referred_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    notes = db.Column(db.Text)

    referrer = db.relationship("User", lazy="joined")

    __table_args__ = (
        db.CheckConstraint(
            "status IN ('Pending', 'Reviewed', 'Hired', 'Rejected')",
            name="ck_candidates_status",
        ),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "jobTitle": self.job_title,
            "status": self.status,
            "resumeUrl": self.resume_url,
            "referredBy": self.referrer.to_ref() if self.referrer else None,
            "notes": self.notes,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<Candidate id={self.id} name={self.name!r} status={self.status}>"
