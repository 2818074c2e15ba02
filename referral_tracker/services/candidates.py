"""Candidate lifecycle and reporting.

Every operation receives its context (referrer, ids, filters) as arguments;
nothing here reads request or login state.
"""
from flask import current_app
from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.attributes import flag_modified

from ..errors import ConflictError, NotFoundError, ValidationError
from ..extensions import db, rq
from ..jobs.cleanup import remove_resume
from ..models.candidate import Candidate, CandidateStatus, CANDIDATE_STATUSES
from ..utils.validators import CandidateInput, sanitize_input, validate_candidate_input
from .storage import stored_resume

STATUS_ALL = "all"


def _email_taken(email: str) -> bool:
    return db.session.query(Candidate.id).filter(Candidate.email == email).first() is not None


def create_candidate(data: CandidateInput, referrer, resume=None) -> Candidate:
    result = validate_candidate_input(data)
    if not result.ok:
        raise ValidationError(result.message, errors=result.errors)

    email = data.email.strip().lower()
    if _email_taken(email):
        raise ConflictError()

    with stored_resume(resume) as resume_url:
        c = Candidate(
            name=sanitize_input(data.name),
            email=email,
            phone=sanitize_input(data.phone),
            job_title=sanitize_input(data.job_title),
            notes=sanitize_input(data.notes) if data.notes and data.notes.strip() else None,
            status=CandidateStatus.PENDING.value,
            resume_url=resume_url,
            referred_by=referrer.id,
        )
        db.session.add(c)
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            # lost a race against a concurrent create with the same email
            if _email_taken(email):
                raise ConflictError() from e
            raise
        except Exception:
            db.session.rollback()
            raise

    current_app.logger.info('Candidate %s referred by user %s', c.id, referrer.id)
    return c


def get_candidate(candidate_id) -> Candidate:
    c = db.session.get(Candidate, candidate_id)
    if c is None:
        raise NotFoundError()
    return c


def update_status(candidate_id, status) -> Candidate:
    if status not in CANDIDATE_STATUSES:
        raise ValidationError(
            "Invalid status. Must be one of: " + ", ".join(CANDIDATE_STATUSES),
            errors={"status": "Invalid status"},
        )
    c = get_candidate(candidate_id)
    previous = c.status
    c.status = status
    # re-setting the same status must still bump updated_at
    flag_modified(c, "status")
    db.session.commit()
    current_app.logger.info('Candidate %s status %s -> %s', c.id, previous, status)
    return c


def delete_candidate(candidate_id) -> None:
    c = get_candidate(candidate_id)
    resume_url = c.resume_url
    db.session.delete(c)
    db.session.commit()
    current_app.logger.info('Candidate %s deleted', candidate_id)

    if resume_url:
        rq.enqueue(remove_resume, resume_url)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_candidates(search=None, status=None, page=1, per_page=None):
    """Newest-first page of candidates matching ``search`` and ``status``.

    ``search`` is a case-insensitive substring match on name, job title or
    email. ``status`` of None, "" or "all" disables the status filter.
    """
    if per_page is None:
        per_page = current_app.config.get('DEFAULT_PAGE_SIZE', 10)
    if page is None or page < 1:
        raise ValidationError("Page must be a positive integer", errors={"page": "must be >= 1"})
    if per_page < 1:
        raise ValidationError("Limit must be a positive integer", errors={"limit": "must be >= 1"})

    query = Candidate.query
    if search:
        like = f"%{_escape_like(search)}%"
        query = query.filter(or_(
            Candidate.name.ilike(like, escape="\\"),
            Candidate.job_title.ilike(like, escape="\\"),
            Candidate.email.ilike(like, escape="\\"),
        ))
    if status and status != STATUS_ALL:
        query = query.filter(Candidate.status == status)

    return query.order_by(Candidate.created_at.desc(), Candidate.id.desc()).paginate(
        page=page, per_page=per_page, error_out=False
    )


def candidate_stats():
    rows = (
        db.session.query(Candidate.status, func.count(Candidate.id))
        .group_by(Candidate.status)
        .all()
    )
    by_status = {status: count for status, count in rows}
    return {"total": sum(by_status.values()), "byStatus": by_status}
