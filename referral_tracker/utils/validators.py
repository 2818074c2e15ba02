"""Pure checks and normalizers for user-submitted candidate fields."""
import re
from dataclasses import dataclass, field
from typing import Dict, Optional

from email_validator import validate_email as _validate_email, EmailNotValidError
from markupsafe import escape

from ..models.candidate import NAME_MAX_LENGTH, JOB_TITLE_MAX_LENGTH, NOTES_MAX_LENGTH

PHONE_RE = re.compile(r"^\+?[1-9]\d{0,15}$")

MSG_REQUIRED = "Please provide all required fields"
MSG_EMAIL = "Please provide a valid email"
MSG_PHONE = "Please provide a valid phone number"


def validate_email(value) -> bool:
    if not value or not isinstance(value, str):
        return False
    try:
        _validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_phone(value) -> bool:
    if not value or not isinstance(value, str):
        return False
    return PHONE_RE.match(value) is not None


def sanitize_input(value: str) -> str:
    """Trim, then escape ``< > & ' "`` so stored text never renders as markup."""
    return str(escape(value.strip()))


@dataclass
class CandidateInput:
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    job_title: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> Optional[str]:
        # first error wins, in field order
        for msg in self.errors.values():
            return msg
        return None


def _blank(value) -> bool:
    return value is None or not str(value).strip()


_TYPE_MESSAGES = {"email": MSG_EMAIL, "phone": MSG_PHONE}


def validate_candidate_input(data: CandidateInput) -> ValidationResult:
    result = ValidationResult()

    for name in ("name", "email", "phone", "job_title"):
        value = getattr(data, name)
        if _blank(value):
            result.errors[name] = MSG_REQUIRED
        elif not isinstance(value, str):
            # JSON bodies can carry numbers, booleans or lists
            result.errors[name] = _TYPE_MESSAGES.get(name, MSG_REQUIRED)
    if data.notes is not None and not isinstance(data.notes, str):
        result.errors["notes"] = "Notes must be text"
    if result.errors:
        return result

    if not validate_email(data.email.strip()):
        result.errors["email"] = MSG_EMAIL
    if not validate_phone(data.phone.strip()):
        result.errors["phone"] = MSG_PHONE

    if len(data.name.strip()) > NAME_MAX_LENGTH:
        result.errors["name"] = f"Name cannot exceed {NAME_MAX_LENGTH} characters"
    if len(data.job_title.strip()) > JOB_TITLE_MAX_LENGTH:
        result.errors["job_title"] = f"Job title cannot exceed {JOB_TITLE_MAX_LENGTH} characters"
    if data.notes and len(data.notes.strip()) > NOTES_MAX_LENGTH:
        result.errors["notes"] = f"Notes cannot exceed {NOTES_MAX_LENGTH} characters"
    return result
