import pytest

from referral_tracker.utils.validators import (
    CandidateInput,
    MSG_EMAIL,
    MSG_PHONE,
    MSG_REQUIRED,
    sanitize_input,
    validate_candidate_input,
    validate_email,
    validate_phone,
)


@pytest.mark.parametrize("email", ["jane@example.com", "JANE@X.COM", "first.last+tag@sub.example.org"])
def test_validate_email_accepts(email):
    assert validate_email(email)


@pytest.mark.parametrize("email", ["", None, "jane", "jane@", "@example.com", "jane@@example.com", "jane doe@example.com"])
def test_validate_email_rejects(email):
    assert not validate_email(email)


@pytest.mark.parametrize("phone", ["+15551234567", "15551234567", "7", "+1234567890123456"])
def test_validate_phone_accepts(phone):
    assert validate_phone(phone)


@pytest.mark.parametrize("phone", ["", None, "+", "0123456", "+12345678901234567", "555-123-4567", "+1 555 123"])
def test_validate_phone_rejects(phone):
    assert not validate_phone(phone)


def test_sanitize_input_trims_and_escapes():
    assert sanitize_input("  <b>Tom & \"Jerry\"</b> ") == "&lt;b&gt;Tom &amp; &#34;Jerry&#34;&lt;/b&gt;"
    assert sanitize_input("O'Brien") == "O&#39;Brien"
    assert sanitize_input("plain") == "plain"


def test_validate_candidate_input_ok():
    result = validate_candidate_input(CandidateInput(
        name="Jane Doe", email="jane@example.com", phone="+15551234567", job_title="Engineer",
    ))
    assert result.ok
    assert result.message is None


def test_validate_candidate_input_missing_fields():
    result = validate_candidate_input(CandidateInput(name="  ", email="jane@example.com"))
    assert not result.ok
    assert set(result.errors) == {"name", "phone", "job_title"}
    assert result.message == MSG_REQUIRED


def test_validate_candidate_input_bad_email_and_phone():
    result = validate_candidate_input(CandidateInput(
        name="Jane", email="not-an-email", phone="abc", job_title="Engineer",
    ))
    assert result.errors == {"email": MSG_EMAIL, "phone": MSG_PHONE}
    assert result.message == MSG_EMAIL


def test_validate_candidate_input_lengths():
    result = validate_candidate_input(CandidateInput(
        name="x" * 101, email="jane@example.com", phone="+15551234567",
        job_title="y" * 100, notes="z" * 501,
    ))
    assert set(result.errors) == {"name", "notes"}

    # surrounding whitespace does not count towards the limit
    result = validate_candidate_input(CandidateInput(
        name=" " + "x" * 100 + " ", email="jane@example.com", phone="+15551234567", job_title="Engineer",
    ))
    assert result.ok


@pytest.mark.parametrize("field,value,message", [
    ("email", 123, MSG_EMAIL),
    ("phone", 15551234567, MSG_PHONE),
    ("name", 5, MSG_REQUIRED),
    ("job_title", True, MSG_REQUIRED),
    ("notes", 7, "Notes must be text"),
])
def test_validate_candidate_input_rejects_non_text(field, value, message):
    data = CandidateInput(name="Jane", email="jane@example.com", phone="+15551234567", job_title="Engineer")
    setattr(data, field, value)
    result = validate_candidate_input(data)
    assert result.errors == {field: message}
