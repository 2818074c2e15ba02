from flask_wtf import FlaskForm
from flask_wtf.file import FileField
from wtforms import StringField, TextAreaField

from ...utils.validators import CandidateInput


class CandidateForm(FlaskForm):
    """Multipart referral submission; checks live in the service layer."""

    class Meta:
        csrf = False

    name = StringField("Name")
    email = StringField("Email")
    phone = StringField("Phone")
    jobTitle = StringField("Job title")
    notes = TextAreaField("Notes")
    resume = FileField("Resume (PDF)")

    def to_input(self) -> CandidateInput:
        return CandidateInput(
            name=self.name.data,
            email=self.email.data,
            phone=self.phone.data,
            job_title=self.jobTitle.data,
            notes=self.notes.data or None,
        )


class StatusForm(FlaskForm):
    class Meta:
        csrf = False

    status = StringField("Status")
