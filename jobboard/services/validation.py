"""
Job submission validation.
Pure and deterministic: no I/O, no normalisation of the input.
"""

import re

from jobboard.domain.errors import InvalidEmail, InvalidPhone, MissingField
from jobboard.domain.models import JobSubmission

# (attribute, wire name) in the order they are checked
REQUIRED_FIELDS: list[tuple[str, str]] = [
    ("job_title", "jobTitle"),
    ("company_name", "companyName"),
    ("description", "description"),
    ("job_type", "jobType"),
    ("salary", "salary"),
    ("location", "location"),
    ("contact_email", "contactEmail"),
]

# Shape check only, not RFC 5322
EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
# Optional +country code (1-3 digits) and separator, then 10 digits
PHONE_RE = re.compile(r"(\+\d{1,3}[- ]?)?\d{10}")


def validate_job(submission: JobSubmission) -> JobSubmission:
    """
    Check a raw submission and return it unchanged.

    Raises:
        MissingField: first required field that is absent, empty or blank.
        InvalidEmail: contactEmail does not look like an address.
        InvalidPhone: contactPhone is given but is not a 10-digit number.
    """
    for attr, wire_name in REQUIRED_FIELDS:
        value = getattr(submission, attr)
        if value is None or not value.strip():
            raise MissingField(wire_name)

    if not EMAIL_RE.fullmatch(submission.contact_email):
        raise InvalidEmail()

    if submission.contact_phone and not PHONE_RE.fullmatch(submission.contact_phone):
        raise InvalidPhone()

    return submission
