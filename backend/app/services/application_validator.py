"""
Field validation for sanitized applications.

Every rule runs independently and all failures are collected, so the form
can show every problem at once instead of one per round-trip.
"""

import re
from dataclasses import dataclass, field
from typing import List

from pydantic import AnyUrl, TypeAdapter, ValidationError

from app.models.application import (
    TALENT_DISCIPLINES,
    VALID_TYPES,
    VENDOR_TYPES,
    ApplicationType,
    SanitizedApplication,
)

MIN_NAME_LENGTH = 2
MIN_BIO_LENGTH = 50

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_URL_ADAPTER = TypeAdapter(AnyUrl)

# (field name, error message) for the optional URL fields
_URL_FIELDS = (
    ("website", "Invalid website URL"),
    ("portfolio_url", "Invalid portfolio URL"),
    ("linkedin_url", "Invalid LinkedIn URL"),
)


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def text_length(value: str) -> int:
    """
    Length in UTF-16 code units, the same count the browser form applies to
    its minimum lengths. Characters outside the BMP (most emoji) count as 2.
    """
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


def is_valid_email(email: str) -> bool:
    return bool(email) and _EMAIL_RE.fullmatch(email) is not None


def is_valid_url(url: str) -> bool:
    """
    True for an empty value or any well-formed absolute URL.

    No scheme restriction is applied: mailto:, ftp: etc. pass as long as
    they parse.
    """
    if not url:
        return True
    try:
        _URL_ADAPTER.validate_python(url)
    except ValidationError:
        return False
    return True


def is_honeypot_triggered(application: SanitizedApplication) -> bool:
    """The hidden website_url field is only ever filled in by bots."""
    return bool(application.website_url)


def validate_application(application: SanitizedApplication) -> ValidationResult:
    errors: List[str] = []

    if application.type not in VALID_TYPES:
        errors.append("Invalid application type")
    if text_length(application.name) < MIN_NAME_LENGTH:
        errors.append("Name is required (min 2 characters)")
    if not is_valid_email(application.email):
        errors.append("Valid email is required")
    if text_length(application.bio) < MIN_BIO_LENGTH:
        errors.append("Bio must be at least 50 characters")

    if application.type == ApplicationType.TALENT.value:
        if application.primary_discipline not in TALENT_DISCIPLINES:
            errors.append("Primary discipline is required")
    if application.type == ApplicationType.VENDOR.value:
        if application.vendor_type not in VENDOR_TYPES:
            errors.append("Vendor type is required")

    for field_name, message in _URL_FIELDS:
        if not is_valid_url(getattr(application, field_name)):
            errors.append(message)

    return ValidationResult(errors=errors)
