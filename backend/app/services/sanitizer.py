"""
Input sanitization for application submissions.

This is a syntactic strip, not an HTML parser: every `<...>` run is removed
left to right in a single pass and the result is trimmed. Non-string input
becomes an empty string.
"""

import re
from typing import Any, List, Optional

from app.models.application import ApplicationSubmission, SanitizedApplication

_TAG_RE = re.compile(r"<[^>]*>")

# String fields that go through strip_html unchanged
_TEXT_FIELDS = (
    "type",
    "name",
    "email",
    "phone",
    "location",
    "company",
    "website",
    "portfolio_url",
    "linkedin_url",
    "bio",
    "referral_source",
    "primary_discipline",
    "vendor_type",
    "website_url",
)


def strip_html(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return _TAG_RE.sub("", value).strip()


def sanitize_list(value: Any) -> Optional[List[str]]:
    """
    Sanitize each element of an array field and drop the empty results.

    Returns None when the value is not a list at all, so "not provided"
    stays distinguishable from "provided but empty".
    """
    if not isinstance(value, list):
        return None
    cleaned = [strip_html(item) for item in value]
    return [item for item in cleaned if item]


def sanitize_submission(submission: ApplicationSubmission) -> SanitizedApplication:
    """Apply strip_html / sanitize_list to every user-supplied field."""
    fields = {name: strip_html(getattr(submission, name)) for name in _TEXT_FIELDS}
    return SanitizedApplication(
        **fields,
        disciplines=sanitize_list(submission.disciplines),
        services_offered=sanitize_list(submission.services_offered),
        years_experience=submission.years_experience,
    )
