"""
Builds the normalized applications row from a validated submission.
"""

import math
from typing import Any, Optional, Union

from app.models.application import (
    ApplicationRecord,
    ApplicationType,
    SanitizedApplication,
)


def coerce_years_experience(value: Any) -> Optional[Union[int, float]]:
    """
    Coerce years_experience to a number, or None.

    Numbers and numeric strings are accepted; whole values come back as int.
    Booleans, non-numeric strings, NaN/inf, integers too large for a float,
    and zero all map to None rather than being stored as 0.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None

    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None

    if not math.isfinite(number) or number == 0:
        return None
    if number.is_integer():
        return int(number)
    return number


def _or_none(value: str) -> Optional[str]:
    return value or None


def build_application_record(
    application: SanitizedApplication,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> ApplicationRecord:
    """
    Shape a validated application into an ApplicationRecord.

    Assumes validate_application() already passed, so type is one of the
    ApplicationType values. Talent-only and vendor-only fields are filled in
    for the matching type only.
    """
    app_type = ApplicationType(application.type)

    record = ApplicationRecord(
        type=app_type,
        name=application.name,
        email=application.email,
        phone=_or_none(application.phone),
        location=_or_none(application.location),
        company=_or_none(application.company),
        website=_or_none(application.website),
        portfolio_url=_or_none(application.portfolio_url),
        linkedin_url=_or_none(application.linkedin_url),
        bio=application.bio,
        referral_source=_or_none(application.referral_source),
        ip_address=ip_address or None,
        user_agent=user_agent or None,
    )

    if app_type == ApplicationType.TALENT:
        record.primary_discipline = application.primary_discipline
        record.disciplines = application.disciplines
        record.years_experience = coerce_years_experience(application.years_experience)
    else:
        record.vendor_type = application.vendor_type
        record.services_offered = application.services_offered

    return record
