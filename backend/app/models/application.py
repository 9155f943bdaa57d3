"""
Pydantic models for talent and vendor applications.

Models:
  ApplicationSubmission : raw JSON body as posted by the site form
  SanitizedApplication  : the same fields after HTML stripping / trimming
  ApplicationRecord     : normalized row inserted into the applications table
"""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel


class ApplicationType(str, Enum):
    TALENT = "talent"
    VENDOR = "vendor"


VALID_TYPES = tuple(t.value for t in ApplicationType)

TALENT_DISCIPLINES = (
    "Photography",
    "Videography",
    "Directing",
    "Graphic Design",
    "Motion Design",
    "Web Development",
    "App Development",
    "Production Management",
    "Event Management",
    "AV Engineering",
    "Sound Design",
    "Lighting Design",
    "Fabrication",
    "Styling",
    "Other",
)

VENDOR_TYPES = (
    "Fabrication & Build",
    "Print & Signage",
    "AV & Equipment Rental",
    "Catering & F&B",
    "Venue",
    "Furniture & Decor Rental",
    "Staffing",
    "Transportation & Logistics",
    "Other",
)

# Columns that only exist on one kind of application row
TALENT_ONLY_FIELDS = frozenset({"primary_discipline", "disciplines", "years_experience"})
VENDOR_ONLY_FIELDS = frozenset({"vendor_type", "services_offered"})


# ---------------------------------------------------------------------------
# Inbound request body
# ---------------------------------------------------------------------------

class ApplicationSubmission(BaseModel):
    """
    Raw application body.

    The form is public, so nothing about the shape can be trusted: every
    field is optional and untyped, and the sanitizer decides what survives.
    Unknown keys are ignored.
    """
    model_config = {"extra": "ignore"}

    type: Any = None
    name: Any = None
    email: Any = None
    phone: Any = None
    location: Any = None
    company: Any = None
    website: Any = None
    portfolio_url: Any = None
    linkedin_url: Any = None
    bio: Any = None
    referral_source: Any = None
    primary_discipline: Any = None
    disciplines: Any = None
    years_experience: Any = None
    vendor_type: Any = None
    services_offered: Any = None
    website_url: Any = None  # honeypot, hidden from humans


class SanitizedApplication(BaseModel):
    """Submission after sanitization. Absent or non-string fields become ""."""
    type: str = ""
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    company: str = ""
    website: str = ""
    portfolio_url: str = ""
    linkedin_url: str = ""
    bio: str = ""
    referral_source: str = ""
    primary_discipline: str = ""
    vendor_type: str = ""
    website_url: str = ""
    # None means "not an array" so the row can tell absent from empty
    disciplines: Optional[List[str]] = None
    services_offered: Optional[List[str]] = None
    # Coerced by the shaper, kept raw here
    years_experience: Any = None


# ---------------------------------------------------------------------------
# Outbound row
# ---------------------------------------------------------------------------

class ApplicationRecord(BaseModel):
    """Normalized applications row. Optional text fields are None, never ""."""
    type: ApplicationType
    name: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    company: Optional[str] = None
    website: Optional[str] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    bio: str
    referral_source: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    # Talent only
    primary_discipline: Optional[str] = None
    disciplines: Optional[List[str]] = None
    years_experience: Optional[Union[int, float]] = None

    # Vendor only
    vendor_type: Optional[str] = None
    services_offered: Optional[List[str]] = None

    def to_row(self) -> dict:
        """JSON-ready insert payload with the other type's columns left out."""
        if self.type == ApplicationType.TALENT:
            exclude = VENDOR_ONLY_FIELDS
        else:
            exclude = TALENT_ONLY_FIELDS
        return self.model_dump(mode="json", exclude=set(exclude))
