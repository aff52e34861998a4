# -*- coding: utf-8 -*-
"""
Contact wizard schema.

Three steps:
1. Name and position
2. Organization and reachability (email required)
3. Details - address, website, notes and preferred principals, all optional
"""

from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.validation import field_validators as fv
from services.validation.schema_adapter import PydanticSchemaAdapter
from services.validation.step_schema import StepSchema

NOTES_MAX_LENGTH = 5000


class ContactForm(BaseModel):
    """Type and format rules for contact fields. Every field is optional."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Step 1
    first_name: Optional[str] = Field(default=None, max_length=255)
    last_name: Optional[str] = Field(default=None, max_length=255)
    position: Optional[str] = Field(default=None, max_length=255)

    # Step 2
    organization_id: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)

    # Step 3
    address: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)
    website: Optional[str] = None
    account_manager: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)
    is_primary: Optional[bool] = None
    preferred_principals: Optional[List[str]] = None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value and not fv.EMAIL_REGEX.match(value):
            raise ValueError("Please enter a valid email address")
        return value.lower() if value else value


CONTACT_LABELS = {
    "first_name": "First name",
    "last_name": "Last name",
    "position": "Position",
    "organization_id": "Organization",
    "email": "Email",
    "phone": "Phone",
    "address": "Address",
    "city": "City",
    "state": "State",
    "zip_code": "Zip code",
    "website": "Website",
    "account_manager": "Account manager",
    "notes": "Notes",
    "is_primary": "Primary contact",
    "preferred_principals": "Preferred principals",
}


def full_name(contact: Mapping[str, Any]) -> str:
    return f"{contact.get('first_name') or ''} {contact.get('last_name') or ''}".strip()


def initials(contact: Mapping[str, Any]) -> str:
    first = (contact.get("first_name") or "")[:1].upper()
    last = (contact.get("last_name") or "")[:1].upper()
    return f"{first}{last}"


def build_contact_steps() -> List[StepSchema]:
    """Create the step schemas of the contact wizard."""
    delegate = PydanticSchemaAdapter(ContactForm)

    basic = StepSchema(
        step_index=1,
        title="Basic Information",
        description="Who is this contact?",
        fields=[
            ("first_name", fv.max_length(255, "First name")),
            ("last_name", fv.max_length(255, "Last name")),
            ("position", fv.max_length(255, "Position")),
        ],
        required=["first_name", "last_name"],
        labels=CONTACT_LABELS,
        delegate=delegate,
    )

    reachability = StepSchema(
        step_index=2,
        title="Organization",
        description="Where does this contact work and how to reach them",
        fields=[
            ("organization_id", fv.uuid_value("Organization")),
            ("email", fv.compose(fv.email(), fv.max_length(255, "Email"))),
            ("phone", fv.compose(fv.max_length(50, "Phone number"), fv.phone())),
        ],
        required=["organization_id", "email"],
        labels=CONTACT_LABELS,
        delegate=delegate,
    )

    details = StepSchema(
        step_index=3,
        title="Contact Details",
        description="Address, website and notes",
        fields=[
            ("address", fv.max_length(255, "Address")),
            ("city", fv.max_length(100, "City")),
            ("state", fv.max_length(100, "State")),
            ("zip_code", fv.max_length(20, "Zip code")),
            ("website", fv.url()),
            ("account_manager", fv.max_length(255, "Account manager")),
            ("notes", fv.max_length(NOTES_MAX_LENGTH, "Notes")),
            ("is_primary", None),
            ("preferred_principals", None),
        ],
        labels=CONTACT_LABELS,
        delegate=delegate,
    )

    return [basic, reachability, details]
