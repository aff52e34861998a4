# -*- coding: utf-8 -*-
"""
Organization wizard schema.

Three steps:
1. Basic information - name, priority, segment, business type, principal/distributor
2. Address & notes - every field optional, so the step is valid when left empty
3. Contacts - contacts to associate with the new organization
"""

from datetime import date
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.validation import field_validators as fv
from services.validation.schema_adapter import PydanticSchemaAdapter
from services.validation.step_schema import StepSchema

OrganizationType = Literal["B2B", "B2C", "B2B2C", "Non-Profit", "Government", "Other"]
OrganizationSize = Literal["Startup", "Small", "Medium", "Large", "Enterprise"]
PriorityLetter = Literal["A", "B", "C", "D"]

ORGANIZATION_TYPES = ["B2B", "B2C", "B2B2C", "Non-Profit", "Government", "Other"]
ORGANIZATION_SIZES = ["Startup", "Small", "Medium", "Large", "Enterprise"]

# (letter, lead score, description)
PRIORITY_OPTIONS = [
    ("A", 90, "Highest priority - Strategic accounts"),
    ("B", 70, "High priority - Major opportunities"),
    ("C", 50, "Medium priority - Qualified prospects"),
    ("D", 30, "Lower priority - New prospects"),
]

ORGANIZATION_SEGMENTS = [
    "Fine Dining",
    "Casual Dining",
    "Fast Food",
    "Healthcare",
    "Education",
    "Corporate Catering",
    "Hotel & Resort",
    "Food & Beverage - Manufacturing",
    "Food & Beverage - Distribution",
    "Other",
]

# Typical head count per company size (inclusive bounds, None = open)
EMPLOYEE_RANGES = {
    "Startup": (None, 50, "Startup organizations typically have 50 or fewer employees"),
    "Small": (10, 250, "Small organizations typically have 10-250 employees"),
    "Medium": (250, 1000, "Medium organizations typically have 250-1000 employees"),
    "Large": (1000, 10000, "Large organizations typically have 1000-10000 employees"),
    "Enterprise": (10000, None, "Enterprise organizations typically have 10000+ employees"),
}

WEBSITE_MESSAGE = "Website must be a valid URL starting with http:// or https://"


def priority_to_score(letter: str) -> int:
    """Map a priority letter to its lead score."""
    for option_letter, score, _ in PRIORITY_OPTIONS:
        if option_letter == letter:
            return score
    raise ValueError(f"Unknown priority: {letter}")


def score_to_priority(score: Optional[int]) -> str:
    """Map a lead score back to a priority letter."""
    if not score:
        return "D"
    if score >= 90:
        return "A"
    if score >= 70:
        return "B"
    if score >= 50:
        return "C"
    return "D"


class OrganizationForm(BaseModel):
    """Type and format rules for organization fields. Every field is optional."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Step 1
    name: Optional[str] = Field(default=None, max_length=255)
    priority: Optional[PriorityLetter] = None
    segment: Optional[str] = Field(default=None, max_length=255)
    type: Optional[OrganizationType] = None
    size: Optional[OrganizationSize] = None
    employees_count: Optional[int] = Field(default=None, ge=0)
    is_principal: Optional[bool] = None
    is_distributor: Optional[bool] = None

    # Step 2
    address_line_1: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, max_length=100)
    state_province: Optional[str] = Field(default=None, max_length=100)
    postal_code: Optional[str] = Field(default=None, max_length=20)
    primary_phone: Optional[str] = Field(default=None, max_length=50)
    website: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=5000)

    # Step 3
    assigned_contacts: Optional[List[str]] = None

    # Not collected by the wizard; accepted when editing an existing record
    founded_year: Optional[int] = None
    lead_score: Optional[int] = Field(default=None, ge=0, le=100)
    currency_code: Optional[str] = Field(default=None, pattern=r"^[A-Z]{3}$")

    @field_validator("website")
    @classmethod
    def _check_website(cls, value: Optional[str]) -> Optional[str]:
        if value and not fv.URL_REGEX.match(value):
            raise ValueError(WEBSITE_MESSAGE)
        return value

    @field_validator("founded_year")
    @classmethod
    def _check_founded_year(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        if value < 1800:
            raise ValueError("Founded year must be 1800 or later")
        if value > date.today().year + 1:
            raise ValueError("Founded year cannot be in the future")
        return value


def principal_distributor_exclusive(data: Mapping[str, Any]) -> Dict[str, str]:
    """An organization cannot be both a principal and a distributor."""
    if data.get("is_principal") and data.get("is_distributor"):
        return {"is_distributor": "Cannot be both Principal and Distributor"}
    return {}


def employees_match_size(data: Mapping[str, Any]) -> Dict[str, str]:
    """Check the employee count against the typical range of the chosen size."""
    size = data.get("size")
    count = data.get("employees_count")
    if size not in EMPLOYEE_RANGES or fv.is_empty(count):
        return {}
    try:
        count = int(count)
    except (TypeError, ValueError):
        # Reported by the employee count field validator
        return {}

    low, high, message = EMPLOYEE_RANGES[size]
    if (low is not None and count < low) or (high is not None and count > high):
        return {"employees_count": message}
    return {}


ORGANIZATION_LABELS = {
    "name": "Organization name",
    "priority": "Priority",
    "segment": "Segment",
    "type": "Business type",
    "size": "Company size",
    "employees_count": "Employee count",
    "is_principal": "Principal",
    "is_distributor": "Distributor",
    "address_line_1": "Address",
    "city": "City",
    "state_province": "State/Province",
    "postal_code": "Postal code",
    "primary_phone": "Phone",
    "website": "Website",
    "description": "Notes",
    "assigned_contacts": "Contacts",
}


def build_organization_steps() -> List[StepSchema]:
    """Create the step schemas of the organization wizard."""
    delegate = PydanticSchemaAdapter(OrganizationForm)

    basic = StepSchema(
        step_index=1,
        title="Basic Information",
        description="Organization name, priority and segment",
        fields=[
            ("name", fv.max_length(255, "Organization name")),
            ("priority", fv.one_of([letter for letter, _, _ in PRIORITY_OPTIONS],
                                   "Priority must be A, B, C or D")),
            ("segment", fv.max_length(255, "Segment")),
            ("type", fv.one_of(ORGANIZATION_TYPES, "Please choose a valid business type")),
            ("size", fv.one_of(ORGANIZATION_SIZES, "Please choose a valid company size")),
            ("employees_count", fv.integer_range(0, None, "Employee count")),
            ("is_principal", None),
            ("is_distributor", None),
        ],
        required=["name", "priority", "segment"],
        labels=ORGANIZATION_LABELS,
        rules=[principal_distributor_exclusive, employees_match_size],
        delegate=delegate,
    )

    address = StepSchema(
        step_index=2,
        title="Address & Notes",
        description="Location, phone and notes",
        fields=[
            ("address_line_1", fv.max_length(255, "Address line 1")),
            ("city", fv.max_length(100, "City")),
            ("state_province", fv.max_length(100, "State/Province")),
            ("postal_code", fv.max_length(20, "Postal code")),
            ("primary_phone", fv.compose(fv.max_length(50, "Primary phone"), fv.phone())),
            ("website", fv.url(WEBSITE_MESSAGE)),
            ("description", fv.max_length(5000, "Notes")),
        ],
        labels=ORGANIZATION_LABELS,
        delegate=delegate,
    )

    contacts = StepSchema(
        step_index=3,
        title="Contacts",
        description="Contacts working at this organization",
        fields=[
            ("assigned_contacts", fv.each(fv.uuid_value("Contact ID"))),
        ],
        labels=ORGANIZATION_LABELS,
        delegate=delegate,
    )

    return [basic, address, contacts]
