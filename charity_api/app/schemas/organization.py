"""
Pydantic schemas for charitable organizations.

Organizations come in two categories, orphanages and old age homes,
each kept in its own list with its own id sequence.  The funding
amount is usually display text such as ``"₹1,50,000"`` but plain
numbers are accepted as well; it is stored exactly as supplied.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

FundAmount = Union[str, int, float]


class OrganizationType(str, Enum):
    """Category token used in request paths."""

    ORPHANAGE = "orphanage"
    OLDAGE = "oldage"


class OrganizationCreate(BaseModel):
    """Schema for creating an organization.

    Only the fields below are stored.  Unknown fields, including any
    ``id`` supplied by the client, are ignored; ids are always assigned
    by the server.
    """

    org_name: Optional[str] = Field(None, examples=["Hope Children's Home"])
    name: Optional[str] = Field(None, description="Alternative display name used by older clients")
    fund_amount: FundAmount = Field(..., examples=["₹25,000"])
    location: Optional[str] = Field(None, examples=["Chennai"])
    description: Optional[str] = None
    contact: Optional[str] = None
    image: Optional[str] = Field(None, description="URL or relative path of a display image")

    model_config = {
        "extra": "ignore",
    }

    @field_validator("fund_amount")
    @classmethod
    def validate_fund_amount(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError("fund_amount must not be empty")
        return v


class FundingUpdate(BaseModel):
    """Request body for the funding update endpoint."""

    fund_amount: FundAmount = Field(..., examples=["₹30,000"])


class StoreOrganizationRead(BaseModel):
    """Organization row from the SQLite-backed store."""

    id: int
    org_name: str
    fund_amount: float


class HealthStatus(BaseModel):
    status: str
    message: str
