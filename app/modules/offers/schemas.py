from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List, Dict, Any, Literal
from datetime import datetime

from app.modules.offers.models import VERTICALS, US_STATES

OfferStatus = Literal["Active", "Testing", "Paused", "Archived"]
OfferType = Literal["CPA", "CPL", "Transfer", "Inbound", "Form Fill"]
Direction = Literal["Buying", "Selling"]

PRICE_RANGES = [
    ("publisher_payout_min", "publisher_payout_max"),
    ("advertiser_price_min", "advertiser_price_max"),
]


def price_range_errors(values: Dict[str, Any]) -> List[str]:
    """Messages for every min/max pair where both are set and min > max."""
    errors = []
    for low_field, high_field in PRICE_RANGES:
        low, high = values.get(low_field), values.get(high_field)
        if low is not None and high is not None and low > high:
            errors.append(f"{low_field} ({low}) must not exceed {high_field} ({high})")
    return errors


def _check_vertical(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in VERTICALS:
        raise ValueError(f"vertical must be one of {VERTICALS}")
    return value


def _check_states(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return None
    states = [s.strip().upper() for s in value]
    unknown = [s for s in states if s not in US_STATES]
    if unknown:
        raise ValueError(f"Unknown state codes: {', '.join(unknown)}")
    return states or None


class OfferBase(BaseModel):
    publisher_payout_min: Optional[float] = Field(default=None, ge=0)
    publisher_payout_max: Optional[float] = Field(default=None, ge=0)
    advertiser_price_min: Optional[float] = Field(default=None, ge=0)
    advertiser_price_max: Optional[float] = Field(default=None, ge=0)
    states_allowed: Optional[List[str]] = None
    age_range: Optional[str] = None
    hours_of_operation: Optional[str] = None
    compliance_requirements: Optional[str] = None
    payment_terms: Optional[str] = None
    notes: Optional[str] = None
    buyer_id: Optional[str] = None
    publisher_id: Optional[str] = None

    @field_validator("states_allowed")
    @classmethod
    def validate_states(cls, v):
        return _check_states(v)


class OfferCreate(OfferBase):
    offer_id: Optional[str] = Field(default=None, min_length=1, max_length=64)  # generated when omitted
    campaign_name: Optional[str] = Field(default=None, min_length=1)  # defaults to "<vertical> <offer_type>"
    vertical: str
    status: OfferStatus = "Testing"
    offer_type: OfferType = "CPA"
    direction: Direction = "Selling"

    @field_validator("vertical")
    @classmethod
    def validate_vertical(cls, v):
        return _check_vertical(v)

    @model_validator(mode="after")
    def check_price_ranges(self):
        errors = price_range_errors(self.model_dump())
        if errors:
            raise ValueError("; ".join(errors))
        return self


class OfferUpdate(OfferBase):
    """Partial update; only fields present in the request body are written."""
    campaign_name: Optional[str] = Field(default=None, min_length=1)
    vertical: Optional[str] = None
    status: Optional[OfferStatus] = None
    offer_type: Optional[OfferType] = None
    direction: Optional[Direction] = None

    @field_validator("campaign_name", "vertical", "status", "offer_type", "direction")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("vertical")
    @classmethod
    def validate_vertical(cls, v):
        return _check_vertical(v)


class OfferPage(BaseModel):
    """Offers already redacted for the caller's role, so items are plain mappings."""
    items: List[Dict[str, Any]]
    total: int
    limit: int
    offset: int


class OfferMappingRow(BaseModel):
    offer_id: str
    campaign_name: Optional[str] = None
    vertical: Optional[str] = None
    buyer_id: str = "N/A"
    buyer_name: str = "N/A"
    buyer_company: str = "N/A"
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    notes: str = ""
