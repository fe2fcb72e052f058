from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


class BuyerCreate(BaseModel):
    buyer_id: str = Field(min_length=1, max_length=64)
    buyer_name: str = Field(min_length=1)
    company_name: Optional[str] = None
    email: Optional[EmailStr] = None
    status: str = "Active"
    payment_terms: Optional[str] = None
    quality_score: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None


class BuyerUpdate(BaseModel):
    buyer_name: Optional[str] = Field(default=None, min_length=1)
    company_name: Optional[str] = None
    email: Optional[EmailStr] = None
    status: Optional[str] = None
    payment_terms: Optional[str] = None
    quality_score: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None

    @field_validator("buyer_name", "status")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class BuyerResponse(BaseModel):
    id: str
    buyer_id: str
    buyer_name: str
    company_name: Optional[str] = None
    email: Optional[str] = None
    status: str
    payment_terms: Optional[str] = None
    quality_score: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
