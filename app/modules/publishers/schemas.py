from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime


class PublisherCreate(BaseModel):
    publisher_id: str = Field(min_length=1, max_length=64)
    publisher_name: str = Field(min_length=1)
    company_name: Optional[str] = None
    email: Optional[EmailStr] = None
    status: str = "Active"
    notes: Optional[str] = None


class PublisherUpdate(BaseModel):
    publisher_name: Optional[str] = Field(default=None, min_length=1)
    company_name: Optional[str] = None
    email: Optional[EmailStr] = None
    status: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("publisher_name", "status")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class PublisherResponse(BaseModel):
    id: str
    publisher_id: str
    publisher_name: str
    company_name: Optional[str] = None
    email: Optional[str] = None
    status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
