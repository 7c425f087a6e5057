from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import datetime

PartnerType = Literal["client", "supplier", "manufacturer"]


class PartnerCreate(BaseModel):
    name_ko: str = Field(min_length=1)
    name_en: Optional[str] = None
    website_url: Optional[str] = None
    type: Optional[PartnerType] = None


class PartnerUpdate(BaseModel):
    name_ko: Optional[str] = Field(default=None, min_length=1)
    name_en: Optional[str] = None
    website_url: Optional[str] = None
    type: Optional[PartnerType] = None


class PartnerResponse(BaseModel):
    id: str
    name_ko: str
    name_en: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PartnerSummary(BaseModel):
    """Partner reference embedded in product responses"""
    id: str
    name_ko: str
    name_en: Optional[str] = None
    logo_url: Optional[str] = None
