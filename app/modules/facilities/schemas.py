from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class FacilityCreate(BaseModel):
    name_ko: str = Field(min_length=1)
    name_en: Optional[str] = None
    type: Optional[str] = None
    specs: Optional[str] = None
    status: str = "active"


class FacilityUpdate(BaseModel):
    name_ko: Optional[str] = Field(default=None, min_length=1)
    name_en: Optional[str] = None
    type: Optional[str] = None
    specs: Optional[str] = None
    status: Optional[str] = None


class FacilityResponse(BaseModel):
    id: str
    name_ko: str
    name_en: Optional[str] = None
    type: Optional[str] = None
    specs: Optional[str] = None
    status: Optional[str] = "active"
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
