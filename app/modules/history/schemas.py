from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class HistoryCreate(BaseModel):
    year: str = Field(min_length=4, max_length=4, pattern=r"^\d{4}$")
    month: str = Field(min_length=1, max_length=2, pattern=r"^\d{1,2}$")
    day: Optional[str] = Field(default=None, pattern=r"^\d{1,2}$")
    content_ko: str = Field(min_length=1)
    content_en: Optional[str] = None


class HistoryUpdate(BaseModel):
    year: Optional[str] = Field(default=None, pattern=r"^\d{4}$")
    month: Optional[str] = Field(default=None, pattern=r"^\d{1,2}$")
    day: Optional[str] = Field(default=None, pattern=r"^\d{1,2}$")
    content_ko: Optional[str] = Field(default=None, min_length=1)
    content_en: Optional[str] = None


class HistoryResponse(BaseModel):
    id: str
    year: str
    month: str
    day: Optional[str] = None
    content_ko: str
    content_en: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
