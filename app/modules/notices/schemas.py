from pydantic import BaseModel, Field
from typing import Literal, Optional
from datetime import datetime

NoticeStatus = Literal["draft", "published"]


class NoticeCreate(BaseModel):
    title_ko: str = Field(min_length=1)
    title_en: Optional[str] = None
    body_ko: Optional[str] = None
    body_en: Optional[str] = None
    category: Optional[str] = None
    status: NoticeStatus = "draft"
    is_pinned: bool = False
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None


class NoticeUpdate(BaseModel):
    title_ko: Optional[str] = Field(default=None, min_length=1)
    title_en: Optional[str] = None
    body_ko: Optional[str] = None
    body_en: Optional[str] = None
    category: Optional[str] = None
    status: Optional[NoticeStatus] = None
    is_pinned: Optional[bool] = None
    image_url: Optional[str] = None
    published_at: Optional[datetime] = None


class NoticeResponse(BaseModel):
    id: str
    title_ko: str
    title_en: Optional[str] = None
    body_ko: Optional[str] = None
    body_en: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = "draft"
    is_pinned: Optional[bool] = False
    image_url: Optional[str] = None
    views: Optional[int] = 0
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NoticeSummary(BaseModel):
    """Related-notice reference embedded in product responses"""
    id: str
    title_ko: str
    title_en: Optional[str] = None
