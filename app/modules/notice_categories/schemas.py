from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class NoticeCategoryCreate(BaseModel):
    name_ko: str = Field(min_length=1)
    name_en: Optional[str] = None
    sort_order: int = 0


class NoticeCategoryUpdate(BaseModel):
    name_ko: Optional[str] = Field(default=None, min_length=1)
    name_en: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class NoticeCategoryOrder(BaseModel):
    id: str
    sort_order: int


class NoticeCategoryReorder(BaseModel):
    items: List[NoticeCategoryOrder]


class NoticeCategoryResponse(BaseModel):
    id: str
    name_ko: str
    name_en: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0
    created_at: Optional[datetime] = None
    post_count: int = 0

    class Config:
        from_attributes = True
