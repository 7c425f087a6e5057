from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProductCategoryCreate(BaseModel):
    code: str = Field(min_length=1)
    name_ko: str = Field(min_length=1)
    name_en: Optional[str] = None


class ProductCategoryResponse(BaseModel):
    id: Optional[str] = None
    code: str
    name_ko: str
    name_en: Optional[str] = None
    created_at: Optional[datetime] = None
    product_count: int = 0

    class Config:
        from_attributes = True
