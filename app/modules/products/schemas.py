from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime

from app.modules.notices.schemas import NoticeSummary
from app.modules.partners.schemas import PartnerSummary

ProductStatus = Literal["active", "discontinued"]


class ProductCreate(BaseModel):
    name_ko: str = Field(min_length=1)
    name_en: Optional[str] = None
    desc_ko: Optional[str] = None
    desc_en: Optional[str] = None
    category_code: Optional[str] = None
    model_no: Optional[str] = None
    capacity: Optional[str] = None
    status: ProductStatus = "active"
    is_featured: bool = False
    specs: Dict[str, Any] = Field(default_factory=dict)
    features: List[str] = Field(default_factory=list)
    partner_ids: List[str] = Field(default_factory=list)
    notice_ids: List[str] = Field(default_factory=list)


class ProductUpdate(ProductCreate):
    """Full replacement of the editable fields; images kept are listed in current_images"""
    current_images: List[str] = Field(default_factory=list)


class ProductFeaturedUpdate(BaseModel):
    is_featured: bool


class ProductCategorySummary(BaseModel):
    code: str
    name_ko: str
    name_en: Optional[str] = None


class ProductResponse(BaseModel):
    id: str
    name_ko: str
    name_en: Optional[str] = None
    desc_ko: Optional[str] = None
    desc_en: Optional[str] = None
    category_code: Optional[str] = None
    model_no: Optional[str] = None
    capacity: Optional[str] = None
    status: Optional[str] = "active"
    is_featured: Optional[bool] = False
    specs: Optional[Dict[str, Any]] = None
    features: Optional[List[str]] = None
    images: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    category: Optional[ProductCategorySummary] = None
    partners: List[PartnerSummary] = Field(default_factory=list)
    notices: List[NoticeSummary] = Field(default_factory=list)

    class Config:
        from_attributes = True
