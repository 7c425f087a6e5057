from pydantic import BaseModel, field_validator
from typing import List, Optional, Union
from datetime import datetime

BILINGUAL_TEXT_FIELDS = (
    "company_name", "ceo_name", "establishment", "employees", "revenue", "address",
    "mission_title", "mission_desc", "vision_title", "vision_desc",
    "ceo_message_title", "ceo_message_content",
)


class CoreValue(BaseModel):
    title_ko: str = ""
    title_en: str = ""
    desc_ko: str = ""
    desc_en: str = ""
    icon: str = ""


class FactoryImage(BaseModel):
    id: str
    url: str = ""
    sort_order: int = 0


class CompanySettingsUpdate(BaseModel):
    """Every field optional; only submitted fields are written"""
    company_name_ko: Optional[str] = None
    company_name_en: Optional[str] = None
    ceo_name_ko: Optional[str] = None
    ceo_name_en: Optional[str] = None
    establishment_ko: Optional[str] = None
    establishment_en: Optional[str] = None
    employees_ko: Optional[str] = None
    employees_en: Optional[str] = None
    revenue_ko: Optional[str] = None
    revenue_en: Optional[str] = None
    address_ko: Optional[str] = None
    address_en: Optional[str] = None
    mission_title_ko: Optional[str] = None
    mission_title_en: Optional[str] = None
    mission_desc_ko: Optional[str] = None
    mission_desc_en: Optional[str] = None
    vision_title_ko: Optional[str] = None
    vision_title_en: Optional[str] = None
    vision_desc_ko: Optional[str] = None
    vision_desc_en: Optional[str] = None
    ceo_message_title_ko: Optional[str] = None
    ceo_message_title_en: Optional[str] = None
    ceo_message_content_ko: Optional[str] = None
    ceo_message_content_en: Optional[str] = None
    core_values: Optional[List[CoreValue]] = None


class FactoryImagesUpdate(BaseModel):
    factory_images: List[FactoryImage]


class FactoryImageUploadResponse(BaseModel):
    url: str


class CompanySettingsResponse(CompanySettingsUpdate):
    id: Union[int, str]
    core_values: List[CoreValue] = []
    factory_images: List[FactoryImage] = []
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_validator("core_values", "factory_images", mode="before")
    @classmethod
    def null_to_empty(cls, value):
        return value or []
