from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime


class HomeSettingsUpdate(BaseModel):
    hero_headline: Optional[str] = None
    hero_subheadline: Optional[str] = None
    image_layout: Optional[List[str]] = None
    current_images: List[str] = Field(default_factory=list)


class HomeSettingsResponse(BaseModel):
    id: Optional[Union[int, str]] = None
    hero_headline: Optional[str] = None
    hero_subheadline: Optional[str] = None
    hero_images: List[str] = Field(default_factory=list)
    show_products_section: bool = True
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
