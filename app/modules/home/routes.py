from fastapi import APIRouter, Depends, File, Form, UploadFile
from app.config import settings
from app.core.dependencies import require_section
from app.core.forms import build_form_model, parse_json_field, parse_json_list
from app.core.storage import SupabaseStorage
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.home.schemas import HomeSettingsResponse, HomeSettingsUpdate
from app.modules.home.service import HomeService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/home", tags=["home"])


def get_home_service(supabase: Client = Depends(get_supabase)) -> HomeService:
    return HomeService(supabase)


@router.get("", response_model=HomeSettingsResponse)
async def get_home_settings(
    _: AdminResponse = Depends(require_section("home")),
    service: HomeService = Depends(get_home_service)
):
    return service.get_settings()


@router.put("", response_model=HomeSettingsResponse)
async def update_home_settings(
    hero_headline: Optional[str] = Form(None),
    hero_subheadline: Optional[str] = Form(None),
    image_layout: Optional[str] = Form(None),
    current_images: Optional[str] = Form(None),
    new_images: List[UploadFile] = File(default=[]),
    _: AdminResponse = Depends(require_section("home")),
    service: HomeService = Depends(get_home_service),
    supabase: Client = Depends(get_supabase)
):
    """Save the hero section; image_layout orders existing URLs and new_file_<i> placeholders"""
    settings_data = build_form_model(
        HomeSettingsUpdate,
        hero_headline=hero_headline,
        hero_subheadline=hero_subheadline,
        image_layout=parse_json_field(image_layout, "image_layout") if image_layout else None,
        current_images=parse_json_list(current_images, "current_images"),
    )
    storage = SupabaseStorage(supabase, settings.products_bucket)
    uploaded_urls = await storage.upload_many(new_images, prefix="hero/")
    return service.update_settings(settings_data, uploaded_urls)
