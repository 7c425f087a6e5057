from fastapi import APIRouter, Depends, File, UploadFile
from app.config import settings
from app.core.dependencies import require_section
from app.core.exceptions import InvalidInputError, PersistenceError
from app.core.storage import SupabaseStorage
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.company.schemas import (
    CompanySettingsResponse, CompanySettingsUpdate, FactoryImagesUpdate, FactoryImageUploadResponse
)
from app.modules.company.service import CompanyService
from supabase import Client

router = APIRouter(prefix="/company", tags=["company"])


def get_company_service(supabase: Client = Depends(get_supabase)) -> CompanyService:
    return CompanyService(supabase)


@router.get("", response_model=CompanySettingsResponse)
async def get_company_settings(
    _: AdminResponse = Depends(require_section("company")),
    service: CompanyService = Depends(get_company_service)
):
    return service.get_settings()


@router.put("", response_model=CompanySettingsResponse)
async def update_company_settings(
    settings_data: CompanySettingsUpdate,
    _: AdminResponse = Depends(require_section("company")),
    service: CompanyService = Depends(get_company_service)
):
    """Partial update of the company profile"""
    return service.update_settings(settings_data)


@router.post("/sync-defaults", response_model=CompanySettingsResponse)
async def sync_company_defaults(
    _: AdminResponse = Depends(require_section("company")),
    service: CompanyService = Depends(get_company_service)
):
    """Overwrite the profile fields with the canonical company data"""
    return service.sync_defaults()


@router.post("/factory-images/upload", response_model=FactoryImageUploadResponse)
async def upload_factory_image(
    file: UploadFile = File(...),
    _: AdminResponse = Depends(require_section("company")),
    supabase: Client = Depends(get_supabase)
):
    """Upload one factory photo and return its public URL (saved with PUT /factory-images)"""
    url = await SupabaseStorage(supabase, settings.products_bucket).upload(file, prefix="factory/")
    if url is None:
        if not file.filename:
            raise InvalidInputError("No file uploaded")
        raise PersistenceError("Factory image upload failed")
    return FactoryImageUploadResponse(url=url)


@router.put("/factory-images", response_model=CompanySettingsResponse)
async def update_factory_images(
    images_data: FactoryImagesUpdate,
    _: AdminResponse = Depends(require_section("company")),
    service: CompanyService = Depends(get_company_service)
):
    return service.set_factory_images(images_data.factory_images)
