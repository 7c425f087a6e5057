from fastapi import APIRouter, Depends, File, Form, UploadFile
from app.config import settings
from app.core.dependencies import require_section
from app.core.forms import build_form_model
from app.core.storage import SupabaseStorage
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.facilities.schemas import FacilityCreate, FacilityUpdate, FacilityResponse
from app.modules.facilities.service import FacilityService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/facilities", tags=["facilities"])


def get_facility_service(supabase: Client = Depends(get_supabase)) -> FacilityService:
    return FacilityService(supabase)


def get_facility_storage(supabase: Client = Depends(get_supabase)) -> SupabaseStorage:
    return SupabaseStorage(supabase, settings.facilities_bucket)


@router.get("", response_model=List[FacilityResponse])
async def list_facilities(
    status: Optional[str] = None,
    _: AdminResponse = Depends(require_section("facilities")),
    service: FacilityService = Depends(get_facility_service)
):
    return service.list_facilities(status=status)


@router.post("", response_model=FacilityResponse, status_code=201)
async def create_facility(
    name_ko: str = Form(...),
    name_en: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    specs: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    _: AdminResponse = Depends(require_section("facilities")),
    service: FacilityService = Depends(get_facility_service),
    storage: SupabaseStorage = Depends(get_facility_storage)
):
    """Create a facility; status defaults to 'active'"""
    facility_data = build_form_model(
        FacilityCreate, name_ko=name_ko, name_en=name_en, type=type, specs=specs, status=status or "active"
    )
    image_url = await storage.upload(image)
    return service.create_facility(facility_data, image_url)


@router.get("/{facility_id}", response_model=FacilityResponse)
async def get_facility(
    facility_id: str,
    _: AdminResponse = Depends(require_section("facilities")),
    service: FacilityService = Depends(get_facility_service)
):
    return service.get_facility(facility_id)


@router.put("/{facility_id}", response_model=FacilityResponse)
async def update_facility(
    facility_id: str,
    name_ko: Optional[str] = Form(None),
    name_en: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    specs: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    _: AdminResponse = Depends(require_section("facilities")),
    service: FacilityService = Depends(get_facility_service),
    storage: SupabaseStorage = Depends(get_facility_storage)
):
    submitted = {"name_ko": name_ko, "name_en": name_en, "type": type, "specs": specs, "status": status or None}
    facility_data = build_form_model(FacilityUpdate, **{k: v for k, v in submitted.items() if v is not None})
    image_url = await storage.upload(image)
    return service.update_facility(facility_id, facility_data, image_url)


@router.delete("/{facility_id}", status_code=204)
async def delete_facility(
    facility_id: str,
    _: AdminResponse = Depends(require_section("facilities")),
    service: FacilityService = Depends(get_facility_service)
):
    service.delete_facility(facility_id)
    return None
