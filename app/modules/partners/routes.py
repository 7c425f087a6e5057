from fastapi import APIRouter, Depends, File, Form, UploadFile
from app.config import settings
from app.core.dependencies import require_section
from app.core.forms import build_form_model
from app.core.storage import SupabaseStorage
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.partners.schemas import PartnerCreate, PartnerUpdate, PartnerResponse
from app.modules.partners.service import PartnerService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/partners", tags=["partners"])


def get_partner_service(supabase: Client = Depends(get_supabase)) -> PartnerService:
    return PartnerService(supabase)


def get_partner_storage(supabase: Client = Depends(get_supabase)) -> SupabaseStorage:
    return SupabaseStorage(supabase, settings.partners_bucket)


@router.get("", response_model=List[PartnerResponse])
async def list_partners(
    type: Optional[str] = None,
    _: AdminResponse = Depends(require_section("partners")),
    service: PartnerService = Depends(get_partner_service)
):
    return service.list_partners(type=type)


@router.post("", response_model=PartnerResponse, status_code=201)
async def create_partner(
    name_ko: str = Form(...),
    name_en: Optional[str] = Form(None),
    website_url: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    logo: Optional[UploadFile] = File(None),
    _: AdminResponse = Depends(require_section("partners")),
    service: PartnerService = Depends(get_partner_service),
    storage: SupabaseStorage = Depends(get_partner_storage)
):
    """Create a partner; a failed logo upload leaves logo_url empty"""
    partner_data = build_form_model(
        PartnerCreate, name_ko=name_ko, name_en=name_en, website_url=website_url, type=type or None
    )
    logo_url = await storage.upload(logo)
    return service.create_partner(partner_data, logo_url)


@router.get("/{partner_id}", response_model=PartnerResponse)
async def get_partner(
    partner_id: str,
    _: AdminResponse = Depends(require_section("partners")),
    service: PartnerService = Depends(get_partner_service)
):
    return service.get_partner(partner_id)


@router.put("/{partner_id}", response_model=PartnerResponse)
async def update_partner(
    partner_id: str,
    name_ko: Optional[str] = Form(None),
    name_en: Optional[str] = Form(None),
    website_url: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    logo: Optional[UploadFile] = File(None),
    _: AdminResponse = Depends(require_section("partners")),
    service: PartnerService = Depends(get_partner_service),
    storage: SupabaseStorage = Depends(get_partner_storage)
):
    submitted = {"name_ko": name_ko, "name_en": name_en, "website_url": website_url, "type": type or None}
    partner_data = build_form_model(PartnerUpdate, **{k: v for k, v in submitted.items() if v is not None})
    logo_url = await storage.upload(logo)
    return service.update_partner(partner_id, partner_data, logo_url)


@router.delete("/{partner_id}", status_code=204)
async def delete_partner(
    partner_id: str,
    _: AdminResponse = Depends(require_section("partners")),
    service: PartnerService = Depends(get_partner_service)
):
    service.delete_partner(partner_id)
    return None
