from fastapi import APIRouter, Depends
from app.core.dependencies import require_section
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.notices.schemas import NoticeCreate, NoticeUpdate, NoticeResponse
from app.modules.notices.service import NoticeService
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/notices", tags=["notices"])


def get_notice_service(supabase: Client = Depends(get_supabase)) -> NoticeService:
    return NoticeService(supabase)


@router.get("", response_model=List[NoticeResponse])
async def list_notices(
    status: Optional[str] = None,
    category: Optional[str] = None,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeService = Depends(get_notice_service)
):
    """List notices, drafts included"""
    return service.list_notices(status=status, category=category)


@router.post("", response_model=NoticeResponse, status_code=201)
async def create_notice(
    notice_data: NoticeCreate,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeService = Depends(get_notice_service)
):
    return service.create_notice(notice_data)


@router.get("/{notice_id}", response_model=NoticeResponse)
async def get_notice(
    notice_id: str,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeService = Depends(get_notice_service)
):
    return service.get_notice(notice_id)


@router.put("/{notice_id}", response_model=NoticeResponse)
async def update_notice(
    notice_id: str,
    notice_data: NoticeUpdate,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeService = Depends(get_notice_service)
):
    return service.update_notice(notice_id, notice_data)


@router.delete("/{notice_id}", status_code=204)
async def delete_notice(
    notice_id: str,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeService = Depends(get_notice_service)
):
    service.delete_notice(notice_id)
    return None
