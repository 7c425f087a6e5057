from fastapi import APIRouter, Depends
from app.core.dependencies import require_section
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.history.schemas import HistoryCreate, HistoryUpdate, HistoryResponse
from app.modules.history.service import HistoryService
from supabase import Client
from typing import List

router = APIRouter(prefix="/history", tags=["history"])


def get_history_service(supabase: Client = Depends(get_supabase)) -> HistoryService:
    return HistoryService(supabase)


@router.get("", response_model=List[HistoryResponse])
async def list_history(
    _: AdminResponse = Depends(require_section("history")),
    service: HistoryService = Depends(get_history_service)
):
    return service.list_history()


@router.post("", response_model=HistoryResponse, status_code=201)
async def create_history(
    history_data: HistoryCreate,
    _: AdminResponse = Depends(require_section("history")),
    service: HistoryService = Depends(get_history_service)
):
    return service.create_history(history_data)


@router.get("/{history_id}", response_model=HistoryResponse)
async def get_history(
    history_id: str,
    _: AdminResponse = Depends(require_section("history")),
    service: HistoryService = Depends(get_history_service)
):
    return service.get_history(history_id)


@router.put("/{history_id}", response_model=HistoryResponse)
async def update_history(
    history_id: str,
    history_data: HistoryUpdate,
    _: AdminResponse = Depends(require_section("history")),
    service: HistoryService = Depends(get_history_service)
):
    return service.update_history(history_id, history_data)


@router.delete("/{history_id}", status_code=204)
async def delete_history(
    history_id: str,
    _: AdminResponse = Depends(require_section("history")),
    service: HistoryService = Depends(get_history_service)
):
    service.delete_history(history_id)
    return None
