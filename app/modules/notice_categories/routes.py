from fastapi import APIRouter, Depends
from app.core.dependencies import require_section
from app.database.supabase_client import get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.notice_categories.schemas import (
    NoticeCategoryCreate, NoticeCategoryUpdate, NoticeCategoryReorder, NoticeCategoryResponse
)
from app.modules.notice_categories.service import NoticeCategoryService
from supabase import Client
from typing import List

router = APIRouter(prefix="/notice-categories", tags=["notice-categories"])


def get_notice_category_service(supabase: Client = Depends(get_supabase)) -> NoticeCategoryService:
    return NoticeCategoryService(supabase)


@router.get("", response_model=List[NoticeCategoryResponse])
async def list_categories(
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeCategoryService = Depends(get_notice_category_service)
):
    """List categories in display order with their post counts"""
    return service.list_categories()


@router.post("", response_model=NoticeCategoryResponse, status_code=201)
async def create_category(
    category_data: NoticeCategoryCreate,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeCategoryService = Depends(get_notice_category_service)
):
    return service.create_category(category_data)


@router.put("/order", response_model=List[NoticeCategoryResponse])
async def reorder_categories(
    reorder: NoticeCategoryReorder,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeCategoryService = Depends(get_notice_category_service)
):
    return service.reorder_categories(reorder.items)


@router.put("/{category_id}", response_model=NoticeCategoryResponse)
async def update_category(
    category_id: str,
    category_data: NoticeCategoryUpdate,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeCategoryService = Depends(get_notice_category_service)
):
    return service.update_category(category_id, category_data)


@router.delete("/{category_id}", status_code=204)
async def delete_category(
    category_id: str,
    _: AdminResponse = Depends(require_section("notices")),
    service: NoticeCategoryService = Depends(get_notice_category_service)
):
    """Delete a category no notice uses (409 otherwise)"""
    service.delete_category(category_id)
    return None
