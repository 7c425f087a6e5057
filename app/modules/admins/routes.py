from fastapi import APIRouter, Depends
from app.core.dependencies import require_section
from app.database.supabase_client import get_service_supabase
from app.modules.admins.schemas import (
    AdminCreate, AdminUpdate, AdminResponse, AdminCreatedResponse
)
from app.modules.admins.service import AdminService
from supabase import Client
from typing import List

router = APIRouter(prefix="/admins", tags=["admins"])


def get_admin_service(admin_client: Client = Depends(get_service_supabase)) -> AdminService:
    return AdminService(admin_client)


@router.get("", response_model=List[AdminResponse])
async def list_admins(
    _: AdminResponse = Depends(require_section("admins")),
    service: AdminService = Depends(get_admin_service)
):
    """List admin accounts (super_admin only)"""
    return service.list_admins()


@router.post("", response_model=AdminCreatedResponse, status_code=201)
async def create_admin(
    admin_data: AdminCreate,
    _: AdminResponse = Depends(require_section("admins")),
    service: AdminService = Depends(get_admin_service)
):
    """Create an admin account; the temporary password is returned once"""
    return service.create_admin(admin_data)


@router.get("/{admin_id}", response_model=AdminResponse)
async def get_admin(
    admin_id: str,
    _: AdminResponse = Depends(require_section("admins")),
    service: AdminService = Depends(get_admin_service)
):
    return service.get_admin(admin_id)


@router.put("/{admin_id}", response_model=AdminResponse)
async def update_admin(
    admin_id: str,
    admin_data: AdminUpdate,
    _: AdminResponse = Depends(require_section("admins")),
    service: AdminService = Depends(get_admin_service)
):
    """Update admin name/role"""
    return service.update_admin(admin_id, admin_data)


@router.delete("/{admin_id}", status_code=204)
async def delete_admin(
    admin_id: str,
    _: AdminResponse = Depends(require_section("admins")),
    service: AdminService = Depends(get_admin_service)
):
    """Delete the admin's auth user and admins row"""
    service.delete_admin(admin_id)
    return None
