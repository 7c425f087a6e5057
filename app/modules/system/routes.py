from fastapi import APIRouter, Depends
from app.config.permissions_config import get_role_matrix
from app.core.dependencies import require_section
from app.database.supabase_client import get_service_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.system.schemas import PasswordExpirationUpdate, SystemSettingsResponse
from app.modules.system.service import SystemSettingsService
from supabase import Client

router = APIRouter(prefix="/system", tags=["system"])


def get_system_service(admin_client: Client = Depends(get_service_supabase)) -> SystemSettingsService:
    return SystemSettingsService(admin_client)


@router.get("", response_model=SystemSettingsResponse)
async def get_system_settings(
    _: AdminResponse = Depends(require_section("system")),
    service: SystemSettingsService = Depends(get_system_service)
):
    return service.get_settings()


@router.put("/password-expiration", response_model=SystemSettingsResponse)
async def set_password_expiration(
    data: PasswordExpirationUpdate,
    _: AdminResponse = Depends(require_section("system")),
    service: SystemSettingsService = Depends(get_system_service)
):
    """Enable/disable forced password change after password_expiration_days"""
    return service.set_password_expiration(data)


@router.get("/roles")
async def get_roles(_: AdminResponse = Depends(require_section("system"))):
    """Roles and the dashboard sections each may manage"""
    return get_role_matrix()
