"""
Core dependencies for admin route protection and role checking
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from supabase import Client

from app.config.permissions_config import ADMIN, role_can_access
from app.core.email import EmailService, get_email_service
from app.core.exceptions import AuthError, ForbiddenError
from app.core.repository import run_query
from app.database.supabase_client import get_access_token, get_service_supabase, get_supabase
from app.modules.admins.schemas import AdminResponse
from app.modules.auth.service import AuthService
from app.modules.system.schemas import SystemSettingsResponse
from app.modules.system.service import SystemSettingsService

logger = logging.getLogger(__name__)


def _get_request_cache(request: Request) -> Dict[str, Any]:
    """Return request-scoped cache for access data (admin row, system settings)."""
    if not hasattr(request.state, "access_cache"):
        request.state.access_cache = {}
    return request.state.access_cache


def get_auth_service(
    supabase: Client = Depends(get_supabase),
    admin_client: Client = Depends(get_service_supabase),
    email_service: EmailService = Depends(get_email_service),
) -> AuthService:
    return AuthService(supabase, admin_client, email_service)


def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service)
) -> dict:
    """Resolve the caller from the session cookie or bearer token"""
    token = get_access_token(request)
    if not token:
        raise AuthError("Not authenticated")
    return auth_service.get_current_user(token)


def get_admin_record(user_id: str, admin_client: Client, cache: Optional[Dict[str, Any]] = None) -> Optional[AdminResponse]:
    """Return the admins row for user_id. Uses request-scoped cache when provided."""
    if cache is not None and "admin" in cache:
        return cache["admin"]
    query = admin_client.table("admins")\
        .select("*")\
        .eq("id", user_id)\
        .limit(1)
    result = run_query(query, "admins", "get")
    admin = AdminResponse(**result.data[0]) if result.data else None
    if cache is not None:
        cache["admin"] = admin
    return admin


def get_system_settings(admin_client: Client, cache: Optional[Dict[str, Any]] = None) -> SystemSettingsResponse:
    if cache is not None and "system_settings" in cache:
        return cache["system_settings"]
    system_settings = SystemSettingsService(admin_client).get_settings()
    if cache is not None:
        cache["system_settings"] = system_settings
    return system_settings


def password_change_required(admin: AdminResponse, system_settings: SystemSettingsResponse, now: Optional[datetime] = None) -> bool:
    """Explicit must_change_password flag, or an expired password while expiration is enabled"""
    if admin.must_change_password:
        return True
    if system_settings.password_expiration_enabled and admin.password_changed_at:
        now = now or datetime.now(timezone.utc)
        changed_at = admin.password_changed_at
        if changed_at.tzinfo is None:
            changed_at = changed_at.replace(tzinfo=timezone.utc)
        days_since_change = (now - changed_at).total_seconds() / 86400
        return days_since_change >= system_settings.password_expiration_days
    return False


def get_current_admin(
    request: Request,
    user_data: dict = Depends(get_current_user),
    admin_client: Client = Depends(get_service_supabase)
) -> AdminResponse:
    """Authenticated caller with an admins row. Does not enforce the password policy."""
    admin = get_admin_record(user_data["id"], admin_client, _get_request_cache(request))
    if admin is None:
        raise ForbiddenError("Not an administrator")
    return admin


def require_active_admin(
    request: Request,
    admin: AdminResponse = Depends(get_current_admin),
    admin_client: Client = Depends(get_service_supabase)
) -> AdminResponse:
    """Admin whose password is current; everyone else may only change their password."""
    system_settings = get_system_settings(admin_client, _get_request_cache(request))
    if password_change_required(admin, system_settings):
        raise ForbiddenError("Password change required")
    return admin


def require_section(section: str):
    """Factory function to create a role check dependency for one dashboard section"""
    def check_section(admin: AdminResponse = Depends(require_active_admin)) -> AdminResponse:
        role = admin.role or ADMIN
        if not role_can_access(role, section):
            raise ForbiddenError(f"Role '{role}' cannot manage {section}")
        return admin
    return check_section
