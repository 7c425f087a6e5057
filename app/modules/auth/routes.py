from fastapi import APIRouter, Depends, Request, Response
from app.config import settings
from app.config.permissions_config import ADMIN, ROLE_SECTIONS
from app.core.dependencies import get_auth_service, get_current_admin
from app.core.rate_limit import limiter
from app.database.supabase_client import get_access_token
from app.modules.admins.schemas import AdminResponse
from app.modules.auth.schemas import (
    LoginRequest, TokenResponse, PasswordChangeRequest, PasswordResetRequest
)
from app.modules.auth.service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """Login, set the session cookie and return the access token"""
    token = service.login(login_data)
    response.set_cookie(
        settings.session_cookie_name,
        token.access_token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    return token


@router.post("/logout", status_code=200)
async def logout(
    request: Request,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """Logout: revoke the session and clear the cookie"""
    service.logout(get_access_token(request))
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out successfully"}


@router.get("/me")
async def get_me(admin: AdminResponse = Depends(get_current_admin)):
    """Current admin and the dashboard sections their role may manage (for the sidebar)."""
    sections = sorted(ROLE_SECTIONS.get(admin.role or ADMIN, set()))
    return {**admin.model_dump(mode="json"), "sections": sections}


@router.post("/password", status_code=200)
async def change_password(
    password_data: PasswordChangeRequest,
    admin: AdminResponse = Depends(get_current_admin),
    service: AuthService = Depends(get_auth_service)
):
    """Change the caller's password (allowed while a password change is required)"""
    service.change_password(admin.id, password_data.new_password)
    return {"message": "Password changed successfully"}


@router.post("/password-reset", status_code=200)
@limiter.limit(settings.password_reset_rate_limit)
async def request_password_reset(
    request: Request,
    reset_data: PasswordResetRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Email a temporary password to a registered admin"""
    service.request_password_reset(reset_data.email)
    return {"message": "Temporary password sent"}
