import hashlib
import logging
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from supabase import Client

from app.config.settings import settings
from app.core.email import EmailService
from app.core.exceptions import AuthError, EmailDeliveryError, NotFoundError, PersistenceError
from app.core.repository import SupabaseRepository, run_query
from app.modules.admins.schemas import AdminResponse
from app.modules.auth.schemas import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. many parallel requests with same token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500

TEMP_PASSWORD_LENGTH = 12
TEMP_PASSWORD_CHARSET = string.ascii_letters + string.digits + "!@#$%^&*"


def generate_temp_password(length: int = TEMP_PASSWORD_LENGTH) -> str:
    return "".join(secrets.choice(TEMP_PASSWORD_CHARSET) for _ in range(length))


def _cache_key(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def clear_auth_cache():
    _AUTH_USER_CACHE.clear()


class AuthService:
    def __init__(self, supabase: Client, admin_client: Client, email_service: Optional[EmailService] = None):
        self.supabase = supabase
        self.admin_client = admin_client
        self.email_service = email_service or EmailService()
        self.admins = SupabaseRepository(admin_client, "admins", AdminResponse)

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate an admin using Supabase Auth"""
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": login_data.email,
                "password": login_data.password
            })
        except Exception as e:
            logger.info("Login failed for %s: %s", login_data.email, e)
            raise AuthError("Invalid email or password")

        if not auth_response.user or not auth_response.session:
            raise AuthError("Invalid email or password")

        admin = self.admins.find(auth_response.user.id)
        return TokenResponse(
            access_token=auth_response.session.access_token,
            token_type="bearer",
            user_id=auth_response.user.id,
            email=auth_response.user.email or login_data.email,
            must_change_password=bool(admin and admin.get("must_change_password")),
        )

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Get current user details from Supabase Auth token. Uses short TTL cache to reduce auth API calls."""
        cache_key = _cache_key(token)
        now = time.monotonic()
        if cache_key in _AUTH_USER_CACHE:
            user_data, expiry = _AUTH_USER_CACHE[cache_key]
            if now < expiry:
                return user_data
            del _AUTH_USER_CACHE[cache_key]
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.debug("Token rejected by Supabase Auth: %s", e)
            raise AuthError("Invalid or expired token")
        if not user_response or not user_response.user:
            raise AuthError("Invalid or expired token")
        user = user_response.user
        user_data = {
            "id": user.id,
            "email": user.email,
            "user_metadata": user.user_metadata or {},
            "app_metadata": user.app_metadata or {},
        }
        if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
            _AUTH_USER_CACHE[cache_key] = (user_data, now + _AUTH_CACHE_TTL_SEC)
        return user_data

    def logout(self, token: Optional[str]) -> bool:
        """Revoke the session server-side; the cookie is cleared by the route."""
        if not token:
            return False
        _AUTH_USER_CACHE.pop(_cache_key(token), None)
        try:
            self.admin_client.auth.admin.sign_out(token)
            return True
        except Exception as e:
            logger.warning("Supabase sign-out failed: %s", e)
            return False

    def change_password(self, user_id: str, new_password: str) -> bool:
        """Set the caller's password and clear the forced-change flag"""
        try:
            response = self.admin_client.auth.admin.update_user_by_id(user_id, {"password": new_password})
        except Exception as e:
            logger.error("Password update failed for %s: %s", user_id, e)
            raise PersistenceError(f"Failed to change password: {e}")
        if not response or not response.user:
            raise NotFoundError("User not found")

        self.admins.update(user_id, {
            "must_change_password": False,
            "password_changed_at": datetime.now(timezone.utc).isoformat(),
        })
        clear_auth_cache()
        return True

    def request_password_reset(self, email: str) -> bool:
        """Issue a temporary password to a registered admin and email it"""
        query = self.admin_client.table("admins").select("id, email, name").eq("email", email).limit(1)
        result = run_query(query, "admins", "get")
        if not result.data:
            raise NotFoundError("Not a registered admin email")
        admin = result.data[0]

        temp_password = generate_temp_password()
        try:
            self.admin_client.auth.admin.update_user_by_id(admin["id"], {"password": temp_password})
        except Exception as e:
            logger.error("Temporary password update failed for %s: %s", admin["id"], e)
            raise PersistenceError("Failed to reset password")

        try:
            self.admins.update(admin["id"], {"must_change_password": True})
        except (PersistenceError, NotFoundError) as e:
            # Password already changed; the forced change prompt is only skipped
            logger.error("Could not flag %s for password change: %s", admin["id"], e)

        sent = self.email_service.send_email(
            [email],
            subject="[Admin] Temporary password issued",
            body=(
                "A temporary password was issued for your admin account.\n\n"
                f"Temporary password: {temp_password}\n\n"
                f"Sign in at {settings.app_url}/admin/login and choose a new password.\n"
                "If you did not request this, contact another administrator."
            ),
            html_body=(
                "<h2>Temporary password issued</h2>"
                f"<p>Temporary password: <strong><code>{temp_password}</code></strong></p>"
                f"<p><a href=\"{settings.app_url}/admin/login\">Sign in</a> and choose a new password.</p>"
            ),
            from_address=settings.mail_admin_from or settings.mail_from,
        )
        if not sent:
            raise EmailDeliveryError("Failed to send the temporary password email")
        return True
