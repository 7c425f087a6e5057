import logging
from typing import List

from supabase import Client

from app.core.exceptions import ConflictError, NotFoundError, PersistenceError
from app.core.repository import SupabaseRepository
from app.modules.admins.schemas import AdminCreate, AdminCreatedResponse, AdminResponse, AdminUpdate
from app.modules.auth.service import clear_auth_cache, generate_temp_password

logger = logging.getLogger(__name__)


class AdminService:
    """Admin accounts: a Supabase Auth user plus its admins row (service role client)."""

    def __init__(self, admin_client: Client):
        self.admin_client = admin_client
        self.admins = SupabaseRepository(admin_client, "admins", AdminResponse)

    def list_admins(self) -> List[AdminResponse]:
        return self.admins.list()

    def get_admin(self, admin_id: str) -> AdminResponse:
        return self.admins.get(admin_id)

    def create_admin(self, admin_data: AdminCreate) -> AdminCreatedResponse:
        """Create a confirmed auth user with a temporary password, then its admins row"""
        temp_password = generate_temp_password()
        try:
            auth_response = self.admin_client.auth.admin.create_user({
                "email": admin_data.email,
                "password": temp_password,
                "email_confirm": True,
                "user_metadata": {"name": admin_data.name},
            })
        except Exception as e:
            message = str(e)
            logger.error("Error creating auth user %s: %s", admin_data.email, message)
            if "already" in message.lower():
                raise ConflictError("A user with this email already exists")
            raise PersistenceError(f"Failed to create admin user: {message}")

        user_id = auth_response.user.id
        try:
            admin = self.admins.create({
                "id": user_id,
                "email": admin_data.email,
                "name": admin_data.name,
                "role": admin_data.role,
                "must_change_password": True,
            })
        except (PersistenceError, ConflictError):
            # Keep auth users and admins rows 1:1
            try:
                self.admin_client.auth.admin.delete_user(user_id)
            except Exception as e:
                logger.error("Rollback of auth user %s failed: %s", user_id, e)
            raise

        logger.info("Admin created: %s (%s)", admin_data.email, admin_data.role)
        return AdminCreatedResponse(admin=admin, temp_password=temp_password)

    def update_admin(self, admin_id: str, admin_data: AdminUpdate) -> AdminResponse:
        update_data = admin_data.model_dump(exclude_none=True)
        if not update_data:
            return self.admins.get(admin_id)
        admin = self.admins.update(admin_id, update_data)
        clear_auth_cache()
        return admin

    def delete_admin(self, admin_id: str) -> bool:
        """Delete the auth user, then the admins row (may already be gone by cascade)"""
        try:
            self.admin_client.auth.admin.delete_user(admin_id)
        except Exception as e:
            message = str(e)
            logger.error("Error deleting auth user %s: %s", admin_id, message)
            if "not found" in message.lower():
                raise NotFoundError("Admin not found")
            raise PersistenceError(f"Failed to delete admin user: {message}")

        try:
            self.admins.delete(admin_id)
        except PersistenceError as e:
            logger.warning("Error deleting admin record %s (might be removed by cascade): %s", admin_id, e)
        return True
