from datetime import datetime, timezone

from supabase import Client

from app.core.repository import SingletonRepository
from app.modules.system.schemas import PasswordExpirationUpdate, SystemSettingsResponse


class SystemSettingsService:
    def __init__(self, supabase: Client):
        self.settings = SingletonRepository(supabase, "system_settings", SystemSettingsResponse)

    def get_settings(self) -> SystemSettingsResponse:
        """Stored settings, or the defaults when the row has not been seeded"""
        return self.settings.get() or SystemSettingsResponse()

    def set_password_expiration(self, data: PasswordExpirationUpdate) -> SystemSettingsResponse:
        fields = {
            "password_expiration_enabled": data.enabled,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        if data.days is not None:
            fields["password_expiration_days"] = data.days
        return self.settings.save(fields)
